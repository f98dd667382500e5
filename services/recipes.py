"""
Recipe Storage Service

Recipe and ingredient CRUD on top of the SQLAlchemy models. Ingredients
are resolved to one row per canonical name when a recipe is saved.
"""

import logging
import math

from constants import VALID_UNITS, DEFAULT_UNIT, DEFAULT_QUANTITY, MAX_LENGTHS
from models import db, Ingredient, Recipe, RecipeStep, RecipeIngredient
from models.recipe import utcnow
from utils.sanitizer import (
    sanitize_text, sanitize_recipe_name, sanitize_ingredient_name,
    sanitize_note, sanitize_instructions,
)
from .normalize import normalize_ingredient_name

logger = logging.getLogger(__name__)


class RecipeValidationError(ValueError):
    """Raised when recipe input can't be saved as given."""
    pass


def get_or_create_ingredient(display_name, slug=None):
    """
    Return the ingredient for this name, creating it on first use.

    When a catalog slug is supplied, an existing ingredient takes the new
    slug and display name.
    """
    canonical_name = normalize_ingredient_name(display_name)

    ingredient = Ingredient.query.filter_by(canonical_name=canonical_name).first()
    if ingredient:
        if slug:
            ingredient.slug = slug
            ingredient.display_name = display_name
        return ingredient

    ingredient = Ingredient(canonical_name=canonical_name, display_name=display_name, slug=slug or None)
    db.session.add(ingredient)
    logger.info("Created ingredient '%s' (%s)", display_name, canonical_name)
    return ingredient


def _parse_quantity(value):
    if value is None or value == '':
        return DEFAULT_QUANTITY
    try:
        quantity = float(value)
    except (ValueError, TypeError):
        raise RecipeValidationError(f'Invalid quantity: {value!r}')
    if not math.isfinite(quantity) or quantity <= 0:
        raise RecipeValidationError(f'Quantity must be a positive number: {value!r}')
    return quantity


def _parse_ingredients(items):
    """
    Validate ingredient input before anything is written.

    Items without an ingredient display name are skipped.
    """
    parsed = []
    for item in items or []:
        ing = item.get('ingredient') or {}
        display_name = sanitize_ingredient_name(ing.get('display_name'))
        if not display_name:
            continue

        unit = item.get('unit') or DEFAULT_UNIT
        if unit not in VALID_UNITS:
            raise RecipeValidationError(f'Invalid unit: {unit!r}')

        parsed.append({
            'display_name': display_name,
            'slug': sanitize_text(ing.get('slug'), max_length=MAX_LENGTHS['slug']) or None,
            'quantity': _parse_quantity(item.get('quantity')),
            'unit': unit,
            'note': sanitize_note(item.get('note')),
        })
    return parsed


def _parse_steps(steps):
    """Step contents in order, blanks dropped. Accepts dicts or plain strings."""
    contents = []
    for step in steps or []:
        content = step.get('content') if isinstance(step, dict) else step
        content = sanitize_instructions(content, max_length=MAX_LENGTHS['step_content'])
        if content:
            contents.append(content)
    return contents


def _parse_recipe(data):
    name = sanitize_recipe_name(data.get('name'))
    if not name:
        raise RecipeValidationError('Recipe name is required')
    return {
        'name': name,
        'instructions': sanitize_instructions(data.get('instructions')) or None,
        'steps': _parse_steps(data['steps']) if data.get('steps') is not None else None,
        'ingredients': _parse_ingredients(data.get('ingredients')),
    }


def _replace_steps(recipe, contents):
    recipe.steps = [
        RecipeStep(step_number=number, content=content)
        for number, content in enumerate(contents, start=1)
    ]


def _replace_ingredients(recipe, parsed):
    recipe.ingredients = []
    for item in parsed:
        ingredient = get_or_create_ingredient(item['display_name'], item['slug'])
        recipe.ingredients.append(RecipeIngredient(
            ingredient=ingredient,
            quantity=item['quantity'],
            unit=item['unit'],
            note=item['note'],
        ))


def get_recipe(recipe_id):
    """Recipe with steps and ingredients, or None."""
    if not recipe_id:
        return None
    return db.session.get(Recipe, str(recipe_id))


def get_all_recipes():
    """All recipes, most recently updated first."""
    return Recipe.query.order_by(Recipe.updated_at.desc()).all()


def create_recipe(data):
    """
    Create a recipe with its steps and ingredients.

    `data` keys: name, instructions, steps, ingredients, and optionally id.
    """
    parsed = _parse_recipe(data)

    recipe_id = data.get('id')
    if recipe_id and get_recipe(recipe_id):
        raise RecipeValidationError(f'Recipe {recipe_id} already exists')

    recipe = Recipe(name=parsed['name'], instructions=parsed['instructions'])
    if recipe_id:
        recipe.id = str(recipe_id)
    db.session.add(recipe)

    if parsed['steps']:
        _replace_steps(recipe, parsed['steps'])
    _replace_ingredients(recipe, parsed['ingredients'])

    db.session.commit()
    logger.info("Created recipe '%s' with %d ingredients", recipe.name, len(recipe.ingredients))
    return recipe


def update_recipe(recipe_id, data):
    """
    Replace a recipe's name, instructions, ingredients and (if given) steps.

    Returns None when the recipe doesn't exist.
    """
    recipe = get_recipe(recipe_id)
    if recipe is None:
        return None

    parsed = _parse_recipe(data)

    recipe.name = parsed['name']
    recipe.instructions = parsed['instructions']
    if parsed['steps'] is not None:
        _replace_steps(recipe, parsed['steps'])
    _replace_ingredients(recipe, parsed['ingredients'])
    recipe.updated_at = utcnow()

    db.session.commit()
    logger.info("Updated recipe '%s'", recipe.name)
    return recipe


def delete_recipe(recipe_id):
    """Delete one recipe. Returns False when it didn't exist."""
    recipe = get_recipe(recipe_id)
    if recipe is None:
        return False
    db.session.delete(recipe)
    db.session.commit()
    return True


def delete_recipes_bulk(recipe_ids):
    """Delete several recipes, returning how many existed."""
    if not recipe_ids:
        return 0
    recipes = Recipe.query.filter(Recipe.id.in_([str(rid) for rid in recipe_ids])).all()
    for recipe in recipes:
        db.session.delete(recipe)
    db.session.commit()
    logger.info("Deleted %d recipes", len(recipes))
    return len(recipes)


def get_all_ingredients():
    return Ingredient.query.order_by(Ingredient.display_name).all()


def search_saved_ingredients(query, limit=10):
    """Saved ingredients whose display name contains the query."""
    query = (query or '').strip()
    if not query:
        return []
    return Ingredient.query.filter(
        Ingredient.display_name.ilike(f'%{query}%')
    ).order_by(Ingredient.display_name).limit(limit).all()


def migrate_instructions_to_steps():
    """
    Split legacy free-text instructions into steps, one per non-blank line.

    Only touches recipes that have instructions and no steps yet.
    Returns the number of recipes migrated.
    """
    recipes = Recipe.query.filter(
        Recipe.instructions.isnot(None),
        Recipe.instructions != '',
        ~Recipe.steps.any(),
    ).all()

    for recipe in recipes:
        lines = [line.strip() for line in recipe.instructions.splitlines()]
        _replace_steps(recipe, [line for line in lines if line])

    if recipes:
        db.session.commit()
        logger.info("Migrated instructions to steps for %d recipes", len(recipes))
    return len(recipes)
