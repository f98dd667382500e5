"""
Shopping List Service

Consolidates the ingredients of several recipes into one shopping list.
"""

import logging
import math
import unicodedata
from dataclasses import dataclass, field, asdict

from constants import VOLUME, WEIGHT, COUNT, UNIT_FAMILIES
from .conversion import unit_family, to_base, from_base, round_quantity

logger = logging.getLogger(__name__)


class InvalidShoppingItemError(ValueError):
    """Raised when a shopping list item posted by a client is malformed."""
    pass


@dataclass(frozen=True)
class IngredientRef:
    """Ingredient as sent back by a client (no database row)."""
    display_name: str
    canonical_name: str = ''
    id: str = None
    slug: str = None
    image: str = None

    def to_dict(self):
        return asdict(self)


@dataclass
class ConsolidatedIngredient:
    """One shopping list line. Not stored; rebuilt on every consolidation."""
    ingredient: object
    total_quantity: float
    unit: str
    from_recipes: list
    already_have: bool = False
    note: str = None

    @property
    def display_name(self):
        return self.ingredient.display_name

    def to_dict(self):
        return {
            'ingredient': self.ingredient.to_dict(),
            'total_quantity': self.total_quantity,
            'unit': self.unit,
            'from_recipes': list(self.from_recipes),
            'already_have': self.already_have,
            'note': self.note,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild an item posted back by a client, e.g. for export.

        Raises:
            InvalidShoppingItemError: the item is not an object, its
                quantity is not a finite number, or from_recipes is not a list.
        """
        if not isinstance(data, dict):
            raise InvalidShoppingItemError('Shopping item must be an object')

        ing = data.get('ingredient') or {}
        if not isinstance(ing, dict):
            raise InvalidShoppingItemError('Shopping item ingredient must be an object')

        raw_quantity = data.get('total_quantity')
        try:
            total_quantity = float(raw_quantity or 0)
        except (ValueError, TypeError):
            raise InvalidShoppingItemError(f'Invalid quantity: {raw_quantity!r}')
        if not math.isfinite(total_quantity):
            raise InvalidShoppingItemError(f'Invalid quantity: {raw_quantity!r}')

        from_recipes = data.get('from_recipes') or []
        if not isinstance(from_recipes, list):
            raise InvalidShoppingItemError('from_recipes must be a list of recipe names')

        return cls(
            ingredient=IngredientRef(
                display_name=str(ing.get('display_name') or ''),
                canonical_name=str(ing.get('canonical_name') or ''),
                id=ing.get('id'),
                slug=ing.get('slug'),
                image=ing.get('image'),
            ),
            total_quantity=total_quantity,
            unit=str(data.get('unit') or ''),
            from_recipes=[str(name) for name in from_recipes],
            already_have=bool(data.get('already_have')),
            note=data.get('note') or None,
        )


@dataclass(frozen=True)
class _Occurrence:
    quantity: float
    unit: str
    recipe_name: str


@dataclass
class _IngredientGroup:
    """Every use of one ingredient + note across the selected recipes."""
    ingredient: object
    note: str
    occurrences: list = field(default_factory=list)


def sort_key(name):
    """Accent- and case-insensitive key, so "Éclair" sorts with the e's."""
    decomposed = unicodedata.normalize('NFKD', name)
    return ''.join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def grouping_key(recipe_ingredient):
    """Canonical name plus note, so "Onion (Red)" and "Onion (White)" stay apart."""
    return f"{recipe_ingredient.ingredient.canonical_name}:{recipe_ingredient.note or ''}"


def _unique(names):
    return list(dict.fromkeys(names))


def _group_ingredients(recipes):
    groups = {}
    for recipe in recipes:
        for ri in recipe.ingredients:
            key = grouping_key(ri)
            if key not in groups:
                groups[key] = _IngredientGroup(ingredient=ri.ingredient, note=ri.note or None)
            groups[key].occurrences.append(_Occurrence(ri.quantity, ri.unit, recipe.name))
    return groups


def _consolidate_group(group):
    """Turn one group into shopping lines: one per convertible family, one per count unit."""
    by_family = {family: [] for family in UNIT_FAMILIES}
    for occ in group.occurrences:
        by_family[unit_family(occ.unit)].append(occ)

    lines = []
    for family in (VOLUME, WEIGHT):
        occurrences = by_family[family]
        if not occurrences:
            continue
        base_total = sum(to_base(o.quantity, o.unit) for o in occurrences)
        amount, unit = from_base(base_total, family)
        lines.append(ConsolidatedIngredient(
            ingredient=group.ingredient,
            total_quantity=amount,
            unit=unit,
            from_recipes=_unique(o.recipe_name for o in occurrences),
            note=group.note,
        ))

    # Count units are never summed across symbols (pieces vs cloves)
    by_unit = {}
    for occ in by_family[COUNT]:
        by_unit.setdefault(occ.unit, []).append(occ)

    for unit, occurrences in by_unit.items():
        lines.append(ConsolidatedIngredient(
            ingredient=group.ingredient,
            total_quantity=round_quantity(sum(o.quantity for o in occurrences)),
            unit=unit,
            from_recipes=_unique(o.recipe_name for o in occurrences),
            note=group.note,
        ))

    return lines


def consolidate_ingredients(recipe_ids, get_recipe):
    """
    Build a consolidated shopping list for the given recipes.

    Args:
        recipe_ids: Recipe IDs to shop for. IDs that don't resolve are skipped.
        get_recipe: Callable returning a recipe (with .name and .ingredients)
            or None for an ID.

    Returns:
        ConsolidatedIngredient list sorted by ingredient display name.

    Raises:
        UnknownUnitError: a stored ingredient has a unit outside the standard set.
    """
    recipe_ids = list(recipe_ids)
    recipes = [r for r in (get_recipe(rid) for rid in recipe_ids) if r is not None]

    groups = _group_ingredients(recipes)

    consolidated = []
    for group in groups.values():
        consolidated.extend(_consolidate_group(group))

    consolidated.sort(key=lambda item: sort_key(item.display_name))

    logger.debug("Consolidated %d recipes (%d requested) into %d items",
                 len(recipes), len(recipe_ids), len(consolidated))
    return consolidated
