"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient
from .recipe import Recipe, RecipeStep, RecipeIngredient

__all__ = [
    'db',
    'Ingredient',
    'Recipe',
    'RecipeStep',
    'RecipeIngredient',
]
