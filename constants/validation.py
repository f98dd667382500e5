"""
Validation Constants

Contains whitelist values for validating recipe input before it is
written to the database.
"""

from .units import STANDARD_UNITS

# Valid values for the unit field (whitelist)
VALID_UNITS = frozenset(STANDARD_UNITS)

DEFAULT_UNIT = 'piece'
DEFAULT_QUANTITY = 1.0

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
    'note': 200,
    'slug': 200,
    'instructions': 50000,
    'step_content': 5000,
}
