"""
Constants Package

Static lookup tables shared by the services: units, plural exceptions,
synonyms, and input validation whitelists.
"""

from .units import (
    VOLUME,
    WEIGHT,
    COUNT,
    UNIT_FAMILIES,
    STANDARD_UNITS,
    UNIT_OPTIONS,
    VOLUME_TO_TSP,
    WEIGHT_TO_OZ,
    COUNT_UNITS,
    BASE_UNITS,
    BEST_UNIT_STEPS,
)
from .ingredients import IRREGULAR_PLURALS
from .synonyms import INGREDIENT_SYNONYMS
from .validation import VALID_UNITS, DEFAULT_UNIT, DEFAULT_QUANTITY, MAX_LENGTHS

__all__ = [
    'VOLUME',
    'WEIGHT',
    'COUNT',
    'UNIT_FAMILIES',
    'STANDARD_UNITS',
    'UNIT_OPTIONS',
    'VOLUME_TO_TSP',
    'WEIGHT_TO_OZ',
    'COUNT_UNITS',
    'BASE_UNITS',
    'BEST_UNIT_STEPS',
    'IRREGULAR_PLURALS',
    'INGREDIENT_SYNONYMS',
    'VALID_UNITS',
    'DEFAULT_UNIT',
    'DEFAULT_QUANTITY',
    'MAX_LENGTHS',
]
