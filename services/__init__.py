"""
Services Package

Business logic modules for the meal planning application.
"""

from .normalize import normalize_ingredient_name

from .conversion import (
    UnknownUnitError,
    round_quantity,
    unit_family,
    to_base,
    from_base,
)

from .synonyms import SynonymIndex, get_synonym_index

from .matching import calculate_match_score

from .catalog import Catalog, CatalogEntry, load_catalog

from .search import IngredientSearch, approximate_search, search_ingredients

from .shopping import (
    ConsolidatedIngredient,
    InvalidShoppingItemError,
    consolidate_ingredients,
)

__all__ = [
    # Normalization
    'normalize_ingredient_name',
    # Conversion
    'UnknownUnitError',
    'round_quantity',
    'unit_family',
    'to_base',
    'from_base',
    # Synonyms
    'SynonymIndex',
    'get_synonym_index',
    # Matching
    'calculate_match_score',
    # Catalog
    'Catalog',
    'CatalogEntry',
    'load_catalog',
    # Search
    'IngredientSearch',
    'approximate_search',
    'search_ingredients',
    # Shopping
    'ConsolidatedIngredient',
    'InvalidShoppingItemError',
    'consolidate_ingredients',
]
