"""
Ingredient Name Normalization

Maps a display name to the canonical name used as the ingredient's
identity in the database.
"""

from constants import IRREGULAR_PLURALS


def normalize_ingredient_name(name):
    """
    Lowercase, trim and singularize an ingredient name.

    Irregular plurals are looked up first; otherwise the first matching
    suffix rule applies:
    - "ies" -> "y" (berries -> berry)
    - "es" dropped when the name is longer than 3 characters
    - a trailing "s" dropped (not "ss") when longer than 2 characters

    This is a heuristic. Words outside the irregular table can come out
    wrong (e.g. "apples" -> "appl"), which is consistent for every
    recipe that uses them, so they still merge.
    """
    normalized = (name or '').lower().strip()

    if normalized in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[normalized]

    if normalized.endswith('ies'):
        return normalized[:-3] + 'y'
    if normalized.endswith('es') and len(normalized) > 3:
        return normalized[:-2]
    if normalized.endswith('s') and not normalized.endswith('ss') and len(normalized) > 2:
        return normalized[:-1]

    return normalized
