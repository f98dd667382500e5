"""
Ingredient Constants

Contains the irregular plural table used when building canonical
ingredient names.
"""

# Plurals the suffix rules get wrong (exact whole-name match)
IRREGULAR_PLURALS = {
    'potatoes': 'potato',
    'tomatoes': 'tomato',
    'leaves': 'leaf',
    'halves': 'half',
    'loaves': 'loaf',
}
