"""
Unit Constants and Conversion Tables

Contains the fixed unit enumeration, unit families, and the conversion
factors used to consolidate ingredient quantities.
"""

# Unit families
VOLUME = 'volume'
WEIGHT = 'weight'
COUNT = 'count'

UNIT_FAMILIES = (VOLUME, WEIGHT, COUNT)

# Every unit a recipe ingredient may be stored in (ordered for pickers)
STANDARD_UNITS = (
    'piece', 'clove', 'bunch', 'head',
    'cup', 'tbsp', 'tsp', 'fl oz',
    'oz', 'lb', 'g', 'kg',
)

# Labels shown next to each unit in the recipe editor
UNIT_OPTIONS = [
    {'value': 'piece', 'label': 'piece(s)'},
    {'value': 'clove', 'label': 'clove(s)'},
    {'value': 'bunch', 'label': 'bunch'},
    {'value': 'head', 'label': 'head'},
    {'value': 'cup', 'label': 'cup'},
    {'value': 'tbsp', 'label': 'tbsp'},
    {'value': 'tsp', 'label': 'tsp'},
    {'value': 'fl oz', 'label': 'fl oz'},
    {'value': 'oz', 'label': 'oz'},
    {'value': 'lb', 'label': 'lb'},
    {'value': 'g', 'label': 'g'},
    {'value': 'kg', 'label': 'kg'},
]

# Volume: base = TSP
VOLUME_TO_TSP = {'tsp': 1, 'tbsp': 3, 'fl oz': 6, 'cup': 48}

# Weight: base = OZ
WEIGHT_TO_OZ = {'oz': 1, 'lb': 16, 'g': 0.035274, 'kg': 35.274}

# Never converted, each symbol is summed on its own
COUNT_UNITS = frozenset({'piece', 'clove', 'bunch', 'head'})

BASE_UNITS = {VOLUME: 'tsp', WEIGHT: 'oz'}

# Display units per family, largest first: (unit, size in base units).
# The first unit the amount reaches at least 1 of wins.
BEST_UNIT_STEPS = {
    VOLUME: (('cup', 48), ('tbsp', 3), ('tsp', 1)),
    WEIGHT: (('lb', 16), ('oz', 1)),
}
