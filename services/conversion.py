"""
Unit Conversion Service

Unit family lookup, conversion to and from each family's base unit, and
picking the most readable unit for a consolidated amount.
"""

from decimal import Decimal, ROUND_HALF_UP

from constants import (
    VOLUME, WEIGHT, COUNT,
    VOLUME_TO_TSP, WEIGHT_TO_OZ, COUNT_UNITS, BEST_UNIT_STEPS,
)


class UnknownUnitError(ValueError):
    """Raised when a stored unit is not one of the standard units."""

    def __init__(self, unit):
        super().__init__(f'Unknown unit: {unit!r}')
        self.unit = unit


def round_quantity(value, places=2):
    """Round to `places` decimals, halves away from zero (2.345 -> 2.35)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def unit_family(unit):
    """Return 'volume', 'weight' or 'count' for a standard unit."""
    if unit in VOLUME_TO_TSP:
        return VOLUME
    if unit in WEIGHT_TO_OZ:
        return WEIGHT
    if unit in COUNT_UNITS:
        return COUNT
    raise UnknownUnitError(unit)


def to_base(quantity, unit):
    """
    Convert a quantity to its family's base unit (tsp or oz).

    Count units have no base unit; their quantity is returned unchanged.
    """
    family = unit_family(unit)
    if family == VOLUME:
        return quantity * VOLUME_TO_TSP[unit]
    if family == WEIGHT:
        return quantity * WEIGHT_TO_OZ[unit]
    return quantity


def from_base(base_amount, family):
    """
    Express a base-unit amount in the largest unit it fills at least once.

    Volume: cup from 48 tsp, tbsp from 3 tsp, otherwise tsp.
    Weight: lb from 16 oz, otherwise oz.

    Returns (amount, unit) with the amount rounded to 2 decimals.
    """
    if family not in BEST_UNIT_STEPS:
        raise ValueError(f'{family!r} units are not converted')

    steps = BEST_UNIT_STEPS[family]
    for unit, size in steps:
        if base_amount >= size:
            return round_quantity(base_amount / size), unit

    # Less than one of the smallest unit
    unit, size = steps[-1]
    return round_quantity(base_amount / size), unit

