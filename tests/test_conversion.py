"""Tests for unit families, base conversion and best-unit selection."""

import pytest

from constants import STANDARD_UNITS, VOLUME, WEIGHT, COUNT
from services.conversion import (
    UnknownUnitError, round_quantity, unit_family, to_base, from_base,
)


def test_every_standard_unit_has_a_family():
    families = {unit: unit_family(unit) for unit in STANDARD_UNITS}
    assert {u for u, f in families.items() if f == VOLUME} == {'tsp', 'tbsp', 'fl oz', 'cup'}
    assert {u for u, f in families.items() if f == WEIGHT} == {'oz', 'lb', 'g', 'kg'}
    assert {u for u, f in families.items() if f == COUNT} == {'piece', 'clove', 'bunch', 'head'}


def test_unknown_unit_is_a_data_error():
    with pytest.raises(UnknownUnitError):
        unit_family('pinch')
    with pytest.raises(UnknownUnitError):
        to_base(1, 'ml')


def test_to_base_volume_and_weight():
    assert to_base(2, 'tbsp') == 6
    assert to_base(1, 'cup') == 48
    assert to_base(1, 'fl oz') == 6
    assert to_base(2, 'lb') == 32
    assert to_base(1, 'kg') == pytest.approx(35.274)


def test_to_base_count_passes_through():
    assert to_base(3, 'clove') == 3


def test_best_unit_boundaries():
    """48 tsp is a cup, anything less is tablespoons; 16 oz is a pound."""
    assert from_base(48, VOLUME) == (1.0, 'cup')
    amount, unit = from_base(47.99, VOLUME)
    assert unit == 'tbsp'
    assert amount == pytest.approx(16.0)
    assert from_base(3, VOLUME) == (1.0, 'tbsp')
    assert from_base(2.5, VOLUME) == (2.5, 'tsp')
    assert from_base(16, WEIGHT) == (1.0, 'lb')
    assert from_base(15.5, WEIGHT) == (15.5, 'oz')


def test_small_amounts_stay_in_smallest_unit():
    assert from_base(0.25, VOLUME) == (0.25, 'tsp')
    assert from_base(0.5, WEIGHT) == (0.5, 'oz')


def test_count_family_is_not_converted():
    with pytest.raises(ValueError):
        from_base(3, COUNT)


@pytest.mark.parametrize('quantity, unit', [
    (2, 'tbsp'),
    (1.5, 'cup'),
    (2, 'tsp'),
    (5, 'oz'),
    (2.5, 'lb'),
])
def test_round_trip_in_best_unit(quantity, unit):
    """Converting to base and back returns the same amount when the unit is already best."""
    amount, best = from_base(to_base(quantity, unit), unit_family(unit))
    assert best == unit
    assert amount == pytest.approx(quantity, abs=0.01)


def test_round_half_away_from_zero():
    assert round_quantity(2.345) == 2.35
    assert round_quantity(0.125) == 0.13
    assert round_quantity(-2.345) == -2.35
    assert round_quantity(1.0) == 1.0
