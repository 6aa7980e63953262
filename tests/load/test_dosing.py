"""Tests for detergent dosing and dose formatting."""

import pytest

from dishmate.core.numbers import format_number, round_half_up, round_to_half
from dishmate.load.dosing import NO_PREWASH, calculate_dosing, format_dose
from dishmate.types import CycleType, GreaseFactor, LoadQuantity, WaterHardness


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.75, 1.0), (1.125, 1.0), (1.875, 2.0), (2.25, 2.5), (2.2, 2.0), (3.125, 3.0)],
)
def test_round_to_half(value, expected):
    """Test rounding to the nearest half tablespoon, halves rounding up."""
    assert round_to_half(value) == expected


def test_round_half_up():
    """Test that .5 rounds up."""
    assert round_half_up(36.4) == 36
    assert round_half_up(36.5) == 37
    assert round_half_up(72.8) == 73


def test_format_number_drops_trailing_zero():
    """Test integer-valued floats print without a decimal point."""
    assert format_number(2.0) == "2"
    assert format_number(1.5) == "1.5"
    assert format_number(0.5) == "0.5"


def test_format_dose_singular_only_for_exactly_one():
    """Test that "tablespoon" is singular only when the rounded dose is 1."""
    assert format_dose(1.0, is_prewash=True) == "1 tablespoon in the door"
    assert format_dose(0.75, is_prewash=False) == "1 tablespoon in dispenser"
    assert format_dose(0.5, is_prewash=True) == "0.5 tablespoons in the door"
    assert format_dose(2.25, is_prewash=False) == "2.5 tablespoons in dispenser"


def test_quick_cycle_has_no_prewash():
    """Test that quick cycle skips the pre-wash and uses a 1 tbsp base."""
    result = calculate_dosing(1, GreaseFactor.LOW, CycleType.QUICK, LoadQuantity.NORMAL)

    assert result.prewash_dose == NO_PREWASH
    assert result.main_dose == "1 tablespoon in dispenser"


def test_quick_cycle_hard_water_full_load():
    """Test quick main dose adjusted by hard water then quantity (1 x 1.5 x 1.25)."""
    result = calculate_dosing(1, GreaseFactor.LOW, CycleType.QUICK, LoadQuantity.FULL, WaterHardness.HARD)

    assert result.prewash_dose == NO_PREWASH
    assert result.main_dose == "2 tablespoons in dispenser"


def test_prewash_follows_grease_factor():
    """Test pre-wash base doses by grease tier."""
    high = calculate_dosing(4, GreaseFactor.HIGH, CycleType.INTENSIVE, LoadQuantity.NORMAL)
    medium = calculate_dosing(3, GreaseFactor.MEDIUM, CycleType.NORMAL, LoadQuantity.NORMAL)
    low = calculate_dosing(2, GreaseFactor.LOW, CycleType.ECO, LoadQuantity.NORMAL)

    assert high.prewash_dose == "1.5 tablespoons in the door"
    assert medium.prewash_dose == "1 tablespoon in the door"
    assert low.prewash_dose == "0.5 tablespoons in the door"


def test_delicate_cycle_uses_small_prewash():
    """Test that delicate cycle ignores grease for the pre-wash dose."""
    result = calculate_dosing(4, GreaseFactor.HIGH, CycleType.DELICATE, LoadQuantity.NORMAL)

    assert result.prewash_dose == "0.5 tablespoons in the door"
    assert result.main_dose == "2.5 tablespoons in dispenser"


def test_quantity_scales_main_dose_only():
    """Test that a light load reduces the main dose but not the pre-wash."""
    result = calculate_dosing(2, GreaseFactor.LOW, CycleType.ECO, LoadQuantity.LIGHT)

    assert result.prewash_dose == "0.5 tablespoons in the door"
    assert result.main_dose == "1 tablespoon in dispenser"


def test_hard_water_scales_both_doses():
    """Test that hard water adds 50% to both doses."""
    result = calculate_dosing(3, GreaseFactor.MEDIUM, CycleType.NORMAL, LoadQuantity.NORMAL, "hard")

    assert result.prewash_dose == "1.5 tablespoons in the door"
    assert result.main_dose == "3 tablespoons in dispenser"


def test_unknown_water_is_not_adjusted():
    """Test that only hard water changes the dose."""
    unknown = calculate_dosing(3, GreaseFactor.MEDIUM, CycleType.NORMAL, LoadQuantity.NORMAL, "unknown")
    moderate = calculate_dosing(3, GreaseFactor.MEDIUM, CycleType.NORMAL, LoadQuantity.NORMAL)

    assert unknown == moderate
