"""Tests for soil and grease scoring.

Soil severity is the worst single soil type present, never a sum.
"""

import pytest

from dishmate.load.scoring import (
    SOIL_SCORES,
    calculate_grease_factor,
    calculate_soil_score,
    has_acidic_risk,
    needs_gentle,
    needs_sanitise,
)
from dishmate.types import GreaseFactor, ItemType, SoilType


def test_empty_soil_defaults_to_light():
    """Test that no soil types scores as light soil."""
    assert calculate_soil_score([]) == 1


@pytest.mark.parametrize("soil", list(SoilType))
def test_single_soil_uses_its_severity(soil):
    """Test that a single soil type scores its own severity."""
    assert calculate_soil_score([soil]) == SOIL_SCORES[soil]


def test_soil_score_is_max_not_sum():
    """Test that one heavy item dominates many light ones."""
    assert calculate_soil_score([SoilType.LIGHT, SoilType.EVERYDAY, SoilType.HEAVY]) == 5
    assert calculate_soil_score([SoilType.EVERYDAY, SoilType.STARCHY, SoilType.ACIDIC]) == 2
    assert calculate_soil_score([SoilType.PROTEIN, SoilType.LIGHT]) == 3


def test_soil_score_stays_in_range_for_all_soils():
    """Test that scoring every soil at once stays within 1-5."""
    score = calculate_soil_score(list(SoilType))

    assert 1 <= score <= 5
    assert score == 5


def test_soil_score_accepts_plain_strings():
    """Test that caller strings are coerced to soil types."""
    assert calculate_soil_score(["protein", "light"]) == 3


def test_unknown_soil_string_is_rejected():
    """Test that a soil type outside the enum fails loudly."""
    with pytest.raises(ValueError):
        calculate_soil_score(["mud"])


@pytest.mark.parametrize(
    "soil_types",
    [
        [SoilType.GREASY],
        [SoilType.GREASY, SoilType.PROTEIN],
        [SoilType.LIGHT, SoilType.GREASY, SoilType.HEAVY],
    ],
)
def test_greasy_always_means_high_grease(soil_types):
    """Test that greasy soil gives a high grease factor regardless of the rest."""
    assert calculate_grease_factor(soil_types) == GreaseFactor.HIGH


def test_protein_without_grease_is_medium():
    """Test that protein alone gives a medium grease factor."""
    assert calculate_grease_factor([SoilType.PROTEIN, SoilType.STARCHY]) == GreaseFactor.MEDIUM


def test_no_grease_or_protein_is_low():
    """Test that other soils and no soil give a low grease factor."""
    assert calculate_grease_factor([SoilType.HEAVY, SoilType.ACIDIC]) == GreaseFactor.LOW
    assert calculate_grease_factor([]) == GreaseFactor.LOW


def test_item_flags():
    """Test baby, delicate and acidic detection."""
    assert needs_sanitise([ItemType.PLATES, ItemType.BABY_ITEMS])
    assert not needs_sanitise([ItemType.PLATES])
    assert needs_gentle(["delicate"])
    assert not needs_gentle([])
    assert has_acidic_risk([SoilType.ACIDIC])
    assert not has_acidic_risk([SoilType.GREASY])
