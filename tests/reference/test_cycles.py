"""Tests for the wash cycle reference."""

import pytest

from dishmate.reference.cycles import (
    DEFAULT_ITEM_SUGGESTION,
    compare_cycles,
    get_all_cycles,
    get_all_educational_content,
    get_cycle_for_item_type,
    get_cycle_for_soil_type,
    get_cycle_info,
    get_enzyme_explanation,
)
from dishmate.types import CycleType, ItemType, SoilType


def test_every_cycle_is_described():
    """Test that all six cycles have reference info, in enum order."""
    assert [info.cycle for info in get_all_cycles()] == list(CycleType)


def test_cycle_lookup():
    """Test lookup by enum and by string, and an unknown cycle."""
    assert get_cycle_info(CycleType.ECO).enzyme_friendly
    assert not get_cycle_info("quick").enzyme_friendly
    assert get_cycle_info("turbo") is None


@pytest.mark.parametrize(
    ("cycle1", "cycle2", "expected"),
    [
        (CycleType.QUICK, CycleType.ECO, CycleType.ECO),
        (CycleType.ECO, CycleType.QUICK, CycleType.ECO),
        (CycleType.QUICK, CycleType.NORMAL, CycleType.NORMAL),
        (CycleType.NORMAL, CycleType.ECO, CycleType.ECO),
        (CycleType.INTENSIVE, CycleType.NORMAL, CycleType.NORMAL),
        (CycleType.DELICATE, CycleType.NORMAL, CycleType.NORMAL),
    ],
)
def test_fixed_pair_verdicts(cycle1, cycle2, expected):
    """Test that known pairs get the same verdict in either order."""
    assert compare_cycles(cycle1, cycle2).recommendation == expected


def test_other_pairs_prefer_lower_energy():
    """Test the energy fallback for pairs without a fixed verdict."""
    comparison = compare_cycles(CycleType.INTENSIVE, CycleType.ECO)

    assert comparison.recommendation == CycleType.ECO
    assert comparison.reason.startswith("Eco")
    assert comparison.cycle1.cycle == CycleType.INTENSIVE


def test_energy_ties_go_to_first_cycle():
    """Test that equal energy use picks the first argument."""
    assert compare_cycles("quick", "delicate").recommendation == CycleType.QUICK
    assert compare_cycles("sanitise", "intensive").recommendation == CycleType.SANITISE


def test_suggestion_by_soil_type():
    """Test cycle suggestions by soil type."""
    assert get_cycle_for_soil_type(SoilType.HEAVY).cycle == CycleType.INTENSIVE
    assert get_cycle_for_soil_type("protein").cycle == CycleType.ECO
    assert get_cycle_for_soil_type(SoilType.GREASY).cycle == CycleType.NORMAL


def test_suggestion_by_item_type():
    """Test cycle suggestions by item type, with a default for everyday items."""
    assert get_cycle_for_item_type(ItemType.BABY_ITEMS).cycle == CycleType.SANITISE
    assert get_cycle_for_item_type("pans").cycle == CycleType.INTENSIVE
    assert get_cycle_for_item_type(ItemType.PLATES) == DEFAULT_ITEM_SUGGESTION


def test_educational_content():
    """Test that the three explainers are available."""
    content = get_all_educational_content()

    assert len(content) == 3
    assert content[0] == get_enzyme_explanation()
    assert all(item.key_takeaway for item in content)
