"""Tests for the load advisor end to end."""

import pytest
from pydantic import ValidationError

from dishmate.load.advisor import (
    FULL_LOAD_TIP,
    ITEM_TIPS,
    POTS_AND_PANS_TIP,
    PRERINSE_ADVICE,
    WARNING_ACIDIC,
    WARNING_FAST_BUT_SOILED,
    WARNING_SOILED_DELICATES,
    generate_reasoning,
    get_load_recommendation,
    get_loading_tips,
    get_prerinse_advice,
)
from dishmate.load.schemas import LoadInput
from dishmate.types import CycleType, GreaseFactor, ItemType, LoadQuantity, SoilType, Urgency


@pytest.fixture
def heavy_cookware_load() -> LoadInput:
    """Full load of pots, pans and bakeware with heavy, greasy and protein soil."""
    return LoadInput(
        items=[ItemType.POTS, ItemType.PANS, ItemType.BAKEWARE],
        soil_types=[SoilType.HEAVY, SoilType.GREASY, SoilType.PROTEIN],
        quantity=LoadQuantity.FULL,
        urgency=Urgency.NEED_TODAY,
    )


def test_light_glasses_in_a_hurry_get_quick_cycle():
    """Test that lightly soiled glasses needed fast get quick with no pre-wash."""
    load = LoadInput(
        items=[ItemType.GLASSES],
        soil_types=[SoilType.LIGHT],
        quantity=LoadQuantity.LIGHT,
        urgency=Urgency.NEED_FAST,
    )

    result = get_load_recommendation(load)

    assert result.cycle == CycleType.QUICK
    assert result.prewash_dose == "None needed"
    assert result.main_dose == "1 tablespoon in dispenser"
    assert result.warnings is None


def test_heavy_cookware_gets_intensive(heavy_cookware_load):
    """Test that heavy greasy cookware gets intensive with a 1.5 tbsp pre-wash."""
    result = get_load_recommendation(heavy_cookware_load)

    assert result.cycle == CycleType.INTENSIVE
    assert "1.5" in result.prewash_dose
    assert result.main_dose == "3 tablespoons in dispenser"
    assert result.prerinse_advice == PRERINSE_ADVICE[SoilType.HEAVY]
    assert result.loading_tips == [POTS_AND_PANS_TIP, ITEM_TIPS[ItemType.BAKEWARE], FULL_LOAD_TIP]
    assert result.warnings is None


def test_need_fast_with_heavy_soil_falls_back_to_normal_with_warning():
    """Test that urgent heavy loads get normal and a warning about quick."""
    load = LoadInput(
        soil_types=[SoilType.HEAVY, SoilType.GREASY],
        quantity=LoadQuantity.NORMAL,
        urgency=Urgency.NEED_FAST,
    )

    result = get_load_recommendation(load)

    assert result.cycle == CycleType.NORMAL
    assert result.warnings is not None
    assert any("quick" in warning.lower() for warning in result.warnings)
    assert result.warnings == [WARNING_FAST_BUT_SOILED]


def test_soiled_delicates_warn_about_hand_washing():
    """Test that delicate items with protein soil stay delicate but get a warning."""
    load = LoadInput(
        items=[ItemType.DELICATE],
        soil_types=[SoilType.PROTEIN],
        quantity=LoadQuantity.LIGHT,
        urgency=Urgency.NO_RUSH,
    )

    result = get_load_recommendation(load)

    assert result.cycle == CycleType.DELICATE
    assert result.prewash_dose == "0.5 tablespoons in the door"
    assert result.warnings == [WARNING_SOILED_DELICATES]


def test_acidic_soil_warns_to_run_soon():
    """Test the acidic staining warning, appended after the urgency warning."""
    load = LoadInput(
        soil_types=[SoilType.ACIDIC, SoilType.PROTEIN],
        quantity=LoadQuantity.NORMAL,
        urgency=Urgency.NEED_FAST,
    )

    result = get_load_recommendation(load)

    assert result.warnings == [WARNING_FAST_BUT_SOILED, WARNING_ACIDIC]


def test_missing_water_hardness_means_moderate():
    """Test that an omitted water hardness doses like moderate water."""
    base = dict(soil_types=[SoilType.PROTEIN], quantity=LoadQuantity.NORMAL, urgency=Urgency.NEED_TODAY)

    implicit = get_load_recommendation(LoadInput(**base))
    explicit = get_load_recommendation(LoadInput(**base, water_hardness="moderate"))

    assert implicit == explicit


def test_recommendation_is_repeatable(heavy_cookware_load):
    """Test that the same input gives the same output."""
    assert get_load_recommendation(heavy_cookware_load) == get_load_recommendation(heavy_cookware_load)


def test_load_input_rejects_unknown_item():
    """Test boundary validation of item types."""
    with pytest.raises(ValidationError):
        LoadInput(items=["spaceship"], quantity="normal", urgency="no_rush")


def test_prerinse_advice_priority():
    """Test that the highest-priority soil's advice wins."""
    assert get_prerinse_advice([SoilType.EVERYDAY, SoilType.ACIDIC, SoilType.GREASY]) == PRERINSE_ADVICE[SoilType.GREASY]
    assert get_prerinse_advice([SoilType.STARCHY, SoilType.ACIDIC]) == PRERINSE_ADVICE[SoilType.STARCHY]
    assert get_prerinse_advice([SoilType.LIGHT]) == PRERINSE_ADVICE[SoilType.EVERYDAY]
    assert get_prerinse_advice([]) == PRERINSE_ADVICE[SoilType.EVERYDAY]


def test_loading_tips_deduplicate_in_first_seen_order():
    """Test that pots and pans share one tip and order follows the items."""
    tips = get_loading_tips([ItemType.GLASSES, ItemType.POTS, ItemType.PANS, ItemType.GLASSES], LoadQuantity.NORMAL)

    assert tips == [ITEM_TIPS[ItemType.GLASSES], POTS_AND_PANS_TIP]


def test_loading_tips_for_items_without_tips():
    """Test that plates and empty loads have no tips, but full loads still get the spray arm tip."""
    assert get_loading_tips([ItemType.PLATES], LoadQuantity.NORMAL) == []
    assert get_loading_tips([], LoadQuantity.NORMAL) == []
    assert get_loading_tips([], LoadQuantity.FULL) == [FULL_LOAD_TIP]


def test_normal_cycle_reasoning_branches():
    """Test the three normal cycle explanations."""
    protein = generate_reasoning(CycleType.NORMAL, 3, GreaseFactor.MEDIUM)
    greasy = generate_reasoning(CycleType.NORMAL, 4, GreaseFactor.HIGH)
    generic = generate_reasoning(CycleType.NORMAL, 2, GreaseFactor.LOW)

    assert "protein" in protein
    assert "grease" in greasy
    assert generic == "Normal cycle provides good balance of cleaning power and efficiency for this load."


@pytest.mark.parametrize("cycle", list(CycleType))
def test_every_cycle_has_reasoning(cycle):
    """Test that every cycle produces an explanation."""
    assert generate_reasoning(cycle, 2, GreaseFactor.LOW)
