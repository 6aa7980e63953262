"""Tests for the rinse aid guide."""

import pytest

from dishmate.rinse_aid.advisor import (
    REFILL_NOW,
    USAGE_TIPS,
    RinseAidInput,
    SpotCheckInput,
    diagnose_spot_issue,
    get_drying_tips,
    get_rinse_aid_explanation,
    get_rinse_aid_recommendation,
    get_rinse_aid_settings,
)
from dishmate.types import ItemCategory, RinseAidSetting, SpotCause, WaterHardness


@pytest.mark.parametrize(
    ("hardness", "spots", "drying", "expected"),
    [
        (WaterHardness.HARD, False, False, RinseAidSetting.MAXIMUM),
        (WaterHardness.HARD, True, True, RinseAidSetting.MAXIMUM),
        (WaterHardness.MODERATE, False, False, RinseAidSetting.MEDIUM),
        (WaterHardness.MODERATE, True, False, RinseAidSetting.HIGH),
        (WaterHardness.MODERATE, False, True, RinseAidSetting.HIGH),
        (WaterHardness.SOFT, False, False, RinseAidSetting.LOW),
        (WaterHardness.SOFT, False, True, RinseAidSetting.MEDIUM),
        (WaterHardness.UNKNOWN, True, True, RinseAidSetting.MEDIUM),
    ],
)
def test_setting_by_water_and_issues(hardness, spots, drying, expected):
    """Test the recommended dial setting."""
    result = get_rinse_aid_recommendation(
        RinseAidInput(water_hardness=hardness, has_spot_issues=spots, has_drying_issues=drying)
    )

    assert result.setting_recommendation == expected
    assert result.usage_tips == list(USAGE_TIPS)


def test_moderate_reasoning_mentions_spots_only_for_spot_issues():
    """Test that drying issues alone get the standard moderate explanation."""
    spots = get_rinse_aid_recommendation(
        RinseAidInput(water_hardness="moderate", has_spot_issues=True, has_drying_issues=False)
    )
    drying = get_rinse_aid_recommendation(
        RinseAidInput(water_hardness="moderate", has_spot_issues=False, has_drying_issues=True)
    )

    assert "spot issues" in spots.reasoning
    assert drying.reasoning == "Medium setting works well for moderate water hardness."


def test_empty_dispenser_is_urgent():
    """Test the urgent refill action, absent when the dispenser has rinse aid."""
    empty = get_rinse_aid_recommendation(
        RinseAidInput(water_hardness="soft", has_spot_issues=False, has_drying_issues=False, dispenser_empty=True)
    )
    filled = get_rinse_aid_recommendation(
        RinseAidInput(water_hardness="soft", has_spot_issues=False, has_drying_issues=False)
    )

    assert empty.urgent_actions == [REFILL_NOW]
    assert filled.urgent_actions is None


@pytest.mark.parametrize(
    ("wipes_off", "needs_vinegar", "cause", "permanent"),
    [
        (True, True, SpotCause.INSUFFICIENT_RINSE_AID, False),
        (True, False, SpotCause.INSUFFICIENT_RINSE_AID, False),
        (False, True, SpotCause.HARD_WATER_DEPOSITS, False),
        (False, False, SpotCause.ETCHING, True),
    ],
)
def test_spot_diagnosis(wipes_off, needs_vinegar, cause, permanent):
    """Test spot causes from how the spots come off."""
    diagnosis = diagnose_spot_issue(
        SpotCheckInput(spots_wipe_off=wipes_off, needs_vinegar_to_remove=needs_vinegar, water_hardness="hard")
    )

    assert diagnosis.likely_cause == cause
    assert diagnosis.is_permanent is permanent
    assert diagnosis.solutions
    assert diagnosis.prevention_tips


def test_drying_tips_per_category():
    """Test that each item category has its own tips."""
    assert get_drying_tips(ItemCategory.PLASTIC)[0].startswith("Plastic holds less heat")
    assert len(get_drying_tips("ceramic")) == 4
    assert len({tuple(get_drying_tips(category)) for category in ItemCategory}) == len(ItemCategory)


def test_explanation_and_settings():
    """Test the rinse aid explainer and the list of dial settings."""
    explanation = get_rinse_aid_explanation()

    assert explanation.title == "How Rinse Aid Works"
    assert len(explanation.common_misconceptions) == 4
    assert get_rinse_aid_settings() == [
        RinseAidSetting.LOW,
        RinseAidSetting.MEDIUM,
        RinseAidSetting.HIGH,
        RinseAidSetting.MAXIMUM,
    ]
