"""Tests for water hardness reference data and city lookup."""

import pytest

from dishmate.reference.water import (
    UNKNOWN_CITY_MESSAGE,
    get_all_hardness_levels,
    get_australian_city_hardness,
    get_hardness_explanation,
    get_hardness_recommendations,
    get_water_hardness_test,
    normalize_city_name,
)
from dishmate.types import RinseAidSetting, WaterHardness


def test_city_lookup_ignores_case():
    """Test that city names match regardless of case."""
    assert get_australian_city_hardness("SYDNEY") == get_australian_city_hardness("sydney")


def test_known_city():
    """Test a known city's hardness details."""
    result = get_australian_city_hardness("Adelaide")

    assert result.city == "Adelaide"
    assert result.hardness == WaterHardness.HARD
    assert result.ppm_range == "150-350 ppm"
    assert result.source == "SA Water"
    assert result.message is None


def test_multi_word_city():
    """Test that spaces in a city name are normalised."""
    result = get_australian_city_hardness("Gold  Coast")

    assert result.hardness == WaterHardness.MODERATE
    assert normalize_city_name("Gold Coast") == "gold_coast"


def test_unknown_city():
    """Test that an unknown city keeps its name and gets guidance instead of data."""
    result = get_australian_city_hardness("Wagga Wagga")

    assert result.city == "Wagga Wagga"
    assert result.hardness == WaterHardness.UNKNOWN
    assert result.message == UNKNOWN_CITY_MESSAGE
    assert result.ppm_range is None


@pytest.mark.parametrize(
    ("hardness", "use_salt", "rinse_aid"),
    [
        (WaterHardness.HARD, True, RinseAidSetting.MAXIMUM),
        (WaterHardness.SOFT, False, RinseAidSetting.LOW),
        (WaterHardness.MODERATE, True, RinseAidSetting.MEDIUM),
        (WaterHardness.UNKNOWN, True, RinseAidSetting.MEDIUM),
    ],
)
def test_hardness_recommendations(hardness, use_salt, rinse_aid):
    """Test salt and rinse aid advice per hardness level."""
    recommendations = get_hardness_recommendations(hardness)

    assert recommendations.use_salt is use_salt
    assert recommendations.rinse_aid_setting == rinse_aid


def test_only_unknown_water_has_a_first_step():
    """Test that untested water is told to do the soap test first."""
    assert "soap bottle test" in get_hardness_recommendations("unknown").first_step
    assert get_hardness_recommendations("hard").first_step is None


def test_static_content():
    """Test the soap test description and hardness explainer."""
    test = get_water_hardness_test()

    assert test.name == "Soap Bottle Test"
    assert len(test.steps) == 6
    assert set(test.interpretation_guide) == {WaterHardness.HARD, WaterHardness.MODERATE, WaterHardness.SOFT}
    assert set(get_hardness_explanation().hardness_scale) == set(WaterHardness)
    assert get_all_hardness_levels() == [
        WaterHardness.SOFT,
        WaterHardness.MODERATE,
        WaterHardness.HARD,
        WaterHardness.UNKNOWN,
    ]
