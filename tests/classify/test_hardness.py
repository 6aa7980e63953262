"""Tests for water hardness estimation."""

import pytest
from pydantic import ValidationError

from dishmate.classify.hardness import (
    HARD_REASONING,
    INCONCLUSIVE_RESULT,
    MIXED_REASONING,
    SOFT_REASONING,
    SoapTestInput,
    SymptomInput,
    estimate_hardness_from_symptoms,
    interpret_test_result,
    score_symptoms,
)
from dishmate.types import Confidence, SudsAmount, WaterClarity, WaterHardness


@pytest.mark.parametrize(
    ("suds", "clarity", "hardness", "confidence", "professional"),
    [
        (SudsAmount.FEW, WaterClarity.MILKY, WaterHardness.HARD, Confidence.HIGH, False),
        (SudsAmount.LOTS, WaterClarity.CLEAR, WaterHardness.SOFT, Confidence.HIGH, False),
        (SudsAmount.SOME, WaterClarity.SLIGHTLY_CLOUDY, WaterHardness.MODERATE, Confidence.MEDIUM, False),
        (SudsAmount.SOME, WaterClarity.MILKY, WaterHardness.HARD, Confidence.LOW, True),
        (SudsAmount.FEW, WaterClarity.SLIGHTLY_CLOUDY, WaterHardness.HARD, Confidence.LOW, True),
        (SudsAmount.SOME, WaterClarity.CLEAR, WaterHardness.MODERATE, Confidence.LOW, True),
        (SudsAmount.LOTS, WaterClarity.SLIGHTLY_CLOUDY, WaterHardness.MODERATE, Confidence.LOW, True),
    ],
)
def test_soap_test_table(suds, clarity, hardness, confidence, professional):
    """Test each mapped soap test combination."""
    result = interpret_test_result(SoapTestInput(suds_amount=suds, water_clarity=clarity))

    assert result.hardness == hardness
    assert result.confidence == confidence
    assert result.suggest_professional_test is professional


@pytest.mark.parametrize(
    ("suds", "clarity"),
    [(SudsAmount.FEW, WaterClarity.CLEAR), (SudsAmount.LOTS, WaterClarity.MILKY)],
)
def test_contradictory_soap_test_is_inconclusive(suds, clarity):
    """Test that contradictory results fall back to moderate with a professional test."""
    result = interpret_test_result(SoapTestInput(suds_amount=suds, water_clarity=clarity))

    assert result == INCONCLUSIVE_RESULT
    assert result.hardness == WaterHardness.MODERATE
    assert result.confidence == Confidence.LOW
    assert result.suggest_professional_test


def test_soap_test_accepts_strings_and_rejects_unknown_values():
    """Test boundary coercion of the soap test input."""
    result = interpret_test_result(SoapTestInput(suds_amount="few", water_clarity="milky"))

    assert result.hardness == WaterHardness.HARD
    with pytest.raises(ValidationError):
        SoapTestInput(suds_amount="tons", water_clarity="clear")


def test_symptom_scoring_weights():
    """Test the additive weights for present and absent symptoms."""
    assert score_symptoms(SymptomInput()) == (0, 0)
    assert score_symptoms(SymptomInput(white_residue_on_dishes=True, cloudy_glasses=True)) == (3, 0)
    assert score_symptoms(SymptomInput(white_residue_on_dishes=False, scale_in_kettle=False)) == (0, 2)
    assert score_symptoms(SymptomInput(soap_lathers_easily=False, spotty_glassware=False)) == (1, 0)


def test_strong_hard_indicators():
    """Test hard score of 4 or more is hard with high confidence."""
    estimate = estimate_hardness_from_symptoms(SymptomInput(white_residue_on_dishes=True, scale_in_kettle=True))

    assert estimate.likely_hardness == WaterHardness.HARD
    assert estimate.confidence == Confidence.HIGH
    assert not estimate.recommend_test
    assert estimate.reasoning == HARD_REASONING


def test_hard_wins_even_with_soft_points_when_strong():
    """Test that hard score >= 4 is checked before any soft threshold."""
    estimate = estimate_hardness_from_symptoms(
        SymptomInput(
            white_residue_on_dishes=True,
            cloudy_glasses=True,
            scale_in_kettle=True,
            soap_lathers_easily=True,
            spotty_glassware=True,
        )
    )

    assert estimate.likely_hardness == WaterHardness.HARD
    assert estimate.confidence == Confidence.HIGH


def test_some_hard_indicators():
    """Test hard score of 2-3 with little soft evidence is hard with medium confidence."""
    estimate = estimate_hardness_from_symptoms(SymptomInput(white_residue_on_dishes=True))

    assert estimate.likely_hardness == WaterHardness.HARD
    assert estimate.confidence == Confidence.MEDIUM
    assert estimate.recommend_test
    assert estimate.reasoning == MIXED_REASONING


def test_strong_soft_indicators():
    """Test soft score of 3 or more is soft with medium confidence."""
    estimate = estimate_hardness_from_symptoms(
        SymptomInput(white_residue_on_dishes=False, scale_in_kettle=False, soap_lathers_easily=True)
    )

    assert estimate.likely_hardness == WaterHardness.SOFT
    assert estimate.confidence == Confidence.MEDIUM
    assert not estimate.recommend_test
    assert estimate.reasoning == SOFT_REASONING


def test_weak_soft_indicators():
    """Test some soft points and no hard points is soft with low confidence."""
    estimate = estimate_hardness_from_symptoms(SymptomInput(soap_lathers_easily=True))

    assert estimate.likely_hardness == WaterHardness.SOFT
    assert estimate.confidence == Confidence.LOW
    assert estimate.recommend_test


@pytest.mark.parametrize(
    "symptoms",
    [
        SymptomInput(),
        SymptomInput(white_residue_on_dishes=True, soap_lathers_easily=True),
        SymptomInput(
            white_residue_on_dishes=False,
            cloudy_glasses=False,
            scale_in_kettle=False,
            soap_lathers_easily=False,
            spotty_glassware=False,
        ),
    ],
)
def test_mixed_or_missing_indicators_are_moderate(symptoms):
    """Test that weak or conflicting evidence lands on moderate with a test recommended."""
    estimate = estimate_hardness_from_symptoms(symptoms)

    assert estimate.likely_hardness == WaterHardness.MODERATE
    assert estimate.confidence == Confidence.LOW
    assert estimate.recommend_test
    assert estimate.reasoning == MIXED_REASONING
