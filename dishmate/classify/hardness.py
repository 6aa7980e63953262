"""Water hardness estimation from the soap bottle test and from household symptoms."""

from dataclasses import dataclass

from loguru import logger
from pydantic import BaseModel, ConfigDict

from dishmate.types import Confidence, SudsAmount, WaterClarity, WaterHardness


class SoapTestInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    suds_amount: SudsAmount
    water_clarity: WaterClarity


class TestResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    __test__ = False  # keep pytest from collecting this as a test class

    hardness: WaterHardness
    confidence: Confidence
    suggest_professional_test: bool
    explanation: str


class SymptomInput(BaseModel):
    """Household observations; None means the question wasn't answered."""

    model_config = ConfigDict(frozen=True)

    white_residue_on_dishes: bool | None = None
    cloudy_glasses: bool | None = None
    scale_in_kettle: bool | None = None
    soap_lathers_easily: bool | None = None
    spotty_glassware: bool | None = None


class SymptomEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    likely_hardness: WaterHardness
    confidence: Confidence
    recommend_test: bool
    reasoning: str


# -----------------------------
# Soap bottle test
# -----------------------------
_CLEARLY_HARD = TestResult(
    hardness=WaterHardness.HARD,
    confidence=Confidence.HIGH,
    suggest_professional_test=False,
    explanation="Few suds and milky water strongly indicate hard water. Minerals are interfering with soap.",
)
_CLEARLY_SOFT = TestResult(
    hardness=WaterHardness.SOFT,
    confidence=Confidence.HIGH,
    suggest_professional_test=False,
    explanation="Lots of suds and clear water indicate soft water. Soap lathers easily without minerals interfering.",
)
_CLEARLY_MODERATE = TestResult(
    hardness=WaterHardness.MODERATE,
    confidence=Confidence.MEDIUM,
    suggest_professional_test=False,
    explanation="Moderate suds and slightly cloudy water suggest moderately hard water.",
)
_PROBABLY_HARD = TestResult(
    hardness=WaterHardness.HARD,
    confidence=Confidence.LOW,
    suggest_professional_test=True,
    explanation="Results suggest hard water but are not definitive. A professional test would be more accurate.",
)
_PROBABLY_SOFT_TO_MODERATE = TestResult(
    hardness=WaterHardness.MODERATE,
    confidence=Confidence.LOW,
    suggest_professional_test=True,
    explanation="Results are mixed. Your water is likely soft to moderate. Consider a professional test for certainty.",
)
INCONCLUSIVE_RESULT = TestResult(
    hardness=WaterHardness.MODERATE,
    confidence=Confidence.LOW,
    suggest_professional_test=True,
    explanation="Results are inconclusive. A professional water test is recommended.",
)

SOAP_TEST_TABLE: dict[tuple[SudsAmount, WaterClarity], TestResult] = {
    (SudsAmount.FEW, WaterClarity.MILKY): _CLEARLY_HARD,
    (SudsAmount.LOTS, WaterClarity.CLEAR): _CLEARLY_SOFT,
    (SudsAmount.SOME, WaterClarity.SLIGHTLY_CLOUDY): _CLEARLY_MODERATE,
    (SudsAmount.SOME, WaterClarity.MILKY): _PROBABLY_HARD,
    (SudsAmount.FEW, WaterClarity.SLIGHTLY_CLOUDY): _PROBABLY_HARD,
    (SudsAmount.SOME, WaterClarity.CLEAR): _PROBABLY_SOFT_TO_MODERATE,
    (SudsAmount.LOTS, WaterClarity.SLIGHTLY_CLOUDY): _PROBABLY_SOFT_TO_MODERATE,
}


def interpret_test_result(test_input: SoapTestInput) -> TestResult:
    """Read the soap bottle test.

    Combinations with contradictory signals (few suds with clear water,
    lots of suds with milky water) are inconclusive.
    """
    result = SOAP_TEST_TABLE.get((test_input.suds_amount, test_input.water_clarity), INCONCLUSIVE_RESULT)
    logger.debug(
        "Soap test interpreted",
        suds=test_input.suds_amount,
        clarity=test_input.water_clarity,
        hardness=result.hardness,
        confidence=result.confidence,
    )
    return result


# -----------------------------
# Symptom scoring
# -----------------------------
@dataclass(frozen=True)
class SymptomWeight:
    """Points added when a symptom is reported present or absent."""

    field: str
    hard_if_true: int = 0
    soft_if_true: int = 0
    hard_if_false: int = 0
    soft_if_false: int = 0


SYMPTOM_WEIGHTS: tuple[SymptomWeight, ...] = (
    SymptomWeight("white_residue_on_dishes", hard_if_true=2, soft_if_false=1),
    SymptomWeight("cloudy_glasses", hard_if_true=1),
    SymptomWeight("scale_in_kettle", hard_if_true=2, soft_if_false=1),
    SymptomWeight("soap_lathers_easily", soft_if_true=2, hard_if_false=1),
    SymptomWeight("spotty_glassware", hard_if_true=1),
)

HARD_REASONING = "Multiple hard water indicators present: white residue, scale buildup, spotty glassware."
SOFT_REASONING = "Soap lathers easily and no mineral buildup observed - typical of soft water."
MIXED_REASONING = "Mixed or limited indicators. A simple test would give more accurate results."


def score_symptoms(symptoms: SymptomInput) -> tuple[int, int]:
    """Return (hard_score, soft_score); unanswered symptoms add nothing."""
    hard_score = 0
    soft_score = 0
    for weight in SYMPTOM_WEIGHTS:
        observed = getattr(symptoms, weight.field)
        if observed is None:
            continue
        if observed:
            hard_score += weight.hard_if_true
            soft_score += weight.soft_if_true
        else:
            hard_score += weight.hard_if_false
            soft_score += weight.soft_if_false
    return hard_score, soft_score


def estimate_hardness_from_symptoms(symptoms: SymptomInput) -> SymptomEstimate:
    """Estimate water hardness from everyday observations.

    Thresholds are checked in order:
    hard score >= 4 -> hard (high confidence)
    hard score >= 2 and soft score < 2 -> hard (medium, test recommended)
    soft score >= 3 -> soft (medium)
    soft score >= 1 and no hard points -> soft (low, test recommended)
    otherwise -> moderate (low, test recommended)
    """
    hard_score, soft_score = score_symptoms(symptoms)

    if hard_score >= 4:
        hardness, confidence, recommend_test = WaterHardness.HARD, Confidence.HIGH, False
    elif hard_score >= 2 and soft_score < 2:
        hardness, confidence, recommend_test = WaterHardness.HARD, Confidence.MEDIUM, True
    elif soft_score >= 3:
        hardness, confidence, recommend_test = WaterHardness.SOFT, Confidence.MEDIUM, False
    elif soft_score >= 1 and hard_score == 0:
        hardness, confidence, recommend_test = WaterHardness.SOFT, Confidence.LOW, True
    else:
        hardness, confidence, recommend_test = WaterHardness.MODERATE, Confidence.LOW, True

    if hard_score >= 4:
        reasoning = HARD_REASONING
    elif soft_score >= 3:
        reasoning = SOFT_REASONING
    else:
        reasoning = MIXED_REASONING

    logger.debug(
        "Hardness estimated from symptoms",
        hard_score=hard_score,
        soft_score=soft_score,
        hardness=hardness,
        confidence=confidence,
    )

    return SymptomEstimate(
        likely_hardness=hardness,
        confidence=confidence,
        recommend_test=recommend_test,
        reasoning=reasoning,
    )
