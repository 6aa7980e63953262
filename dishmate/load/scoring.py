"""Soil severity and grease scoring.

Soil severity is not additive: one heavily soiled item dominates the
cycle choice no matter how many lightly soiled items come with it.
"""

from collections.abc import Iterable

from dishmate.types import GreaseFactor, ItemType, SoilType

SOIL_SCORES: dict[SoilType, int] = {
    SoilType.LIGHT: 1,
    SoilType.EVERYDAY: 2,
    SoilType.STARCHY: 2,
    SoilType.ACIDIC: 2,
    SoilType.PROTEIN: 3,
    SoilType.GREASY: 4,
    SoilType.HEAVY: 5,
}

MIN_SOIL_SCORE = 1
MAX_SOIL_SCORE = 5


def calculate_soil_score(soil_types: Iterable[SoilType | str]) -> int:
    """Return the worst soil severity present, 1 (light) when nothing is given.

    Args:
        soil_types: Soil types present on the load

    Returns:
        Severity in [1, 5]
    """
    scores = [SOIL_SCORES[SoilType(soil)] for soil in soil_types]
    if not scores:
        return MIN_SOIL_SCORE
    return max(MIN_SOIL_SCORE, min(MAX_SOIL_SCORE, max(scores)))


def calculate_grease_factor(soil_types: Iterable[SoilType | str]) -> GreaseFactor:
    """Greasy soil means high, otherwise protein means medium, otherwise low."""
    present = {SoilType(soil) for soil in soil_types}
    if SoilType.GREASY in present:
        return GreaseFactor.HIGH
    if SoilType.PROTEIN in present:
        return GreaseFactor.MEDIUM
    return GreaseFactor.LOW


def needs_sanitise(items: Iterable[ItemType | str]) -> bool:
    return ItemType.BABY_ITEMS in {ItemType(item) for item in items}


def needs_gentle(items: Iterable[ItemType | str]) -> bool:
    return ItemType.DELICATE in {ItemType(item) for item in items}


def has_acidic_risk(soil_types: Iterable[SoilType | str]) -> bool:
    return SoilType.ACIDIC in {SoilType(soil) for soil in soil_types}
