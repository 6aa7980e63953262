"""Cycle selection rules (in priority order, first match wins).

Rule 1: Sanitise: baby items, unless delicate items are also present
Rule 2: Delicate: gentle items override sanitise and urgency
Rule 3: Quick: need fast and soil score <= 2
Rule 4: Normal: need fast but soil score > 2 (quick can't clean it; caller warns)
Rule 5: Intensive: soil score >= 4
Rule 6: Eco: no rush and soil score <= 3 (long enzyme time suits protein)
Rule 7: Normal: protein (score 3) with urgency needs enzyme time, not a quick blast
Rule 8: Default: normal
"""

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from dishmate.load.schemas import LoadCalculation
from dishmate.types import CycleType, Urgency

QUICK_MAX_SOIL_SCORE = 2


@dataclass(frozen=True)
class CycleRule:
    name: str
    applies: Callable[[LoadCalculation, Urgency], bool]
    cycle: CycleType


CYCLE_RULES: tuple[CycleRule, ...] = (
    CycleRule(
        name="sanitise_baby_items",
        applies=lambda calc, urgency: calc.needs_sanitise and not calc.needs_gentle,
        cycle=CycleType.SANITISE,
    ),
    CycleRule(
        name="gentle_items",
        applies=lambda calc, urgency: calc.needs_gentle,
        cycle=CycleType.DELICATE,
    ),
    CycleRule(
        name="fast_light_soil",
        applies=lambda calc, urgency: urgency == Urgency.NEED_FAST and calc.soil_score <= QUICK_MAX_SOIL_SCORE,
        cycle=CycleType.QUICK,
    ),
    CycleRule(
        name="fast_but_soiled",
        applies=lambda calc, urgency: urgency == Urgency.NEED_FAST and calc.soil_score > QUICK_MAX_SOIL_SCORE,
        cycle=CycleType.NORMAL,
    ),
    CycleRule(
        name="heavy_or_greasy",
        applies=lambda calc, urgency: calc.soil_score >= 4,
        cycle=CycleType.INTENSIVE,
    ),
    CycleRule(
        name="no_rush_enzyme_time",
        applies=lambda calc, urgency: urgency == Urgency.NO_RUSH and calc.soil_score <= 3,
        cycle=CycleType.ECO,
    ),
    CycleRule(
        name="protein_with_urgency",
        applies=lambda calc, urgency: calc.soil_score == 3,
        cycle=CycleType.NORMAL,
    ),
)

DEFAULT_CYCLE = CycleType.NORMAL


def select_cycle(calc: LoadCalculation, urgency: Urgency | str) -> CycleType:
    """Pick a wash cycle for a load.

    Args:
        calc: Derived load state
        urgency: How soon the dishes are needed

    Returns:
        The cycle of the first matching rule, or normal when none match
    """
    urgency = Urgency(urgency)
    for rule in CYCLE_RULES:
        if rule.applies(calc, urgency):
            logger.debug(
                "Cycle rule triggered",
                rule=rule.name,
                cycle=rule.cycle,
                soil_score=calc.soil_score,
                urgency=urgency,
            )
            return rule.cycle

    logger.debug("No cycle rule matched, using default", cycle=DEFAULT_CYCLE, soil_score=calc.soil_score)
    return DEFAULT_CYCLE
