"""Tests for cycle selection rules, one rule at a time."""

from dishmate.load.cycle_rules import CYCLE_RULES, select_cycle
from dishmate.load.schemas import LoadCalculation
from dishmate.types import CycleType, GreaseFactor, Urgency


def make_calc(
    *,
    soil_score: int = 2,
    needs_sanitise: bool = False,
    needs_gentle: bool = False,
    grease_factor: GreaseFactor = GreaseFactor.LOW,
    has_acidic_risk: bool = False,
) -> LoadCalculation:
    return LoadCalculation(
        needs_sanitise=needs_sanitise,
        needs_gentle=needs_gentle,
        soil_score=soil_score,
        grease_factor=grease_factor,
        has_acidic_risk=has_acidic_risk,
    )


def test_rules_are_in_priority_order():
    """Test the declared rule order."""
    assert [rule.name for rule in CYCLE_RULES] == [
        "sanitise_baby_items",
        "gentle_items",
        "fast_light_soil",
        "fast_but_soiled",
        "heavy_or_greasy",
        "no_rush_enzyme_time",
        "protein_with_urgency",
    ]


def test_baby_items_sanitise_regardless_of_soil_and_urgency():
    """Test Rule 1: baby items get the sanitise cycle."""
    calc = make_calc(needs_sanitise=True, soil_score=5)

    assert select_cycle(calc, Urgency.NEED_FAST) == CycleType.SANITISE


def test_delicate_overrides_sanitise():
    """Test Rule 2: delicate items win over baby items and urgency."""
    calc = make_calc(needs_sanitise=True, needs_gentle=True, soil_score=1)

    assert select_cycle(calc, Urgency.NEED_FAST) == CycleType.DELICATE


def test_need_fast_light_soil_is_quick():
    """Test Rule 3: quick cycle for lightly soiled urgent loads."""
    assert select_cycle(make_calc(soil_score=1), Urgency.NEED_FAST) == CycleType.QUICK
    assert select_cycle(make_calc(soil_score=2), Urgency.NEED_FAST) == CycleType.QUICK


def test_need_fast_with_soil_above_two_falls_back_to_normal():
    """Test Rule 4: quick can't handle soil above 2, even for very heavy loads."""
    assert select_cycle(make_calc(soil_score=3), Urgency.NEED_FAST) == CycleType.NORMAL
    assert select_cycle(make_calc(soil_score=5), Urgency.NEED_FAST) == CycleType.NORMAL


def test_heavy_soil_is_intensive():
    """Test Rule 5: soil score 4+ gets intensive, even with no rush."""
    assert select_cycle(make_calc(soil_score=4), Urgency.NEED_TODAY) == CycleType.INTENSIVE
    assert select_cycle(make_calc(soil_score=5), Urgency.NO_RUSH) == CycleType.INTENSIVE


def test_no_rush_up_to_protein_is_eco():
    """Test Rule 6: no rush with soil up to 3 gets eco."""
    assert select_cycle(make_calc(soil_score=1), Urgency.NO_RUSH) == CycleType.ECO
    assert select_cycle(make_calc(soil_score=3), Urgency.NO_RUSH) == CycleType.ECO


def test_protein_needed_today_is_normal():
    """Test Rule 7: protein needed today gets normal for enzyme time."""
    assert select_cycle(make_calc(soil_score=3), Urgency.NEED_TODAY) == CycleType.NORMAL


def test_default_is_normal():
    """Test that light everyday loads needed today fall through to normal."""
    assert select_cycle(make_calc(soil_score=1), Urgency.NEED_TODAY) == CycleType.NORMAL
    assert select_cycle(make_calc(soil_score=2), "need_today") == CycleType.NORMAL
