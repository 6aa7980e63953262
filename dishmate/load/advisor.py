"""Load and cycle advisor.

Turns a description of a load (items, soil, size, urgency, water) into a
cycle choice, detergent doses, pre-rinse advice, loading tips and a short
explanation of the choice.
"""

from collections.abc import Callable, Iterable

from loguru import logger

from dishmate.load.cycle_rules import select_cycle
from dishmate.load.dosing import calculate_dosing
from dishmate.load.schemas import LoadCalculation, LoadInput, Recommendation
from dishmate.load.scoring import (
    calculate_grease_factor,
    calculate_soil_score,
    has_acidic_risk,
    needs_gentle,
    needs_sanitise,
)
from dishmate.types import CycleType, GreaseFactor, ItemType, LoadQuantity, SoilType, Urgency, WaterHardness

PRERINSE_ADVICE: dict[SoilType, str] = {
    SoilType.HEAVY: "Scrape off large chunks and burnt bits. Don't rinse.",
    SoilType.GREASY: "Don't rinse - grease helps detergent work. Scrape solids only.",
    SoilType.PROTEIN: "Light scrape only. Dried protein is fine - enzymes handle it.",
    SoilType.STARCHY: "No rinsing needed. Starch dissolves easily.",
    SoilType.ACIDIC: "Run soon - acidic foods can stain if left too long.",
    SoilType.EVERYDAY: "Scrape large food pieces into bin. No rinsing needed.",
    SoilType.LIGHT: "Scrape large food pieces into bin. No rinsing needed.",
}

PRERINSE_PRIORITY: tuple[SoilType, ...] = (
    SoilType.HEAVY,
    SoilType.GREASY,
    SoilType.PROTEIN,
    SoilType.STARCHY,
    SoilType.ACIDIC,
)

POTS_AND_PANS_TIP = "Place pots and pans on bottom rack, angled for water access"

ITEM_TIPS: dict[ItemType, str] = {
    ItemType.GLASSES: "Angle glasses between tines, not over them",
    ItemType.BOWLS: "Face bowls toward centre, angled down",
    ItemType.POTS: POTS_AND_PANS_TIP,
    ItemType.PANS: POTS_AND_PANS_TIP,
    ItemType.CONTAINERS: "Plastic on top rack only - bottoms warp with heat",
    ItemType.BAKEWARE: "Angle bakeware to face spray arm, don't lay flat",
    ItemType.UTENSILS: "Mix utensil handles up and down to prevent nesting",
    ItemType.MUGS: "Place mugs at an angle to prevent water pooling",
    ItemType.CUTTING_BOARDS: "Place cutting boards on sides, don't lay flat",
}

FULL_LOAD_TIP = "Don't block spray arm rotation - spin it to check"

WARNING_FAST_BUT_SOILED = "Quick cycle won't clean this well - using normal instead."
WARNING_SOILED_DELICATES = "Consider hand washing heavily soiled delicate items."
WARNING_ACIDIC = "Run soon to prevent staining from acidic foods."


def _normal_reasoning(soil_score: int, grease_factor: GreaseFactor) -> str:
    if soil_score == 3:
        return (
            "Normal cycle works best because protein residue needs enzyme activation time. "
            "The pre-wash detergent will handle any grease before the main wash."
        )
    if grease_factor == GreaseFactor.HIGH:
        return "Normal cycle needed to give enzymes time to work on the grease. Pre-wash detergent is critical."
    return "Normal cycle provides good balance of cleaning power and efficiency for this load."


CYCLE_REASONING: dict[CycleType, Callable[[int, GreaseFactor], str]] = {
    CycleType.QUICK: lambda soil_score, grease_factor: (
        "Quick cycle is fine for lightly soiled items. "
        "No pre-wash dose needed since there's minimal grease to tackle."
    ),
    CycleType.ECO: lambda soil_score, grease_factor: (
        "Eco cycle is ideal here. The longer run time at lower temperature gives enzymes "
        "plenty of time to work - uses less energy too."
    ),
    CycleType.NORMAL: _normal_reasoning,
    CycleType.INTENSIVE: lambda soil_score, grease_factor: (
        "Intensive cycle needed for heavy/greasy load. The higher temperature and longer wash "
        "time will tackle baked-on and greasy residue."
    ),
    CycleType.DELICATE: lambda soil_score, grease_factor: (
        "Delicate cycle uses lower pressure and temperature to protect fragile items. Handle with care."
    ),
    CycleType.SANITISE: lambda soil_score, grease_factor: (
        "Sanitise cycle uses high-temperature final rinse to eliminate bacteria - important for baby items."
    ),
}


def get_prerinse_advice(soil_types: Iterable[SoilType | str]) -> str:
    """Return the advice for the highest-priority soil present.

    Priority is heavy, greasy, protein, starchy, acidic; anything else gets
    the everyday "scrape, don't rinse" advice.
    """
    present = {SoilType(soil) for soil in soil_types}
    for soil in PRERINSE_PRIORITY:
        if soil in present:
            return PRERINSE_ADVICE[soil]
    return PRERINSE_ADVICE[SoilType.EVERYDAY]


def get_loading_tips(items: Iterable[ItemType | str], quantity: LoadQuantity | str) -> list[str]:
    """Loading tips for the items in the load, first-seen order, no duplicates."""
    tips: list[str] = []
    for item in items:
        tip = ITEM_TIPS.get(ItemType(item))
        if tip and tip not in tips:
            tips.append(tip)

    if LoadQuantity(quantity) == LoadQuantity.FULL:
        tips.append(FULL_LOAD_TIP)

    return tips


def generate_reasoning(cycle: CycleType | str, soil_score: int, grease_factor: GreaseFactor | str) -> str:
    return CYCLE_REASONING[CycleType(cycle)](soil_score, GreaseFactor(grease_factor))


def calculate_load(load: LoadInput) -> LoadCalculation:
    return LoadCalculation(
        needs_sanitise=needs_sanitise(load.items),
        needs_gentle=needs_gentle(load.items),
        soil_score=calculate_soil_score(load.soil_types),
        grease_factor=calculate_grease_factor(load.soil_types),
        has_acidic_risk=has_acidic_risk(load.soil_types),
    )


def get_load_recommendation(load: LoadInput) -> Recommendation:
    """Recommend a cycle, doses and loading advice for a load.

    Args:
        load: Items, soil, size, urgency and (optionally) water hardness

    Returns:
        Recommendation whose ``warnings`` is None when there is nothing to flag
    """
    calc = calculate_load(load)
    cycle = select_cycle(calc, load.urgency)

    warnings: list[str] = []
    if load.urgency == Urgency.NEED_FAST and calc.soil_score > 2:
        warnings.append(WARNING_FAST_BUT_SOILED)
    if calc.needs_gentle and calc.soil_score > 2:
        warnings.append(WARNING_SOILED_DELICATES)
    if calc.has_acidic_risk:
        warnings.append(WARNING_ACIDIC)

    doses = calculate_dosing(
        calc.soil_score,
        calc.grease_factor,
        cycle,
        load.quantity,
        load.water_hardness or WaterHardness.MODERATE,
    )

    logger.info(
        "Load recommendation generated",
        cycle=cycle,
        soil_score=calc.soil_score,
        grease_factor=calc.grease_factor,
        warning_count=len(warnings),
    )

    return Recommendation(
        cycle=cycle,
        prewash_dose=doses.prewash_dose,
        main_dose=doses.main_dose,
        prerinse_advice=get_prerinse_advice(load.soil_types),
        loading_tips=get_loading_tips(load.items, load.quantity),
        reasoning=generate_reasoning(cycle, calc.soil_score, calc.grease_factor),
        warnings=warnings or None,
    )
