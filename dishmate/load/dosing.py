"""Detergent dosing for the pre-wash (loose in the door) and main wash (dispenser).

Amounts are in tablespoons of powder and rounded to the nearest half.
Quantity scales the main dose only; hard water scales both doses and is
applied after the quantity adjustment.
"""

from dishmate.core.numbers import format_number, round_to_half
from dishmate.load.schemas import DosingResult
from dishmate.types import CycleType, GreaseFactor, LoadQuantity, WaterHardness

NO_PREWASH = "None needed"

PREWASH_DOSES: dict[GreaseFactor, float] = {
    GreaseFactor.HIGH: 1.5,
    GreaseFactor.MEDIUM: 1.0,
    GreaseFactor.LOW: 0.5,
}

DELICATE_PREWASH_DOSE = 0.5
QUICK_MAIN_DOSE = 1.0
HARD_WATER_MULTIPLIER = 1.5

QUANTITY_MULTIPLIERS: dict[LoadQuantity, float] = {
    LoadQuantity.LIGHT: 0.75,
    LoadQuantity.NORMAL: 1.0,
    LoadQuantity.FULL: 1.25,
}


def get_main_dose_base(soil_score: int) -> float:
    if soil_score >= 4:
        return 2.5
    if soil_score == 3:
        return 2.0
    if soil_score == 2:
        return 1.5
    return 1.0


def format_dose(amount: float, is_prewash: bool) -> str:
    """Render a dose, e.g. "1.5 tablespoons in the door" or "1 tablespoon in dispenser"."""
    rounded = round_to_half(amount)
    unit = "tablespoon" if rounded == 1 else "tablespoons"
    location = "in the door" if is_prewash else "in dispenser"
    return f"{format_number(rounded)} {unit} {location}"


def calculate_dosing(
    soil_score: int,
    grease_factor: GreaseFactor | str,
    cycle: CycleType | str,
    quantity: LoadQuantity | str,
    water_hardness: WaterHardness | str = WaterHardness.MODERATE,
) -> DosingResult:
    """Work out pre-wash and main detergent doses.

    Args:
        soil_score: Load soil score (1-5)
        grease_factor: Grease tier, sizes the pre-wash dose
        cycle: Selected cycle
        quantity: Load size
        water_hardness: Water hardness (hard water adds 50%)

    Returns:
        Formatted pre-wash and main doses
    """
    grease_factor = GreaseFactor(grease_factor)
    cycle = CycleType(cycle)
    quantity = LoadQuantity(quantity)
    water_hardness = WaterHardness(water_hardness)
    hard_water = water_hardness == WaterHardness.HARD

    # Quick cycle has no pre-wash phase worth dosing
    if cycle == CycleType.QUICK:
        main_dose = QUICK_MAIN_DOSE
        if hard_water:
            main_dose *= HARD_WATER_MULTIPLIER
        main_dose *= QUANTITY_MULTIPLIERS[quantity]
        return DosingResult(prewash_dose=NO_PREWASH, main_dose=format_dose(main_dose, is_prewash=False))

    prewash_dose = DELICATE_PREWASH_DOSE if cycle == CycleType.DELICATE else PREWASH_DOSES[grease_factor]
    main_dose = get_main_dose_base(soil_score) * QUANTITY_MULTIPLIERS[quantity]

    if hard_water:
        prewash_dose *= HARD_WATER_MULTIPLIER
        main_dose *= HARD_WATER_MULTIPLIER

    return DosingResult(
        prewash_dose=format_dose(prewash_dose, is_prewash=True),
        main_dose=format_dose(main_dose, is_prewash=False),
    )
