"""Rinse aid guide: dial setting, spot diagnosis and drying tips."""

from loguru import logger
from pydantic import BaseModel, ConfigDict

from dishmate.types import ItemCategory, RinseAidSetting, SpotCause, WaterHardness


class RinseAidInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    water_hardness: WaterHardness
    has_spot_issues: bool
    has_drying_issues: bool
    dispenser_empty: bool = False


class RinseAidRecommendation(BaseModel):
    """Dial setting and tips; ``urgent_actions`` is None when nothing is urgent."""

    model_config = ConfigDict(frozen=True)

    setting_recommendation: RinseAidSetting
    reasoning: str
    usage_tips: list[str]
    urgent_actions: list[str] | None = None


class SpotCheckInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    spots_wipe_off: bool
    needs_vinegar_to_remove: bool = False
    water_hardness: WaterHardness


class SpotDiagnosis(BaseModel):
    model_config = ConfigDict(frozen=True)

    likely_cause: SpotCause
    solutions: list[str]
    is_permanent: bool
    prevention_tips: list[str]


class Misconception(BaseModel):
    model_config = ConfigDict(frozen=True)

    misconception: str
    truth: str


class RinseAidExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    what_it_is: str
    how_it_works: list[str]
    benefits: list[str]
    common_misconceptions: list[Misconception]


USAGE_TIPS: tuple[str, ...] = (
    "Rinse aid typically lasts 1-2 months before needing refill.",
    "The setting dial is usually on the rinse aid dispenser cap.",
    "If you see blue streaks on dishes, reduce the setting.",
    "Open door slightly after cycle to let steam escape and improve drying.",
)

REFILL_NOW = "Refill rinse aid dispenser immediately"


def _select_setting(rinse_input: RinseAidInput) -> tuple[RinseAidSetting, str]:
    has_issues = rinse_input.has_spot_issues or rinse_input.has_drying_issues

    if rinse_input.water_hardness == WaterHardness.HARD:
        return (
            RinseAidSetting.MAXIMUM,
            "With hard water, maximum rinse aid helps prevent mineral deposits from forming as water dries on dishes.",
        )

    if rinse_input.water_hardness == WaterHardness.MODERATE:
        setting = RinseAidSetting.HIGH if has_issues else RinseAidSetting.MEDIUM
        if rinse_input.has_spot_issues:
            return setting, "Moderate water with spot issues benefits from increased rinse aid to help water sheet off."
        return setting, "Medium setting works well for moderate water hardness."

    if rinse_input.water_hardness == WaterHardness.SOFT:
        if has_issues:
            return (
                RinseAidSetting.MEDIUM,
                "Even with soft water, spot or drying issues indicate you could benefit from more rinse aid.",
            )
        return (
            RinseAidSetting.LOW,
            "Soft water needs less rinse aid. Low setting prevents residue from excess rinse aid.",
        )

    return (
        RinseAidSetting.MEDIUM,
        "Medium is a good starting point until you test your water hardness. Adjust based on results.",
    )


def get_rinse_aid_recommendation(rinse_input: RinseAidInput) -> RinseAidRecommendation:
    """Recommend a rinse aid dial setting.

    Hard water always gets maximum. Moderate water goes to high when spots
    or drying problems are reported, soft water goes from low to medium in
    the same case, and untested water starts at medium. An empty dispenser
    adds an urgent refill action.
    """
    setting, reasoning = _select_setting(rinse_input)
    urgent_actions = [REFILL_NOW] if rinse_input.dispenser_empty else None

    logger.debug(
        "Rinse aid setting selected",
        water_hardness=rinse_input.water_hardness,
        setting=setting,
        dispenser_empty=rinse_input.dispenser_empty,
    )

    return RinseAidRecommendation(
        setting_recommendation=setting,
        reasoning=reasoning,
        usage_tips=list(USAGE_TIPS),
        urgent_actions=urgent_actions,
    )


SPOT_DIAGNOSES: dict[SpotCause, SpotDiagnosis] = {
    SpotCause.INSUFFICIENT_RINSE_AID: SpotDiagnosis(
        likely_cause=SpotCause.INSUFFICIENT_RINSE_AID,
        is_permanent=False,
        solutions=[
            "Increase rinse aid setting to maximum.",
            "Check rinse aid dispenser is full.",
            "Open door after cycle to let steam escape.",
            "Make sure items are angled for water to run off.",
        ],
        prevention_tips=[
            "Keep rinse aid topped up - check monthly.",
            "Set rinse aid dial higher for hard water.",
            "Don't overload - items need space for water to drain.",
        ],
    ),
    SpotCause.HARD_WATER_DEPOSITS: SpotDiagnosis(
        likely_cause=SpotCause.HARD_WATER_DEPOSITS,
        is_permanent=False,
        solutions=[
            "Soak affected items in white vinegar for 15-30 minutes.",
            "Increase detergent amount by 50% for hard water.",
            "Use dishwasher salt if your machine has a salt compartment.",
            "Increase rinse aid to maximum.",
            "Run a cleaning cycle with vinegar to clear machine buildup.",
        ],
        prevention_tips=[
            "Address your water hardness - test and adjust detergent.",
            "Fill salt compartment if available.",
            "Monthly vinegar cleaning cycle prevents buildup.",
            "Consider a water softener for severe hard water.",
        ],
    ),
    SpotCause.ETCHING: SpotDiagnosis(
        likely_cause=SpotCause.ETCHING,
        is_permanent=True,
        solutions=[
            "Unfortunately, etching is permanent glass damage.",
            "The cloudy surface cannot be removed or restored.",
            "Affected glasses may still be usable but won't look clear.",
        ],
        prevention_tips=[
            "Use less detergent - excess detergent causes etching over time.",
            "Reduce rinse aid if you have soft water.",
            "Use Delicate cycle for fine glassware.",
            "Hand wash valuable or antique glasses.",
            "Avoid high-temperature cycles for glassware.",
        ],
    ),
}


def diagnose_spot_issue(spot_input: SpotCheckInput) -> SpotDiagnosis:
    """Spots that wipe off are a rinse aid problem, spots that need vinegar are
    mineral deposits, and anything else is etching."""
    if spot_input.spots_wipe_off:
        cause = SpotCause.INSUFFICIENT_RINSE_AID
    elif spot_input.needs_vinegar_to_remove:
        cause = SpotCause.HARD_WATER_DEPOSITS
    else:
        cause = SpotCause.ETCHING

    logger.debug("Spot issue diagnosed", cause=cause)
    return SPOT_DIAGNOSES[cause]


DRYING_TIPS: dict[ItemCategory, tuple[str, ...]] = {
    ItemCategory.PLASTIC: (
        "Plastic holds less heat than ceramic or glass, so it doesn't dry as well.",
        "Always place plastic on the top rack, away from the heating element.",
        "Plastic containers will likely need a quick hand-dry - this is normal.",
        "Crack the door open after the cycle to let steam escape.",
        "Consider removing plastic items first and letting ceramics/glass dry naturally.",
    ),
    ItemCategory.GLASS: (
        "Glasses should dry well if rinse aid is set correctly.",
        "Angle glasses between tines, not over them, for better water runoff.",
        "Open door slightly after cycle to prevent condensation spots.",
        "If glasses are still spotty, increase rinse aid setting.",
        "For perfect results, unload bottom rack first so drops don't fall on glasses below.",
    ),
    ItemCategory.CERAMIC: (
        "Ceramics retain heat well and typically dry fastest.",
        "Angle plates and bowls for water to run off.",
        "Heavy ceramics may have pools in concave areas - tip to drain.",
        "Let the heated dry cycle complete for best results.",
    ),
    ItemCategory.MIXED: (
        "Open the door slightly after the cycle to let steam escape.",
        "Unload bottom rack first so drips don't fall on dry items below.",
        "Plastic will need a quick wipe - this is normal.",
        "Increase rinse aid if glasses or cutlery still have spots.",
        "Make sure rinse aid dispenser is full for best drying.",
    ),
}


def get_drying_tips(item_category: ItemCategory | str) -> list[str]:
    return list(DRYING_TIPS[ItemCategory(item_category)])


RINSE_AID_EXPLANATION = RinseAidExplanation(
    title="How Rinse Aid Works",
    what_it_is=(
        "Rinse aid is a surfactant that reduces the surface tension of water, helping it sheet off dishes "
        "instead of forming droplets."
    ),
    how_it_works=[
        "Water naturally forms droplets due to surface tension.",
        'Rinse aid breaks this surface tension, making water "sheet" off dishes.',
        "When water sheets off, it takes minerals and residue with it.",
        "Less water remaining on dishes means fewer spots when it dries.",
        "Rinse aid is released during the final rinse, not during washing.",
    ],
    benefits=[
        "Reduces water spots on glasses and cutlery",
        "Improves drying - dishes dry faster and more completely",
        "Prevents mineral deposits from hard water",
        "Helps plastic items dry better (they retain less heat)",
        "Makes unloading easier - no towel-drying needed",
    ],
    common_misconceptions=[
        Misconception(
            misconception='Rinse aid is optional if I use pods with "rinse aid included"',
            truth="Pod rinse aid is minimal and releases during wash, not the rinse. "
            "Fill the dispenser for best results.",
        ),
        Misconception(
            misconception="Rinse aid adds chemicals to my dishes",
            truth="Rinse aid is rinsed away with water. The tiny amount remaining evaporates as dishes dry.",
        ),
        Misconception(
            misconception="More rinse aid is always better",
            truth="Too much can leave a blue/oily film on dishes. Adjust to your water hardness.",
        ),
        Misconception(
            misconception="I don't need rinse aid with soft water",
            truth="Even soft water benefits from rinse aid for drying. You just need less of it.",
        ),
    ],
)


def get_rinse_aid_explanation() -> RinseAidExplanation:
    return RINSE_AID_EXPLANATION


def get_rinse_aid_settings() -> list[RinseAidSetting]:
    return list(RinseAidSetting)
