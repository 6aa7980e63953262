"""Detergent format advisor.

Rules (in priority order, first match wins):
1. Greasy dish complaints: powder, the only format usable in the pre-wash
2. Residue complaints: powder (reasoning depends on water and current format)
3. Convenience first, light soil, soft or moderate water: pods
4. Cost first: powder
5. Eco first: powder
6. Heavy, greasy or protein soil: powder
7. Hard water: powder
8. Default: powder
"""

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from dishmate.core.numbers import round_half_up
from dishmate.detergent.formats import COST_PER_WASH
from dishmate.types import DetergentFormat, MainConcern, SoilType, UsagePattern, WaterHardness

HEAVY_SOILS = frozenset({SoilType.HEAVY, SoilType.GREASY, SoilType.PROTEIN})

LOADS_PER_WEEK: dict[UsagePattern, int] = {
    UsagePattern.DAILY: 7,
    UsagePattern.REGULAR: 5,
    UsagePattern.OCCASIONAL: 2,
}
WEEKS_PER_YEAR = 52


class DetergentInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_format: DetergentFormat | None = None
    water_hardness: WaterHardness
    usage_pattern: UsagePattern
    main_concern: MainConcern
    typical_soil_types: list[SoilType] = Field(default_factory=list)
    has_greasy_issues: bool = False
    has_residue_issues: bool = False

    @property
    def has_heavy_soil(self) -> bool:
        return any(soil in HEAVY_SOILS for soil in self.typical_soil_types)


class DetergentRecommendation(BaseModel):
    """Recommended format with how to use it and what it costs per year.

    ``warnings`` is None when there is nothing to flag.
    """

    model_config = ConfigDict(frozen=True)

    recommended_format: DetergentFormat
    reasoning: str
    usage_instructions: list[str]
    warnings: list[str] | None = None
    cost_comparison: str
    alternative_format: DetergentFormat | None = None
    alternative_reason: str | None = None


@dataclass(frozen=True)
class DetergentRule:
    name: str
    applies: Callable[[DetergentInput], bool]
    recommended_format: DetergentFormat
    reasoning: str
    warning: str | None = None
    alternative_format: DetergentFormat | None = None
    alternative_reason: str | None = None


DETERGENT_RULES: tuple[DetergentRule, ...] = (
    DetergentRule(
        name="greasy_issues_with_pods",
        applies=lambda d: d.has_greasy_issues and d.current_format == DetergentFormat.PODS,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Greasy dishes need pre-wash detergent. Powder is the only format that lets you add "
            "detergent to the pre-wash phase. This is critical because your dishwasher runs a pre-wash "
            "BEFORE opening the dispenser - pods sit there doing nothing while plain water fails to cut grease."
        ),
        warning="Your current pods cannot help with the pre-wash phase. This is likely causing your greasy dish issues.",
    ),
    DetergentRule(
        name="greasy_issues",
        applies=lambda d: d.has_greasy_issues,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Greasy dishes need pre-wash detergent. Powder is the only format that lets you add "
            "detergent to the pre-wash phase. This is critical because your dishwasher runs a pre-wash "
            "BEFORE opening the dispenser - pods sit there doing nothing while plain water fails to cut grease."
        ),
    ),
    DetergentRule(
        name="residue_hard_water",
        applies=lambda d: d.has_residue_issues and d.water_hardness == WaterHardness.HARD,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Residue in hard water areas usually means you need MORE detergent. Powder lets you "
            "adjust the dose - try doubling what you currently use. Pods give you a fixed amount that's "
            "often not enough for hard water."
        ),
    ),
    DetergentRule(
        name="residue_undissolved",
        applies=lambda d: d.has_residue_issues
        and d.current_format in (DetergentFormat.PODS, DetergentFormat.LIQUID),
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "White residue from pods often means they're not dissolving fully. Powder dissolves "
            "instantly and lets you control the amount. With soft water, you might actually need less detergent."
        ),
    ),
    DetergentRule(
        name="residue_issues",
        applies=lambda d: d.has_residue_issues,
        recommended_format=DetergentFormat.POWDER,
        reasoning="Powder gives you the control to adjust dosing until you find the right amount for your water.",
    ),
    DetergentRule(
        name="convenience_light_duty",
        applies=lambda d: d.main_concern == MainConcern.CONVENIENCE
        and not d.has_heavy_soil
        and d.water_hardness != WaterHardness.HARD,
        recommended_format=DetergentFormat.PODS,
        reasoning=(
            "Pods work fine for lightly soiled dishes in soft/moderate water areas. They're convenient "
            "and give consistent results for everyday loads."
        ),
        warning="If you start seeing greasy residue, switch to powder - pods can't help with pre-wash.",
        alternative_format=DetergentFormat.POWDER,
        alternative_reason=(
            "Switch to powder if you ever need to tackle greasy or heavily soiled items - "
            "pods can't handle the pre-wash."
        ),
    ),
    DetergentRule(
        name="cost_first",
        applies=lambda d: d.main_concern == MainConcern.COST,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Powder is the most cost-effective option at $0.10-0.20 per wash compared to $0.25-0.50 for pods. "
            "It also cleans better because you can add pre-wash detergent and adjust for load size."
        ),
    ),
    DetergentRule(
        name="eco_first",
        applies=lambda d: d.main_concern == MainConcern.ECO,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Powder typically has the lowest environmental impact: less packaging, more concentrated, "
            "and no plastic pod coatings. You can also use less for light loads, reducing waste."
        ),
    ),
    DetergentRule(
        name="heavy_soil",
        applies=lambda d: d.has_heavy_soil,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "For heavy soil (baked-on, greasy, protein), powder is essential. You need the pre-wash "
            "capability and ability to use more detergent. Pods will leave you with dirty dishes."
        ),
    ),
    DetergentRule(
        name="hard_water",
        applies=lambda d: d.water_hardness == WaterHardness.HARD,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Hard water needs more detergent than pods provide. With powder, you can increase the dose "
            "50-100% to compensate. Pods give you a fixed amount that's often insufficient."
        ),
        warning="In hard water areas, you'll need about 50% more detergent than packet recommendations.",
    ),
    DetergentRule(
        name="clean_dishes_first",
        applies=lambda d: d.main_concern == MainConcern.CLEAN_DISHES,
        recommended_format=DetergentFormat.POWDER,
        reasoning=(
            "Powder gives you the best combination of cleaning power, flexibility, and value. "
            "It's the only format that works with the pre-wash phase, and you can adjust the dose for each load."
        ),
        alternative_format=DetergentFormat.TABLETS,
        alternative_reason=(
            "Tablets are a reasonable middle ground if you want some convenience, but powder still cleans better."
        ),
    ),
)

DEFAULT_RULE = DetergentRule(
    name="default",
    applies=lambda d: True,
    recommended_format=DetergentFormat.POWDER,
    reasoning=(
        "Powder gives you the best combination of cleaning power, flexibility, and value. "
        "It's the only format that works with the pre-wash phase, and you can adjust the dose for each load."
    ),
)


def select_detergent_rule(detergent_input: DetergentInput) -> DetergentRule:
    for rule in DETERGENT_RULES:
        if rule.applies(detergent_input):
            logger.debug("Detergent rule triggered", rule=rule.name, recommended_format=rule.recommended_format)
            return rule
    logger.debug("No detergent rule matched, using default", recommended_format=DEFAULT_RULE.recommended_format)
    return DEFAULT_RULE


def get_usage_instructions(
    detergent_format: DetergentFormat | str,
    water_hardness: WaterHardness | str,
    heavy_soil: bool,
) -> list[str]:
    detergent_format = DetergentFormat(detergent_format)
    hard_water = WaterHardness(water_hardness) == WaterHardness.HARD
    instructions: list[str] = []

    if detergent_format == DetergentFormat.POWDER:
        instructions.append("PRE-WASH: Put 1-1.5 tablespoons loose in the door or on the tub floor before closing.")
        instructions.append("MAIN WASH: Put 1.5-2 tablespoons in the dispenser compartment.")
        if hard_water:
            instructions.append("HARD WATER: Increase both doses by 50% (so about 2 tbsp pre-wash, 3 tbsp main).")
        if heavy_soil:
            instructions.append("HEAVY SOIL: Use the maximum doses and run Intensive or Normal cycle (not Quick).")
        instructions.append("STORAGE: Keep in a dry place with lid sealed to prevent clumping.")
    elif detergent_format in (DetergentFormat.PODS, DetergentFormat.TABLETS):
        instructions.append("Place one pod/tablet in the dispenser compartment before running.")
        instructions.append("Make sure the dispenser door isn't blocked by dishes.")
        instructions.append("Use Normal or longer cycles - Quick may not dissolve them fully.")
        instructions.append("Handle with dry hands - moisture makes them sticky.")
        if hard_water:
            instructions.append(
                "NOTE: Pods may not provide enough detergent for hard water. "
                "Consider switching to powder if you see residue."
            )
    else:
        instructions.append("Fill dispenser to the line marked for your load size.")
        instructions.append("Don't overfill - liquid spreads easily.")
        instructions.append("Can add a small amount to the door for pre-wash if needed.")
        instructions.append("Best for light loads and quick cycles.")

    return instructions


def generate_cost_comparison(detergent_format: DetergentFormat | str, usage_pattern: UsagePattern | str) -> str:
    """Yearly cost of a format, with the saving against pods for any other format.

    Example: "Powder costs ~$36-73/year (364 loads). That's $18-146 less than pods."
    """
    detergent_format = DetergentFormat(detergent_format)
    loads_per_year = LOADS_PER_WEEK[UsagePattern(usage_pattern)] * WEEKS_PER_YEAR

    cost = COST_PER_WASH[detergent_format]
    yearly_low = round_half_up(cost.low * loads_per_year)
    yearly_high = round_half_up(cost.high * loads_per_year)

    if detergent_format == DetergentFormat.PODS:
        return f"Estimated cost: ~${yearly_low}-{yearly_high}/year ({loads_per_year} loads)."

    pods = COST_PER_WASH[DetergentFormat.PODS]
    savings_low = round_half_up(pods.low * loads_per_year) - yearly_high
    savings_high = round_half_up(pods.high * loads_per_year) - yearly_low

    return (
        f"{detergent_format.capitalize()} costs ~${yearly_low}-{yearly_high}/year ({loads_per_year} loads). "
        f"That's ${savings_low}-{savings_high} less than pods."
    )


def get_detergent_recommendation(detergent_input: DetergentInput) -> DetergentRecommendation:
    """Recommend a detergent format for a household.

    Args:
        detergent_input: Water, usage, main concern, typical soil and any reported issues

    Returns:
        DetergentRecommendation with usage instructions and a yearly cost comparison
    """
    rule = select_detergent_rule(detergent_input)
    recommended_format = rule.recommended_format

    return DetergentRecommendation(
        recommended_format=recommended_format,
        reasoning=rule.reasoning,
        usage_instructions=get_usage_instructions(
            recommended_format,
            detergent_input.water_hardness,
            detergent_input.has_heavy_soil,
        ),
        warnings=[rule.warning] if rule.warning else None,
        cost_comparison=generate_cost_comparison(recommended_format, detergent_input.usage_pattern),
        alternative_format=rule.alternative_format,
        alternative_reason=rule.alternative_reason,
    )
