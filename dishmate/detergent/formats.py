"""Detergent format reference data and head-to-head comparisons."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from dishmate.types import DetergentFormat


@dataclass(frozen=True)
class DetergentFormatInfo:
    """Fixed description of a detergent format.

    Attributes:
        prewash_capable: Can be dosed loose for the pre-wash phase
        enzyme_content: "high", "medium", "low" or "variable"
    """

    format: DetergentFormat
    pros: tuple[str, ...]
    cons: tuple[str, ...]
    best_for: tuple[str, ...]
    cost_per_wash: str
    prewash_capable: bool
    enzyme_content: str


@dataclass(frozen=True)
class CostRange:
    low: float
    high: float


class FormatComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    format1: DetergentFormatInfo
    format2: DetergentFormatInfo
    winner: DetergentFormat
    why_winner: str


class KeyPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    explanation: str


class PowderVsPodsExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    headline: str
    summary: str
    key_points: list[KeyPoint]
    conclusion: str


DETERGENT_INFO: dict[DetergentFormat, DetergentFormatInfo] = {
    DetergentFormat.POWDER: DetergentFormatInfo(
        format=DetergentFormat.POWDER,
        pros=(
            "Can add to pre-wash (critical for greasy dishes)",
            "Adjustable dosing for load size and soil level",
            "Generally highest enzyme content",
            "Most cost-effective per wash",
            "Better for hard water (can use more)",
        ),
        cons=(
            "Requires measuring",
            "Can clump in humid conditions",
            "Messier than pods",
        ),
        best_for=(
            "Greasy dishes",
            "Heavy soil loads",
            "Hard water areas",
            "Budget-conscious households",
            "Users who want optimal results",
        ),
        cost_per_wash="$0.10-0.20",
        prewash_capable=True,
        enzyme_content="high",
    ),
    DetergentFormat.PODS: DetergentFormatInfo(
        format=DetergentFormat.PODS,
        pros=(
            "Convenient - no measuring",
            "Clean and easy to handle",
            "Consistent dosing",
        ),
        cons=(
            "Cannot add to pre-wash phase",
            "Fixed dose (can't adjust for load)",
            "More expensive per wash",
            "Can leave residue if not fully dissolved",
            "Short cycles may not dissolve coating",
        ),
        best_for=(
            "Lightly soiled dishes only",
            "Users who prioritise convenience",
            "Normal to soft water areas",
        ),
        cost_per_wash="$0.25-0.50",
        prewash_capable=False,
        enzyme_content="medium",
    ),
    DetergentFormat.TABLETS: DetergentFormatInfo(
        format=DetergentFormat.TABLETS,
        pros=(
            "Convenient - no measuring",
            "Generally dissolve faster than pods",
            "Can sometimes be broken in half for light loads",
        ),
        cons=(
            "Still cannot add to pre-wash effectively",
            "Fixed dose for most",
            "More expensive than powder",
        ),
        best_for=(
            "Light to moderate soil",
            "Users who want balance of convenience and performance",
        ),
        cost_per_wash="$0.20-0.40",
        prewash_capable=False,
        enzyme_content="medium",
    ),
    DetergentFormat.LIQUID: DetergentFormatInfo(
        format=DetergentFormat.LIQUID,
        pros=(
            "Easy to measure and pour",
            "Dissolves quickly",
        ),
        cons=(
            "Often lower enzyme content",
            "Can leave smeary residue",
            "Less effective on tough soil",
            "Easy to overdose",
        ),
        best_for=(
            "Very light soil only",
            "Quick cycles",
        ),
        cost_per_wash="$0.15-0.30",
        prewash_capable=True,
        enzyme_content="low",
    ),
}

COST_PER_WASH: dict[DetergentFormat, CostRange] = {
    DetergentFormat.POWDER: CostRange(0.10, 0.20),
    DetergentFormat.PODS: CostRange(0.25, 0.50),
    DetergentFormat.TABLETS: CostRange(0.20, 0.40),
    DetergentFormat.LIQUID: CostRange(0.15, 0.30),
}

POWDER_WINS_REASONS: dict[DetergentFormat, str] = {
    DetergentFormat.PODS: "Powder can be used in pre-wash (pods cannot), has adjustable dosing, and costs less per wash.",
    DetergentFormat.LIQUID: "Powder has higher enzyme content and is more effective on tough soil than liquid.",
}
POWDER_WINS_DEFAULT_REASON = "Powder offers better cleaning performance and value than tablets."
PODS_BEAT_LIQUID_REASON = "Pods have more consistent dosing and typically better enzyme content than liquid."
SIMILAR_FORMATS_REASON = "Both formats have similar performance for light loads."


def get_detergent_format_info(detergent_format: DetergentFormat | str) -> DetergentFormatInfo:
    return DETERGENT_INFO[DetergentFormat(detergent_format)]


def get_all_detergent_formats() -> list[DetergentFormatInfo]:
    return list(DETERGENT_INFO.values())


def compare_formats(format1: DetergentFormat | str, format2: DetergentFormat | str) -> FormatComparison:
    """Pick the better of two formats.

    Powder wins whenever it is in the pair, pods beat liquid, and any other
    pairing goes to ``format1``.
    """
    format1 = DetergentFormat(format1)
    format2 = DetergentFormat(format2)
    pair = {format1, format2}

    if DetergentFormat.POWDER in pair:
        winner = DetergentFormat.POWDER
        other = format2 if format1 == DetergentFormat.POWDER else format1
        why_winner = POWDER_WINS_REASONS.get(other, POWDER_WINS_DEFAULT_REASON)
    elif pair == {DetergentFormat.PODS, DetergentFormat.LIQUID}:
        winner = DetergentFormat.PODS
        why_winner = PODS_BEAT_LIQUID_REASON
    else:
        winner = format1
        why_winner = SIMILAR_FORMATS_REASON

    return FormatComparison(
        format1=DETERGENT_INFO[format1],
        format2=DETERGENT_INFO[format2],
        winner=winner,
        why_winner=why_winner,
    )


WHY_POWDER_BEATS_PODS = PowderVsPodsExplanation(
    headline="Why Powder Beats Pods",
    summary=(
        "Your dishwasher runs a PRE-WASH phase before opening the detergent dispenser. "
        "Pods sit locked in the dispenser during this entire phase, doing nothing. "
        "That means the pre-wash uses only plain water - no cleaning power."
    ),
    key_points=[
        KeyPoint(
            title="The Pre-Wash Problem",
            explanation=(
                "Most dishwashers spray dishes with water before the main cycle to loosen food. "
                "This is when grease and heavy soil should be tackled. But with pods, there's no detergent "
                "in this phase - the pod is still sealed in the dispenser. Plain water can't cut grease, "
                "so it just spreads around and redeposits on your dishes."
            ),
        ),
        KeyPoint(
            title="Powder Solution",
            explanation=(
                "With powder, you can put 1-1.5 tablespoons loose in the door or tub floor "
                "BEFORE closing the door. This powder dissolves in the pre-wash phase, tackling grease "
                "and heavy soil when it matters most. Then the dispenser opens for the main wash with "
                "fresh detergent for the finishing clean."
            ),
        ),
        KeyPoint(
            title="Adjustable Dosing",
            explanation=(
                "Pods give you one fixed dose regardless of load size, soil level, or water hardness. "
                "Powder lets you use less for light loads (saving money) and more for heavy loads or hard water "
                "(getting cleaner dishes). This flexibility means better results and less waste."
            ),
        ),
        KeyPoint(
            title="Better Enzymes",
            explanation=(
                "Quality powder detergents typically have higher concentrations of enzymes "
                "(proteases for protein, amylases for starch, lipases for fats). These enzymes do the "
                "real cleaning work. Pods often sacrifice enzyme content to fit everything in a small package."
            ),
        ),
        KeyPoint(
            title="Cost Savings",
            explanation=(
                "Powder costs $0.10-0.20 per wash compared to $0.25-0.50 for pods. "
                "Over a year of daily use, that's $50-100+ in savings - while getting cleaner dishes."
            ),
        ),
    ],
    conclusion=(
        "The convenience of pods comes at the cost of cleaning performance. "
        "If you're having any issues with greasy dishes, residue, or food not coming off, "
        "switching to powder and using the pre-wash technique will make an immediate difference."
    ),
)


def get_why_powder_beats_pods() -> PowderVsPodsExplanation:
    return WHY_POWDER_BEATS_PODS
