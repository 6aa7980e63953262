"""Wash cycle reference: what each programme does, head-to-head comparisons and explainers."""

from dataclasses import dataclass

from loguru import logger
from pydantic import BaseModel, ConfigDict

from dishmate.types import CycleType, ItemType, SoilType, UsageTier


@dataclass(frozen=True)
class CycleInfo:
    """Fixed description of a wash cycle.

    Attributes:
        enzyme_friendly: Temperature and duration let detergent enzymes work
        energy_usage: Energy tier, used to break ties in comparisons
    """

    cycle: CycleType
    name: str
    duration: str
    temperature: str
    description: str
    how_it_works: tuple[str, ...]
    best_for: tuple[str, ...]
    not_suitable_for: tuple[str, ...]
    enzyme_friendly: bool
    energy_usage: UsageTier
    water_usage: UsageTier
    detergent_notes: str


class CycleComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    cycle1: CycleInfo
    cycle2: CycleInfo
    recommendation: CycleType
    reason: str


class CycleSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    cycle: CycleType
    reason: str


class CycleEducation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    key_takeaway: str


CYCLE_INFO: dict[CycleType, CycleInfo] = {
    CycleType.QUICK: CycleInfo(
        cycle=CycleType.QUICK,
        name="Quick / Express",
        duration="30-45 minutes",
        temperature="45-55°C",
        description="A short cycle for lightly soiled dishes that need a quick clean.",
        how_it_works=(
            "Skips or shortens the pre-wash phase.",
            "Uses moderate temperature to clean quickly.",
            "Limited enzyme activation time.",
            "Often skips the drying phase.",
        ),
        best_for=(
            "Recently used dishes with light residue",
            "Glasses and cups with just water marks",
            "Items needed soon for another meal",
            "Lightly soiled plates from light meals",
        ),
        not_suitable_for=(
            "Greasy dishes (grease needs pre-wash detergent)",
            "Protein residue like egg or cheese (needs enzyme time)",
            "Baked-on or dried food",
            "Heavily soiled pots and pans",
        ),
        enzyme_friendly=False,
        energy_usage=UsageTier.LOW,
        water_usage=UsageTier.MEDIUM,
        detergent_notes="No pre-wash detergent needed. Use less main detergent (about 1 tablespoon) "
        "since there's less time to rinse.",
    ),
    CycleType.ECO: CycleInfo(
        cycle=CycleType.ECO,
        name="Eco / Energy Saver",
        duration="2-3 hours",
        temperature="40-50°C (lower than normal)",
        description="An energy-efficient cycle that uses lower temperatures but runs longer, "
        "giving enzymes time to work.",
        how_it_works=(
            "Uses lower water temperature to save energy.",
            "Runs much longer to compensate for lower heat.",
            "Extended enzyme activation time for thorough cleaning.",
            "Pre-wash phase included (add detergent to door).",
            "Efficient use of water through multiple short cycles.",
        ),
        best_for=(
            "Everyday dishes with normal soil",
            "Protein-based residue (eggs, cheese, dairy)",
            "Starchy residue (pasta, rice, potato)",
            "When you have time and want to save energy",
            "Overnight loads",
        ),
        not_suitable_for=(
            "Heavily baked-on or burnt food (needs higher temp)",
            "When you need dishes quickly",
            "Very greasy loads (may need higher temp)",
        ),
        enzyme_friendly=True,
        energy_usage=UsageTier.LOW,
        water_usage=UsageTier.LOW,
        detergent_notes="Add 1 tablespoon pre-wash detergent in the door, 1.5 tablespoons in the dispenser. "
        "Enzymes work best in this cycle.",
    ),
    CycleType.NORMAL: CycleInfo(
        cycle=CycleType.NORMAL,
        name="Normal / Regular",
        duration="1-1.5 hours",
        temperature="55-65°C",
        description="The standard cycle that balances cleaning power, time, and efficiency.",
        how_it_works=(
            "Full pre-wash phase (add detergent to door).",
            "Main wash at moderate-high temperature.",
            "Adequate enzyme activation time.",
            "Proper rinse and dry phases.",
        ),
        best_for=(
            "Mixed loads with various soil levels",
            "Everyday dinner dishes",
            "When you're unsure which cycle to use",
            "Most general dishwashing needs",
        ),
        not_suitable_for=(
            "Very lightly soiled items (wastes energy)",
            "Extremely heavy soil (may need intensive)",
            "Delicate items that can't handle the heat",
        ),
        enzyme_friendly=True,
        energy_usage=UsageTier.MEDIUM,
        water_usage=UsageTier.MEDIUM,
        detergent_notes="Add 1 tablespoon pre-wash detergent in the door, 1.5-2 tablespoons in the dispenser.",
    ),
    CycleType.INTENSIVE: CycleInfo(
        cycle=CycleType.INTENSIVE,
        name="Intensive / Heavy",
        duration="1.5-2.5 hours",
        temperature="65-75°C",
        description="A powerful cycle with higher temperatures for heavily soiled dishes.",
        how_it_works=(
            "Extended pre-wash phase with higher water volume.",
            "Main wash at high temperature.",
            "Additional wash phases for stubborn soil.",
            "Higher water pressure.",
            "Extended drying with heat.",
        ),
        best_for=(
            "Baked-on and burnt food",
            "Very greasy pots and pans",
            "Casserole dishes and roasting trays",
            "Sunday roast cleanup",
            "Items that sat overnight with food",
        ),
        not_suitable_for=(
            "Delicate items (high heat can damage)",
            "Plastic containers (may warp)",
            "Lightly soiled items (wastes energy)",
            "Crystal or fine glassware",
        ),
        enzyme_friendly=False,  # too hot for enzymes
        energy_usage=UsageTier.HIGH,
        water_usage=UsageTier.HIGH,
        detergent_notes="Use maximum pre-wash detergent (1.5 tablespoons) and main dose (2.5+ tablespoons). "
        "The high temperature does most of the work.",
    ),
    CycleType.DELICATE: CycleInfo(
        cycle=CycleType.DELICATE,
        name="Delicate / Glass",
        duration="1-1.5 hours",
        temperature="40-45°C",
        description="A gentle cycle with lower pressure and temperature for fragile items.",
        how_it_works=(
            "Lower water pressure to protect items.",
            "Lower temperature to prevent thermal shock.",
            "Gentler spray patterns.",
            "May skip heated drying to prevent stress.",
        ),
        best_for=(
            "Fine glassware and crystal",
            "China and porcelain",
            "Wine glasses",
            'Items marked "top rack only"',
            "Antique or valuable dishes",
        ),
        not_suitable_for=(
            "Heavily soiled items",
            "Greasy dishes",
            "Baked-on food",
            "Items that need thorough sanitising",
        ),
        enzyme_friendly=True,
        energy_usage=UsageTier.LOW,
        water_usage=UsageTier.MEDIUM,
        detergent_notes="Use less detergent (0.5 tablespoon pre-wash, 1 tablespoon main). "
        "Too much can leave residue on delicate items.",
    ),
    CycleType.SANITISE: CycleInfo(
        cycle=CycleType.SANITISE,
        name="Sanitise / Hygiene",
        duration="1.5-2 hours",
        temperature="70-80°C (final rinse)",
        description="A high-temperature cycle designed to kill bacteria and germs.",
        how_it_works=(
            "Normal wash phases.",
            "Final rinse at very high temperature (70°C+).",
            "Extended high-temperature phase to sanitise.",
            "Hot air drying.",
        ),
        best_for=(
            "Baby bottles and feeding equipment",
            "Chopping boards (especially after raw meat)",
            "Items used by someone who was sick",
            "Pet bowls",
            "When hygiene is the top priority",
        ),
        not_suitable_for=(
            "Plastic items (will warp)",
            "Delicate glassware",
            "Items not rated for high temperatures",
            "Everyday loads (wastes energy)",
        ),
        enzyme_friendly=False,  # final rinse denatures enzymes
        energy_usage=UsageTier.HIGH,
        water_usage=UsageTier.MEDIUM,
        detergent_notes="Standard detergent amounts. The high temperature does the sanitising work.",
    ),
}

# Verdicts for specific pairings, keyed by the unordered pair
PAIR_VERDICTS: dict[frozenset[CycleType], CycleSuggestion] = {
    frozenset({CycleType.QUICK, CycleType.ECO}): CycleSuggestion(
        cycle=CycleType.ECO,
        reason="Eco is better for cleaning because it gives enzymes time to work. Quick should only be used "
        "for very lightly soiled items when time is critical.",
    ),
    frozenset({CycleType.QUICK, CycleType.NORMAL}): CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Normal provides better cleaning for most loads. Quick often leaves residue on anything beyond "
        "water-marked glasses.",
    ),
    frozenset({CycleType.ECO, CycleType.NORMAL}): CycleSuggestion(
        cycle=CycleType.ECO,
        reason="For everyday loads, Eco saves energy while cleaning just as well (or better) thanks to longer "
        "enzyme time. Use Normal when you need dishes faster.",
    ),
    frozenset({CycleType.NORMAL, CycleType.INTENSIVE}): CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Normal handles most loads well. Only use Intensive for heavily baked-on or burnt food - "
        "it uses significantly more energy.",
    ),
    frozenset({CycleType.DELICATE, CycleType.NORMAL}): CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Normal is suitable for most items. Only use Delicate for fine glassware, crystal, or china "
        "that could be damaged by regular cycles.",
    ),
}

ENERGY_RANK: dict[UsageTier, int] = {UsageTier.LOW: 1, UsageTier.MEDIUM: 2, UsageTier.HIGH: 3}

SOIL_TYPE_CYCLES: dict[SoilType, CycleSuggestion] = {
    SoilType.LIGHT: CycleSuggestion(
        cycle=CycleType.QUICK,
        reason="Light soil only needs a quick wash - saves time and energy.",
    ),
    SoilType.EVERYDAY: CycleSuggestion(
        cycle=CycleType.ECO,
        reason="Everyday soil cleans well in Eco mode - enzymes handle it with time.",
    ),
    SoilType.STARCHY: CycleSuggestion(
        cycle=CycleType.ECO,
        reason="Starch dissolves well with enzyme time. Eco's longer cycle is perfect.",
    ),
    SoilType.PROTEIN: CycleSuggestion(
        cycle=CycleType.ECO,
        reason="Protein needs enzyme time to break down. Eco's long, low-temp cycle is ideal.",
    ),
    SoilType.ACIDIC: CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Acidic foods can stain if left too long. Normal cycle runs faster to prevent this.",
    ),
    SoilType.GREASY: CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Grease needs heat to emulsify. Normal's higher temperature handles it well.",
    ),
    SoilType.HEAVY: CycleSuggestion(
        cycle=CycleType.INTENSIVE,
        reason="Baked-on and burnt food needs the high temperature of Intensive cycle.",
    ),
}

_COOKWARE_SUGGESTION = CycleSuggestion(
    cycle=CycleType.INTENSIVE,
    reason="Cookware often has heavy soil. Intensive handles baked-on residue best.",
)

ITEM_TYPE_CYCLES: dict[ItemType, CycleSuggestion] = {
    ItemType.DELICATE: CycleSuggestion(
        cycle=CycleType.DELICATE,
        reason="Delicate items need lower pressure and temperature to prevent damage.",
    ),
    ItemType.BABY_ITEMS: CycleSuggestion(
        cycle=CycleType.SANITISE,
        reason="Baby items benefit from the high-temperature sanitise cycle to kill germs.",
    ),
    ItemType.CONTAINERS: CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Plastic containers should avoid high heat. Normal is hot enough to clean but won't warp.",
    ),
    ItemType.POTS: _COOKWARE_SUGGESTION,
    ItemType.PANS: _COOKWARE_SUGGESTION,
    ItemType.BAKEWARE: _COOKWARE_SUGGESTION,
    ItemType.GLASSES: CycleSuggestion(
        cycle=CycleType.NORMAL,
        reason="Regular glasses are fine in Normal. Use Delicate only for fine crystal or wine glasses.",
    ),
}

DEFAULT_ITEM_SUGGESTION = CycleSuggestion(
    cycle=CycleType.NORMAL,
    reason="Normal cycle works well for most dish types.",
)


def get_cycle_info(cycle: CycleType | str) -> CycleInfo | None:
    info = CYCLE_INFO.get(cycle)
    if info is None:
        logger.info("Unknown cycle", cycle=cycle)
    return info


def get_all_cycles() -> list[CycleInfo]:
    return list(CYCLE_INFO.values())


def compare_cycles(cycle1: CycleType | str, cycle2: CycleType | str) -> CycleComparison:
    """Compare two cycles and recommend one for general use.

    Known pairings have a fixed verdict. Any other pairing goes to the
    lower-energy cycle, with ties going to ``cycle1``.
    """
    info1 = CYCLE_INFO[CycleType(cycle1)]
    info2 = CYCLE_INFO[CycleType(cycle2)]

    verdict = PAIR_VERDICTS.get(frozenset({info1.cycle, info2.cycle}))
    if verdict is None:
        winner = info1 if ENERGY_RANK[info1.energy_usage] <= ENERGY_RANK[info2.energy_usage] else info2
        verdict = CycleSuggestion(
            cycle=winner.cycle,
            reason=f"{winner.name} uses less energy while providing adequate cleaning for most loads.",
        )

    return CycleComparison(cycle1=info1, cycle2=info2, recommendation=verdict.cycle, reason=verdict.reason)


def get_cycle_for_soil_type(soil_type: SoilType | str) -> CycleSuggestion:
    return SOIL_TYPE_CYCLES[SoilType(soil_type)]


def get_cycle_for_item_type(item_type: ItemType | str) -> CycleSuggestion:
    return ITEM_TYPE_CYCLES.get(ItemType(item_type), DEFAULT_ITEM_SUGGESTION)


# -----------------------------
# Educational content
# -----------------------------
ENZYME_EXPLANATION = CycleEducation(
    title="How Enzymes Work in Your Dishwasher",
    content="""Dishwasher detergent contains enzymes - biological catalysts that break down specific types of food residue:

• PROTEASES break down protein (eggs, cheese, meat, dairy)
• AMYLASES break down starch (pasta, rice, potato, bread)
• LIPASES break down fats and oils

Enzymes work best at moderate temperatures (40-55°C) and need TIME to work. This is why:
- ECO cycles run longer at lower temps - giving enzymes maximum working time
- QUICK cycles often leave residue - not enough time for enzymes to work
- INTENSIVE cycles use high heat instead of enzymes - temperature does the cleaning

The practical takeaway: For protein and starch residue, ECO cycle often cleans BETTER than shorter, hotter cycles because it gives enzymes the time they need.""",
    key_takeaway="Longer isn't slower cleaning - it's smarter cleaning. Enzymes need time, not heat.",
)

PREWASH_EXPLANATION = CycleEducation(
    title="Why Pre-Wash Detergent Matters",
    content="""Every dishwasher runs a PRE-WASH phase before the main cycle. This is when:
- Water sprays to loosen food
- The detergent DISPENSER is still CLOSED

If you use pods or tablets, they sit in the closed dispenser during this entire phase. The pre-wash uses only plain water - no cleaning power.

With POWDER, you can put some loose in the door or tub floor. This powder:
- Dissolves immediately when water hits
- Provides cleaning power during pre-wash
- Tackles grease before it can spread

This is why powder often cleans greasy dishes better than pods - it's not better detergent, it's using the pre-wash phase that pods waste.""",
    key_takeaway="Add 1-1.5 tablespoons of powder loose in the door for pre-wash. The rest goes in the dispenser.",
)

TEMPERATURE_EXPLANATION = CycleEducation(
    title="Understanding Cycle Temperatures",
    content="""Different temperatures serve different purposes:

40-50°C (ECO, DELICATE):
- Optimal for enzyme activity
- Gentle on plastics and delicates
- Saves energy
- Needs longer time to clean

55-65°C (NORMAL):
- Good balance of enzyme activity and cleaning power
- Effective on most soil types
- Standard energy usage

65-75°C (INTENSIVE):
- High temperature does most cleaning
- Enzymes become less effective
- Good for baked-on, burnt food
- Uses more energy

70-80°C (SANITISE final rinse):
- Kills bacteria and germs
- Can damage plastics
- Reserved for hygiene needs

The takeaway: Higher temperature isn't always better. For everyday dishes, moderate temps with good enzyme time often clean better than short, hot cycles.""",
    key_takeaway="Match the temperature to your soil type. Protein needs time (Eco), baked-on needs heat (Intensive).",
)


def get_enzyme_explanation() -> CycleEducation:
    return ENZYME_EXPLANATION


def get_prewash_explanation() -> CycleEducation:
    return PREWASH_EXPLANATION


def get_temperature_explanation() -> CycleEducation:
    return TEMPERATURE_EXPLANATION


def get_all_educational_content() -> list[CycleEducation]:
    return [ENZYME_EXPLANATION, PREWASH_EXPLANATION, TEMPERATURE_EXPLANATION]
