"""Water hardness reference data: home test, per-level advice and Australian city lookup."""

import re
from dataclasses import dataclass

from loguru import logger
from pydantic import BaseModel, ConfigDict

from dishmate.types import RinseAidSetting, WaterHardness


class WaterHardnessTest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    materials: list[str]
    steps: list[str]
    interpretation_guide: dict[WaterHardness, str]


class HardnessRecommendations(BaseModel):
    model_config = ConfigDict(frozen=True)

    detergent_adjustment: str
    use_salt: bool
    rinse_aid_setting: RinseAidSetting
    maintenance_frequency: str
    first_step: str | None = None
    tips: list[str]


class CityHardnessResult(BaseModel):
    """Hardness for a city; unknown cities carry a guidance ``message`` instead of ppm/source."""

    model_config = ConfigDict(frozen=True)

    city: str
    hardness: WaterHardness
    ppm_range: str | None = None
    source: str | None = None
    message: str | None = None


class HardnessLevelInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: str
    description: str


class HardnessExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    what_is_it: str
    why_it_matters: list[str]
    measurement_units: list[str]
    hardness_scale: dict[WaterHardness, HardnessLevelInfo]


@dataclass(frozen=True)
class CityHardness:
    hardness: WaterHardness
    ppm_range: str
    source: str


AUSTRALIAN_CITY_HARDNESS: dict[str, CityHardness] = {
    "sydney": CityHardness(WaterHardness.SOFT, "40-50 ppm", "Sydney Water"),
    "melbourne": CityHardness(WaterHardness.SOFT, "10-40 ppm", "Melbourne Water"),
    "brisbane": CityHardness(WaterHardness.MODERATE, "80-120 ppm", "Urban Utilities"),
    "perth": CityHardness(WaterHardness.MODERATE, "80-150 ppm", "Water Corporation"),
    "adelaide": CityHardness(WaterHardness.HARD, "150-350 ppm", "SA Water"),
    "hobart": CityHardness(WaterHardness.SOFT, "10-30 ppm", "TasWater"),
    "darwin": CityHardness(WaterHardness.SOFT, "30-50 ppm", "Power and Water"),
    "canberra": CityHardness(WaterHardness.SOFT, "20-40 ppm", "Icon Water"),
    "gold_coast": CityHardness(WaterHardness.MODERATE, "80-120 ppm", "City of Gold Coast"),
    "newcastle": CityHardness(WaterHardness.SOFT, "40-60 ppm", "Hunter Water"),
}

UNKNOWN_CITY_MESSAGE = "City not in our database. Please test your water or check with your local water authority."

HARDNESS_RECOMMENDATIONS: dict[WaterHardness, HardnessRecommendations] = {
    WaterHardness.HARD: HardnessRecommendations(
        detergent_adjustment="Increase by 50-100%. Use about double the packet recommendation.",
        use_salt=True,
        rinse_aid_setting=RinseAidSetting.MAXIMUM,
        maintenance_frequency="Monthly cleaning cycles, fortnightly filter check",
        tips=[
            "Fill the salt compartment if your machine has one - this is critical for hard water.",
            "Increase detergent significantly - the packet dose is for average water.",
            "Set rinse aid to maximum to prevent mineral spots.",
            "Run monthly vinegar cleaning cycles to prevent scale buildup.",
            "Consider a water softener if your water is very hard.",
        ],
    ),
    WaterHardness.SOFT: HardnessRecommendations(
        detergent_adjustment="Reduce by 25-50%. Use less than the packet says.",
        use_salt=False,
        rinse_aid_setting=RinseAidSetting.LOW,
        maintenance_frequency="Quarterly cleaning cycles, monthly filter check",
        tips=[
            "Less detergent is better with soft water - excess can etch glasses over time.",
            "Skip the salt compartment - it's not needed with soft water.",
            "Use low rinse aid setting - too much can leave residue.",
            "Be careful with delicate glassware - use Delicate cycle.",
            "You may not need pre-wash detergent for light loads.",
        ],
    ),
    WaterHardness.MODERATE: HardnessRecommendations(
        detergent_adjustment="Use standard packet recommendations.",
        use_salt=True,
        rinse_aid_setting=RinseAidSetting.MEDIUM,
        maintenance_frequency="Monthly cleaning cycles, monthly filter check",
        tips=[
            "Packet recommendations should work well for you.",
            "Consider using the salt compartment for extra protection.",
            "Medium rinse aid setting is a good starting point.",
            "Adjust based on results - increase detergent if you see spots.",
        ],
    ),
    WaterHardness.UNKNOWN: HardnessRecommendations(
        detergent_adjustment="Start with packet recommendations and adjust based on results.",
        use_salt=True,
        rinse_aid_setting=RinseAidSetting.MEDIUM,
        maintenance_frequency="Monthly cleaning cycles until you know your water",
        first_step="Do the soap bottle test to determine your water hardness.",
        tips=[
            "Test your water hardness first - it affects everything.",
            "Check your local water authority website for hardness data.",
            "Start with medium settings and adjust based on results.",
            "Look for signs: white residue = hard water, over-sudsing = soft water.",
        ],
    ),
}

WATER_HARDNESS_TEST = WaterHardnessTest(
    name="Soap Bottle Test",
    description="A simple home test to estimate your water hardness using dish soap.",
    materials=[
        "Clear plastic bottle with cap (300-500ml)",
        "Tap water from your kitchen",
        "Liquid dish soap (any brand)",
    ],
    steps=[
        "Fill the bottle about 1/3 full with cold tap water.",
        "Add 10 drops of liquid dish soap.",
        "Screw the cap on tightly.",
        "Shake vigorously for 10 seconds.",
        "Let it settle for a moment.",
        "Observe the suds and water clarity.",
    ],
    interpretation_guide={
        WaterHardness.HARD: "Few suds on top, water looks milky or cloudy",
        WaterHardness.MODERATE: "Some suds, water slightly cloudy",
        WaterHardness.SOFT: "Lots of fluffy suds, water is clear beneath them",
    },
)

HARDNESS_EXPLANATION = HardnessExplanation(
    what_is_it=(
        "Water hardness measures the amount of dissolved minerals, primarily calcium and magnesium, in your "
        "water supply. These minerals are natural and safe to drink, but affect how well soap and detergent work."
    ),
    why_it_matters=[
        "Hard water reduces detergent effectiveness - minerals bind to cleaning agents.",
        "Minerals can deposit on dishes as white spots or film.",
        "Scale builds up inside your dishwasher over time.",
        "You need more detergent with hard water to get the same cleaning.",
        "Soft water needs less detergent - too much can etch glasses.",
    ],
    measurement_units=[
        "ppm (parts per million) - same as mg/L",
        "gpg (grains per gallon) - older US unit",
        "German degrees (°dH) - European scale",
        "French degrees (°f) - sometimes used in Australia",
    ],
    hardness_scale={
        WaterHardness.SOFT: HardnessLevelInfo(
            range="0-60 ppm (0-60 mg/L)",
            description="Water lathers easily. Use less detergent to avoid residue.",
        ),
        WaterHardness.MODERATE: HardnessLevelInfo(
            range="61-120 ppm (61-120 mg/L)",
            description="Average water. Packet detergent recommendations work well.",
        ),
        WaterHardness.HARD: HardnessLevelInfo(
            range="121-180 ppm (121-180 mg/L)",
            description="Noticeably hard water. Increase detergent and use salt compartment.",
        ),
        WaterHardness.UNKNOWN: HardnessLevelInfo(
            range="Not tested",
            description="Test your water to get accurate recommendations.",
        ),
    },
)


def get_water_hardness_test() -> WaterHardnessTest:
    return WATER_HARDNESS_TEST


def get_hardness_recommendations(hardness: WaterHardness | str) -> HardnessRecommendations:
    return HARDNESS_RECOMMENDATIONS[WaterHardness(hardness)]


def normalize_city_name(city: str) -> str:
    return re.sub(r"\s+", "_", city.lower())


def get_australian_city_hardness(city: str) -> CityHardnessResult:
    """Look up a capital or major city's water hardness, ignoring case.

    Args:
        city: City name, e.g. "Sydney" or "gold coast"

    Returns:
        Known cities: display name, hardness, ppm range and water authority.
        Unknown cities: the name as given, hardness unknown and a guidance message.
    """
    data = AUSTRALIAN_CITY_HARDNESS.get(normalize_city_name(city))
    if data is None:
        logger.info("City not in hardness database", city=city)
        return CityHardnessResult(city=city, hardness=WaterHardness.UNKNOWN, message=UNKNOWN_CITY_MESSAGE)

    return CityHardnessResult(
        city=city.capitalize(),
        hardness=data.hardness,
        ppm_range=data.ppm_range,
        source=data.source,
    )


def get_hardness_explanation() -> HardnessExplanation:
    return HARDNESS_EXPLANATION


def get_all_hardness_levels() -> list[WaterHardness]:
    return [WaterHardness.SOFT, WaterHardness.MODERATE, WaterHardness.HARD, WaterHardness.UNKNOWN]
