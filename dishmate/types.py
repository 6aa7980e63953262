"""Canonical enums shared across the advisors.

All enums are string-based so plain strings from a caller compare equal
to members and can be coerced with the enum constructor.
"""

from enum import StrEnum


# -----------------------------
# Load description
# -----------------------------
class ItemType(StrEnum):
    """Kinds of item that can go in the dishwasher."""

    PLATES = "plates"
    BOWLS = "bowls"
    GLASSES = "glasses"
    MUGS = "mugs"
    POTS = "pots"
    PANS = "pans"
    BAKEWARE = "bakeware"
    UTENSILS = "utensils"
    CONTAINERS = "containers"
    BABY_ITEMS = "baby_items"
    CUTTING_BOARDS = "cutting_boards"
    DELICATE = "delicate"  # fine glasses, crystal, china


class SoilType(StrEnum):
    """Kinds of food residue on a load."""

    LIGHT = "light"  # water marks, dust
    EVERYDAY = "everyday"  # normal food residue, sauces
    HEAVY = "heavy"  # baked-on, burnt, dried overnight
    GREASY = "greasy"  # oils, fried food, butter
    PROTEIN = "protein"  # eggs, cheese, meat, dairy
    STARCHY = "starchy"  # pasta, rice, potato, bread
    ACIDIC = "acidic"  # tomato, citrus, vinegar


class LoadQuantity(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    FULL = "full"


class Urgency(StrEnum):
    NO_RUSH = "no_rush"
    NEED_TODAY = "need_today"
    NEED_FAST = "need_fast"


class CycleType(StrEnum):
    """Wash programmes offered by a typical machine."""

    QUICK = "quick"
    ECO = "eco"
    NORMAL = "normal"
    INTENSIVE = "intensive"
    DELICATE = "delicate"
    SANITISE = "sanitise"


class GreaseFactor(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WaterHardness(StrEnum):
    SOFT = "soft"
    MODERATE = "moderate"
    HARD = "hard"
    UNKNOWN = "unknown"


# -----------------------------
# Troubleshooting
# -----------------------------
class TroubleshootCategory(StrEnum):
    """Complaint categories offered at the root of the troubleshooting flow."""

    WHITE_RESIDUE = "white_residue"
    CLOUDY_GLASSES = "cloudy_glasses"
    FOOD_STUCK = "food_stuck"
    GREASY_FEELING = "greasy_feeling"
    SPOTS = "spots"
    BAD_SMELL = "bad_smell"
    NOT_DRYING = "not_drying"
    OTHER = "other"


# -----------------------------
# Maintenance
# -----------------------------
class MaintenanceTaskId(StrEnum):
    CLEAN_FILTER = "clean_filter"
    CLEAN_SPRAY_ARMS = "clean_spray_arms"
    CLEAN_DOOR_SEAL = "clean_door_seal"
    RUN_CLEANING_CYCLE = "run_cleaning_cycle"
    CHECK_RINSE_AID = "check_rinse_aid"
    CHECK_SALT = "check_salt"
    WIPE_EXTERIOR = "wipe_exterior"
    CHECK_DRAIN = "check_drain"


class Frequency(StrEnum):
    """Task cadence, declared from most to least frequent."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    AS_NEEDED = "as_needed"


class ImportanceLevel(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class UsageLevel(StrEnum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class MaintenanceStatus(StrEnum):
    GOOD = "good"
    NEEDS_ATTENTION = "needs_attention"
    URGENT = "urgent"


# -----------------------------
# Water hardness estimation
# -----------------------------
class Confidence(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SudsAmount(StrEnum):
    FEW = "few"
    SOME = "some"
    LOTS = "lots"


class WaterClarity(StrEnum):
    MILKY = "milky"
    SLIGHTLY_CLOUDY = "slightly_cloudy"
    CLEAR = "clear"


# -----------------------------
# Detergent and rinse aid
# -----------------------------
class DetergentFormat(StrEnum):
    POWDER = "powder"
    PODS = "pods"
    LIQUID = "liquid"
    TABLETS = "tablets"


class UsagePattern(StrEnum):
    DAILY = "daily"  # 1+ runs per day
    REGULAR = "regular"  # 4-6 runs per week
    OCCASIONAL = "occasional"  # 1-3 runs per week


class MainConcern(StrEnum):
    CLEAN_DISHES = "clean_dishes"
    CONVENIENCE = "convenience"
    COST = "cost"
    ECO = "eco"
    SPECIFIC_PROBLEM = "specific_problem"


class RinseAidSetting(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAXIMUM = "maximum"


class ItemCategory(StrEnum):
    PLASTIC = "plastic"
    GLASS = "glass"
    CERAMIC = "ceramic"
    MIXED = "mixed"


class SpotCause(StrEnum):
    INSUFFICIENT_RINSE_AID = "insufficient_rinse_aid"
    HARD_WATER_DEPOSITS = "hard_water_deposits"
    ETCHING = "etching"


class UsageTier(StrEnum):
    """Energy or water usage tier of a cycle."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
