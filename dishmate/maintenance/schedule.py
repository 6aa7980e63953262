"""Maintenance schedule generation.

Base task cadences are adjusted for how often the machine runs and for
water hardness, then ordered critical first. Next actions come from the
reported issues and from how long ago the filter and the machine were
last cleaned.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from loguru import logger

from dishmate.maintenance.models import MaintenanceInput, MaintenanceSchedule, ScheduledTask
from dishmate.maintenance.tasks import MAINTENANCE_TASKS
from dishmate.types import Frequency, ImportanceLevel, MaintenanceTaskId, UsageLevel, WaterHardness

FREQUENCY_ORDER: tuple[Frequency, ...] = tuple(Frequency)  # most to least frequent

IMPORTANCE_RANK: dict[ImportanceLevel, int] = {
    ImportanceLevel.CRITICAL: 0,
    ImportanceLevel.HIGH: 1,
    ImportanceLevel.MEDIUM: 2,
    ImportanceLevel.LOW: 3,
}

LIGHT_USAGE_MAX_LOADS = 3
MODERATE_USAGE_MAX_LOADS = 6

FILTER_STALE_DAYS = 45
DEEP_CLEAN_STALE_DAYS = 60
SECONDS_PER_DAY = 86_400

NEVER_CLEANED_FILTER_ACTION = "If you've never cleaned the filter, do that first - it's the most important task."
ON_TRACK_ACTION = "Your maintenance is on track. Keep up with the schedule above."


@dataclass(frozen=True)
class FrequencyRule:
    """A cadence adjustment.

    ``shift`` is applied to the position on ``FREQUENCY_ORDER`` (negative
    means more often). Every applicable rule shifts the position, and the
    last applicable rule's reason is the one reported.
    """

    name: str
    applies: Callable[[UsageLevel, WaterHardness, MaintenanceTaskId], bool]
    shift: int
    reason: str


FREQUENCY_RULES: tuple[FrequencyRule, ...] = (
    FrequencyRule(
        name="heavy_usage",
        applies=lambda usage, hardness, task_id: usage == UsageLevel.HEAVY
        and task_id in (MaintenanceTaskId.CLEAN_FILTER, MaintenanceTaskId.RUN_CLEANING_CYCLE),
        shift=-1,
        reason="More frequent due to heavy usage",
    ),
    FrequencyRule(
        name="light_usage",
        applies=lambda usage, hardness, task_id: usage == UsageLevel.LIGHT and task_id != MaintenanceTaskId.CLEAN_FILTER,
        shift=1,
        reason="Less frequent due to light usage",
    ),
    FrequencyRule(
        name="hard_water",
        applies=lambda usage, hardness, task_id: hardness == WaterHardness.HARD
        and task_id in (MaintenanceTaskId.RUN_CLEANING_CYCLE, MaintenanceTaskId.CHECK_SALT),
        shift=-1,
        reason="More frequent due to hard water",
    ),
)

# Rules never push a task out to "as needed"
MAX_ADJUSTED_INDEX = len(FREQUENCY_ORDER) - 2


def get_usage_level(loads_per_week: int) -> UsageLevel:
    """Bucket weekly loads: up to 3 is light, 4-6 moderate, more is heavy.

    Negative counts fall into the light bucket.
    """
    if loads_per_week <= LIGHT_USAGE_MAX_LOADS:
        return UsageLevel.LIGHT
    if loads_per_week <= MODERATE_USAGE_MAX_LOADS:
        return UsageLevel.MODERATE
    return UsageLevel.HEAVY


def adjust_frequency(
    base_frequency: Frequency | str,
    usage_level: UsageLevel | str,
    water_hardness: WaterHardness | str,
    task_id: MaintenanceTaskId | str,
) -> tuple[Frequency, str | None]:
    """Adjust a task's base cadence for usage and water hardness.

    Args:
        base_frequency: Task's default cadence
        usage_level: Usage bucket
        water_hardness: Household water hardness
        task_id: Task being scheduled

    Returns:
        Tuple of (adjusted frequency, reason or None when unchanged by any rule)
    """
    usage_level = UsageLevel(usage_level)
    water_hardness = WaterHardness(water_hardness)
    task_id = MaintenanceTaskId(task_id)

    index = FREQUENCY_ORDER.index(Frequency(base_frequency))
    reason: str | None = None

    for rule in FREQUENCY_RULES:
        if not rule.applies(usage_level, water_hardness, task_id):
            continue
        if rule.shift < 0:
            index = max(0, index + rule.shift)
        else:
            index = min(MAX_ADJUSTED_INDEX, index + rule.shift)
        reason = rule.reason
        logger.debug("Frequency rule applied", rule=rule.name, task_id=task_id, frequency=FREQUENCY_ORDER[index])

    return FREQUENCY_ORDER[index], reason


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_since(then: datetime, now: datetime) -> int:
    """Whole days elapsed (floored); negative when ``then`` is in the future."""
    return math.floor((_as_utc(now) - _as_utc(then)).total_seconds() / SECONDS_PER_DAY)


def _build_next_actions(schedule_input: MaintenanceInput, now: datetime) -> list[str]:
    next_actions: list[str] = []

    if schedule_input.has_smell_issues:
        next_actions.append("Clean the filter immediately - this is the most likely cause of smell.")
        next_actions.append("Run a cleaning cycle with vinegar after cleaning the filter.")
        next_actions.append("Check and clean the door seal for mould.")

    if schedule_input.has_residue_issues:
        next_actions.append("Run a cleaning cycle to dissolve buildup.")
        if schedule_input.water_hardness in (WaterHardness.HARD, WaterHardness.UNKNOWN):
            next_actions.append("Check and refill dishwasher salt if your machine has a salt compartment.")
        next_actions.append("Clean the spray arms - blocked holes cause uneven cleaning.")

    if schedule_input.last_filter_clean is not None:
        days_since_filter = days_since(schedule_input.last_filter_clean, now)
        if days_since_filter > FILTER_STALE_DAYS:
            next_actions.append(f"Filter hasn't been cleaned in {days_since_filter} days - clean it soon.")
    else:
        next_actions.append(NEVER_CLEANED_FILTER_ACTION)

    if schedule_input.last_deep_clean is not None:
        days_since_deep = days_since(schedule_input.last_deep_clean, now)
        if days_since_deep > DEEP_CLEAN_STALE_DAYS:
            next_actions.append(
                f"It's been {days_since_deep} days since your last cleaning cycle - schedule one soon."
            )

    if not next_actions:
        next_actions.append(ON_TRACK_ACTION)

    return next_actions


def generate_maintenance_schedule(
    schedule_input: MaintenanceInput,
    now: datetime | None = None,
) -> MaintenanceSchedule:
    """Build a tailored maintenance schedule.

    Args:
        schedule_input: Water hardness, weekly loads, last clean dates and reported issues
        now: Reference time for elapsed-day checks (defaults to the current UTC time)

    Returns:
        MaintenanceSchedule with all tasks, critical first, and the next actions to take
    """
    now = now or datetime.now(timezone.utc)
    usage_level = get_usage_level(schedule_input.loads_per_week)

    tasks: list[ScheduledTask] = []
    for task in MAINTENANCE_TASKS.values():
        frequency, reason = adjust_frequency(task.frequency, usage_level, schedule_input.water_hardness, task.id)
        tasks.append(ScheduledTask(task=task, adjusted_frequency=frequency, reason=reason))

    # sorted() is stable, so equal-importance tasks keep catalogue order
    tasks = sorted(tasks, key=lambda scheduled: IMPORTANCE_RANK[scheduled.task.importance_level])

    next_actions = _build_next_actions(schedule_input, now)

    logger.info(
        "Maintenance schedule generated",
        usage_level=usage_level,
        water_hardness=schedule_input.water_hardness,
        next_action_count=len(next_actions),
    )

    return MaintenanceSchedule(
        water_hardness=schedule_input.water_hardness,
        usage_level=usage_level,
        tasks=tasks,
        next_actions=next_actions,
    )
