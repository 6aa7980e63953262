"""Maintenance scheduler contracts."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from dishmate.types import Frequency, ImportanceLevel, MaintenanceStatus, MaintenanceTaskId, UsageLevel, WaterHardness


@dataclass(frozen=True)
class MaintenanceTaskInfo:
    """Static description of one maintenance task.

    Attributes:
        frequency: Base cadence before usage and water adjustments
        time_minutes: Hands-on time (hands-off for the cleaning cycle)
        signs_needed: Symptoms that mean the task is overdue
    """

    id: MaintenanceTaskId
    name: str
    description: str
    frequency: Frequency
    importance_level: ImportanceLevel
    time_minutes: int
    steps: tuple[str, ...]
    tools: tuple[str, ...]
    tips: tuple[str, ...]
    signs_needed: tuple[str, ...]


class MaintenanceInput(BaseModel):
    """Household facts used to tailor the maintenance schedule.

    Naive datetimes are treated as UTC.
    """

    model_config = ConfigDict(frozen=True)

    water_hardness: WaterHardness
    loads_per_week: int
    last_filter_clean: datetime | None = Field(default=None, description="When the filter was last cleaned")
    last_deep_clean: datetime | None = Field(default=None, description="When a cleaning cycle was last run")
    has_smell_issues: bool = False
    has_residue_issues: bool = False


class ScheduledTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    task: MaintenanceTaskInfo
    adjusted_frequency: Frequency
    reason: str | None = None


class MaintenanceSchedule(BaseModel):
    """Tailored schedule, tasks ordered critical first."""

    model_config = ConfigDict(frozen=True)

    water_hardness: WaterHardness
    usage_level: UsageLevel
    tasks: list[ScheduledTask]
    next_actions: list[str]


class QuickCheckInput(BaseModel):
    """Yes/no answers to the quick maintenance questionnaire (True means all good)."""

    model_config = ConfigDict(frozen=True)

    filter_cleaned_within_30_days: bool
    deep_clean_within_60_days: bool
    rinse_aid_full: bool
    no_smell_issues: bool
    no_residue_issues: bool
    no_dirty_dish_issues: bool


class MaintenanceCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(description="0-100, higher is better")
    status: MaintenanceStatus
    issues: list[str]
    recommendations: list[str]
