"""Quick maintenance health check.

Starts from 100 and deducts a fixed number of points for each check
that fails, in questionnaire order.
"""

from dataclasses import dataclass

from loguru import logger

from dishmate.maintenance.models import MaintenanceCheck, QuickCheckInput
from dishmate.types import MaintenanceStatus

GOOD_MIN_SCORE = 80
NEEDS_ATTENTION_MIN_SCORE = 50
UP_TO_DATE_RECOMMENDATION = "Your dishwasher maintenance is up to date!"


@dataclass(frozen=True)
class CheckItem:
    field: str
    deduction: int
    issue: str
    recommendation: str


CHECK_ITEMS: tuple[CheckItem, ...] = (
    CheckItem(
        field="filter_cleaned_within_30_days",
        deduction=30,
        issue="Filter needs cleaning",
        recommendation="Clean the filter - it's the most important maintenance task.",
    ),
    CheckItem(
        field="deep_clean_within_60_days",
        deduction=20,
        issue="Due for a cleaning cycle",
        recommendation="Run an empty hot cycle with vinegar to dissolve buildup.",
    ),
    CheckItem(
        field="rinse_aid_full",
        deduction=10,
        issue="Rinse aid low",
        recommendation="Refill rinse aid for spot-free drying.",
    ),
    CheckItem(
        field="no_smell_issues",
        deduction=20,
        issue="Smell issues reported",
        recommendation="Clean filter, door seal, and run cleaning cycle.",
    ),
    CheckItem(
        field="no_residue_issues",
        deduction=15,
        issue="Residue issues reported",
        recommendation="Check water hardness settings and run cleaning cycle.",
    ),
    CheckItem(
        field="no_dirty_dish_issues",
        deduction=15,
        issue="Cleaning performance issues",
        recommendation="Check filter, spray arms, and detergent amount.",
    ),
)


def get_maintenance_status(score: int) -> MaintenanceStatus:
    if score >= GOOD_MIN_SCORE:
        return MaintenanceStatus.GOOD
    if score >= NEEDS_ATTENTION_MIN_SCORE:
        return MaintenanceStatus.NEEDS_ATTENTION
    return MaintenanceStatus.URGENT


def quick_maintenance_check(check_input: QuickCheckInput) -> MaintenanceCheck:
    """Score the machine's upkeep from six yes/no answers.

    The score is floored at 0 when every check fails.
    """
    score = 100
    issues: list[str] = []
    recommendations: list[str] = []

    for item in CHECK_ITEMS:
        if getattr(check_input, item.field):
            continue
        score -= item.deduction
        issues.append(item.issue)
        recommendations.append(item.recommendation)

    score = max(0, score)

    if not issues:
        recommendations.append(UP_TO_DATE_RECOMMENDATION)

    status = get_maintenance_status(score)
    logger.debug("Quick maintenance check scored", score=score, status=status, issue_count=len(issues))

    return MaintenanceCheck(score=score, status=status, issues=issues, recommendations=recommendations)
