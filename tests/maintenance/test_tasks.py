"""Tests for the maintenance task catalogue."""

from dishmate.maintenance.tasks import (
    get_all_maintenance_tasks,
    get_critical_tasks,
    get_maintenance_task,
    get_tasks_by_importance,
)
from dishmate.types import Frequency, ImportanceLevel, MaintenanceTaskId


def test_catalogue_has_every_task_in_order():
    """Test that all eight tasks are listed in declaration order."""
    assert [task.id for task in get_all_maintenance_tasks()] == list(MaintenanceTaskId)


def test_lookup_by_id():
    """Test task lookup with enum and string ids."""
    task = get_maintenance_task(MaintenanceTaskId.CLEAN_FILTER)

    assert task is not None
    assert task.frequency == Frequency.MONTHLY
    assert task.importance_level == ImportanceLevel.CRITICAL
    assert get_maintenance_task("check_salt").id == MaintenanceTaskId.CHECK_SALT


def test_unknown_task_is_none():
    """Test that an unknown id is absent, not an error."""
    assert get_maintenance_task("polish_chrome") is None


def test_filter_is_the_only_critical_task():
    """Test critical task lookup."""
    assert [task.id for task in get_critical_tasks()] == [MaintenanceTaskId.CLEAN_FILTER]


def test_tasks_by_importance():
    """Test grouping by importance level."""
    high = [task.id for task in get_tasks_by_importance("high")]

    assert high == [
        MaintenanceTaskId.CLEAN_SPRAY_ARMS,
        MaintenanceTaskId.RUN_CLEANING_CYCLE,
        MaintenanceTaskId.CHECK_SALT,
    ]
    assert [task.id for task in get_tasks_by_importance(ImportanceLevel.LOW)] == [MaintenanceTaskId.WIPE_EXTERIOR]


def test_every_task_has_steps_and_signs():
    """Test that catalogue entries are filled in."""
    for task in get_all_maintenance_tasks():
        assert task.steps
        assert task.signs_needed
        assert task.time_minutes > 0
