"""Dishmate - rule-based dishwasher advice.

This package provides:
- Load advisor: cycle choice, detergent dosing, pre-rinse and loading advice
- Troubleshooting flow: question/answer graph ending in a solution
- Maintenance scheduler and quick health check
- Pre-rinse and water hardness classifiers
- Reference data for cycles, detergents, rinse aid and water hardness

Every advisor is a pure function of its input. Log output is off until
``dishmate.core.logger.setup_logger`` or ``configure_logging`` is called.
"""

from loguru import logger

logger.disable("dishmate")

from dishmate.classify.hardness import (  # noqa: E402
    SoapTestInput,
    SymptomEstimate,
    SymptomInput,
    TestResult,
    estimate_hardness_from_symptoms,
    interpret_test_result,
)
from dishmate.classify.prerinse import (  # noqa: E402
    get_common_myths,
    get_pre_rinse_guide,
    get_what_to_leave,
    get_what_to_scrape,
    should_leave_item,
    should_scrape_item,
)
from dishmate.detergent.advisor import (  # noqa: E402
    DetergentInput,
    DetergentRecommendation,
    get_detergent_recommendation,
)
from dishmate.detergent.formats import (  # noqa: E402
    compare_formats,
    get_all_detergent_formats,
    get_detergent_format_info,
    get_why_powder_beats_pods,
)
from dishmate.load.advisor import (  # noqa: E402
    generate_reasoning,
    get_load_recommendation,
    get_loading_tips,
    get_prerinse_advice,
)
from dishmate.load.cycle_rules import select_cycle  # noqa: E402
from dishmate.load.dosing import calculate_dosing  # noqa: E402
from dishmate.load.schemas import LoadInput, Recommendation  # noqa: E402
from dishmate.load.scoring import calculate_grease_factor, calculate_soil_score  # noqa: E402
from dishmate.maintenance.models import (  # noqa: E402
    MaintenanceCheck,
    MaintenanceInput,
    MaintenanceSchedule,
    QuickCheckInput,
)
from dishmate.maintenance.quick_check import quick_maintenance_check  # noqa: E402
from dishmate.maintenance.schedule import (  # noqa: E402
    adjust_frequency,
    generate_maintenance_schedule,
    get_usage_level,
)
from dishmate.maintenance.tasks import (  # noqa: E402
    get_all_maintenance_tasks,
    get_critical_tasks,
    get_maintenance_task,
    get_tasks_by_importance,
)
from dishmate.reference.cycles import (  # noqa: E402
    compare_cycles,
    get_all_cycles,
    get_all_educational_content,
    get_cycle_for_item_type,
    get_cycle_for_soil_type,
    get_cycle_info,
    get_enzyme_explanation,
    get_prewash_explanation,
    get_temperature_explanation,
)
from dishmate.reference.quick_start import (  # noqa: E402
    get_dishwasher_basics,
    get_immediate_action_plan,
    get_onboarding_steps,
    get_quick_start_guide,
    get_quick_win,
    get_top_mistakes,
)
from dishmate.reference.water import (  # noqa: E402
    get_all_hardness_levels,
    get_australian_city_hardness,
    get_hardness_explanation,
    get_hardness_recommendations,
    get_water_hardness_test,
)
from dishmate.rinse_aid.advisor import (  # noqa: E402
    RinseAidInput,
    RinseAidRecommendation,
    SpotCheckInput,
    SpotDiagnosis,
    diagnose_spot_issue,
    get_drying_tips,
    get_rinse_aid_explanation,
    get_rinse_aid_recommendation,
    get_rinse_aid_settings,
)
from dishmate.troubleshoot.engine import (  # noqa: E402
    get_initial_question,
    get_solution,
    get_troubleshoot_flow,
    process_answer,
)
from dishmate.troubleshoot.steps import TROUBLESHOOT_CATEGORIES  # noqa: E402

__all__ = [
    "TROUBLESHOOT_CATEGORIES",
    "DetergentInput",
    "DetergentRecommendation",
    "LoadInput",
    "MaintenanceCheck",
    "MaintenanceInput",
    "MaintenanceSchedule",
    "QuickCheckInput",
    "Recommendation",
    "RinseAidInput",
    "RinseAidRecommendation",
    "SoapTestInput",
    "SpotCheckInput",
    "SpotDiagnosis",
    "SymptomEstimate",
    "SymptomInput",
    "TestResult",
    "adjust_frequency",
    "calculate_dosing",
    "calculate_grease_factor",
    "calculate_soil_score",
    "compare_cycles",
    "compare_formats",
    "diagnose_spot_issue",
    "estimate_hardness_from_symptoms",
    "generate_maintenance_schedule",
    "generate_reasoning",
    "get_all_cycles",
    "get_all_detergent_formats",
    "get_all_educational_content",
    "get_all_hardness_levels",
    "get_all_maintenance_tasks",
    "get_australian_city_hardness",
    "get_common_myths",
    "get_critical_tasks",
    "get_cycle_for_item_type",
    "get_cycle_for_soil_type",
    "get_cycle_info",
    "get_detergent_format_info",
    "get_detergent_recommendation",
    "get_dishwasher_basics",
    "get_drying_tips",
    "get_enzyme_explanation",
    "get_hardness_explanation",
    "get_hardness_recommendations",
    "get_immediate_action_plan",
    "get_initial_question",
    "get_load_recommendation",
    "get_loading_tips",
    "get_maintenance_task",
    "get_onboarding_steps",
    "get_pre_rinse_guide",
    "get_prerinse_advice",
    "get_prewash_explanation",
    "get_quick_start_guide",
    "get_quick_win",
    "get_rinse_aid_explanation",
    "get_rinse_aid_recommendation",
    "get_rinse_aid_settings",
    "get_solution",
    "get_tasks_by_importance",
    "get_temperature_explanation",
    "get_top_mistakes",
    "get_troubleshoot_flow",
    "get_usage_level",
    "get_water_hardness_test",
    "get_what_to_leave",
    "get_what_to_scrape",
    "interpret_test_result",
    "process_answer",
    "quick_maintenance_check",
    "select_cycle",
    "should_leave_item",
    "should_scrape_item",
]
