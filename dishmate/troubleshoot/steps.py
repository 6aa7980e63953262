"""Troubleshooting flow: question nodes, category labels and the answer map.

Each complaint category has a ``<category>_start`` node. Options either
name the next node or resolve through ``ANSWER_TO_SOLUTION`` using the
``"<step_id>:<answer>"`` key.
"""

from dishmate.troubleshoot.models import CategoryInfo, QuestionNode, StepOption
from dishmate.types import TroubleshootCategory

ROOT_STEP_ID = "start"

TROUBLESHOOT_CATEGORIES: dict[TroubleshootCategory, CategoryInfo] = {
    TroubleshootCategory.WHITE_RESIDUE: CategoryInfo(
        label="White residue or film",
        description="White marks, film, or powdery deposits on dishes",
    ),
    TroubleshootCategory.CLOUDY_GLASSES: CategoryInfo(
        label="Cloudy glasses",
        description="Glasses look foggy, hazy, or clouded",
    ),
    TroubleshootCategory.FOOD_STUCK: CategoryInfo(
        label="Food still stuck on",
        description="Food particles remain after the cycle",
    ),
    TroubleshootCategory.GREASY_FEELING: CategoryInfo(
        label="Greasy or slimy feeling",
        description="Dishes feel oily or have a residue",
    ),
    TroubleshootCategory.SPOTS: CategoryInfo(
        label="Spots on glasses or cutlery",
        description="Water spots or marks on glassware and metal",
    ),
    TroubleshootCategory.BAD_SMELL: CategoryInfo(
        label="Bad smell inside machine",
        description="Unpleasant odour from the dishwasher",
    ),
    TroubleshootCategory.NOT_DRYING: CategoryInfo(
        label="Dishes not drying",
        description="Dishes still wet after cycle completes",
    ),
    TroubleshootCategory.OTHER: CategoryInfo(
        label="Something else",
        description="Other problems not listed above",
    ),
}


def _node(step_id: str, question: str, *options: StepOption) -> QuestionNode:
    return QuestionNode(id=step_id, question=question, options=options)


_NODES: tuple[QuestionNode, ...] = (
    _node(
        ROOT_STEP_ID,
        "What's the problem?",
        StepOption("White residue or film on dishes", "white_residue"),
        StepOption("Cloudy glasses", "cloudy_glasses"),
        StepOption("Food still stuck on", "food_stuck"),
        StepOption("Greasy or slimy feeling", "greasy_feeling"),
        StepOption("Spots on glasses or cutlery", "spots"),
        StepOption("Bad smell inside machine", "bad_smell"),
        StepOption("Dishes not drying", "not_drying"),
        StepOption("Something else", "other"),
    ),
    # White residue
    _node(
        "white_residue_start",
        "Touch the residue. Is it...",
        StepOption("Powdery/chalky (wipes off easily)", "powdery", next_step="white_residue_water"),
        StepOption("Smeary/greasy (needs scrubbing)", "smeary", next_step="white_residue_detergent"),
    ),
    _node(
        "white_residue_water",
        "Do you know if you have hard water?",
        StepOption("Yes, I have hard water", "yes_hard"),
        StepOption("No, my water is soft", "no_soft"),
        StepOption("I don't know", "unknown"),
    ),
    _node(
        "white_residue_detergent",
        "What detergent are you using?",
        StepOption("Pods/tablets", "pods"),
        StepOption("Powder", "powder"),
        StepOption("Liquid/gel", "liquid"),
    ),
    # Food stuck
    _node(
        "food_stuck_start",
        "Where is the food stuck?",
        StepOption("Inside bowls, cups, or mugs", "concave"),
        StepOption("On flat surfaces (plates, pan bottoms)", "flat", next_step="food_stuck_type"),
        StepOption("Everywhere - nothing is clean", "everywhere"),
        StepOption("Random spots on random items", "random"),
    ),
    _node(
        "food_stuck_type",
        "What kind of food?",
        StepOption("Baked-on / burnt", "baked"),
        StepOption("Greasy residue", "greasy"),
        StepOption("Dried sauce / everyday food", "everyday"),
        StepOption("Egg / cheese / protein", "protein"),
    ),
    # Bad smell
    _node(
        "bad_smell_start",
        "When did you last clean the filter?",
        StepOption("Never / I don't know where it is", "never"),
        StepOption("Recently (within a month)", "recently", next_step="bad_smell_timing"),
        StepOption("I clean it regularly", "regularly", next_step="bad_smell_timing"),
    ),
    _node(
        "bad_smell_timing",
        "Does the smell happen...",
        StepOption("Right after a cycle", "after_cycle"),
        StepOption("When you open the door after days unused", "after_unused"),
        StepOption("All the time", "always"),
    ),
    # Cloudy glasses
    _node(
        "cloudy_glasses_start",
        "Soak a cloudy glass in white vinegar for 5 minutes. Does the cloudiness...",
        StepOption("Disappear or reduce (deposits)", "deposits"),
        StepOption("Stay the same (etching)", "etching"),
    ),
    # Spots
    _node(
        "spots_start",
        "Where are the spots appearing?",
        StepOption("On glasses", "glasses"),
        StepOption("On cutlery/silverware", "cutlery"),
        StepOption("On everything", "everything"),
    ),
    # Not drying
    _node(
        "not_drying_start",
        "What items are not drying?",
        StepOption("Plastic items", "plastic"),
        StepOption("Everything", "everything"),
        StepOption("Only some items", "some"),
    ),
    # Greasy feeling
    _node(
        "greasy_feeling_start",
        "Are you using pods or powder?",
        StepOption("Pods/tablets", "pods"),
        StepOption("Powder", "powder"),
    ),
    # Other (no mapped solutions, every answer falls back to generic advice)
    _node(
        "other_start",
        "Can you describe the problem?",
        StepOption("Machine makes strange noises", "noises"),
        StepOption("Cycle takes too long", "too_long"),
        StepOption("Machine won't start", "wont_start"),
        StepOption("Water leaking", "leaking"),
    ),
)

STEPS: dict[str, QuestionNode] = {node.id: node for node in _NODES}

ANSWER_TO_SOLUTION: dict[str, str] = {
    # White residue
    "white_residue_water:yes_hard": "hard_water_confirmed",
    "white_residue_water:no_soft": "soft_water_residue",
    "white_residue_water:unknown": "test_water_hardness",
    "white_residue_detergent:pods": "pod_not_dissolving",
    "white_residue_detergent:powder": "powder_not_rinsing",
    "white_residue_detergent:liquid": "gel_residue",
    # Food stuck
    "food_stuck_start:concave": "water_access_issue",
    "food_stuck_start:everywhere": "fundamental_problem",
    "food_stuck_start:random": "loading_spray_issue",
    "food_stuck_type:baked": "cycle_too_weak",
    "food_stuck_type:greasy": "no_prewash_detergent",
    "food_stuck_type:everyday": "loading_issue",
    "food_stuck_type:protein": "needs_enzyme_time",
    # Bad smell
    "bad_smell_start:never": "dirty_filter",
    "bad_smell_timing:after_cycle": "drainage_issue",
    "bad_smell_timing:after_unused": "stagnant_water_mould",
    "bad_smell_timing:always": "deep_contamination",
    # Cloudy glasses
    "cloudy_glasses_start:deposits": "cloudy_deposits",
    "cloudy_glasses_start:etching": "cloudy_etching",
    # Spots
    "spots_start:glasses": "water_spots",
    "spots_start:cutlery": "water_spots",
    "spots_start:everything": "water_spots",
    # Not drying
    "not_drying_start:plastic": "not_drying_tips",
    "not_drying_start:everything": "not_drying_tips",
    "not_drying_start:some": "not_drying_tips",
    # Greasy feeling
    "greasy_feeling_start:pods": "greasy_dishes",
    "greasy_feeling_start:powder": "greasy_dishes",
}


def answer_key(step_id: str, answer: str) -> str:
    return f"{step_id}:{answer}"
