"""Maintenance task catalogue and lookups."""

from loguru import logger

from dishmate.maintenance.models import MaintenanceTaskInfo
from dishmate.types import Frequency, ImportanceLevel, MaintenanceTaskId

MAINTENANCE_TASKS: dict[MaintenanceTaskId, MaintenanceTaskInfo] = {
    MaintenanceTaskId.CLEAN_FILTER: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CLEAN_FILTER,
        name="Clean the Filter",
        description="Remove and clean the filter to prevent food buildup and bad smells.",
        frequency=Frequency.MONTHLY,
        importance_level=ImportanceLevel.CRITICAL,
        time_minutes=5,
        steps=(
            "Remove the bottom rack to access the filter.",
            "Locate the filter at the bottom of the tub (usually centre).",
            "Twist the filter counter-clockwise and lift out.",
            "Rinse under hot running water.",
            "Use a soft brush (old toothbrush) to scrub the mesh.",
            "Check underneath for any trapped debris.",
            "Replace the filter and twist to lock in place.",
        ),
        tools=("Soft brush or old toothbrush",),
        tips=(
            "A dirty filter is the #1 cause of dishwasher smell and poor cleaning.",
            "If you don't scrape plates, clean the filter more often.",
            "The filter has multiple parts - make sure you clean all of them.",
        ),
        signs_needed=(
            "Bad smell from dishwasher",
            "Food particles on clean dishes",
            "Dishes not coming out clean",
            "Visible debris in filter",
        ),
    ),
    MaintenanceTaskId.CLEAN_SPRAY_ARMS: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CLEAN_SPRAY_ARMS,
        name="Clean the Spray Arms",
        description="Clear blocked spray arm holes to ensure proper water distribution.",
        frequency=Frequency.QUARTERLY,
        importance_level=ImportanceLevel.HIGH,
        time_minutes=10,
        steps=(
            "Remove the bottom and top racks.",
            "Locate the spray arms (bottom and possibly middle/top).",
            "Remove spray arms by twisting or unclipping (check manual).",
            "Hold under running water and look through the holes.",
            "Use a toothpick to clear any blocked holes.",
            "Soak in white vinegar for 15 mins if heavily clogged.",
            "Rinse thoroughly and reattach.",
        ),
        tools=("Toothpick", "White vinegar (optional)"),
        tips=(
            "Blocked spray arm holes cause random dirty spots on dishes.",
            "Seeds, bits of label, and mineral buildup are common culprits.",
            "Spin the arms by hand after reattaching to check they move freely.",
        ),
        signs_needed=(
            "Random items not getting clean",
            "Uneven cleaning (some dishes clean, others dirty)",
            "Visible blockage in spray holes",
        ),
    ),
    MaintenanceTaskId.CLEAN_DOOR_SEAL: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CLEAN_DOOR_SEAL,
        name="Clean the Door Seal",
        description="Wipe the rubber gasket around the door to prevent mould and odours.",
        frequency=Frequency.MONTHLY,
        importance_level=ImportanceLevel.MEDIUM,
        time_minutes=5,
        steps=(
            "Open the door fully.",
            "Inspect the rubber seal/gasket around the door edge.",
            "Make a solution of equal parts white vinegar and water.",
            "Dip a cloth in the solution and wipe the entire seal.",
            "Pull back the folds of the gasket to clean inside.",
            "Pay attention to the bottom where water collects.",
            "Dry with a clean cloth.",
        ),
        tools=("White vinegar", "Clean cloths (2)"),
        tips=(
            "Mould loves to hide in the folds of the door seal.",
            "The bottom of the seal is often the dirtiest area.",
            "Do this more often if you keep the door closed between uses.",
        ),
        signs_needed=(
            "Musty smell when opening door",
            "Visible mould or black spots on seal",
            "Debris trapped in seal folds",
        ),
    ),
    MaintenanceTaskId.RUN_CLEANING_CYCLE: MaintenanceTaskInfo(
        id=MaintenanceTaskId.RUN_CLEANING_CYCLE,
        name="Run a Cleaning Cycle",
        description="Run an empty hot cycle to dissolve buildup and sanitise the interior.",
        frequency=Frequency.MONTHLY,
        importance_level=ImportanceLevel.HIGH,
        time_minutes=90,  # hands-off
        steps=(
            "Remove all dishes and racks (racks can stay if convenient).",
            "Place 2 cups of white vinegar in a bowl on the top rack.",
            "Run the hottest cycle available.",
            "After the cycle: sprinkle 1 cup of bicarb soda on the bottom.",
            "Run a short hot cycle to freshen.",
            "Wipe any residue from the door and edges.",
        ),
        tools=("White vinegar (2 cups)", "Bicarb soda (1 cup)"),
        tips=(
            "Vinegar dissolves mineral deposits and grease.",
            "Bicarb neutralises odours and provides gentle abrasion.",
            "Commercial dishwasher cleaners work too but cost more.",
            "Do this more often in hard water areas.",
        ),
        signs_needed=(
            "Persistent bad smell",
            "Visible scale buildup",
            "Dishes coming out with residue",
            "Monthly maintenance regardless",
        ),
    ),
    MaintenanceTaskId.CHECK_RINSE_AID: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CHECK_RINSE_AID,
        name="Check Rinse Aid Level",
        description="Ensure rinse aid dispenser is full for spot-free drying.",
        frequency=Frequency.MONTHLY,
        importance_level=ImportanceLevel.MEDIUM,
        time_minutes=2,
        steps=(
            "Open the dishwasher door.",
            "Locate the rinse aid dispenser (usually next to detergent dispenser).",
            "Open the cap/lid.",
            "Check the level (many have an indicator window).",
            "Fill with rinse aid if low.",
            "Adjust the dosing dial if needed (usually 1-5 or 1-6).",
            "Close the cap securely.",
        ),
        tools=("Rinse aid refill",),
        tips=(
            "Rinse aid helps water sheet off dishes instead of beading.",
            "Without it, you'll get water spots, especially on glasses.",
            "In hard water areas, set the dial to maximum.",
            "Rinse aid typically lasts 1-2 months.",
        ),
        signs_needed=(
            "Water spots on glasses",
            "Dishes not drying well",
            "Empty indicator light",
        ),
    ),
    MaintenanceTaskId.CHECK_SALT: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CHECK_SALT,
        name="Check Dishwasher Salt",
        description="Refill the salt compartment to soften water and improve cleaning.",
        frequency=Frequency.MONTHLY,
        importance_level=ImportanceLevel.HIGH,
        time_minutes=3,
        steps=(
            "Check if your dishwasher has a salt compartment (usually bottom left of tub).",
            "Unscrew the salt compartment cap.",
            "Check the salt level (may have indicator light).",
            "If low, use the funnel provided to add dishwasher salt.",
            "Fill until salt is visible at the top.",
            "Wipe any spilled salt from the tub.",
            "Replace the cap securely.",
        ),
        tools=("Dishwasher salt (not table salt!)",),
        tips=(
            "Only needed if you have a salt compartment and moderate/hard water.",
            "Use only dishwasher salt - table salt can damage the machine.",
            "Salt softens water, preventing limescale and improving cleaning.",
            "In soft water areas, you may not need salt at all.",
        ),
        signs_needed=(
            "Salt indicator light on",
            "White residue on dishes (hard water)",
            "Limescale buildup visible",
        ),
    ),
    MaintenanceTaskId.WIPE_EXTERIOR: MaintenanceTaskInfo(
        id=MaintenanceTaskId.WIPE_EXTERIOR,
        name="Wipe Exterior & Controls",
        description="Clean the door, handle, and control panel.",
        frequency=Frequency.WEEKLY,
        importance_level=ImportanceLevel.LOW,
        time_minutes=3,
        steps=(
            "Wipe the door front with a damp cloth.",
            "For stainless steel: wipe in direction of grain.",
            "Clean the handle (high-touch area).",
            "Wipe the control panel gently (don't spray directly).",
            "Dry with a clean cloth to prevent streaks.",
        ),
        tools=("Damp cloth", "Dry cloth", "Stainless steel cleaner (optional)"),
        tips=(
            "This is purely cosmetic but keeps your kitchen looking clean.",
            "Fingerprints show easily on stainless steel.",
            "Don't use abrasive cleaners on the control panel.",
        ),
        signs_needed=(
            "Visible fingerprints or smudges",
            "Kitchen cleaning day",
        ),
    ),
    MaintenanceTaskId.CHECK_DRAIN: MaintenanceTaskInfo(
        id=MaintenanceTaskId.CHECK_DRAIN,
        name="Check Drain Area",
        description="Inspect the drain area for blockages and debris.",
        frequency=Frequency.QUARTERLY,
        importance_level=ImportanceLevel.MEDIUM,
        time_minutes=5,
        steps=(
            "Remove the bottom rack.",
            "Locate the drain area at the bottom of the tub.",
            "Remove any visible debris (food particles, glass, etc.).",
            "Check that the drain cover isn't blocked.",
            "If connected to garbage disposal: run the disposal first.",
            "Look for standing water (sign of drainage issue).",
        ),
        tools=("Gloves (optional)", "Paper towel"),
        tips=(
            "Standing water after a cycle indicates a drainage problem.",
            "Small items like broken glass can block the drain.",
            "Always run garbage disposal before starting dishwasher.",
        ),
        signs_needed=(
            "Standing water after cycle",
            "Slow draining",
            "Gurgling sounds",
        ),
    ),
}


def get_maintenance_task(task_id: MaintenanceTaskId | str) -> MaintenanceTaskInfo | None:
    task = MAINTENANCE_TASKS.get(task_id)
    if task is None:
        logger.info("Unknown maintenance task", task_id=task_id)
    return task


def get_all_maintenance_tasks() -> list[MaintenanceTaskInfo]:
    return list(MAINTENANCE_TASKS.values())


def get_tasks_by_importance(level: ImportanceLevel | str) -> list[MaintenanceTaskInfo]:
    level = ImportanceLevel(level)
    return [task for task in MAINTENANCE_TASKS.values() if task.importance_level == level]


def get_critical_tasks() -> list[MaintenanceTaskInfo]:
    return get_tasks_by_importance(ImportanceLevel.CRITICAL)
