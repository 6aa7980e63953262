"""Quick start content: the 60-second guide, onboarding steps and dishwasher basics."""

from pydantic import BaseModel, ConfigDict


class QuickStartSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: list[str]


class QuickStartGuide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    sections: list[QuickStartSection]


class OnboardingStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step_number: int
    title: str
    action: str
    why_it_matters: str


class QuickWin(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    how_to: str
    expected_result: str


class Mistake(BaseModel):
    model_config = ConfigDict(frozen=True)

    mistake: str
    why_its_wrong: str
    what_to_do_instead: str


class ActionPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    tonight: list[str]
    this_week: list[str]
    ongoing: list[str]


class WashPhase(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    duration: str
    key_insight: str | None = None


class DishwasherBasics(BaseModel):
    model_config = ConfigDict(frozen=True)

    how_it_works: list[str]
    phases: list[WashPhase]
    detergent_role: str
    rinse_aid_role: str


# -----------------------------
# Guide
# -----------------------------

QUICK_START_GUIDE = QuickStartGuide(
    title="Get Cleaner Dishes in 60 Seconds",
    subtitle="Three changes that make an immediate difference",
    sections=[
        QuickStartSection(
            title="The Pre-Wash Secret",
            content=[
                "Your dishwasher runs a pre-wash before opening the detergent dispenser.",
                "Pods sit closed during this phase - plain water fails to cut grease.",
                "Put 1 tablespoon of powder loose in the door before closing.",
                'This single change fixes most "dishes not clean" problems.',
            ],
        ),
        QuickStartSection(
            title="Stop Pre-Rinsing",
            content=[
                "Don't rinse dishes before loading - just scrape off large chunks.",
                "Enzymes in detergent NEED food residue to work on.",
                "Pre-rinsing wastes 20+ litres of water per load.",
                "Dried-on food is fine - enzymes break it down regardless.",
            ],
        ),
        QuickStartSection(
            title="Use the Right Cycle",
            content=[
                "Quick cycle is only for water-marked glasses.",
                "Eco cycle is best for everyday dishes - enzymes need time.",
                "Normal cycle for mixed loads with some grease.",
                "Intensive only for baked-on, burnt, or very greasy items.",
            ],
        ),
    ],
)

ONBOARDING_STEPS: tuple[OnboardingStep, ...] = (
    OnboardingStep(
        step_number=1,
        title="Switch to Powder",
        action="Buy powder detergent instead of pods. Any supermarket brand works.",
        why_it_matters="Powder lets you use the pre-wash phase that pods waste completely.",
    ),
    OnboardingStep(
        step_number=2,
        title="Add Pre-Wash Detergent",
        action="Put 1 tablespoon of powder loose in the door or tub floor before closing.",
        why_it_matters="This dissolves during pre-wash, tackling grease before it can spread.",
    ),
    OnboardingStep(
        step_number=3,
        title="Fill the Dispenser",
        action="Put 1.5-2 tablespoons in the dispenser compartment.",
        why_it_matters="Fresh detergent for the main wash finishes the cleaning job.",
    ),
    OnboardingStep(
        step_number=4,
        title="Stop Pre-Rinsing",
        action="Scrape large chunks into the bin. Load everything else as-is.",
        why_it_matters="Enzymes need food residue to work. Rinsing removes what they need.",
    ),
    OnboardingStep(
        step_number=5,
        title="Choose the Right Cycle",
        action="Use Eco for most loads, Normal for greasy dishes.",
        why_it_matters="Longer cycles give enzymes time to break down food properly.",
    ),
)

QUICK_WIN = QuickWin(
    title="The One Change That Fixes Most Problems",
    description=(
        "Add pre-wash detergent. That's it. This single technique solves greasy dishes, food residue, "
        "and poor cleaning for the majority of users."
    ),
    how_to=(
        "Put 1 tablespoon of powder loose in the door or on the tub floor before you close the door. "
        "Then add 1.5-2 tablespoons in the dispenser as normal. Run Normal or Eco cycle."
    ),
    expected_result=(
        "Your greasy dishes will come out clean. The grease that used to remain will be broken down "
        "during pre-wash instead of spreading around."
    ),
)

TOP_MISTAKES: tuple[Mistake, ...] = (
    Mistake(
        mistake="Pre-rinsing dishes before loading",
        why_its_wrong="Enzymes in detergent need food residue to work on. Rinsing removes what they need and wastes water.",
        what_to_do_instead="Scrape large chunks into the bin. Load everything else as-is, even dried-on food.",
    ),
    Mistake(
        mistake="Using pods for all loads",
        why_its_wrong="Pods can't provide detergent during the pre-wash phase. Grease spreads instead of being cleaned.",
        what_to_do_instead="Switch to powder. Add some loose in the door for pre-wash, rest in the dispenser.",
    ),
    Mistake(
        mistake="Using Quick cycle for everything",
        why_its_wrong="Quick cycles don't give enzymes enough time to break down food. Protein especially needs time.",
        what_to_do_instead="Use Eco or Normal for everyday dishes. Save Quick for water-marked glasses only.",
    ),
    Mistake(
        mistake="Not using enough detergent",
        why_its_wrong="Packet recommendations assume average water. Hard water needs 50-100% more.",
        what_to_do_instead="Test your water hardness. Increase detergent if you have hard water or heavy soil.",
    ),
    Mistake(
        mistake="Ignoring the filter",
        why_its_wrong="A clogged filter recirculates dirty water. Nothing comes clean.",
        what_to_do_instead="Clean the filter monthly. It takes 2 minutes and is the most important maintenance.",
    ),
)

IMMEDIATE_ACTION_PLAN = ActionPlan(
    tonight=[
        "Put 1 tablespoon of powder loose in the door before closing",
        "Put 1.5 tablespoons in the dispenser",
        "Run Normal or Eco cycle (not Quick)",
        "Don't rinse dishes - just scrape large chunks",
    ],
    this_week=[
        "Buy powder detergent if you're using pods",
        "Check and clean the filter (bottom of tub, twist to remove)",
        "Fill the rinse aid dispenser if it's low",
        "Test your water hardness with the soap bottle test",
    ],
    ongoing=[
        "Always add pre-wash detergent (loose in door)",
        "Clean filter monthly",
        "Run a vinegar cleaning cycle monthly",
        "Use Eco for most loads - it actually cleans better",
    ],
)

# -----------------------------
# Basics
# -----------------------------

DISHWASHER_BASICS = DishwasherBasics(
    how_it_works=[
        "Water sprays from rotating arms, hitting dishes from below and above.",
        "Detergent contains enzymes that break down specific types of food.",
        "Hot water helps dissolve grease and sanitise dishes.",
        "Multiple rinses remove detergent and loosened food.",
        "Final rinse with rinse aid helps water sheet off for drying.",
    ],
    phases=[
        WashPhase(
            name="Pre-Wash",
            description="Water sprays to loosen food. Dispenser is CLOSED during this phase.",
            duration="5-15 minutes",
            key_insight="This is why pods fail - they're trapped in the closed dispenser. Loose powder works here.",
        ),
        WashPhase(
            name="Main Wash",
            description="Dispenser opens, releasing detergent. Hot water and enzymes clean dishes.",
            duration="20-60 minutes",
        ),
        WashPhase(
            name="Rinse Cycles",
            description="Clean water removes loosened food and detergent residue.",
            duration="10-20 minutes",
        ),
        WashPhase(
            name="Final Rinse",
            description="Hot water rinse with rinse aid. Helps water sheet off for spot-free drying.",
            duration="5-10 minutes",
        ),
        WashPhase(
            name="Drying",
            description="Residual heat evaporates water. Some machines use a fan or heating element.",
            duration="15-30 minutes (varies)",
        ),
    ],
    detergent_role=(
        "Detergent contains surfactants (cut grease), enzymes (break down food), and builders (soften water). "
        "The enzymes do most of the cleaning work on protein and starch."
    ),
    rinse_aid_role=(
        "Rinse aid reduces water surface tension so it sheets off dishes instead of beading. "
        "This prevents water spots and helps dishes dry faster."
    ),
)


def get_quick_start_guide() -> QuickStartGuide:
    return QUICK_START_GUIDE


def get_onboarding_steps() -> list[OnboardingStep]:
    return list(ONBOARDING_STEPS)


def get_quick_win() -> QuickWin:
    return QUICK_WIN


def get_top_mistakes() -> list[Mistake]:
    return list(TOP_MISTAKES)


def get_immediate_action_plan() -> ActionPlan:
    return IMMEDIATE_ACTION_PLAN


def get_dishwasher_basics() -> DishwasherBasics:
    return DISHWASHER_BASICS
