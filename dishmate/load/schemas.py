"""Load advisor input and output contracts."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from dishmate.types import CycleType, GreaseFactor, ItemType, LoadQuantity, SoilType, Urgency, WaterHardness


class LoadInput(BaseModel):
    """Facts about a load, as collected by the presentation layer.

    Item order matters: loading tips are returned in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    items: list[ItemType] = Field(default_factory=list)
    soil_types: list[SoilType] = Field(default_factory=list)
    quantity: LoadQuantity
    urgency: Urgency
    water_hardness: WaterHardness | None = Field(
        default=None,
        description="Defaults to moderate when not supplied",
    )


@dataclass(frozen=True)
class LoadCalculation:
    """Derived load state used for cycle selection.

    Attributes:
        needs_sanitise: Baby items present
        needs_gentle: Delicate items present
        soil_score: Worst soil severity present (1-5)
        grease_factor: Coarse grease tier, sizes the pre-wash dose
        has_acidic_risk: Acidic soil present (staining risk)
    """

    needs_sanitise: bool
    needs_gentle: bool
    soil_score: int
    grease_factor: GreaseFactor
    has_acidic_risk: bool


@dataclass(frozen=True)
class DosingResult:
    prewash_dose: str
    main_dose: str


class Recommendation(BaseModel):
    """Cycle, dosing and loading advice for one load.

    ``warnings`` is None (not an empty list) when nothing needs flagging.
    """

    model_config = ConfigDict(frozen=True)

    cycle: CycleType
    prewash_dose: str
    main_dose: str
    prerinse_advice: str
    loading_tips: list[str]
    reasoning: str
    warnings: list[str] | None = None
