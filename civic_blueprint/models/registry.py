"""
Registry data shapes.

Everything here is frozen and uses tuples for collections, so a registry shared
between callers can never be mutated in place.
"""

from pydantic import BaseModel, ConfigDict, Field

from civic_blueprint.core.constants import (
    DEFAULT_SHRINKAGE_K,
    DEFAULT_SLIDER_POSITIONS,
    DEFAULT_TOP_DRIVER_COUNT,
    DEFAULT_UNSURE_PENALTY,
)
from civic_blueprint.models.responses import SwipeResponse


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ValueDefinition(FrozenModel):
    id: str
    name: str = Field(description="Relatable display name")
    canonical_name: str = Field(description="Theory term, e.g. 'Universalism'")
    description: str = ""
    dimension_id: str
    opposite_value_id: str
    align_phrase: str | None = None
    differ_phrase: str | None = None
    policy_contexts: tuple[str, ...] = ()


class DimensionDefinition(FrozenModel):
    id: str
    name: str
    canonical_name: str
    description: str = ""
    value_ids: tuple[str, ...]
    opposite_dimension_id: str


class Tradeoff(FrozenModel):
    opposing_value_id: str
    opposing_weight: float = Field(description="Usually negative; only the magnitude is used")


class AssessmentItem(FrozenModel):
    id: str
    text: str
    value_id: str
    weight: float = Field(default=1.0, ge=0)
    reversed: bool = False
    tradeoff: Tradeoff | None = None


class VignetteOption(FrozenModel):
    id: str
    text: str
    value_id: str


class Vignette(FrozenModel):
    id: str
    scenario: str
    options: tuple[VignetteOption, ...] = Field(min_length=2)

    def to_items(self) -> tuple[AssessmentItem, ...]:
        """Each option scores like a weight-1 Likert item for its value."""
        return tuple(
            AssessmentItem(id=option.id, text=option.text, value_id=option.value_id, weight=1.0)
            for option in self.options
        )


class BoosterSetMeta(FrozenModel):
    id: str
    version: int
    title: str
    description: str
    item_count: int


class BoosterSet(FrozenModel):
    id: str
    version: int = 1
    title: str
    description: str = ""
    items: tuple[AssessmentItem, ...]

    def meta(self) -> BoosterSetMeta:
        return BoosterSetMeta(
            id=self.id,
            version=self.version,
            title=self.title,
            description=self.description,
            item_count=len(self.items),
        )


class AxisPole(FrozenModel):
    label: str
    interpretation: str = ""


class AxisDefinition(FrozenModel):
    id: str
    domain_id: str
    name: str
    description: str = ""
    pole_a: AxisPole
    pole_b: AxisPole
    recommended_sample_size: int = Field(default=6, ge=1)
    slider_positions: int = Field(default=DEFAULT_SLIDER_POSITIONS, ge=2)


class DomainDefinition(FrozenModel):
    id: str
    name: str
    why: str = ""
    axis_ids: tuple[str, ...]


class AxisItem(FrozenModel):
    """A swipe card. Agreeing pushes toward pole A where the key is +1, toward pole B where it is -1."""

    id: str
    text: str
    axis_keys: dict[str, int]
    level: str = "general"
    tags: tuple[str, ...] = ()


def _default_response_scale() -> dict[SwipeResponse, int]:
    return {"strong_disagree": -2, "disagree": -1, "agree": 1, "strong_agree": 2, "unsure": 0}


class AxisScoringConfig(FrozenModel):
    response_scale: dict[SwipeResponse, int] = Field(default_factory=_default_response_scale)
    shrinkage_k: float = Field(default=DEFAULT_SHRINKAGE_K, gt=0)
    unsure_penalty: float = Field(default=DEFAULT_UNSURE_PENALTY, ge=0)
    top_driver_count: int = Field(default=DEFAULT_TOP_DRIVER_COUNT, ge=1)


class SpecDocument(FrozenModel):
    """One versioned snapshot of every declared definition the engine reads."""

    spec_version: str
    values: tuple[ValueDefinition, ...]
    dimensions: tuple[DimensionDefinition, ...]
    items: tuple[AssessmentItem, ...] = ()
    vignettes: tuple[Vignette, ...] = ()
    booster_sets: tuple[BoosterSet, ...] = ()
    domains: tuple[DomainDefinition, ...] = ()
    axes: tuple[AxisDefinition, ...] = ()
    axis_items: tuple[AxisItem, ...] = ()
    axis_scoring: AxisScoringConfig = Field(default_factory=AxisScoringConfig)
