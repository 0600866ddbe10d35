from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from civic_blueprint.core.constants import AXIS_NEUTRAL, PROFILE_VERSION

Provenance = Literal["default", "learned_from_swipes", "user_edited"]
LearningMode = Literal["normal", "dampened", "frozen"]


class AxisEstimates(BaseModel):
    model_config = ConfigDict(frozen=True)

    learned_score: float = Field(default=0.0, ge=-1.0, le=1.0, description="Shrunk axis score")
    learned_value_float: float = Field(default=float(AXIS_NEUTRAL), ge=0.0, le=10.0)


class AxisEvidence(BaseModel):
    model_config = ConfigDict(frozen=True)

    n_items_answered: int = Field(default=0, ge=0)
    n_unsure: int = Field(default=0, ge=0)
    top_driver_item_ids: tuple[str, ...] = ()


class AxisProfile(BaseModel):
    """
    One user's position on one policy axis.

    value_0_10 is what the user sees; estimates keep what the evidence says,
    so an edited axis can always be reset back to the learned value.
    """

    model_config = ConfigDict(frozen=True)

    axis_id: str
    value_0_10: int = Field(default=AXIS_NEUTRAL, ge=0, le=10)
    source: Provenance = "default"
    confidence_0_1: float = Field(default=0.0, ge=0.0, le=1.0)
    locked: bool = False
    learning_mode: LearningMode = "normal"
    estimates: AxisEstimates = Field(default_factory=AxisEstimates)
    evidence: AxisEvidence = Field(default_factory=AxisEvidence)
    importance: int | None = Field(default=None, ge=0, le=10)


class DomainImportance(BaseModel):
    model_config = ConfigDict(frozen=True)

    value_0_10: int = Field(default=AXIS_NEUTRAL, ge=0, le=10)
    source: Provenance = "default"
    confidence_0_1: float = Field(default=0.0, ge=0.0, le=1.0)
    last_updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DomainProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    domain_id: str
    importance: DomainImportance = Field(default_factory=DomainImportance)
    axes: tuple[AxisProfile, ...] = ()


class BlueprintProfile(BaseModel):
    """
    The complete per-user profile.

    Instances are immutable: every mutation builds a full replacement, so a
    half-applied update can never be observed.
    """

    model_config = ConfigDict(frozen=True)

    profile_version: str = PROFILE_VERSION
    user_id: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    domains: tuple[DomainProfile, ...] = ()

    @model_validator(mode="after")
    def check_unique_ids(self) -> "BlueprintProfile":
        domain_ids: set[str] = set()
        axis_ids: set[str] = set()
        for domain in self.domains:
            if domain.domain_id in domain_ids:
                raise ValueError(f"Duplicate domain id in profile: {domain.domain_id}")
            domain_ids.add(domain.domain_id)
            for axis in domain.axes:
                if axis.axis_id in axis_ids:
                    raise ValueError(f"Duplicate axis id in profile: {axis.axis_id}")
                axis_ids.add(axis.axis_id)
        return self

    def iter_axes(self) -> Iterator[AxisProfile]:
        for domain in self.domains:
            yield from domain.axes

    def get_axis(self, axis_id: str) -> AxisProfile | None:
        return next((a for a in self.iter_axes() if a.axis_id == axis_id), None)

    def get_domain(self, domain_id: str) -> DomainProfile | None:
        return next((d for d in self.domains if d.domain_id == domain_id), None)

    def axis_values(self) -> dict[str, int]:
        """Flat axis id -> value_0_10 map, in profile order."""
        return {a.axis_id: a.value_0_10 for a in self.iter_axes()}
