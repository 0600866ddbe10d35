from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

Vote = Literal["yes", "no"]
AxisAlignment = Literal["yes", "no", "neutral"]
MatchStrength = Literal["strong", "moderate", "weak", "opposed"]


def _check_range(effects: dict[str, float], low: float, high: float, label: str) -> dict[str, float]:
    for key, value in effects.items():
        if not low <= value <= high:
            raise ValueError(f"{label} for '{key}' must be within [{low}, {high}], got {value}")
    return effects


class ValueAxis(BaseModel):
    """A user's position on one axis, as consumed by the alignment functions."""

    id: str
    name: str
    description: str = ""
    value: float = Field(ge=0, le=10)
    pole_a: str
    pole_b: str
    weight: float = Field(default=1.0, ge=0, description="Importance weight, 1 = average")


class PropositionItem(BaseModel):
    id: str
    title: str
    question_text: str = ""
    relevant_axes: list[str] = Field(default_factory=list)
    yes_axis_effects: dict[str, float] = Field(
        default_factory=dict, description="Axis id -> effect of a YES vote; negative pushes toward pole A"
    )
    yes_value_effects: dict[str, float] = Field(default_factory=dict)

    @field_validator("yes_axis_effects", "yes_value_effects")
    @classmethod
    def effects_in_range(cls, v: dict[str, float]) -> dict[str, float]:
        return _check_range(v, -1.0, 1.0, "Effect")


class Candidate(BaseModel):
    id: str
    name: str
    party: str | None = None
    incumbent: bool = False
    stances: dict[str, float] = Field(default_factory=dict, description="Axis id -> 0-10 stance")
    value_stances: dict[str, float] = Field(default_factory=dict, description="Value id -> -1..1 stance")

    @field_validator("stances")
    @classmethod
    def stances_in_range(cls, v: dict[str, float]) -> dict[str, float]:
        return _check_range(v, 0.0, 10.0, "Stance")

    @field_validator("value_stances")
    @classmethod
    def value_stances_in_range(cls, v: dict[str, float]) -> dict[str, float]:
        return _check_range(v, -1.0, 1.0, "Value stance")


class CandidateRaceItem(BaseModel):
    id: str
    office: str
    candidates: list[Candidate] = Field(default_factory=list)
    relevant_axes: list[str] | None = None

    @model_validator(mode="after")
    def derive_relevant_axes(self) -> "CandidateRaceItem":
        # Falls back to every axis any candidate has a stance on, first-seen order
        if self.relevant_axes is None:
            seen: dict[str, None] = {}
            for candidate in self.candidates:
                for axis_id in candidate.stances:
                    seen.setdefault(axis_id, None)
            self.relevant_axes = list(seen)
        return self


class AxisBreakdown(BaseModel):
    axis_id: str
    axis_name: str
    user_value: float
    user_stance_label: str
    yes_aligns_with: str
    no_aligns_with: str
    alignment: AxisAlignment


class PropositionRecommendation(BaseModel):
    vote: Vote | None = None
    normalized_score: float = 0.0
    confidence: float = Field(default=0.0, ge=0, le=1)
    explanation: str = ""
    factors: list[str] = Field(default_factory=list)
    breakdown: list[AxisBreakdown] = Field(default_factory=list)


class CandidateAxisComparison(BaseModel):
    axis_id: str
    axis_name: str
    user_value: float
    user_label: str
    candidate_value: float
    candidate_label: str
    difference: float
    alignment: MatchStrength


class CandidateMatch(BaseModel):
    candidate_id: str
    candidate_name: str
    match_percent: int = Field(ge=0, le=100)
    is_best_match: bool = False
    key_agreements: list[str] = Field(default_factory=list)
    key_disagreements: list[str] = Field(default_factory=list)
    axis_comparisons: list[CandidateAxisComparison] = Field(default_factory=list)


class ValueBreakdown(BaseModel):
    value_id: str
    value_name: str
    user_score: float = Field(description="1-5 raw mean")
    user_percent: int = Field(ge=0, le=100)
    effect_direction: float
    alignment: AxisAlignment


class ValuePropositionRecommendation(BaseModel):
    vote: Vote | None = None
    normalized_score: float = 0.0
    confidence: float = Field(default=0.0, ge=0, le=1)
    explanation: str = ""
    top_factors: list[str] = Field(default_factory=list)
    breakdown: list[ValueBreakdown] = Field(default_factory=list)


class ValueComparisonDetail(BaseModel):
    value_id: str
    value_name: str
    policy_context: str
    user_preference: float = Field(description="-1..1")
    candidate_stance: float = Field(description="-1..1")
    difference: float = Field(description="Distance on the 0-10 scale")
    alignment: MatchStrength
    explanation: str


class ValueCandidateMatch(BaseModel):
    candidate_id: str
    candidate_name: str
    match_percent: int = Field(ge=0, le=100)
    is_best_match: bool = False
    aligned_values: list[str] = Field(default_factory=list)
    conflicting_values: list[str] = Field(default_factory=list)
    details: list[ValueComparisonDetail] = Field(default_factory=list)
