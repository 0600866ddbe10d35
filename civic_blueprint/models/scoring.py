from pydantic import BaseModel, Field


class ValueScore(BaseModel):
    value_id: str
    name: str
    raw_mean: float = Field(description="1-5 scale, 3 when unanswered")
    ipsatized: float = Field(description="raw_mean minus the respondent's overall mean")
    n_answered: float = Field(description="Answered weight, including tradeoff weight")
    dimension_id: str


class DimensionScore(BaseModel):
    dimension_id: str
    name: str
    raw_mean: float
    ipsatized: float
    value_ids: list[str] = Field(default_factory=list)


class ScoringResult(BaseModel):
    values: list[ValueScore]
    dimensions: list[DimensionScore]
    individual_mean: float

    def get_value(self, value_id: str) -> ValueScore | None:
        return next((v for v in self.values if v.value_id == value_id), None)

    def get_dimension(self, dimension_id: str) -> DimensionScore | None:
        return next((d for d in self.dimensions if d.dimension_id == dimension_id), None)

    def get_top_values(self, limit: int = 3) -> list[ValueScore]:
        """Values ranked by ipsatized score (ties keep registry order)."""
        return sorted(self.values, key=lambda v: v.ipsatized, reverse=True)[:limit]


class AxisScore(BaseModel):
    axis_id: str
    raw_sum: float = 0.0
    n_answered: int = 0
    n_unsure: int = 0
    normalized: float = Field(default=0.0, ge=-1.0, le=1.0)
    shrunk: float = Field(default=0.0, ge=-1.0, le=1.0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    top_drivers: list[str] = Field(default_factory=list)

    @property
    def learned_value_float(self) -> float:
        """Display mapping: shrunk -1 -> 10, shrunk +1 -> 0."""
        return 5.0 - 5.0 * self.shrunk


class AdaptiveState(BaseModel):
    """Where an adaptive swipe session stands: what was asked, per-domain coverage, current axis scores."""

    selected_domain_ids: list[str] = Field(default_factory=list)
    answered_item_ids: list[str] = Field(default_factory=list)
    total_questions: int = Field(default=0, ge=0)
    domain_coverage: dict[str, int] = Field(default_factory=dict)
    axis_scores: dict[str, AxisScore] = Field(default_factory=dict)


class AssessmentProgress(BaseModel):
    percentage: float = Field(ge=0, le=100)
    questions_answered: int
    estimated_total: int
    dominant_strategy: str
