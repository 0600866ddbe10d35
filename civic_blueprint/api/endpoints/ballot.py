from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from civic_blueprint.models.ballot import (
    Candidate,
    CandidateMatch,
    CandidateRaceItem,
    PropositionItem,
    PropositionRecommendation,
    ValueAxis,
    ValueCandidateMatch,
    ValuePropositionRecommendation,
)
from civic_blueprint.models.profile import BlueprintProfile
from civic_blueprint.models.scoring import ValueScore
from civic_blueprint.services.alignment import (
    compute_candidate_matches,
    compute_proposition_recommendation,
    compute_value_candidate_matches,
    compute_value_proposition_recommendation,
    profile_to_value_axes,
)
from civic_blueprint.services.registry import get_default_registry

router = APIRouter(prefix="/ballot", tags=["ballot"])


class AxisInput(BaseModel):
    axes: list[ValueAxis] | None = Field(default=None, description="Explicit axis positions")
    profile: BlueprintProfile | None = Field(default=None, description="Used when axes are not given")

    def resolve_axes(self) -> list[ValueAxis]:
        if self.axes is not None:
            return self.axes
        if self.profile is not None:
            return profile_to_value_axes(self.profile, get_default_registry())
        raise HTTPException(status_code=400, detail="Provide either axes or a profile.")


class PropositionRequest(AxisInput):
    item: PropositionItem


class CandidateRaceRequest(AxisInput):
    item: CandidateRaceItem


class ValuePropositionRequest(BaseModel):
    item: PropositionItem
    value_scores: list[ValueScore]


class ValueCandidateRequest(BaseModel):
    candidates: list[Candidate]
    value_scores: list[ValueScore]


@router.post("/propositions/recommend", response_model=PropositionRecommendation)
async def recommend_proposition(payload: PropositionRequest) -> PropositionRecommendation:
    return compute_proposition_recommendation(payload.item, payload.resolve_axes())


@router.post("/propositions/value-recommend", response_model=ValuePropositionRecommendation)
async def recommend_proposition_by_values(payload: ValuePropositionRequest) -> ValuePropositionRecommendation:
    return compute_value_proposition_recommendation(payload.item, payload.value_scores)


@router.post("/candidates/match", response_model=list[CandidateMatch])
async def match_candidates(payload: CandidateRaceRequest) -> list[CandidateMatch]:
    return compute_candidate_matches(payload.item, payload.resolve_axes())


@router.post("/candidates/value-match", response_model=list[ValueCandidateMatch])
async def match_candidates_by_values(payload: ValueCandidateRequest) -> list[ValueCandidateMatch]:
    return compute_value_candidate_matches(payload.candidates, payload.value_scores, get_default_registry())
