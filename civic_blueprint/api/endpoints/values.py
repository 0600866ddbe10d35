from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from civic_blueprint.core.config import settings
from civic_blueprint.models.registry import BoosterSet, BoosterSetMeta, DimensionDefinition, ValueDefinition, Vignette
from civic_blueprint.models.responses import ItemResponse, VignetteResponse
from civic_blueprint.models.scoring import ScoringResult
from civic_blueprint.services.registry import get_default_registry
from civic_blueprint.services.scoring.expander import merge_responses
from civic_blueprint.services.scoring.values import ValueScorer

router = APIRouter(prefix="/values", tags=["values"])


class ValuesSpecResponse(BaseModel):
    spec_version: str
    values: list[ValueDefinition]
    dimensions: list[DimensionDefinition]


class ValueScoreRequest(BaseModel):
    vignette_responses: list[VignetteResponse] = Field(default_factory=list)
    responses: list[ItemResponse] = Field(default_factory=list, description="Direct Likert item responses")
    booster_responses: list[ItemResponse] = Field(
        default_factory=list, description="Booster responses; these win over earlier answers to the same item"
    )


@router.get("/spec", response_model=ValuesSpecResponse)
async def get_values_spec() -> ValuesSpecResponse:
    registry = get_default_registry()
    return ValuesSpecResponse(
        spec_version=registry.version, values=list(registry.values), dimensions=list(registry.dimensions)
    )


@router.get("/vignettes", response_model=list[Vignette])
async def get_vignettes(randomize: bool | None = Query(default=None)) -> list[Vignette]:
    shuffle = settings.RANDOMIZE_VIGNETTES if randomize is None else randomize
    return get_default_registry().get_vignettes(randomize=shuffle)


@router.get("/boosters", response_model=list[BoosterSetMeta])
async def list_boosters() -> list[BoosterSetMeta]:
    return get_default_registry().get_booster_sets_meta()


@router.get("/boosters/{booster_id}", response_model=BoosterSet)
async def get_booster(booster_id: str) -> BoosterSet:
    booster = get_default_registry().get_booster_set(booster_id)
    if booster is None:
        raise HTTPException(status_code=404, detail=f"Booster set '{booster_id}' not found")
    return booster


@router.post("/score", response_model=ScoringResult)
async def score_values(payload: ValueScoreRequest) -> ScoringResult:
    scorer = ValueScorer(get_default_registry())
    synthetic = scorer.expander.expand_vignette_responses(payload.vignette_responses)
    merged = merge_responses(synthetic, payload.responses, payload.booster_responses)
    return scorer.score_responses(merged)
