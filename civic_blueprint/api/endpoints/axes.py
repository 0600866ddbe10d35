from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from civic_blueprint.models.registry import AxisDefinition, AxisItem, AxisScoringConfig, DomainDefinition
from civic_blueprint.models.responses import SwipeEvent
from civic_blueprint.models.scoring import AssessmentProgress, AxisScore
from civic_blueprint.services.registry import get_default_registry
from civic_blueprint.services.scoring.axes import AxisScorer
from civic_blueprint.services.scoring.selection import ItemSelector

router = APIRouter(prefix="/axes", tags=["axes"])


class AxesSpecResponse(BaseModel):
    spec_version: str
    domains: list[DomainDefinition]
    axes: list[AxisDefinition]
    items: list[AxisItem]
    scoring: AxisScoringConfig


class AxisScoreRequest(BaseModel):
    swipes: list[SwipeEvent] = Field(default_factory=list)
    slider_positions: dict[str, int] = Field(
        default_factory=dict, description="Axis id -> slider position, converted to swipes"
    )


class AxisScoreResponse(BaseModel):
    scores: list[AxisScore]


@router.get("/spec", response_model=AxesSpecResponse)
async def get_axes_spec() -> AxesSpecResponse:
    registry = get_default_registry()
    return AxesSpecResponse(
        spec_version=registry.version,
        domains=list(registry.domains),
        axes=list(registry.axes),
        items=list(registry.axis_items),
        scoring=registry.axis_scoring,
    )


@router.post("/score", response_model=AxisScoreResponse)
async def score_axes(payload: AxisScoreRequest) -> AxisScoreResponse:
    scorer = AxisScorer(get_default_registry())
    try:
        swipes = payload.swipes + scorer.slider_responses_to_swipes(payload.slider_positions)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AxisScoreResponse(scores=scorer.score_axes(swipes))


class NextItemRequest(BaseModel):
    swipes: list[SwipeEvent] = Field(default_factory=list)
    selected_domains: list[str] | None = Field(default=None, description="Domain ids; all domains when omitted")


class NextItemResponse(BaseModel):
    item: AxisItem | None
    stop: bool
    progress: AssessmentProgress


@router.post("/next", response_model=NextItemResponse)
async def next_item(payload: NextItemRequest) -> NextItemResponse:
    selector = ItemSelector(get_default_registry())
    state = selector.build_state(payload.swipes, payload.selected_domains)
    return NextItemResponse(
        item=selector.select_next_item(state),
        stop=selector.should_stop_early(state),
        progress=selector.get_progress(state),
    )
