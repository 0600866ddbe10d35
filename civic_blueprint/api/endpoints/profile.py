from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from civic_blueprint.models.profile import BlueprintProfile
from civic_blueprint.models.responses import SwipeEvent
from civic_blueprint.services.profile import builder, mutator
from civic_blueprint.services.registry import get_default_registry
from civic_blueprint.services.scoring.axes import AxisScorer

# Stateless: the caller owns storage and sends the current profile with each request
router = APIRouter(prefix="/profile", tags=["profile"])


class NewProfileRequest(BaseModel):
    user_id: str


class SwipesRequest(BaseModel):
    profile: BlueprintProfile
    swipes: list[SwipeEvent]


class SlidersRequest(BaseModel):
    profile: BlueprintProfile
    positions: dict[str, int]
    importances: dict[str, int] = Field(default_factory=dict)


class AxisEditRequest(BaseModel):
    profile: BlueprintProfile
    axis_id: str
    value: int | None = None
    importance: int | None = None


@router.post("/default", response_model=BlueprintProfile)
async def new_profile(payload: NewProfileRequest) -> BlueprintProfile:
    return builder.create_default_profile(payload.user_id, get_default_registry())


@router.post("/reset", response_model=BlueprintProfile)
async def reset(profile: BlueprintProfile) -> BlueprintProfile:
    return builder.reset_profile(profile, get_default_registry())


@router.post("/swipes", response_model=BlueprintProfile)
async def apply_swipes(payload: SwipesRequest) -> BlueprintProfile:
    scores = AxisScorer(get_default_registry()).score_axes(payload.swipes)
    return mutator.apply_axis_scores(payload.profile, scores)


@router.post("/sliders", response_model=BlueprintProfile)
async def apply_sliders(payload: SlidersRequest) -> BlueprintProfile:
    try:
        return mutator.apply_slider_values(
            payload.profile, payload.positions, payload.importances, registry=get_default_registry()
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/axis", response_model=BlueprintProfile)
async def edit_axis(payload: AxisEditRequest) -> BlueprintProfile:
    profile = payload.profile
    try:
        if payload.value is not None:
            profile = mutator.update_axis_value(profile, payload.axis_id, payload.value)
        if payload.importance is not None:
            profile = mutator.update_axis_importance(profile, payload.axis_id, payload.importance)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return profile


@router.post("/axis/{axis_id}/lock", response_model=BlueprintProfile)
async def toggle_lock(axis_id: str, profile: BlueprintProfile) -> BlueprintProfile:
    return mutator.toggle_axis_lock(profile, axis_id)


@router.post("/axis/{axis_id}/reset", response_model=BlueprintProfile)
async def reset_axis(axis_id: str, profile: BlueprintProfile) -> BlueprintProfile:
    return mutator.reset_axis_to_learned(profile, axis_id)
