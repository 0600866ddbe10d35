from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SwipeResponse = Literal["strong_disagree", "disagree", "agree", "strong_agree", "unsure"]


class ItemResponse(BaseModel):
    """A single Likert-style answer (1 = strongly disagree, 5 = strongly agree)."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    response: int = Field(ge=1, le=5)


class VignetteResponse(BaseModel):
    """The one option a user picked for a forced-choice scenario."""

    model_config = ConfigDict(frozen=True)

    vignette_id: str
    selected_option_id: str


class SwipeEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    response: SwipeResponse
