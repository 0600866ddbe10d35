from collections.abc import Iterable

import httpx
from loguru import logger
from pydantic import ValidationError

from civic_blueprint.core.base_client import BaseClient
from civic_blueprint.core.config import settings
from civic_blueprint.core.exceptions import UpstreamScoringError
from civic_blueprint.models.responses import ItemResponse, SwipeEvent, VignetteResponse
from civic_blueprint.models.scoring import AxisScore, ScoringResult


class RemoteScoringClient(BaseClient):
    """
    Client for a remote scoring service exposing the same /values/score and
    /axes/score endpoints as this application.

    Transport failures (after the base client's retries) and malformed
    payloads are raised as UpstreamScoringError.
    """

    def __init__(self, base_url: str | None = None, **kwargs):
        base_url = base_url or settings.REMOTE_SCORING_URL
        if not base_url:
            raise ValueError("REMOTE_SCORING_URL is not configured")
        kwargs.setdefault("timeout", settings.REMOTE_SCORING_TIMEOUT)
        kwargs.setdefault("max_retries", settings.REMOTE_SCORING_MAX_RETRIES)
        super().__init__(base_url=base_url, **kwargs)

    async def _post(self, url: str, payload: dict) -> dict:
        try:
            return await self.post(url, json=payload)
        except httpx.HTTPStatusError as e:
            logger.error(f"Remote scoring {url} returned {e.response.status_code}")
            raise UpstreamScoringError(f"Remote scoring failed: {e}", status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Remote scoring {url} unreachable: {e}")
            raise UpstreamScoringError(f"Remote scoring unreachable: {e}") from e
        except ValueError as e:
            # JSON decode failure
            raise UpstreamScoringError(f"Remote scoring returned invalid JSON: {e}") from e

    async def score_assessment(
        self,
        vignette_responses: Iterable[VignetteResponse],
        booster_responses: Iterable[ItemResponse] | None = None,
    ) -> ScoringResult:
        payload = {
            "vignette_responses": [r.model_dump() for r in vignette_responses],
            "booster_responses": [r.model_dump() for r in booster_responses or []],
        }
        data = await self._post("/values/score", payload)
        try:
            return ScoringResult.model_validate(data)
        except ValidationError as e:
            raise UpstreamScoringError(f"Remote value scores malformed: {e}") from e

    async def score_axes(self, swipes: Iterable[SwipeEvent]) -> list[AxisScore]:
        data = await self._post("/axes/score", {"swipes": [s.model_dump() for s in swipes]})
        try:
            return [AxisScore.model_validate(item) for item in data.get("scores", [])]
        except (ValidationError, AttributeError) as e:
            raise UpstreamScoringError(f"Remote axis scores malformed: {e}") from e
