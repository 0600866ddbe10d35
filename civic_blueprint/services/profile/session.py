import asyncio
from collections.abc import Callable, Iterable

from loguru import logger

from civic_blueprint.models.profile import BlueprintProfile
from civic_blueprint.models.responses import ItemResponse, SwipeEvent, VignetteResponse
from civic_blueprint.models.scoring import ScoringResult
from civic_blueprint.services.profile.mutator import apply_axis_scores
from civic_blueprint.services.registry import SpecRegistry, get_default_registry
from civic_blueprint.services.scoring.axes import AxisScorer
from civic_blueprint.services.scoring_client import RemoteScoringClient


class ProfileSession:
    """
    Owns one user's profile for the life of a session.

    Mutations run one at a time under a lock. A remote re-score is the only
    await inside a mutation; its result replaces the profile in a single
    assignment, and a failed call leaves the previous profile in place.
    """

    def __init__(
        self,
        profile: BlueprintProfile,
        registry: SpecRegistry | None = None,
        scoring_client: RemoteScoringClient | None = None,
    ):
        self._profile = profile
        self.registry = registry or get_default_registry()
        self.scoring_client = scoring_client
        self.value_scores: ScoringResult | None = None
        self._lock = asyncio.Lock()

    @property
    def profile(self) -> BlueprintProfile:
        return self._profile

    async def apply(self, mutation: Callable[..., BlueprintProfile], *args, **kwargs) -> BlueprintProfile:
        """Run a pure mutator (e.g. update_axis_value) against the current profile."""
        async with self._lock:
            self._profile = mutation(self._profile, *args, **kwargs)
            return self._profile

    async def apply_swipes(self, swipes: Iterable[SwipeEvent]) -> BlueprintProfile:
        """Score swipes locally and fold the result into the profile."""
        scores = AxisScorer(self.registry).score_axes(swipes)
        async with self._lock:
            self._profile = apply_axis_scores(self._profile, scores)
            return self._profile

    async def rescore_axes_remote(self, swipes: Iterable[SwipeEvent]) -> BlueprintProfile:
        """
        Re-score axes through the remote scorer and apply the result.

        Raises:
            UpstreamScoringError: the remote call failed; the profile is unchanged
        """
        client = self._require_client()
        swipes = list(swipes)
        async with self._lock:
            scores = await client.score_axes(swipes)
            self._profile = apply_axis_scores(self._profile, scores)
            logger.info(f"Applied remote axis scores for user {self._profile.user_id}")
            return self._profile

    async def complete_booster(
        self,
        vignette_responses: Iterable[VignetteResponse],
        booster_responses: Iterable[ItemResponse],
    ) -> ScoringResult:
        """
        Re-score values after a booster set through the remote scorer.

        Raises:
            UpstreamScoringError: the remote call failed; previous value scores are kept
        """
        client = self._require_client()
        vignette_responses = list(vignette_responses)
        booster_responses = list(booster_responses)
        async with self._lock:
            result = await client.score_assessment(vignette_responses, booster_responses)
            self.value_scores = result
            return result

    def _require_client(self) -> RemoteScoringClient:
        if self.scoring_client is None:
            raise RuntimeError("ProfileSession has no remote scoring client configured")
        return self.scoring_client
