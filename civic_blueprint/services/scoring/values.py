from collections.abc import Iterable, Mapping

from loguru import logger

from civic_blueprint.core.constants import (
    IPSATIZED_DISPLAY_MAX,
    IPSATIZED_DISPLAY_MIN,
    LIKERT_MAX,
    LIKERT_MIN,
    LIKERT_NEUTRAL,
    REVERSE_PIVOT,
)
from civic_blueprint.models.responses import ItemResponse, VignetteResponse
from civic_blueprint.models.scoring import DimensionScore, ScoringResult, ValueScore
from civic_blueprint.services.registry import SpecRegistry, get_default_registry
from civic_blueprint.services.scoring.expander import ResponseExpander, merge_responses
from civic_blueprint.shared.numbers import clamp, round2, round_half_up


class _Accumulator:
    __slots__ = ("sum", "count")

    def __init__(self):
        self.sum = 0.0
        self.count = 0.0


class ValueScorer:
    """
    Aggregates item responses into value and dimension scores.

    Accumulation walks registry items in registry order, never response
    order, so the result does not depend on how responses were ordered.
    """

    def __init__(self, registry: SpecRegistry):
        self.registry = registry
        self.expander = ResponseExpander(registry)

    def _accumulate(self, response_map: Mapping[str, int]) -> dict[str, _Accumulator]:
        acc = {v.id: _Accumulator() for v in self.registry.values}

        for item in self.registry.scored_items:
            response = response_map.get(item.id)
            if response is None:
                continue
            if not LIKERT_MIN <= response <= LIKERT_MAX:
                raise ValueError(f"Response for item '{item.id}' must be within 1-5, got {response}")

            score = REVERSE_PIVOT - response if item.reversed else response
            primary = acc[item.value_id]
            primary.sum += score * item.weight
            primary.count += item.weight

            if item.tradeoff:
                # Agreeing with the item is evidence against the paired value
                weight = abs(item.tradeoff.opposing_weight)
                opposing = acc[item.tradeoff.opposing_value_id]
                opposing.sum += (REVERSE_PIVOT - score) * weight
                opposing.count += weight

        unknown = [item_id for item_id in response_map if item_id not in self.registry.items_by_id]
        if unknown:
            logger.debug(f"Skipped {len(unknown)} responses for unknown items: {unknown[:5]}")
        return acc

    def score_responses(self, responses: Iterable[ItemResponse] | Mapping[str, int]) -> ScoringResult:
        """
        Score item responses.

        Args:
            responses: ItemResponse objects, each item at most once, or an
                already merged item id -> response map (see merge_responses)

        Returns:
            ScoringResult with one ValueScore per registry value, one
            DimensionScore per dimension, and the individual mean

        Raises:
            ValueError: when the same item id is answered twice
        """
        response_map = responses if isinstance(responses, Mapping) else _unique_responses(responses)
        acc = self._accumulate(response_map)

        total_sum = sum(a.sum for a in acc.values())
        total_count = sum(a.count for a in acc.values())
        individual_mean = total_sum / total_count if total_count > 0 else LIKERT_NEUTRAL

        value_scores: list[ValueScore] = []
        for value in self.registry.values:
            a = acc[value.id]
            raw_mean = a.sum / a.count if a.count > 0 else LIKERT_NEUTRAL
            value_scores.append(
                ValueScore(
                    value_id=value.id,
                    name=value.name,
                    raw_mean=round2(raw_mean),
                    ipsatized=round2(raw_mean - individual_mean),
                    n_answered=a.count,
                    dimension_id=value.dimension_id,
                )
            )

        return ScoringResult(
            values=value_scores,
            dimensions=self._score_dimensions(value_scores),
            individual_mean=individual_mean,
        )

    def _score_dimensions(self, value_scores: list[ValueScore]) -> list[DimensionScore]:
        by_id = {v.value_id: v for v in value_scores}
        dimensions: list[DimensionScore] = []
        for dimension in self.registry.dimensions:
            answered = [by_id[v] for v in dimension.value_ids if by_id[v].n_answered > 0]
            if answered:
                raw_mean = round2(sum(v.raw_mean for v in answered) / len(answered))
                ipsatized = round2(sum(v.ipsatized for v in answered) / len(answered))
            else:
                raw_mean, ipsatized = LIKERT_NEUTRAL, 0.0
            dimensions.append(
                DimensionScore(
                    dimension_id=dimension.id,
                    name=dimension.name,
                    raw_mean=raw_mean,
                    ipsatized=ipsatized,
                    value_ids=list(dimension.value_ids),
                )
            )
        return dimensions

    def score_assessment(
        self,
        vignette_responses: Iterable[VignetteResponse],
        booster_responses: Iterable[ItemResponse] | None = None,
    ) -> ScoringResult:
        """Expand vignette picks, merge booster responses over them, then score."""
        synthetic = self.expander.expand_vignette_responses(vignette_responses)
        merged = merge_responses(synthetic, booster_responses or [])
        return self.score_responses(merged)


def _unique_responses(responses: Iterable[ItemResponse]) -> dict[str, int]:
    response_map: dict[str, int] = {}
    for r in responses:
        if r.item_id in response_map:
            raise ValueError(f"Item '{r.item_id}' answered more than once; merge responses first")
        response_map[r.item_id] = r.response
    return response_map


def ipsatized_to_percent(ipsatized: float) -> int:
    """Map an ipsatized score (clamped to -2..+2) onto 0-100."""
    x = clamp(ipsatized, IPSATIZED_DISPLAY_MIN, IPSATIZED_DISPLAY_MAX)
    return round_half_up((x - IPSATIZED_DISPLAY_MIN) / (IPSATIZED_DISPLAY_MAX - IPSATIZED_DISPLAY_MIN) * 100)


def raw_mean_to_percent(raw_mean: float) -> int:
    """Map a 1-5 raw mean onto 0-100."""
    x = clamp(raw_mean, LIKERT_MIN, LIKERT_MAX)
    return round_half_up((x - LIKERT_MIN) / (LIKERT_MAX - LIKERT_MIN) * 100)


def score_responses(
    responses: Iterable[ItemResponse] | Mapping[str, int], registry: SpecRegistry | None = None
) -> ScoringResult:
    return ValueScorer(registry or get_default_registry()).score_responses(responses)


def score_assessment(
    vignette_responses: Iterable[VignetteResponse],
    booster_responses: Iterable[ItemResponse] | None = None,
    registry: SpecRegistry | None = None,
) -> ScoringResult:
    return ValueScorer(registry or get_default_registry()).score_assessment(vignette_responses, booster_responses)
