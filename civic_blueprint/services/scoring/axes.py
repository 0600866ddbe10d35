from collections.abc import Iterable, Mapping

from loguru import logger

from civic_blueprint.core.constants import (
    SLIDER_LEAN_THRESHOLD,
    SLIDER_STRONG_THRESHOLD,
    SLIDER_SWIPE_ITEMS_PER_AXIS,
    SWIPE_MAX_MAGNITUDE,
)
from civic_blueprint.models.responses import SwipeEvent, SwipeResponse
from civic_blueprint.models.scoring import AxisScore
from civic_blueprint.services.registry import SpecRegistry, get_default_registry
from civic_blueprint.shared.numbers import clamp


class _AxisAccumulator:
    def __init__(self):
        self.raw_sum = 0.0
        self.n_answered = 0
        self.n_unsure = 0
        self.contributions: list[tuple[str, float]] = []


class AxisScorer:
    """
    Scores policy axes from swipe responses.

    Shrinkage pulls sparse axes toward neutral: shrunk = normalized * n / (n + k).
    Confidence grows with answered count and drops with unsure count.
    """

    def __init__(self, registry: SpecRegistry):
        self.registry = registry
        self.config = registry.axis_scoring

    @property
    def max_magnitude(self) -> float:
        return max((abs(v) for v in self.config.response_scale.values()), default=SWIPE_MAX_MAGNITUDE) or 1

    def confidence(self, n_answered: int, n_unsure: int) -> float:
        if n_answered <= 0:
            return 0.0
        k = self.config.shrinkage_k
        return min(1.0, n_answered / (n_answered + k + self.config.unsure_penalty * n_unsure))

    def shrink(self, normalized: float, n_answered: int) -> float:
        if n_answered <= 0:
            return 0.0
        return normalized * (n_answered / (n_answered + self.config.shrinkage_k))

    def score_axes(self, swipes: Iterable[SwipeEvent]) -> list[AxisScore]:
        """
        Score every registry axis. Axes without answers get neutral defaults.

        Returns:
            One AxisScore per registry axis, in registry order
        """
        acc = {axis.id: _AxisAccumulator() for axis in self.registry.axes}
        scale = self.config.response_scale

        for swipe in swipes:
            item = self.registry.axis_items_by_id.get(swipe.item_id)
            if item is None:
                logger.debug(f"Skipping swipe for unknown item '{swipe.item_id}'")
                continue

            value = scale.get(swipe.response, 0)
            for axis_id, key in item.axis_keys.items():
                data = acc.get(axis_id)
                if data is None:
                    logger.debug(f"Item '{item.id}' keys unknown axis '{axis_id}'")
                    continue
                if swipe.response == "unsure":
                    data.n_unsure += 1
                    continue
                contribution = value * key
                data.raw_sum += contribution
                data.n_answered += 1
                data.contributions.append((item.id, abs(contribution)))

        return [self._finalize(axis_id, data) for axis_id, data in acc.items()]

    def _finalize(self, axis_id: str, data: _AxisAccumulator) -> AxisScore:
        if data.n_answered == 0:
            return AxisScore(axis_id=axis_id, n_unsure=data.n_unsure)

        normalized = clamp(data.raw_sum / (self.max_magnitude * data.n_answered), -1.0, 1.0)

        # sorted() is stable, so equal contributions keep response order
        drivers: list[str] = []
        for item_id, _ in sorted(data.contributions, key=lambda c: c[1], reverse=True):
            if item_id not in drivers:
                drivers.append(item_id)

        return AxisScore(
            axis_id=axis_id,
            raw_sum=data.raw_sum,
            n_answered=data.n_answered,
            n_unsure=data.n_unsure,
            normalized=normalized,
            shrunk=self.shrink(normalized, data.n_answered),
            confidence=self.confidence(data.n_answered, data.n_unsure),
            top_drivers=drivers[: self.config.top_driver_count],
        )

    def slider_responses_to_swipes(self, positions: Mapping[str, int]) -> list[SwipeEvent]:
        """
        Convert slider positions into synthetic swipes on the first items of each axis.

        Position 0 sits at pole A, so a low position agrees with items keyed +1.
        """
        swipes: list[SwipeEvent] = []
        for axis_id, position in positions.items():
            axis = self.registry.get_axis(axis_id)
            if axis is None:
                logger.debug(f"Skipping slider value for unknown axis '{axis_id}'")
                continue

            score = slider_position_to_score(position, axis.slider_positions)
            for item in self.registry.get_axis_items_for(axis_id)[:SLIDER_SWIPE_ITEMS_PER_AXIS]:
                effective = -score * item.axis_keys[axis_id]
                swipes.append(SwipeEvent(item_id=item.id, response=_score_to_response(effective)))
        return swipes


def slider_position_to_score(position: int, total_positions: int) -> float:
    """Map a slider position onto -1..1 (position 0 -> -1, last position -> +1)."""
    if total_positions < 2:
        raise ValueError(f"A slider needs at least 2 positions, got {total_positions}")
    if not 0 <= position <= total_positions - 1:
        raise ValueError(f"Slider position {position} outside 0..{total_positions - 1}")
    return position / (total_positions - 1) * 2 - 1


def _score_to_response(effective: float) -> SwipeResponse:
    if effective <= -SLIDER_STRONG_THRESHOLD:
        return "strong_disagree"
    if effective <= -SLIDER_LEAN_THRESHOLD:
        return "disagree"
    if effective >= SLIDER_STRONG_THRESHOLD:
        return "strong_agree"
    if effective >= SLIDER_LEAN_THRESHOLD:
        return "agree"
    return "unsure"


def score_axes(swipes: Iterable[SwipeEvent], registry: SpecRegistry | None = None) -> list[AxisScore]:
    return AxisScorer(registry or get_default_registry()).score_axes(swipes)


def slider_responses_to_swipes(positions: Mapping[str, int], registry: SpecRegistry | None = None) -> list[SwipeEvent]:
    return AxisScorer(registry or get_default_registry()).slider_responses_to_swipes(positions)
