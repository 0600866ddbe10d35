from collections.abc import Iterable

from loguru import logger

from civic_blueprint.core.constants import (
    MAX_QUESTIONS_FLOOR,
    MAX_QUESTIONS_PER_DOMAIN,
    MIN_QUESTIONS_FLOOR,
    MIN_QUESTIONS_PER_DOMAIN,
    PROGRESS_CONFIDENT_EXTRA,
    PROGRESS_EARLY_PER_DOMAIN,
    PROGRESS_UNCERTAIN_EXTRA,
    SELECTION_COVERAGE_PHASE_END,
    SELECTION_FEW_ANSWERS,
    SELECTION_TARGET_CONFIDENCE,
    SELECTION_UNCERTAIN_PHASE_END,
    STOP_MIN_ANSWERS_PER_AXIS,
)
from civic_blueprint.models.registry import AxisItem
from civic_blueprint.models.responses import SwipeEvent
from civic_blueprint.models.scoring import AdaptiveState, AssessmentProgress, AxisScore
from civic_blueprint.services.registry import SpecRegistry, get_default_registry
from civic_blueprint.services.scoring.axes import AxisScorer


class ItemSelector:
    """
    Picks the next swipe card for an adaptive session.

    Selection runs in three phases keyed on how many questions were answered:
    domain coverage first, then axes that are still uncertain, then whichever
    card is most informative. Ties keep registry order.
    """

    def __init__(self, registry: SpecRegistry, target_confidence: float = SELECTION_TARGET_CONFIDENCE):
        self.registry = registry
        self.target_confidence = target_confidence
        self.scorer = AxisScorer(registry)

    def _domain_ids(self, selected: Iterable[str] | None) -> list[str]:
        all_ids = [d.id for d in self.registry.domains]
        if selected is None:
            return all_ids
        wanted = set(selected)
        chosen = [d for d in all_ids if d in wanted]
        unknown = wanted.difference(all_ids)
        if unknown:
            logger.debug(f"Ignoring unknown domains {sorted(unknown)}")
        return chosen or all_ids

    def _axis_domain(self, axis_id: str) -> str | None:
        axis = self.registry.get_axis(axis_id)
        return axis.domain_id if axis else None

    def _relevant_axes(self, state: AdaptiveState) -> list[str]:
        selected = set(state.selected_domain_ids)
        return [a.id for a in self.registry.axes if a.domain_id in selected]

    def _score_for(self, state: AdaptiveState, axis_id: str) -> AxisScore:
        return state.axis_scores.get(axis_id) or AxisScore(axis_id=axis_id)

    def build_state(self, swipes: Iterable[SwipeEvent], selected_domains: Iterable[str] | None = None) -> AdaptiveState:
        """
        Fold a swipe history into an AdaptiveState.

        Unsure answers count as asked. Swipes on unknown items are skipped, and a
        repeated item counts once. Axis scores cover only the selected domains.
        """
        swipes = list(swipes)
        domain_ids = self._domain_ids(selected_domains)
        coverage = {domain_id: 0 for domain_id in domain_ids}

        answered: list[str] = []
        for swipe in swipes:
            item = self.registry.axis_items_by_id.get(swipe.item_id)
            if item is None or item.id in answered:
                continue
            answered.append(item.id)
            for axis_id in item.axis_keys:
                domain_id = self._axis_domain(axis_id)
                if domain_id in coverage:
                    coverage[domain_id] += 1

        selected = set(domain_ids)
        scores = {
            s.axis_id: s for s in self.scorer.score_axes(swipes) if self._axis_domain(s.axis_id) in selected
        }
        return AdaptiveState(
            selected_domain_ids=domain_ids,
            answered_item_ids=answered,
            total_questions=len(answered),
            domain_coverage=coverage,
            axis_scores=scores,
        )

    def _available_items(self, state: AdaptiveState) -> list[AxisItem]:
        answered = set(state.answered_item_ids)
        relevant = set(self._relevant_axes(state))
        return [
            item
            for item in self.registry.axis_items
            if item.id not in answered and relevant.intersection(item.axis_keys)
        ]

    def _is_uncertain(self, score: AxisScore) -> bool:
        return score.confidence < self.target_confidence or score.n_answered < SELECTION_FEW_ANSWERS

    def select_next_item(self, state: AdaptiveState) -> AxisItem | None:
        """
        Returns:
            The next card to show, or None when every relevant card was answered
        """
        available = self._available_items(state)
        if not available:
            return None

        if state.total_questions < SELECTION_COVERAGE_PHASE_END:
            picked = self._select_for_coverage(state, available)
        elif state.total_questions < SELECTION_UNCERTAIN_PHASE_END:
            picked = self._select_for_uncertainty(state, available)
        else:
            picked = self._select_most_informative(state, available)
        return picked or available[0]

    def _select_for_coverage(self, state: AdaptiveState, available: list[AxisItem]) -> AxisItem | None:
        coverage = state.domain_coverage
        counts = [coverage.get(d, 0) for d in state.selected_domain_ids]
        average = sum(counts) / len(counts) if counts else 0.0
        behind = {d for d in state.selected_domain_ids if coverage.get(d, 0) < average + 1}

        candidates = [
            item for item in available if any(self._axis_domain(a) in behind for a in item.axis_keys)
        ]
        # cards touching more axes first
        candidates.sort(key=lambda item: len(item.axis_keys), reverse=True)
        return candidates[0] if candidates else None

    def _select_for_uncertainty(self, state: AdaptiveState, available: list[AxisItem]) -> AxisItem | None:
        uncertain = {a for a in self._relevant_axes(state) if self._is_uncertain(self._score_for(state, a))}
        if not uncertain:
            return None

        def matched(item: AxisItem) -> int:
            return len(uncertain.intersection(item.axis_keys))

        candidates = [item for item in available if matched(item)]
        candidates.sort(key=matched, reverse=True)
        return candidates[0] if candidates else None

    def _select_most_informative(self, state: AdaptiveState, available: list[AxisItem]) -> AxisItem | None:
        relevant = set(self._relevant_axes(state))

        def informativeness(item: AxisItem) -> int:
            value = 2 * len(item.axis_keys)
            for axis_id in item.axis_keys:
                if axis_id not in relevant:
                    continue
                score = self._score_for(state, axis_id)
                if score.n_answered < SELECTION_FEW_ANSWERS:
                    value += 3
                elif score.confidence < self.target_confidence:
                    value += 2
                elif score.n_answered < self.registry.get_axis(axis_id).recommended_sample_size:
                    value += 1
            return value

        return max(available, key=informativeness)

    def question_bounds(self, state: AdaptiveState) -> tuple[int, int]:
        """Minimum and maximum session length for the selected domain count."""
        n_domains = len(state.selected_domain_ids)
        return (
            max(MIN_QUESTIONS_FLOOR, MIN_QUESTIONS_PER_DOMAIN * n_domains),
            max(MAX_QUESTIONS_FLOOR, MAX_QUESTIONS_PER_DOMAIN * n_domains),
        )

    def should_stop_early(self, state: AdaptiveState) -> bool:
        min_questions, max_questions = self.question_bounds(state)
        if state.total_questions < min_questions:
            return False
        if state.total_questions >= max_questions:
            return True

        scores = [state.axis_scores[a] for a in self._relevant_axes(state) if a in state.axis_scores]
        if not scores:
            return False
        return all(
            s.n_answered >= STOP_MIN_ANSWERS_PER_AXIS and s.confidence >= self.target_confidence for s in scores
        )

    def get_progress(self, state: AdaptiveState) -> AssessmentProgress:
        min_questions, max_questions = self.question_bounds(state)
        n_domains = len(state.selected_domain_ids)
        current = state.total_questions

        if current < min_questions:
            estimated = max(min_questions, current + PROGRESS_EARLY_PER_DOMAIN * n_domains)
        else:
            scores = [self._score_for(state, a) for a in self._relevant_axes(state)]
            avg_confidence = sum(s.confidence for s in scores) / len(scores) if scores else 0.0
            extra = PROGRESS_CONFIDENT_EXTRA if avg_confidence > self.target_confidence else PROGRESS_UNCERTAIN_EXTRA
            estimated = min(current + extra, max_questions)

        if current < 2 * n_domains:
            strategy = "Building your civic profile"
        elif current < 4 * n_domains:
            strategy = "Refining your positions"
        else:
            strategy = "Finalizing your blueprint"

        return AssessmentProgress(
            percentage=min(current / estimated * 100, 100.0),
            questions_answered=current,
            estimated_total=estimated,
            dominant_strategy=strategy,
        )


def build_adaptive_state(
    swipes: Iterable[SwipeEvent],
    selected_domains: Iterable[str] | None = None,
    registry: SpecRegistry | None = None,
) -> AdaptiveState:
    return ItemSelector(registry or get_default_registry()).build_state(swipes, selected_domains)


def select_next_item(state: AdaptiveState, registry: SpecRegistry | None = None) -> AxisItem | None:
    return ItemSelector(registry or get_default_registry()).select_next_item(state)


def should_stop_early(state: AdaptiveState, registry: SpecRegistry | None = None) -> bool:
    return ItemSelector(registry or get_default_registry()).should_stop_early(state)


def get_progress(state: AdaptiveState, registry: SpecRegistry | None = None) -> AssessmentProgress:
    return ItemSelector(registry or get_default_registry()).get_progress(state)
