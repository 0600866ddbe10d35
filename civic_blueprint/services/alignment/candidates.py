from collections.abc import Iterable
from typing import TypeVar

from civic_blueprint.core.constants import (
    AGREEMENT_MAX_DIFF,
    AXIS_BEST_MATCH_FLOOR,
    AXIS_MAX,
    DISAGREEMENT_MIN_DIFF,
    KEY_POINT_LIMIT,
    LIKERT_NEUTRAL,
    NO_OVERLAP_AVG_DIFF,
    VALUE_ALIGNED_LIMIT,
    VALUE_BEST_MATCH_FLOOR,
    VALUE_DIFF_SCALE,
    VALUE_NEUTRAL_MATCH_PERCENT,
)
from civic_blueprint.models.ballot import (
    Candidate,
    CandidateAxisComparison,
    CandidateMatch,
    CandidateRaceItem,
    ValueAxis,
    ValueCandidateMatch,
    ValueComparisonDetail,
)
from civic_blueprint.models.scoring import ScoringResult, ValueScore
from civic_blueprint.services.alignment.labels import classify_difference, get_stance_label
from civic_blueprint.services.registry import SpecRegistry, get_default_registry
from civic_blueprint.shared.numbers import clamp, round_half_up

_STRENGTH_ORDER = {"strong": 0, "moderate": 1, "weak": 2, "opposed": 3}

MatchT = TypeVar("MatchT", CandidateMatch, ValueCandidateMatch)


def match_percent(total_diff: float, total_weight: float) -> int:
    """round(max(0, (1 - avg_diff / 10) * 100)); an average diff of 5 when nothing overlaps."""
    avg_diff = total_diff / total_weight if total_weight > 0 else NO_OVERLAP_AVG_DIFF
    return int(clamp(round_half_up(max(0.0, (1 - avg_diff / AXIS_MAX) * 100)), 0, 100))


def _rank(matches: list[MatchT], floor: int) -> list[MatchT]:
    # sorted() is stable with reverse=True, so ties keep input order
    ranked = sorted(matches, key=lambda m: m.match_percent, reverse=True)
    if ranked and ranked[0].match_percent > floor:
        ranked[0] = ranked[0].model_copy(update={"is_best_match": True})
    return ranked


def compute_candidate_matches(item: CandidateRaceItem, axes: Iterable[ValueAxis]) -> list[CandidateMatch]:
    """
    Rank a race's candidates by importance-weighted distance to the user's axis positions.

    The top candidate is flagged best match only above AXIS_BEST_MATCH_FLOOR.
    """
    axes_by_id = {a.id: a for a in axes}
    matches: list[CandidateMatch] = []

    for candidate in item.candidates:
        total_diff = 0.0
        total_weight = 0.0
        agreements: list[str] = []
        disagreements: list[str] = []
        comparisons: list[CandidateAxisComparison] = []

        for axis_id in item.relevant_axes or []:
            user_axis = axes_by_id.get(axis_id)
            stance = candidate.stances.get(axis_id)
            if user_axis is None or stance is None:
                continue

            diff = abs(user_axis.value - stance)
            total_diff += diff * user_axis.weight
            total_weight += user_axis.weight

            comparisons.append(
                CandidateAxisComparison(
                    axis_id=axis_id,
                    axis_name=user_axis.name,
                    user_value=user_axis.value,
                    user_label=get_stance_label(user_axis.value, user_axis.pole_a, user_axis.pole_b),
                    candidate_value=stance,
                    candidate_label=get_stance_label(stance, user_axis.pole_a, user_axis.pole_b),
                    difference=diff,
                    alignment=classify_difference(diff),
                )
            )
            if diff <= AGREEMENT_MAX_DIFF:
                agreements.append(user_axis.name)
            elif diff >= DISAGREEMENT_MIN_DIFF:
                disagreements.append(user_axis.name)

        matches.append(
            CandidateMatch(
                candidate_id=candidate.id,
                candidate_name=candidate.name,
                match_percent=match_percent(total_diff, total_weight),
                key_agreements=agreements[:KEY_POINT_LIMIT],
                key_disagreements=disagreements[:KEY_POINT_LIMIT],
                axis_comparisons=comparisons,
            )
        )

    return _rank(matches, AXIS_BEST_MATCH_FLOOR)


def _value_explanation(strength: str, name: str, align_phrase: str | None, differ_phrase: str | None) -> str:
    if strength in ("strong", "moderate"):
        return align_phrase or f"shares your values on {name.lower()}"
    if strength == "opposed":
        return differ_phrase or f"has different priorities on {name.lower()}"
    return f"only partly shares your priorities on {name.lower()}"


def compute_value_candidate_matches(
    candidates: Iterable[Candidate],
    value_scores: ScoringResult | Iterable[ValueScore],
    registry: SpecRegistry | None = None,
) -> list[ValueCandidateMatch]:
    """
    Rank candidates by distance between their value stances and the user's values.

    User preference is (raw_mean - 3) / 2 and candidate stances are -1..1; the
    gap is scaled by 5 onto the 0-10 distance scale, so percentages and buckets
    match the axis-space ranking. Candidates without value stances get a
    neutral 50. The best-match floor is VALUE_BEST_MATCH_FLOOR.
    """
    registry = registry or get_default_registry()
    scores = value_scores.values if isinstance(value_scores, ScoringResult) else value_scores
    preferences = {s.value_id: (s.raw_mean - LIKERT_NEUTRAL) / 2 for s in scores}
    matches: list[ValueCandidateMatch] = []

    for candidate in candidates:
        if not candidate.value_stances:
            matches.append(
                ValueCandidateMatch(
                    candidate_id=candidate.id,
                    candidate_name=candidate.name,
                    match_percent=VALUE_NEUTRAL_MATCH_PERCENT,
                )
            )
            continue

        total_diff = 0.0
        count = 0
        aligned: list[str] = []
        conflicting: list[str] = []
        details: list[ValueComparisonDetail] = []

        for value_id, stance in candidate.value_stances.items():
            preference = preferences.get(value_id)
            if preference is None:
                continue

            diff = abs(preference - stance) * VALUE_DIFF_SCALE
            total_diff += diff
            count += 1

            definition = registry.get_value(value_id)
            name = registry.value_name(value_id)
            strength = classify_difference(diff)
            contexts = definition.policy_contexts if definition else ()

            details.append(
                ValueComparisonDetail(
                    value_id=value_id,
                    value_name=name,
                    policy_context=contexts[0] if contexts else name.lower(),
                    user_preference=preference,
                    candidate_stance=stance,
                    difference=diff,
                    alignment=strength,
                    explanation=_value_explanation(
                        strength,
                        name,
                        definition.align_phrase if definition else None,
                        definition.differ_phrase if definition else None,
                    ),
                )
            )
            if diff <= AGREEMENT_MAX_DIFF:
                aligned.append(name)
            elif diff >= DISAGREEMENT_MIN_DIFF:
                conflicting.append(name)

        details.sort(key=lambda d: _STRENGTH_ORDER[d.alignment])
        matches.append(
            ValueCandidateMatch(
                candidate_id=candidate.id,
                candidate_name=candidate.name,
                match_percent=match_percent(total_diff, count),
                aligned_values=aligned[:VALUE_ALIGNED_LIMIT],
                conflicting_values=conflicting[:KEY_POINT_LIMIT],
                details=details,
            )
        )

    return _rank(matches, VALUE_BEST_MATCH_FLOOR)
