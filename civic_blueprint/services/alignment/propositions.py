from collections.abc import Iterable

from civic_blueprint.core.constants import (
    AXIS_NEUTRAL,
    CONFIDENCE_MULTIPLIER,
    EXPLANATION_FACTOR_COUNT,
    FACTOR_THRESHOLD,
    LIKERT_NEUTRAL,
    STANCE_LEAN_A_MAX,
    STANCE_LEAN_B_MIN,
    VALUE_BREAKDOWN_THRESHOLD,
    VALUE_CONFIDENCE_MULTIPLIER,
    VALUE_TOP_FACTOR_COUNT,
    VALUE_VOTE_THRESHOLD,
    VOTE_THRESHOLD,
)
from civic_blueprint.models.ballot import (
    AxisAlignment,
    AxisBreakdown,
    PropositionItem,
    PropositionRecommendation,
    ValueAxis,
    ValueBreakdown,
    ValuePropositionRecommendation,
    Vote,
)
from civic_blueprint.models.scoring import ScoringResult, ValueScore
from civic_blueprint.services.alignment.labels import get_stance_label
from civic_blueprint.services.scoring.values import raw_mean_to_percent


def _vote(score: float, threshold: float) -> Vote | None:
    # Exclusive on both sides: exactly +/-threshold is too close to call
    if score > threshold:
        return "yes"
    if score < -threshold:
        return "no"
    return None


def _rank_factors(factors: list[tuple[str, float]]) -> list[str]:
    return [name for name, _ in sorted(factors, key=lambda f: abs(f[1]), reverse=True)]


def _classify_axis(yes_effect: float, value: float) -> AxisAlignment:
    if yes_effect < 0:
        if value <= STANCE_LEAN_A_MAX:
            return "yes"
        if value >= STANCE_LEAN_B_MIN:
            return "no"
    elif yes_effect > 0:
        if value >= STANCE_LEAN_B_MIN:
            return "yes"
        if value <= STANCE_LEAN_A_MAX:
            return "no"
    return "neutral"


def compute_proposition_recommendation(item: PropositionItem, axes: Iterable[ValueAxis]) -> PropositionRecommendation:
    """
    Recommend a vote on a proposition from the user's axis positions.

    Per shared axis, the user's preference (value - 5) / 5 is multiplied by the
    YES effect; the importance-weighted sum over the weighted total effect gives
    a score in [-1, 1]. The breakdown is produced even when no vote is made.
    """
    axes_by_id = {a.id: a for a in axes}
    alignment_score = 0.0
    total_weight = 0.0
    factors: list[tuple[str, float]] = []
    breakdown: list[AxisBreakdown] = []

    for axis_id in item.relevant_axes:
        user_axis = axes_by_id.get(axis_id)
        if user_axis is None:
            continue

        yes_effect = item.yes_axis_effects.get(axis_id, 0.0)
        user_preference = (user_axis.value - AXIS_NEUTRAL) / AXIS_NEUTRAL
        toward_a = yes_effect < 0

        breakdown.append(
            AxisBreakdown(
                axis_id=axis_id,
                axis_name=user_axis.name,
                user_value=user_axis.value,
                user_stance_label=get_stance_label(user_axis.value, user_axis.pole_a, user_axis.pole_b),
                yes_aligns_with=user_axis.pole_a if toward_a else user_axis.pole_b,
                no_aligns_with=user_axis.pole_b if toward_a else user_axis.pole_a,
                alignment=_classify_axis(yes_effect, user_axis.value),
            )
        )

        alignment = yes_effect * user_preference
        alignment_score += alignment * user_axis.weight
        total_weight += abs(yes_effect) * user_axis.weight
        if abs(alignment) > FACTOR_THRESHOLD:
            factors.append((user_axis.name, alignment))

    normalized = alignment_score / total_weight if total_weight > 0 else 0.0
    vote = _vote(normalized, VOTE_THRESHOLD)
    ranked = _rank_factors(factors)

    on = f" on {' and '.join(ranked[:EXPLANATION_FACTOR_COUNT])}" if ranked else ""
    if vote == "yes":
        explanation = f"Voting YES aligns with your values{on}."
    elif vote == "no":
        explanation = f"Voting NO better matches your priorities{on}."
    else:
        explanation = "This is a close call based on your current values."

    return PropositionRecommendation(
        vote=vote,
        normalized_score=normalized,
        confidence=min(abs(normalized) * CONFIDENCE_MULTIPLIER, 1.0),
        explanation=explanation,
        factors=ranked,
        breakdown=breakdown,
    )


def compute_value_proposition_recommendation(
    item: PropositionItem, value_scores: ScoringResult | Iterable[ValueScore]
) -> ValuePropositionRecommendation:
    """Value-space recommendation: each value's pull is weighted by how strongly the user holds it."""
    if not item.yes_value_effects:
        return ValuePropositionRecommendation(explanation="No value mapping available.")

    scores = value_scores.values if isinstance(value_scores, ScoringResult) else value_scores
    scores_by_id = {s.value_id: s for s in scores}

    alignment_score = 0.0
    total_weight = 0.0
    factors: list[tuple[str, float]] = []
    breakdown: list[ValueBreakdown] = []

    for value_id, yes_effect in item.yes_value_effects.items():
        score = scores_by_id.get(value_id)
        if score is None:
            continue

        user_preference = (score.raw_mean - LIKERT_NEUTRAL) / 2
        alignment = yes_effect * user_preference
        weight = abs(user_preference)
        alignment_score += alignment * weight
        total_weight += abs(yes_effect) * weight

        if alignment > VALUE_BREAKDOWN_THRESHOLD:
            direction: AxisAlignment = "yes"
        elif alignment < -VALUE_BREAKDOWN_THRESHOLD:
            direction = "no"
        else:
            direction = "neutral"

        breakdown.append(
            ValueBreakdown(
                value_id=value_id,
                value_name=score.name,
                user_score=score.raw_mean,
                user_percent=raw_mean_to_percent(score.raw_mean),
                effect_direction=yes_effect,
                alignment=direction,
            )
        )
        if abs(alignment) > FACTOR_THRESHOLD:
            factors.append((score.name, alignment))

    normalized = alignment_score / total_weight if total_weight > 0 else 0.0
    vote = _vote(normalized, VALUE_VOTE_THRESHOLD)
    top_factors = _rank_factors(factors)[:VALUE_TOP_FACTOR_COUNT]

    especially = f", especially {' and '.join(top_factors[:EXPLANATION_FACTOR_COUNT])}" if top_factors else ""
    if vote == "yes":
        explanation = f"Voting YES aligns with your values{especially}."
    elif vote == "no":
        explanation = f"Voting NO better matches your priorities{especially}."
    else:
        explanation = "This measure has mixed implications for your values."

    return ValuePropositionRecommendation(
        vote=vote,
        normalized_score=normalized,
        confidence=min(abs(normalized) * VALUE_CONFIDENCE_MULTIPLIER, 1.0),
        explanation=explanation,
        top_factors=top_factors,
        breakdown=breakdown,
    )
