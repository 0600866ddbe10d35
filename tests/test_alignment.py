import pytest
from pydantic import ValidationError

from civic_blueprint.models.ballot import Candidate, CandidateRaceItem, PropositionItem, ValueAxis
from civic_blueprint.models.scoring import ValueScore
from civic_blueprint.services.alignment import (
    classify_difference,
    compute_candidate_matches,
    compute_proposition_recommendation,
    compute_value_candidate_matches,
    compute_value_proposition_recommendation,
    get_stance_label,
    profile_to_value_axes,
)
from civic_blueprint.services.alignment.candidates import match_percent
from civic_blueprint.services.profile.builder import create_default_profile
from civic_blueprint.services.profile.mutator import update_axis_importance, update_axis_value


def _axis(axis_id: str, value: float, weight: float = 1.0) -> ValueAxis:
    return ValueAxis(id=axis_id, name=axis_id.upper(), value=value, pole_a="A", pole_b="B", weight=weight)


def _prop(effects: dict[str, float], **kwargs) -> PropositionItem:
    return PropositionItem(id="p1", title="Prop 1", relevant_axes=list(effects), yes_axis_effects=effects, **kwargs)


def _value(value_id: str, raw_mean: float) -> ValueScore:
    name = f"Value {value_id[-1].upper()}"
    return ValueScore(value_id=value_id, name=name, raw_mean=raw_mean, ipsatized=0, n_answered=1, dimension_id="d1")


@pytest.mark.parametrize(
    "value, label",
    [
        (0, 'Strongly toward "A"'),
        (2, 'Strongly toward "A"'),
        (3, 'Lean toward "A"'),
        (4, 'Lean toward "A"'),
        (5, "Balanced / Mixed"),
        (6, 'Lean toward "B"'),
        (7.5, 'Lean toward "B"'),
        (8, 'Strongly toward "B"'),
        (10, 'Strongly toward "B"'),
    ],
)
def test_stance_label(value, label):
    assert get_stance_label(value, "A", "B") == label


@pytest.mark.parametrize(
    "diff, bucket",
    [(0, "strong"), (1, "strong"), (2, "moderate"), (3, "moderate"), (4, "weak"), (5, "weak"), (6, "opposed")],
)
def test_classify_difference(diff, bucket):
    assert classify_difference(diff) == bucket


# Propositions


def test_proposition_yes():
    rec = compute_proposition_recommendation(_prop({"x": 1.0}), [_axis("x", 10)])
    assert rec.vote == "yes"
    assert rec.normalized_score == 1.0
    assert rec.confidence == 1.0
    assert rec.factors == ["X"]
    assert rec.explanation == "Voting YES aligns with your values on X."


def test_proposition_no():
    rec = compute_proposition_recommendation(_prop({"x": 1.0}), [_axis("x", 0)])
    assert rec.vote == "no"
    assert rec.normalized_score == -1.0
    assert rec.explanation == "Voting NO better matches your priorities on X."


@pytest.mark.parametrize("value", [5.75, 4.25])
def test_proposition_threshold_is_exclusive(value):
    rec = compute_proposition_recommendation(_prop({"x": 1.0}), [_axis("x", value)])
    assert abs(rec.normalized_score) == pytest.approx(0.15)
    assert rec.vote is None
    assert rec.explanation == "This is a close call based on your current values."


def test_proposition_without_shared_axes():
    rec = compute_proposition_recommendation(_prop({"x": 1.0}), [_axis("y", 10)])
    assert rec.vote is None
    assert rec.normalized_score == 0.0
    assert rec.confidence == 0.0
    assert rec.breakdown == []


def test_proposition_importance_weights():
    # x pulls yes, y pulls no; doubling y's weight tips the vote
    effects = {"x": 1.0, "y": 1.0}
    even = compute_proposition_recommendation(_prop(effects), [_axis("x", 9), _axis("y", 0)])
    heavy = compute_proposition_recommendation(_prop(effects), [_axis("x", 9), _axis("y", 0, weight=3)])
    assert even.vote is None
    assert heavy.vote == "no"


def test_proposition_factors_ordered_by_strength():
    effects = {"x": 1.0, "y": 0.5, "z": 1.0, "w": 1.0}
    axes = [_axis("x", 7), _axis("y", 0), _axis("z", 6), _axis("w", 5.5)]
    rec = compute_proposition_recommendation(_prop(effects), axes)
    # w's alignment (0.1) is below the factor threshold
    assert rec.factors == ["Y", "X", "Z"]


def test_proposition_breakdown():
    effects = {"x": -1.0, "y": 1.0, "z": 0.0}
    rec = compute_proposition_recommendation(_prop(effects), [_axis("x", 2), _axis("y", 3), _axis("z", 9)])

    x, y, z = rec.breakdown
    assert (x.alignment, x.yes_aligns_with, x.no_aligns_with) == ("yes", "A", "B")
    assert x.user_stance_label == 'Strongly toward "A"'
    assert (y.alignment, y.yes_aligns_with) == ("no", "B")
    assert z.alignment == "neutral"


def test_proposition_effects_must_be_in_range():
    with pytest.raises(ValidationError):
        _prop({"x": 1.5})


# Candidates


def _race(*candidates: Candidate, relevant_axes=None) -> CandidateRaceItem:
    return CandidateRaceItem(id="r1", office="Mayor", candidates=list(candidates), relevant_axes=relevant_axes)


def test_candidate_ranking():
    axes = [_axis("x", 8), _axis("y", 2)]
    race = _race(
        Candidate(id="r", name="R", stances={"x": 2, "y": 8}),
        Candidate(id="q", name="Q", stances={"x": 3, "y": 7}),
        Candidate(id="p", name="P", stances={"x": 8, "y": 2}),
    )

    matches = compute_candidate_matches(race, axes)

    assert [(m.candidate_id, m.match_percent) for m in matches] == [("p", 100), ("q", 50), ("r", 40)]
    assert [m.is_best_match for m in matches] == [True, False, False]
    assert matches[0].key_agreements == ["X", "Y"]
    assert matches[1].key_disagreements == ["X", "Y"]
    assert [c.alignment for c in matches[2].axis_comparisons] == ["opposed", "opposed"]


def test_relevant_axes_derived_from_stances():
    race = _race(Candidate(id="a", name="A", stances={"x": 1}), Candidate(id="b", name="B", stances={"y": 1, "x": 2}))
    assert race.relevant_axes == ["x", "y"]


def test_candidate_ties_keep_input_order():
    race = _race(
        Candidate(id="first", name="First", stances={"x": 6}),
        Candidate(id="second", name="Second", stances={"x": 6}),
    )
    matches = compute_candidate_matches(race, [_axis("x", 6)])
    assert [m.candidate_id for m in matches] == ["first", "second"]
    assert [m.is_best_match for m in matches] == [True, False]


def test_best_match_needs_more_than_fifty():
    race = _race(Candidate(id="c", name="C", stances={"x": 10}))
    matches = compute_candidate_matches(race, [_axis("x", 5)])
    assert matches[0].match_percent == 50
    assert matches[0].is_best_match is False


def test_weighted_distance():
    race = _race(Candidate(id="c", name="C", stances={"x": 10, "y": 0}))
    # x diff 0 at weight 3, y diff 10 at weight 1 -> avg 2.5
    matches = compute_candidate_matches(race, [_axis("x", 10, weight=3), _axis("y", 10)])
    assert matches[0].match_percent == 75


def test_no_overlap_is_fifty():
    race = _race(Candidate(id="c", name="C", stances={"z": 3}))
    matches = compute_candidate_matches(race, [_axis("x", 5)])
    assert matches[0].match_percent == 50
    assert matches[0].axis_comparisons == []


@pytest.mark.parametrize("total_diff, total_weight, expected", [(0, 1, 100), (10, 1, 0), (25, 10, 75), (0, 0, 50)])
def test_match_percent(total_diff, total_weight, expected):
    assert match_percent(total_diff, total_weight) == expected


# Value space


def test_value_candidate_matches(registry):
    scores = [_value("v_a", 5), _value("v_b", 1)]
    candidates = [
        Candidate(id="y", name="Y", value_stances={"v_a": -1, "v_b": 1}),
        Candidate(id="z", name="Z"),
        Candidate(id="x", name="X", value_stances={"v_a": 1, "v_b": -1}),
    ]

    matches = compute_value_candidate_matches(candidates, scores, registry)

    assert [(m.candidate_id, m.match_percent) for m in matches] == [("x", 100), ("z", 50), ("y", 0)]
    assert [m.is_best_match for m in matches] == [True, False, False]

    x, z, y = matches
    assert x.aligned_values == ["Value A", "Value B"]
    assert y.conflicting_values == ["Value A", "Value B"]
    assert z.details == []

    a_detail = x.details[0]
    assert a_detail.policy_context == "a-policy"
    assert a_detail.explanation == "shares your take on A"
    assert x.details[1].explanation == "shares your values on value b"
    assert y.details[0].explanation == "sees A differently"
    assert y.details[1].explanation == "has different priorities on value b"


def test_value_key_point_limits(registry):
    scores = [_value("v_a", 5), _value("v_b", 1), _value("v_c", 5), _value("v_x", 5)]
    candidates = [
        Candidate(id="near", name="Near", value_stances={"v_a": 1, "v_b": -1, "v_c": 1, "v_x": 1}),
        Candidate(id="far", name="Far", value_stances={"v_a": -1, "v_b": 1, "v_c": -1, "v_x": -1}),
    ]

    near, far = compute_value_candidate_matches(candidates, scores, registry)

    # up to three aligned values, two conflicting ones
    assert near.aligned_values == ["Value A", "Value B", "Value C"]
    assert far.conflicting_values == ["Value A", "Value B"]
    # values missing from the registry are shown by id
    assert near.details[-1].value_name == "v_x"


def test_value_best_match_floor(registry):
    candidates = [Candidate(id="c", name="C", value_stances={"v_a": 0.04})]
    matches = compute_value_candidate_matches(candidates, [_value("v_a", 5)], registry)
    assert matches[0].match_percent == 52
    assert matches[0].is_best_match is False
    assert matches[0].details[0].explanation == "only partly shares your priorities on value a"


def test_value_details_sorted_by_strength(registry):
    candidates = [Candidate(id="c", name="C", value_stances={"v_a": -1, "v_b": -1})]
    matches = compute_value_candidate_matches(candidates, [_value("v_a", 5), _value("v_b", 1)], registry)
    assert [d.value_id for d in matches[0].details] == ["v_b", "v_a"]


def test_value_proposition_yes():
    item = PropositionItem(id="p", title="P", yes_value_effects={"v_a": 1.0, "v_b": -1.0})
    rec = compute_value_proposition_recommendation(item, [_value("v_a", 5), _value("v_b", 1)])

    assert rec.vote == "yes"
    assert rec.normalized_score == 1.0
    assert rec.top_factors == ["Value A", "Value B"]
    assert rec.explanation == "Voting YES aligns with your values, especially Value A and Value B."
    assert [b.user_percent for b in rec.breakdown] == [100, 0]
    assert [b.alignment for b in rec.breakdown] == ["yes", "yes"]


def test_value_proposition_neutral_values_are_mixed():
    item = PropositionItem(id="p", title="P", yes_value_effects={"v_a": 1.0})
    rec = compute_value_proposition_recommendation(item, [_value("v_a", 3)])
    assert rec.vote is None
    assert rec.explanation == "This measure has mixed implications for your values."


def test_value_proposition_without_mapping():
    item = PropositionItem(id="p", title="P")
    rec = compute_value_proposition_recommendation(item, [_value("v_a", 5)])
    assert rec.vote is None
    assert rec.explanation == "No value mapping available."


# Profile flattening


def test_profile_to_value_axes(profile, registry):
    profile = update_axis_importance(update_axis_value(profile, "ax1", 9), "ax1", 10)
    axes = profile_to_value_axes(profile, registry)

    assert [a.id for a in axes] == ["ax1", "ax2", "ax3"]
    ax1 = axes[0]
    assert (ax1.value, ax1.weight, ax1.name, ax1.pole_a, ax1.pole_b) == (9, 2.0, "Axis One", "Left", "Right")
    assert axes[1].weight == 1.0


def test_profile_to_value_axes_skips_unknown_axes(registry):
    profile = create_default_profile("u")
    assert profile_to_value_axes(profile, registry) == []
