import itertools

import pytest
from pydantic import ValidationError

from civic_blueprint.models.responses import ItemResponse, VignetteResponse
from civic_blueprint.services.registry import get_default_registry
from civic_blueprint.services.scoring.expander import ResponseExpander, merge_responses
from civic_blueprint.services.scoring.values import (
    ValueScorer,
    ipsatized_to_percent,
    raw_mean_to_percent,
    score_assessment,
)


def _r(item_id: str, response: int) -> ItemResponse:
    return ItemResponse(item_id=item_id, response=response)


def test_no_responses_gives_neutral_defaults(registry):
    result = ValueScorer(registry).score_responses([])

    assert result.individual_mean == 3.0
    for v in result.values:
        assert v.raw_mean == 3.0
        assert v.ipsatized == 0.0
        assert v.n_answered == 0
    for d in result.dimensions:
        assert (d.raw_mean, d.ipsatized) == (3.0, 0.0)


def test_expander_selected_five_others_one(registry):
    expanded = ResponseExpander(registry).expand_vignette_responses(
        [VignetteResponse(vignette_id="vig1", selected_option_id="vig1_b")]
    )
    assert [(r.item_id, r.response) for r in expanded] == [("vig1_a", 1), ("vig1_b", 5), ("vig1_c", 1)]


def test_expander_drops_unknown_vignette(registry):
    expanded = ResponseExpander(registry).expand_vignette_responses(
        [VignetteResponse(vignette_id="nope", selected_option_id="x")]
    )
    assert expanded == []


def test_single_vignette_pick(registry):
    result = ValueScorer(registry).score_assessment([VignetteResponse(vignette_id="vig1", selected_option_id="vig1_a")])

    a, b, c = (result.get_value(v) for v in ("v_a", "v_b", "v_c"))
    assert a.raw_mean == 5.0
    assert a.n_answered == 1
    assert b.raw_mean == 1.0
    assert c.raw_mean == 1.0
    assert result.individual_mean == pytest.approx(7 / 3)
    assert a.ipsatized == 2.67
    assert b.ipsatized == -1.33


def test_reversed_item_matches_plain_item(registry):
    scorer = ValueScorer(registry)
    reversed_five = scorer.score_responses([_r("i_a_rev", 5)])
    plain_one = scorer.score_responses([_r("i_a1", 1)])
    assert reversed_five.get_value("v_a") == plain_one.get_value("v_a")
    assert reversed_five.individual_mean == plain_one.individual_mean


def test_tradeoff_contributes_to_opposing_value(registry):
    result = ValueScorer(registry).score_responses([_r("i_b1", 5)])

    a = result.get_value("v_a")
    # (6 - 5) * 0.5 over a count of 0.5
    assert a.n_answered == 0.5
    assert a.raw_mean == 1.0
    assert result.get_value("v_b").raw_mean == 5.0
    assert result.individual_mean == pytest.approx((5 + 0.5) / 1.5)


def test_individual_mean_is_sum_over_count(registry):
    result = ValueScorer(registry).score_responses([_r("i_a1", 4), _r("i_c1", 2), _r("i_b1", 3)])

    # v_a: 4 + (6-3)*0.5 over 1.5; v_b: 3 over 1; v_c: 2*2 over 2
    assert result.individual_mean == 12.5 / 4.5
    assert result.get_value("v_a").n_answered == 1.5
    assert result.get_value("v_c").n_answered == 2.0
    assert result.get_value("v_c").raw_mean == 2.0


def test_scoring_is_order_independent(registry):
    scorer = ValueScorer(registry)
    responses = [_r("i_a1", 4), _r("i_b1", 2), _r("i_c1", 5), _r("vig1_a", 5)]
    expected = scorer.score_responses(responses).model_dump()
    for perm in itertools.permutations(responses):
        assert scorer.score_responses(list(perm)).model_dump() == expected


def test_unknown_items_are_skipped(registry):
    scorer = ValueScorer(registry)
    with_unknown = scorer.score_responses([_r("i_a1", 4), _r("ghost", 5)])
    without = scorer.score_responses([_r("i_a1", 4)])
    assert with_unknown == without


def test_repeated_item_in_one_batch_is_rejected(registry):
    scorer = ValueScorer(registry)
    for batch in ([_r("i_a1", 1), _r("i_a1", 5)], [_r("i_a1", 5), _r("i_a1", 1)]):
        with pytest.raises(ValueError, match="i_a1"):
            scorer.score_responses(batch)

    # merging first settles the conflict explicitly
    merged = merge_responses([_r("i_a1", 1)], [_r("i_a1", 5)])
    assert scorer.score_responses(merged).get_value("v_a").raw_mean == 5.0


def test_merge_is_last_write_wins():
    merged = merge_responses([_r("x", 1), _r("y", 2)], [_r("x", 5)])
    assert merged == {"x": 5, "y": 2}
    assert list(merged) == ["x", "y"]


def test_booster_rescoring_is_idempotent(registry):
    scorer = ValueScorer(registry)
    vignettes = [VignetteResponse(vignette_id="vig2", selected_option_id="vig2_c")]
    boosters = [_r("boost_1", 4)]

    first = scorer.score_assessment(vignettes, boosters)
    second = scorer.score_assessment(vignettes, boosters)

    assert first == second
    # vig2_b=1 and boost_1=4 both land on v_b
    assert first.get_value("v_b").raw_mean == 2.5


def test_booster_overrides_earlier_answer(registry):
    scorer = ValueScorer(registry)
    vignettes = [VignetteResponse(vignette_id="vig1", selected_option_id="vig1_a")]
    result = scorer.score_assessment(vignettes, [_r("vig1_b", 4)])
    assert result.get_value("v_b").raw_mean == 4.0


def test_dimension_averages_answered_values_only(registry):
    result = ValueScorer(registry).score_responses([_r("i_a1", 5)])
    d1 = result.get_dimension("d1")
    # v_c is unanswered, so d1 is just v_a
    assert d1.raw_mean == 5.0
    assert d1.ipsatized == 0.0
    assert result.get_dimension("d2").raw_mean == 3.0


def test_out_of_range_response_is_rejected(registry):
    with pytest.raises(ValidationError):
        _r("i_a1", 6)
    with pytest.raises(ValueError):
        ValueScorer(registry).score_responses({"i_a1": 0})


def test_full_default_assessment_bounds():
    registry = get_default_registry()
    picks = [VignetteResponse(vignette_id=v.id, selected_option_id=v.options[0].id) for v in registry.document.vignettes]
    boosters = [_r(item.id, 5) for item in registry.get_booster_set("ai_regulation").items]

    result = score_assessment(picks, boosters)

    assert len(result.values) == 10
    for v in result.values:
        assert 1.0 <= v.raw_mean <= 5.0
    assert sum(v.n_answered for v in result.values) > 0
    assert result.get_top_values(1)[0].ipsatized >= result.get_top_values(3)[-1].ipsatized


@pytest.mark.parametrize(
    "ipsatized, expected",
    [(0, 50), (2, 100), (-2, 0), (3.5, 100), (-9, 0), (1, 75), (-0.5, 38)],
)
def test_ipsatized_to_percent(ipsatized, expected):
    assert ipsatized_to_percent(ipsatized) == expected


@pytest.mark.parametrize("raw_mean, expected", [(1, 0), (3, 50), (5, 100), (4.5, 88)])
def test_raw_mean_to_percent(raw_mean, expected):
    assert raw_mean_to_percent(raw_mean) == expected
