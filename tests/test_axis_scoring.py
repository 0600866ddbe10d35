import pytest

from civic_blueprint.models.responses import SwipeEvent
from civic_blueprint.services.scoring.axes import AxisScorer, slider_position_to_score


def _swipe(item_id: str, response: str) -> SwipeEvent:
    return SwipeEvent(item_id=item_id, response=response)


def _by_axis(scores):
    return {s.axis_id: s for s in scores}


def test_every_axis_gets_a_score(registry):
    scores = AxisScorer(registry).score_axes([])
    assert [s.axis_id for s in scores] == ["ax1", "ax2", "ax3"]
    for s in scores:
        assert s.n_answered == 0
        assert s.normalized == 0.0
        assert s.shrunk == 0.0
        assert s.confidence == 0.0
        assert s.learned_value_float == 5.0


def test_single_agree(registry):
    ax1 = _by_axis(AxisScorer(registry).score_axes([_swipe("s1", "agree")]))["ax1"]

    assert ax1.raw_sum == 1
    assert ax1.normalized == 0.5
    assert ax1.shrunk == pytest.approx(0.1)
    assert ax1.confidence == pytest.approx(0.2)
    assert ax1.learned_value_float == pytest.approx(4.5)
    assert ax1.top_drivers == ["s1"]


def test_negative_key_flips_contribution(registry):
    ax1 = _by_axis(AxisScorer(registry).score_axes([_swipe("s2", "strong_agree")]))["ax1"]
    assert ax1.raw_sum == -2
    assert ax1.normalized == -1.0
    assert ax1.learned_value_float > 5


def test_unsure_lowers_confidence_only(registry):
    scorer = AxisScorer(registry)
    ax1 = _by_axis(scorer.score_axes([_swipe("s1", "unsure"), _swipe("s2", "agree")]))["ax1"]

    assert ax1.n_answered == 1
    assert ax1.n_unsure == 1
    assert ax1.normalized == -0.5
    assert ax1.confidence == pytest.approx(1 / 5.5)


def test_only_unsure_is_neutral(registry):
    ax1 = _by_axis(AxisScorer(registry).score_axes([_swipe("s1", "unsure")]))["ax1"]
    assert ax1.n_unsure == 1
    assert ax1.confidence == 0.0
    assert ax1.shrunk == 0.0


def test_multi_axis_item_feeds_both_axes(registry):
    scores = _by_axis(AxisScorer(registry).score_axes([_swipe("s4", "agree")]))
    assert scores["ax1"].raw_sum == 1
    assert scores["ax2"].raw_sum == -1
    assert scores["ax3"].n_answered == 0


def test_top_drivers_by_contribution_then_response_order(registry):
    swipes = [_swipe("s1", "agree"), _swipe("s2", "strong_disagree"), _swipe("s4", "agree")]
    ax1 = _by_axis(AxisScorer(registry).score_axes(swipes))["ax1"]

    assert ax1.top_drivers == ["s2", "s1", "s4"]
    assert ax1.normalized == pytest.approx(4 / 6)


def test_repeated_item_is_listed_once(registry):
    swipes = [_swipe("s1", "agree"), _swipe("s1", "strong_agree")]
    ax1 = _by_axis(AxisScorer(registry).score_axes(swipes))["ax1"]
    assert ax1.n_answered == 2
    assert ax1.top_drivers == ["s1"]


def test_unknown_items_and_axes_are_skipped(registry):
    scorer = AxisScorer(registry)
    scores = scorer.score_axes([_swipe("nope", "agree"), _swipe("s_ghost", "strong_agree")])
    assert scores == scorer.score_axes([])


def test_confidence_never_exceeds_one(registry):
    swipes = [_swipe("s1", "strong_agree")] * 200
    ax1 = _by_axis(AxisScorer(registry).score_axes(swipes))["ax1"]
    assert 0.0 < ax1.confidence < 1.0
    assert ax1.normalized == 1.0
    assert ax1.shrunk < 1.0


@pytest.mark.parametrize(
    "position, total, expected",
    [(0, 5, -1.0), (4, 5, 1.0), (2, 5, 0.0), (1, 3, 0.0), (1, 2, 1.0)],
)
def test_slider_position_to_score(position, total, expected):
    assert slider_position_to_score(position, total) == expected


@pytest.mark.parametrize("position, total", [(-1, 5), (5, 5), (0, 1)])
def test_slider_position_out_of_range(position, total):
    with pytest.raises(ValueError):
        slider_position_to_score(position, total)


def test_slider_to_swipes_uses_first_two_items(registry):
    swipes = AxisScorer(registry).slider_responses_to_swipes({"ax1": 0})
    assert [(s.item_id, s.response) for s in swipes] == [("s1", "strong_agree"), ("s2", "strong_disagree")]


def test_slider_to_swipes_lean_and_center(registry):
    scorer = AxisScorer(registry)
    lean = scorer.slider_responses_to_swipes({"ax1": 3})
    assert [s.response for s in lean] == ["disagree", "agree"]

    center = scorer.slider_responses_to_swipes({"ax1": 2, "ax3": 1})
    assert {s.response for s in center} == {"unsure"}


def test_slider_swipes_agree_with_slider_direction(registry):
    scorer = AxisScorer(registry)
    low = _by_axis(scorer.score_axes(scorer.slider_responses_to_swipes({"ax1": 0})))["ax1"]
    high = _by_axis(scorer.score_axes(scorer.slider_responses_to_swipes({"ax1": 4})))["ax1"]

    # position 0 sits at pole A (value 0), the last position at pole B (value 10)
    assert low.learned_value_float < 5 < high.learned_value_float


def test_slider_to_swipes_skips_unknown_axis(registry):
    assert AxisScorer(registry).slider_responses_to_swipes({"ghost": 2}) == []
