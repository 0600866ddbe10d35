"""
Scoring engine.

Values: vignette picks and Likert items -> ipsatized value and dimension scores.
Axes: swipe responses -> shrunk, confidence-weighted axis scores.
Selection: which swipe card to show next, and when a session can stop.
"""

from civic_blueprint.services.scoring.axes import AxisScorer, score_axes, slider_position_to_score
from civic_blueprint.services.scoring.expander import ResponseExpander, merge_responses
from civic_blueprint.services.scoring.selection import (
    ItemSelector,
    build_adaptive_state,
    get_progress,
    select_next_item,
    should_stop_early,
)
from civic_blueprint.services.scoring.values import ValueScorer, score_assessment, score_responses

__all__ = [
    "AxisScorer",
    "ItemSelector",
    "ResponseExpander",
    "ValueScorer",
    "build_adaptive_state",
    "get_progress",
    "merge_responses",
    "score_assessment",
    "score_axes",
    "score_responses",
    "select_next_item",
    "should_stop_early",
    "slider_position_to_score",
]
