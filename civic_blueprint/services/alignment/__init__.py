from civic_blueprint.services.alignment.axes import profile_to_value_axes
from civic_blueprint.services.alignment.candidates import compute_candidate_matches, compute_value_candidate_matches
from civic_blueprint.services.alignment.labels import classify_difference, get_stance_label
from civic_blueprint.services.alignment.propositions import (
    compute_proposition_recommendation,
    compute_value_proposition_recommendation,
)

__all__ = [
    "classify_difference",
    "compute_candidate_matches",
    "compute_proposition_recommendation",
    "compute_value_candidate_matches",
    "compute_value_proposition_recommendation",
    "get_stance_label",
    "profile_to_value_axes",
]
