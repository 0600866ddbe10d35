"""
Blueprint profile: creation, mutation rules, and the per-user session wrapper.

Mutators are pure; the session serializes them and owns the remote re-score path.
"""

from civic_blueprint.services.profile.builder import ProfileBuilder, create_default_profile, reset_profile
from civic_blueprint.services.profile.mutator import (
    apply_axis_scores,
    apply_slider_values,
    reset_axis_to_learned,
    toggle_axis_lock,
    update_axis_importance,
    update_axis_value,
    update_domain_importance,
)
from civic_blueprint.services.profile.session import ProfileSession

__all__ = [
    "ProfileBuilder",
    "ProfileSession",
    "apply_axis_scores",
    "apply_slider_values",
    "create_default_profile",
    "reset_axis_to_learned",
    "reset_profile",
    "toggle_axis_lock",
    "update_axis_importance",
    "update_axis_value",
    "update_domain_importance",
]
