"""
Profile mutation rules.

Every function takes a BlueprintProfile and returns a complete replacement;
the input is never modified. Unknown axis or domain ids are a no-op that
returns the input unchanged. Rounding is half-up throughout.
"""

from collections.abc import Callable, Iterable, Mapping

from loguru import logger

from civic_blueprint.core.constants import (
    AXIS_MAX,
    AXIS_MIN,
    DAMPENED_CURRENT_WEIGHT,
    DAMPENED_LEARNED_WEIGHT,
    DEFAULT_SLIDER_POSITIONS,
)
from civic_blueprint.models.profile import (
    AxisEstimates,
    AxisEvidence,
    AxisProfile,
    BlueprintProfile,
    DomainProfile,
)
from civic_blueprint.models.scoring import AxisScore
from civic_blueprint.services.profile.builder import next_timestamp
from civic_blueprint.services.registry import SpecRegistry
from civic_blueprint.shared.numbers import clamp, round_half_up

AxisUpdate = Callable[[AxisProfile], AxisProfile]


def _check_0_10(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not AXIS_MIN <= value <= AXIS_MAX:
        raise ValueError(f"{label} must be an integer within 0-10, got {value!r}")
    return value


def _replace_axes(profile: BlueprintProfile, updates: Mapping[str, AxisUpdate]) -> BlueprintProfile:
    """Apply per-axis updates and stamp a new updated_at. Axes not in `updates` are reused as-is."""
    touched = False
    domains: list[DomainProfile] = []
    for domain in profile.domains:
        if not any(a.axis_id in updates for a in domain.axes):
            domains.append(domain)
            continue
        axes = tuple(updates[a.axis_id](a) if a.axis_id in updates else a for a in domain.axes)
        domains.append(domain.model_copy(update={"axes": axes}))
        touched = True

    if not touched:
        return profile
    return profile.model_copy(update={"domains": tuple(domains), "updated_at": next_timestamp(profile.updated_at)})


def _update_one(profile: BlueprintProfile, axis_id: str, update: AxisUpdate) -> BlueprintProfile:
    if profile.get_axis(axis_id) is None:
        logger.debug(f"Ignoring update for unknown axis '{axis_id}'")
        return profile
    return _replace_axes(profile, {axis_id: update})


def _learned_from(score: AxisScore) -> tuple[AxisEstimates, AxisEvidence]:
    estimates = AxisEstimates(
        learned_score=score.shrunk,
        learned_value_float=clamp(score.learned_value_float, AXIS_MIN, AXIS_MAX),
    )
    evidence = AxisEvidence(
        n_items_answered=score.n_answered,
        n_unsure=score.n_unsure,
        top_driver_item_ids=tuple(score.top_drivers),
    )
    return estimates, evidence


def _apply_score(axis: AxisProfile, score: AxisScore) -> AxisProfile:
    estimates, evidence = _learned_from(score)
    learned = estimates.learned_value_float
    changes: dict = {"estimates": estimates, "evidence": evidence, "confidence_0_1": score.confidence}

    if axis.learning_mode == "frozen":
        # Value and provenance stay put; evidence is still recorded for a later reset
        return axis.model_copy(update=changes)

    if axis.learning_mode == "dampened" and axis.source == "user_edited":
        value = round_half_up(DAMPENED_CURRENT_WEIGHT * axis.value_0_10 + DAMPENED_LEARNED_WEIGHT * learned)
    else:
        value = round_half_up(learned)

    changes["value_0_10"] = int(clamp(value, AXIS_MIN, AXIS_MAX))
    changes["source"] = "user_edited" if axis.source == "user_edited" else "learned_from_swipes"
    return axis.model_copy(update=changes)


def apply_axis_scores(profile: BlueprintProfile, scores: Iterable[AxisScore]) -> BlueprintProfile:
    """
    Fold new axis evidence into the profile.

    Only axes with at least one answered item are touched:
    - frozen: value and provenance unchanged
    - dampened + user_edited: 80% current value, 20% learned value
    - otherwise: value = learned value, provenance becomes learned_from_swipes
      unless it was user_edited
    """
    known = {a.axis_id for a in profile.iter_axes()}
    updates: dict[str, AxisUpdate] = {}
    for score in scores:
        if score.n_answered <= 0:
            continue
        if score.axis_id not in known:
            logger.debug(f"Ignoring score for axis '{score.axis_id}' missing from profile")
            continue
        updates[score.axis_id] = lambda axis, s=score: _apply_score(axis, s)

    return _replace_axes(profile, updates)


def update_axis_value(profile: BlueprintProfile, axis_id: str, value: int) -> BlueprintProfile:
    """User edit: the value always sticks; a locked axis stays frozen, otherwise it becomes dampened."""
    _check_0_10(value, "Axis value")
    return _update_one(
        profile,
        axis_id,
        lambda axis: axis.model_copy(
            update={
                "value_0_10": value,
                "source": "user_edited",
                "learning_mode": "frozen" if axis.locked else "dampened",
            }
        ),
    )


def update_axis_importance(profile: BlueprintProfile, axis_id: str, importance: int) -> BlueprintProfile:
    _check_0_10(importance, "Axis importance")
    return _update_one(profile, axis_id, lambda axis: axis.model_copy(update={"importance": importance}))


def update_domain_importance(profile: BlueprintProfile, domain_id: str, importance: int) -> BlueprintProfile:
    _check_0_10(importance, "Domain importance")
    domain = profile.get_domain(domain_id)
    if domain is None:
        logger.debug(f"Ignoring importance update for unknown domain '{domain_id}'")
        return profile

    now = next_timestamp(profile.updated_at)
    new_importance = domain.importance.model_copy(
        update={"value_0_10": importance, "source": "user_edited", "last_updated_at": now}
    )
    domains = tuple(
        d.model_copy(update={"importance": new_importance}) if d.domain_id == domain_id else d
        for d in profile.domains
    )
    return profile.model_copy(update={"domains": domains, "updated_at": now})


def toggle_axis_lock(profile: BlueprintProfile, axis_id: str) -> BlueprintProfile:
    def _toggle(axis: AxisProfile) -> AxisProfile:
        if not axis.locked:
            return axis.model_copy(update={"locked": True, "learning_mode": "frozen"})
        mode = "dampened" if axis.source == "user_edited" else "normal"
        return axis.model_copy(update={"locked": False, "learning_mode": mode})

    return _update_one(profile, axis_id, _toggle)


def reset_axis_to_learned(profile: BlueprintProfile, axis_id: str) -> BlueprintProfile:
    """Discard a user edit and go back to what the evidence says."""
    return _update_one(
        profile,
        axis_id,
        lambda axis: axis.model_copy(
            update={
                "value_0_10": int(clamp(round_half_up(axis.estimates.learned_value_float), AXIS_MIN, AXIS_MAX)),
                "source": "learned_from_swipes",
                "locked": False,
                "learning_mode": "normal",
            }
        ),
    )


def slider_position_to_value(position: int, total_positions: int) -> int:
    """Map a discrete slider position onto 0-10 (first position 0, last position 10)."""
    if total_positions < 2:
        raise ValueError(f"A slider needs at least 2 positions, got {total_positions}")
    if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position <= total_positions - 1:
        raise ValueError(f"Slider position {position!r} outside 0..{total_positions - 1}")
    return round_half_up(position / (total_positions - 1) * AXIS_MAX)


def apply_slider_values(
    profile: BlueprintProfile,
    positions: Mapping[str, int],
    importances: Mapping[str, int] | None = None,
    registry: SpecRegistry | None = None,
) -> BlueprintProfile:
    """
    Bulk-set axes from slider positions.

    Each slider sets value_0_10 and marks the axis learned_from_swipes in normal
    learning mode. A slider also clears the axis lock, unlike update_axis_value,
    which keeps a locked axis locked and frozen. Each touched domain's importance
    becomes the rounded average of its axes' importances (left alone when none
    are set).

    Args:
        profile: Profile to update
        positions: Axis id -> slider position (0-based)
        importances: Optional axis id -> importance (0-10)
        registry: Supplies each axis' number of slider positions; 5 when absent
    """
    importances = importances or {}
    for axis_id, importance in importances.items():
        _check_0_10(importance, f"Importance for '{axis_id}'")

    updates: dict[str, AxisUpdate] = {}
    for axis_id, position in positions.items():
        if profile.get_axis(axis_id) is None:
            logger.debug(f"Ignoring slider value for unknown axis '{axis_id}'")
            continue
        definition = registry.get_axis(axis_id) if registry else None
        total = definition.slider_positions if definition else DEFAULT_SLIDER_POSITIONS
        value = slider_position_to_value(position, total)

        def _set(axis: AxisProfile, value: int = value) -> AxisProfile:
            return axis.model_copy(
                update={
                    "value_0_10": value,
                    "source": "learned_from_swipes",
                    "locked": False,
                    "learning_mode": "normal",
                    "importance": importances.get(axis.axis_id, axis.importance),
                }
            )

        updates[axis_id] = _set

    updated = _replace_axes(profile, updates)
    if updated is profile:
        return profile

    domains: list[DomainProfile] = []
    for domain in updated.domains:
        set_importances = [a.importance for a in domain.axes if a.importance is not None]
        if not any(a.axis_id in updates for a in domain.axes) or not set_importances:
            domains.append(domain)
            continue
        importance = domain.importance.model_copy(
            update={
                "value_0_10": round_half_up(sum(set_importances) / len(set_importances)),
                "source": "learned_from_swipes",
                "last_updated_at": updated.updated_at,
            }
        )
        domains.append(domain.model_copy(update={"importance": importance}))

    return updated.model_copy(update={"domains": tuple(domains)})
