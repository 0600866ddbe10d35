from loguru import logger

from civic_blueprint.core.constants import AXIS_NEUTRAL
from civic_blueprint.models.ballot import ValueAxis
from civic_blueprint.models.profile import BlueprintProfile
from civic_blueprint.services.registry import SpecRegistry, get_default_registry


def profile_to_value_axes(profile: BlueprintProfile, registry: SpecRegistry | None = None) -> list[ValueAxis]:
    """
    Flatten a profile into the axis list the alignment functions consume.

    Importance maps onto weight as importance / 5, so an unset importance
    (treated as 5) weighs 1. Axes missing from the registry are skipped.
    """
    registry = registry or get_default_registry()
    axes: list[ValueAxis] = []
    for axis in profile.iter_axes():
        definition = registry.get_axis(axis.axis_id)
        if definition is None:
            logger.debug(f"Profile axis '{axis.axis_id}' not in registry {registry.version}")
            continue
        importance = axis.importance if axis.importance is not None else AXIS_NEUTRAL
        axes.append(
            ValueAxis(
                id=axis.axis_id,
                name=definition.name,
                description=definition.description,
                value=axis.value_0_10,
                pole_a=definition.pole_a.label,
                pole_b=definition.pole_b.label,
                weight=importance / AXIS_NEUTRAL,
            )
        )
    return axes
