from datetime import datetime, timedelta, timezone

from loguru import logger

from civic_blueprint.core.constants import PROFILE_VERSION
from civic_blueprint.models.profile import AxisProfile, BlueprintProfile, DomainImportance, DomainProfile
from civic_blueprint.services.registry import SpecRegistry, get_default_registry

_TICK = timedelta(microseconds=1)


def next_timestamp(previous: datetime | None) -> datetime:
    """Current UTC time, bumped past `previous` so updated_at strictly increases."""
    now = datetime.now(timezone.utc)
    if previous is not None and now <= previous:
        return previous + _TICK
    return now


class ProfileBuilder:
    """Creates fresh profiles covering every domain and axis in a registry."""

    def __init__(self, registry: SpecRegistry):
        self.registry = registry

    def create_default_profile(self, user_id: str, previous: BlueprintProfile | None = None) -> BlueprintProfile:
        """
        Build a profile with every known axis at 5, confidence 0, default provenance.

        Args:
            user_id: Owner of the profile
            previous: Profile being replaced, if any. Only its updated_at is
                read, so the new profile's timestamp moves forward.
        """
        now = next_timestamp(previous.updated_at if previous else None)
        domains = tuple(
            DomainProfile(
                domain_id=domain.id,
                importance=DomainImportance(last_updated_at=now),
                axes=tuple(AxisProfile(axis_id=axis_id) for axis_id in domain.axis_ids),
            )
            for domain in self.registry.domains
        )
        return BlueprintProfile(profile_version=PROFILE_VERSION, user_id=user_id, updated_at=now, domains=domains)

    def reset_profile(self, profile: BlueprintProfile) -> BlueprintProfile:
        """Explicit full reset: discard all edits and evidence, keep the owner."""
        logger.info(f"Resetting blueprint profile for user {profile.user_id}")
        return self.create_default_profile(profile.user_id, previous=profile)


def create_default_profile(user_id: str, registry: SpecRegistry | None = None) -> BlueprintProfile:
    return ProfileBuilder(registry or get_default_registry()).create_default_profile(user_id)


def reset_profile(profile: BlueprintProfile, registry: SpecRegistry | None = None) -> BlueprintProfile:
    return ProfileBuilder(registry or get_default_registry()).reset_profile(profile)
