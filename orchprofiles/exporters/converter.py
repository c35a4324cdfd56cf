"""Conversion of internal profiles to the public vlabs schema."""

from typing import Iterable

from ..model.orchestrator import OrchestratorProfile, OrchestratorVersionProfile
from ..model.vlabs import (
    VLabsOrchestratorProfile,
    VLabsOrchestratorVersionProfile,
    VLabsOrchestratorVersionProfileList,
)


def convert_profile_to_vlabs(profile: OrchestratorProfile) -> VLabsOrchestratorProfile:
    return VLabsOrchestratorProfile(
        orchestrator_type=profile.orchestrator_type.value,
        orchestrator_version=profile.orchestrator_version,
    )


def convert_version_profile_to_vlabs(
    profile: OrchestratorVersionProfile,
) -> VLabsOrchestratorVersionProfile:
    """Convert a version profile, keeping upgrade order."""
    return VLabsOrchestratorVersionProfile(
        orchestrator_type=profile.orchestrator_type.value,
        orchestrator_version=profile.orchestrator_version,
        default=profile.default,
        upgrades=[convert_profile_to_vlabs(upgrade) for upgrade in profile.upgrades],
    )


def convert_profile_list_to_vlabs(
    profiles: Iterable[OrchestratorVersionProfile],
) -> VLabsOrchestratorVersionProfileList:
    """Convert a sequence of version profiles to a public profile list."""
    return VLabsOrchestratorVersionProfileList(
        orchestrators=[convert_version_profile_to_vlabs(profile) for profile in profiles]
    )
