"""Orchestrator version profile service."""

from typing import Dict, List, Optional

from ..catalog.catalog import VersionCatalog, get_default_catalog
from ..exporters.converter import convert_profile_list_to_vlabs
from ..model.errors import (
    AmbiguousResultError,
    MissingVersionError,
    UnsupportedUpgradeOperationError,
    UnsupportedVersionError,
)
from ..model.orchestrator import OrchestratorProfile, OrchestratorType, OrchestratorVersionProfile
from ..model.vlabs import VLabsOrchestratorVersionProfileList
from ..upgrade.calculator import UpgradePathCalculator
from ..utils.logger import get_logger
from .resolver import OrchestratorResolver

logger = get_logger(__name__)

# Names used in user-facing messages
DISPLAY_NAMES: Dict[OrchestratorType, str] = {
    OrchestratorType.KUBERNETES: "Kubernetes",
    OrchestratorType.DCOS: "DCOS",
    OrchestratorType.SWARM: "Swarm",
    OrchestratorType.DOCKER_CE: "Docker CE",
}


class ProfileBuilder:
    """Assembles version profiles for an orchestrator family."""

    def __init__(self, catalog: VersionCatalog, calculator: UpgradePathCalculator):
        self.catalog = catalog
        self.calculator = calculator

    def build_profiles(
        self, family: OrchestratorType, version: str = "", windows: bool = False
    ) -> List[OrchestratorVersionProfile]:
        """Build profiles for every supported version, or for one version if given."""
        if not version:
            return [
                self._build_profile(family, supported, windows)
                for supported in self.catalog.get_supported_versions(family, windows=windows)
            ]

        if not self.catalog.is_supported(family, version):
            raise UnsupportedVersionError(
                f"{DISPLAY_NAMES[family]} version {version} is not supported"
            )
        return [self._build_profile(family, version, windows)]

    def build_all(self, windows: bool = False) -> List[OrchestratorVersionProfile]:
        """Build profiles for every version of every family."""
        profiles = []
        for family in self.catalog.families:
            profiles.extend(self.build_profiles(family, "", windows))
        return profiles

    def _build_profile(
        self, family: OrchestratorType, version: str, windows: bool
    ) -> OrchestratorVersionProfile:
        return OrchestratorVersionProfile(
            orchestrator_profile=OrchestratorProfile(
                orchestrator_type=family, orchestrator_version=version
            ),
            default=version == self.catalog.get_default_version(family, windows),
            upgrades=self.calculator.get_upgrades(family, version, windows),
        )


class OrchestratorProfileService:
    """High-level service answering orchestrator version and upgrade queries."""

    def __init__(self, catalog: Optional[VersionCatalog] = None):
        """Initialize profile service."""
        self.catalog = catalog or get_default_catalog()
        self.resolver = OrchestratorResolver()
        self.calculator = UpgradePathCalculator(self.catalog)
        self.builder = ProfileBuilder(self.catalog, self.calculator)

    def get_profile_list(
        self, orchestrator: str = "", version: str = "", windows: bool = False
    ) -> List[OrchestratorVersionProfile]:
        """Get version profiles for an orchestrator, or for all orchestrators."""
        family = self.resolver.validate(orchestrator, version)
        if family is None:
            logger.debug("Resolving profiles for all orchestrators")
            # Aggregated listings ignore the Windows flag
            return self.builder.build_all(windows=False)

        logger.debug(f"Resolving profiles for {family.value} version '{version}'")
        return self.builder.build_profiles(family, version, windows)

    def get_public_profile_list(
        self, orchestrator: str = "", version: str = "", windows: bool = False
    ) -> VLabsOrchestratorVersionProfileList:
        """Get version profiles converted to the public vlabs schema."""
        return convert_profile_list_to_vlabs(self.get_profile_list(orchestrator, version, windows))

    def get_exact_profile(
        self, profile: OrchestratorProfile, windows: bool = False
    ) -> OrchestratorVersionProfile:
        """Get the single version profile for an upgradable cluster's orchestrator."""
        if not profile.orchestrator_version:
            raise MissingVersionError("Missing Orchestrator Version")

        family = profile.orchestrator_type
        if not self.calculator.supports_upgrades(family):
            raise UnsupportedUpgradeOperationError(
                f"Upgrade operation is not supported for '{family.value}'"
            )

        profiles = self.builder.build_profiles(family, profile.orchestrator_version, windows)
        if len(profiles) != 1:
            raise AmbiguousResultError("Ambiguous Orchestrator Versions")
        return profiles[0]
