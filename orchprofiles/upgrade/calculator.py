"""Orchestrator upgrade path calculator."""

from typing import Callable, Dict, List

from ..catalog.catalog import CatalogEntry, VersionCatalog
from ..model.errors import CatalogError
from ..model.orchestrator import OrchestratorProfile, OrchestratorType
from ..utils.logger import get_logger
from .policies import FixedMappingPolicy, NoUpgradePolicy, SemanticMinorStepPolicy, UpgradePolicy

logger = get_logger(__name__)


def _semantic_policy(entry: CatalogEntry) -> UpgradePolicy:
    return SemanticMinorStepPolicy(entry.ordering)


def _fixed_policy(entry: CatalogEntry) -> UpgradePolicy:
    return FixedMappingPolicy(entry.upgrades, entry.ordering)


def _no_upgrade_policy(entry: CatalogEntry) -> UpgradePolicy:
    return NoUpgradePolicy()


# Dictionary mapping orchestrator families to their upgrade policy factories
POLICY_FACTORIES: Dict[OrchestratorType, Callable[[CatalogEntry], UpgradePolicy]] = {
    OrchestratorType.KUBERNETES: _semantic_policy,
    OrchestratorType.DCOS: _fixed_policy,
    OrchestratorType.SWARM: _no_upgrade_policy,
    OrchestratorType.DOCKER_CE: _no_upgrade_policy,
}


class UpgradePathCalculator:
    """Computes legal upgrade targets for orchestrator versions."""

    def __init__(self, catalog: VersionCatalog):
        missing = [family.value for family in OrchestratorType if family not in POLICY_FACTORIES]
        if missing:
            raise CatalogError(f"No upgrade policy for orchestrators: {', '.join(missing)}")

        self.catalog = catalog
        self.policies: Dict[OrchestratorType, UpgradePolicy] = {
            family: POLICY_FACTORIES[family](catalog.entry(family)) for family in OrchestratorType
        }
        logger.debug(
            "Upgrade policies: "
            + ", ".join(f"{f.value}={type(p).__name__}" for f, p in self.policies.items())
        )

    def supports_upgrades(self, family: OrchestratorType) -> bool:
        """Check whether upgrade lookups are defined for a family."""
        return self.policies[family].supports_upgrades

    def get_upgrade_versions(
        self, family: OrchestratorType, current: str, windows: bool = False
    ) -> List[str]:
        """Get upgrade target versions for the current version, ascending."""
        supported = self.catalog.get_supported_versions(family, windows=windows)
        return self.policies[family].upgrade_versions(current, supported)

    def get_upgrades(
        self, family: OrchestratorType, current: str, windows: bool = False
    ) -> List[OrchestratorProfile]:
        """Get upgrade targets for the current version as orchestrator profiles."""
        return [
            OrchestratorProfile(orchestrator_type=family, orchestrator_version=version)
            for version in self.get_upgrade_versions(family, current, windows)
        ]
