"""Per-family upgrade policies."""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence

from ..catalog.ordering import (
    SemanticOrdering,
    VersionOrdering,
    get_min_version,
    get_versions_between,
    require_version,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


def minor_step_boundary(current: str, nearest: str) -> str:
    """Exclusive upper bound for a single upgrade from current.

    A cluster may advance at most one minor version per upgrade. When the
    nearest newer version is already more than one minor ahead on the same
    major line, the bound follows that version's minor line instead.
    """
    current_ver = require_version(current)
    nearest_ver = require_version(nearest)

    if current_ver.major == nearest_ver.major and current_ver.minor + 1 < nearest_ver.minor:
        return f"{nearest_ver.major}.{nearest_ver.minor + 1}.0-alpha.0"
    return f"{current_ver.major}.{current_ver.minor + 2}.0-alpha.0"


def available_upgrade_versions(
    current: str,
    supported_versions: Sequence[str],
    ordering: Optional[SemanticOrdering] = None,
) -> List[str]:
    """Compute the versions a cluster at ``current`` may upgrade to in one step."""
    ordering = ordering or SemanticOrdering()
    ordering.validate(current)

    greater = ordering.greater_than(supported_versions, current)
    if not greater:
        return []

    nearest = get_min_version(greater, pre_release=True)
    boundary = minor_step_boundary(current, nearest)
    logger.debug(f"Upgrade boundary for {current} is {boundary} (nearest {nearest})")

    return get_versions_between(
        supported_versions, current, boundary, inclusive=False, pre_release=True
    )


class UpgradePolicy(ABC):
    """Computes upgrade targets for one orchestrator family."""

    supports_upgrades = True

    @abstractmethod
    def upgrade_versions(self, current: str, supported_versions: Sequence[str]) -> List[str]:
        """Return upgrade targets for current, ascending."""
        pass


class SemanticMinorStepPolicy(UpgradePolicy):
    """Semantic versions, advancing at most one minor version per upgrade."""

    def __init__(self, ordering: Optional[SemanticOrdering] = None):
        self.ordering = ordering or SemanticOrdering()

    def upgrade_versions(self, current: str, supported_versions: Sequence[str]) -> List[str]:
        return available_upgrade_versions(current, supported_versions, self.ordering)


class FixedMappingPolicy(UpgradePolicy):
    """Explicit source -> successor upgrades. Anything else has no upgrades."""

    def __init__(self, upgrades: Mapping[str, str], ordering: VersionOrdering):
        self.upgrades = dict(upgrades)
        self.ordering = ordering

    def upgrade_versions(self, current: str, supported_versions: Sequence[str]) -> List[str]:
        successor = self.upgrades.get(current)
        if successor is None or successor not in supported_versions:
            return []
        if not self.ordering.is_greater(successor, current):
            return []
        return [successor]


class NoUpgradePolicy(UpgradePolicy):
    supports_upgrades = False

    def upgrade_versions(self, current: str, supported_versions: Sequence[str]) -> List[str]:
        return []
