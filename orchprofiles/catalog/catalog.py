"""Immutable catalog of supported orchestrator versions."""

from dataclasses import dataclass, field
from functools import cached_property, lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..model.errors import CatalogError, MalformedVersionError
from ..model.orchestrator import OrchestratorType
from ..utils.logger import get_logger
from .ordering import CatalogOrdering, SemanticOrdering, VersionOrdering
from . import versions as builtin

logger = get_logger(__name__)

# Families whose versions are semantic versions; all others are opaque tokens
SEMANTIC_FAMILIES = frozenset({OrchestratorType.KUBERNETES})


@dataclass(frozen=True)
class VersionEntry:
    """A single catalog version."""

    version: str
    deprecated: bool = False
    windows: bool = False


@dataclass(frozen=True)
class CatalogEntry:
    """Supported versions, defaults and fixed upgrades for one orchestrator family."""

    family: OrchestratorType
    versions: Tuple[VersionEntry, ...]
    default: str
    windows_default: Optional[str] = None
    upgrades: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "versions", tuple(self.versions))
        object.__setattr__(self, "upgrades", MappingProxyType(dict(self.upgrades)))

    @property
    def tracks_windows(self) -> bool:
        """Whether Windows support narrows this family's versions."""
        return self.windows_default is not None

    @property
    def all_versions(self) -> List[str]:
        return [entry.version for entry in self.versions]

    @cached_property
    def ordering(self) -> VersionOrdering:
        """Ordering strategy for this family's versions."""
        if self.family in SEMANTIC_FAMILIES:
            return SemanticOrdering()
        return CatalogOrdering(self.all_versions)

    def validate(self) -> None:
        """Check the entry's invariants, raising CatalogError on the first violation."""
        name = self.family.value
        all_versions = self.all_versions
        if not all_versions:
            raise CatalogError(f"{name} catalog has no versions")
        if len(set(all_versions)) != len(all_versions):
            raise CatalogError(f"{name} catalog lists a version more than once")

        try:
            for version in all_versions:
                self.ordering.validate(version)
        except MalformedVersionError as e:
            raise CatalogError(f"{name} catalog is malformed: {e}") from e

        if self.default not in all_versions:
            raise CatalogError(f"{name} default version {self.default} is not in the catalog")

        if self.tracks_windows:
            windows_versions = [e.version for e in self.versions if e.windows]
            if self.windows_default not in windows_versions:
                raise CatalogError(
                    f"{name} Windows default version {self.windows_default} "
                    "is not a Windows-supported version"
                )

        for source, target in self.upgrades.items():
            if source not in all_versions or target not in all_versions:
                raise CatalogError(f"{name} upgrade {source} -> {target} is not in the catalog")
            if not self.ordering.is_greater(target, source):
                raise CatalogError(f"{name} upgrade {source} -> {target} is not an upgrade")


class VersionCatalog:
    """Read-only registry of catalog entries, one per orchestrator family."""

    def __init__(self, entries: Iterable[CatalogEntry]):
        try:
            mapping = self._index(entries)
        except CatalogError as e:
            logger.error(f"Invalid version catalog: {e}")
            raise

        self._entries = MappingProxyType(mapping)

    @staticmethod
    def _index(entries: Iterable[CatalogEntry]) -> Dict[OrchestratorType, CatalogEntry]:
        mapping = {}
        for entry in entries:
            if entry.family in mapping:
                raise CatalogError(f"Duplicate catalog entry for {entry.family.value}")
            entry.validate()
            mapping[entry.family] = entry

        missing = [family.value for family in OrchestratorType if family not in mapping]
        if missing:
            raise CatalogError(f"Catalog is missing orchestrators: {', '.join(missing)}")
        return mapping

    @classmethod
    def builtin(cls) -> "VersionCatalog":
        """Build the catalog from the built-in version tables."""
        return cls(builtin_entries())

    @property
    def families(self) -> List[OrchestratorType]:
        return [family for family in OrchestratorType if family in self._entries]

    def entry(self, family: OrchestratorType) -> CatalogEntry:
        """Get the catalog entry for a family."""
        return self._entries[family]

    def get_supported_versions(
        self, family: OrchestratorType, include_deprecated: bool = False, windows: bool = False
    ) -> List[str]:
        """List a family's versions in ascending order.

        Deprecated versions are left out unless include_deprecated is set. When
        windows is set and the family tracks Windows support, only Windows
        versions are listed.
        """
        entry = self.entry(family)
        selected = [
            v.version
            for v in entry.versions
            if (include_deprecated or not v.deprecated)
            and (not windows or not entry.tracks_windows or v.windows)
        ]
        return entry.ordering.sort(selected)

    def get_default_version(self, family: OrchestratorType, windows: bool = False) -> str:
        """Get a family's default version."""
        entry = self.entry(family)
        if windows and entry.tracks_windows:
            return entry.windows_default
        return entry.default

    def is_supported(self, family: OrchestratorType, version: str) -> bool:
        """Check whether a version is listed for the family, deprecated or not."""
        for entry in self.entry(family).versions:
            if entry.version == version:
                return True
        return False

    def get_upgrade_table(self, family: OrchestratorType) -> Mapping[str, str]:
        return self.entry(family).upgrades


def builtin_entries() -> List[CatalogEntry]:
    """Catalog entries for the built-in version tables."""
    return [
        CatalogEntry(
            family=OrchestratorType.KUBERNETES,
            versions=tuple(
                VersionEntry(version, info["deprecated"], info["windows"])
                for version, info in builtin.KUBERNETES_VERSIONS.items()
            ),
            default=builtin.KUBERNETES_DEFAULT_VERSION,
            windows_default=builtin.KUBERNETES_WINDOWS_DEFAULT_VERSION,
        ),
        CatalogEntry(
            family=OrchestratorType.DCOS,
            versions=tuple(VersionEntry(version) for version in builtin.DCOS_VERSIONS),
            default=builtin.DCOS_DEFAULT_VERSION,
            upgrades=builtin.DCOS_UPGRADES,
        ),
        CatalogEntry(
            family=OrchestratorType.SWARM,
            versions=(VersionEntry(builtin.SWARM_VERSION),),
            default=builtin.SWARM_VERSION,
        ),
        CatalogEntry(
            family=OrchestratorType.DOCKER_CE,
            versions=(VersionEntry(builtin.DOCKER_CE_VERSION),),
            default=builtin.DOCKER_CE_VERSION,
        ),
    ]


@lru_cache(maxsize=1)
def get_default_catalog() -> VersionCatalog:
    """Get the process-wide built-in catalog, built on first use."""
    return VersionCatalog.builtin()
