"""Catalog configuration loading."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..model.errors import CatalogError
from ..model.orchestrator import OrchestratorType
from ..utils.logger import get_logger
from .catalog import CatalogEntry, VersionCatalog, VersionEntry, builtin_entries, get_default_catalog

logger = get_logger(__name__)

CATALOG_PATH_ENV = "ORCHPROFILES_CATALOG"


def load_catalog(config_path: Optional[Path] = None) -> VersionCatalog:
    """Load the version catalog.

    Uses ``config_path`` or the ORCHPROFILES_CATALOG environment variable to
    find a YAML override file. Families missing from the file keep their
    built-in entry. Without an override file the built-in catalog is returned.
    """
    if config_path is None and os.environ.get(CATALOG_PATH_ENV):
        config_path = Path(os.environ[CATALOG_PATH_ENV])

    if config_path is None:
        return get_default_catalog()

    config_path = Path(config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.error(f"Failed to load version catalog: {e}")
        raise CatalogError(f"Cannot read catalog file {config_path}: {e}") from e

    catalog = catalog_from_dict(config)
    logger.info(f"Loaded version catalog from {config_path}")
    return catalog


def catalog_from_dict(config: Dict[str, Any]) -> VersionCatalog:
    """Build a catalog from a configuration dictionary merged over the built-in entries."""
    if not isinstance(config, dict):
        raise CatalogError("Catalog configuration must be a mapping of orchestrator names")

    entries = {entry.family: entry for entry in builtin_entries()}
    for name, entry_config in config.items():
        family = _parse_family(name)
        entries[family] = _parse_entry(family, entry_config)

    return VersionCatalog(entries.values())


def _parse_family(name: str) -> OrchestratorType:
    """Match a configured orchestrator name case-insensitively."""
    for family in OrchestratorType:
        if str(name).lower() == family.value.lower():
            return family
    raise CatalogError(f"Unknown orchestrator '{name}' in catalog configuration")


def _version_string(family: OrchestratorType, value: Any) -> str:
    """Return a configured version, rejecting values YAML did not load as strings."""
    if not isinstance(value, str):
        raise CatalogError(
            f"{family.value} catalog version {value!r} must be quoted as a string"
        )
    return value


def _parse_entry(family: OrchestratorType, entry_config: Dict[str, Any]) -> CatalogEntry:
    """Parse one family's configuration."""
    if not isinstance(entry_config, dict):
        raise CatalogError(f"{family.value} catalog entry must be a mapping")

    try:
        windows_default = entry_config.get("windows_default")
        return CatalogEntry(
            family=family,
            versions=tuple(_parse_versions(family, entry_config["versions"])),
            default=_version_string(family, entry_config["default"]),
            windows_default=(
                _version_string(family, windows_default) if windows_default is not None else None
            ),
            upgrades={
                _version_string(family, source): _version_string(family, target)
                for source, target in (entry_config.get("upgrades") or {}).items()
            },
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise CatalogError(f"{family.value} catalog entry is malformed: {e}") from e


def _parse_versions(family: OrchestratorType, versions_config: List[Any]) -> List[VersionEntry]:
    """Parse version items given as plain strings or as mappings."""
    versions = []
    for item in versions_config:
        if isinstance(item, dict):
            versions.append(
                VersionEntry(
                    version=_version_string(family, item["version"]),
                    deprecated=bool(item.get("deprecated", False)),
                    windows=bool(item.get("windows", False)),
                )
            )
        else:
            versions.append(VersionEntry(version=_version_string(family, item)))
    return versions
