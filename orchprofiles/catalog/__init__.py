"""Orchestrator version catalog."""

from .catalog import CatalogEntry, VersionCatalog, VersionEntry, get_default_catalog
from .loader import load_catalog, catalog_from_dict
from .ordering import (
    CatalogOrdering,
    SemanticOrdering,
    VersionOrdering,
    get_max_version,
    get_min_version,
    get_versions_between,
    get_versions_gt,
)

__all__ = [
    "CatalogEntry",
    "VersionCatalog",
    "VersionEntry",
    "get_default_catalog",
    "load_catalog",
    "catalog_from_dict",
    "CatalogOrdering",
    "SemanticOrdering",
    "VersionOrdering",
    "get_max_version",
    "get_min_version",
    "get_versions_between",
    "get_versions_gt",
]
