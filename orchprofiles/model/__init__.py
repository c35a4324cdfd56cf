"""Data models for orchprofiles."""

from .errors import (
    OrchestratorError,
    InvalidRequestError,
    UnsupportedOrchestratorError,
    UnsupportedVersionError,
    MissingVersionError,
    UnsupportedUpgradeOperationError,
    AmbiguousResultError,
    MalformedVersionError,
    CatalogError,
)
from .export import OutputFormat
from .orchestrator import OrchestratorType, OrchestratorProfile, OrchestratorVersionProfile
from .vlabs import (
    VLabsOrchestratorProfile,
    VLabsOrchestratorVersionProfile,
    VLabsOrchestratorVersionProfileList,
)

__all__ = [
    "OrchestratorError",
    "InvalidRequestError",
    "UnsupportedOrchestratorError",
    "UnsupportedVersionError",
    "MissingVersionError",
    "UnsupportedUpgradeOperationError",
    "AmbiguousResultError",
    "MalformedVersionError",
    "CatalogError",
    "OutputFormat",
    "OrchestratorType",
    "OrchestratorProfile",
    "OrchestratorVersionProfile",
    "VLabsOrchestratorProfile",
    "VLabsOrchestratorVersionProfile",
    "VLabsOrchestratorVersionProfileList",
]
