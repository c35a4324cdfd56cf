"""Orchestrator upgrade path management."""

from .calculator import UpgradePathCalculator
from .policies import (
    FixedMappingPolicy,
    NoUpgradePolicy,
    SemanticMinorStepPolicy,
    UpgradePolicy,
    available_upgrade_versions,
)

__all__ = [
    "UpgradePathCalculator",
    "FixedMappingPolicy",
    "NoUpgradePolicy",
    "SemanticMinorStepPolicy",
    "UpgradePolicy",
    "available_upgrade_versions",
]
