"""Orchestrator profile models."""

from enum import Enum
from typing import List

from pydantic import BaseModel


class OrchestratorType(str, Enum):
    """Known orchestrator families. The value is the canonical family name."""

    KUBERNETES = "Kubernetes"
    DCOS = "DCOS"
    SWARM = "Swarm"
    DOCKER_CE = "DockerCE"


class OrchestratorProfile(BaseModel):
    """An orchestrator family and version."""

    orchestrator_type: OrchestratorType
    orchestrator_version: str = ""

    class Config:
        frozen = True


class OrchestratorVersionProfile(BaseModel):
    """A supported orchestrator version with its default flag and upgrade targets."""

    orchestrator_profile: OrchestratorProfile
    default: bool = False
    upgrades: List[OrchestratorProfile] = []

    @property
    def orchestrator_type(self) -> OrchestratorType:
        """Get the orchestrator family."""
        return self.orchestrator_profile.orchestrator_type

    @property
    def orchestrator_version(self) -> str:
        """Get the orchestrator version."""
        return self.orchestrator_profile.orchestrator_version

    @property
    def upgrade_versions(self) -> List[str]:
        """Get the upgrade target versions in order."""
        return [upgrade.orchestrator_version for upgrade in self.upgrades]
