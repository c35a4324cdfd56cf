"""Public, versioned (vlabs) orchestrator profile schema."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class VLabsOrchestratorProfile(BaseModel):
    """Public orchestrator profile."""

    orchestrator_type: str = Field(alias="orchestratorType")
    orchestrator_version: str = Field(alias="orchestratorVersion")

    class Config:
        populate_by_name = True


class VLabsOrchestratorVersionProfile(VLabsOrchestratorProfile):
    """Public orchestrator version profile."""

    default: bool = False
    upgrades: List[VLabsOrchestratorProfile] = []


class VLabsOrchestratorVersionProfileList(BaseModel):
    """Public list of orchestrator version profiles."""

    orchestrators: List[VLabsOrchestratorVersionProfile] = []

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire field names, omitting false defaults and empty upgrades."""
        return {
            "orchestrators": [
                profile.model_dump(by_alias=True, exclude_defaults=True)
                for profile in self.orchestrators
            ]
        }
