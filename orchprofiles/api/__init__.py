"""API layer for orchprofiles business logic."""

from .profile_service import OrchestratorProfileService, ProfileBuilder
from .resolver import OrchestratorResolver

__all__ = ["OrchestratorProfileService", "ProfileBuilder", "OrchestratorResolver"]
