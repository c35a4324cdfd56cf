"""Orchestrator name resolution."""

from typing import Optional

from ..model.errors import InvalidRequestError, UnsupportedOrchestratorError
from ..model.orchestrator import OrchestratorType


class OrchestratorResolver:
    """Validates caller-supplied orchestrator names against the known families."""

    def validate(self, orchestrator: str, version: str = "") -> Optional[OrchestratorType]:
        """Resolve an orchestrator name to its family.

        Returns None when neither orchestrator nor version is given, meaning
        every family is requested.
        """
        if not orchestrator:
            if version:
                raise InvalidRequestError(f"Must specify orchestrator for version '{version}'")
            return None

        for family in OrchestratorType:
            if orchestrator.lower() == family.value.lower():
                return family

        raise UnsupportedOrchestratorError(f"Unsupported orchestrator '{orchestrator}'")
