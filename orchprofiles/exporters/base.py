"""Base exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..model.vlabs import VLabsOrchestratorVersionProfileList
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Exporter(ABC):
    """Base class for profile list exporters."""

    def __init__(self, output_path: Optional[Path] = None):
        self.output_path = Path(output_path) if output_path else None

    @abstractmethod
    def render(self, profile_list: VLabsOrchestratorVersionProfileList) -> str:
        """Render a profile list to text."""
        pass

    def export(self, profile_list: VLabsOrchestratorVersionProfileList) -> str:
        """Render a profile list and write it to the output path, if one is set."""
        content = self.render(profile_list)

        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "w") as f:
                f.write(content)
            logger.info(
                f"Exported {len(profile_list.orchestrators)} profile(s) to {self.output_path}"
            )

        return content

    def clean_profile_list(self, profile_list: VLabsOrchestratorVersionProfileList) -> Dict[str, Any]:
        """Convert a profile list to plain data for serialization."""
        return profile_list.to_dict()
