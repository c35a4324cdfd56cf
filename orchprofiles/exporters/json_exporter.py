"""JSON exporter."""

import json

from ..model.vlabs import VLabsOrchestratorVersionProfileList
from .base import Exporter


class JsonExporter(Exporter):
    """Export profile lists as JSON."""

    def render(self, profile_list: VLabsOrchestratorVersionProfileList) -> str:
        return json.dumps(self.clean_profile_list(profile_list), indent=2) + "\n"
