"""YAML exporter."""

import yaml

from ..model.vlabs import VLabsOrchestratorVersionProfileList
from .base import Exporter


class YamlExporter(Exporter):
    """Export profile lists as YAML."""

    def render(self, profile_list: VLabsOrchestratorVersionProfileList) -> str:
        return yaml.dump(
            self.clean_profile_list(profile_list), default_flow_style=False, sort_keys=False
        )
