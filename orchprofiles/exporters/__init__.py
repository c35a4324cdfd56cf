"""Profile converters and exporters."""

from pathlib import Path
from typing import Dict, Optional, Type

from ..model.export import OutputFormat
from .base import Exporter
from .converter import (
    convert_profile_to_vlabs,
    convert_version_profile_to_vlabs,
    convert_profile_list_to_vlabs,
)
from .json_exporter import JsonExporter
from .yaml_exporter import YamlExporter

EXPORTERS: Dict[OutputFormat, Type[Exporter]] = {
    OutputFormat.JSON: JsonExporter,
    OutputFormat.YAML: YamlExporter,
}


def get_exporter(output_format: OutputFormat, output_path: Optional[Path] = None) -> Exporter:
    """Get the exporter for an output format."""
    if output_format not in EXPORTERS:
        raise ValueError(f"No exporter for format '{output_format.value}'")
    return EXPORTERS[output_format](output_path)


__all__ = [
    "Exporter",
    "JsonExporter",
    "YamlExporter",
    "EXPORTERS",
    "get_exporter",
    "convert_profile_to_vlabs",
    "convert_version_profile_to_vlabs",
    "convert_profile_list_to_vlabs",
]
