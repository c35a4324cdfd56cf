"""Output-related models."""

from enum import Enum


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    YAML = "yaml"
    JSON = "json"
