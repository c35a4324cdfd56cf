"""Built-in orchestrator version catalog data."""

from typing import Dict, List

# Kubernetes versions with their support status. Deprecated versions are still
# accepted for existing clusters but are not offered as install or upgrade targets.
KUBERNETES_VERSIONS: Dict[str, Dict[str, bool]] = {
    "1.12.7": {"deprecated": True, "windows": False},
    "1.12.8": {"deprecated": False, "windows": False},
    "1.13.10": {"deprecated": True, "windows": True},
    "1.13.11": {"deprecated": False, "windows": True},
    "1.14.6": {"deprecated": True, "windows": True},
    "1.14.7": {"deprecated": False, "windows": True},
    "1.14.8": {"deprecated": False, "windows": True},
    "1.15.4": {"deprecated": False, "windows": True},
    "1.15.5": {"deprecated": False, "windows": True},
    "1.16.0": {"deprecated": False, "windows": False},
    "1.16.1": {"deprecated": False, "windows": True},
    "1.17.0-alpha.1": {"deprecated": False, "windows": False},
    "1.17.0-beta.1": {"deprecated": False, "windows": False},
}

KUBERNETES_DEFAULT_VERSION = "1.15.5"
KUBERNETES_WINDOWS_DEFAULT_VERSION = "1.14.8"

DCOS_VERSIONS: List[str] = ["1.8.8", "1.9.0", "1.9.8", "1.10.0", "1.11.0", "1.11.2"]
DCOS_DEFAULT_VERSION = "1.11.2"

# DCOS only supports these explicit patch upgrades
DCOS_UPGRADES: Dict[str, str] = {"1.11.0": "1.11.2"}

SWARM_VERSION = "swarm:1.1.0"
DOCKER_CE_VERSION = "17.03.*"
