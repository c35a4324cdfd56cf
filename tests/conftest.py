"""Test configuration and fixtures."""

import pytest

from orchprofiles.api import OrchestratorProfileService
from orchprofiles.catalog import VersionCatalog, catalog_from_dict


@pytest.fixture
def builtin_catalog():
    """Catalog built from the built-in version tables."""
    return VersionCatalog.builtin()


@pytest.fixture
def sample_catalog_config():
    """Catalog override with a small Kubernetes version line."""
    return {
        "Kubernetes": {
            "default": "1.11.2",
            "windows_default": "1.11.0",
            "versions": [
                {"version": "1.10.0", "windows": True},
                {"version": "1.10.5", "windows": False},
                {"version": "1.11.0", "windows": True},
                {"version": "1.11.2", "windows": False},
                {"version": "1.12.0-alpha.0", "windows": True},
            ],
        },
    }


@pytest.fixture
def sample_catalog(sample_catalog_config):
    """Catalog using the sample Kubernetes versions and built-in entries for the rest."""
    return catalog_from_dict(sample_catalog_config)


@pytest.fixture
def service(builtin_catalog):
    """Profile service over the built-in catalog."""
    return OrchestratorProfileService(builtin_catalog)


@pytest.fixture
def sample_service(sample_catalog):
    """Profile service over the sample catalog."""
    return OrchestratorProfileService(sample_catalog)
