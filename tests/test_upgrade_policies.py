"""Test upgrade policy functionality."""

import logging

import pytest

from orchprofiles.catalog import VersionCatalog
from orchprofiles.catalog.ordering import CatalogOrdering, SemanticOrdering, parse_version
from orchprofiles.catalog.versions import KUBERNETES_VERSIONS
from orchprofiles.model.errors import MalformedVersionError
from orchprofiles.model.orchestrator import OrchestratorType
from orchprofiles.upgrade.calculator import UpgradePathCalculator
from orchprofiles.upgrade.policies import (
    FixedMappingPolicy,
    NoUpgradePolicy,
    SemanticMinorStepPolicy,
    available_upgrade_versions,
    minor_step_boundary,
)

SAMPLE_VERSIONS = ["1.10.0", "1.10.5", "1.11.0", "1.11.2", "1.12.0-alpha.0"]


class TestMinorStepBoundary:
    def test_boundary_follows_current_minor(self):
        """Test boundary two minors past the current version."""
        assert minor_step_boundary("1.10.0", "1.10.5") == "1.12.0-alpha.0"
        assert minor_step_boundary("1.10.0", "1.11.0") == "1.12.0-alpha.0"

    def test_boundary_follows_nearest_minor_when_it_skips(self):
        """Test boundary anchored to the nearest version when it is already two minors ahead."""
        assert minor_step_boundary("1.10.0", "1.13.0") == "1.14.0-alpha.0"

    def test_boundary_ignores_nearest_on_new_major(self):
        """Test boundary stays on the current major line."""
        assert minor_step_boundary("1.17.0", "2.0.0") == "1.19.0-alpha.0"


class TestAvailableUpgradeVersions:
    def test_sample_catalog_scenario(self):
        """Test the boundary itself is excluded."""
        assert available_upgrade_versions("1.10.0", SAMPLE_VERSIONS) == [
            "1.10.5",
            "1.11.0",
            "1.11.2",
        ]

    def test_pre_release_within_boundary(self):
        """Test pre-releases of the next minor are upgrade targets."""
        assert available_upgrade_versions("1.11.0", SAMPLE_VERSIONS) == [
            "1.11.2",
            "1.12.0-alpha.0",
        ]

    def test_newest_version_has_no_upgrades(self):
        """Test no upgrades from the newest version."""
        assert available_upgrade_versions("1.12.0-alpha.0", SAMPLE_VERSIONS) == []

    def test_unlisted_current_version(self):
        """Test upgrades from a version that is not in the supported list."""
        assert available_upgrade_versions("1.10.3", SAMPLE_VERSIONS) == [
            "1.10.5",
            "1.11.0",
            "1.11.2",
        ]

    def test_nearest_version_skips_minor(self):
        """Test upgrades when the nearest newer version is two minors ahead."""
        versions = ["1.10.0", "1.13.0", "1.13.4", "1.14.0", "1.15.0"]
        assert available_upgrade_versions("1.10.0", versions) == ["1.13.0", "1.13.4"]

    def test_greater_versions_beyond_boundary(self):
        """Test an empty result when every newer version is past the boundary."""
        versions = ["1.17.0", "2.0.0", "2.1.0"]
        assert available_upgrade_versions("1.17.0", versions) == []

    def test_major_rollover_keeps_patch_upgrades(self):
        """Test patch upgrades remain available next to a new major version."""
        versions = ["1.17.0", "1.17.3", "2.0.0"]
        assert available_upgrade_versions("1.17.0", versions) == ["1.17.3"]

    def test_zero_major_does_not_cross_into_one(self):
        """Test the major line is never crossed."""
        assert available_upgrade_versions("0.9.0", ["0.9.0", "1.0.0"]) == []

    def test_results_sorted_ascending(self):
        """Test results are ascending regardless of input order."""
        versions = ["1.11.2", "1.10.5", "1.12.0-alpha.0", "1.11.0", "1.10.0"]
        assert available_upgrade_versions("1.10.0", versions) == [
            "1.10.5",
            "1.11.0",
            "1.11.2",
        ]

    def test_malformed_current_version(self):
        """Test malformed current version."""
        with pytest.raises(MalformedVersionError):
            available_upgrade_versions("not-a-version", SAMPLE_VERSIONS)

    @pytest.mark.parametrize("current", sorted(KUBERNETES_VERSIONS))
    def test_upgrades_strictly_greater(self, current):
        """Test every upgrade target is strictly greater than the current version."""
        supported = list(KUBERNETES_VERSIONS)
        current_ver = parse_version(current)
        for upgrade in available_upgrade_versions(current, supported):
            assert upgrade != current
            assert parse_version(upgrade) > current_ver

    @pytest.mark.parametrize("current", sorted(KUBERNETES_VERSIONS))
    def test_no_multi_minor_skip(self, current):
        """Test no upgrade target goes past the nearest newer version's minor line."""
        supported = list(KUBERNETES_VERSIONS)
        current_ver = parse_version(current)
        upgrades = available_upgrade_versions(current, supported)
        if not upgrades:
            return

        nearest = parse_version(upgrades[0])
        allowed_minor = max(current_ver.minor + 1, nearest.minor)
        for upgrade in upgrades:
            parsed = parse_version(upgrade)
            assert parsed.major == current_ver.major
            assert parsed.minor <= allowed_minor


class TestSemanticMinorStepPolicy:
    def test_policy_delegates_to_boundary_rule(self):
        """Test the semantic policy."""
        policy = SemanticMinorStepPolicy()
        assert policy.supports_upgrades is True
        assert policy.upgrade_versions("1.10.0", SAMPLE_VERSIONS) == ["1.10.5", "1.11.0", "1.11.2"]

    def test_policy_uses_supplied_ordering(self):
        """Test the policy compares versions through its ordering."""

        class RecordingOrdering(SemanticOrdering):
            def __init__(self):
                self.calls = []

            def greater_than(self, versions, version):
                self.calls.append(version)
                return super().greater_than(versions, version)

        ordering = RecordingOrdering()
        policy = SemanticMinorStepPolicy(ordering)
        assert policy.upgrade_versions("1.11.0", SAMPLE_VERSIONS) == ["1.11.2", "1.12.0-alpha.0"]
        assert ordering.calls == ["1.11.0"]


class TestFixedMappingPolicy:
    def setup_method(self):
        """Set up test fixtures."""
        self.supported = ["1.8.8", "1.9.0", "1.10.0", "1.11.0", "1.11.2"]
        self.policy = FixedMappingPolicy({"1.11.0": "1.11.2"}, CatalogOrdering(self.supported))

    def test_known_source_version(self):
        """Test the one mapped version."""
        assert self.policy.upgrade_versions("1.11.0", self.supported) == ["1.11.2"]

    @pytest.mark.parametrize("version", ["1.8.8", "1.10.0", "1.11.2", "9.9.9"])
    def test_other_versions(self, version):
        """Test every other version has no upgrades."""
        assert self.policy.upgrade_versions(version, self.supported) == []

    def test_successor_missing_from_supported_versions(self):
        """Test a successor that is not supported is not offered."""
        assert self.policy.upgrade_versions("1.11.0", ["1.11.0"]) == []

    def test_successor_behind_source_is_not_offered(self):
        """Test a mapping that would move backwards in the ordering."""
        policy = FixedMappingPolicy({"1.11.2": "1.11.0"}, CatalogOrdering(self.supported))
        assert policy.upgrade_versions("1.11.2", self.supported) == []


class TestNoUpgradePolicy:
    def test_no_upgrades(self):
        """Test families without upgrades."""
        policy = NoUpgradePolicy()
        assert policy.supports_upgrades is False
        assert policy.upgrade_versions("swarm:1.1.0", ["swarm:1.1.0", "swarm:2.0.0"]) == []


class TestUpgradePathCalculator:
    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = VersionCatalog.builtin()
        self.calculator = UpgradePathCalculator(self.catalog)

    def test_policies_share_catalog_orderings(self):
        """Test each ordered family's policy compares with its catalog entry's ordering."""
        for family in (OrchestratorType.KUBERNETES, OrchestratorType.DCOS):
            assert self.calculator.policies[family].ordering is self.catalog.entry(family).ordering

    def test_dcos_upgrade_through_calculator(self):
        """Test the DCOS mapping through the calculator."""
        assert self.calculator.get_upgrade_versions(OrchestratorType.DCOS, "1.11.0") == ["1.11.2"]
        assert self.calculator.supports_upgrades(OrchestratorType.SWARM) is False

    def test_policy_selection_is_logged(self, caplog):
        """Test the chosen policy per family is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="orchprofiles.upgrade.calculator"):
            UpgradePathCalculator(self.catalog)

        assert "Kubernetes=SemanticMinorStepPolicy" in caplog.text
        assert "DCOS=FixedMappingPolicy" in caplog.text
