"""Errors raised while resolving orchestrator profiles."""


class OrchestratorError(Exception):
    pass


class InvalidRequestError(OrchestratorError):
    """A version was given without an orchestrator."""

    pass


class UnsupportedOrchestratorError(OrchestratorError):
    pass


class UnsupportedVersionError(OrchestratorError):
    """The version is not in the orchestrator's catalog."""

    pass


class MissingVersionError(OrchestratorError):
    pass


class UnsupportedUpgradeOperationError(OrchestratorError):
    """Upgrade lookups are undefined for this orchestrator."""

    pass


class AmbiguousResultError(OrchestratorError):
    """Exactly one profile was expected for a concrete version."""

    pass


class MalformedVersionError(OrchestratorError):
    """A version string does not parse as a semantic version."""

    pass


class CatalogError(OrchestratorError):
    """The version catalog is malformed and cannot be served."""

    pass
