"""Version ordering helpers.

Semantic versions are compared with ``semver``. Families whose versions are
opaque tokens are ordered by their position in the catalog instead.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence

import semver

from ..model.errors import MalformedVersionError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def parse_version(version: str) -> Optional[semver.Version]:
    """Parse a semantic version string, returning None if it is not one."""
    try:
        return semver.Version.parse(version)
    except (ValueError, TypeError):
        return None


def require_version(version: str) -> semver.Version:
    """Parse a semantic version string or raise MalformedVersionError."""
    parsed = parse_version(version)
    if parsed is None:
        raise MalformedVersionError(f"Version '{version}' is not a valid semantic version")
    return parsed


def _parsed(versions: Iterable[str], pre_release: bool) -> List[tuple]:
    """Pair each parseable version with its parsed form."""
    result = []
    for version in versions:
        parsed = parse_version(version)
        if parsed is None:
            logger.debug(f"Skipping non-semantic version: {version}")
            continue
        if not pre_release and parsed.prerelease:
            continue
        result.append((parsed, version))
    return result


def get_versions_gt(
    versions: Iterable[str], version: str, inclusive: bool = False, pre_release: bool = True
) -> List[str]:
    """Return versions greater than (or equal to, if inclusive) the given version."""
    base = require_version(version)
    return [
        raw
        for parsed, raw in sorted(_parsed(versions, pre_release), key=lambda p: p[0])
        if parsed > base or (inclusive and parsed == base)
    ]


def get_versions_between(
    versions: Iterable[str],
    lower: str,
    upper: str,
    inclusive: bool = False,
    pre_release: bool = True,
) -> List[str]:
    """Return versions within the range (lower, upper), or [lower, upper] if inclusive."""
    low = require_version(lower)
    high = require_version(upper)
    result = []
    for parsed, raw in sorted(_parsed(versions, pre_release), key=lambda p: p[0]):
        if inclusive:
            if low <= parsed <= high:
                result.append(raw)
        elif low < parsed < high:
            result.append(raw)
    return result


def get_min_version(versions: Iterable[str], pre_release: bool = True) -> str:
    """Return the smallest semantic version, or an empty string."""
    candidates = _parsed(versions, pre_release)
    if not candidates:
        return ""
    return min(candidates, key=lambda p: p[0])[1]


def get_max_version(versions: Iterable[str], pre_release: bool = True) -> str:
    """Return the largest semantic version, or an empty string."""
    candidates = _parsed(versions, pre_release)
    if not candidates:
        return ""
    return max(candidates, key=lambda p: p[0])[1]


class VersionOrdering(ABC):
    """Total order over one family's version strings."""

    @abstractmethod
    def validate(self, version: str) -> None:
        """Raise if the version cannot take part in this ordering."""
        pass

    @abstractmethod
    def key(self, version: str) -> Any:
        pass

    def sort(self, versions: Iterable[str]) -> List[str]:
        """Sort versions ascending."""
        return sorted(versions, key=self.key)

    def is_greater(self, version: str, other: str) -> bool:
        """Check whether version is strictly greater than other."""
        return self.key(version) > self.key(other)

    def greater_than(self, versions: Iterable[str], version: str) -> List[str]:
        """Return versions strictly greater than the given version, ascending."""
        return self.sort(v for v in versions if self.is_greater(v, version))


class SemanticOrdering(VersionOrdering):
    """Semantic version ordering, pre-releases included."""

    def validate(self, version: str) -> None:
        require_version(version)

    def key(self, version: str) -> semver.Version:
        return require_version(version)

    def greater_than(self, versions: Iterable[str], version: str) -> List[str]:
        return get_versions_gt(versions, version, inclusive=False, pre_release=True)


class CatalogOrdering(VersionOrdering):
    """Orders opaque version tokens by their declaration order in the catalog."""

    def __init__(self, sequence: Sequence[str]):
        self.positions = {version: index for index, version in enumerate(sequence)}

    def validate(self, version: str) -> None:
        if version not in self.positions:
            raise MalformedVersionError(f"Version '{version}' is not declared in the catalog")

    def key(self, version: str) -> int:
        self.validate(version)
        return self.positions[version]

    def is_greater(self, version: str, other: str) -> bool:
        if version not in self.positions or other not in self.positions:
            return False
        return self.positions[version] > self.positions[other]
