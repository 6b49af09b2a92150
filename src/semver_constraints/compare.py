# SPDX-License-Identifier: MIT
"""Version comparison helpers that accept strings or Version objects.

Ordering follows SemVer 2.0.0 precedence:
1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0-rc.1 < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable

from .semver import Ordering, Version, VersionLike


def _coerce(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    return Version.parse(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESSER (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESSER: -1>
        >>> compare_versions("1.0.0+build.1", "1.0.0") == 0
        True
        >>> compare_versions("1.0.0-rc.1", "1.0.0") == -1
        True
    """
    return Version.compare(_coerce(version1), _coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that orders the same way Version.compare does

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Release sorts after every pre-release of the same core: (1,) > (0, ...)
    # Numeric identifiers become (0, n, "") so they sort below (1, 0, text)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part) for part in v.prerelease
        )
        prerelease_key = (0, parts)

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    Versions with equal precedence but different build metadata keep their
    input order.

    Examples:
        >>> [str(v) for v in sort_versions(["1.0.0", "1.0.0-rc.1"])]
        ['1.0.0-rc.1', '1.0.0']
    """
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)
