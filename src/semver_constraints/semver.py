# SPDX-License-Identifier: MIT
"""Semantic version values.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Precedence follows SemVer 2.0.0 section 11. Build metadata is carried on the
value and rendered, but never takes part in equality, hashing or ordering.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Union

logger = logging.getLogger(__name__)

# Single identifier grammars
PRERELEASE_IDENTIFIER_PATTERN = re.compile(r"^(0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)$", re.ASCII)
BUILD_IDENTIFIER_PATTERN = re.compile(r"^[0-9A-Za-z-]+$", re.ASCII)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class VersionError(Exception):
    """Base class for errors raised by this package."""


class InvalidVersionError(VersionError, ValueError):
    """Raised when a version does not follow semantic versioning."""

    def __init__(self, version: object, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class MalformedVersionError(InvalidVersionError):
    """Raised when a version string does not match the SemVer grammar."""

    def __init__(self, version: str, message: str = ""):
        super().__init__(
            version,
            message or f'The string "{version}" is not a valid semantic version number.',
        )


class InvalidComponentError(InvalidVersionError):
    """Raised when a numeric part or metadata identifier is out of bounds.

    Attributes:
        component: Name of the offending field ("major", "prerelease", ...)
        value: The rejected value
    """

    def __init__(self, component: str, value: object, message: str = ""):
        self.component = component
        self.value = value
        super().__init__(value, message or f"Invalid {component} component: {value!r}")


class Ordering(IntEnum):
    """Result of a precedence comparison."""

    LESSER = -1
    EQUAL = 0
    GREATER = 1


def _order(left, right) -> Ordering:
    if left > right:
        return Ordering.GREATER
    if left < right:
        return Ordering.LESSER
    return Ordering.EQUAL


def _check_number(component: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"The {component} version number must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidComponentError(
            component, value, f"The {component} version number must be non-negative, got {value}"
        )


def _check_identifiers(component: str, identifiers: Iterable[str], pattern: re.Pattern) -> tuple[str, ...]:
    if identifiers is None:
        raise TypeError(f"The {component} identifier list is required (even if empty).")
    if isinstance(identifiers, str):
        raise TypeError(f"The {component} identifiers must be a sequence of strings, not a string")

    checked = tuple(identifiers)
    for identifier in checked:
        if not isinstance(identifier, str):
            raise TypeError(f"The {component} identifier must be a string, got {type(identifier).__name__}")
        if not pattern.fullmatch(identifier):
            raise InvalidComponentError(
                component, identifier, f'The {component} identifier "{identifier}" is not valid.'
            )
    return checked


def _compare_identifiers(left: str, right: str) -> Ordering:
    """Compare a single pair of pre-release identifiers."""
    left_numeric = left.isdigit()
    right_numeric = right.isdigit()

    if left_numeric and right_numeric:
        return _order(int(left), int(right))
    # Numeric identifiers always have lower precedence than alphanumeric ones
    if left_numeric:
        return Ordering.LESSER
    if right_numeric:
        return Ordering.GREATER
    return _order(left, right)


def _compare_prerelease(left: tuple[str, ...], right: tuple[str, ...]) -> Ordering:
    """Compare two pre-release identifier lists.

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha). When every shared identifier is equal,
    the longer list wins (1.0.0-alpha < 1.0.0-alpha.1).
    """
    if not left:
        return Ordering.EQUAL if not right else Ordering.GREATER
    if not right:
        return Ordering.LESSER

    for left_id, right_id in zip(left, right):
        result = _compare_identifiers(left_id, right_id)
        if result is not Ordering.EQUAL:
            return result

    return _order(len(left), len(right))


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable, validated semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        build: Build metadata identifiers (e.g., ("build", "123")), ignored
            for equality, hashing and precedence

    Raises:
        InvalidComponentError: If a number is negative or an identifier does
            not match its grammar
        TypeError: If a number is not an int or an identifier list is missing
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        _check_number("major", self.major)
        _check_number("minor", self.minor)
        _check_number("patch", self.patch)
        object.__setattr__(
            self,
            "prerelease",
            _check_identifiers("prerelease", self.prerelease, PRERELEASE_IDENTIFIER_PATTERN),
        )
        object.__setattr__(
            self, "build", _check_identifiers("build", self.build, BUILD_IDENTIFIER_PATTERN)
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a semantic version string into a Version object.

        Args:
            version_string: A string following semantic versioning format
                (MAJOR.MINOR.PATCH[-prerelease][+build])

        Returns:
            A Version object with parsed components

        Raises:
            MalformedVersionError: If the string does not follow semantic versioning
            InvalidVersionError: If a numeric part cannot be converted to an int
            TypeError: If version_string is not a string

        Examples:
            >>> Version.parse("1.0.0-alpha.1")
            Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

            >>> str(Version.parse("2.0.0-rc.1+build.456"))
            '2.0.0-rc.1+build.456'
        """
        if not isinstance(version_string, str):
            raise TypeError(
                f"The string representation is required, got {type(version_string).__name__}"
            )

        if not SEMVER_PATTERN.fullmatch(version_string):
            logger.debug("Rejected version string %r", version_string)
            raise MalformedVersionError(version_string)

        # Only the first "+" is meaningful; everything after it is build metadata
        remainder, plus, build_part = version_string.partition("+")
        core, dash, prerelease_part = remainder.partition("-")

        try:
            major, minor, patch = (int(number) for number in core.split("."))
        except ValueError as e:
            raise InvalidVersionError(
                version_string, f'The string "{version_string}" has an unparsable version number.'
            ) from e

        return cls(
            major,
            minor,
            patch,
            tuple(prerelease_part.split(".")) if dash else (),
            tuple(build_part.split(".")) if plus else (),
        )

    of = parse

    @staticmethod
    def compare(left: Version, right: Version) -> Ordering:
        """Compare two versions by SemVer precedence.

        Returns:
            Ordering.GREATER, Ordering.EQUAL or Ordering.LESSER, describing
            left relative to right
        """
        for attr in ("major", "minor", "patch"):
            result = _order(getattr(left, attr), getattr(right, attr))
            if result is not Ordering.EQUAL:
                return result

        # Build metadata is ignored
        return _compare_prerelease(left.prerelease, right.prerelease)

    def compare_to(self, other: Version) -> Ordering:
        """Compare this version against another by precedence."""
        _require_version(other)
        return Version.compare(self, other)

    def is_equal_to(self, other: Version) -> bool:
        return self.compare_to(other) is Ordering.EQUAL

    def is_greater_than(self, other: Version) -> bool:
        return self.compare_to(other) is Ordering.GREATER

    def is_less_than(self, other: Version) -> bool:
        return self.compare_to(other) is Ordering.LESSER

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) is Ordering.LESSER

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) is not Ordering.LESSER

    @property
    def is_stable(self) -> bool:
        """Return True for a public release: major above zero, no pre-release."""
        return self.major > 0 and not self.prerelease

    @property
    def is_prerelease(self) -> bool:
        """Return True if the major version is zero or pre-release identifiers are present.

        This is not the negation of is_stable; 0.1.0 is both a pre-release
        and unstable, and so is 1.0.0-rc.1.
        """
        return self.major == 0 or bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # Derived values. Increments follow SemVer items 6-8: lower fields reset
    # and both metadata lists are cleared.

    def increment_major(self, amount: int = 1) -> Version:
        return Version(self.major + amount, 0, 0)

    def increment_minor(self, amount: int = 1) -> Version:
        return Version(self.major, self.minor + amount, 0)

    def increment_patch(self, amount: int = 1) -> Version:
        return Version(self.major, self.minor, self.patch + amount)

    def set_major(self, number: int) -> Version:
        return dataclasses.replace(self, major=number)

    def set_minor(self, number: int) -> Version:
        return dataclasses.replace(self, minor=number)

    def set_patch(self, number: int) -> Version:
        return dataclasses.replace(self, patch=number)

    def set_prerelease(self, *identifiers: str) -> Version:
        """Return a copy with the given pre-release identifiers.

        Examples:
            >>> str(Version(1, 0, 0).set_prerelease("rc", "1"))
            '1.0.0-rc.1'
        """
        return dataclasses.replace(self, prerelease=identifiers)

    def set_build(self, *identifiers: str) -> Version:
        return dataclasses.replace(self, build=identifiers)

    def clear_prerelease(self) -> Version:
        return dataclasses.replace(self, prerelease=())

    def clear_build(self) -> Version:
        return dataclasses.replace(self, build=())


def _require_version(version: object) -> None:
    if not isinstance(version, Version):
        raise TypeError(f"A Version is required, got {type(version).__name__}")


# The default version number (0.0.0)
DEFAULT = Version(0, 0, 0)

# The version of the Semantic Versioning specification implemented here
SPEC = Version(2, 0, 0)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Module-level alias of Version.parse.

    Examples:
        >>> parse_version("1.2.3").minor
        2
    """
    return Version.parse(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


VersionLike = Union[str, Version]
