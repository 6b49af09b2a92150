# SPDX-License-Identifier: MIT
"""Composable predicates over semantic versions.

Leaf constraints capture a reference version (or none, for Stable and
PreRelease) and are immutable. Composite constraints (And, Or) hold a set of
child constraints that can keep growing through ``add``.

Example:
    >>> in_range = And(GreaterThanOrEqualTo("1.0.0"), LessThan("2.0.0"))
    >>> in_range.apply("1.5.0")
    True
    >>> (in_range | EqualTo("9.9.9")).apply("9.9.9")
    True

Composites are not synchronized. Adding children while another thread
evaluates the same composite is undefined; build the tree first, then share
it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator

from .semver import Version, VersionLike

logger = logging.getLogger(__name__)


def _coerce(version: VersionLike) -> Version:
    if version is None:
        raise TypeError("The version number to constrain is required.")
    if isinstance(version, Version):
        return version
    if isinstance(version, str):
        return Version.parse(version)
    raise TypeError(f"Expected a Version or a version string, got {type(version).__name__}")


class Constraint(ABC):
    """A predicate over Version objects."""

    @abstractmethod
    def check(self, version: Version) -> bool:
        """Return True if the parsed version satisfies this constraint."""

    def apply(self, version: VersionLike) -> bool:
        """Check a version, parsing it first if given as a string.

        Raises:
            InvalidVersionError: If version is a string that is not a valid
                semantic version
            TypeError: If version is None or of an unsupported type
        """
        return self.check(_coerce(version))

    __call__ = apply

    def filter(self, versions: Iterable[VersionLike]) -> Iterator[Version]:
        """Yield the versions that satisfy this constraint."""
        for version in versions:
            parsed = _coerce(version)
            if self.check(parsed):
                yield parsed

    def __and__(self, other: Constraint) -> And:
        if not isinstance(other, Constraint):
            return NotImplemented
        return And(self, other)

    def __or__(self, other: Constraint) -> Or:
        if not isinstance(other, Constraint):
            return NotImplemented
        return Or(self, other)


@dataclass(frozen=True)
class _Reference(Constraint):
    """Base for constraints that compare against one reference version."""

    version: Version

    symbol: ClassVar[str] = ""

    def __post_init__(self) -> None:
        # Accept "1.2.3" as well as Version(1, 2, 3)
        object.__setattr__(self, "version", _coerce(self.version))

    def __str__(self) -> str:
        return f"{self.symbol}{self.version}"


@dataclass(frozen=True)
class EqualTo(_Reference):
    symbol: ClassVar[str] = "=="

    def check(self, version: Version) -> bool:
        return self.version.is_equal_to(version)


@dataclass(frozen=True)
class NotEqualTo(_Reference):
    symbol: ClassVar[str] = "!="

    def check(self, version: Version) -> bool:
        return not self.version.is_equal_to(version)


@dataclass(frozen=True)
class GreaterThan(_Reference):
    symbol: ClassVar[str] = ">"

    def check(self, version: Version) -> bool:
        return version.is_greater_than(self.version)


@dataclass(frozen=True)
class GreaterThanOrEqualTo(_Reference):
    symbol: ClassVar[str] = ">="

    def check(self, version: Version) -> bool:
        return self.version.is_equal_to(version) or version.is_greater_than(self.version)


@dataclass(frozen=True)
class LessThan(_Reference):
    symbol: ClassVar[str] = "<"

    def check(self, version: Version) -> bool:
        return version.is_less_than(self.version)


@dataclass(frozen=True)
class LessThanOrEqualTo(_Reference):
    symbol: ClassVar[str] = "<="

    def check(self, version: Version) -> bool:
        return self.version.is_equal_to(version) or version.is_less_than(self.version)


@dataclass(frozen=True)
class Stable(Constraint):
    """Matches versions with a non-zero major and no pre-release identifiers."""

    def check(self, version: Version) -> bool:
        return version.is_stable

    def __str__(self) -> str:
        return "stable"


@dataclass(frozen=True)
class PreRelease(Constraint):
    """Matches versions with a zero major or pre-release identifiers."""

    def check(self, version: Version) -> bool:
        return version.is_prerelease

    def __str__(self) -> str:
        return "pre-release"


class Composite(Constraint):
    """A set of child constraints combined with a short-circuit rule.

    Children are evaluated in set order, which is unspecified. The first child
    whose result differs from ``ultimate`` decides the outcome; if none does,
    ``ultimate`` is returned. An empty composite therefore evaluates to
    ``ultimate``.
    """

    ultimate: ClassVar[bool]
    joiner: ClassVar[str]

    def __init__(self, *constraints: Constraint):
        self._constraints: set[Constraint] = set()
        self.add(*constraints)

    def add(self, *constraints: Constraint) -> Composite:
        """Add child constraints and return this composite for chaining."""
        for constraint in constraints:
            if not isinstance(constraint, Constraint):
                raise TypeError(
                    f"The constraint is required, got {type(constraint).__name__}"
                )
            self._constraints.add(constraint)
        return self

    @property
    def constraints(self) -> frozenset[Constraint]:
        """Snapshot of the current child constraints."""
        return frozenset(self._constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def check(self, version: Version) -> bool:
        for constraint in self._constraints:
            if bool(constraint.check(version)) is not self.ultimate:
                logger.debug("%s short-circuited on %s for %s", type(self).__name__, constraint, version)
                return not self.ultimate
        return self.ultimate

    def __str__(self) -> str:
        if not self._constraints:
            return f"{type(self).__name__}()"
        return "(" + self.joiner.join(sorted(str(c) for c in self._constraints)) + ")"

    def __repr__(self) -> str:
        children = ", ".join(sorted(repr(c) for c in self._constraints))
        return f"{type(self).__name__}({children})"


class And(Composite):
    """Satisfied when every child constraint is satisfied."""

    ultimate = True
    joiner = " && "

    def add(self, *constraints: Constraint) -> And:
        super().add(*constraints)
        return self


class Or(Composite):
    """Satisfied when at least one child constraint is satisfied."""

    ultimate = False
    joiner = " || "

    def add(self, *constraints: Constraint) -> Or:
        super().add(*constraints)
        return self
