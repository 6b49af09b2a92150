# SPDX-License-Identifier: MIT
"""Short constructor aliases for building constraints.

Example:
    >>> from semver_constraints import shortcuts as c
    >>> supported = c.or_(c.and_(c.gte("1.0.0"), c.lt("2.0.0")), c.eq("9.9.9"))
    >>> supported.apply("1.5.0")
    True
    >>> supported.apply("2.0.0")
    False

``and`` and ``or`` are Python keywords, hence the trailing underscores.
"""

from __future__ import annotations

from .constraints import (
    And,
    Constraint,
    EqualTo,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
    NotEqualTo,
    Or,
    PreRelease,
    Stable,
)
from .semver import VersionLike


def and_(*constraints: Constraint) -> And:
    return And(*constraints)


def or_(*constraints: Constraint) -> Or:
    return Or(*constraints)


def eq(version: VersionLike) -> EqualTo:
    return EqualTo(version)


def ne(version: VersionLike) -> NotEqualTo:
    return NotEqualTo(version)


def gt(version: VersionLike) -> GreaterThan:
    return GreaterThan(version)


def gte(version: VersionLike) -> GreaterThanOrEqualTo:
    return GreaterThanOrEqualTo(version)


def lt(version: VersionLike) -> LessThan:
    return LessThan(version)


def lte(version: VersionLike) -> LessThanOrEqualTo:
    return LessThanOrEqualTo(version)


def stable() -> Stable:
    return Stable()


def pre() -> PreRelease:
    return PreRelease()


__all__ = ["and_", "or_", "eq", "ne", "gt", "gte", "lt", "lte", "stable", "pre"]
