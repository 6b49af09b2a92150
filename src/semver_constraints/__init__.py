# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and constraints.

This package provides an immutable Version value following the SemVer 2.0.0
specification, precedence comparison, and composable constraints for
checking versions against requirements.

Example:
    >>> from semver_constraints import Version, shortcuts as c
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>> str(version.increment_minor())
    '1.3.0'
    >>>
    >>> c.and_(c.gte("1.0.0"), c.lt("2.0.0")).apply(version)
    True
"""

import logging

__version__ = "0.1.0"

from .semver import (
    DEFAULT,
    SPEC,
    SEMVER_PATTERN,
    InvalidComponentError,
    InvalidVersionError,
    MalformedVersionError,
    Ordering,
    Version,
    VersionError,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare_versions,
    sort_versions,
    version_key,
)
from .constraints import (
    And,
    Composite,
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
from . import shortcuts

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version values
    "Version",
    "Ordering",
    "DEFAULT",
    "SPEC",
    "SEMVER_PATTERN",
    "parse_version",
    "is_valid_semver",
    # Errors
    "VersionError",
    "InvalidVersionError",
    "MalformedVersionError",
    "InvalidComponentError",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    # Constraints
    "Constraint",
    "Composite",
    "And",
    "Or",
    "EqualTo",
    "NotEqualTo",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "LessThan",
    "LessThanOrEqualTo",
    "Stable",
    "PreRelease",
    "shortcuts",
]
