# SPDX-License-Identifier: MIT
"""Unit tests for the constraint shortcut aliases."""

import pytest

from semver_constraints import (
    And,
    EqualTo,
    GreaterThan,
    GreaterThanOrEqualTo,
    InvalidVersionError,
    LessThan,
    LessThanOrEqualTo,
    NotEqualTo,
    Or,
    PreRelease,
    Stable,
    Version,
    shortcuts as c,
)


class TestAliases:
    """Each alias builds the matching constraint."""

    @pytest.mark.parametrize(
        "alias,constraint_type",
        [
            (c.eq, EqualTo),
            (c.ne, NotEqualTo),
            (c.gt, GreaterThan),
            (c.gte, GreaterThanOrEqualTo),
            (c.lt, LessThan),
            (c.lte, LessThanOrEqualTo),
        ],
    )
    def test_comparison_aliases(self, alias, constraint_type):
        """Test aliases accept strings and Version objects alike."""
        from_string = alias("1.2.3")
        from_version = alias(Version(1, 2, 3))
        assert isinstance(from_string, constraint_type)
        assert from_string == from_version

    def test_invalid_string(self):
        """Test aliases propagate parse errors."""
        with pytest.raises(InvalidVersionError):
            c.gte("1.2")

    def test_predicate_aliases(self):
        assert isinstance(c.stable(), Stable)
        assert isinstance(c.pre(), PreRelease)

    def test_composite_aliases(self):
        """Test and_/or_ build composites holding the given children."""
        both = c.and_(c.stable(), c.gte("1.0.0"))
        either = c.or_(c.pre())
        assert isinstance(both, And)
        assert isinstance(either, Or)
        assert both.constraints == frozenset({Stable(), GreaterThanOrEqualTo("1.0.0")})
        assert len(either) == 1


class TestComposition:
    """End-to-end composition through the aliases."""

    def test_range_or_exact(self):
        """Test a range combined with an exact version."""
        constraint = c.or_(c.and_(c.gte("1.0.0"), c.lt("2.0.0")), c.eq("9.9.9"))
        assert constraint.apply("1.5.0") is True
        assert constraint.apply("2.0.0") is False
        assert constraint.apply("9.9.9") is True

    def test_stable_in_range(self):
        """Test excluding pre-releases from a range."""
        constraint = c.and_(c.gte("1.0.0"), c.lte("1.9.9"), c.stable())
        assert constraint.apply("1.4.0") is True
        assert constraint.apply("1.4.0-rc.1") is False

    def test_exclusion(self):
        """Test excluding a single version from a range."""
        constraint = c.and_(c.gt("1.0.0"), c.lt("2.0.0"), c.ne("1.3.0"))
        assert constraint.apply("1.2.0") is True
        assert constraint.apply("1.3.0+build") is False

    def test_fluent_growth(self):
        """Test adding children to an alias-built composite."""
        constraint = c.or_(c.eq("1.0.0")).add(c.eq("2.0.0"))
        assert constraint.apply("2.0.0") is True
