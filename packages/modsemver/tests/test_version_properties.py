# SPDX-License-Identifier: MIT
"""Property-based tests for module versions.

These tests verify that:
- Constructed versions render, validate and re-parse to an equal value
- compare defines a total order that agrees with numeric ordering
- Bumping resets lower-order fields
- Malformed strings are rejected without raising
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, assume, given, settings, strategies as st

from modsemver import (
    Field,
    InvalidVersionError,
    Version,
    is_valid,
    new,
    parse,
    version_key,
    with_prerelease,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=2**80)

prerelease_segments = st.from_regex(r"[a-zA-Z0-9]{1,8}", fullmatch=True)

prereleases = st.one_of(
    st.just(""),
    st.lists(prerelease_segments, min_size=1, max_size=4).map(".".join),
)


@st.composite
def versions(draw):
    """Generate a valid Version."""
    return new(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        with_prerelease(draw(prereleases)),
    )


# =============================================================================
# Properties
# =============================================================================


@given(versions())
@settings(max_examples=200)
def test_round_trip(v: Version):
    """Parsing the rendering of a version reproduces it."""
    rendered = str(v)
    assert is_valid(rendered)
    assert v.is_valid()

    reparsed = parse(rendered)
    assert reparsed.compare(v) == 0
    assert (reparsed.major, reparsed.minor, reparsed.patch, reparsed.prerelease) == (
        v.major,
        v.minor,
        v.patch,
        v.prerelease,
    )


@given(versions(), versions())
def test_compare_antisymmetric(a: Version, b: Version):
    """Swapping operands negates the result."""
    assert a.compare(b) == -b.compare(a)
    assert a.compare(a) == 0


@given(versions(), versions(), versions())
@settings(suppress_health_check=[HealthCheck.filter_too_much])
def test_compare_transitive(a: Version, b: Version, c: Version):
    """Order is transitive."""
    assume(a.compare(b) <= 0 and b.compare(c) <= 0)
    assert a.compare(c) <= 0


@given(versions(), versions())
def test_compare_matches_key(a: Version, b: Version):
    """compare agrees with the sort key and rich comparison."""
    ka, kb = version_key(a), version_key(b)
    expected = (ka > kb) - (ka < kb)
    assert a.compare(b) == expected
    assert (a < b) == (expected < 0)


@given(versions(), st.sampled_from(list(Field)))
def test_bump_increases(v: Version, field: Field):
    """Bumping yields a greater release with lower fields reset."""
    bumped = v.bump(field)
    assert bumped.compare(v) == 1
    assert bumped.prerelease == ""
    if field is Field.MAJOR:
        assert (bumped.major, bumped.minor, bumped.patch) == (v.major + 1, 0, 0)
    elif field is Field.MINOR:
        assert (bumped.major, bumped.minor, bumped.patch) == (v.major, v.minor + 1, 0)
    else:
        assert (bumped.major, bumped.minor, bumped.patch) == (v.major, v.minor, v.patch + 1)


@given(versions(), st.text(max_size=8))
def test_insert_noise_rejected(v: Version, noise: str):
    """Inserting non-grammar characters after the prefix breaks validity."""
    assume(any(not (ch.isascii() and (ch.isalnum() or ch in ".-")) for ch in noise))
    s = str(v)
    assert is_valid(s[:1] + noise + s[1:]) is False


@given(st.text(max_size=30))
def test_is_valid_agrees_with_parse(s: str):
    """is_valid accepts exactly what parse accepts."""
    if is_valid(s):
        assert str(parse(s)) == s
    else:
        with pytest.raises(InvalidVersionError):
            parse(s)
