"""Tests for version range parsing and open-ended classification."""

import pytest
import semantic_version

from versioning.range import (
    VersionRangeParseError,
    is_open_ended,
    normalize_expression,
    parse_version_range,
)


@pytest.mark.parametrize(
    "expr",
    [
        ">= 1.0.0",
        ">=1.0.0",
        ">1.0.0",
        ">= 1.0.0-rc1",
        "",
        "*",
        "1.x || >= 3.0.0",
    ],
)
def test_open_ended_ranges(expr):
    assert is_open_ended(expr) is True


@pytest.mark.parametrize(
    "expr",
    [
        ">= 1.0.0 < 2.0.0",
        ">=1.0.0 <2.0.0",
        "<2.0.0",
        "<= 2.0.0",
        "1.2.3",
        "1.x",
        "1.2.x",
        "^1.2.3",
        "~1.2.3",
        "1.0.0 - 2.0.0",
        "1.x || 2.x",
    ],
)
def test_bounded_ranges(expr):
    assert is_open_ended(expr) is False


def test_intersection_takes_lowest_upper_bound():
    rng = parse_version_range(">= 1.0.0 < 2.0.0")
    assert rng.begin == semantic_version.Version("1.0.0")
    assert rng.exclude_begin is False
    assert rng.end.major == 2 and rng.end.minor == 0
    assert rng.exclude_end is True
    assert rng.unbounded is False


def test_union_takes_highest_upper_bound():
    rng = parse_version_range("1.x || 2.x")
    assert rng.begin == semantic_version.Version("1.0.0")
    assert rng.end.major == 3


def test_exact_version_is_a_single_point():
    rng = parse_version_range("1.2.3")
    assert rng.begin == rng.end == semantic_version.Version("1.2.3")
    assert not rng.exclude_begin and not rng.exclude_end


def test_exclusive_lower_bound():
    rng = parse_version_range("> 1.0.0")
    assert rng.begin == semantic_version.Version("1.0.0")
    assert rng.exclude_begin is True
    assert rng.end is None


def test_disjoint_intersection_is_empty_and_not_open_ended():
    rng = parse_version_range(">= 3.0.0 < 2.0.0")
    assert rng.empty is True
    assert rng.unbounded is False


def test_expression_is_preserved():
    assert parse_version_range(">= 1.0.0").expression == ">= 1.0.0"


def test_normalize_expression_joins_operators():
    assert normalize_expression("  >=  1.0.0   <  2.0.0 ") == ">=1.0.0 <2.0.0"
    assert normalize_expression("1.0.0 - 2.0.0") == "1.0.0 - 2.0.0"


@pytest.mark.parametrize("expr", ["not-a-version", ">= banana", "1.0.0 <"])
def test_invalid_expressions_raise(expr):
    with pytest.raises(VersionRangeParseError):
        parse_version_range(expr)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        is_open_ended("not-a-version")


def test_non_string_requirement_raises():
    with pytest.raises(VersionRangeParseError) as exc:
        parse_version_range(42)
    assert "must be a string" in str(exc.value)
