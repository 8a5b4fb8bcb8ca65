"""Version range parsing and upper-bound classification.

Dependency ``version_requirement`` strings use the Puppet range grammar, which
is the npm grammar plus optional whitespace between an operator and its
version (``>= 1.0.0 < 2.0.0``). Expressions are normalized and handed to
``semantic_version.NpmSpec``; the resulting clause tree is then folded into a
single ``[begin, end]`` interval where a union keeps the widest bounds and an
intersection the narrowest.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import semantic_version
from semantic_version.base import AllOf, Always, AnyOf, Never, Range

MIN_VERSION = semantic_version.Version("0.0.0")

# (begin, exclude_begin, end, exclude_end); end None means no upper limit.
_Bounds = Tuple[semantic_version.Version, bool, Optional[semantic_version.Version], bool]

_OPERATOR_GAP = re.compile(r"(<=|>=|<|>|=|\^|~)\s+")


class VersionRangeParseError(ValueError):
    """Raised when a version requirement is not a valid range expression."""


@dataclass(frozen=True)
class VersionRange:
    """Interval covered by a version requirement.

    ``end`` is None when the range has no upper limit.
    """
    expression: str
    begin: semantic_version.Version
    end: Optional[semantic_version.Version]
    exclude_begin: bool = False
    exclude_end: bool = False
    empty: bool = False

    @property
    def unbounded(self) -> bool:
        """True when any future version satisfies the range."""
        return not self.empty and self.end is None


def normalize_expression(expression: str) -> str:
    """Collapse whitespace and join operators to their versions."""
    collapsed = " ".join(expression.split())
    return _OPERATOR_GAP.sub(r"\1", collapsed)


def parse_version_range(expression: Any) -> VersionRange:
    """Parse a version requirement into a VersionRange.

    Raises:
        VersionRangeParseError: If the expression cannot be parsed.
    """
    if not isinstance(expression, str):
        raise VersionRangeParseError(
            f"version requirement must be a string, got {type(expression).__name__}"
        )
    normalized = normalize_expression(expression)
    try:
        spec = semantic_version.NpmSpec(normalized)
    except ValueError as exc:
        raise VersionRangeParseError(f"Unable to parse '{expression}' as a version range: {exc}") from exc

    bounds = _bounds(spec.clause)
    if bounds is None:
        return VersionRange(expression, MIN_VERSION, MIN_VERSION, exclude_end=True, empty=True)
    begin, exclude_begin, end, exclude_end = bounds
    return VersionRange(expression, begin, end, exclude_begin, exclude_end)


def is_open_ended(expression: Any) -> bool:
    """Return True when the requirement has no upper version limit."""
    return parse_version_range(expression).unbounded


def _bounds(clause) -> Optional[_Bounds]:
    """Fold a semantic_version clause into interval bounds; None when empty."""
    if isinstance(clause, Always):
        return MIN_VERSION, False, None, False
    if isinstance(clause, Never):
        return None
    if isinstance(clause, Range):
        return _range_bounds(clause)
    if isinstance(clause, AllOf):
        return _intersect([_bounds(c) for c in clause.clauses])
    if isinstance(clause, AnyOf):
        return _union([_bounds(c) for c in clause.clauses])
    raise VersionRangeParseError(f"Unsupported range clause: {clause!r}")


def _range_bounds(clause: Range) -> _Bounds:
    target = clause.target
    op = clause.operator
    if op == Range.OP_EQ:
        return target, False, target, False
    if op == Range.OP_GT:
        return target, True, None, False
    if op == Range.OP_GTE:
        return target, False, None, False
    if op == Range.OP_LT:
        return MIN_VERSION, False, target, True
    if op == Range.OP_LTE:
        return MIN_VERSION, False, target, False
    # != only removes a single point
    return MIN_VERSION, False, None, False


def _intersect(parts) -> Optional[_Bounds]:
    if not parts or any(p is None for p in parts):
        return None
    begin, exclude_begin, end, exclude_end = parts[0]
    for b, xb, e, xe in parts[1:]:
        if b > begin:
            begin, exclude_begin = b, xb
        elif b == begin:
            exclude_begin = exclude_begin or xb
        if e is not None:
            if end is None or e < end:
                end, exclude_end = e, xe
            elif e == end:
                exclude_end = exclude_end or xe
    if end is not None and (begin > end or (begin == end and (exclude_begin or exclude_end))):
        return None
    return begin, exclude_begin, end, exclude_end


def _union(parts) -> Optional[_Bounds]:
    parts = [p for p in parts if p is not None]
    if not parts:
        return None
    begin, exclude_begin, end, exclude_end = parts[0]
    for b, xb, e, xe in parts[1:]:
        if b < begin:
            begin, exclude_begin = b, xb
        elif b == begin:
            exclude_begin = exclude_begin and xb
        if end is None:
            continue
        if e is None or e > end:
            end, exclude_end = e, xe
        elif e == end:
            exclude_end = exclude_end and xe
    return begin, exclude_begin, end, exclude_end
