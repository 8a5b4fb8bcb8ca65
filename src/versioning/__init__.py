"""Version range parsing and classification."""

from .range import VersionRange, VersionRangeParseError, is_open_ended, parse_version_range

__all__ = [
    "VersionRange",
    "VersionRangeParseError",
    "is_open_ended",
    "parse_version_range",
]
