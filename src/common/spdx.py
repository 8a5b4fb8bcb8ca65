"""SPDX license identifier lookups backed by the spdx-license-list registry."""

from __future__ import annotations

from typing import Any

from spdx_license_list import LICENSES


def is_spdx_license(identifier: Any) -> bool:
    """Return True when identifier is an exact SPDX license identifier."""
    return isinstance(identifier, str) and identifier in LICENSES
