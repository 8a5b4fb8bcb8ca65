"""Resolve LintOptions from defaults, the YAML config file and CLI flags.

Precedence, lowest first: built-in defaults, config file, CLI flags. The
config file may hold the switches at the top level or under a
``metadata_json_lint`` section.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Dict, Optional

from analysis.models import LintOptions
from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)

OPTION_NAMES = tuple(f.name for f in fields(LintOptions))


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


def options_from_mapping(data: Dict[str, Any], base: Optional[LintOptions] = None) -> LintOptions:
    """Overlay boolean switches from a config mapping onto base options."""
    base = base or LintOptions()
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{Constants.CONFIG_SECTION}' must be a mapping")

    overrides: Dict[str, bool] = {}
    for key, value in section.items():
        name = str(key).replace("-", "_")
        if name not in OPTION_NAMES:
            logger.debug("Ignoring unknown config key: %s", key)
            continue
        if not isinstance(value, bool):
            raise ConfigError(f"Config option '{key}' must be a boolean")
        overrides[name] = value
    return replace(base, **overrides)


def load_file_options(path: Optional[str] = None) -> LintOptions:
    """Load options from an explicit config path or the default locations.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    try:
        data = _load_yaml_config(path)
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration file: {exc}") from exc
    return options_from_mapping(data)


def resolve_options(args) -> LintOptions:
    """Build LintOptions for a parsed CLI namespace.

    CLI flags left unset (None) keep the value from the config file.
    """
    options = load_file_options(getattr(args, "CONFIG", None))
    cli_overrides = {
        "fail_on_warnings": getattr(args, "FAIL_ON_WARNINGS", None),
        "strict_license": getattr(args, "STRICT_LICENSE", None),
        "strict_dependencies": getattr(args, "STRICT_DEPENDENCIES", None),
    }
    return replace(options, **{k: v for k, v in cli_overrides.items() if v is not None})
