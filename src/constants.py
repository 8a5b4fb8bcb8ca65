"""Constants used in the project."""

import json
import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    PARSE_ERROR = 2
    LINT_FAILED = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    METADATA_FILE = "metadata.json"
    CONFIG_FILES = [".metadata-json-lint.yml", ".metadata-json-lint.yaml"]
    CONFIG_SECTION = "metadata_json_lint"
    ENV_LOG_LEVEL = "METADATA_JSON_LINT_LOG_LEVEL"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    DEFAULT_LOG_LEVEL = "WARNING"

    # From: https://docs.puppetlabs.com/puppet/latest/reference/modules_publishing.html#write-a-metadatajson-file
    REQUIRED_FIELDS = ["name", "version", "author", "license", "summary", "source", "dependencies"]
    DEPRECATED_FIELDS = ["types", "checksum"]

    # From: https://forge.puppetlabs.com/razorsedge/snmp/3.3.1/scores
    SUMMARY_MAX_LENGTH = 144

    PROPRIETARY_LICENSE = "proprietary"
    SPDX_LIST_URL = "http://spdx.org/licenses/"

    DEFAULT_FAIL_ON_WARNINGS = True
    DEFAULT_STRICT_LICENSE = True
    DEFAULT_STRICT_DEPENDENCIES = False


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the raw config mapping from an explicit path or the default locations.

    JSON is used for paths ending in ``.json``; everything else goes through
    ``yaml.safe_load``. Returns an empty dict when no file is found.

    Raises:
        OSError: If an explicit path cannot be read.
        ValueError: If the file content is not valid YAML/JSON or not a mapping.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    if path is None:
        path = next((p for p in Constants.CONFIG_FILES if os.path.isfile(p)), None)
        if path is None:
            return {}
    logger.debug("Loading configuration from %s", path)

    with open(path, "r", encoding="utf-8") as fh:
        try:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"{path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: configuration must be a mapping")
    return data
