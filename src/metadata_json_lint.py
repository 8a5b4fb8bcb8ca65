"""metadata-json-lint - Puppet module metadata.json checker

    Raises:
        SystemExit: Always, carrying the process exit code

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from analysis.models import LintResult
from analysis.validator import validate
from args import parse_args
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from lint_config import ConfigError, resolve_options


def abort(message, code):
    """Writes a fatal error to stderr and exits.

    Args:
        message (str): Text printed after the 'Error: ' prefix.
        code (ExitCodes): Exit code for the process.
    """
    print(f"Error: {message}", file=sys.stderr)
    logging.getLogger(__name__).debug("Aborting with %s: %s", code.name, message)
    sys.exit(code.value)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def resolve_metadata_path(path):
    """Return the metadata path to lint, defaulting to ./metadata.json.

    Args:
        path (str): Path given on the command line, or None.

    Returns:
        str: Path to read.
    """
    if path is not None:
        return path
    if os.path.isfile(Constants.METADATA_FILE) and os.access(Constants.METADATA_FILE, os.R_OK):
        return Constants.METADATA_FILE
    abort(f"{Constants.METADATA_FILE} is not readable or does not exist.", ExitCodes.FILE_ERROR)


def load_metadata(path):
    """Reads and parses a metadata file.

    Args:
        path (str): File path of the metadata document.

    Returns:
        dict: Parsed JSON object.
    """
    try:
        with open(path, encoding='utf-8') as file:
            text = file.read()
    except FileNotFoundError as e:
        abort(f"File not found: {e}", ExitCodes.FILE_ERROR)
    except (OSError, UnicodeDecodeError) as e:
        abort(f"Unable to read {path}: {e}", ExitCodes.FILE_ERROR)

    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        abort(f"Unable to parse metadata.json: {e}", ExitCodes.PARSE_ERROR)
    if not isinstance(parsed, dict):
        abort("Unable to parse metadata.json: top-level value must be a JSON object", ExitCodes.PARSE_ERROR)
    return parsed


def print_diagnostics(result: LintResult, stream=None):
    """Prints one line per diagnostic."""
    stream = stream or sys.stdout
    for diagnostic in result.diagnostics:
        print(str(diagnostic), file=stream)


def export_json(result: LintResult, source, path):
    """Exports the lint result to a JSON file.

    Args:
        result (LintResult): Validation outcome.
        source (str): Linted metadata path, recorded in the report.
        path (str): File path to export the JSON.
    """
    data = {"file": source}
    data.update(result.to_dict())
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        abort(f"JSON file couldn't be written to disk: {e}", ExitCodes.FILE_ERROR)


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    try:
        configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    except OSError as e:
        abort(f"Unable to open log file: {e}", ExitCodes.FILE_ERROR)

    try:
        options = resolve_options(args)
    except ConfigError as e:
        abort(str(e), ExitCodes.FILE_ERROR)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )
    logging.info("Options: %s", options)

    metadata_path = resolve_metadata_path(args.METADATA)
    metadata = load_metadata(metadata_path)
    result = validate(metadata, options)

    if not args.QUIET:
        print_diagnostics(result)
    if args.OUTPUT:
        export_json(result, metadata_path, args.OUTPUT)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="failed" if result.failed else "success",
                count=len(result.diagnostics)
            )
        )

    if not result.has_errors:
        sys.exit(ExitCodes.SUCCESS.value)
    if result.failed:
        print(f"Errors found in {metadata_path}", file=sys.stderr)
        sys.exit(ExitCodes.LINT_FAILED.value)
    print(f"Errors found in {metadata_path}")
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
