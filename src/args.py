"""Argument parsing functionality for metadata-json-lint."""

import argparse

from constants import Constants


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="metadata-json-lint",
        usage="%(prog)s [options] [metadata.json]",
        description="Validate a Puppet module's metadata.json file",
        add_help=True,
    )

    parser.add_argument("METADATA",
                        help=f"Path to the metadata file (default: {Constants.METADATA_FILE})",
                        nargs="?",
                        type=str,
                        default=None)

    parser.add_argument("--strict-dependencies",
                        dest="STRICT_DEPENDENCIES",
                        help="Fail on open-ended module version dependencies",
                        action=argparse.BooleanOptionalAction,
                        default=None)
    parser.add_argument("--strict-license",
                        dest="STRICT_LICENSE",
                        help="Fail when the license is not an SPDX identifier",
                        action=argparse.BooleanOptionalAction,
                        default=None)
    parser.add_argument("--fail-on-warnings",
                        dest="FAIL_ON_WARNINGS",
                        help="Exit non-zero when the error state is set",
                        action=argparse.BooleanOptionalAction,
                        default=None)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Write a JSON report to this path",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not print diagnostics to the console.",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
