"""Argument parsing functionality for unifyversions."""

import argparse
from constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Options left unset on the command line stay None so that a config
    file can fill them in (see cli_config.apply_config_defaults).
    """
    parser = argparse.ArgumentParser(
        prog="unifyversions",
        description=(
            "Point PackageReference versions at centralized "
            f"{Constants.PROPS_FILE_NAME} properties and report the properties to add or remove"
        ),
        add_help=True,
    )

    parser.add_argument("ROOT_DIR",
                        help="Root directory to scan recursively for project files",
                        type=str)
    parser.add_argument("PROPS_FILE",
                        help=f"Path to {Constants.PROPS_FILE_NAME}",
                        type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--sort-props",
                        dest="SORT_PROPS",
                        help=f"Sort each PropertyGroup of {Constants.PROPS_FILE_NAME} and write it back.",
                        action="store_true",
                        default=None)
    parser.add_argument("--check-collisions",
                        dest="CHECK_COLLISIONS",
                        help="Report package ids that map to the same property name.",
                        action="store_true",
                        default=None)
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code if warnings are present.",
                        action="store_true",
                        default=None)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
