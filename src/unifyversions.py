"""unifyversions - centralize NuGet package versions in PackageVersions.props

Scans a source tree for project files, rewrites every PackageReference and
DotNetCliToolReference version to a $(PackageVersion_*) property reference,
and prints which properties PackageVersions.props is missing or no longer
needs.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, set_level
from args import parse_args
from cli_config import apply_config_defaults, find_config_file, load_config
from msbuild.models import PropsFileError
from msbuild.props import sort_properties
from msbuild.reconcile import reconcile
from msbuild.rewrite import rewrite_projects
from msbuild.scan import scan_projects
from report import export_csv, export_json, render_report


def validate_inputs(args):
    """Checks the positional arguments before anything is read or written.

    Every failure is fatal and has its own exit code.

    Args:
        args (Namespace): Parsed arguments.
    """
    if not os.path.isdir(args.ROOT_DIR):
        logging.error("Root directory doesn't exist: %s", args.ROOT_DIR)
        sys.exit(ExitCodes.ROOT_NOT_FOUND.value)

    if not os.path.isfile(args.PROPS_FILE):
        logging.error("%s is not found: %s", Constants.PROPS_FILE_NAME, args.PROPS_FILE)
        sys.exit(ExitCodes.PROPS_NOT_FOUND.value)

    if os.path.basename(args.PROPS_FILE).lower() != Constants.PROPS_FILE_NAME.lower():
        logging.error("Expected a file named %s: %s", Constants.PROPS_FILE_NAME, args.PROPS_FILE)
        sys.exit(ExitCodes.PROPS_NAME_MISMATCH.value)


def _output_format(args):
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT.lower()
    if args.OUTPUT.lower().endswith(".csv"):
        return "csv"
    return "json"


def export_result(args, result, scan):
    """Writes the optional machine-readable report selected by --output."""
    try:
        if _output_format(args) == "csv":
            export_csv(result, args.OUTPUT)
        else:
            export_json(result, args.OUTPUT, scan=scan)
    except OSError as e:
        logging.error("Report couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    config = load_config(find_config_file(args.CONFIG))
    apply_config_defaults(args, config)
    set_level(args.LOG_LEVEL)

    validate_inputs(args)
    logging.debug("Arguments parsed: %s", vars(args))

    # COLLECT: every project is parsed before any file is modified
    scan = scan_projects(args.ROOT_DIR)

    # RECONCILE
    try:
        result = reconcile(scan.packages, args.PROPS_FILE, check_collisions=args.CHECK_COLLISIONS)
    except PropsFileError as e:
        logging.error("Couldn't read %s: %s", Constants.PROPS_FILE_NAME, e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    # REWRITE
    rewrite_projects(scan.projects)
    if args.SORT_PROPS:
        sort_properties(args.PROPS_FILE)

    # OUTPUT
    render_report(result, sys.stdout, scan=scan)
    if getattr(args, "OUTPUT", None):
        export_result(args, result, scan)

    logging.info("Completed.")

    has_warnings = bool(scan.warnings or scan.parse_errors or result.collisions)
    if has_warnings and args.ERROR_ON_WARNINGS:
        logging.error("Warnings present, exiting with non-zero status code.")
        sys.exit(ExitCodes.EXIT_WARNINGS.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
