"""Project scanner: collect PackageReference/DotNetCliToolReference pairs from .csproj files."""
from __future__ import annotations

import logging
import os
from fnmatch import fnmatch
from typing import List

from constants import Constants
from common.logging_utils import log_discovered_files
from msbuild.models import (
    InvalidReference,
    PackageReference,
    PackageSet,
    ParseFailure,
    ProjectParseError,
    ScanResult,
)
from msbuild.project import (
    ProjectDocument,
    get_attribute,
    iter_package_elements,
    load_project,
    serialize_element,
)

logger = logging.getLogger(__name__)


def find_project_files(root_dir: str) -> List[str]:
    """List project files below root_dir, recursively, in sorted order.

    Hidden directories are included and root_dir is used literally, not
    as a glob pattern.

    Args:
        root_dir: Directory to scan

    Returns:
        Sorted list of .csproj paths
    """
    project_files: List[str] = []
    for root, _, files in os.walk(root_dir):
        for name in files:
            if fnmatch(name, Constants.PROJECT_FILE_PATTERN):
                project_files.append(os.path.join(root, name))
    return sorted(project_files)


def collect_references(document: ProjectDocument, packages: PackageSet) -> List[InvalidReference]:
    """Add the valid references of one project to packages.

    Args:
        document: Parsed project file
        packages: Set receiving the references

    Returns:
        The declarations skipped because their id or version is missing or empty
    """
    invalid: List[InvalidReference] = []
    for element in iter_package_elements(document):
        include = get_attribute(element, "id")
        version = get_attribute(element, "version")
        if not include or not include[1] or not version or not version[1]:
            markup = serialize_element(element)
            logger.warning("Invalid package reference in %s: %s", document.path, markup)
            invalid.append(InvalidReference(document.path, markup))
            continue
        packages.add(PackageReference(include[1], version[1]))
    return invalid


def scan_projects(root_dir: str) -> ScanResult:
    """Parse every project file under root_dir and collect its package references.

    Files that are not well-formed XML are recorded in parse_errors and
    left out of the result, so they are never rewritten.

    Args:
        root_dir: Directory to scan recursively.

    Raises:
        FileNotFoundError: root_dir is not an existing directory.

    Returns:
        ScanResult with the deduplicated packages and the parsed documents.
    """
    if not os.path.isdir(root_dir):
        raise FileNotFoundError(root_dir)

    logger.info("Scanning %s for %s files.", root_dir, Constants.PROJECT_FILE_PATTERN)
    project_files = find_project_files(root_dir)
    log_discovered_files(logger, "msbuild", {"project": project_files})

    result = ScanResult(packages=PackageSet())
    for project_path in project_files:
        try:
            document = load_project(project_path)
        except (ProjectParseError, OSError) as e:
            logger.warning("Couldn't parse project file %s: %s", project_path, e)
            result.parse_errors.append(ParseFailure(project_path, str(e)))
            continue
        result.projects.append(document)
        result.warnings.extend(collect_references(document, result.packages))

    logger.info(
        "Found %d distinct package reference(s) in %d project file(s).",
        len(result.packages),
        len(result.projects),
    )
    return result
