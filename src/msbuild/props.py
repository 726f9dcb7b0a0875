"""Read and tidy the centralized PackageVersions.props file."""

from __future__ import annotations

import logging
from typing import List

from constants import Constants
from msbuild.models import ProjectParseError, PropsFileError
from msbuild.project import XmlDocument, local_name, parse_document

logger = logging.getLogger(__name__)


def load_props(props_path: str) -> XmlDocument:
    """Parse the props file.

    Raises:
        PropsFileError: The file is missing, unreadable or not well-formed.
    """
    try:
        return parse_document(props_path)
    except ProjectParseError as e:
        raise PropsFileError(props_path, e.message) from e
    except OSError as e:
        raise PropsFileError(props_path, str(e)) from e


def _property_groups(document: XmlDocument):
    # only groups in the MSBuild namespace hold version properties
    if document.namespace != Constants.MSBUILD_NAMESPACE:
        return []
    return document.root.findall(Constants.PROPERTY_GROUP)


def version_properties(document: XmlDocument) -> List[str]:
    """Names of PackageVersion_* properties, in document order, without duplicates."""
    names: List[str] = []
    for group in _property_groups(document):
        for child in group:
            if not isinstance(child.tag, str):
                continue  # comment or processing instruction
            name = local_name(child.tag)
            if name.startswith(Constants.PROPERTY_PREFIX) and name not in names:
                names.append(name)
    return names


def read_version_properties(props_path: str) -> List[str]:
    return version_properties(load_props(props_path))


def sort_property_group(group) -> bool:
    """Sort the element children of one PropertyGroup by name.

    Comments stay ahead of the elements in their original order, and the
    whitespace between children keeps its position so indentation is intact.

    Returns:
        True when the order changed.
    """
    children = list(group)
    if len(children) < 2:
        return False
    comments = [c for c in children if not isinstance(c.tag, str)]
    elements = [c for c in children if isinstance(c.tag, str)]
    ordered = comments + sorted(elements, key=lambda c: local_name(c.tag).upper())
    if ordered == children:
        return False

    tails = [c.tail for c in children]
    for child in children:
        group.remove(child)
    for child, tail in zip(ordered, tails):
        child.tail = tail
        group.append(child)
    return True


def sort_properties(props_path: str) -> bool:
    """Sort every MSBuild PropertyGroup of the props file and save it.

    The file is only written when something moved.

    Returns:
        True when the file was rewritten.
    """
    document = load_props(props_path)
    changed = False
    for group in _property_groups(document):
        changed = sort_property_group(group) or changed
    if changed:
        document.save()
        logger.info("Sorted properties in %s", props_path)
    else:
        logger.debug("Properties in %s already sorted", props_path)
    return changed
