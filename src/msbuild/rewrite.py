"""Point project package references at the centralized version properties."""

from __future__ import annotations

import logging
from typing import Iterable, List

from msbuild.models import InvalidReference, RewriteResult, property_reference
from msbuild.project import (
    ProjectDocument,
    get_attribute,
    iter_package_elements,
    load_project,
    serialize_element,
)

logger = logging.getLogger(__name__)


def rewrite_document(document: ProjectDocument) -> RewriteResult:
    """Replace version attribute values in memory; does not save.

    An element is skipped when its id is missing or empty, or when it has no
    version attribute at all. An empty version value is still rewritten.
    The new value depends on the id only.
    """
    result = RewriteResult(path=document.path)
    for element in iter_package_elements(document):
        include = get_attribute(element, "id")
        version = get_attribute(element, "version")
        if not include or not include[1] or version is None:
            result.skipped.append(
                InvalidReference(document.path, serialize_element(element))
            )
            continue
        attr_name, old_value = version
        new_value = property_reference(include[1])
        element.set(attr_name, new_value)
        result.rewritten += 1
        if old_value != new_value:
            result.changed += 1
    return result


def rewrite_project(document: ProjectDocument) -> RewriteResult:
    """Rewrite one project and save it in place when any value changed."""
    result = rewrite_document(document)
    if result.changed:
        document.save()
        result.saved = True
        logger.info("Rewrote %d reference(s) in %s", result.changed, document.path)
    else:
        logger.debug("No changes for %s", document.path)
    for skipped in result.skipped:
        logger.debug("Left untouched in %s: %s", skipped.path, skipped.element)
    return result


def rewrite_project_file(project_path: str) -> RewriteResult:
    """Parse, rewrite and save a single project file."""
    return rewrite_project(load_project(project_path))


def rewrite_projects(documents: Iterable[ProjectDocument]) -> List[RewriteResult]:
    """Rewrite projects one after another.

    There is no rollback: if saving one file fails, the files before it
    stay rewritten and the error propagates.
    """
    return [rewrite_project(document) for document in documents]
