"""Diff collected package references against PackageVersions.props."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from msbuild.models import PackageSet, ReconcileResult, sort_key
from msbuild.props import read_version_properties

logger = logging.getLogger(__name__)


def packages_to_add(packages: PackageSet) -> List[Tuple[str, str]]:
    """Properties to declare for references still carrying a literal version.

    Sorted case-insensitively by (id, version); the sort is stable, so
    entries equal under that ordering keep their encounter order.

    Returns:
        (property name, version) pairs
    """
    pending = [p for p in packages if not p.references_property]
    return [(p.property_name, p.version) for p in sorted(pending, key=sort_key)]


def properties_to_remove(packages: PackageSet, existing: Iterable[str]) -> List[str]:
    """Existing PackageVersion_* names no collected package maps to.

    Names are compared ignoring case, as MSBuild resolves properties.
    """
    wanted = {name.upper() for name in packages.property_names()}
    return [name for name in existing if name.upper() not in wanted]


def find_collisions(packages: PackageSet) -> Dict[str, List[str]]:
    """Property names reached from more than one distinct package id.

    Ids differing only in case are one package; 'Foo.Bar' vs 'Foo_Bar' is a
    collision.
    """
    by_name: Dict[str, Dict[str, str]] = {}
    for package in packages:
        ids = by_name.setdefault(package.property_name, {})
        ids.setdefault(package.id.upper(), package.id)
    return {
        name: sorted(ids.values(), key=str.upper)
        for name, ids in sorted(by_name.items())
        if len(ids) > 1
    }


def reconcile(packages: PackageSet, props_path: str, check_collisions: bool = False) -> ReconcileResult:
    """Build the add/remove lists for the props file.

    Raises:
        PropsFileError: props_path cannot be read or parsed.
    """
    existing = read_version_properties(props_path)
    logger.debug("%s declares %d version properties", props_path, len(existing))

    result = ReconcileResult(
        to_add=packages_to_add(packages),
        to_remove=properties_to_remove(packages, existing),
    )
    if check_collisions:
        result.collisions = find_collisions(packages)
        for name, ids in result.collisions.items():
            logger.warning("Property %s is shared by packages: %s", name, ", ".join(ids))
    return result
