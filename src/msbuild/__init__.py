"""MSBuild package version unification.

This package provides the version reconciliation pipeline:
- models.py: PackageReference, PackageSet, property name derivation, results
- project.py: XML document load/save and reference element lookup
- scan.py: collecting package references from .csproj files
- props.py: reading and sorting PackageVersions.props
- reconcile.py: add/remove lists and collision detection
- rewrite.py: rewriting version attributes to property references
"""

from .models import (  # noqa: F401
    PackageReference,
    PackageSet,
    ProjectParseError,
    PropsFileError,
    UnifyVersionsError,
    property_name,
    property_reference,
)
from .scan import scan_projects  # noqa: F401
from .reconcile import reconcile, find_collisions  # noqa: F401
from .rewrite import rewrite_projects, rewrite_project_file  # noqa: F401
from .props import read_version_properties, sort_properties  # noqa: F401

__all__ = [
    "PackageReference",
    "PackageSet",
    "ProjectParseError",
    "PropsFileError",
    "UnifyVersionsError",
    "property_name",
    "property_reference",
    "scan_projects",
    "reconcile",
    "find_collisions",
    "rewrite_projects",
    "rewrite_project_file",
    "read_version_properties",
    "sort_properties",
]
