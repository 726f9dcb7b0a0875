"""Data models for package references and reconciliation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from constants import Constants


class UnifyVersionsError(Exception):
    """Base error for project and props file handling."""


class ProjectParseError(UnifyVersionsError):
    """A project file could not be parsed as XML."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class PropsFileError(UnifyVersionsError):
    """The centralized PackageVersions.props file could not be read."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def property_name(package_id: str) -> str:
    """Derive the MSBuild property name holding the version of a package.

    Only '.' is replaced, so 'Foo.Bar' and 'Foo_Bar' share a property.
    Other characters are passed through untouched.
    """
    return Constants.PROPERTY_PREFIX + package_id.replace(".", "_")


def property_reference(package_id: str) -> str:
    """Return the $(...) expression referencing the package's property."""
    return f"$({property_name(package_id)})"


def _fold(value: str) -> str:
    # Ordinal ignore-case: compare on upper-cased text
    return value.upper()


@dataclass(frozen=True, eq=False)
class PackageReference:
    """A (package id, version) pair declared by a project file."""
    id: str
    version: str

    @property
    def key(self) -> Tuple[str, str]:
        return (_fold(self.id), _fold(self.version))

    @property
    def property_name(self) -> str:
        return property_name(self.id)

    @property
    def property_reference(self) -> str:
        return property_reference(self.id)

    @property
    def references_property(self) -> bool:
        """True when the version already points at the centralized property."""
        return self.version == self.property_reference

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageReference):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


def sort_key(package: PackageReference) -> Tuple[str, str]:
    """Case-insensitive (id, version) ordering key."""
    return package.key


def compare_packages(left: PackageReference, right: PackageReference) -> int:
    """Three-way comparison matching sort_key; 0 when equal ignoring case."""
    a, b = sort_key(left), sort_key(right)
    return (a > b) - (a < b)


class PackageSet:
    """Insertion-ordered set of PackageReference, deduplicated ignoring case."""

    def __init__(self, packages: Optional[Iterable[PackageReference]] = None):
        self._items: Dict[Tuple[str, str], PackageReference] = {}
        for package in packages or ():
            self.add(package)

    def add(self, package: PackageReference) -> bool:
        """Insert a reference; returns False when an equal one is present."""
        if package.key in self._items:
            return False
        self._items[package.key] = package
        return True

    def property_names(self) -> set:
        return {package.property_name for package in self._items.values()}

    def __contains__(self, package: object) -> bool:
        return isinstance(package, PackageReference) and package.key in self._items

    def __iter__(self) -> Iterator[PackageReference]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PackageSet({list(self._items.values())!r})"


@dataclass
class InvalidReference:
    """A reference element skipped because its id or version is missing."""
    path: str
    element: str  # serialized markup of the offending element


@dataclass
class ParseFailure:
    """A project file that could not be parsed and was skipped."""
    path: str
    message: str


@dataclass
class ScanResult:
    """Output of the collector: packages plus the documents they came from."""
    packages: PackageSet
    projects: list = field(default_factory=list)  # List[ProjectDocument]
    warnings: List[InvalidReference] = field(default_factory=list)
    parse_errors: List[ParseFailure] = field(default_factory=list)

    @property
    def project_paths(self) -> List[str]:
        return [project.path for project in self.projects]


@dataclass
class ReconcileResult:
    """Properties to add to and remove from PackageVersions.props."""
    to_add: List[Tuple[str, str]] = field(default_factory=list)  # (property name, version)
    to_remove: List[str] = field(default_factory=list)
    collisions: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class RewriteResult:
    """Outcome of rewriting one project file."""
    path: str
    rewritten: int = 0
    changed: int = 0
    skipped: List[InvalidReference] = field(default_factory=list)
    saved: bool = False
