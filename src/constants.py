"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    EXIT_WARNINGS = 3
    ROOT_NOT_FOUND = 4
    PROPS_NOT_FOUND = 5
    PROPS_NAME_MISMATCH = 6


class ReferenceKinds(Enum):
    """Project file elements that declare a package dependency.

    Args:
        Enum (string): Element names scanned inside ItemGroup.
    """

    PACKAGE = "PackageReference"
    TOOL = "DotNetCliToolReference"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PROJECT_FILE_PATTERN = "*.csproj"
    PROPS_FILE_NAME = "PackageVersions.props"
    MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"
    ITEM_GROUP = "ItemGroup"
    PROPERTY_GROUP = "PropertyGroup"
    PROPERTY_PREFIX = "PackageVersion_"
    REFERENCE_ELEMENTS = [
        ReferenceKinds.PACKAGE.value,
        ReferenceKinds.TOOL.value,
    ]
    # Logical attribute -> accepted spellings, first match wins.
    ATTRIBUTE_NAMES = {
        "id": ("Include", "include"),
        "version": ("Version", "version"),
    }
    OUTPUT_FORMATS = ["json", "csv"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "UNIFYVERSIONS_LOG_LEVEL"
    ENV_CONFIG = "UNIFYVERSIONS_CONFIG"
    DEFAULT_CONFIG_FILES = ["unifyversions.yml", "unifyversions.yaml"]
