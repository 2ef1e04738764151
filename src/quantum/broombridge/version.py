"""Broombridge schema version management."""

from enum import Enum

from .exceptions import InvalidVersionError


class SchemaVersion(str, Enum):
    """Supported Broombridge schema versions."""

    V0_1 = "0.1"
    V0_2 = "0.2"


LATEST_VERSION = SchemaVersion.V0_2

_VERSION_NUMBERS = {
    "0.1": SchemaVersion.V0_1,
    "0.2": SchemaVersion.V0_2,
}


def resolve_version(version: str) -> SchemaVersion:
    """
    Parse a Broombridge version number string.

    The match is exact and case-sensitive; surrounding whitespace is not
    stripped.

    Args:
        version: Version string as found under ``format.version``

    Returns:
        The corresponding schema version

    Raises:
        InvalidVersionError: If the version is not supported
    """
    if not isinstance(version, str) or version not in _VERSION_NUMBERS:
        raise InvalidVersionError(version)
    return _VERSION_NUMBERS[version]
