# SPDX-License-Identifier: MIT
"""Exceptions raised while constructing or parsing versions."""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Raised when a version does not follow semantic versioning."""

    def __init__(self, version: Optional[str], message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionRangeError(InvalidVersionError, ValueError):
    """Raised when a major, minor or patch component is negative."""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(None, f"{field.capitalize()} value must be 0 or positive, got {value}")


class IdentifierStructureError(InvalidVersionError, ValueError):
    """Raised when a pre-release or build metadata identifier is malformed.

    Attributes:
        field: Which identifier list failed ("prerelease" or "build_metadata")
        index: Position of the offending identifier within that list
    """

    def __init__(self, field: str, index: int, message: str):
        self.field = field
        self.index = index
        super().__init__(None, f"{field} contains {message} at index {index}")


class VersionFormatError(InvalidVersionError, ValueError):
    """Raised by strict parsing at the first grammar violation.

    Attributes:
        version: The string being parsed
        index: 0-based character offset of the violation
        reason: The violation without the surrounding context
        message: The full diagnostic text
    """

    def __init__(self, version: str, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(version, format_diagnostic(version, index, reason))


class ArgumentNullError(TypeError):
    """Raised when ``None`` is given where a version string is required."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Value cannot be None: {argument}")


def format_diagnostic(version: str, index: int, reason: str) -> str:
    """Build the diagnostic text shared by strict and tolerant parsing."""
    return f"Error parsing version string '{version}' at index {index}: {reason}"
