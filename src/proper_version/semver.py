# SPDX-License-Identifier: MIT
"""The immutable semantic version value.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .compare import compare, equals
from .errors import IdentifierStructureError, VersionRangeError
from .identifiers import format_number, has_leading_zero, is_valid_identifier, split_identifiers

Identifiers = Union[str, Iterable[str], None]


def _normalize_identifiers(identifiers: Identifiers) -> tuple:
    if identifiers is None:
        return ()
    if isinstance(identifiers, str):
        return split_identifiers(identifiers)
    return tuple(identifiers)


def _check_identifiers(field: str, identifiers: tuple, prerelease: bool) -> None:
    for index, ident in enumerate(identifiers):
        if ident is None:
            raise IdentifierStructureError(field, index, "null element")
        if not isinstance(ident, str):
            raise TypeError(f"{field} identifiers must be strings, got {type(ident).__name__}")
        if not ident:
            raise IdentifierStructureError(field, index, "empty identifier")
        if not is_valid_identifier(ident):
            raise IdentifierStructureError(field, index, f"invalid identifier ('{ident}')")
        if prerelease and has_leading_zero(ident):
            raise IdentifierStructureError(
                field, index, "numeric identifier with leading zero(es)"
            )


@dataclass(frozen=True, slots=True, eq=False, init=False, repr=False)
class SemVer:
    """Represents a semantic version.

    Construction validates every component and fails without producing a
    partial instance. Identifier lists may be given as sequences or as a
    single dot-separated string.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Pre-release identifiers (e.g. ("alpha", "1"))
        build_metadata_identifiers: Build metadata identifiers (e.g. ("build", "456"))

    Examples:
        >>> str(SemVer(1, 2, 3, "alpha.1", ["build", "456"]))
        '1.2.3-alpha.1+build.456'
        >>> SemVer(0, 0, 0, "0..0")
        Traceback (most recent call last):
        ...
        proper_version.errors.IdentifierStructureError: prerelease contains empty identifier at index 1
    """

    major: int
    minor: int
    patch: int
    prerelease_identifiers: tuple[str, ...]
    build_metadata_identifiers: tuple[str, ...]

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: Identifiers = None,
        build_metadata: Identifiers = None,
    ) -> None:
        for field, value in (("major", major), ("minor", minor), ("patch", patch)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field} must be an int, got {type(value).__name__}")
            if value < 0:
                raise VersionRangeError(field, value)

        prerelease_identifiers = _normalize_identifiers(prerelease)
        build_metadata_identifiers = _normalize_identifiers(build_metadata)
        _check_identifiers("prerelease", prerelease_identifiers, prerelease=True)
        _check_identifiers("build_metadata", build_metadata_identifiers, prerelease=False)

        self._assign(major, minor, patch, prerelease_identifiers, build_metadata_identifiers)

    @classmethod
    def _unchecked(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease_identifiers: Iterable[str] = (),
        build_metadata_identifiers: Iterable[str] = (),
    ) -> SemVer:
        """Build an instance from components that are already known to be valid."""
        version = object.__new__(cls)
        version._assign(
            major, minor, patch, tuple(prerelease_identifiers), tuple(build_metadata_identifiers)
        )
        return version

    def _assign(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease_identifiers: tuple,
        build_metadata_identifiers: tuple,
    ) -> None:
        object.__setattr__(self, "major", major)
        object.__setattr__(self, "minor", minor)
        object.__setattr__(self, "patch", patch)
        object.__setattr__(self, "prerelease_identifiers", prerelease_identifiers)
        object.__setattr__(self, "build_metadata_identifiers", build_metadata_identifiers)

    @property
    def prerelease(self) -> str:
        """Pre-release identifiers joined by dots (empty for a release)."""
        return ".".join(self.prerelease_identifiers)

    @property
    def build_metadata(self) -> str:
        """Build metadata identifiers joined by dots."""
        return ".".join(self.build_metadata_identifiers)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(format_number(n) for n in (self.major, self.minor, self.patch))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease_identifiers:
            version += f"-{self.prerelease}"
        if self.build_metadata_identifiers:
            version += f"+{self.build_metadata}"
        return version

    def __repr__(self) -> str:
        return (
            f"SemVer(major={format_number(self.major)}, minor={format_number(self.minor)}, "
            f"patch={format_number(self.patch)}, "
            f"prerelease_identifiers={self.prerelease_identifiers!r}, "
            f"build_metadata_identifiers={self.build_metadata_identifiers!r})"
        )

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, SemVer):
            return NotImplemented
        return equals(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease, self.build_metadata))

    # The relational operators are lifted: comparing against None is always
    # False. Use compare() or version_key() to order None as a value.

    def __lt__(self, other: Optional[SemVer]) -> bool:
        if other is None:
            return False
        if not isinstance(other, SemVer):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Optional[SemVer]) -> bool:
        if other is None:
            return False
        if not isinstance(other, SemVer):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Optional[SemVer]) -> bool:
        if other is None:
            return False
        if not isinstance(other, SemVer):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Optional[SemVer]) -> bool:
        if other is None:
            return False
        if not isinstance(other, SemVer):
            return NotImplemented
        return compare(self, other) >= 0
