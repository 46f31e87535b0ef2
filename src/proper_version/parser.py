# SPDX-License-Identifier: MIT
"""Semantic version parsing.

A single left-to-right scan drives two contracts:

- :func:`parse_version` raises :class:`VersionFormatError` at the first
  grammar violation.
- :func:`try_parse_version` never raises for malformed input. It reports the
  first violation as a diagnostic and keeps scanning to build a best-guess
  :class:`SemVer`, which is always a valid version.

Example:
    >>> success, version, error = try_parse_version("14.6beta9")
    >>> str(version)
    '14.6.0-beta9'
    >>> error
    "Error parsing version string '14.6beta9' at index 4: Expected PATCH version, found 'b'"
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .errors import ArgumentNullError, VersionFormatError, format_diagnostic
from .identifiers import digits_value, has_leading_zero, is_digit, is_identifier_char
from .semver import SemVer

logger = logging.getLogger(__name__)

MAJOR, MINOR, PATCH, PRE_RELEASE, BUILD_METADATA = range(5)

PART_NAMES = ("MAJOR", "MINOR", "PATCH", "PRE_RELEASE", "BUILD_METADATA")


class ParseResult(NamedTuple):
    """Outcome of a tolerant parse.

    Attributes:
        success: True if the string followed the grammar
        version: The parsed version, or the best guess when success is False
        error: Diagnostic for the first violation, None on success
    """

    success: bool
    version: SemVer
    error: Optional[str] = None


def _describe(ch: Optional[str]) -> str:
    return f"'{ch}'" if ch is not None else "end of string"


class _Scanner:
    """Scan state for one parse call."""

    def __init__(self, text: str, strict: bool) -> None:
        self.text = text
        self.strict = strict
        self.index = 0
        self.mode = MAJOR
        self.buffer: list[str] = []
        self.numbers = [0, 0, 0]
        self.identifiers: tuple[list[str], list[str]] = ([], [])
        self.error: Optional[str] = None

    def violation(self, reason: str) -> None:
        if self.strict:
            raise VersionFormatError(self.text, self.index, reason)
        if self.error is None:
            self.error = format_diagnostic(self.text, self.index, reason)

    def run(self) -> SemVer:
        text = self.text
        while self.index <= len(text):
            ch = text[self.index] if self.index < len(text) else None
            if self.mode <= PATCH:
                rescan = self._numeric(ch)
            else:
                rescan = False
                self._identifier(ch)
            if not rescan:
                self.index += 1

        pre_release, build_metadata = self.identifiers
        return SemVer._unchecked(*self.numbers, pre_release, build_metadata)

    def _numeric(self, ch: Optional[str]) -> bool:
        """Handle one character in a numeric mode; return True to rescan it."""
        part = PART_NAMES[self.mode]
        if is_digit(ch):
            self.buffer.append(ch)
            if len(self.buffer) == 2 and self.buffer[0] == "0":
                self.violation(f"{part} version contains leading zero")
            return False

        if not self.buffer:
            # "version number" tells an empty part apart from the missing-dot
            # case below, which reports "Expected <NEXT PART> version"
            self.violation(f"Expected {part} version number, found {_describe(ch)}")
        else:
            # Tolerant parsing keeps every digit, leading zeros included
            self.numbers[self.mode] = digits_value(self.buffer)
            self.buffer.clear()

        if ch == "." and self.mode < PATCH:
            self.mode += 1
            return False

        if self.mode < PATCH:
            self.violation(f"Expected {PART_NAMES[self.mode + 1]} version, found {_describe(ch)}")
        elif ch not in ("-", "+", None):
            self.violation(f"Expected PRE_RELEASE or BUILD_METADATA, found {_describe(ch)}")

        if ch == "-" or ch == ".":
            self.mode = PRE_RELEASE
        elif ch == "+":
            self.mode = BUILD_METADATA
        elif ch is not None:
            # Missing separator: treat the character as the start of a pre-release
            self.mode = PRE_RELEASE
            return True
        return False

    def _identifier(self, ch: Optional[str]) -> None:
        part = PART_NAMES[self.mode]
        if is_identifier_char(ch):
            self.buffer.append(ch)
            return

        switches_to_build = ch == "+" and self.mode == PRE_RELEASE
        if not (switches_to_build or ch == "." or ch is None):
            self.violation(f"Unexpected character {_describe(ch)} in {part} identifier")
            return

        if not self.buffer:
            self.violation(f"Expected {part} identifier, found {_describe(ch)}")
        else:
            ident = "".join(self.buffer)
            self.buffer.clear()
            if self.mode == PRE_RELEASE and has_leading_zero(ident):
                self.violation(f"{part} numeric identifier contains leading zero")
                ident = ident.lstrip("0") or "0"
            self.identifiers[self.mode - PRE_RELEASE].append(ident)

        if switches_to_build:
            self.mode = BUILD_METADATA


def _check_text(text: Optional[str]) -> str:
    if text is None:
        raise ArgumentNullError("text")
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, got {type(text).__name__}")
    return text


def parse_version(text: str) -> SemVer:
    """Parse a semantic version string into a SemVer object.

    Args:
        text: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A SemVer object with parsed components

    Raises:
        ArgumentNullError: If text is None
        VersionFormatError: At the first grammar violation, with its index

    Examples:
        >>> parse_version("1.2.3")
        SemVer(major=1, minor=2, patch=3, prerelease_identifiers=(), build_metadata_identifiers=())

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    return _Scanner(_check_text(text), strict=True).run()


def try_parse_version(text: str) -> ParseResult:
    """Parse a version string without raising on malformed input.

    Regardless of success, the returned version is a valid SemVer holding
    the best guess at what the string meant.

    Raises:
        ArgumentNullError: If text is None

    Examples:
        >>> result = try_parse_version("004.02.8--beta008...-..007+00010")
        >>> result.success
        False
        >>> str(result.version)
        '4.2.8--beta008.-.7+00010'
        >>> result.error
        "Error parsing version string '004.02.8--beta008...-..007+00010' at index 1: MAJOR version contains leading zero"
    """
    scanner = _Scanner(_check_text(text), strict=False)
    version = scanner.run()
    if scanner.error is None:
        return ParseResult(True, version)

    logger.debug("Recovered %r as %s: %s", text, version, scanner.error)
    return ParseResult(False, version, scanner.error)


def is_valid_semver(text: object) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(text, str):
        return False
    return try_parse_version(text).success
