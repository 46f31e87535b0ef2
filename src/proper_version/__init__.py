# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 values with strict and tolerant parsing.

This package provides an immutable version type, a parser that either fails
fast or recovers with a best guess and a diagnostic, and precedence ordering
following the SemVer 2.0.0 specification.

Example:
    >>> from proper_version import SemVer, parse_version, try_parse_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> try_parse_version("14.6beta9").version
    SemVer(major=14, minor=6, patch=0, prerelease_identifiers=('beta9',), build_metadata_identifiers=())
    >>>
    >>> SemVer(1, 0, 0, "rc.1") < SemVer(1, 0, 0)
    True
"""

__version__ = "0.1.0"

from .errors import (
    ArgumentNullError,
    IdentifierStructureError,
    InvalidVersionError,
    VersionFormatError,
    VersionRangeError,
)
from .identifiers import (
    has_leading_zero,
    is_identifier_char,
    is_numeric_identifier,
    is_valid_identifier,
    split_identifiers,
)
from .semver import SemVer
from .parser import (
    ParseResult,
    is_valid_semver,
    parse_version,
    try_parse_version,
)
from .compare import (
    compare,
    compare_versions,
    equals,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    sort_versions,
    version_key,
)

__all__ = [
    # Version value
    "SemVer",
    # Parsing
    "ParseResult",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    # Comparison
    "compare",
    "compare_versions",
    "equals",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "version_key",
    "sort_versions",
    # Identifier predicates
    "is_identifier_char",
    "is_valid_identifier",
    "is_numeric_identifier",
    "has_leading_zero",
    "split_identifiers",
    # Errors
    "InvalidVersionError",
    "VersionRangeError",
    "IdentifierStructureError",
    "VersionFormatError",
    "ArgumentNullError",
]
