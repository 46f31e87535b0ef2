# SPDX-License-Identifier: MIT
"""Version ordering and equality following SemVer 2.0.0 precedence rules.

Precedence is decided by major, minor and patch, then pre-release identifiers.
Build metadata is ignored in ordering but takes part in equality, so two
versions can share a position in the order without being equal.

``None`` stands for an absent version. :func:`compare` places it before every
version, while the relational helpers (and the ``<``/``>`` operators on
:class:`~proper_version.semver.SemVer`) return False whenever either side is
``None``, the way lifted comparisons on nullable values behave.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Union

from .identifiers import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import SemVer

VersionLike = Union[str, "SemVer"]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_identifier(left: str, right: str) -> int:
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    # Numeric identifiers have lower precedence than alphanumeric ones
    if left_numeric != right_numeric:
        return -1 if left_numeric else 1
    if left_numeric and len(left) != len(right):
        # Numeric identifiers carry no leading zeros, so the longer one is larger
        return -1 if len(left) < len(right) else 1
    # Ordinal comparison; identifiers are ASCII only, and equal-length digit
    # runs order the same as their integer values
    if left == right:
        return 0
    return -1 if left < right else 1


def _compare_prerelease(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    A release (no identifiers) sorts after any pre-release of the same core
    version. Otherwise identifiers are compared pairwise and, when one list is
    a prefix of the other, the shorter list sorts first.
    """
    if not left or not right:
        return _sign(len(right) - len(left))

    for left_ident, right_ident in zip(left, right):
        diff = _compare_identifier(left_ident, right_ident)
        if diff != 0:
            return diff

    return _sign(len(left) - len(right))


def compare(left: Optional[SemVer], right: Optional[SemVer]) -> int:
    """Compare two versions by precedence.

    Args:
        left: First version, or None
        right: Second version, or None

    Returns:
        -1 if left sorts before right, 0 if they share precedence, 1 otherwise.
        None sorts before every version and compares equal to None.

    Examples:
        >>> compare(SemVer(1, 0, 0, "alpha"), SemVer(1, 0, 0))
        -1
        >>> compare(None, SemVer(0, 0, 0))
        -1
        >>> compare(SemVer(1, 0, 0, build_metadata="a"), SemVer(1, 0, 0, build_metadata="b"))
        0
    """
    if left is right:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1

    for attr in ("major", "minor", "patch"):
        diff = _sign(getattr(left, attr) - getattr(right, attr))
        if diff != 0:
            return diff

    # Build metadata is ignored
    return _compare_prerelease(left.prerelease_identifiers, right.prerelease_identifiers)


def equals(left: Optional[SemVer], right: Optional[SemVer]) -> bool:
    """Return True if both versions are structurally identical.

    Unlike :func:`compare`, build metadata is taken into account.
    """
    if left is None or right is None:
        return left is right
    return (
        left.major == right.major
        and left.minor == right.minor
        and left.patch == right.patch
        and left.prerelease == right.prerelease
        and left.build_metadata == right.build_metadata
    )


def less_than(left: Optional[SemVer], right: Optional[SemVer]) -> bool:
    """Lifted ``<``: False if either side is None."""
    return left is not None and right is not None and compare(left, right) < 0


def less_equal(left: Optional[SemVer], right: Optional[SemVer]) -> bool:
    """Lifted ``<=``: False if either side is None."""
    return left is not None and right is not None and compare(left, right) <= 0


def greater_than(left: Optional[SemVer], right: Optional[SemVer]) -> bool:
    """Lifted ``>``: False if either side is None."""
    return left is not None and right is not None and compare(left, right) > 0


def greater_equal(left: Optional[SemVer], right: Optional[SemVer]) -> bool:
    """Lifted ``>=``: False if either side is None."""
    return left is not None and right is not None and compare(left, right) >= 0


def _coerce(version: Optional[VersionLike]) -> Optional[SemVer]:
    if isinstance(version, str):
        # Deferred to keep semver -> compare free of a cycle through the parser
        from .parser import parse_version

        return parse_version(version)
    return version


def compare_versions(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> int:
    """Compare two versions given as strings or SemVer objects.

    Strings are parsed strictly.

    Raises:
        VersionFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build", "1.0.0")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def version_key(version: Optional[VersionLike]) -> tuple:
    """Return a sort key that orders versions the same way as :func:`compare`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    if v is None:
        return (0,)

    # A release sorts after every pre-release of the same core version
    if not v.prerelease_identifiers:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, len(ident), ident) if is_numeric_identifier(ident) else (1, 0, ident)
            for ident in v.prerelease_identifiers
        )
        prerelease_key = (0, parts)

    return (1, v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[Optional[VersionLike]], reverse: bool = False) -> list:
    """Sort versions by precedence, keeping the original items.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)
