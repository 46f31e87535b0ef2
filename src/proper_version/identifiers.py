# SPDX-License-Identifier: MIT
"""Character and identifier predicates shared by construction and parsing.

Identifiers are restricted to ASCII alphanumerics and hyphens ``[0-9A-Za-z-]``.
"""

from __future__ import annotations

from typing import Iterable, Optional


def is_identifier_char(ch: Optional[str]) -> bool:
    """Return True if ``ch`` may appear in a pre-release or build identifier."""
    if ch is None or len(ch) != 1:
        return False
    return ("0" <= ch <= "9") or ("A" <= ch <= "Z") or ("a" <= ch <= "z") or ch == "-"


def is_digit(ch: Optional[str]) -> bool:
    """Return True if ``ch`` is a single ASCII digit."""
    return ch is not None and len(ch) == 1 and "0" <= ch <= "9"


def is_valid_identifier(ident: str) -> bool:
    """Check that every character of ``ident`` is an identifier character.

    Emptiness is not checked here.
    """
    return all(is_identifier_char(ch) for ch in ident)


def is_numeric_identifier(ident: str) -> bool:
    """Return True if ``ident`` consists only of ASCII digits.

    ``str.isdigit`` is not used as it accepts non-ASCII digits.
    """
    return all(is_digit(ch) for ch in ident)


def has_leading_zero(ident: str) -> bool:
    """Return True for numeric identifiers such as ``"01"`` (but not ``"0"``)."""
    return len(ident) > 1 and ident[0] == "0" and is_numeric_identifier(ident)


def split_identifiers(text: Optional[str]) -> tuple[str, ...]:
    """Split a dot-separated identifier string.

    Both ``None`` and the empty string give an empty tuple. Empty identifiers
    produced by stray dots are kept so they can be rejected by validation.

    Examples:
        >>> split_identifiers("alpha.1")
        ('alpha', '1')
        >>> split_identifiers("")
        ()
        >>> split_identifiers("0..0")
        ('0', '', '0')
    """
    if not text:
        return ()
    return tuple(text.split("."))


# Below the smallest limit sys.set_int_max_str_digits() accepts (640)
_DIGIT_CHUNK = 500


def digits_value(digits: Iterable[str]) -> int:
    """Convert a run of ASCII digits to an int of any length.

    ``int()`` refuses strings past ``sys.get_int_max_str_digits()``, so the
    run is converted in chunks.
    """
    digits = "".join(digits)
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_number(value: int) -> str:
    """Render a non-negative int in decimal, past the int-to-str digit limit too."""
    base = 10 ** _DIGIT_CHUNK
    if value < base:
        return str(value)
    chunks = []
    while value >= base:
        value, chunk = divmod(value, base)
        chunks.append(str(chunk).zfill(_DIGIT_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))
