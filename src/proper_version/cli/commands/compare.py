# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from ...compare import compare as compare_precedence
from ...errors import VersionFormatError
from ...parser import parse_version, try_parse_version
from ...semver import SemVer
from ..main import Context, echo_error, echo_info, echo_warning, pass_context, strict_option

_OPERATORS = {-1: "<", 0: "=", 1: ">"}


def _load(text: str, tolerant: bool) -> SemVer:
    if not tolerant:
        return parse_version(text)
    result = try_parse_version(text)
    if not result.success:
        echo_warning(result.error)
    return result.version


@click.command()
@click.argument("left")
@click.argument("right")
@strict_option
@pass_context
def compare(ctx: Context, left: str, right: str, strict: Optional[bool]) -> None:
    """Print how LEFT and RIGHT are ordered.

    Build metadata does not affect precedence, so "1.0.0+a = 1.0.0+b".

    \b
    Examples:
        proper-version compare 1.0.0-rc.1 1.0.0
        proper-version compare --tolerant 1.2 1.2.0
    """
    tolerant = ctx.use_tolerant(strict)
    try:
        left_version = _load(left, tolerant)
        right_version = _load(right, tolerant)
    except VersionFormatError as e:
        echo_error(str(e))
        raise SystemExit(1)

    result = compare_precedence(left_version, right_version)
    echo_info(f"{left_version} {_OPERATORS[result]} {right_version}")
