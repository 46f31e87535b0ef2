# SPDX-License-Identifier: MIT
"""Validate version strings against the SemVer 2.0.0 grammar."""

from __future__ import annotations

import click

from ...parser import try_parse_version
from ..main import echo_error, echo_success


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report invalid versions.",
)
def validate(versions: tuple[str, ...], quiet: bool) -> None:
    """Check that every version follows semantic versioning.

    Every version is checked, and the exit status is 1 if any is invalid.

    \b
    Examples:
        proper-version validate 1.0.0 2.1.0-rc.1
        proper-version validate -q 01.0.0
    """
    invalid = 0
    for text in versions:
        result = try_parse_version(text)
        if result.success:
            if not quiet:
                echo_success(f"valid: {result.version}")
        else:
            invalid += 1
            echo_error(result.error)

    if invalid:
        raise SystemExit(1)
