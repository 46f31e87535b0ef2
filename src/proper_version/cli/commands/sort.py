# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from ...compare import version_key
from ...errors import VersionFormatError
from ...parser import parse_version, try_parse_version
from ..main import Context, echo_error, echo_info, echo_warning, pass_context, strict_option


def _read_stdin() -> list[str]:
    with click.open_file("-") as stream:
        return [line.strip() for line in stream if line.strip()]


@click.command()
@click.argument("versions", nargs=-1)
@strict_option
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from highest to lowest precedence.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    strict: Optional[bool],
    reverse: bool,
) -> None:
    """Sort versions from lowest to highest precedence.

    Versions are taken from the arguments or, if none are given, one per
    line from standard input. The inputs are printed unchanged. In tolerant
    mode invalid inputs are ordered by their best guess.

    \b
    Examples:
        proper-version sort 2.0.0 1.0.0 1.0.0-alpha
        git tag | proper-version sort --tolerant --reverse
    """
    tolerant = ctx.use_tolerant(strict)
    items = list(versions) or _read_stdin()

    keyed = []
    for text in items:
        if tolerant:
            result = try_parse_version(text)
            if not result.success:
                echo_warning(result.error)
            version = result.version
        else:
            try:
                version = parse_version(text)
            except VersionFormatError as e:
                echo_error(str(e))
                raise SystemExit(1)
        keyed.append((version_key(version), text))

    for _, text in sorted(keyed, key=lambda item: item[0], reverse=reverse):
        echo_info(text)
