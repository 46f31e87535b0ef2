# SPDX-License-Identifier: MIT
"""Parse version strings and print their canonical form."""

from __future__ import annotations

import json
from typing import Optional, Union

import click

from ...errors import VersionFormatError
from ...identifiers import format_number
from ...parser import ParseResult, parse_version, try_parse_version
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_warning, pass_context, strict_option


def _json_number(value: int) -> Union[int, str]:
    # json renders ints through str(), which stops at sys.get_int_max_str_digits()
    text = format_number(value)
    return value if len(text) <= 640 else text


def _to_json(text: str, result: ParseResult) -> str:
    version = result.version
    return json.dumps(
        {
            "input": text,
            "version": str(version),
            "major": _json_number(version.major),
            "minor": _json_number(version.minor),
            "patch": _json_number(version.patch),
            "prerelease": list(version.prerelease_identifiers),
            "build_metadata": list(version.build_metadata_identifiers),
            "valid": result.success,
            "error": result.error,
        }
    )


@click.command()
@click.argument("versions", nargs=-1, required=True)
@strict_option
@click.option(
    "--json/--no-json",
    "as_json",
    default=None,
    help="Print one JSON object per version (default from config).",
)
@pass_context
def parse(
    ctx: Context,
    versions: tuple[str, ...],
    strict: Optional[bool],
    as_json: Optional[bool],
) -> None:
    """Parse versions and print their canonical form.

    In strict mode the first invalid version stops the command with exit
    status 1. In tolerant mode each invalid version is reported as a warning
    and its best guess is printed instead.

    \b
    Examples:
        proper-version parse 1.2.3-rc.1+build.5
        proper-version parse --tolerant 004.02.8 14.6beta9
        proper-version parse --json 1.0.0-alpha
    """
    tolerant = ctx.use_tolerant(strict)
    if as_json is None:
        try:
            as_json = ctx.load_config().json_output
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)

    for text in versions:
        if tolerant:
            result = try_parse_version(text)
            if not result.success and not as_json:
                echo_warning(result.error)
        else:
            try:
                result = ParseResult(True, parse_version(text))
            except VersionFormatError as e:
                if as_json:
                    echo_info(json.dumps({"input": text, "valid": False, "error": str(e)}))
                else:
                    echo_error(str(e))
                raise SystemExit(1)

        echo_info(_to_json(text, result) if as_json else str(result.version))
