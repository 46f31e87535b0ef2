# SPDX-License-Identifier: MIT
"""CLI entry point for the proper-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..errors import InvalidVersionError
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def use_tolerant(self, strict: Optional[bool]) -> bool:
        """Use the --strict/--tolerant flag if given, otherwise the configured mode."""
        if strict is not None:
            return not strict
        try:
            return self.load_config().tolerant
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


strict_option = click.option(
    "--strict/--tolerant",
    "strict",
    default=None,
    help="Fail on the first violation, or recover with a best guess (default from config).",
)


@click.group()
@click.version_option(package_name="proper-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing and ordering tool.

    \b
    Examples:
        proper-version parse 1.2.3-rc.1+build.5
        proper-version parse --tolerant 14.6beta9
        proper-version validate 1.0.0 01.0.0
        proper-version compare 1.0.0-rc.1 1.0.0
        proper-version sort 2.0.0 1.0.0 1.0.0-alpha
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import compare, parse, sort, validate

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
