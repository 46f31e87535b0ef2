# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_TABLE = "proper-version"

PARSE_MODES = ("strict", "tolerant")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.proper-version]`` table.

    Attributes:
        project_dir: Directory searched for pyproject.toml
        mode: Default parse mode, "strict" or "tolerant"
        json_output: Whether ``parse`` emits JSON by default
    """

    project_dir: Path
    mode: str = "strict"
    json_output: bool = False

    @property
    def tolerant(self) -> bool:
        return self.mode == "tolerant"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        A missing file gives the default configuration.

        Raises:
            ConfigError: If the file is invalid or holds unknown values
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        mode = tool.get("mode", "strict")
        if mode not in PARSE_MODES:
            raise ConfigError(
                f"Invalid mode '{mode}' in [tool.{TOOL_TABLE}], expected one of: "
                + ", ".join(PARSE_MODES)
            )

        json_output = tool.get("json", False)
        if not isinstance(json_output, bool):
            raise ConfigError(f"'json' in [tool.{TOOL_TABLE}] must be a boolean")

        return cls(project_dir=project_dir, mode=mode, json_output=json_output)


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to the current directory)

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return CLIConfig.from_pyproject(project_dir)
