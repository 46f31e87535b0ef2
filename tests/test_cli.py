# SPDX-License-Identifier: MIT
"""Tests for the proper-version command line interface."""

from __future__ import annotations

import json
import warnings
from pathlib import Path

from click.testing import CliRunner

from proper_version.cli.main import cli


class TestParseCommand:
    """Tests for proper-version parse."""

    def test_parse_valid(self, cli_runner: CliRunner, empty_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_project), "parse", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3-rc.1+build.5"

    def test_parse_invalid_strict(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that strict mode is the default and fails on invalid input."""
        result = cli_runner.invoke(cli, ["-C", str(empty_project), "parse", "01.0.0"])

        assert result.exit_code == 1
        assert "at index 1: MAJOR version contains leading zero" in result.output

    def test_parse_tolerant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--tolerant", "14.6beta9"])

        assert result.exit_code == 0
        assert "14.6.0-beta9" in result.output
        assert "Expected PATCH version, found 'b'" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--tolerant", "--json", "1.2.3-alpha.1+b"])

        assert result.exit_code == 0
        data = json.loads(result.output.strip())
        assert data == {
            "input": "1.2.3-alpha.1+b",
            "version": "1.2.3-alpha.1+b",
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": ["alpha", "1"],
            "build_metadata": ["b"],
            "valid": True,
            "error": None,
        }

    def test_parse_json_best_guess(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--tolerant", "--json", "1.2"])

        assert result.exit_code == 0
        data = json.loads(result.output.strip())
        assert data["version"] == "1.2.0"
        assert data["valid"] is False
        assert "Expected PATCH version, found end of string" in data["error"]

    def test_parse_json_long_major(self, cli_runner: CliRunner) -> None:
        major = "1" * 5000
        result = cli_runner.invoke(cli, ["parse", "--strict", "--json", f"{major}.2.3"])

        assert result.exit_code == 0
        data = json.loads(result.output.strip())
        assert data["version"] == f"{major}.2.3"
        assert data["major"] == major
        assert data["minor"] == 2

    def test_parse_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse"])

        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for proper-version validate."""

    def test_all_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "2.1.0-rc.1"])

        assert result.exit_code == 0
        assert "valid: 1.0.0" in result.output
        assert "valid: 2.1.0-rc.1" in result.output

    def test_reports_every_invalid_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "01.0.0", "1.0"])

        assert result.exit_code == 1
        assert "'01.0.0' at index 1" in result.output
        assert "'1.0' at index 3" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "-q", "1.0.0"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_ignores_configuration(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project("[tool.proper-version\n")

        result = cli_runner.invoke(cli, ["-C", str(project), "validate", "1.0.0", "1.0"])

        assert result.exit_code == 1
        assert "Invalid TOML syntax" not in result.output
        assert "valid: 1.0.0" in result.output
        assert "'1.0' at index 3" in result.output


class TestCompareCommand:
    """Tests for proper-version compare."""

    def test_less_than(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--strict", "1.0.0-rc.1", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-rc.1 < 1.0.0"

    def test_build_metadata_equal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--strict", "1.0.0+a", "1.0.0+b"])

        assert result.output.strip() == "1.0.0+a = 1.0.0+b"

    def test_greater_than(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--strict", "0.0.0-beta-20", "0.0.0-beta-109"])

        assert result.output.strip() == "0.0.0-beta-20 > 0.0.0-beta-109"

    def test_invalid_strict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--strict", "1.2", "1.2.0"])

        assert result.exit_code == 1
        assert "Error parsing version string '1.2'" in result.output

    def test_tolerant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--tolerant", "1.2", "1.2.0"])

        assert result.exit_code == 0
        assert "1.2.0 = 1.2.0" in result.output


class TestSortCommand:
    """Tests for proper-version sort."""

    def test_sort_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "--strict", "2.0.0", "1.0.0", "1.0.0-alpha", "1.0.0-alpha.1"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0.0-alpha", "1.0.0-alpha.1", "1.0.0", "2.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--strict", "-r", "1.0.0", "1.0.0-rc.1", "1.1.0"])

        assert result.output.splitlines() == ["1.1.0", "1.0.0", "1.0.0-rc.1"]

    def test_sort_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "--strict"], input="0.10.0\n\n0.9.0\n0.10.0-rc.1\n"
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "0.10.0-rc.1", "0.10.0"]

    def test_sort_stdin_without_deprecation_warnings(self, cli_runner: CliRunner) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            result = cli_runner.invoke(cli, ["sort", "--strict"], input="1.0.0\n0.1.0\n")

        assert result.exception is None
        assert result.output.splitlines() == ["0.1.0", "1.0.0"]

    def test_sort_invalid_strict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--strict", "1.0.0", "v2"])

        assert result.exit_code == 1
        assert "Expected MAJOR version number, found 'v'" in result.output

    def test_sort_tolerant_keeps_inputs(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--tolerant", "1.10", "1.9.1", "1.2"])

        assert result.exit_code == 0
        stdout = [line for line in result.output.splitlines() if not line.startswith("Warning")]
        assert stdout == ["1.2", "1.9.1", "1.10"]


class TestConfiguration:
    """Tests for [tool.proper-version] configuration."""

    def test_tolerant_mode_from_config(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project('[tool.proper-version]\nmode = "tolerant"\n')

        result = cli_runner.invoke(cli, ["-C", str(project), "parse", "14.6beta9"])

        assert result.exit_code == 0
        assert "14.6.0-beta9" in result.output

    def test_flag_overrides_config(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project('[tool.proper-version]\nmode = "tolerant"\n')

        result = cli_runner.invoke(cli, ["-C", str(project), "parse", "--strict", "14.6beta9"])

        assert result.exit_code == 1

    def test_json_from_config(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project("[tool.proper-version]\njson = true\n")

        result = cli_runner.invoke(cli, ["-C", str(project), "parse", "1.0.0"])

        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True

    def test_invalid_mode(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project('[tool.proper-version]\nmode = "lenient"\n')

        result = cli_runner.invoke(cli, ["-C", str(project), "parse", "1.0.0"])

        assert result.exit_code == 1
        assert "Invalid mode 'lenient'" in result.output

    def test_invalid_toml(self, cli_runner: CliRunner, make_project) -> None:
        project = make_project("[tool.proper-version\n")

        result = cli_runner.invoke(cli, ["-C", str(project), "sort", "1.0.0"])

        assert result.exit_code == 1
        assert "Invalid TOML syntax" in result.output
