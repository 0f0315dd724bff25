"""
Tests for command-line argument parsing.

This module tests the argparse setup for the extract and init commands and
the validation of the configuration file path.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from i18n_merge.cli.args import (
    DefaultPaths,
    PathValidationError,
    parse_arguments,
    validate_config_file_path,
)


class TestParseArguments:
    """Test cases for parse_arguments."""

    def test_extract_defaults(self) -> None:
        """The extract command uses the default configuration file."""
        args = parse_arguments(["extract"])

        assert args.command == "extract"
        assert args.config_file == DefaultPaths.CONFIG_FILE
        assert args.output_path is None
        assert args.verbose is False

    def test_extract_options(self) -> None:
        """Config file, output path and verbosity are parsed."""
        args = parse_arguments(
            ["extract", "--config-file", "conf/i18n.yml", "--output-path", "src/i18n", "--verbose"]
        )

        assert args.config_file == Path("conf/i18n.yml")
        assert args.output_path == "src/i18n"
        assert args.verbose is True

    def test_init_options(self) -> None:
        """The init command takes a workspace file and a project."""
        args = parse_arguments(["init", "--workspace", "web/angular.json", "--project", "app"])

        assert args.command == "init"
        assert args.workspace == Path("web/angular.json")
        assert args.project == "app"
        assert args.output_path is None

    def test_init_defaults(self) -> None:
        """The init command defaults to angular.json and the first project."""
        args = parse_arguments(["init"])

        assert args.workspace == DefaultPaths.WORKSPACE_FILE
        assert args.project is None

    def test_command_required(self) -> None:
        """A command must be given."""
        with pytest.raises(SystemExit):
            _ = parse_arguments([])

    def test_config_file_is_directory(self, tmp_path: Path) -> None:
        """A directory cannot be used as configuration file."""
        with pytest.raises(SystemExit):
            _ = parse_arguments(["extract", "--config-file", str(tmp_path)])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the program name and exits."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_arguments(["--version"])

        assert exc_info.value.code == 0
        assert "i18n-merge" in capsys.readouterr().out


class TestValidateConfigFilePath:
    """Test cases for validate_config_file_path."""

    def test_missing_file_is_accepted(self, tmp_path: Path) -> None:
        """The file does not need to exist yet."""
        assert validate_config_file_path(str(tmp_path / "new.yml")) == tmp_path / "new.yml"

    def test_directory_rejected(self, tmp_path: Path) -> None:
        """An existing directory is rejected."""
        with pytest.raises(PathValidationError, match="not a file"):
            _ = validate_config_file_path(str(tmp_path))
