"""
Command-line argument parsing for i18n-merge.

Two commands are available: ``extract`` runs the extraction and merge pass,
``init`` writes a configuration inferred from an existing workspace file.
"""

import argparse
from pathlib import Path
from typing import Literal, NamedTuple

from ..config.manager import DEFAULT_CONFIG_FILE
from ..utils.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    command: Literal["extract", "init"]
    config_file: Path
    output_path: str | None
    verbose: bool
    workspace: Path
    project: str | None


class DefaultPaths:
    """Default paths for i18n-merge."""

    CONFIG_FILE: Path = DEFAULT_CONFIG_FILE
    WORKSPACE_FILE: Path = Path("angular.json")


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser()
    except (OSError, ValueError, RuntimeError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    return config_file


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for i18n-merge.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="i18n-merge",
        description="Extract translatable strings and merge them into per-locale JSON catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  i18n-merge extract
    Extract and merge using i18n-merge.yml

  i18n-merge extract --config-file config/i18n.yml --verbose
    Use a custom config file and show debug output

  i18n-merge init --workspace angular.json --project app
    Write i18n-merge.yml inferred from an existing workspace
""",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    _ = common.add_argument(
        "--config-file",
        type=str,
        default=str(DefaultPaths.CONFIG_FILE),
        help="Path to the configuration file (default: %(default)s)",
        metavar="PATH",
    )
    _ = common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    extract = subparsers.add_parser(
        "extract",
        parents=[common],
        help="Run the extractor and merge its output into all target catalogs",
    )
    _ = extract.add_argument(
        "--output-path",
        type=str,
        default=None,
        help="Directory of the source and target catalogs (overrides the config file)",
        metavar="DIR",
    )

    init = subparsers.add_parser(
        "init",
        parents=[common],
        help="Infer a configuration from a workspace file",
    )
    _ = init.add_argument(
        "--workspace",
        type=Path,
        default=DefaultPaths.WORKSPACE_FILE,
        help="Workspace file to inspect (default: %(default)s)",
        metavar="PATH",
    )
    _ = init.add_argument(
        "--project",
        type=str,
        default=None,
        help="Project in the workspace (default: the first one)",
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated values

    Raises:
        SystemExit: If argument parsing fails or --help is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    command: Literal["extract", "init"] = getattr(parsed, "command")
    config_file_str: str = getattr(parsed, "config_file")
    try:
        config_file = validate_config_file_path(config_file_str)
    except PathValidationError as e:
        parser.error(str(e))

    return ParsedArgs(
        command=command,
        config_file=config_file,
        output_path=getattr(parsed, "output_path", None),
        verbose=getattr(parsed, "verbose", False),
        workspace=getattr(parsed, "workspace", DefaultPaths.WORKSPACE_FILE),
        project=getattr(parsed, "project", None),
    )
