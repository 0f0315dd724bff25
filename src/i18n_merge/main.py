"""
Main entry point for i18n-merge.

This module sets up logging, loads the configuration, runs the requested
command and turns failures into an exit code.
"""

import asyncio
import logging
import sys

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .cli.args import ParsedArgs, parse_arguments
from .config.manager import ConfigManager
from .merge.reconcile import MergeSummary
from .orchestrator import run_extraction_merge
from .setup.inference import infer_setup, load_workspace, write_inferred_config
from .utils.exceptions import I18nMergeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # basicConfig is a no-op once handlers exist, the level still has to follow --verbose
    logging.getLogger().setLevel(level)


def render_summary(summaries: list[MergeSummary], console: Console | None = None) -> None:
    """Print a table with the per-locale merge counts."""
    console = console or Console()
    table = Table(title="Merged translation catalogs")
    table.add_column("Locale", style="cyan")
    table.add_column("New", justify="right", style="yellow")
    table.add_column("Kept", justify="right", style="green")
    table.add_column("Removed", justify="right", style="red")
    table.add_column("Total", justify="right")

    for summary in summaries:
        table.add_row(
            summary.locale,
            str(summary.added),
            str(summary.kept),
            str(summary.removed),
            str(summary.total),
        )
    console.print(table)


def run_extract(args: ParsedArgs) -> int:
    """
    Run the extraction and merge pass.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    config = ConfigManager.load_config(args.config_file)
    overrides: dict[str, object] = {}
    if args.output_path is not None:
        overrides["output_path"] = args.output_path
    if args.verbose:
        overrides["verbose"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    setup_logging(config.verbose)
    result = asyncio.run(run_extraction_merge(config))
    if not result.success:
        logger.error(result.error)
        return 1

    if result.locales:
        render_summary(result.locales)
    return 0


def run_init(args: ParsedArgs) -> int:
    """
    Write a configuration inferred from the workspace file.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    workspace = load_workspace(args.workspace)
    root = args.workspace.parent
    setup = infer_setup(
        workspace,
        project=args.project,
        exists=lambda p: (root / p).exists(),
    )
    _ = write_inferred_config(setup, args.config_file)
    logger.info(f"Wrote configuration for project {setup.project} to {args.config_file}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the command-line interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        if args.command == "init":
            return run_init(args)
        return run_extract(args)

    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid configuration in {args.config_file}: {e}")
        return 1
    except (I18nMergeError, yaml.YAMLError, OSError) as e:
        logger.error(f"Error during {args.command}: {e}")
        if args.verbose:
            logger.exception("Full traceback:")
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = ["cli", "main"]
