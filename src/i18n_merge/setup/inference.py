"""
Inference of an i18n-merge configuration from an existing workspace file.

The workspace document follows the ``angular.json`` layout: locales are read
from ``projects.<name>.i18n.locales`` and extraction options from the
``extract-i18n`` entry of ``projects.<name>.architect`` (or ``targets``).

The choice of one file per locale is a heuristic: when several candidate
files are listed, the shortest path wins, since files shipped by third
parties usually live deeper in the tree. Edit the generated configuration
when the guess is wrong.
"""

from __future__ import annotations

import json
import logging
import posixpath
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..config.manager import ConfigManager
from ..config.schema import (
    DEFAULT_NEW_PREFIX,
    DEFAULT_SOURCE_FILE,
    ExtractorConfig,
    I18nMergeConfig,
)
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = "src/locales"
EXTRACT_TARGET = "extract-i18n"


@dataclass(frozen=True)
class TargetFile:
    """Translation file chosen for one locale."""

    locale: str
    file: str


@dataclass(frozen=True)
class InferredSetup:
    """Result of inspecting a workspace for one project."""

    project: str
    output_path: str
    target_files: dict[str, str]
    source_file: str | None = None
    new_prefix: str = DEFAULT_NEW_PREFIX
    command: list[str] = field(default_factory=list)

    def to_config(self) -> I18nMergeConfig:
        """Configuration equivalent to this setup."""
        extractor = (
            ExtractorConfig(name="command", command=list(self.command))
            if self.command
            else ExtractorConfig()
        )
        return I18nMergeConfig(
            output_path=self.output_path,
            source_file=self.source_file or DEFAULT_SOURCE_FILE,
            target_files=dict(self.target_files),
            new_prefix=self.new_prefix,
            extractor=extractor,
        )


def select_target_file(translation: object) -> str | None:
    """
    Pick one file out of the translation entry of a locale.

    Args:
        translation: A path, a list of candidate paths, or nothing

    Returns:
        The single or shortest candidate (first one on ties), or None
    """
    if isinstance(translation, str):
        return translation or None
    if not isinstance(translation, list) or not translation:
        return None

    candidates = [c for c in translation if isinstance(c, str) and c]  # pyright: ignore[reportUnknownVariableType]
    if not candidates:
        return None
    # min() keeps the first of equally short paths
    return min(candidates, key=len)


def get_target_files(i18n: Mapping[str, object] | None) -> list[TargetFile]:
    """
    Resolve one translation file per locale from a project's i18n section.

    Locales are returned in the order the workspace lists them; locales
    without any usable file are skipped.
    """
    locales = (i18n or {}).get("locales") or {}
    if not isinstance(locales, Mapping):
        return []

    files: list[TargetFile] = []
    for locale, entry in locales.items():  # pyright: ignore[reportUnknownVariableType]
        match entry:
            case str():
                file = entry or None
            case Mapping():
                file = select_target_file(entry.get("translation"))  # pyright: ignore[reportUnknownMemberType]
            case _:
                file = None
        if file:
            files.append(TargetFile(locale=str(locale), file=file))  # pyright: ignore[reportUnknownArgumentType]
    return files


def relative_to(base: str, path: str) -> str:
    """POSIX path of ``path`` relative to ``base``."""
    return posixpath.relpath(posixpath.normpath(path), posixpath.normpath(base))


def infer_source_file(
    out_file: str,
    output_path_from_extract_options: str | None,
    output_path_from_target_files: str | None,
    output_path: str,
    exists: Callable[[str], bool],
) -> str:
    """
    Locate an existing source catalog and express it relative to the output path.

    Candidate base directories are tried in priority order; if the file is found
    in none of them, ``out_file`` is returned unchanged.
    """
    bases = [
        output_path_from_extract_options,
        output_path_from_target_files,
        DEFAULT_OUTPUT_PATH,
        ".",
    ]
    for base in bases:
        if base and exists(posixpath.normpath(f"{base}/{out_file}")):
            return relative_to(output_path, f"{base}/{out_file}")
    return out_file


def _project_targets(project_config: Mapping[str, object]) -> Mapping[str, object]:
    targets = project_config.get("architect") or project_config.get("targets") or {}
    return targets if isinstance(targets, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]


def _as_mapping(value: object) -> Mapping[str, object]:
    return value if isinstance(value, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]


def infer_setup(
    workspace: Mapping[str, object],
    project: str | None = None,
    exists: Callable[[str], bool] = lambda p: Path(p).exists(),
) -> InferredSetup:
    """
    Derive output directory, target files and source filename for a project.

    Args:
        workspace: Parsed workspace document
        project: Project name; defaults to the first project in the workspace
        exists: Predicate telling whether a workspace-relative path exists

    Returns:
        The inferred setup

    Raises:
        ConfigurationError: If the workspace has no such project
    """
    projects = _as_mapping(workspace.get("projects"))
    project_name = project or next(iter(projects), None)
    if project_name is None or project_name not in projects:
        raise ConfigurationError(f"Project {project_name} not found!")
    project_config = _as_mapping(projects[project_name])

    files = get_target_files(_as_mapping(project_config.get("i18n")))
    if not files:
        logger.warning(
            "Could not infer translation target files, please set up i18n locales "
            + "in the workspace and run init again"
        )
    else:
        logger.info(
            "Found target translation files: "
            + json.dumps([{"locale": f.locale, "file": f.file} for f in files])
        )

    extract_target = _as_mapping(_project_targets(project_config).get(EXTRACT_TARGET))
    extract_options = _as_mapping(extract_target.get("options"))
    raw_output_path = extract_options.get("outputPath")
    output_path_from_extract_options = raw_output_path if isinstance(raw_output_path, str) else None
    output_path_from_target_files = (
        posixpath.dirname(files[0].file) or "." if files else None
    )
    output_path = posixpath.normpath(
        output_path_from_extract_options or output_path_from_target_files or DEFAULT_OUTPUT_PATH
    )
    logger.info(f"inferred output path: {output_path}")

    target_files = {f.locale: relative_to(output_path, f.file) for f in files}

    raw_out_file = extract_options.get("outFile")
    out_file = raw_out_file if isinstance(raw_out_file, str) and raw_out_file else DEFAULT_SOURCE_FILE
    source_file = infer_source_file(
        out_file,
        output_path_from_extract_options,
        output_path_from_target_files,
        output_path,
        exists,
    )

    command: list[str] = []
    if extract_target:
        command = [
            "ng", EXTRACT_TARGET, project_name,
            "--output-path", "{output_path}",
            "--out-file", "{out_file}",
            "--format", "{format}",
            "--progress=false",
        ]

    return InferredSetup(
        project=project_name,
        output_path=output_path,
        target_files=target_files,
        source_file=source_file if source_file != DEFAULT_SOURCE_FILE else None,
        command=command,
    )


def load_workspace(workspace_path: Path) -> dict[str, object]:
    """
    Read a workspace JSON file.

    Raises:
        ConfigurationError: If the file is missing or not a JSON object
    """
    if not workspace_path.exists():
        raise ConfigurationError(f"Workspace file not found: {workspace_path}")
    try:
        data: object = json.loads(workspace_path.read_text(encoding="utf-8"))  # pyright: ignore[reportAny]
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {workspace_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Workspace file must contain a JSON object: {workspace_path}")
    return data  # pyright: ignore[reportUnknownVariableType]


def write_inferred_config(setup: InferredSetup, config_path: Path) -> I18nMergeConfig:
    """Persist an inferred setup as the YAML configuration file."""
    if config_path.exists():
        logger.info(f"Overwriting previous configuration {config_path}.")
    config = setup.to_config()
    ConfigManager.save_config(config, config_path)
    return config
