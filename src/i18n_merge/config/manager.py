"""Configuration manager for i18n-merge.

This module provides functionality for loading, validating, and saving
YAML configuration files with Pydantic model validation.
"""

import logging
import os
import tempfile
from pathlib import Path

import yaml

from ..catalog.storage import file_mode
from ..utils.exceptions import ConfigurationError
from .schema import I18nMergeConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("i18n-merge.yml")


class ConfigManager:
    """Load and save i18n-merge YAML configuration files."""

    @staticmethod
    def load_config(config_path: Path) -> I18nMergeConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            I18nMergeConfig: Validated configuration object

        Raises:
            ConfigurationError: If the config file doesn't exist or is not a mapping
            yaml.YAMLError: If the YAML syntax is invalid
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        config = I18nMergeConfig.model_validate(config_data)
        logger.debug(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def save_config(config: I18nMergeConfig, config_path: Path) -> None:
        """
        Save configuration to a YAML file with atomic operation.

        Fields still at their default value are left out to keep the file short.

        Args:
            config: Configuration object to save
            config_path: Path where to save the configuration

        Raises:
            OSError: If file operations fail
        """
        config_dict = config.model_dump(exclude_defaults=True)
        # target_files and new_prefix are required, always write them
        config_dict["target_files"] = dict(config.target_files)
        config_dict["new_prefix"] = config.new_prefix

        content_to_write = yaml.dump(
            config_dict,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        config_path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(content_to_write)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            os.chmod(temp_path, file_mode(config_path))
            # Atomic move
            _ = temp_path.replace(config_path)
            logger.info(f"Saved configuration to {config_path}")

        except Exception as e:
            if temp_file and Path(temp_file.name).exists():
                Path(temp_file.name).unlink(missing_ok=True)
            raise OSError(f"Failed to save configuration to {config_path}: {e}") from e
