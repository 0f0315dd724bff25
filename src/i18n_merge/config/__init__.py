"""Configuration loading and validation."""

from .manager import DEFAULT_CONFIG_FILE, ConfigManager
from .schema import ExtractorConfig, I18nMergeConfig

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ConfigManager",
    "ExtractorConfig",
    "I18nMergeConfig",
]
