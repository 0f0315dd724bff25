"""
Test utilities package for i18n-merge tests.

### test_helpers.py
- `write_catalog()`: Write a catalog file in canonical form
- `read_translations()`: Read back the translations of a catalog file
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `StubExtractor`: Extractor double that records requests and writes a fixed source catalog
"""

from __future__ import annotations

from .test_helpers import (
    StubExtractor,
    create_temp_config_file,
    read_translations,
    write_catalog,
)

__all__ = [
    "StubExtractor",
    "create_temp_config_file",
    "read_translations",
    "write_catalog",
]
