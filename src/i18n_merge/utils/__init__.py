"""Shared utilities for i18n-merge."""
