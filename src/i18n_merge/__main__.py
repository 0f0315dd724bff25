"""Allow running i18n-merge with ``python -m i18n_merge``."""

from .main import cli

if __name__ == "__main__":
    cli()
