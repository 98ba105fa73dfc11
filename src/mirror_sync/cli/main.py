"""Main CLI entry point for mirror-sync."""  # pragma: no cover

from mirror_sync.cli.app import app  # pragma: no cover
from mirror_sync.config import config  # pragma: no cover
from mirror_sync.utils import setup_logging  # pragma: no cover

# Register commands
from mirror_sync.cli.commands import sync  # pragma: no cover

__all__ = ["sync"]  # pragma: no cover


# Set up logging when module is imported
setup_logging(level=config.log_level, log_file=config.log_file)  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
