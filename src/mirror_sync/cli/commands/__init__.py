"""CLI commands for mirror-sync."""

from . import sync

__all__ = ["sync"]
