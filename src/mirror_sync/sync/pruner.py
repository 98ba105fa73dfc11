"""Remove empty directories left behind in the destination tree."""

import shutil
from pathlib import Path
from typing import List

from loguru import logger


def prune_empty_dirs(root: Path) -> List[str]:
    """
    Remove directories that are empty when visited, starting at root.

    The walk is a single top-down pass in name order. A directory found
    empty is removed and not descended into; otherwise its subdirectories
    are visited. A parent that only becomes empty because this pass removed
    its children is left in place until the next run. root itself is
    removed when empty.

    Args:
        root: Top of the tree to prune

    Returns:
        Paths of the removed directories, in removal order
    """
    removed: List[str] = []
    root = Path(root)
    if root.is_dir():
        _prune(root, removed)
    if removed:
        logger.debug(f"Pruned {len(removed)} empty directories under {root}")
    return removed


def _prune(directory: Path, removed: List[str]) -> None:
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.error(f"Failed to read directory {directory}: {e}")
        return

    if not entries:
        try:
            shutil.rmtree(directory)
        except OSError as e:
            logger.error(f"Failed to remove empty directory {directory}: {e}")
            return
        removed.append(str(directory))
        return

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            _prune(entry, removed)
