"""Recursive directory scanner producing size snapshots."""

from pathlib import Path
from typing import List

from loguru import logger

from mirror_sync.exceptions import DirectoryNotFoundError
from mirror_sync.models import DirectorySnapshot, FileRecord


def scan_directory(directory: Path) -> DirectorySnapshot:
    """
    Scan a directory tree and record every regular file with its size.

    Args:
        directory: Root of the tree to scan

    Returns:
        Mapping of absolute file path to FileRecord. Directories are not recorded.

    Raises:
        DirectoryNotFoundError: If directory does not exist or is not a directory
        OSError: If directory itself cannot be listed
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFoundError(f"Directory not found: {directory}")

    logger.debug(f"Scanning directory: {directory}")
    snapshot: DirectorySnapshot = {}
    # the root itself must be readable, only subtrees may degrade to empty
    _scan_entries(list(directory.iterdir()), snapshot)
    logger.debug(f"Found {len(snapshot)} files in {directory}")
    return snapshot


def _scan_entries(entries: List[Path], snapshot: DirectorySnapshot) -> None:
    for path in entries:
        try:
            if path.is_dir():
                _scan_subdirectory(path, snapshot)
                continue
            size = path.stat().st_size
        except OSError as e:
            # entry vanished or cannot be stat'ed since listing
            logger.debug(f"Skipping {path}: {e}")
            continue

        snapshot[str(path)] = FileRecord(name=path.name, size=size)


def _scan_subdirectory(directory: Path, snapshot: DirectorySnapshot) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        # unreadable subtrees count as empty
        logger.debug(f"Cannot list {directory}, treating as empty: {e}")
        return
    _scan_entries(entries, snapshot)
