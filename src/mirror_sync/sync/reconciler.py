"""Compute copy and delete work sets from two directory snapshots."""

from pathlib import Path
from typing import Tuple

from loguru import logger

from mirror_sync.models import DirectorySnapshot, WorkSet


def destination_path(source_path: str, source_root: Path, dest_root: Path) -> str:
    """Map a path under source_root to the same relative location under dest_root.

    Raises:
        ValueError: If source_path is not inside source_root
    """
    relative = Path(source_path).relative_to(source_root)
    return str(Path(dest_root) / relative)


def reconcile(
    source: DirectorySnapshot,
    destination: DirectorySnapshot,
    source_root: Path,
    dest_root: Path,
) -> Tuple[WorkSet, WorkSet]:
    """
    Find files to copy and files to delete so destination mirrors source.

    A source file is copied when the destination has no file at the
    corresponding path or the sizes differ. Files are compared by size only,
    so same-sized files with different content are considered identical.
    Every destination file without a source counterpart is deleted, which
    keeps the two work sets disjoint.

    Args:
        source: Snapshot of the source tree
        destination: Snapshot of the destination tree
        source_root: Root the source snapshot was taken from
        dest_root: Root the destination snapshot was taken from

    Returns:
        Tuple of (copy set mapping source -> destination path,
        delete set mapping destination path -> "")
    """
    to_copy: WorkSet = {}
    # destination entries not yet claimed by a source file
    unclaimed = dict(destination)

    for path, record in source.items():
        dest = destination_path(path, source_root, dest_root)
        # a destination file with a source counterpart is never deleted,
        # even when it has to be overwritten
        existing = unclaimed.pop(dest, None)
        if existing is None or existing.size != record.size:
            to_copy[path] = dest

    to_delete: WorkSet = {path: "" for path in unclaimed}

    logger.debug(f"Changes found: {len(to_copy) + len(to_delete)}")
    logger.debug(f"  Copy: {len(to_copy)}")
    logger.debug(f"  Delete: {len(to_delete)}")
    return to_copy, to_delete
