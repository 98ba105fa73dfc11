"""Per-file operations run by the worker pool."""

import shutil
from pathlib import Path

from loguru import logger

from mirror_sync.config import BUFFER_SIZE
from mirror_sync.exceptions import FileOperationError
from mirror_sync.models import SyncTask


def copy_file(task: SyncTask, buffer_size: int = BUFFER_SIZE) -> None:
    """
    Copy task.source over task.destination.

    A source that no longer exists is treated as a successful no-op. Parent
    directories of the destination are created as needed and an existing
    destination file is truncated before the new content is streamed in.

    Raises:
        FileOperationError: If the destination cannot be created or written,
            or the source cannot be read
    """
    source = Path(task.source)
    destination = Path(task.destination)

    if not source.exists():
        logger.debug(f"Source disappeared before copy, skipping: {source}")
        return

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with source.open("rb") as src, destination.open("wb") as dst:
            shutil.copyfileobj(src, dst, buffer_size)
    except FileNotFoundError as e:
        if not source.exists():
            logger.debug(f"Source disappeared during copy, skipping: {source}")
            return
        raise FileOperationError(f"Failed to copy {source} -> {destination}: {e}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to copy {source} -> {destination}: {e}") from e

    logger.debug(f"Copied {source} -> {destination}")


def delete_file(task: SyncTask) -> None:
    """
    Delete task.source.

    Raises:
        FileOperationError: If removal fails, including when the file is already gone
    """
    path = Path(task.source)
    try:
        path.unlink()
    except OSError as e:
        raise FileOperationError(f"Failed to delete {path}: {e}") from e

    logger.debug(f"Deleted {path}")
