"""Service for mirroring a source directory into a destination directory."""

import asyncio
import os
from functools import partial
from pathlib import Path
from typing import Tuple, Union

import logfire
from loguru import logger

from mirror_sync.config import BUFFER_SIZE, DEFAULT_WORKERS
from mirror_sync.exceptions import SyncError
from mirror_sync.models import DirectorySnapshot, SyncReport, WorkSet
from mirror_sync.sync.dispatcher import dispatch
from mirror_sync.sync.operations import copy_file, delete_file
from mirror_sync.sync.pruner import prune_empty_dirs
from mirror_sync.sync.reconciler import reconcile
from mirror_sync.sync.scanner import scan_directory
from mirror_sync.sync.worker_pool import Operation, run_pool

PathLike = Union[str, Path]


class SyncService:
    """Makes a destination tree mirror a source tree, comparing files by size."""

    def __init__(self, workers: int = DEFAULT_WORKERS, buffer_size: int = BUFFER_SIZE):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers
        self.buffer_size = buffer_size

    async def scan(
        self, source_root: Path, dest_root: Path
    ) -> Tuple[DirectorySnapshot, DirectorySnapshot]:
        """Scan both trees concurrently."""
        return await asyncio.gather(
            asyncio.to_thread(scan_directory, source_root),
            asyncio.to_thread(scan_directory, dest_root),
        )

    async def run_pipeline(
        self, name: str, work_set: WorkSet, operation: Operation, report: SyncReport
    ) -> int:
        """Dispatch a work set to its own worker pool and count successful tasks.

        Failed outcomes are logged and appended to report.failures.
        """
        succeeded = 0
        stream = dispatch(work_set, maxsize=self.workers)
        async for outcome in run_pool(stream, operation, self.workers):
            if outcome.ok:
                succeeded += 1
            else:
                logger.error(f"{name} failed: {outcome.error}")
                report.failures.append(outcome)
        logger.debug(f"{name}: {succeeded}/{len(work_set)} succeeded")
        return succeeded

    async def sync(self, source_root: PathLike, dest_root: PathLike) -> SyncReport:
        """
        Mirror source_root into dest_root.

        Copies missing or size-mismatched files, deletes files absent from the
        source and prunes directories left empty. Copy and delete pipelines run
        concurrently. If either tree cannot be scanned nothing is changed and
        the report carries the scan error.

        Args:
            source_root: Directory to mirror
            dest_root: Directory to update, created if missing

        Returns:
            SyncReport describing the work done and any failures
        """
        source = Path(os.path.abspath(source_root))
        destination = Path(os.path.abspath(dest_root))
        report = SyncReport()

        with logfire.span("sync", source=str(source), destination=str(destination)):
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"Failed to create destination {destination}: {e}")

            try:
                source_files, dest_files = await self.scan(source, destination)
            except (SyncError, OSError) as e:
                # an empty snapshot here would read as "delete everything"
                logger.error(f"Scan failed, nothing synced: {e}")
                report.scan_error = str(e)
                return report

            report.to_copy, report.to_delete = reconcile(
                source_files, dest_files, source, destination
            )
            logger.info(
                f"Found {len(report.to_copy)} files to copy "
                f"and {len(report.to_delete)} files to delete"
            )

            report.copied, report.deleted = await asyncio.gather(
                self.run_pipeline(
                    "copy",
                    report.to_copy,
                    partial(copy_file, buffer_size=self.buffer_size),
                    report,
                ),
                self.run_pipeline("delete", report.to_delete, delete_file, report),
            )

            report.pruned = await asyncio.to_thread(prune_empty_dirs, destination)

            logger.info(
                f"Sync finished: {report.copied} copied, {report.deleted} deleted, "
                f"{len(report.failures)} failed"
            )
            return report


def sync_folder(
    source_root: PathLike, dest_root: PathLike, workers: int = DEFAULT_WORKERS
) -> bool:
    """Mirror source_root into dest_root and return True when every task succeeded."""
    report = asyncio.run(SyncService(workers=workers).sync(source_root, dest_root))
    return report.success
