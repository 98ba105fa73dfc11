"""Types shared by the scanner, reconciler and worker pool."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FileRecord:
    """A regular file found while scanning: its base name and byte size."""

    name: str
    size: int


# absolute file path -> FileRecord
DirectorySnapshot = Dict[str, FileRecord]

# copy: source path -> destination path
# delete: path -> "" (unused)
WorkSet = Dict[str, str]


@dataclass(frozen=True)
class SyncTask:
    """One unit of work handed to a worker.

    For delete tasks ``destination`` is empty and the operation acts on ``source``.
    """

    source: str
    destination: str = ""


@dataclass
class SyncOutcome:
    """Result of applying an operation to a single task."""

    task: SyncTask
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SyncReport:
    """Report of a single sync run.

    Attributes:
        to_copy: Files that were missing or size-mismatched in the destination
        to_delete: Destination files with no counterpart in the source
        copied: Number of copy tasks that succeeded
        deleted: Number of delete tasks that succeeded
        failures: Outcomes of every task that failed
        pruned: Empty directories removed after the pipelines finished
        scan_error: Set when a tree could not be scanned and nothing was dispatched
    """

    to_copy: WorkSet = field(default_factory=dict)
    to_delete: WorkSet = field(default_factory=dict)
    copied: int = 0
    deleted: int = 0
    failures: List[SyncOutcome] = field(default_factory=list)
    pruned: List[str] = field(default_factory=list)
    scan_error: Optional[str] = None

    @property
    def total(self) -> int:
        """Number of tasks dispatched to the worker pools."""
        return len(self.to_copy) + len(self.to_delete)

    @property
    def success(self) -> bool:
        if self.scan_error is not None:
            return False
        return self.copied + self.deleted == self.total
