from .dispatcher import TaskStream, dispatch
from .operations import copy_file, delete_file
from .pruner import prune_empty_dirs
from .reconciler import reconcile
from .scanner import scan_directory
from .sync_service import SyncService, sync_folder
from .worker_pool import run_pool

__all__ = [
    "SyncService",
    "sync_folder",
    "scan_directory",
    "reconcile",
    "dispatch",
    "TaskStream",
    "run_pool",
    "copy_file",
    "delete_file",
    "prune_empty_dirs",
]
