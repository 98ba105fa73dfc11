class SyncError(Exception):
    """Base exception for sync failures"""

    pass


class DirectoryNotFoundError(SyncError):
    """Raised when a directory to scan does not exist"""

    pass


class FileOperationError(SyncError):
    """Raised when copying or deleting a single file fails"""

    pass
