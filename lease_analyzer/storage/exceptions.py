class StorageError(Exception):
    """Raised when an object storage operation fails."""


class StorageCleanupError(StorageError):
    """Raised when deleting a stored object fails."""
