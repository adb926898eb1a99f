from abc import ABC, abstractmethod


class BaseFileStorage(ABC):
    """Contract for all object storage adapters."""

    @abstractmethod
    def put(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        """Store bytes under bucket/key.

        Raises:
            StorageError: if the upload fails.
        """

    @abstractmethod
    def delete(self, bucket: str, key: str) -> None:
        """Remove bucket/key.

        Raises:
            StorageCleanupError: if the deletion fails.
        """

    @abstractmethod
    def exists(self, bucket: str, key: str) -> bool:
        """Return True when bucket/key is present.

        Raises:
            StorageError: on any failure other than "not found".
        """
