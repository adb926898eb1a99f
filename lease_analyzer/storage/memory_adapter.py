"""In-process object storage.

No network calls. Used for local runs (storage_provider=memory) and tests.
"""

from lease_analyzer.storage.base import BaseFileStorage
from lease_analyzer.storage.exceptions import StorageCleanupError


class InMemoryFileStorage(BaseFileStorage):
    def __init__(self) -> None:
        self._objects: dict[tuple[str, str], tuple[bytes, str]] = {}

    def put(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        self._objects[(bucket, key)] = (body, content_type)

    def delete(self, bucket: str, key: str) -> None:
        if (bucket, key) not in self._objects:
            raise StorageCleanupError(f"No such object: {bucket}/{key}")
        del self._objects[(bucket, key)]

    def exists(self, bucket: str, key: str) -> bool:
        return (bucket, key) in self._objects

    def get(self, bucket: str, key: str) -> bytes:
        return self._objects[(bucket, key)][0]

    def keys(self, bucket: str) -> list[str]:
        return [key for stored_bucket, key in self._objects if stored_bucket == bucket]
