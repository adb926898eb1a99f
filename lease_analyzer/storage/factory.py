from lease_analyzer.config.settings import Settings
from lease_analyzer.storage.base import BaseFileStorage
from lease_analyzer.storage.memory_adapter import InMemoryFileStorage
from lease_analyzer.storage.s3_adapter import S3FileStorage


class FileStorageFactory:
    """Creates the configured object storage adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseFileStorage:
        provider = settings.storage_provider.lower()
        if provider == "s3":
            return S3FileStorage(region=settings.aws_region)
        if provider == "memory":
            return InMemoryFileStorage()
        raise ValueError(f"Unknown storage provider '{provider}'. Choose from: ['s3', 'memory']")
