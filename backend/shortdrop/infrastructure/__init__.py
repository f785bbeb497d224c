"""Infrastructure layer: object store adapters and event handlers."""

from .local_file_storage_repository import LocalFileStorageRepository
from .storage_factory import StorageFactory

__all__ = [
    "LocalFileStorageRepository",
    "StorageFactory",
]
