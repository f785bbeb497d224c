"""
File Storage Domain

Short ids, storage keys, and the object store contract behind short links.
"""

from .entities import SharedFile, StoredObject
from .link_service import LinkService
from .services import SharedSecretAuthorizer, ShortIdAllocator, sanitize_file_name
from .storage_repository import IObjectStorageRepository
from .value_objects import (
    InvalidObjectKeyError,
    InvalidShortIdError,
    ObjectKey,
    ShortId,
)

__all__ = [
    "IObjectStorageRepository",
    "InvalidObjectKeyError",
    "InvalidShortIdError",
    "LinkService",
    "ObjectKey",
    "SharedFile",
    "SharedSecretAuthorizer",
    "ShortId",
    "ShortIdAllocator",
    "StoredObject",
    "sanitize_file_name",
]
