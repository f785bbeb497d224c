"""
Object Storage Repository Interface

Abstract interface for the object store behind short links.
The domain only needs three capabilities from the store: write one object,
list objects under a key prefix, and delete one object.
"""

from abc import ABC, abstractmethod
from typing import List

from .entities import StoredObject


class IObjectStorageRepository(ABC):
    """
    Unified interface for object storage operations.

    Contract Guarantees:
    - Keys are opaque strings; "/" has no special meaning to the store
    - list_objects() returns matches in listing order (lexicographic by key)
    - delete_object() is idempotent
    - Backend failures raise StorageBackendError

    Thread Safety:
    - Implementations must be safe for concurrent use from request threads
      and from the delete fan-out pool
    """

    @abstractmethod
    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """
        Write one object, replacing any object already stored at the key.

        Args:
            key: Storage key (e.g., 'aB3_x9/report.pdf')
            content: Raw object bytes
            content_type: MIME type recorded with the object

        Raises:
            ValueError: If key is empty
            StorageBackendError: If the backend write fails
        """
        pass  # pragma: no cover

    @abstractmethod
    def list_objects(self, prefix: str, max_keys: int = 1000) -> List[StoredObject]:
        """
        List objects whose key starts with prefix.

        Args:
            prefix: Key prefix (e.g., 'aB3_x9/')
            max_keys: Upper bound on returned entries

        Returns:
            Up to max_keys StoredObject entries, empty list when none match

        Raises:
            StorageBackendError: If the backend listing fails
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete_object(self, key: str) -> None:
        """
        Delete one object. Deleting a missing key is not an error.

        Args:
            key: Storage key

        Raises:
            StorageBackendError: If the backend delete fails
        """
        pass  # pragma: no cover

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check that the store is reachable.

        Returns:
            True if the bucket (or directory) can be accessed, False otherwise.
            Never raises.
        """
        pass  # pragma: no cover
