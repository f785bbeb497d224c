"""
Mock Repository Implementations

In-memory implementation of the object storage repository for testing.
Provides the same interface as the real gateways without network access.
"""

import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

from shortdrop.domain.errors import StorageBackendError
from shortdrop.domain.file_storage import IObjectStorageRepository, StoredObject


class MockObjectStorageRepository(IObjectStorageRepository):
    """
    In-memory mock implementation of IObjectStorageRepository.

    Objects live in a dict keyed by storage key. Failures can be injected per
    operation, and per key for deletes, to exercise error paths.
    """

    def __init__(self):
        self._objects: Dict[str, Dict[str, Any]] = {}
        self._call_history: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        # Failure injection
        self.put_error: Optional[Exception] = None
        self.list_error: Optional[Exception] = None
        self.delete_errors: Dict[str, Exception] = {}
        self.healthy = True

    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """Store content under key, overwriting any previous object."""
        self._record("put_object", key=key, content_type=content_type, size=len(content))
        if self.put_error is not None:
            raise self.put_error
        with self._lock:
            self._objects[key] = {
                "content": content,
                "content_type": content_type,
                "last_modified": datetime.utcnow(),
            }

    def list_objects(self, prefix: str, max_keys: int = 1000) -> List[StoredObject]:
        """Return objects whose key starts with prefix, in key order."""
        self._record("list_objects", prefix=prefix, max_keys=max_keys)
        if self.list_error is not None:
            raise self.list_error
        with self._lock:
            keys = sorted(k for k in self._objects if k.startswith(prefix))[:max_keys]
            return [
                StoredObject(
                    key=k,
                    size=len(self._objects[k]["content"]),
                    last_modified=self._objects[k]["last_modified"],
                )
                for k in keys
            ]

    def delete_object(self, key: str) -> None:
        """Remove the object; missing keys are not an error."""
        self._record("delete_object", key=key)
        if key in self.delete_errors:
            raise self.delete_errors[key]
        with self._lock:
            self._objects.pop(key, None)

    def health_check(self) -> bool:
        self._record("health_check")
        return self.healthy

    # Inspection methods
    def add_object(
        self, key: str, content: bytes = b"data", content_type: str = "text/plain"
    ) -> None:
        """Seed an object without recording a call."""
        with self._lock:
            self._objects[key] = {
                "content": content,
                "content_type": content_type,
                "last_modified": datetime.utcnow(),
            }

    def get_object(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the stored record for key, or None."""
        with self._lock:
            return self._objects.get(key)

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._objects)

    def get_call_history(self) -> List[Dict[str, Any]]:
        """Get history of all method calls."""
        with self._lock:
            return self._call_history.copy()

    def calls_to(self, method: str) -> List[Dict[str, Any]]:
        """Get recorded calls of one method."""
        return [c for c in self.get_call_history() if c["method"] == method]

    def fail_with(self, operation: str, message: str = "backend unavailable") -> None:
        """Make every call of an operation raise StorageBackendError."""
        error = StorageBackendError(message)
        if operation == "put":
            self.put_error = error
        elif operation == "list":
            self.list_error = error
        else:
            raise ValueError(f"Unknown operation: {operation}")

    def clear(self) -> None:
        """Clear all stored data, call history and injected failures."""
        with self._lock:
            self._objects.clear()
            self._call_history.clear()
        self.put_error = None
        self.list_error = None
        self.delete_errors.clear()
        self.healthy = True

    def _record(self, method: str, **args) -> None:
        with self._lock:
            self._call_history.append({"method": method, "args": args})
