"""
Local File Storage Repository Implementation

Concrete implementation of IObjectStorageRepository backed by a directory on
the local filesystem. Intended for development: keys map to relative paths
under base_path, and the app serves them under /_local so short links
resolve without a cloud bucket.
"""

import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from shortdrop.domain.errors import StorageBackendError
from shortdrop.domain.file_storage.entities import StoredObject
from shortdrop.domain.file_storage.storage_repository import IObjectStorageRepository


class LocalFileStorageRepository(IObjectStorageRepository):
    """
    Local filesystem implementation of IObjectStorageRepository.

    Content types are not persisted; the serving route guesses them from the
    file extension.

    Attributes:
        base_path: Base directory for stored objects
    """

    def __init__(self, base_path: str = "/tmp/shortdrop"):
        """
        Initialize the local file storage repository.

        Args:
            base_path: Base directory for file storage (default: /tmp/shortdrop)
        """
        self.base_path = Path(base_path).resolve()
        self._lock = threading.Lock()
        self._ensure_base_directory()

    def _ensure_base_directory(self) -> None:
        """
        Ensure the base storage directory exists.

        Raises:
            PermissionError: If insufficient permissions to create directory
            OSError: If directory creation fails for other reasons
        """
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise PermissionError(
                f"Insufficient permissions to create storage directory: {self.base_path}"
            ) from e
        except OSError as e:
            raise OSError(
                f"Failed to create storage directory: {self.base_path}"
            ) from e

    def resolve_path(self, key: str) -> Optional[Path]:
        """
        Map a key to a path inside base_path.

        Returns:
            The absolute path, or None if the key is empty or escapes base_path
        """
        if not key or not key.strip():
            return None

        full_path = (self.base_path / key).resolve()
        if full_path == self.base_path or self.base_path not in full_path.parents:
            return None
        return full_path

    # IObjectStorageRepository interface methods

    def put_object(self, key: str, content: bytes, content_type: str) -> None:
        """Write content to base_path/key, creating parent directories."""
        if not key or not key.strip():
            raise ValueError("key cannot be empty")

        full_path = self.resolve_path(key)
        if full_path is None:
            raise ValueError(f"key escapes storage directory: {key!r}")

        try:
            with self._lock:
                full_path.parent.mkdir(parents=True, exist_ok=True)
                full_path.write_bytes(content)
        except OSError as e:
            raise StorageBackendError(f"Failed to save file: {e}", e) from e

    def list_objects(self, prefix: str, max_keys: int = 1000) -> List[StoredObject]:
        """Walk base_path and return files whose relative key starts with prefix."""
        try:
            with self._lock:
                keys = sorted(
                    path.relative_to(self.base_path).as_posix()
                    for path in self.base_path.rglob("*")
                    if path.is_file()
                )
            matches = [key for key in keys if key.startswith(prefix)][:max_keys]

            objects = []
            for key in matches:
                try:
                    stat = (self.base_path / key).stat()
                except FileNotFoundError:
                    continue
                objects.append(StoredObject(
                    key=key,
                    size=stat.st_size,
                    last_modified=datetime.utcfromtimestamp(stat.st_mtime),
                ))
            return objects
        except OSError as e:
            raise StorageBackendError(f"Failed to list {prefix}: {e}", e) from e

    def delete_object(self, key: str) -> None:
        """Remove the file and any directory left empty by it."""
        full_path = self.resolve_path(key)
        if full_path is None or not full_path.exists():
            return

        try:
            with self._lock:
                full_path.unlink()
                parent = full_path.parent
                while parent != self.base_path and not any(parent.iterdir()):
                    parent.rmdir()
                    parent = parent.parent
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageBackendError(f"Failed to delete file: {e}", e) from e

    def health_check(self) -> bool:
        """Check that the base directory exists and is a directory."""
        return self.base_path.is_dir()
