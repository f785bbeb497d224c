"""
File Storage Entities

Records describing objects in the store and the outcome of an upload.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .value_objects import InvalidObjectKeyError, ObjectKey


@dataclass(frozen=True)
class StoredObject:
    """
    One entry of an object store listing.

    Attributes:
        key: Full storage key
        size: Object size in bytes, when the backend reports it
        last_modified: Last modification time, when the backend reports it
    """
    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None

    @property
    def object_key(self) -> Optional[ObjectKey]:
        """Parsed key, or None for keys outside the short link namespace."""
        try:
            return ObjectKey.parse(self.key)
        except InvalidObjectKeyError:
            return None

    @property
    def file_name(self) -> str:
        return self.key.rpartition("/")[2]


@dataclass
class SharedFile:
    """
    A file stored under a freshly allocated short id.

    Attributes:
        short_id: Allocated short identifier
        file_name: File name as stored (second key segment)
        key: Full storage key
        content_type: Content type recorded with the object
        size: Payload size in bytes
        short_url: Public short link distributed to users
    """
    short_id: str
    file_name: str
    key: str
    content_type: str
    size: int
    short_url: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the upload response shape."""
        return {
            "url": self.short_url,
            "shortId": self.short_id,
            "fileName": self.file_name,
        }
