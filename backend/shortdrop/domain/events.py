"""
Domain Events

Immutable records of significant state changes in the domain.
Events decouple side effects (logging) from core business logic.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Attributes:
        aggregate_id: Short id the event concerns
        occurred_at: Timestamp when the event occurred
    """
    aggregate_id: str
    occurred_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for serialization.

        Returns:
            Dictionary representation of the event
        """
        return {
            "event_type": self.__class__.__name__,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class FileUploadedEvent(DomainEvent):
    """
    Event emitted after an upload is written to the store.

    Attributes:
        key: Storage key written
        content_type: Content type recorded with the object
        size: Payload size in bytes
    """
    key: str
    content_type: str
    size: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        base_dict = super().to_dict()
        base_dict.update({
            "key": self.key,
            "content_type": self.content_type,
            "size": self.size,
        })
        return base_dict


@dataclass(frozen=True)
class ShortLinkResolvedEvent(DomainEvent):
    """
    Event emitted when a short link is resolved to its object.

    Attributes:
        key: Storage key the link points at
    """
    key: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        base_dict = super().to_dict()
        base_dict["key"] = self.key
        return base_dict


@dataclass(frozen=True)
class FileDeletedEvent(DomainEvent):
    """
    Event emitted after every object under a short id was deleted.

    Attributes:
        deleted_count: Number of objects targeted
    """
    deleted_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        base_dict = super().to_dict()
        base_dict["deleted_count"] = self.deleted_count
        return base_dict


@dataclass(frozen=True)
class StorageOperationFailedEvent(DomainEvent):
    """
    Event emitted when an object store call fails inside an operation.

    Attributes:
        operation: 'upload', 'resolve' or 'delete'
        error_message: Technical error description
    """
    operation: str
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        base_dict = super().to_dict()
        base_dict.update({
            "operation": self.operation,
            "error_message": self.error_message,
        })
        return base_dict
