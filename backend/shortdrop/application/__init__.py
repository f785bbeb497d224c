"""Application layer: orchestrates domain services for the HTTP API."""

from .deletion_service import DeletionService
from .dependency_container import DependencyContainer, DependencyNotFoundError
from .event_publisher import EventPublisher
from .resolution_service import ResolutionService
from .upload_service import UploadService

__all__ = [
    "DeletionService",
    "DependencyContainer",
    "DependencyNotFoundError",
    "EventPublisher",
    "ResolutionService",
    "UploadService",
]
