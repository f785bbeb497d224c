"""
Upload Service

Application service that stores an uploaded file under a new short id and
returns the short link.
"""

from datetime import datetime
from typing import Optional

from shortdrop.application.event_publisher import EventPublisher
from shortdrop.domain.errors import (
    BadRequestError,
    StorageFailureError,
    UnauthorizedError,
)
from shortdrop.domain.events import FileUploadedEvent, StorageOperationFailedEvent
from shortdrop.domain.file_storage import (
    IObjectStorageRepository,
    LinkService,
    ObjectKey,
    SharedFile,
    SharedSecretAuthorizer,
    ShortIdAllocator,
    sanitize_file_name,
)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class UploadService:
    """
    Orchestrates the upload workflow.

    Checks the caller, allocates a short id, writes exactly one object at
    '{short_id}/{file_name}', and builds the short link. A failed write is
    reported once; it is never retried.
    """

    def __init__(
        self,
        storage: IObjectStorageRepository,
        authorizer: SharedSecretAuthorizer,
        allocator: ShortIdAllocator,
        link_service: LinkService,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self.storage = storage
        self.authorizer = authorizer
        self.allocator = allocator
        self.link_service = link_service
        self.event_publisher = event_publisher

    def upload(
        self,
        auth_token: Optional[str],
        file_name: Optional[str],
        content: Optional[bytes],
        content_type: Optional[str] = None,
    ) -> SharedFile:
        """
        Store a file and return its short link.

        Args:
            auth_token: Presented shared secret
            file_name: Original file name declared by the client
            content: File bytes, None when the request carried no file
            content_type: Declared MIME type

        Returns:
            SharedFile describing the stored object and its short URL

        Raises:
            UnauthorizedError: Token missing or wrong; nothing is written
            BadRequestError: No file or no usable file name; nothing is written
            StorageFailureError: The store rejected the write
        """
        if not self.authorizer.is_authorized(auth_token):
            raise UnauthorizedError("Invalid or missing access key")

        if content is None:
            raise BadRequestError("No file provided")

        stored_name = sanitize_file_name(file_name)
        if not stored_name:
            raise BadRequestError("File name is empty")

        short_id = self.allocator.allocate()
        key = ObjectKey(short_id, stored_name).value
        content_type = content_type or DEFAULT_CONTENT_TYPE

        try:
            self.storage.put_object(key, content, content_type)
        except Exception as e:
            self._publish(StorageOperationFailedEvent(
                aggregate_id=short_id.value,
                occurred_at=datetime.utcnow(),
                operation="upload",
                error_message=str(e),
            ))
            raise StorageFailureError(f"Failed to store {key}", original_error=e) from e

        shared = SharedFile(
            short_id=short_id.value,
            file_name=stored_name,
            key=key,
            content_type=content_type,
            size=len(content),
            short_url=self.link_service.short_url(short_id),
        )

        self._publish(FileUploadedEvent(
            aggregate_id=short_id.value,
            occurred_at=datetime.utcnow(),
            key=key,
            content_type=content_type,
            size=shared.size,
        ))
        return shared

    def _publish(self, event) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(event)
