"""
Resolution Service

Maps a short id to the public URL of the object stored under it.
"""

from datetime import datetime
from typing import Optional

from shortdrop.application.event_publisher import EventPublisher
from shortdrop.domain.errors import ShortLinkNotFoundError, StorageFailureError
from shortdrop.domain.events import ShortLinkResolvedEvent, StorageOperationFailedEvent
from shortdrop.domain.file_storage import IObjectStorageRepository, LinkService, ShortId


class ResolutionService:
    """
    Resolves short ids with a prefix listing on every call.

    There is no cache: a cached mapping would go stale as soon as a file is
    deleted.
    """

    def __init__(
        self,
        storage: IObjectStorageRepository,
        link_service: LinkService,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self.storage = storage
        self.link_service = link_service
        self.event_publisher = event_publisher

    def resolve(self, short_id: str) -> str:
        """
        Find the object for a short id and return its public URL.

        Args:
            short_id: Short id from the request path

        Returns:
            Public object URL to redirect to

        Raises:
            ShortLinkNotFoundError: Malformed id or nothing stored under it
            StorageFailureError: The listing call failed
        """
        if not ShortId.is_valid(short_id):
            raise ShortLinkNotFoundError(f"No file for short id {short_id!r}")

        sid = ShortId(short_id)
        try:
            objects = self.storage.list_objects(sid.prefix, max_keys=1)
        except Exception as e:
            if self.event_publisher is not None:
                self.event_publisher.publish(StorageOperationFailedEvent(
                    aggregate_id=sid.value,
                    occurred_at=datetime.utcnow(),
                    operation="resolve",
                    error_message=str(e),
                ))
            raise StorageFailureError(
                f"Failed to list objects for {sid.value}", original_error=e
            ) from e

        if not objects:
            raise ShortLinkNotFoundError(f"No file for short id {sid.value}")

        key = objects[0].key
        if self.event_publisher is not None:
            self.event_publisher.publish(ShortLinkResolvedEvent(
                aggregate_id=sid.value,
                occurred_at=datetime.utcnow(),
                key=key,
            ))
        return self.link_service.public_object_url(key)
