"""
Deletion Service

Removes every object stored under a short id, which permanently kills the link.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import datetime
from typing import Optional

from shortdrop.application.event_publisher import EventPublisher
from shortdrop.domain.errors import (
    BadRequestError,
    ShortLinkNotFoundError,
    StorageFailureError,
    UnauthorizedError,
)
from shortdrop.domain.events import FileDeletedEvent, StorageOperationFailedEvent
from shortdrop.domain.file_storage import (
    IObjectStorageRepository,
    SharedSecretAuthorizer,
    ShortId,
)

logger = logging.getLogger(__name__)

# Only one object is expected per short id; the bound keeps a delete to a
# small constant number of round trips.
MAX_OBJECTS_PER_SHORT_ID = 10


class DeletionService:
    """
    Orchestrates the delete workflow.

    Lists the short id prefix, then deletes every match concurrently and
    waits for all of them. A failure in any single delete fails the whole
    operation without saying which objects were removed; there is no
    rollback and no retry, so callers retrying must accept NotFound.
    """

    def __init__(
        self,
        storage: IObjectStorageRepository,
        authorizer: SharedSecretAuthorizer,
        event_publisher: Optional[EventPublisher] = None,
        max_objects: int = MAX_OBJECTS_PER_SHORT_ID,
    ):
        self.storage = storage
        self.authorizer = authorizer
        self.event_publisher = event_publisher
        self.max_objects = max_objects

    def delete(self, auth_token: Optional[str], short_id: Optional[str]) -> int:
        """
        Delete the file(s) behind a short id.

        Args:
            auth_token: Presented shared secret
            short_id: Short id from the query string

        Returns:
            Number of objects targeted for deletion

        Raises:
            UnauthorizedError: Token missing or wrong
            BadRequestError: short_id missing
            ShortLinkNotFoundError: Nothing stored under the short id
            StorageFailureError: Listing or any delete call failed
        """
        if not self.authorizer.is_authorized(auth_token):
            raise UnauthorizedError("Invalid or missing access key")

        if not short_id or not short_id.strip():
            raise BadRequestError("Short ID is required")

        short_id = short_id.strip()
        if not ShortId.is_valid(short_id):
            raise ShortLinkNotFoundError(f"No file for short id {short_id!r}")

        sid = ShortId(short_id)
        try:
            objects = self.storage.list_objects(sid.prefix, max_keys=self.max_objects)
        except Exception as e:
            self._publish_failure(sid, str(e))
            raise StorageFailureError(
                f"Failed to list objects for {sid.value}", original_error=e
            ) from e

        if not objects:
            raise ShortLinkNotFoundError(f"No file for short id {sid.value}")

        keys = [obj.key for obj in objects]
        errors = self._delete_all(keys)
        if errors:
            logger.error(
                "Delete of %s failed for %d of %d object(s)",
                sid.value,
                len(errors),
                len(keys),
            )
            self._publish_failure(sid, str(errors[0]))
            raise StorageFailureError(
                f"Failed to delete objects for {sid.value}", original_error=errors[0]
            ) from errors[0]

        if self.event_publisher is not None:
            self.event_publisher.publish(FileDeletedEvent(
                aggregate_id=sid.value,
                occurred_at=datetime.utcnow(),
                deleted_count=len(keys),
            ))
        return len(keys)

    def _delete_all(self, keys):
        """Fan out one delete per key and return the exceptions raised, if any."""
        if len(keys) == 1:
            try:
                self.storage.delete_object(keys[0])
            except Exception as e:
                return [e]
            return []

        with ThreadPoolExecutor(max_workers=len(keys)) as executor:
            futures = [executor.submit(self.storage.delete_object, key) for key in keys]
            wait(futures)

        return [f.exception() for f in futures if f.exception() is not None]

    def _publish_failure(self, sid: ShortId, message: str) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(StorageOperationFailedEvent(
                aggregate_id=sid.value,
                occurred_at=datetime.utcnow(),
                operation="delete",
                error_message=message,
            ))
