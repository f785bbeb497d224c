"""
Logging Event Handler

Infrastructure event handler for logging domain events.
Domain layer remains unaware of logging infrastructure.
"""

import logging

from shortdrop.domain.events import (
    DomainEvent,
    FileDeletedEvent,
    FileUploadedEvent,
    ShortLinkResolvedEvent,
    StorageOperationFailedEvent,
)


class LoggingEventHandler:
    """
    Infrastructure event handler for logging domain events.

    Short ids and keys are logged; secrets and file content never are.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize with logger instance.

        Args:
            logger: Python logging.Logger instance
        """
        self.logger = logger

    def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by logging it.

        Args:
            event: Domain event to log
        """
        if isinstance(event, FileUploadedEvent):
            self.logger.info(
                f"File uploaded: short_id={event.aggregate_id} key={event.key} "
                f"content_type={event.content_type} size={event.size}"
            )
        elif isinstance(event, ShortLinkResolvedEvent):
            self.logger.info(
                f"Short link resolved: short_id={event.aggregate_id} key={event.key}"
            )
        elif isinstance(event, FileDeletedEvent):
            self.logger.info(
                f"File deleted: short_id={event.aggregate_id} "
                f"deleted_count={event.deleted_count}"
            )
        elif isinstance(event, StorageOperationFailedEvent):
            self.logger.error(
                f"Storage {event.operation} failed: short_id={event.aggregate_id} "
                f"error={event.error_message}"
            )
        else:
            self.logger.debug(
                f"Unhandled event: {event.__class__.__name__} "
                f"(aggregate_id={event.aggregate_id})"
            )
