"""Infrastructure event handlers subscribed to the EventPublisher."""

from .logging_handler import LoggingEventHandler

__all__ = ["LoggingEventHandler"]
