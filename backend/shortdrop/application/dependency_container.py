"""
Dependency Injection Container

Holds the services built by the app factory. Routes look them up through
current_app.container, and tests swap them with override().
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SINGLETON = "singleton"
TRANSIENT = "transient"
OVERRIDE = "override"
NOT_REGISTERED = "not_registered"


class DependencyNotFoundError(Exception):
    """Raised when resolving a type nobody registered."""
    pass


class DependencyContainer:
    """
    Registry mapping a type to a shared instance or to a factory.

    Overrides sit on top of the registry and win until cleared. Lookups are
    guarded by one lock; factories run outside it so they may resolve other
    services.
    """

    def __init__(self):
        self._registry: Dict[Type, Tuple[str, Any]] = {}
        self._overrides: Dict[Type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """Share one instance for every resolve() of interface."""
        self._register(interface, SINGLETON, implementation)

    def register_transient(self, interface: Type[T], factory: Callable[[], T]) -> None:
        """Call factory on every resolve() of interface."""
        self._register(interface, TRANSIENT, factory)

    def resolve(self, interface: Type[T]) -> T:
        """
        Look up the service registered for interface.

        Raises:
            DependencyNotFoundError: If nothing is registered for it
        """
        with self._lock:
            if interface in self._overrides:
                return self._overrides[interface]
            entry = self._registry.get(interface)

        if entry is None:
            raise DependencyNotFoundError(
                f"No registration found for type: {interface.__name__}"
            )

        kind, value = entry
        return value() if kind == TRANSIENT else value

    def override(self, interface: Type[T], implementation: T) -> None:
        """Replace whatever is registered for interface until clear_overrides()."""
        with self._lock:
            self._overrides[interface] = implementation
        logger.debug(f"Overridden: {interface.__name__}")

    def clear_overrides(self) -> None:
        with self._lock:
            self._overrides.clear()

    def is_registered(self, interface: Type) -> bool:
        return self.get_registration_type(interface) != NOT_REGISTERED

    def get_registration_type(self, interface: Type) -> str:
        """Return 'override', 'singleton', 'transient' or 'not_registered'."""
        with self._lock:
            if interface in self._overrides:
                return OVERRIDE
            entry = self._registry.get(interface)
        return entry[0] if entry else NOT_REGISTERED

    def setup_event_handlers(
        self, event_publisher, event_handler_classes: Optional[List[Type]] = None
    ) -> None:
        """
        Subscribe event handlers to every domain event.

        Args:
            event_publisher: EventPublisher to subscribe to
            event_handler_classes: Handler classes exposing handle(event).
                Defaults to LoggingEventHandler on the 'shortdrop' logger.
        """
        from shortdrop.domain.events import DomainEvent
        from shortdrop.infrastructure.event_handlers.logging_handler import (
            LoggingEventHandler,
        )

        for handler_class in event_handler_classes or [LoggingEventHandler]:
            if handler_class is LoggingEventHandler:
                handler = handler_class(logging.getLogger("shortdrop"))
            else:
                handler = handler_class()
            event_publisher.subscribe(DomainEvent, handler.handle)
            logger.debug(f"Subscribed {handler_class.__name__} to domain events")

    def _register(self, interface: Type, kind: str, value: Any) -> None:
        with self._lock:
            self._registry[interface] = (kind, value)
        logger.debug(f"Registered {kind}: {interface.__name__}")
