"""
In-process event bus (Observer pattern).

Services publish domain events after a successful mutation; handlers are
plain callables. ``LoggingHandler`` is registered at startup so every change
to the store leaves a structured log line.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    entity_type: str
    entity_id: Any
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass
class EntityCreatedEvent(DomainEvent):
    pass


@dataclass
class EntityUpdatedEvent(DomainEvent):
    old_values: Dict[str, Any] = field(default_factory=dict)
    new_values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EntityDeletedEvent(DomainEvent):
    pass


@dataclass
class StatusChangedEvent(DomainEvent):
    old_status: Optional[str] = None
    new_status: Optional[str] = None
    reason: Optional[str] = None


Handler = Callable[[DomainEvent], None]


class EventBus:
    def __init__(self):
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                # The mutation is already committed.
                logger.exception("event_handler_failed event=%s handler=%r", event.name, handler)


class LoggingHandler:
    def __call__(self, event: DomainEvent) -> None:
        extra = {"event": event.name, "entity_type": event.entity_type, "entity_id": event.entity_id}
        if isinstance(event, StatusChangedEvent):
            extra.update(old_status=event.old_status, new_status=event.new_status)
        elif isinstance(event, EntityUpdatedEvent) and event.new_values:
            extra["changed_fields"] = sorted(event.new_values)
        logger.info("domain_event %s %s:%s", event.name, event.entity_type, event.entity_id, extra=extra)


_event_bus = EventBus()
_logging_handler = LoggingHandler()


def get_event_bus() -> EventBus:
    return _event_bus


def configure_event_bus() -> EventBus:
    bus = get_event_bus()
    bus.subscribe(_logging_handler)
    return bus

