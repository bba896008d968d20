"""Log event publication.

Every logger call ends in a ``LogEvent`` handed to the listeners of an
``EventBus``. Delivery is synchronous, in registration order; a bus without
listeners simply drops the event.
"""

from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

LOG_EVENT_NAME = "log"


@dataclass(frozen=True)
class LogEvent:
    """A finished, already redacted log line."""

    level: str | None
    message: str
    name: str = LOG_EVENT_NAME

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("name")
        return data


Listener = Callable[[LogEvent], Any]


class EventBus:
    """Observer registry for log events."""

    def __init__(self) -> None:
        self._listeners: tuple[Listener, ...] = ()

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return self._listeners

    def subscribe(self, listener: Listener) -> Listener:
        """Register ``listener``; returns it so this works as a decorator."""
        self._listeners = (*self._listeners, listener)
        logger.debug("Log listener subscribed", listener_count=len(self._listeners))
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener``. Unknown listeners are ignored."""
        self._listeners = tuple(item for item in self._listeners if item != listener)

    def clear(self) -> None:
        self._listeners = ()

    def publish(self, event: LogEvent) -> None:
        """Hand ``event`` to every listener. Listener errors propagate."""
        for listener in self._listeners:
            listener(event)

    def emit(self, level: str | None, message: str) -> LogEvent:
        event = LogEvent(level=level, message=message)
        self.publish(event)
        return event


# Shared by the module-level logger
default_bus = EventBus()
