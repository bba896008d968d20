"""Global pytest configuration and fixtures."""
import logging
from collections.abc import Generator

import pytest
import structlog

from redactlog.core.censor import CensorPolicy, default_policy
from redactlog.core.events import EventBus, LogEvent, default_bus
from redactlog.logger import Logger


@pytest.fixture(autouse=True)
def restore_shared_state() -> Generator[None, None, None]:
    """Undo changes to the module-level policy, bus and logging setup."""
    saved_keys = default_policy.get()
    saved_listeners = default_bus.listeners
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    yield

    default_policy.set(saved_keys)
    default_bus.clear()
    for listener in saved_listeners:
        default_bus.subscribe(listener)
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()


@pytest.fixture
def policy() -> CensorPolicy:
    """Empty censor policy."""
    return CensorPolicy()


@pytest.fixture
def bus() -> EventBus:
    """Event bus with no listeners."""
    return EventBus()


@pytest.fixture
def events(bus: EventBus) -> list[LogEvent]:
    """Events published on ``bus``, in order."""
    received: list[LogEvent] = []
    bus.subscribe(received.append)
    return received


@pytest.fixture
def logger(policy: CensorPolicy, bus: EventBus) -> Logger:
    """Logger wired to the ``policy`` and ``bus`` fixtures."""
    return Logger(policy=policy, bus=bus)
