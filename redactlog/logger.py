"""Redacting loggers.

A ``Logger`` formats its arguments, masks the values of censored keys and
publishes the result as a ``LogEvent``. ``Logger.defaults`` produces bound
loggers that append preset arguments to every call.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from re import Pattern
from typing import Any

from .core.censor import CensorPolicy, Redactor, default_policy
from .core.censor.policy import MISSING
from .core.events import EventBus, default_bus
from .core.formatting import resolve_message

DEBUG = "DEBUG"
INFO = "INFO"
WARN = "WARN"
ERROR = "ERROR"


def union(*sequences: Iterable[Any]) -> list[Any]:
    """Concatenate ``sequences`` keeping the first occurrence of equal items.

    Items only count as equal when their types match too, so ``1``, ``1.0``
    and ``True`` are all kept.
    """
    merged: list[Any] = []
    for sequence in sequences:
        for item in sequence:
            if not any(type(seen) is type(item) and seen == item for seen in merged):
                merged.append(item)
    return merged


class _SeverityShortcuts(ABC):
    """Fixed-level helpers shared by loggers and bound loggers."""

    @abstractmethod
    def __call__(self, level: Any, *args: Any) -> str:
        """Log ``args`` at ``level`` and return the redacted message."""

    def in_test_env(self, *args: Any) -> str:
        return self(DEBUG, *args)

    def in_prod_env(self, *args: Any) -> str:
        return self(INFO, *args)

    def to_investigate_tomorrow(self, *args: Any) -> str:
        return self(WARN, *args)

    def wake_me_in_the_middle_of_the_night(self, *args: Any) -> str:
        return self(ERROR, *args)


class Logger(_SeverityShortcuts):
    """Format, redact and publish log messages.

    Args:
    ----
        policy: Censor policy to apply. A fresh, empty one when omitted.
        bus: Event bus receiving the log events. A fresh one when omitted.

    """

    def __init__(
        self,
        policy: CensorPolicy | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.policy = policy if policy is not None else CensorPolicy()
        self.bus = bus if bus is not None else EventBus()
        self.redactor = Redactor(self.policy)

    def __call__(self, level: Any, *args: Any) -> str:
        """Log a message and return it after redaction.

        ``logger("INFO", "user=%s", name)`` formats the arguments; a single
        argument, ``logger("text")``, is logged as the message with no level.
        """
        message = resolve_message(level, *args)
        message = self.redactor.redact(message)
        self.bus.emit(level if args else None, message)
        return message

    log = __call__

    def censor(self, keys: Any = MISSING) -> list[str | Pattern[str]]:
        """Get the censored keys, or replace them when a list is given."""
        return self.policy(keys)

    def defaults(self, *args: Any) -> "BoundLogger":
        """Return a logger appending ``args`` to every call."""
        return BoundLogger(self, args)


class BoundLogger(_SeverityShortcuts):
    """A logger with preset trailing arguments.

    Caller arguments come first; defaults equal to a caller argument are
    dropped.
    """

    def __init__(self, parent: Logger, default_args: Iterable[Any] = ()) -> None:
        self.parent = parent
        self.default_args = tuple(default_args)

    @property
    def policy(self) -> CensorPolicy:
        return self.parent.policy

    @property
    def bus(self) -> EventBus:
        return self.parent.bus

    def __call__(self, level: Any, *args: Any) -> str:
        return self.parent(*union((level, *args), self.default_args))

    log = __call__

    def censor(self, keys: Any = MISSING) -> list[str | Pattern[str]]:
        return self.parent.censor(keys)

    def defaults(self, *args: Any) -> "BoundLogger":
        """Chain further defaults after the current ones."""
        return BoundLogger(self.parent, union(self.default_args, args))

    def __repr__(self) -> str:
        return f"BoundLogger(defaults={list(self.default_args)!r})"


default_logger = Logger(policy=default_policy, bus=default_bus)

log = default_logger.log
censor = default_logger.censor
defaults = default_logger.defaults
in_test_env = default_logger.in_test_env
in_prod_env = default_logger.in_prod_env
to_investigate_tomorrow = default_logger.to_investigate_tomorrow
wake_me_in_the_middle_of_the_night = default_logger.wake_me_in_the_middle_of_the_night
