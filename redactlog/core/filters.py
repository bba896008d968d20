"""structlog integration for the censor policy.

``CensorFilter`` masks ``key=value`` tokens inside structlog event dicts so
that messages logged straight through structlog get the same treatment as
those going through a ``Logger``. ``StructlogForwarder`` is the other
direction: an event bus listener writing ``LogEvent``s to structlog.
"""

from typing import Any

import structlog

from .censor import CensorPolicy, Redactor, default_policy
from .events import LogEvent

# Level tags used by the severity shortcuts mapped to stdlib method names
LEVEL_METHODS = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARN": "warning",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "critical",
    "FATAL": "critical",
}


class CensorFilter:
    """Redact censored keys from every string in a log event.

    Keys of the event dict are left alone, only values are scanned. Nested
    dicts, lists and tuples are walked recursively.
    """

    def __init__(self, policy: CensorPolicy | None = None) -> None:
        self.redactor = Redactor(policy if policy is not None else default_policy)

    def redact_value(self, value: Any) -> tuple[Any, int]:
        """Redact a single value of any supported shape.

        Returns
        -------
            Tuple of (redacted_value, number_of_tokens_replaced)

        """
        if isinstance(value, str):
            return self.redactor.redact_with_stats(value)
        if isinstance(value, dict):
            return self.redact_dict(value)
        if isinstance(value, (list, tuple)):
            items = []
            total = 0
            for item in value:
                redacted_item, count = self.redact_value(item)
                items.append(redacted_item)
                total += count
            return type(value)(items), total
        return value, 0

    def redact_dict(self, data: dict[str, Any]) -> tuple[dict[str, Any], int]:
        redacted: dict[str, Any] = {}
        total = 0
        for key, value in data.items():
            redacted[key], count = self.redact_value(value)
            total += count
        return redacted, total

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        """Process log event dict for structlog integration."""
        if not self.redactor.policy.keys:
            return event_dict

        redacted_dict, count = self.redact_dict(event_dict)
        if count:
            redacted_dict["_censored"] = count
        return redacted_dict


class StructlogForwarder:
    """Event bus listener that writes log events through structlog."""

    def __init__(self, logger_name: str = "redactlog") -> None:
        self.logger_name = logger_name

    def __call__(self, event: LogEvent) -> None:
        logger = structlog.get_logger(self.logger_name)
        method = LEVEL_METHODS.get(str(event.level).upper(), "info")
        getattr(logger, method)(event.message, level_tag=event.level)


def create_censor_filter(**kwargs: Any) -> CensorFilter:
    """Create a censor filter.

    Args:
    ----
        **kwargs: Arguments to pass to CensorFilter

    Returns:
    -------
        Configured CensorFilter instance

    """
    return CensorFilter(**kwargs)
