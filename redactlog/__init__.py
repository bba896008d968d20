"""Redacting log formatter.

Formats log calls, masks the values of configured ``key=value`` tokens and
publishes the result to event listeners::

    import redactlog

    redactlog.censor(["password"])
    redactlog.log("INFO", "login attempt password=%s", "hunter2")
    # -> "login attempt password=[redacted]"
"""

from .core import (
    CensorFilter,
    EventBus,
    LogConfig,
    LogEvent,
    LogFormatError,
    StructlogForwarder,
    configure_logging,
    get_logger,
)
from .core.censor import REDACTION_MARKER, CensorPolicy, LiteralKey, PatternKey, redact
from .logger import (
    BoundLogger,
    Logger,
    censor,
    default_logger,
    defaults,
    in_prod_env,
    in_test_env,
    log,
    to_investigate_tomorrow,
    wake_me_in_the_middle_of_the_night,
)

__version__ = "0.1.0"

__all__ = [
    "BoundLogger",
    "CensorFilter",
    "CensorPolicy",
    "EventBus",
    "LiteralKey",
    "LogConfig",
    "LogEvent",
    "LogFormatError",
    "Logger",
    "PatternKey",
    "REDACTION_MARKER",
    "StructlogForwarder",
    "censor",
    "configure_logging",
    "default_logger",
    "defaults",
    "get_logger",
    "in_prod_env",
    "in_test_env",
    "log",
    "redact",
    "to_investigate_tomorrow",
    "wake_me_in_the_middle_of_the_night",
]
