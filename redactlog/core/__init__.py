"""Building blocks of redactlog: censor engine, formatting, events and logging setup."""

from .config import LogConfig, LogFormat, LogLevel, configure_logging, get_logger
from .events import LOG_EVENT_NAME, EventBus, LogEvent, default_bus
from .exceptions import LogFormatError, RedactLogError
from .filters import CensorFilter, StructlogForwarder, create_censor_filter
from .formatting import format_message, format_value, resolve_message

__all__ = [
    "CensorFilter",
    "EventBus",
    "LOG_EVENT_NAME",
    "LogConfig",
    "LogEvent",
    "LogFormat",
    "LogFormatError",
    "LogLevel",
    "RedactLogError",
    "StructlogForwarder",
    "configure_logging",
    "create_censor_filter",
    "default_bus",
    "format_message",
    "format_value",
    "get_logger",
    "resolve_message",
]
