"""Logging configuration for redacting structured logging with structlog.

This module configures the logging system with:
- Environment-based log levels
- Censor keys and patterns read from the environment
- JSON formatting for production
- Console formatting for development
- Forwarding of published log events into structlog
"""

import logging
import os
import re
import sys
from enum import Enum
from re import Pattern
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .filters import CensorFilter, StructlogForwarder

if TYPE_CHECKING:
    from ..logger import Logger


class LogLevel(str, Enum):
    """Log levels supported by the logging backend."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    CONSOLE = "console"


class LogConfig(BaseSettings):
    """Configuration for the logging system.

    This class reads configuration from environment variables with the prefix LOG_.
    For example:
    - LOG_LEVEL=DEBUG
    - LOG_FORMAT=console
    - LOG_CENSOR_KEYS='["password", "token"]'

    Attributes
    ----------
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (json or console)
        add_timestamp: Whether to add timestamp to logs
        add_caller_info: Whether to add file/line information
        censor_keys: Literal keys whose values are redacted
        censor_patterns: Regular expressions matching keys to redact
        forward_events: Whether published log events are written to structlog

    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: LogLevel = Field(
        default=LogLevel.INFO, description="Minimum log level to output"
    )
    format: LogFormat = Field(
        default=LogFormat.JSON, description="Output format for logs"
    )
    add_timestamp: bool = Field(
        default=True, description="Add timestamp to log entries"
    )
    add_caller_info: bool = Field(
        default=False, description="Add source file and line number"
    )
    censor_keys: list[str] = Field(
        default_factory=list, description="Literal keys to redact"
    )
    censor_patterns: list[str] = Field(
        default_factory=list, description="Regex patterns of keys to redact"
    )
    forward_events: bool = Field(
        default=True, description="Write published log events through structlog"
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate and convert log level to uppercase."""
        if isinstance(v, str):
            level = v.upper()
            return "WARNING" if level == "WARN" else level
        return v

    @field_validator("format", mode="before")
    @classmethod
    def validate_format_for_env(cls, v: Any) -> str:
        """Set format based on environment if not explicitly set."""
        if v is None or v == "":
            env = os.getenv("ENVIRONMENT", "production").lower()
            return "console" if env in ("development", "dev", "local") else "json"
        return v

    @field_validator("censor_patterns")
    @classmethod
    def validate_censor_patterns(cls, v: list[str]) -> list[str]:
        """Reject patterns that do not compile."""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid censor pattern {pattern!r}: {e}") from e
        return v

    def redaction_keys(self) -> list[str | Pattern[str]]:
        """Literal keys followed by the compiled patterns."""
        return [*self.censor_keys, *(re.compile(p) for p in self.censor_patterns)]


def _create_processor_chain(config: LogConfig, censor_filter: CensorFilter) -> list:
    """Create the processor chain shared by structlog and stdlib records.

    Args:
    ----
        config: Logging configuration
        censor_filter: Redaction processor, run once positional arguments
            are merged into the message

    Returns:
    -------
        List of processors for structlog, without the final renderer

    """
    processors: list = [
        structlog.stdlib.PositionalArgumentsFormatter(),
        censor_filter,
    ]

    if config.add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    processors.extend(
        [
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
        ]
    )

    if config.add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    return processors


def _create_renderer(format_type: LogFormat) -> Any:
    """Create the final renderer for the configured format."""
    if format_type == LogFormat.CONSOLE:
        from .console import RichConsoleRenderer

        return RichConsoleRenderer(show_path=True, show_timestamp=True)
    return structlog.processors.JSONRenderer()


def configure_logging(
    config: LogConfig | None = None, logger: "Logger | None" = None
) -> StructlogForwarder | None:
    """Configure structlog and the stdlib root logger for redaction.

    This function sets up:
    - Standard library logging integration
    - Structlog configuration with the censor filter ahead of all renderers
    - The censor policy of ``logger``, when keys are configured
    - Forwarding of ``logger``'s events into structlog

    If no config is provided, it will read from environment variables.

    Args:
    ----
        config: Logging configuration. If None, reads from environment.
        logger: Logger whose policy and event bus are wired. Defaults to the
            module-level logger.

    Returns:
    -------
        The forwarder subscribed to the logger's event bus, if any

    """
    if config is None:
        config = LogConfig()
    if logger is None:
        from ..logger import default_logger

        logger = default_logger

    censor_filter = CensorFilter(logger.policy)
    processors = _create_processor_chain(config, censor_filter)
    renderer = _create_renderer(config.format)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(config.level.value)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(config.level.value)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=processors,
        )
    )
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    keys = config.redaction_keys()
    if keys:
        logger.censor(keys)

    if not config.forward_events:
        return None

    for listener in logger.bus.listeners:
        if isinstance(listener, StructlogForwarder):
            return listener
    return logger.bus.subscribe(StructlogForwarder())


def get_logger(name: str | None = None, **kwargs: Any) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
    ----
        name: Logger name. If None, uses calling module name.
        **kwargs: Additional context to bind to the logger

    Returns:
    -------
        Configured structlog logger instance

    """
    logger = structlog.get_logger(name)

    if kwargs:
        logger = logger.bind(**kwargs)

    return logger
