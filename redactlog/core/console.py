"""Rich console renderer for redacted structured logs.

This module provides a structlog renderer that prints log events through
Rich with coloured levels and indented key/value details.
"""

import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

# Create a shared console instance
console = Console(stderr=True)


class RichConsoleRenderer:
    """Custom console renderer using Rich."""

    def __init__(
        self,
        show_path: bool = True,
        show_timestamp: bool = True,
        output: Console | None = None,
    ) -> None:
        """Initialize the Rich console renderer.

        Args:
        ----
            show_path: Whether to show logger name and source location
            show_timestamp: Whether to show timestamp
            output: Console to print to, the shared stderr console by default

        """
        self.show_path = show_path
        self.show_timestamp = show_timestamp
        self.console = output or console

        self.level_styles = {
            "debug": "dim cyan",
            "info": "green",
            "warning": "yellow",
            "warn": "yellow",
            "error": "red bold",
            "critical": "red bold reverse",
        }

    def __call__(self, _: Any, __: str, event_dict: dict[str, Any]) -> str:
        """Render log event using Rich.

        Returns
        -------
            Empty string (Rich prints directly to the console)

        """
        event_dict = dict(event_dict)
        level = str(event_dict.pop("level", "info")).lower()
        msg = event_dict.pop("event", "")
        timestamp = event_dict.pop("timestamp", None)
        logger_name = event_dict.pop("logger", None)
        filename = event_dict.pop("filename", None)
        lineno = event_dict.pop("lineno", None)
        event_dict.pop("func_name", None)

        style = self.level_styles.get(level, "white")
        output_parts = []

        if self.show_timestamp and timestamp:
            output_parts.append(f"[dim]{timestamp}[/dim]")

        output_parts.append(f"[{style}]{level.upper():>8}[/{style}]")

        if self.show_path and logger_name:
            location = logger_name
            if filename and lineno:
                location = f"{location} {filename}:{lineno}"
            output_parts.append(f"[dim blue]{escape(location)}[/dim blue]")

        output_parts.append(f"[bold]{escape(str(msg))}[/bold]")
        self.console.print(" │ ".join(output_parts))

        exc_info = event_dict.pop("exc_info", None)
        if exc_info:
            if exc_info is True:
                exc_info = sys.exc_info()
            if isinstance(exc_info, tuple) and len(exc_info) >= 3 and exc_info[0]:
                self.console.print(
                    Traceback.from_exception(exc_info[0], exc_info[1], exc_info[2])
                )

        if event_dict:
            self._render_extra_fields(event_dict, indent=2)

        return ""

    def _render_extra_fields(self, fields: dict[str, Any], indent: int = 0) -> None:
        """Render additional fields as indented key/value lines."""
        skip_fields = {"_record", "_from_structlog"}
        fields = {k: v for k, v in fields.items() if k not in skip_fields}

        indent_str = " " * indent
        for key, value in fields.items():
            if isinstance(value, dict):
                self.console.print(f"{indent_str}[dim cyan]{escape(str(key))}:[/dim cyan]")
                self._render_extra_fields(value, indent + 2)
            else:
                self.console.print(
                    f"{indent_str}[dim cyan]{escape(str(key))}:[/dim cyan] {escape(str(value))}"
                )
