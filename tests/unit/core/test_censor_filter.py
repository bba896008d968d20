"""Tests for the structlog censor filter and event forwarder."""
import io

import pytest
from rich.console import Console
from structlog.testing import capture_logs

from redactlog.core.censor import CensorPolicy
from redactlog.core.console import RichConsoleRenderer
from redactlog.core.events import LogEvent
from redactlog.core.filters import CensorFilter, StructlogForwarder, create_censor_filter

pytestmark = pytest.mark.unit


class TestCensorFilter:
    """Test redaction inside structlog event dicts."""

    def test_nested_values_are_redacted(self):
        """Test that strings in nested structures are scanned."""
        censor_filter = CensorFilter(CensorPolicy(["password"]))

        event_dict = {
            "event": "login password=hunter2",
            "request": {"query": "user=bob password=abc12"},
            "attempts": ["password=first1", ("password=second2", 3)],
            "count": 5,
        }

        result = censor_filter(None, "info", event_dict)

        assert result["event"] == "login password=[redacted]"
        assert result["request"] == {"query": "user=bob password=[redacted]"}
        assert result["attempts"] == ["password=[redacted]", ("password=[redacted]", 3)]
        assert result["count"] == 5
        assert result["_censored"] == 4

    def test_keys_of_event_dict_are_not_scanned(self):
        censor_filter = CensorFilter(CensorPolicy(["password"]))

        result = censor_filter(None, "info", {"password=abc": "value"})

        assert result == {"password=abc": "value"}

    def test_clean_event_has_no_statistics(self):
        censor_filter = CensorFilter(CensorPolicy(["password"]))

        result = censor_filter(None, "info", {"event": "nothing to hide"})

        assert result == {"event": "nothing to hide"}

    def test_already_redacted_message_is_not_counted(self):
        censor_filter = CensorFilter(CensorPolicy(["password"]))

        result = censor_filter(None, "info", {"event": "password=[redacted]"})

        assert "_censored" not in result

    def test_empty_policy_returns_event_untouched(self):
        censor_filter = CensorFilter(CensorPolicy())
        event_dict = {"event": "password=hunter2"}

        assert censor_filter(None, "info", event_dict) is event_dict

    def test_follows_policy_updates(self):
        policy = CensorPolicy()
        censor_filter = create_censor_filter(policy=policy)

        policy.set(["token"])

        assert censor_filter(None, "info", {"event": "token=abc"})["event"] == "token=[redacted]"


class TestStructlogForwarder:
    """Test writing published events through structlog."""

    @pytest.mark.parametrize(
        "level,method",
        [
            ("DEBUG", "debug"),
            ("INFO", "info"),
            ("WARN", "warning"),
            ("ERROR", "error"),
            ("custom", "info"),
            (None, "info"),
        ],
    )
    def test_level_mapping(self, level, method):
        forwarder = StructlogForwarder()

        with capture_logs() as logs:
            forwarder(LogEvent(level=level, message="password=[redacted]"))

        assert logs == [
            {"event": "password=[redacted]", "level_tag": level, "log_level": method}
        ]


class TestRichConsoleRenderer:
    """Test console rendering of events."""

    def test_renders_message_and_fields(self):
        buffer = io.StringIO()
        renderer = RichConsoleRenderer(
            output=Console(file=buffer, width=200, color_system=None)
        )

        result = renderer(
            None,
            "info",
            {
                "event": "login password=[redacted]",
                "level": "warning",
                "logger": "redactlog",
                "timestamp": "2025-06-20T10:00:00Z",
                "user": "bob",
            },
        )

        output = buffer.getvalue()
        assert result == ""
        assert "login password=[redacted]" in output
        assert "WARNING" in output
        assert "redactlog" in output
        assert "2025-06-20T10:00:00Z" in output
        assert "user: bob" in output

    def test_does_not_mutate_event_dict(self):
        renderer = RichConsoleRenderer(
            output=Console(file=io.StringIO(), color_system=None)
        )
        event_dict = {"event": "hello", "level": "info"}

        renderer(None, "info", event_dict)

        assert event_dict == {"event": "hello", "level": "info"}
