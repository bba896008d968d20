"""Tests for message redaction."""
import re

import pytest

from redactlog.core.censor import CensorPolicy, Redactor, redact, redact_key
from redactlog.core.censor.keys import LiteralKey

pytestmark = pytest.mark.unit


class TestRedact:
    """Test redaction of key=value tokens."""

    @pytest.mark.parametrize(
        "key,value",
        [
            ("password", "hunter2"),
            ("api.key", "abc-123"),
            ("x-token", "eyJhbGciOi.payload.sig"),
            ("card[number]", "4111111111111111"),
        ],
    )
    def test_unquoted_value_is_masked(self, key, value):
        """Test that K=V becomes K=[redacted] for literal keys."""
        assert redact(f"{key}={value}", [key]) == f"{key}=[redacted]"

    def test_quoted_value_is_masked_including_quotes(self):
        assert redact('K="a b c"', ["K"]) == "K=[redacted]"

    def test_surrounding_text_is_preserved(self):
        message = "login attempt password=hunter2 from 10.0.0.1"

        assert redact(message, ["password"]) == "login attempt password=[redacted] from 10.0.0.1"

    def test_single_character_value_is_left_alone(self):
        assert redact("K=x", ["K"]) == "K=x"

    def test_every_occurrence_is_masked(self):
        message = "password=a1 retry password=b2"

        assert redact(message, ["password"]) == "password=[redacted] retry password=[redacted]"

    def test_keys_apply_regardless_of_position(self):
        """Test that policy order does not depend on text order."""
        message = "token=zzz9 user=bob password=abc1"

        assert redact(message, ["password", "token"]) == (
            "token=[redacted] user=bob password=[redacted]"
        )

    def test_redaction_is_idempotent(self):
        """Test that redacting twice gives the same result."""
        keys = ["password", "token", re.compile("(user|pass)")]
        once = redact('password=abc token="x y" user=bob pass=word', keys)

        assert redact(once, keys) == once

    def test_regex_key_with_group(self):
        """Test that keys with their own capture groups are reconstructed."""
        message = "user=secret1 pass=secret2"

        assert redact(message, [re.compile("(user|pass)")]) == "user=[redacted] pass=[redacted]"

    def test_regex_key_keeps_full_key_text(self):
        """Test that the whole matched key is kept, not just its inner group."""
        message = "password=abc12 pass=xyz99"

        assert redact(message, [re.compile(r"pass(word)?")]) == (
            "password=[redacted] pass=[redacted]"
        )

    def test_escaped_literal_does_not_act_as_regex(self):
        assert redact("aXb=value", ["a.b"]) == "aXb=value"
        assert redact("a.b=value", ["a.b"]) == "a.b=[redacted]"

    def test_key_is_matched_as_suffix(self):
        """Test that keys are not anchored to word boundaries."""
        assert redact("old_password=secret", ["password"]) == "old_password=[redacted]"

    def test_no_keys_leaves_message_unchanged(self):
        assert redact("password=secret", []) == "password=secret"

    def test_no_match_leaves_message_unchanged(self):
        assert redact("nothing to hide here", ["password"]) == "nothing to hide here"


class TestRedactKey:
    """Test a single key pass."""

    def test_reports_replacements(self):
        message, count = redact_key("a=11 b=22 a=33", LiteralKey("a"))

        assert message == "a=[redacted] b=22 a=[redacted]"
        assert count == 2

    def test_already_masked_tokens_are_not_counted(self):
        message, count = redact_key("a=[redacted]", LiteralKey("a"))

        assert message == "a=[redacted]"
        assert count == 0


class TestRedactor:
    """Test the policy-backed redactor."""

    def test_follows_live_policy(self):
        """Test that policy updates apply to the next redaction."""
        policy = CensorPolicy()
        redactor = Redactor(policy)

        assert redactor.redact("token=abc") == "token=abc"

        policy.set(["token"])
        assert redactor.redact("token=abc") == "token=[redacted]"

    def test_count(self):
        redactor = Redactor(CensorPolicy(["token", "password"]))

        assert redactor.count("token=abc password=def other=ghi") == 2
        assert redactor.count("nothing") == 0
