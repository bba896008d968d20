"""Mask the values of censored keys in a formatted message."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .keys import RedactionKey, escape_key, to_redaction_key
from .matcher import iter_tokens

if TYPE_CHECKING:
    from .policy import CensorPolicy

REDACTION_MARKER = "[redacted]"


def redact_key(message: str, key: RedactionKey) -> tuple[str, int]:
    """Run a single key pass over ``message``.

    Returns
    -------
        Tuple of (redacted_message, number_of_tokens_replaced)

    """
    fragment, offset = escape_key(key)
    parts: list[str] = []
    position = 0
    replaced = 0

    for token in iter_tokens(fragment, offset, message):
        # Already masked; rewriting would produce the same text
        if token.value == REDACTION_MARKER:
            continue
        parts.append(message[position:token.start])
        parts.append(f"{token.key}={REDACTION_MARKER}")
        position = token.end
        replaced += 1

    if not replaced:
        return message, 0

    parts.append(message[position:])
    return "".join(parts), replaced


def redact_with_stats(message: str, keys: Iterable[Any]) -> tuple[str, int]:
    """Apply every key in order, each pass rescanning the current message.

    Keys may be RedactionKeys or raw strings and compiled patterns.
    """
    total = 0
    for key in keys:
        message, replaced = redact_key(message, to_redaction_key(key))
        total += replaced
    return message, total


def redact(message: str, keys: Iterable[Any]) -> str:
    """Return ``message`` with the value of every censored key masked."""
    redacted, _ = redact_with_stats(message, keys)
    return redacted


class Redactor:
    """Redact messages against the live contents of a censor policy."""

    def __init__(self, policy: "CensorPolicy") -> None:
        self.policy = policy

    def redact(self, message: str) -> str:
        return redact(message, self.policy.keys)

    def redact_with_stats(self, message: str) -> tuple[str, int]:
        return redact_with_stats(message, self.policy.keys)

    def count(self, message: str) -> int:
        """Number of tokens that a redaction of ``message`` would replace."""
        _, replaced = self.redact_with_stats(message)
        return replaced
