"""Redaction keys and their conversion into regex fragments.

A redaction key names the ``key`` part of ``key=value`` tokens that must be
masked. Keys are either literal strings or compiled regular expressions and
are resolved once, when they enter a censor policy.
"""

import re
from dataclasses import dataclass
from re import Pattern
from typing import Any

# Characters that carry meaning inside a regular expression
_SPECIAL_CHARS = re.compile(r"([.?*+^$\[\]\\(){}|-])")


@dataclass(frozen=True)
class LiteralKey:
    """A key matched character for character."""

    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class PatternKey:
    """A key given as a regular expression.

    ``group_count`` is the number of ``(`` characters in ``source``. Escaped
    parentheses and non-capturing groups are counted as well, so patterns
    using them shift the key capture to the wrong group.
    """

    source: str
    group_count: int
    pattern: Pattern[str] | None = None

    @property
    def value(self) -> Pattern[str] | str:
        return self.pattern if self.pattern is not None else self.source


RedactionKey = LiteralKey | PatternKey


def count_groups(source: str) -> int:
    """Count the opening parentheses in a pattern source."""
    return source.count("(")


def to_redaction_key(value: Any) -> RedactionKey:
    """Resolve a string, compiled pattern or existing key into a RedactionKey."""
    if isinstance(value, (LiteralKey, PatternKey)):
        return value
    if isinstance(value, Pattern):
        return PatternKey(
            source=value.pattern,
            group_count=count_groups(value.pattern),
            pattern=value,
        )
    return LiteralKey(str(value))


def escape_key(key: RedactionKey) -> tuple[str, int]:
    """Turn a key into a regex fragment.

    Returns
    -------
        Tuple of (fragment, group_offset). The offset is how many capture
        groups the fragment adds ahead of the value group.

    """
    if isinstance(key, PatternKey):
        return key.source, key.group_count
    return _SPECIAL_CHARS.sub(r"\\\1", key.text), 0
