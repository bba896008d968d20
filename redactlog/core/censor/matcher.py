"""Locate ``key=value`` tokens in a formatted message."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
from re import Pattern

# Unquoted: two or more non-blank chars, not opening with a quote.
# Quoted: everything up to the next double quote.
VALUE_PATTERN = r'([^"][^\s]+|"[^"]*")'


@dataclass(frozen=True)
class TokenMatch:
    """A single ``key=value`` occurrence."""

    text: str
    key: str
    value: str
    start: int
    end: int


@lru_cache(maxsize=256)
def build_token_pattern(fragment: str) -> Pattern[str]:
    """Compile the ``(<fragment>)=<value>`` search pattern."""
    return re.compile(f"({fragment})={VALUE_PATTERN}")


def iter_tokens(fragment: str, group_offset: int, message: str) -> Iterator[TokenMatch]:
    """Yield every non-overlapping token for ``fragment`` in ``message``.

    Args:
    ----
        fragment: Regex-safe key fragment from ``escape_key``
        group_offset: Capture groups contributed by the fragment itself
        message: Text to scan

    Yields:
    ------
        TokenMatch objects, left to right

    """
    pattern = build_token_pattern(fragment)
    value_group = 2 + group_offset
    for match in pattern.finditer(message):
        # A miscounted offset can point past the last group
        value = match.group(value_group) if value_group <= pattern.groups else match.group(pattern.groups)
        yield TokenMatch(
            text=match.group(0),
            key=match.group(1),
            value=value or "",
            start=match.start(),
            end=match.end(),
        )
