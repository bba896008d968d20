"""Key=value redaction engine."""

from .keys import LiteralKey, PatternKey, RedactionKey, count_groups, escape_key, to_redaction_key
from .matcher import TokenMatch, build_token_pattern, iter_tokens
from .policy import CensorPolicy, default_policy
from .redactor import REDACTION_MARKER, Redactor, redact, redact_key, redact_with_stats

__all__ = [
    "CensorPolicy",
    "LiteralKey",
    "PatternKey",
    "REDACTION_MARKER",
    "RedactionKey",
    "Redactor",
    "TokenMatch",
    "build_token_pattern",
    "count_groups",
    "default_policy",
    "escape_key",
    "iter_tokens",
    "redact",
    "redact_key",
    "redact_with_stats",
    "to_redaction_key",
]
