"""Censor policy: the ordered set of keys subject to redaction."""

from re import Pattern
from typing import Any

import structlog

from .keys import RedactionKey, to_redaction_key

logger = structlog.get_logger(__name__)

# Sentinel so that censor() and censor(None) stay distinguishable in signatures
MISSING: Any = object()


class CensorPolicy:
    """Holds the keys whose values get masked.

    The stored keys are an immutable tuple swapped in a single assignment, so
    readers on other threads only ever see the old or the new set.
    """

    def __init__(self, keys: list[Any] | tuple[Any, ...] | None = None) -> None:
        self._keys: tuple[RedactionKey, ...] = ()
        if keys is not None:
            self.set(keys)

    @property
    def keys(self) -> tuple[RedactionKey, ...]:
        """Resolved keys in application order."""
        return self._keys

    def get(self) -> list[str | Pattern[str]]:
        """Return the configured keys as they were given."""
        return [key.value for key in self._keys]

    def set(self, keys: Any) -> list[str | Pattern[str]]:
        """Replace the stored keys with a de-duplicated copy of ``keys``.

        Anything other than a list or tuple leaves the policy untouched.
        """
        if not isinstance(keys, (list, tuple)):
            return self.get()

        unique: list[RedactionKey] = []
        for item in keys:
            key = to_redaction_key(item)
            if key not in unique:
                unique.append(key)

        self._keys = tuple(unique)
        logger.debug("Censor policy updated", key_count=len(unique))
        return self.get()

    def clear(self) -> None:
        self._keys = ()

    def __call__(self, keys: Any = MISSING) -> list[str | Pattern[str]]:
        if keys is MISSING:
            return self.get()
        return self.set(keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"CensorPolicy({self.get()!r})"


# Shared by the module-level logger
default_policy = CensorPolicy()
