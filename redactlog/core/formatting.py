"""Turn logger arguments into a single message string.

Arguments are first normalised one by one with ``format_value`` and then
combined printf-style by ``format_message``:

- ``%s`` text, ``%d``/``%i`` integer, ``%f`` float
- ``%j``, ``%o``, ``%O`` JSON (text arguments are inserted as they are)
- ``%%`` a literal percent sign

Placeholders without a matching argument stay in the output verbatim and
arguments without a placeholder are appended, separated by spaces.
"""

import json
import math
import re
import traceback
from typing import Any

from pydantic import BaseModel

from .exceptions import LogFormatError

_PLACEHOLDER = re.compile(r"%([sdifjoO%])")


def format_value(value: Any) -> Any:
    """Normalise one logger argument.

    Strings and numbers pass through so numeric placeholders can still use
    them; everything else is rendered to text here.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return "null"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, BaseException):
        return _format_exception(value)
    if isinstance(value, BaseModel):
        return json.dumps(value.model_dump(mode="json"), separators=(",", ":"))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def _format_exception(exc: BaseException) -> str:
    summary = f"{type(exc).__name__}: {exc}"
    if exc.__traceback__ is None:
        return summary
    stack = "".join(traceback.format_tb(exc.__traceback__))
    return f"{summary}\n{stack.rstrip()}"


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return str(format_value(value))


def _to_number(value: Any, placeholder: str) -> float:
    if isinstance(value, bool):
        raise LogFormatError(placeholder, value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise LogFormatError(placeholder, value) from e


def _convert(placeholder: str, value: Any) -> str:
    if placeholder == "s":
        return _to_text(value)
    if placeholder in ("d", "i"):
        number = _to_number(value, placeholder)
        # nan and inf have no integer form
        if isinstance(number, float) and not math.isfinite(number):
            return str(number)
        return str(int(number))
    if placeholder == "f":
        return str(float(_to_number(value, placeholder)))
    # j, o, O: containers were already rendered to JSON by format_value
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str, separators=(",", ":"))


def format_message(fmt: Any, *args: Any) -> str:
    """Combine a format string and its arguments.

    Raises
    ------
        LogFormatError: A numeric placeholder got a non-numeric argument

    """
    if not isinstance(fmt, str):
        return " ".join(_to_text(part) for part in (fmt, *args))
    if not args:
        return fmt

    remaining = iter(args)
    consumed = 0

    def replace(match: re.Match[str]) -> str:
        nonlocal consumed
        placeholder = match.group(1)
        if placeholder == "%":
            return "%"
        if consumed >= len(args):
            return match.group(0)
        consumed += 1
        return _convert(placeholder, next(remaining))

    message = _PLACEHOLDER.sub(replace, fmt)
    extra = [_to_text(value) for value in remaining]
    if extra:
        message = " ".join([message, *extra])
    return message


def resolve_message(level: Any, *args: Any) -> str:
    """Build the message for a logger call.

    With no arguments after ``level`` the level itself is the message text.
    """
    if not args:
        return _to_text(level)
    values = [format_value(arg) for arg in args]
    return format_message(*values)
