"""Request payloads whose ``b`` field accepts loose boolean spellings."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

_FALSE_WORDS = frozenset({"no", "false", "0"})
_TRUE_WORDS = frozenset({"yes", "true", "1"})


def parse_ne_bool(value: Any) -> bool:
    """Map "yes"/"true"/"1" to True; anything else, including non-strings, is False."""
    if not isinstance(value, str):
        return False
    if value in _TRUE_WORDS:
        return True
    return False


def _format_float(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _format_value(name: str, f: float | None) -> str:
    if f is None:
        raise ValueError(f"field {name!r} is not set")
    return _format_float(f)


@dataclass
class RequestData:
    b: bool = False
    s: str = ""
    f: float | None = None

    def __str__(self) -> str:
        return f"b = {str(self.b).lower()}, s = {self.s}, f = {_format_value('f', self.f)}"


@dataclass
class RawRequestData:
    b: str = ""
    s: str = ""
    f: float | None = None

    def __str__(self) -> str:
        return f"b = {self.b}, s = {self.s}, f = {_format_value('f', self.f)}"


def _load_fields(text: str) -> dict[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError("JSON value is not an object")
    fields: dict[str, Any] = {}
    for key, value in document.items():
        name = key.lower()
        if name in ("b", "s", "f"):
            fields[name] = value
    return fields


def _string_field(fields: dict[str, Any], name: str) -> str | None:
    value = fields.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


def _float_field(fields: dict[str, Any], name: str) -> float | None:
    value = fields.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {name!r} must be a number")
    return float(value)


def parse_request_data(text: str) -> RequestData:
    """Decode a JSON object into :class:`RequestData`."""
    fields = _load_fields(text)
    data = RequestData()
    if "b" in fields:
        data.b = parse_ne_bool(fields["b"])
    s = _string_field(fields, "s")
    if s is not None:
        data.s = s
    data.f = _float_field(fields, "f")
    return data


def parse_raw_request_data(text: str) -> RawRequestData:
    """Decode a JSON object into :class:`RawRequestData`."""
    fields = _load_fields(text)
    data = RawRequestData()
    b = _string_field(fields, "b")
    if b is not None:
        data.b = b
    s = _string_field(fields, "s")
    if s is not None:
        data.s = s
    data.f = _float_field(fields, "f")
    return data