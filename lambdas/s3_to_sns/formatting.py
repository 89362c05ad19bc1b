"""Formatters for the values dumped into the diagnostic log."""

from __future__ import annotations

import dataclasses
import datetime as dt
import json
from typing import Any, Mapping

_MAX_DEPTH = 6


class PlainFormatter:
    def format(self, value: Any) -> str:
        return str(value)


class JsonFormatter:
    def format(self, value: Any) -> str:
        return json.dumps(_to_json_compatible(value), indent=2, ensure_ascii=False)


def formatter_for(serialize_to_json: bool) -> PlainFormatter | JsonFormatter:
    return JsonFormatter() if serialize_to_json else PlainFormatter()


def _to_json_compatible(value: Any, depth: int = 0) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if depth >= _MAX_DEPTH:
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _to_json_compatible(item, depth + 1) for key, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_json_compatible(item, depth + 1) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_json_compatible(dataclasses.asdict(value), depth + 1)
    # Lambda context and similar objects: keep their public, non-callable attributes.
    public = _public_attributes(value)
    if public:
        return _to_json_compatible(public, depth + 1)
    return str(value)


def _public_attributes(value: Any) -> dict[str, Any]:
    attributes: dict[str, Any] = {}
    for name in dir(value):
        if name.startswith("_"):
            continue
        try:
            attr = getattr(value, name)
        except AttributeError:
            continue
        if callable(attr):
            continue
        attributes[name] = attr
    return attributes
