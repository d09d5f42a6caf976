"""Build query strings from flat parameter objects."""

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

QueryInput = Mapping[str, Any] | BaseModel | None


def _to_query_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(
        f"Query parameter {key!r} must be a primitive value, got {type(value).__name__}"
    )


def _items(params: QueryInput) -> list[tuple[str, Any]]:
    if params is None:
        return []
    if isinstance(params, BaseModel):
        return [(name, getattr(params, name)) for name in type(params).model_fields]
    return list(params.items())


def build_query_string(params: QueryInput) -> str:
    """Return ``k=v&...`` for the non-None entries of params.

    Keys keep insertion order (field order for pydantic models). Each key
    and value is percent-encoded exactly once. Nested objects are rejected.

    Raises:
        TypeError: If a value is not a primitive (str, number, bool, enum,
            date or datetime).
    """
    parts = []
    for key, value in _items(params):
        if value is None:
            continue
        encoded = quote(_to_query_value(key, value), safe="")
        parts.append(f"{quote(key, safe='')}={encoded}")
    return "&".join(parts)


def path_segment(value: str) -> str:
    """Percent-encode one path segment (ids may contain '/' or spaces)."""
    return quote(value, safe="")


def with_query(path: str, params: QueryInput) -> str:
    """Append ``?query`` to path when params produce a non-empty query."""
    query = build_query_string(params)
    return f"{path}?{query}" if query else path
