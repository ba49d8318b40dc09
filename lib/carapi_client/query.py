from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlencode


def _param_value(value: Any) -> Any:
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return [_param_value(item) for item in value]
    return value


def _flatten(key: str, value: Any) -> Iterator[tuple[str, Any]]:
    # nested mappings use bracketed keys: {"a": {"b": 1}} -> a[b]=1
    if isinstance(value, Mapping) and not callable(getattr(value, "to_json", None)):
        for sub, item in value.items():
            if item is not None:
                yield from _flatten(f"{key}[{sub}]", item)
        return
    yield key, _param_value(value)


def encode_query(query: Mapping[str, Any] | None) -> str:
    if not query:
        return ""
    params: list[tuple[str, Any]] = []
    for key, value in query.items():
        if value is not None:
            params.extend(_flatten(str(key), value))
    return urlencode(params, doseq=True)
