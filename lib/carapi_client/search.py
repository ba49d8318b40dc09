"""JSON search filters.

CarAPI accepts a ``json`` query parameter holding a list of
``{"field", "op", "val"}`` objects for filtering beyond simple equality::

    search = JsonSearch().add_item(JsonSearchItem("make", "in", ["Tesla"]))
    api.models({"json": search, "year": 2020})
"""
from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JsonSearchItem:
    field: str
    operator: str
    # None is only meaningful for operators like "is null" / "not null"
    value: Any = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "op": self.operator}
        if self.value is not None:
            data["val"] = self.value
        return data

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), separators=(",", ":"), ensure_ascii=False)


class JsonSearch:
    def __init__(self, *items: JsonSearchItem):
        self._items: list[JsonSearchItem] = list(items)

    def add_item(self, item: JsonSearchItem) -> JsonSearch:
        self._items.append(item)
        return self

    def __iter__(self) -> Iterator[JsonSearchItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def as_list(self) -> list[dict[str, Any]]:
        return [item.as_dict() for item in self._items]

    def to_json(self) -> str:
        return json.dumps(self.as_list(), separators=(",", ":"), ensure_ascii=False)
