from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from .base import BaseApi, Query


class Powersports(BaseApi):
    """Client for the CarAPI powersports endpoints (motorcycles, ATVs, ...)."""

    def years(self, query: Query | None = None) -> list[Any]:
        return self._get_decoded("/years/powersports", query, associative=True)

    def makes(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/makes/powersports", query)

    def models(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/models/powersports", query)
