from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import httpx

from .base import BaseApi, Query, _segment


class CarApiOem(BaseApi):
    """Client for the CarAPI OEM data endpoints."""

    DEFAULT_HOST = "https://api.carapi.app"
    BASE_PATH = "/oem"

    def years(self, query: Query | None = None) -> list[Any]:
        return self._get_decoded("/years", query, associative=True)

    def makes(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/makes", query)

    def models(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/models", query)

    def submodels(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/submodels", query)

    def submodel_item(self, submodel_id: int) -> SimpleNamespace:
        return self._get_decoded(f"/submodels/{int(submodel_id)}")

    def trims(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/trims", query)

    def trim_item(self, trim_id: int) -> SimpleNamespace:
        return self._get_decoded(f"/trims/{int(trim_id)}")

    def vin(self, vin: str, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded(f"/vin/{_segment(vin)}", query)

    def vehicle_attributes(self, attribute: str) -> list[Any]:
        return self._get_decoded("/vehicle-attributes", {"attribute": attribute}, associative=True)

    def account_requests(self) -> SimpleNamespace:
        return self._get_decoded("/account/requests")

    def account_requests_today(self) -> SimpleNamespace:
        return self._get_decoded("/account/requests-today")

    def csv_data_feed(self) -> httpx.Response:
        return self._get("/data-feeds/download", accept="text/plain")

    def csv_data_feed_last_updated(self) -> SimpleNamespace:
        return self._get_decoded("/data-feeds/last-updated")
