from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import httpx

from .base import BaseApi, Query, _segment


class CarApi(BaseApi):
    """Client for the CarAPI vehicle endpoints."""

    def years(self, query: Query | None = None) -> list[Any]:
        return self._get_decoded("/years", query, associative=True)

    def makes(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/makes", query)

    def models(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/models", query)

    def trims(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/trims", query)

    def trim_item(self, trim_id: int) -> SimpleNamespace:
        return self._get_decoded(f"/trims/{int(trim_id)}")

    def vin(self, vin: str, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded(f"/vin/{_segment(vin)}", query)

    def license_plate(
            self,
            country_code: str,
            lookup: str,
            region: str | None = None,
            query: Query | None = None,
    ) -> SimpleNamespace:
        params: dict[str, Any] = dict(query or {})
        params.update({"country_code": country_code, "lookup": lookup, "region": region})
        return self._get_decoded("/license-plate", params)

    def obd_codes(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/obd-codes", query)

    def obd_code_item(self, code: str) -> SimpleNamespace:
        return self._get_decoded(f"/obd-codes/{_segment(code)}")

    def bodies(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/bodies", query)

    def engines(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/engines", query)

    def mileages(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/mileages", query)

    def interior_colors(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/interior-colors", query)

    def exterior_colors(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/exterior-colors", query)

    def vehicle_attributes(self, attribute: str) -> list[Any]:
        # v2 moved the attribute name from the path into the query string
        if self._cfg.api_version == "v2":
            return self._get_decoded("/vehicle-attributes", {"attribute": attribute}, associative=True)
        return self._get_decoded(f"/vehicle-attributes/{_segment(attribute)}", associative=True)

    def account_requests(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/account/requests", query)

    def account_requests_today(self, query: Query | None = None) -> SimpleNamespace:
        return self._get_decoded("/account/requests-today", query)

    def csv_data_feed(self) -> httpx.Response:
        """Return the data feed download as an open, streamed response.

        The payload is CSV, so it is not decoded. The caller reads it with
        ``iter_bytes()``/``read()`` and must ``close()`` it.
        """
        return self._get("/data-feeds/download", accept="text/plain")

    def csv_data_feed_last_updated(self) -> SimpleNamespace:
        return self._get_decoded("/data-feeds/last-updated")
