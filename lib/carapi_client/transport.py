from __future__ import annotations

import base64
import binascii
import gzip
import json
import logging
import zlib
from types import SimpleNamespace
from typing import Any, Callable, Mapping

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import DecodeError, DecompressionError, RemoteError, TransportError
from .query import encode_query

logger = logging.getLogger(__name__)

_DECOMPRESSORS: dict[str, Callable[[bytes], bytes]] = {
    "gzip": gzip.decompress,
    "deflate": zlib.decompress,
}


def _namespace(data: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**data)


def _envelope_field(decoded: Any, name: str, default: str) -> str:
    if isinstance(decoded, SimpleNamespace):
        value = getattr(decoded, name, None)
    elif isinstance(decoded, dict):
        value = decoded.get(name)
    else:
        value = None
    return default if value is None else str(value)


def content_encodings(response: httpx.Response) -> list[str]:
    raw = response.headers.get("content-encoding", "")
    return [v.strip().lower() for v in raw.split(",") if v.strip() and v.strip().lower() != "identity"]


class Transport:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            default_host: str,
            base_path: str,
            client: httpx.Client | None = None,
    ):
        self._cfg = cfg
        self.base_url = f"{cfg.host or default_host}{base_path}"
        if client is None:
            client = httpx.Client(
                timeout=cfg.timeout_s,
                headers={"User-Agent": f"carapi-client/{__version__}"},
                http2=cfg.http_version == "2",
                follow_redirects=True,
            )
        self._client = client

    def close(self) -> None:
        self._client.close()

    def url(self, path: str, *, versioned: bool = True) -> str:
        prefix = self._cfg.api_prefix if versioned else ""
        return f"{self.base_url}{prefix}{path}"

    def get(
            self,
            path: str,
            query: Mapping[str, Any] | None = None,
            *,
            token: str | None = None,
            accept: str = "application/json",
    ) -> httpx.Response:
        url = self.url(path)
        qs = encode_query(query)
        if qs:
            url = f"{url}?{qs}"
        headers = {"Accept": accept}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        logger.debug("GET %s", url)
        return self.send(self._client.build_request("GET", url, headers=headers))

    def post_json(self, path: str, body: Any, *, accept: str) -> httpx.Response:
        url = self.url(path, versioned=False)
        logger.debug("POST %s", url)
        request = self._client.build_request("POST", url, json=body, headers={"Accept": accept})
        return self.send(request)

    def send(self, request: httpx.Request) -> httpx.Response:
        if self._cfg.compression_enabled:
            request.headers["Accept-Encoding"] = ", ".join(sorted(self._cfg.encoding))
        else:
            request.headers["Accept-Encoding"] = "identity"
        try:
            # streamed so the body can be read before httpx applies its own content decoding
            return self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

    def read_raw(self, response: httpx.Response) -> bytes:
        try:
            return b"".join(response.iter_raw())
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e
        finally:
            response.close()

    def decompress(self, response: httpx.Response, raw: bytes) -> bytes:
        encodings = content_encodings(response)
        if not encodings or not set(encodings) <= self._cfg.encoding:
            return raw

        data = raw.strip()
        try:
            # the API may wrap the compressed payload in base64
            data = base64.b64decode(data, validate=True)
        except binascii.Error:
            data = raw

        try:
            for name in reversed(encodings):
                data = _DECOMPRESSORS[name](data)
        except (OSError, EOFError, zlib.error) as e:
            raise DecompressionError("Unable to decompress response. Maybe try without gzip.") from e
        return data

    def read_body(self, response: httpx.Response) -> bytes:
        return self.decompress(response, self.read_raw(response))

    def decode_response(self, response: httpx.Response, *, associative: bool = False) -> Any:
        body = self.read_body(response)
        try:
            decoded = json.loads(body, object_hook=None if associative else _namespace)
        except ValueError as e:
            raise DecodeError("Error decoding response", response.status_code) from e

        if response.status_code != 200:
            exception = _envelope_field(decoded, "exception", "Unknown Error")
            message = _envelope_field(decoded, "message", "Unknown Message")
            url = _envelope_field(decoded, "url", "Unknown URL")
            raise RemoteError(
                f"{exception}: {message} while requesting {url}",
                response.status_code,
                body.decode("utf-8", errors="replace")[:1000],
            )
        return decoded
