from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from .auth import AuthPayload, jwt_expired, split_jwt
from .config_types import ClientConfig
from .errors import AuthError, CredentialError
from .transport import Transport

logger = logging.getLogger(__name__)

Query = Mapping[str, Any]


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class BaseApi:
    """Shared JWT lifecycle for every CarAPI resource family.

    The JWT is owned by the instance and changes only through
    :meth:`authenticate` and :meth:`load_jwt`. Instances are not safe to share
    between threads without external locking.
    """

    DEFAULT_HOST = "https://carapi.app"
    BASE_PATH = "/api"

    def __init__(self, cfg: ClientConfig, client: httpx.Client | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, default_host=self.DEFAULT_HOST, base_path=self.BASE_PATH, client=client)
        self._jwt: str | None = None

    @classmethod
    def build(cls, options: Mapping[str, Any], client: httpx.Client | None = None):
        return cls(ClientConfig.build(options), client)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def authenticate(self) -> str:
        payload = AuthPayload.from_config(self._cfg)
        response = self._t.post_json("/auth/login", payload.as_dict(), accept="text/plain")
        raw = self._t.read_raw(response)
        if response.status_code != 200:
            body = raw.decode("utf-8", errors="replace")
            raise AuthError(
                f"HTTP {response.status_code} - CarAPI authentication failed: {body}",
                response.status_code,
                body[:1000],
            )

        jwt = self._t.decompress(response, raw).decode("utf-8", errors="replace").strip()
        try:
            split_jwt(jwt)
        except CredentialError as e:
            raise AuthError("Invalid JWT") from e

        self._jwt = jwt
        logger.debug("authenticated against %s", self._t.base_url)
        return jwt

    def is_jwt_expired(self, buffer: int = 60) -> bool | None:
        """Return whether the held JWT expires within ``buffer`` seconds.

        ``None`` means no JWT is held, which is different from "not expired".
        """
        if not self._jwt:
            return None
        return jwt_expired(self._jwt, buffer)

    def load_jwt(self, jwt: str) -> BaseApi:
        self._jwt = jwt
        return self

    def get_jwt(self) -> str | None:
        return self._jwt or None

    def _get(self, path: str, query: Query | None = None, *, accept: str = "application/json") -> httpx.Response:
        return self._t.get(path, query, token=self._jwt, accept=accept)

    def _get_decoded(self, path: str, query: Query | None = None, *, associative: bool = False) -> Any:
        return self._t.decode_response(self._get(path, query), associative=associative)
