from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigError

API_VERSIONS = ("v1", "v2")
HTTP_VERSIONS = ("1.1", "2")
SUPPORTED_ENCODINGS = frozenset({"gzip", "deflate"})


@dataclass(frozen=True)
class ClientConfig:
    token: str
    secret: str
    host: str | None = None
    http_version: str = "1.1"
    encoding: frozenset[str] = field(default_factory=frozenset)
    api_version: str = "v1"
    timeout_s: float = 15.0

    def __post_init__(self) -> None:
        token = str(self.token or "").strip()
        secret = str(self.secret or "").strip()
        if not token or not secret:
            raise ConfigError("token and secret are required")

        http_version = str(self.http_version or "").strip()
        if http_version == "2.0":
            http_version = "2"
        if http_version not in HTTP_VERSIONS:
            raise ConfigError(f"unsupported http_version {self.http_version!r}")

        encoding = _normalize_encoding(self.encoding)
        unknown = encoding - SUPPORTED_ENCODINGS
        if unknown:
            raise ConfigError(f"unsupported encoding: {', '.join(sorted(unknown))}")

        api_version = str(self.api_version or "").strip().lower()
        if api_version not in API_VERSIONS:
            raise ConfigError(f"api_version must be one of {', '.join(API_VERSIONS)}")

        host = (self.host or "").strip().rstrip("/") or None

        object.__setattr__(self, "token", token)
        object.__setattr__(self, "secret", secret)
        object.__setattr__(self, "http_version", http_version)
        object.__setattr__(self, "encoding", encoding)
        object.__setattr__(self, "api_version", api_version)
        object.__setattr__(self, "host", host)

    @classmethod
    def build(cls, options: Mapping[str, Any]) -> ClientConfig:
        missing = [key for key in ("token", "secret") if not options.get(key)]
        if missing:
            raise ConfigError(f"missing required option(s): {', '.join(missing)}")
        known = {k: v for k, v in options.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @property
    def compression_enabled(self) -> bool:
        return bool(self.encoding)

    @property
    def api_prefix(self) -> str:
        return "/v2" if self.api_version == "v2" else ""


def _normalize_encoding(value: Iterable[str] | str | None) -> frozenset[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(str(item).strip().lower() for item in value if str(item).strip())
