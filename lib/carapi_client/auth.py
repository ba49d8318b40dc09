from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .config_types import ClientConfig
from .errors import CredentialError


@dataclass(frozen=True)
class AuthPayload:
    token: str
    secret: str

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> AuthPayload:
        return cls(token=cfg.token, secret=cfg.secret)

    def as_dict(self) -> dict[str, str]:
        return {"api_token": self.token, "api_secret": self.secret}


def split_jwt(jwt: str) -> list[str]:
    pieces = jwt.split(".")
    if len(pieces) != 3:
        raise CredentialError("JWT is invalid")
    return pieces


def _b64decode(segment: str) -> bytes:
    # accepts both base64url (as issued) and standard base64, padded or not
    segment = segment.strip().replace("-", "+").replace("_", "/")
    segment += "=" * (-len(segment) % 4)
    return base64.b64decode(segment)


def jwt_claims(jwt: str) -> dict[str, Any]:
    payload = split_jwt(jwt)[1]
    try:
        claims = json.loads(_b64decode(payload))
    except (binascii.Error, ValueError) as e:
        raise CredentialError("Error decoding JWT") from e
    if not isinstance(claims, dict):
        raise CredentialError("Error decoding JWT")
    return claims


def now_timestamp() -> float:
    return datetime.now(timezone.utc).timestamp()


def jwt_expired(jwt: str, buffer: int = 60, *, now: float | None = None) -> bool:
    """True when the JWT is expired or will expire within ``buffer`` seconds."""
    claims = jwt_claims(jwt)
    try:
        exp = float(claims["exp"])
    except (KeyError, TypeError, ValueError) as e:
        raise CredentialError("Error decoding JWT") from e
    if now is None:
        now = now_timestamp()
    return now > exp + buffer
