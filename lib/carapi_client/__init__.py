__version__ = "0.1.0"

from .client import CarApi
from .config_types import ClientConfig
from .errors import (
    AuthError,
    CarApiError,
    ConfigError,
    CredentialError,
    DecodeError,
    DecompressionError,
    RemoteError,
    TransportError,
)
from .oem import CarApiOem
from .powersports import Powersports
from .search import JsonSearch, JsonSearchItem

__all__ = [
    "CarApi",
    "CarApiOem",
    "Powersports",
    "ClientConfig",
    "JsonSearch",
    "JsonSearchItem",
    "CarApiError",
    "ConfigError",
    "TransportError",
    "DecompressionError",
    "DecodeError",
    "CredentialError",
    "RemoteError",
    "AuthError",
]
