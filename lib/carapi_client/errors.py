from __future__ import annotations


class CarApiError(Exception):
    """Base client error."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.code = code


class ConfigError(CarApiError, ValueError):
    """Missing or invalid client configuration."""


class TransportError(CarApiError):
    """Transport/network layer error."""


class DecompressionError(CarApiError):
    """Response declared a compressed encoding that could not be decoded."""


class DecodeError(CarApiError):
    """Response body is not valid JSON."""


class CredentialError(CarApiError):
    """Held JWT is malformed or its payload cannot be decoded."""


class RemoteError(CarApiError):
    def __init__(self, message: str, status_code: int | None = None, details: str | None = None):
        super().__init__(message, status_code)
        self.status_code = status_code
        self.details = details


class AuthError(RemoteError):
    """Login failed or returned something that is not a JWT."""
