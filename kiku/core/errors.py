"""Error hierarchy shared by the client subsystems.

Every failure a caller can observe from an API call is one of the classes
below. Nothing here is retried or downgraded: parameter problems surface before
any request is sent, transport and status problems before the body is read,
and envelope problems after it is read.
"""
from __future__ import annotations

from typing import Any, Sequence


class KikuError(Exception):
    """Base class for all custom exceptions in the library."""


class ConfigurationError(KikuError):
    """Raised when configuration files are missing or invalid."""


class ValidationError(KikuError):
    """Raised when a required request parameter is missing or inconsistent."""


class TransportError(KikuError):
    """Raised when the HTTP exchange itself fails (DNS, connection, timeout)."""


class HTTPStatusError(KikuError):
    """Raised when the API answers with a status other than 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Status code={status_code}")
        self.status_code = status_code


class DecodeError(KikuError):
    """Raised when the response body is not the JSON shape we expect.

    ``field`` is the dotted path of the offending member (``None`` when the
    body is not JSON at all) and ``value`` is the literal that failed.
    """

    def __init__(self, field: str | None, value: Any) -> None:
        super().__init__(f"Unmarshal error: field: {field}, value: {value}")
        self.field = field
        self.value = value


class APIFailure(KikuError):
    """Raised when the envelope is well formed but reports ``success: false``."""

    def __init__(self, message: str, errors: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.errors = tuple(errors)


__all__ = [
    "APIFailure",
    "ConfigurationError",
    "DecodeError",
    "HTTPStatusError",
    "KikuError",
    "TransportError",
    "ValidationError",
]
