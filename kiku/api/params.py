"""Request parameter building blocks.

Each operation has a frozen parameter dataclass that knows how to validate
itself and how to turn itself into an :class:`EncodedRequest`. Optional
values use ``None`` for "absent"; an absent value never reaches the wire,
while a present ``0`` or empty string does.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode

from kiku.core.errors import ValidationError
from kiku.core.types import JSONLike


@dataclass(frozen=True, slots=True)
class EncodedRequest:
    """Wire-ready request: HTTP method, path, query string and JSON body."""

    method: str
    path: str
    query: str = ""
    body: Optional[JSONLike] = None

    @property
    def url(self) -> str:
        """Path plus ``?query`` when there is a query."""

        if self.query:
            return f"{self.path}?{self.query}"
        return self.path


def require_credentials(login_company_code: str, token: str) -> None:
    """Raise :class:`ValidationError` for the first missing credential."""

    if not login_company_code:
        raise ValidationError("LoginCompanyCode must be set")
    if not token:
        raise ValidationError("Token must be set")


def resource_path(login_company_code: str, resource: str, resource_id: Optional[int] = None) -> str:
    """Return ``/{company}/{resource}`` with an optional ``/{id}`` suffix."""

    path = f"/{quote(login_company_code, safe='')}/{resource}"
    if resource_id is not None:
        path += f"/{resource_id}"
    return path


def encode_query(pairs: Iterable[Tuple[str, Optional[str]]]) -> str:
    """Percent-encode ``pairs`` sorted by key, dropping absent values.

    Keys come out in alphabetical order whatever order they were added in;
    the sort is stable so repeated keys keep their relative order.
    """

    present = [(key, value) for key, value in pairs if value is not None]
    present.sort(key=lambda item: item[0])
    return urlencode(present)


def compact_body(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``None`` members so absent fields are omitted from JSON bodies."""

    return {key: value for key, value in fields.items() if value is not None}


__all__ = [
    "EncodedRequest",
    "compact_body",
    "encode_query",
    "require_credentials",
    "resource_path",
]
