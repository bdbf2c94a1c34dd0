"""HTTP transport used by the API calls.

The call layer only needs "send method + URL + optional JSON body, get back a
status code and the raw body". :class:`Transport` captures that contract so
tests (or callers with their own HTTP stack) can substitute anything that
implements ``send``; :class:`HttpxTransport` is the default implementation on
top of :class:`httpx.Client`.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from kiku.config.models import DEFAULT_ENDPOINT_URL, DEFAULT_TIMEOUT_SEC, DEFAULT_USER_AGENT
from kiku.core.errors import HTTPStatusError, TransportError
from kiku.core.types import JSONLike

from .params import EncodedRequest

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and unread body of a completed exchange."""

    status_code: int
    body: bytes


class Transport(Protocol):
    """Anything able to perform one HTTP exchange against the API."""

    def send(self, method: str, url: str, body: Optional[JSONLike] = None) -> TransportResponse:
        ...

    def close(self) -> None:
        ...


class HttpxTransport:
    """Synchronous transport backed by :class:`httpx.Client`.

    Parameters
    ----------
    base_url:
        API root; request URLs (``/{company}/staffs?...``) are appended to it.
    timeout:
        Per-request timeout in seconds, applied when the client is created here.
    client:
        Optional pre-configured :class:`httpx.Client` (e.g. with a
        :class:`httpx.MockTransport` in tests). It is closed by :meth:`close`.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ENDPOINT_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        client: httpx.Client | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, headers={"User-Agent": user_agent})

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def send(self, method: str, url: str, body: Optional[JSONLike] = None) -> TransportResponse:
        """Perform one request; JSON bodies go out as ``application/json``."""

        request_url = self._base_url + url
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not None:
            try:
                content = json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise TransportError(f"Cannot serialize {method} body: {exc}") from exc
            headers["Content-Type"] = "application/json"

        # The query carries the access token; keep it out of the logs.
        log_url = request_url.split("?", 1)[0]
        LOGGER.info("%s %s", method, log_url)
        try:
            response = self._client.request(method, request_url, content=content, headers=headers)
        except httpx.HTTPError as exc:
            LOGGER.warning("%s %s failed: %s", method, log_url, exc)
            raise TransportError(f"{method} {log_url} failed: {exc}") from exc
        return TransportResponse(status_code=response.status_code, body=response.content)

    def get(self, url: str) -> TransportResponse:
        return self.send("GET", url)

    def post(self, url: str, body: JSONLike) -> TransportResponse:
        return self.send("POST", url, body)

    def patch(self, url: str, body: JSONLike) -> TransportResponse:
        return self.send("PATCH", url, body)

    def delete(self, url: str, body: Optional[JSONLike] = None) -> TransportResponse:
        return self.send("DELETE", url, body)


def execute(transport: Transport, request: EncodedRequest) -> bytes:
    """Send ``request`` and return the body of a 200 response.

    Any other status raises :class:`HTTPStatusError` before the body is
    looked at.
    """

    response = transport.send(request.method, request.url, request.body)
    if response.status_code != httpx.codes.OK:
        LOGGER.warning("%s %s answered %s", request.method, request.path, response.status_code)
        raise HTTPStatusError(response.status_code)
    return response.body


__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_TIMEOUT_SEC",
    "HttpxTransport",
    "Transport",
    "TransportResponse",
    "execute",
]
