from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

import httpx
import pytest

from kiku.api.transport import HttpxTransport, TransportResponse
from kiku.config.models import CredentialsConfig


class FakeTransport:
    """Records every exchange and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: bytes | str = b"{}") -> None:
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.sent: list[tuple[str, str, Optional[Mapping[str, Any]]]] = []
        self.closed = False

    def send(self, method: str, url: str, body: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        self.sent.append((method, url, body))
        return TransportResponse(status_code=self.status_code, body=self.body)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport_factory() -> Callable[..., FakeTransport]:
    def _factory(status_code: int = 200, body: bytes | str | Mapping[str, Any] = b"{}") -> FakeTransport:
        if isinstance(body, Mapping):
            body = json.dumps(body)
        return FakeTransport(status_code=status_code, body=body)

    return _factory


@pytest.fixture
def mock_http_transport() -> Callable[..., tuple[HttpxTransport, list[httpx.Request]]]:
    """Build an :class:`HttpxTransport` whose HTTP layer is an httpx mock."""

    def _build(
        handler: Callable[[httpx.Request], httpx.Response],
        base_url: str = "https://example.test/api/cooperation",
    ) -> tuple[HttpxTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_record))
        return HttpxTransport(base_url, client=client), seen

    return _build


@pytest.fixture(scope="session")
def credentials() -> CredentialsConfig:
    return CredentialsConfig(login_company_code="foo", token="bar")


@pytest.fixture(scope="session")
def start_date() -> datetime:
    return datetime(2000, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def end_date() -> datetime:
    return datetime(2000, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.fixture
def staff_envelope() -> dict[str, Any]:
    return {
        "success": True,
        "response": {
            "login_company_code": "foo",
            "Count": 1,
            "TotalCount": 1,
            "staffs": [
                {
                    "staffId": 1,
                    "lastName": "愛",
                    "firstName": "上大",
                    "lastNameKana": "あい",
                    "firstNameKana": "うえお",
                    "organization": {},
                    "subgroups": [],
                    "employmentCategory": {},
                    "tag": "bar",
                    "staffNum": "123",
                    "idmNum": "456",
                    "cardTypeId": 123,
                    "remarks": "baz",
                    "permissionGroup": {},
                    "managedOrganizations": [],
                }
            ],
        },
        "errors": [],
    }
