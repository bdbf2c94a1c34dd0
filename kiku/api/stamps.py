"""Stamp (time clock) API.

* ``GET /{company}/stamps[/{staff_id}]`` lists stamps in a date range;
* ``POST /{company}/stamps`` records a stamp for the token's owner.

Query dates use the compact ``YYYYMMDDHHMMSS`` form; payload dates use
``YYYY/MM/DD HH:MM:SS`` (see :mod:`kiku.core.time_utils`).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StrictFloat, StrictInt, StrictStr

from kiku.core.enums import StampType
from kiku.core.errors import ValidationError
from kiku.core.time_utils import WireTime, format_query_time, format_wire_time

from .envelope import Source, decode_envelope
from .params import EncodedRequest, compact_body, encode_query, require_credentials, resource_path
from .transport import Transport, execute

LOGGER = logging.getLogger(__name__)

STAMPS_API_FAILED = "Requesting Stamps API failed"
STAMP_API_FAILED = "Requesting Stamp API failed"


def _parse_stamp_type(value: Any) -> StampType:
    # Only a JSON integer is a stamp code; strings, floats and booleans are not.
    if isinstance(value, StampType):
        return value
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"invalid stamp type {value!r}")
    return StampType(value)


WireStampType = Annotated[StampType, PlainValidator(_parse_stamp_type)]


class StampAttribute(BaseModel):
    """Where and how a stamp was recorded."""

    model_config = ConfigDict(frozen=True)

    method: StrictInt = 0
    org_id: StrictInt = 0
    workplace_id: StrictInt = 0
    latitude: StrictFloat = 0.0
    longitude: StrictFloat = 0.0
    ip: StrictStr = ""


class Stamp(BaseModel):
    """Single stamp; ``local_time``/``timezone`` are the terminal's own clock."""

    model_config = ConfigDict(frozen=True)

    stamped_at: WireTime = None
    type: WireStampType = StampType.UNKNOWN
    local_time: WireTime = None
    timezone: StrictStr = ""
    attributes: StampAttribute = Field(default_factory=StampAttribute)


class GetStampResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    login_company_code: StrictStr = ""
    staff_id: StrictInt = 0
    count: StrictInt = 0
    stamps: List[Stamp] = Field(default_factory=list)

    @classmethod
    def decode(cls, source: Source) -> "GetStampResponse":
        return decode_envelope(source, cls, STAMPS_API_FAILED)


class PostStampResponse(BaseModel):
    """Stamp as recorded by the server; ``stamped_at`` is the server clock."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    login_company_code: StrictStr = ""
    staff_id: StrictInt = 0
    type: WireStampType = StampType.UNKNOWN
    stamped_at: WireTime = Field(None, alias="stampedAt")

    @classmethod
    def decode(cls, source: Source) -> "PostStampResponse":
        return decode_envelope(source, cls, STAMP_API_FAILED)


@dataclass(frozen=True, slots=True)
class GetStampParam:
    """Parameters of the stamp listing; both dates are required."""

    login_company_code: str
    token: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    staff_id: Optional[int] = None

    def validate(self) -> None:
        require_credentials(self.login_company_code, self.token)
        if self.start_date is None:
            raise ValidationError("StartDate must be set")
        if self.end_date is None:
            raise ValidationError("EndDate must be set")

    def encode(self) -> EncodedRequest:
        pairs = [
            ("token", self.token),
            ("start_date", format_query_time(self.start_date) if self.start_date is not None else None),
            ("end_date", format_query_time(self.end_date) if self.end_date is not None else None),
        ]
        return EncodedRequest(
            method="GET",
            path=resource_path(self.login_company_code, "stamps", self.staff_id),
            query=encode_query(pairs),
        )

    def encode_url(self) -> str:
        self.validate()
        return self.encode().url


@dataclass(frozen=True, slots=True)
class PostStampParam:
    """Parameters for recording a stamp.

    Unset ``type``, ``stamped_at`` and ``timezone`` are left out of the body
    and the server fills them in.
    """

    login_company_code: str
    token: str
    type: Optional[StampType] = None
    stamped_at: Optional[datetime] = None
    timezone: Optional[str] = None

    def validate(self) -> None:
        require_credentials(self.login_company_code, self.token)

    def encode(self) -> EncodedRequest:
        body = compact_body(
            {
                "token": self.token,
                "type": int(self.type) if self.type is not None else None,
                "stampedAt": format_wire_time(self.stamped_at) if self.stamped_at is not None else None,
                "timezone": self.timezone,
            }
        )
        return EncodedRequest(
            method="POST",
            path=resource_path(self.login_company_code, "stamps"),
            body=body,
        )


def get_stamps(transport: Transport, param: GetStampParam) -> GetStampResponse:
    """Retrieve stamps between ``param.start_date`` and ``param.end_date``."""

    param.validate()
    body = execute(transport, param.encode())
    response = GetStampResponse.decode(body)
    LOGGER.debug("Fetched %s stamps for staff %s", response.count, response.staff_id)
    return response


def post_stamp(transport: Transport, param: PostStampParam) -> PostStampResponse:
    """Record a stamp and return the server's view of it."""

    param.validate()
    body = execute(transport, param.encode())
    response = PostStampResponse.decode(body)
    LOGGER.info(
        "Stamp recorded",
        extra={"staff_id": response.staff_id, "stamp_type": int(response.type)},
    )
    return response


__all__ = [
    "GetStampParam",
    "GetStampResponse",
    "PostStampParam",
    "PostStampResponse",
    "STAMPS_API_FAILED",
    "STAMP_API_FAILED",
    "Stamp",
    "StampAttribute",
    "get_stamps",
    "post_stamp",
]
