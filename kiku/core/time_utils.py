"""Wire formats for date-time values.

The API uses two incompatible textual forms. Query parameters carry
``YYYYMMDDHHMMSS`` with no separators, while envelope payloads carry
``YYYY/MM/DD HH:MM:SS`` and use JSON ``null`` for an unset time. Values are
parsed and rendered as given: no timezone conversion happens here, the caller
is expected to already hold times in the offset the API works in.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import PlainValidator

OUTBOUND_FORMAT = "%Y%m%d%H%M%S"
INBOUND_FORMAT = "%Y/%m/%d %H:%M:%S"


def format_query_time(value: datetime) -> str:
    """Render ``value`` in the outbound (query parameter) form."""

    return value.strftime(OUTBOUND_FORMAT)


def format_wire_time(value: datetime) -> str:
    """Render ``value`` in the inbound (envelope payload) form."""

    return value.strftime(INBOUND_FORMAT)


def parse_wire_time(value: Any) -> datetime | None:
    """Parse an envelope date-time field.

    ``None`` (JSON ``null``) yields ``None``. Anything that is not a string in
    the inbound form raises :class:`ValueError` naming the literal.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid wire time {value!r}")
    try:
        return datetime.strptime(value, INBOUND_FORMAT)
    except ValueError:
        raise ValueError(f"invalid wire time {value!r}") from None


WireTime = Annotated[Optional[datetime], PlainValidator(parse_wire_time)]


__all__ = [
    "INBOUND_FORMAT",
    "OUTBOUND_FORMAT",
    "WireTime",
    "format_query_time",
    "format_wire_time",
    "parse_wire_time",
]
