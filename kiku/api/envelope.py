"""Decoder for the ``{success, response, errors}`` envelope.

Every endpoint wraps its payload the same way::

    {"success": true, "response": {...}, "errors": [{"code": "...", "message": "..."}]}

Decoding happens in two steps. The generic envelope is validated first; the
``response`` member is only materialized into the resource model when
``success`` is true, so a failed call never yields a half-populated record.
"""
from __future__ import annotations

import json
import logging
from typing import IO, Any, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic import ValidationError as PydanticValidationError

from kiku.core.errors import APIFailure, DecodeError

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
Source = Union[bytes, str, IO[bytes]]


class ErrorDetail(BaseModel):
    """Single entry of the envelope's ``errors`` array."""

    model_config = ConfigDict(frozen=True)

    code: StrictStr = ""
    message: StrictStr = ""


class Envelope(BaseModel):
    """Generic envelope; ``response`` is kept raw until ``success`` is known."""

    model_config = ConfigDict(frozen=True)

    success: StrictBool = False
    response: Any = None
    errors: Optional[List[ErrorDetail]] = Field(default_factory=list)


def read_source(source: Source) -> bytes:
    """Return the raw bytes of ``source`` (bytes, text or a readable stream)."""

    if isinstance(source, bytes):
        return source
    if isinstance(source, str):
        return source.encode("utf-8")
    return source.read()


def _decode_error(exc: PydanticValidationError, prefix: str = "") -> DecodeError:
    first = exc.errors()[0]
    path = ".".join(str(part) for part in first["loc"])
    if prefix:
        path = f"{prefix}.{path}" if path else prefix
    return DecodeError(path or None, first.get("input"))


def parse_envelope(source: Source) -> Envelope:
    """Parse ``source`` into an :class:`Envelope` without touching ``response``."""

    raw = read_source(source)
    try:
        data = json.loads(raw)
    except ValueError:
        text = raw.decode("utf-8", errors="replace")
        LOGGER.debug("Response body is not JSON: %.200s", text)
        raise DecodeError(None, text) from None
    if not isinstance(data, dict):
        raise DecodeError(None, data)
    try:
        return Envelope.model_validate(data)
    except PydanticValidationError as exc:
        error = _decode_error(exc)
        LOGGER.debug("Envelope rejected: %s", error)
        raise error from exc


def decode_envelope(source: Source, model: Type[ModelT], failure_message: str) -> ModelT:
    """Decode ``source`` and return its ``response`` member as ``model``.

    Raises :class:`DecodeError` for malformed JSON or mistyped fields and
    :class:`APIFailure` (carrying the envelope errors) when ``success`` is
    false.
    """

    envelope = parse_envelope(source)
    if not envelope.success:
        raise APIFailure(failure_message, envelope.errors or ())
    payload = envelope.response if envelope.response is not None else {}
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        error = _decode_error(exc, prefix="response")
        LOGGER.debug("%s payload rejected: %s", model.__name__, error)
        raise error from exc


__all__ = ["Envelope", "ErrorDetail", "decode_envelope", "parse_envelope", "read_source"]
