"""Typed client for the AKASHI attendance-management cooperation API.

Subpackages:

* :mod:`kiku.api` - request parameters, envelope decoding and the API calls;
* :mod:`kiku.core` - errors, enums and wire-time helpers;
* :mod:`kiku.config` - pydantic/YAML configuration;
* :mod:`kiku.telemetry` - JSON logging setup.
"""

from .api import (
    AkashiClient,
    GetStaffParam,
    GetStaffResponse,
    GetStampParam,
    GetStampResponse,
    HttpxTransport,
    PostStampParam,
    PostStampResponse,
    PostTokenReissueParam,
    PostTokenReissueResponse,
    get_staff,
    get_stamps,
    post_stamp,
    post_token_reissue,
)
from .core.enums import StampType
from .core.errors import APIFailure, DecodeError, HTTPStatusError, KikuError, TransportError, ValidationError

__all__ = [
    "APIFailure",
    "AkashiClient",
    "DecodeError",
    "GetStaffParam",
    "GetStaffResponse",
    "GetStampParam",
    "GetStampResponse",
    "HTTPStatusError",
    "HttpxTransport",
    "KikuError",
    "PostStampParam",
    "PostStampResponse",
    "PostTokenReissueParam",
    "PostTokenReissueResponse",
    "StampType",
    "TransportError",
    "ValidationError",
    "get_staff",
    "get_stamps",
    "post_stamp",
    "post_token_reissue",
]
