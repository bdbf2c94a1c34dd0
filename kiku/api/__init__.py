"""Request/response codec layer and calls for the AKASHI cooperation API.

Parameter classes validate and encode requests, response classes decode the
shared ``{success, response, errors}`` envelope, and the call functions glue
both ends to a :class:`~kiku.api.transport.Transport`.
"""

from .client import AkashiClient
from .envelope import Envelope, ErrorDetail, decode_envelope
from .organization import EmploymentCategory, Organization, PermissionGroup
from .params import EncodedRequest
from .staff import GetStaffParam, GetStaffResponse, Staff, get_staff
from .stamps import (
    GetStampParam,
    GetStampResponse,
    PostStampParam,
    PostStampResponse,
    Stamp,
    StampAttribute,
    get_stamps,
    post_stamp,
)
from .token import PostTokenReissueParam, PostTokenReissueResponse, post_token_reissue
from .transport import DEFAULT_ENDPOINT_URL, HttpxTransport, Transport, TransportResponse

__all__ = [
    "AkashiClient",
    "DEFAULT_ENDPOINT_URL",
    "EmploymentCategory",
    "EncodedRequest",
    "Envelope",
    "ErrorDetail",
    "GetStaffParam",
    "GetStaffResponse",
    "GetStampParam",
    "GetStampResponse",
    "HttpxTransport",
    "Organization",
    "PermissionGroup",
    "PostStampParam",
    "PostStampResponse",
    "PostTokenReissueParam",
    "PostTokenReissueResponse",
    "Staff",
    "Stamp",
    "StampAttribute",
    "Transport",
    "TransportResponse",
    "decode_envelope",
    "get_staff",
    "get_stamps",
    "post_stamp",
    "post_token_reissue",
]
