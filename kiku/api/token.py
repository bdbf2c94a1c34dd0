"""Access-token reissue: ``POST /token/reissue/{company}``."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from kiku.core.time_utils import WireTime

from .envelope import Source, decode_envelope
from .params import EncodedRequest, require_credentials
from .transport import Transport, execute

LOGGER = logging.getLogger(__name__)

TOKEN_REISSUE_API_FAILED = "Requesting Token Reissue API failed"


class PostTokenReissueResponse(BaseModel):
    """Freshly issued token and its expiry."""

    model_config = ConfigDict(frozen=True)

    login_company_code: StrictStr = ""
    staff_id: StrictInt = 0
    agency_manager_id: StrictInt = 0
    token: StrictStr = ""
    expired_at: WireTime = None

    @classmethod
    def decode(cls, source: Source) -> "PostTokenReissueResponse":
        return decode_envelope(source, cls, TOKEN_REISSUE_API_FAILED)


@dataclass(frozen=True, slots=True)
class PostTokenReissueParam:
    login_company_code: str
    token: str

    def validate(self) -> None:
        require_credentials(self.login_company_code, self.token)

    def encode(self) -> EncodedRequest:
        # The company code lives in the path here, not in front of the resource.
        return EncodedRequest(
            method="POST",
            path=f"/token/reissue/{quote(self.login_company_code, safe='')}",
            body={"token": self.token},
        )


def post_token_reissue(transport: Transport, param: PostTokenReissueParam) -> PostTokenReissueResponse:
    """Exchange ``param.token`` for a new token; the old one stops working."""

    param.validate()
    body = execute(transport, param.encode())
    response = PostTokenReissueResponse.decode(body)
    LOGGER.info("Access token reissued", extra={"staff_id": response.staff_id, "expired_at": str(response.expired_at)})
    return response


__all__ = [
    "PostTokenReissueParam",
    "PostTokenReissueResponse",
    "TOKEN_REISSUE_API_FAILED",
    "post_token_reissue",
]
