"""Client facade binding one transport to the API calls.

The module-level functions (:func:`kiku.api.staff.get_staff` and friends)
take the transport explicitly; :class:`AkashiClient` keeps one for a series of
calls and owns its lifetime.
"""
from __future__ import annotations

from typing import Any

from kiku.config.models import ClientConfig

from .staff import GetStaffParam, GetStaffResponse, get_staff
from .stamps import GetStampParam, GetStampResponse, PostStampParam, PostStampResponse, get_stamps, post_stamp
from .token import PostTokenReissueParam, PostTokenReissueResponse, post_token_reissue
from .transport import HttpxTransport, Transport


class AkashiClient:
    """Synchronous client for the AKASHI cooperation API.

    Parameters
    ----------
    transport:
        Optional :class:`~kiku.api.transport.Transport`; an
        :class:`~kiku.api.transport.HttpxTransport` against the public
        endpoint is created when omitted.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self._transport: Transport = transport or HttpxTransport()

    @classmethod
    def from_config(cls, config: ClientConfig, **transport_kwargs: Any) -> "AkashiClient":
        """Build a client whose transport follows ``config``."""

        transport = HttpxTransport(
            config.endpoint_url,
            timeout=config.timeout_sec,
            user_agent=config.user_agent,
            **transport_kwargs,
        )
        return cls(transport)

    def __enter__(self) -> "AkashiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def get_staff(self, param: GetStaffParam) -> GetStaffResponse:
        return get_staff(self._transport, param)

    def get_stamps(self, param: GetStampParam) -> GetStampResponse:
        return get_stamps(self._transport, param)

    def post_stamp(self, param: PostStampParam) -> PostStampResponse:
        return post_stamp(self._transport, param)

    def post_token_reissue(self, param: PostTokenReissueParam) -> PostTokenReissueResponse:
        return post_token_reissue(self._transport, param)


__all__ = ["AkashiClient"]
