"""Typed configuration models for the client.

YAML files are validated with pydantic so the rest of the library only ever
sees well-formed settings.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENDPOINT_URL = "https://atnd.ak4.jp/api/cooperation"
DEFAULT_USER_AGENT = "kiku-python"
DEFAULT_TIMEOUT_SEC = 10.0


class ClientConfig(BaseModel):
    """HTTP and logging settings for :class:`kiku.api.AkashiClient`."""

    endpoint_url: str = Field(DEFAULT_ENDPOINT_URL, min_length=1)
    timeout_sec: float = Field(DEFAULT_TIMEOUT_SEC, gt=0)
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1)
    log_level: str = Field("INFO")
    log_dir: Optional[str] = None


class CredentialsConfig(BaseModel):
    """Company code and access token every request is made with.

    Kept out of version control; for tests it can point to a fixture.
    """

    login_company_code: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def as_kwargs(self) -> Dict[str, str]:
        """Keyword arguments shared by every parameter class."""

        return {"login_company_code": self.login_company_code, "token": self.token}


class KikuConfig(BaseModel):
    """Client settings plus optional stored credentials."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    credentials: Optional[CredentialsConfig] = None
