"""Staff (employee) lookup: ``GET /{company}/staffs[/{staff_id}]``."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

from kiku.core.errors import ValidationError

from .envelope import Source, decode_envelope
from .organization import EmploymentCategory, Organization, PermissionGroup
from .params import EncodedRequest, encode_query, require_credentials, resource_path
from .transport import Transport, execute

LOGGER = logging.getLogger(__name__)

STAFF_API_FAILED = "AKASHI API failed"


class Staff(BaseModel):
    """Employee record as returned by the staff API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(0, alias="staffId")
    last_name: StrictStr = Field("", alias="lastName")
    first_name: StrictStr = Field("", alias="firstName")
    last_name_kana: StrictStr = Field("", alias="lastNameKana")
    first_name_kana: StrictStr = Field("", alias="firstNameKana")
    organization: Organization = Field(default_factory=Organization)
    subgroups: List[Organization] = Field(default_factory=list)
    employment_category: EmploymentCategory = Field(default_factory=EmploymentCategory, alias="employmentCategory")
    tag: StrictStr = ""
    staff_num: StrictStr = Field("", alias="staffNum")
    idm_num: StrictStr = Field("", alias="idmNum")
    card_type_id: StrictInt = Field(0, alias="cardTypeId")
    remarks: StrictStr = ""
    permission_group: PermissionGroup = Field(default_factory=PermissionGroup, alias="permissionGroup")
    managed_organizations: List[Organization] = Field(default_factory=list, alias="managedOrganizations")


class GetStaffResponse(BaseModel):
    """One page of staff records.

    ``count`` is the number of records in this page and ``total_count`` the
    number available overall; callers drive further pages with
    :attr:`GetStaffParam.page`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    login_company_code: StrictStr = ""
    count: StrictInt = Field(0, validation_alias=AliasChoices("Count", "count"))
    total_count: StrictInt = Field(0, validation_alias=AliasChoices("TotalCount", "totalCount"))
    staffs: List[Staff] = Field(default_factory=list)

    @classmethod
    def decode(cls, source: Source) -> "GetStaffResponse":
        """Decode an envelope carrying a staff page."""

        return decode_envelope(source, cls, STAFF_API_FAILED)


@dataclass(frozen=True, slots=True)
class GetStaffParam:
    """Parameters of the staff API.

    ``staff_id`` narrows the read to one employee. ``target`` selects an
    employee by their own access token and only goes out together with
    ``page``.
    """

    login_company_code: str
    token: str
    target: Optional[str] = None
    staff_id: Optional[int] = None
    page: Optional[int] = None

    def validate(self) -> None:
        require_credentials(self.login_company_code, self.token)
        # TODO: drop once the API confirms whether target really needs page.
        if self.target is not None and self.page is None:
            raise ValidationError("Page must be set when Target is set")

    def encode(self) -> EncodedRequest:
        pairs = [("token", self.token)]
        if self.target is not None:
            pairs.append(("target", self.target))
            pairs.append(("page", str(self.page)))
        elif self.page is not None:
            pairs.append(("page", str(self.page)))
        return EncodedRequest(
            method="GET",
            path=resource_path(self.login_company_code, "staffs", self.staff_id),
            query=encode_query(pairs),
        )

    def encode_url(self) -> str:
        """Validate, then return the encoded path and query."""

        self.validate()
        return self.encode().url


def get_staff(transport: Transport, param: GetStaffParam) -> GetStaffResponse:
    """Retrieve staff records visible to ``param.token``."""

    param.validate()
    body = execute(transport, param.encode())
    response = GetStaffResponse.decode(body)
    LOGGER.debug("Fetched %s/%s staff records", response.count, response.total_count)
    return response


__all__ = ["GetStaffParam", "GetStaffResponse", "STAFF_API_FAILED", "Staff", "get_staff"]
