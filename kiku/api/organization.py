"""Small value objects embedded in staff records."""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Organization(BaseModel):
    """Organization (main group, subgroup or managed organization)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(0, alias="organizationId")
    name: StrictStr = ""


class EmploymentCategory(BaseModel):
    """Employment category of a staff member."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(0, alias="employmentCategoryId")
    # The API has shipped both spellings of this key.
    name: StrictStr = Field("", validation_alias=AliasChoices("Name", "name"))


class PermissionGroup(BaseModel):
    """Permission group; ``type`` is 1 company admin, 2 manager, 3 staff."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(0, alias="permissionGroupId")
    type: StrictInt = Field(0, alias="permissionType")
    name: StrictStr = ""


__all__ = ["EmploymentCategory", "Organization", "PermissionGroup"]
