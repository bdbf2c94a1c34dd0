from __future__ import annotations

import json

import pytest

from kiku.api.organization import EmploymentCategory, Organization, PermissionGroup
from kiku.api.staff import GetStaffParam, GetStaffResponse, Staff, get_staff
from kiku.core.errors import APIFailure, DecodeError, HTTPStatusError, ValidationError


@pytest.mark.parametrize(
    "param, expected",
    [
        (GetStaffParam(login_company_code="foo", token="bar"), "/foo/staffs?token=bar"),
        (
            GetStaffParam(login_company_code="foo", token="bar", target="baz", staff_id=123, page=2),
            "/foo/staffs/123?page=2&target=baz&token=bar",
        ),
        (GetStaffParam(login_company_code="foo", token="bar", page=3), "/foo/staffs?page=3&token=bar"),
        (GetStaffParam(login_company_code="foo", token="bar", staff_id=0), "/foo/staffs/0?token=bar"),
        (GetStaffParam(login_company_code="foo", token="a b&c"), "/foo/staffs?token=a+b%26c"),
    ],
)
def test_get_staff_param_should_encode_url(param: GetStaffParam, expected: str) -> None:
    assert param.encode_url() == expected


@pytest.mark.parametrize(
    "param, message",
    [
        (GetStaffParam(login_company_code="", token=""), "LoginCompanyCode must be set"),
        (GetStaffParam(login_company_code="", token="foo"), "LoginCompanyCode must be set"),
        (GetStaffParam(login_company_code="foo", token=""), "Token must be set"),
        (GetStaffParam(login_company_code="foo", token="bar", target="baz"), "Page must be set when Target is set"),
    ],
)
def test_get_staff_param_should_report_first_missing_field(param: GetStaffParam, message: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        param.validate()
    assert str(excinfo.value) == message


def test_get_staff_param_should_encode_get_without_body() -> None:
    request = GetStaffParam(login_company_code="foo", token="bar").encode()
    assert request.method == "GET"
    assert request.path == "/foo/staffs"
    assert request.query == "token=bar"
    assert request.body is None


def test_get_staff_response_should_decode_every_field(staff_envelope) -> None:
    response = GetStaffResponse.decode(json.dumps(staff_envelope))
    assert response == GetStaffResponse(
        login_company_code="foo",
        count=1,
        total_count=1,
        staffs=[
            Staff(
                id=1,
                last_name="愛",
                first_name="上大",
                last_name_kana="あい",
                first_name_kana="うえお",
                organization=Organization(),
                subgroups=[],
                employment_category=EmploymentCategory(),
                tag="bar",
                staff_num="123",
                idm_num="456",
                card_type_id=123,
                remarks="baz",
                permission_group=PermissionGroup(),
                managed_organizations=[],
            )
        ],
    )
    staff = response.staffs[0]
    assert staff.subgroups == []
    assert staff.managed_organizations == []


def test_get_staff_response_should_decode_nested_objects() -> None:
    body = {
        "success": True,
        "response": {
            "login_company_code": "foo",
            "count": 1,
            "totalCount": 40,
            "staffs": [
                {
                    "staffId": 9,
                    "organization": {"organizationId": 3, "name": "Sales"},
                    "subgroups": [{"organizationId": 4, "name": "East"}],
                    "employmentCategory": {"employmentCategoryId": 2, "Name": "Full time"},
                    "permissionGroup": {"permissionGroupId": 5, "permissionType": 3, "name": "Staff"},
                }
            ],
        },
    }
    response = GetStaffResponse.decode(json.dumps(body))
    staff = response.staffs[0]
    assert response.total_count == 40
    assert staff.organization == Organization(id=3, name="Sales")
    assert staff.subgroups == [Organization(id=4, name="East")]
    assert staff.employment_category == EmploymentCategory(id=2, name="Full time")
    assert staff.permission_group == PermissionGroup(id=5, type=3, name="Staff")
    assert staff.last_name == ""


def test_get_staff_response_should_raise_decode_error() -> None:
    with pytest.raises(DecodeError) as excinfo:
        GetStaffResponse.decode('{"success":"foo"}')
    assert excinfo.value.field == "success"


def test_get_staff_response_should_raise_api_failure() -> None:
    with pytest.raises(APIFailure) as excinfo:
        GetStaffResponse.decode('{"success":false}')
    assert str(excinfo.value) == "AKASHI API failed"


def test_get_staff_should_send_request_and_decode(fake_transport_factory, staff_envelope) -> None:
    transport = fake_transport_factory(body=staff_envelope)
    response = get_staff(transport, GetStaffParam(login_company_code="foo", token="bar", staff_id=1))
    assert transport.sent == [("GET", "/foo/staffs/1?token=bar", None)]
    assert response.staffs[0].id == 1


def test_get_staff_should_not_send_invalid_params(fake_transport_factory) -> None:
    transport = fake_transport_factory()
    with pytest.raises(ValidationError):
        get_staff(transport, GetStaffParam(login_company_code="", token="bar"))
    assert transport.sent == []


def test_get_staff_should_raise_on_non_ok_status(fake_transport_factory) -> None:
    transport = fake_transport_factory(status_code=500, body=b"not json")
    with pytest.raises(HTTPStatusError) as excinfo:
        get_staff(transport, GetStaffParam(login_company_code="foo", token="bar"))
    assert excinfo.value.status_code == 500
