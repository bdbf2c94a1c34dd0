from __future__ import annotations

import io

import pytest
from pydantic import BaseModel, StrictInt

from kiku.api.envelope import ErrorDetail, decode_envelope, parse_envelope
from kiku.core.errors import APIFailure, DecodeError


class _Payload(BaseModel):
    value: StrictInt = 0


def test_decode_envelope_should_return_response_member() -> None:
    payload = decode_envelope(b'{"success":true,"response":{"value":3,"extra":"ignored"},"errors":[]}', _Payload, "failed")
    assert payload == _Payload(value=3)


def test_decode_envelope_should_accept_text_and_streams() -> None:
    body = '{"success":true,"response":{"value":7}}'
    assert decode_envelope(body, _Payload, "failed").value == 7
    assert decode_envelope(io.BytesIO(body.encode()), _Payload, "failed").value == 7


def test_decode_envelope_should_raise_api_failure_with_errors() -> None:
    body = b'{"success":false,"response":{"value":"not even checked"},"errors":[{"code":"E1","message":"bad token"}]}'
    with pytest.raises(APIFailure) as excinfo:
        decode_envelope(body, _Payload, "Requesting Foo API failed")
    assert str(excinfo.value) == "Requesting Foo API failed"
    assert excinfo.value.errors == (ErrorDetail(code="E1", message="bad token"),)


def test_decode_envelope_should_treat_missing_success_as_failure() -> None:
    with pytest.raises(APIFailure) as excinfo:
        decode_envelope(b"{}", _Payload, "failed")
    assert excinfo.value.errors == ()


def test_decode_envelope_should_name_mistyped_success() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_envelope(b'{"success":"foo"}', _Payload, "failed")
    assert excinfo.value.field == "success"
    assert excinfo.value.value == "foo"
    assert str(excinfo.value) == "Unmarshal error: field: success, value: foo"


def test_decode_envelope_should_name_mistyped_payload_field() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_envelope(b'{"success":true,"response":{"value":"3"}}', _Payload, "failed")
    assert excinfo.value.field == "response.value"
    assert excinfo.value.value == "3"


def test_decode_envelope_should_reject_malformed_json() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_envelope(b"<html>oops</html>", _Payload, "failed")
    assert excinfo.value.field is None
    assert excinfo.value.value == "<html>oops</html>"


def test_decode_envelope_should_reject_non_object_root() -> None:
    with pytest.raises(DecodeError):
        decode_envelope(b"[1, 2]", _Payload, "failed")


def test_decode_envelope_should_use_defaults_when_response_is_missing() -> None:
    assert decode_envelope(b'{"success":true}', _Payload, "failed") == _Payload()


def test_parse_envelope_should_keep_response_raw() -> None:
    envelope = parse_envelope(b'{"success":false,"response":{"value":"x"}}')
    assert envelope.success is False
    assert envelope.response == {"value": "x"}
    assert envelope.errors == []


def test_decode_envelope_should_accept_null_errors() -> None:
    with pytest.raises(APIFailure) as excinfo:
        decode_envelope(b'{"success":false,"response":null,"errors":null}', _Payload, "failed")
    assert excinfo.value.errors == ()
