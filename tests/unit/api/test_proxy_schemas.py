"""Unit tests for proxy request/response schemas."""

import pytest
from pydantic import ValidationError

from webman.domain.entities import BodyEncoding, ProxyResult
from webman.infrastructure.api.schemas import ProxyRequest, ProxyResponse, SavedRequestPayload


class TestProxyRequestBody:
    """The body field accepts the JSON encodings of a byte array."""

    def test_base64_string(self):
        request = ProxyRequest(url="http://x.test", body="AAEC")
        assert request.body == b"\x00\x01\x02"

    def test_int_array(self):
        request = ProxyRequest(url="http://x.test", body=[104, 105])
        assert request.body == b"hi"

    def test_null_and_missing(self):
        assert ProxyRequest(url="http://x.test", body=None).body is None
        assert ProxyRequest(url="http://x.test").body is None

    def test_defaults(self):
        request = ProxyRequest(url="http://x.test")
        assert request.method == "GET"
        assert request.headers == {}

    @pytest.mark.parametrize("body", ["not base64!", [256], ["a"], [True], 12])
    def test_rejects_invalid_bodies(self, body):
        with pytest.raises(ValidationError):
            ProxyRequest(url="http://x.test", body=body)

    def test_url_is_required(self):
        with pytest.raises(ValidationError):
            ProxyRequest(method="GET")


def test_proxy_response_serializes_status_code_alias():
    result = ProxyResult(
        status_code=200,
        headers={"Content-Type": "application/json"},
        body='{"a": 1}',
        encoding=BodyEncoding.JSON,
    )

    data = ProxyResponse.model_validate(result).model_dump(by_alias=True, mode="json")

    assert data == {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": '{"a": 1}',
        "encoding": "json",
    }


def test_saved_request_payload_accepts_camel_case_body_type():
    payload = SavedRequestPayload(
        name="n", method="GET", url="http://x.test", bodyType="raw"
    )
    assert payload.body_type == "raw"
    assert payload.model_dump()["body_type"] == "raw"
