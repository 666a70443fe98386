"""
Unit tests for the transport layer.

공통 응답(envelope) 디코딩, 에러 전파, 재시도 동작을 검증합니다.
"""

import time

import httpx
import pytest

from ozon_seller.core import Client, CommonResponse, RequestOptions
from ozon_seller.errors import DecodeError, OzonAPIError
from ozon_seller.models.products import RangeLimitResponse, StocksInfoParams, StocksInfoResponse
from ozon_seller.settings import Settings

TEST_BASE_URL = "https://api-seller.test"


@pytest.mark.unit
class TestEnvelope:
    """공통 응답 복사 및 정규화."""

    def test_success_envelope(self, stub, ozon):
        """200 응답은 페이로드로 디코딩되고 공통 응답은 상태 코드만 가짐."""
        stub.add(200, {"total": {"limit": 1000, "usage": 10}})

        resp = ozon.products.get_product_range_limit()

        assert resp.status_code == 200
        assert resp.is_success
        assert resp.common.code == 0
        assert resp.common.message == ""
        assert resp.common.error_message() == ""
        assert resp.total.limit == 1000
        assert resp.total.usage == 10

    def test_error_envelope_round_trip(self, stub, ozon):
        """400 응답의 code/message/details 가 결과의 common 에 그대로 복사됨."""
        stub.add(400, {
            "code": 3,
            "message": "invalid request",
            "details": [{"typeUrl": "type.googleapis.com/x", "value": "abc"}],
        })

        resp = ozon.products.get_stocks_info(StocksInfoParams())

        assert not resp.is_success
        assert resp.status_code == 400
        assert resp.common.code == 3
        assert resp.common.message == "invalid request"
        assert resp.common.details[0].type_url == "type.googleapis.com/x"
        assert resp.common.details[0].value == "abc"
        # 페이로드는 빈 모델
        assert resp.items == []
        assert resp.cursor == ""

    def test_error_envelope_empty_body(self, stub, ozon):
        """본문 없는 오류 응답."""
        stub.add(503, content=b"")

        resp = ozon.products.get_product_range_limit()

        assert resp.status_code == 503
        assert resp.common.code == 0
        assert resp.common.error_message() == "서비스 일시 중단"

    def test_error_message_format(self):
        assert CommonResponse(status_code=429, message="too many").error_message() == "요청 한도 초과: too many"
        assert CommonResponse(status_code=404, code=5).error_message() == "리소스를 찾을 수 없음: code=5"
        assert CommonResponse(status_code=418).error_message() == "HTTP 418 오류"

    def test_raise_for_error(self):
        """opt-in 예외 변환."""
        CommonResponse(status_code=200).raise_for_error()

        common = CommonResponse(status_code=429, code=8, message="slow down")
        with pytest.raises(OzonAPIError) as excinfo:
            common.raise_for_error()

        err = excinfo.value
        assert err.status_code == 429
        assert err.code == 8
        assert err.is_rate_limited
        assert err.to_dict()["error_code"] == "API_ERROR"

    def test_envelope_not_serialized(self, stub, ozon):
        stub.add(200, {"cursor": "", "items": []})
        resp = ozon.products.get_stocks_info(StocksInfoParams())
        assert "common" not in resp.to_payload()


@pytest.mark.unit
class TestDecodeErrors:
    """응답 디코딩 실패는 DecodeError 로 보고됨."""

    def test_non_json_body(self, stub, ozon):
        stub.add(200, content=b"<html>bad gateway</html>")

        with pytest.raises(DecodeError) as excinfo:
            ozon.products.get_product_range_limit()

        assert excinfo.value.path == "/v4/product/info/limit"
        assert excinfo.value.status_code == 200
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_non_object_body(self, stub, ozon):
        stub.add(200, [1, 2, 3])

        with pytest.raises(DecodeError):
            ozon.products.get_product_range_limit()

    def test_shape_mismatch(self, stub, ozon):
        stub.add(200, {"total": {"limit": "not-a-number"}})

        with pytest.raises(DecodeError) as excinfo:
            ozon.products.get_product_range_limit()

        assert excinfo.value.__cause__ is not None
        assert "RangeLimitResponse" in excinfo.value.message

    def test_response_body_truncated(self, stub, ozon):
        stub.add(500, content=b"x" * 2000)

        with pytest.raises(DecodeError) as excinfo:
            ozon.products.get_product_range_limit()

        assert len(excinfo.value.response_body) == 500


@pytest.mark.unit
class TestTransport:
    """요청 구성과 네트워크 오류 전파."""

    def test_auth_headers_and_path(self, stub, ozon):
        stub.add(200, {})

        ozon.products.get_product_range_limit()

        request = stub.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{TEST_BASE_URL}/v4/product/info/limit"
        assert request.headers["Client-Id"] == "client-1"
        assert request.headers["Api-Key"] == "key-1"
        assert request.headers["Content-Type"] == "application/json"

    def test_request_options(self, stub, ozon):
        """호출 단위 헤더/타임아웃."""
        stub.add(200, {})

        ozon.products.get_product_range_limit(RequestOptions(timeout=3.0, headers={"X-Trace": "t-1"}))

        request = stub.requests[0]
        assert request.headers["X-Trace"] == "t-1"
        assert request.extensions["timeout"]["read"] == 3.0

    def test_transport_error_propagates_unchanged(self, stub, ozon):
        """연결 오류는 감싸지 않고 같은 객체로 전파."""
        error = httpx.ConnectError("connection refused")
        stub.add(error=error)

        with pytest.raises(httpx.ConnectError) as excinfo:
            ozon.products.get_product_range_limit()

        assert excinfo.value is error
        assert len(stub.requests) == 1

    def test_retry_on_transport_error(self, stub, http_client, monkeypatch):
        """retry_count > 1 이면 연결 오류만 재시도."""
        monkeypatch.setattr(time, "sleep", lambda seconds: None)
        client = Client("client-1", "key-1", base_url=TEST_BASE_URL, retry_count=3, http_client=http_client)
        stub.add(error=httpx.ConnectError("reset"))
        stub.add(error=httpx.ReadTimeout("timeout"))
        stub.add(200, {"total": {"limit": 5}})

        raw, resp = client.request("POST", "/v4/product/info/limit", None, RangeLimitResponse)

        assert raw.status_code == 200
        assert resp.total.limit == 5
        assert len(stub.requests) == 3

    def test_no_retry_on_http_error(self, stub, http_client, monkeypatch):
        monkeypatch.setattr(time, "sleep", lambda seconds: None)
        client = Client("client-1", "key-1", base_url=TEST_BASE_URL, retry_count=3, http_client=http_client)
        stub.add(429, {"code": 8, "message": "rate limit"})

        raw, resp = client.request("POST", "/v4/product/info/stocks", StocksInfoParams(), StocksInfoResponse)

        assert raw.common.status_code == 429
        assert raw.common.message == "rate limit"
        assert len(stub.requests) == 1

    def test_from_settings(self, http_client):
        s = Settings(ozon_client_id="42", ozon_api_key="k", ozon_base_url="http://localhost:8080/")
        client = Client.from_settings(s, http_client=http_client)
        assert client.base_url == "http://localhost:8080"

    def test_close_keeps_injected_client(self, http_client):
        with Client("a", "b", http_client=http_client):
            pass
        assert not http_client.is_closed
