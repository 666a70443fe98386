"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from ozon_seller.api import OzonClient
from ozon_seller.core import Client


TEST_BASE_URL = "https://api-seller.test"


class StubServer:
    """
    httpx.MockTransport 용 가짜 Ozon 서버.
    등록한 응답을 순서대로 돌려주고, 받은 요청을 기록합니다.
    """

    def __init__(self):
        self.requests = []
        self._responses = []

    def add(self, status_code=200, json_body=None, content=None, error=None):
        self._responses.append((status_code, json_body, content, error))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"예상하지 못한 요청: {request.method} {request.url}")
        status_code, json_body, content, error = self._responses.pop(0)
        if error is not None:
            raise error
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_body if json_body is not None else {})

    @property
    def paths(self):
        return [r.url.path for r in self.requests]

    def body(self, index=-1):
        return json.loads(self.requests[index].content or b"{}")


@pytest.fixture(scope="function")
def stub() -> StubServer:
    return StubServer()


@pytest.fixture(scope="function")
def http_client(stub: StubServer):
    client = httpx.Client(transport=httpx.MockTransport(stub.handler))
    yield client
    client.close()


@pytest.fixture(scope="function")
def transport(http_client) -> Client:
    """stub 서버에 연결된 전송 계층"""
    return Client("client-1", "key-1", base_url=TEST_BASE_URL, http_client=http_client)


@pytest.fixture(scope="function")
def ozon(transport: Client) -> OzonClient:
    return OzonClient(transport)


# 테스트 마커 정의
def pytest_configure(config):
    """Pytest 마커 등록."""
    config.addinivalue_line("markers", "unit: 단위 테스트 (네트워크 불필요)")
    config.addinivalue_line("markers", "integration: 통합 테스트 (실제 API 키 필요)")
