from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ozon_seller.errors import DecodeError, OzonAPIError
from ozon_seller.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api-seller.ozon.ru"

_HTTP_ERROR_MESSAGES = {
    400: "요청 파라미터 오류",
    401: "인증 오류",
    403: "권한 없음",
    404: "리소스를 찾을 수 없음",
    409: "요청 충돌",
    429: "요청 한도 초과",
    500: "서버 오류",
    503: "서비스 일시 중단",
}


class OzonModel(BaseModel):
    """요청 파라미터/응답 페이로드 공통 베이스"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", protected_namespaces=())

    def to_payload(self) -> dict[str, Any]:
        """JSON 요청 본문으로 직렬화 (None 필드는 생략되어 원격 기본값이 적용됨)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CommonResponseDetail(OzonModel):
    type_url: str = Field("", alias="typeUrl", description="상세 정보 타입")
    value: str = Field("", description="상세 정보 값")


class CommonResponse(OzonModel):
    """
    모든 응답에 공통으로 포함되는 메타데이터 (envelope)

    엔드포인트별 페이로드와 무관하며, 전송 계층의 원본 응답에서 복사됩니다.
    """

    status_code: int = Field(0, description="HTTP 상태 코드")
    code: int = Field(0, description="원격 에러 코드 (성공 시 0)")
    message: str = Field("", description="원격 에러 메시지")
    details: list[CommonResponseDetail] = Field(default_factory=list, description="에러 상세")

    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def error_message(self) -> str:
        """에러 메시지를 사람이 읽기 쉬운 형태로 정규화합니다. 성공 응답이면 빈 문자열."""
        if self.is_success():
            return ""

        base_message = _HTTP_ERROR_MESSAGES.get(self.status_code, f"HTTP {self.status_code} 오류")
        if self.message:
            return f"{base_message}: {self.message}"
        if self.code:
            return f"{base_message}: code={self.code}"
        return base_message

    def raise_for_error(self) -> None:
        if self.is_success():
            return
        raise OzonAPIError(
            self.error_message(),
            status_code=self.status_code,
            code=self.code,
            details=[d.model_dump(by_alias=True) for d in self.details],
        )


class OzonResponse(OzonModel):
    """
    응답 모델 베이스

    공통 응답은 상속이 아니라 `common` 필드로 합성됩니다.
    본문에서 파싱되지 않고 직렬화에서도 제외됩니다.
    """

    common: CommonResponse = Field(default_factory=CommonResponse, exclude=True)

    @property
    def status_code(self) -> int:
        return self.common.status_code

    @property
    def is_success(self) -> bool:
        return self.common.is_success()


T = TypeVar("T", bound=OzonResponse)


@dataclass
class Response:
    """전송 계층 원본 응답"""

    status_code: int
    common: CommonResponse
    raw: dict[str, Any] = field(default_factory=dict)

    def copy_common_response(self, target: CommonResponse) -> None:
        target.status_code = self.common.status_code
        target.code = self.common.code
        target.message = self.common.message
        target.details = list(self.common.details)


@dataclass(frozen=True)
class RequestOptions:
    """호출 단위 옵션 (timeout = 이 호출의 데드라인, 초)"""

    timeout: float | None = None
    headers: dict[str, str] = field(default_factory=dict)


class Client:
    """
    Ozon Seller API 전송 계층

    인증 헤더(Client-Id, Api-Key), JSON 직렬화/역직렬화, 연결 오류 재시도를 담당합니다.
    호출 간 가변 상태를 갖지 않으므로 여러 스레드에서 공유할 수 있습니다.
    """

    def __init__(
        self,
        client_id: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: httpx.Timeout | None = None,
        retry_count: int = 1,
        http_client: httpx.Client | None = None,
        log_request_body: bool = False,
    ) -> None:
        self._client_id = client_id
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout or httpx.Timeout(60.0, connect=10.0)
        self._retry_count = max(1, retry_count)
        self._log_request_body = log_request_body
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self._timeout)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, http_client: httpx.Client | None = None) -> "Client":
        s = settings or default_settings
        return cls(
            client_id=s.ozon_client_id,
            api_key=s.ozon_api_key,
            base_url=s.ozon_base_url,
            timeout=httpx.Timeout(s.ozon_timeout, connect=s.ozon_connect_timeout),
            retry_count=s.ozon_retry_count,
            http_client=http_client,
            log_request_body=s.ozon_log_request_body,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self, options: RequestOptions | None) -> dict[str, str]:
        headers = {
            "Client-Id": self._client_id,
            "Api-Key": self._api_key,
            "Content-Type": "application/json",
        }
        if options and options.headers:
            headers.update(options.headers)
        return headers

    def _send(
        self,
        method: str,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
        timeout: httpx.Timeout,
    ) -> httpx.Response:
        # 연결 수준 오류만 재시도. HTTP 상태/업무 오류는 재시도하지 않음
        retrying = Retrying(
            stop=stop_after_attempt(self._retry_count),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
            before_sleep=lambda retry_state: logger.warning(
                f"Ozon API 재시도 중... ({retry_state.attempt_number}회째): {retry_state.outcome.exception()}"
            ),
        )
        return retrying(self._http.request, method, url, json=payload, headers=headers, timeout=timeout)

    def request(
        self,
        method: str,
        path: str,
        params: OzonModel | None,
        response_model: type[T],
        options: RequestOptions | None = None,
    ) -> tuple[Response, T]:
        """
        요청을 보내고 응답을 디코딩합니다.

        Returns (원본 응답, 응답 모델):
            - HTTP 200: 본문을 response_model 로 디코딩
            - 그 외 상태: 본문을 공통 응답으로만 디코딩하고 페이로드는 빈 모델

        Raises:
            httpx.TransportError: 네트워크 오류 (그대로 전파)
            DecodeError: JSON 파싱 실패 또는 형태 불일치
        """
        payload = params.to_payload() if params is not None else {}
        timeout = self._timeout
        if options and options.timeout is not None:
            timeout = httpx.Timeout(options.timeout)

        if self._log_request_body:
            logger.debug(f"{method} {path} body={json.dumps(payload, ensure_ascii=False)}")

        resp = self._send(method, f"{self._base_url}{path}", payload, self._headers(options), timeout)
        logger.debug(f"{method} {path} -> {resp.status_code}")
        return self._decode(path, resp, response_model)

    def _decode(self, path: str, resp: httpx.Response, response_model: type[T]) -> tuple[Response, T]:
        status_code = resp.status_code
        data: Any = {}
        if resp.content:
            try:
                data = resp.json()
            except ValueError as e:
                raise DecodeError(
                    f"응답 본문이 JSON이 아닙니다: {path}",
                    status_code=status_code,
                    path=path,
                    response_body=resp.text,
                ) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"응답 본문이 JSON 객체가 아닙니다: {path}",
                status_code=status_code,
                path=path,
                response_body=resp.text,
            )

        try:
            if status_code == 200:
                common = CommonResponse(status_code=status_code)
                result = response_model.model_validate(data)
            else:
                common = CommonResponse.model_validate(data)
                common.status_code = status_code
                result = response_model()
        except ValidationError as e:
            raise DecodeError(
                f"응답 형태가 {response_model.__name__} 와 일치하지 않습니다: {path}",
                status_code=status_code,
                path=path,
                response_body=resp.text,
            ) from e

        if not common.is_success():
            logger.warning(f"Ozon API {path} 오류 응답: {common.error_message()}")

        return Response(status_code=status_code, common=common, raw=data), result


class EndpointGroup:
    """엔드포인트 그룹 공통: 고정 경로로 POST 후 공통 응답을 결과에 복사"""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _post(
        self,
        path: str,
        params: OzonModel | None,
        response_model: type[T],
        options: RequestOptions | None = None,
    ) -> T:
        raw, resp = self._client.request("POST", path, params, response_model, options)
        raw.copy_common_response(resp.common)
        return resp
