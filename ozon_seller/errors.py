"""
Ozon 클라이언트 예외 클래스

이 패키지가 직접 발생시키는 에러만 정의합니다.
네트워크 오류(httpx.TransportError)는 감싸지 않고 그대로 전파됩니다.
"""
from typing import Optional, Dict, Any, List


class OzonError(Exception):
    """
    Base exception for all errors raised by ozon_seller

    Attributes:
        message: 에러 메시지
        error_code: 에러 코드
        context: 추가 컨텍스트 정보
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러 정보를 딕셔너리로 변환"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class DecodeError(OzonError):
    """
    응답 본문이 JSON이 아니거나 응답 모델과 형태가 맞지 않는 경우

    원래 예외는 __cause__ 로 연결됩니다.

    Attributes:
        status_code: HTTP 상태 코드
        path: 요청 경로
        response_body: 응답 본문 (최대 500자)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        path: Optional[str] = None,
        response_body: Optional[str] = None,
    ):
        body = response_body[:500] if response_body else response_body
        super().__init__(
            message=message,
            error_code="DECODE_ERROR",
            context={
                "status_code": status_code,
                "path": path,
                "response_body": body,
            },
        )
        self.status_code = status_code
        self.path = path
        self.response_body = body


class OzonAPIError(OzonError):
    """
    원격 서버가 공통 응답(envelope)으로 보고한 오류

    엔드포인트 호출이 자동으로 발생시키지 않습니다.
    CommonResponse.raise_for_error() 를 호출한 경우에만 사용됩니다.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="API_ERROR",
            context={
                "status_code": status_code,
                "code": code,
                "details": details or [],
            },
        )
        self.status_code = status_code
        self.code = code
        self.details = details or []

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429
