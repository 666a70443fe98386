from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ozon Seller API 인증 정보 (판매자 센터 > 설정 > API 키)
    ozon_client_id: str = ""
    ozon_api_key: str = ""
    ozon_base_url: str = "https://api-seller.ozon.ru"

    ozon_timeout: float = 60.0  # 요청 전체 타임아웃 (초)
    ozon_connect_timeout: float = 10.0  # 연결 타임아웃 (초)
    ozon_retry_count: int = 1  # 연결 오류 시 tenacity 총 시도 횟수 (1 = 재시도 없음)
    ozon_log_request_body: bool = False  # 디버그 로그에 요청 본문 포함 여부

    @field_validator("ozon_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL은 'http://' 또는 'https://'로 시작해야 합니다.")
        return v.rstrip("/")

    @field_validator("ozon_timeout", "ozon_connect_timeout")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("타임아웃은 0보다 커야 합니다.")
        return v

    @field_validator("ozon_retry_count")
    @classmethod
    def validate_retry_count(cls, v: int) -> int:
        if not 1 <= v <= 10:
            raise ValueError("retry_count는 1에서 10 사이여야 합니다.")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)


settings = Settings()
