import pytest
from pydantic import ValidationError
from ozon_seller.settings import Settings

def test_url_validation():
    # Valid URL (끝의 / 는 제거)
    s = Settings(ozon_base_url="https://api-seller.ozon.ru/")
    assert s.ozon_base_url == "https://api-seller.ozon.ru"

    # Invalid URL
    with pytest.raises(ValidationError) as excinfo:
        Settings(ozon_base_url="ftp://api-seller.ozon.ru")
    assert "URL은 'http://' 또는 'https://'로 시작해야 합니다." in str(excinfo.value)

def test_timeout_validation():
    s = Settings(ozon_timeout=30, ozon_connect_timeout=5)
    assert s.ozon_timeout == 30.0
    assert s.ozon_connect_timeout == 5.0

    with pytest.raises(ValidationError) as excinfo:
        Settings(ozon_timeout=0)
    assert "타임아웃은 0보다 커야 합니다." in str(excinfo.value)

    with pytest.raises(ValidationError) as excinfo:
        Settings(ozon_connect_timeout=-1)
    assert "타임아웃은 0보다 커야 합니다." in str(excinfo.value)

def test_retry_count_validation():
    # 기본값은 재시도 없음
    assert Settings().ozon_retry_count == 1

    s = Settings(ozon_retry_count=3)
    assert s.ozon_retry_count == 3

    with pytest.raises(ValidationError) as excinfo:
        Settings(ozon_retry_count=0)
    assert "retry_count는 1에서 10 사이여야 합니다." in str(excinfo.value)

    with pytest.raises(ValidationError) as excinfo:
        Settings(ozon_retry_count=11)
    assert "retry_count는 1에서 10 사이여야 합니다." in str(excinfo.value)

def test_env_override(monkeypatch):
    monkeypatch.setenv("OZON_CLIENT_ID", "12345")
    monkeypatch.setenv("OZON_API_KEY", "secret")
    s = Settings()
    assert s.ozon_client_id == "12345"
    assert s.ozon_api_key == "secret"
