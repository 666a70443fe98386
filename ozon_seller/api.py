from __future__ import annotations

from typing import Any

import httpx

from ozon_seller.core import Client
from ozon_seller.products import Products
from ozon_seller.reports import Reports
from ozon_seller.settings import Settings


class OzonClient:
    """
    Ozon Seller API 클라이언트

    하나의 전송 계층(Client)을 엔드포인트 그룹들이 공유합니다.

    사용 예:
        with OzonClient.from_settings() as ozon:
            resp = ozon.products.get_product_range_limit()
            if not resp.is_success:
                print(resp.common.error_message())
    """

    def __init__(self, client: Client) -> None:
        self.client = client
        self.products = Products(client)
        self.reports = Reports(client)

    @classmethod
    def create(cls, client_id: str, api_key: str, **kwargs: Any) -> "OzonClient":
        return cls(Client(client_id, api_key, **kwargs))

    @classmethod
    def from_settings(cls, settings: Settings | None = None, http_client: httpx.Client | None = None) -> "OzonClient":
        return cls(Client.from_settings(settings, http_client=http_client))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "OzonClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
