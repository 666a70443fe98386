"""
Ozon 리포트 API

리포트 생성 요청은 코드만 반환합니다. 생성 완료 여부와 파일 URL 은
get_report_details() 로 확인합니다.
"""
from __future__ import annotations

from typing import Iterator

from ozon_seller.core import EndpointGroup, RequestOptions
from ozon_seller.models.reports import (
    DiscountedReportResponse,
    FbsStocksReportParams,
    FbsStocksReportResponse,
    FinancialReportParams,
    FinancialReportResponse,
    ProductsReportParams,
    ProductsReportResponse,
    ReportDetailsParams,
    ReportDetailsResponse,
    ReportListParams,
    ReportListResponse,
    ReturnsReportParams,
    ReturnsReportResponse,
    ShipmentReportParams,
    ShipmentReportResponse,
)
from ozon_seller.pagination import iter_numbered_pages


class Reports(EndpointGroup):
    """리포트 엔드포인트 그룹"""

    def get_list(
        self, params: ReportListParams | None = None, options: RequestOptions | None = None
    ) -> ReportListResponse:
        """생성된 리포트 목록 (report_type 기본값 ALL)"""
        return self._post("/v1/report/list", params or ReportListParams(), ReportListResponse, options)

    def iter_reports(
        self, params: ReportListParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[ReportListResponse]:
        return iter_numbered_pages(
            lambda p: self.get_list(p, options),
            params or ReportListParams(),
            items=lambda page: page.result.reports,
        )

    def get_report_details(
        self, params: ReportDetailsParams, options: RequestOptions | None = None
    ) -> ReportDetailsResponse:
        """리포트 생성 상태와 파일 URL 조회"""
        return self._post("/v1/report/info", params, ReportDetailsResponse, options)

    def get_financial(
        self, params: FinancialReportParams, options: RequestOptions | None = None
    ) -> FinancialReportResponse:
        """
        기간별 현금 흐름 명세 조회

        with_details=True 이면 배송/반품/서비스별 상세 금액이 result.details 에 포함됩니다.
        """
        return self._post("/v1/finance/cash-flow-statement/list", params, FinancialReportResponse, options)

    def iter_financial(
        self, params: FinancialReportParams, options: RequestOptions | None = None
    ) -> Iterator[FinancialReportResponse]:
        """result.page_count 에 도달할 때까지 현금 흐름 명세를 페이지 단위로 순회"""
        return iter_numbered_pages(
            lambda p: self.get_financial(p, options),
            params,
            items=lambda page: page.result.cash_flows,
            page_count=lambda page: page.result.page_count,
        )

    def get_products(
        self, params: ProductsReportParams | None = None, options: RequestOptions | None = None
    ) -> ProductsReportResponse:
        """상품 리포트 생성 요청 (language DEFAULT, visibility ALL 기본값)"""
        return self._post("/v1/report/products/create", params or ProductsReportParams(), ProductsReportResponse, options)

    def get_returns(
        self, params: ReturnsReportParams | None = None, options: RequestOptions | None = None
    ) -> ReturnsReportResponse:
        """FBO/FBS 반품 리포트 생성 요청 (최근 3개월까지만 조회 가능)"""
        return self._post("/v2/report/returns/create", params or ReturnsReportParams(), ReturnsReportResponse, options)

    def get_shipment(
        self, params: ShipmentReportParams | None = None, options: RequestOptions | None = None
    ) -> ShipmentReportResponse:
        return self._post("/v1/report/postings/create", params or ShipmentReportParams(), ShipmentReportResponse, options)

    def issue_on_discounted_products(self, options: RequestOptions | None = None) -> DiscountedReportResponse:
        """
        마크다운 상품 리포트 생성 요청

        다른 리포트와 달리 코드가 응답 최상위 code 로 옵니다.
        """
        return self._post("/v1/report/discounted/create", None, DiscountedReportResponse, options)

    def get_fbs_stocks(
        self, params: FbsStocksReportParams, options: RequestOptions | None = None
    ) -> FbsStocksReportResponse:
        """FBS 창고 재고 리포트 생성 요청"""
        return self._post("/v1/report/warehouse/stock", params, FbsStocksReportResponse, options)
