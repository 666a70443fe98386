"""
리포트 API 요청/응답 모델

리포트 생성 요청은 리포트 코드만 돌려주며, 완료 여부는 /v1/report/info 로 확인합니다.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from ozon_seller.core import OzonModel, OzonResponse
from ozon_seller.enums import Language, ReportInfoStatus, ReportType, Visibility


class ReportCodeResult(OzonModel):
    code: str = Field("", description="리포트 고유 식별자")


# ============================================================================
# 리포트 목록 / 상세
# ============================================================================

class ReportListParams(OzonModel):
    page: int = Field(1, ge=1, description="페이지 번호")
    page_size: int = Field(100, ge=1, le=1000, description="페이지당 항목 수 (최대 1000)")
    report_type: ReportType = Field(ReportType.ALL, description="리포트 유형 (기본 ALL)")


class ReportInfo(OzonModel):
    code: str = ""
    created_at: Optional[datetime] = None
    error: str = Field("", description="생성 실패 사유")
    file: str = Field("", description="리포트 파일 URL")
    params: Dict[str, str] = Field(default_factory=dict, description="생성 요청 파라미터")
    report_type: str = ""
    status: str = Field("", description="waiting / processing / success / failed")

    @property
    def is_ready(self) -> bool:
        return self.status == ReportInfoStatus.SUCCESS.value


class ReportListResult(OzonModel):
    reports: List[ReportInfo] = Field(default_factory=list)
    total: int = 0


class ReportListResponse(OzonResponse):
    result: ReportListResult = Field(default_factory=ReportListResult)


class ReportDetailsParams(OzonModel):
    code: str


class ReportDetailsResponse(OzonResponse):
    result: ReportInfo = Field(default_factory=ReportInfo)


# ============================================================================
# 현금 흐름 명세 /v1/finance/cash-flow-statement/list
# ============================================================================

class FinancialPeriod(OzonModel):
    from_: datetime = Field(..., alias="from", description="기간 시작")
    to: datetime = Field(..., description="기간 종료")


class FinancialReportParams(OzonModel):
    date: FinancialPeriod
    page: int = Field(1, ge=1)
    with_details: bool = Field(False, description="상세 항목 포함 여부")
    page_size: int = Field(100, ge=1, le=1000)


class CashFlowPeriod(OzonModel):
    id: int = 0
    begin: Optional[datetime] = None
    end: Optional[datetime] = None


class CashFlow(OzonModel):
    period: CashFlowPeriod = Field(default_factory=CashFlowPeriod)
    orders_amount: float = Field(0.0, description="판매 금액")
    returns_amount: float = Field(0.0, description="반품 금액")
    commission_amount: float = Field(0.0, description="Ozon 판매 수수료")
    services_amount: float = Field(0.0, description="추가 서비스 비용")
    item_delivery_and_return_amount: float = Field(0.0, description="물류 서비스 비용")
    currency_code: str = ""


class PricedItem(OzonModel):
    name: str = ""
    price: float = 0.0


class ItemizedTotal(OzonModel):
    total: float = 0.0
    items: List[PricedItem] = Field(default_factory=list)


class DeliveryDetails(OzonModel):
    total: float = 0.0
    amount: float = Field(0.0, description="배송 건 판매 금액")
    delivery_services: ItemizedTotal = Field(default_factory=ItemizedTotal)


class ReturnDetails(OzonModel):
    total: float = 0.0
    amount: float = 0.0
    return_services: ItemizedTotal = Field(default_factory=ItemizedTotal)


class RfbsDetails(OzonModel):
    total: float = 0.0
    transfer_delivery: float = 0.0
    transfer_delivery_return: float = 0.0
    compensation_delivery_return: float = 0.0
    partial_compensation: float = 0.0
    partial_compensation_return: float = 0.0


class Payment(OzonModel):
    currency_code: str = ""
    payment: float = 0.0


class FinancialDetails(OzonModel):
    begin_balance_amount: float = 0.0
    delivery: DeliveryDetails = Field(default_factory=DeliveryDetails)
    invoice_transfer: float = 0.0
    loan: float = 0.0
    payments: List[Payment] = Field(default_factory=list)
    period: CashFlowPeriod = Field(default_factory=CashFlowPeriod)
    return_: ReturnDetails = Field(default_factory=ReturnDetails, alias="return")
    rfbs: RfbsDetails = Field(default_factory=RfbsDetails)
    services: ItemizedTotal = Field(default_factory=ItemizedTotal)
    others: ItemizedTotal = Field(default_factory=ItemizedTotal)
    end_balance_amount: float = 0.0


class FinancialResult(OzonModel):
    cash_flows: List[CashFlow] = Field(default_factory=list)
    details: Optional[FinancialDetails] = Field(None, description="with_details=true 일 때만 포함")
    page_count: int = Field(0, description="전체 페이지 수")


class FinancialReportResponse(OzonResponse):
    result: FinancialResult = Field(default_factory=FinancialResult)


# ============================================================================
# 리포트 생성
# ============================================================================

class ProductsReportParams(OzonModel):
    language: Language = Field(Language.DEFAULT, description="응답 언어")
    offer_id: Optional[List[str]] = None
    search: Optional[str] = Field(None, description="상품 검색어")
    sku: Optional[List[int]] = None
    visibility: Visibility = Field(Visibility.ALL, description="노출 상태 필터 (기본 ALL)")


class ProductsReportResponse(OzonResponse):
    result: ReportCodeResult = Field(default_factory=ReportCodeResult)


class ReturnsReportFilter(OzonModel):
    delivery_schema: Optional[str] = Field(None, description="fbs: 판매자 창고 배송")
    date_from: Optional[datetime] = Field(None, description="최근 3개월까지만 조회 가능")
    date_to: Optional[datetime] = None
    status: Optional[str] = Field(None, description="주문 상태")


class ReturnsReportParams(OzonModel):
    filter: Optional[ReturnsReportFilter] = None
    language: Language = Language.DEFAULT


class ReturnsReportResponse(OzonResponse):
    result: ReportCodeResult = Field(default_factory=ReportCodeResult)


class ShipmentReportFilter(OzonModel):
    cancel_reason_id: Optional[List[int]] = None
    delivery_schema: Optional[List[str]] = Field(None, description="fbo 또는 fbs 중 하나만")
    offer_id: Optional[str] = None
    processed_at_from: Optional[datetime] = None
    processed_at_to: Optional[datetime] = None
    sku: Optional[List[int]] = None
    status_alias: Optional[List[str]] = None
    # 원격 필드명이 "statused"
    statuses: Optional[List[int]] = Field(None, alias="statused")
    title: Optional[str] = None


class ShipmentReportParams(OzonModel):
    filter: Optional[ShipmentReportFilter] = None
    language: Language = Language.DEFAULT


class ShipmentReportResponse(OzonResponse):
    result: ReportCodeResult = Field(default_factory=ReportCodeResult)


class DiscountedReportResponse(OzonResponse):
    # 이 엔드포인트만 결과가 최상위 code 로 옴
    code: str = Field("", description="리포트 고유 식별자")


class FbsStocksReportParams(OzonModel):
    language: Optional[Language] = None
    warehouse_ids: List[int] = Field(..., min_length=1, alias="warehouse_id")


class FbsStocksReportResponse(OzonResponse):
    result: ReportCodeResult = Field(default_factory=ReportCodeResult)
