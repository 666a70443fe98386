"""Unit tests for the report endpoints."""

from datetime import datetime, timezone

import pytest

from ozon_seller.enums import Language, ReportInfoStatus, ReportType
from ozon_seller.models.reports import (
    FbsStocksReportParams,
    FinancialPeriod,
    FinancialReportParams,
    ProductsReportParams,
    ReportDetailsParams,
    ReportListParams,
    ReturnsReportFilter,
    ReturnsReportParams,
    ShipmentReportFilter,
    ShipmentReportParams,
)


@pytest.mark.unit
class TestReports:
    """리포트 생성/조회."""

    def test_report_details(self, stub, ozon):
        stub.add(200, {"result": {
            "code": "REPORT_seller_products_924336_1720170405_a9ea2f27",
            "created_at": "2024-07-05T09:06:45.966Z",
            "error": "",
            "file": "https://cdn/report.csv",
            "params": {"visibility": "ALL"},
            "report_type": "SELLER_PRODUCTS",
            "status": "success",
        }})

        resp = ozon.reports.get_report_details(ReportDetailsParams(code="REPORT_seller_products_924336_1720170405_a9ea2f27"))

        assert resp.result.status == ReportInfoStatus.SUCCESS.value
        assert resp.result.is_ready
        assert resp.result.file == "https://cdn/report.csv"
        assert resp.result.params["visibility"] == "ALL"
        assert stub.paths == ["/v1/report/info"]

    def test_products_report_defaults(self, stub, ozon):
        stub.add(200, {"result": {"code": "abc"}})

        resp = ozon.reports.get_products()

        assert resp.result.code == "abc"
        assert stub.body() == {"language": "DEFAULT", "visibility": "ALL"}

    def test_products_report_filters(self, stub, ozon):
        stub.add(200, {"result": {"code": "abc"}})

        ozon.reports.get_products(ProductsReportParams(language=Language.EN, offer_id=["x"], sku=[1]))

        assert stub.body() == {"language": "EN", "offer_id": ["x"], "sku": [1], "visibility": "ALL"}

    def test_report_list_type(self, stub, ozon):
        stub.add(200, {"result": {"reports": [], "total": 0}})

        ozon.reports.get_list(ReportListParams(report_type=ReportType.SELLER_STOCK))

        assert stub.body()["report_type"] == "SELLER_STOCK"
        assert stub.paths == ["/v1/report/list"]

    def test_shipment_statuses_key(self, stub, ozon):
        stub.add(200, {"result": {"code": "s"}})

        ozon.reports.get_shipment(ShipmentReportParams(filter=ShipmentReportFilter(
            statuses=[1, 2],
            delivery_schema=["fbs"],
            processed_at_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )))

        body = stub.body()
        assert body["filter"]["statused"] == [1, 2]
        assert body["filter"]["delivery_schema"] == ["fbs"]
        assert body["filter"]["processed_at_from"].startswith("2024-01-01T00:00:00")
        assert "processed_at_to" not in body["filter"]
        assert stub.paths == ["/v1/report/postings/create"]

    def test_returns_report(self, stub, ozon):
        stub.add(200, {"result": {"code": "r"}})

        resp = ozon.reports.get_returns(ReturnsReportParams(filter=ReturnsReportFilter(delivery_schema="fbs")))

        assert resp.result.code == "r"
        assert stub.body() == {"filter": {"delivery_schema": "fbs"}, "language": "DEFAULT"}
        assert stub.paths == ["/v2/report/returns/create"]

    def test_discounted_report_top_level_code(self, stub, ozon):
        stub.add(200, {"code": "d-1"})

        resp = ozon.reports.issue_on_discounted_products()

        assert resp.code == "d-1"
        assert resp.status_code == 200
        assert stub.paths == ["/v1/report/discounted/create"]

    def test_discounted_report_error(self, stub, ozon):
        """오류 응답의 숫자 code 는 envelope 으로만 디코딩."""
        stub.add(403, {"code": 7, "message": "forbidden"})

        resp = ozon.reports.issue_on_discounted_products()

        assert resp.code == ""
        assert resp.common.code == 7

    def test_fbs_stocks_report(self, stub, ozon):
        stub.add(200, {"result": {"code": "w"}})

        ozon.reports.get_fbs_stocks(FbsStocksReportParams(warehouse_ids=[22142605386000]))

        assert stub.body() == {"warehouse_id": [22142605386000]}
        assert stub.paths == ["/v1/report/warehouse/stock"]

    def test_financial_details(self, stub, ozon):
        stub.add(200, {"result": {
            "cash_flows": [{"period": {"id": 11, "begin": "2024-01-01T00:00:00Z", "end": "2024-01-15T00:00:00Z"},
                            "orders_amount": 1000.5, "currency_code": "RUB"}],
            "details": {
                "delivery": {"total": -5.0, "amount": 10.0,
                             "delivery_services": {"total": -1.0, "items": [{"name": "MarketplaceServiceItemDirectFlowLogistic", "price": -1.0}]}},
                "return": {"total": 0, "amount": 0, "return_services": {"total": 0, "items": []}},
                "rfbs": {"total": 3.0},
                "payments": [{"currency_code": "RUB", "payment": 100.0}],
            },
            "page_count": 1,
        }})

        params = FinancialReportParams(
            date=FinancialPeriod(
                from_=datetime(2024, 1, 1, tzinfo=timezone.utc),
                to=datetime(2024, 1, 31, tzinfo=timezone.utc),
            ),
            with_details=True,
        )
        resp = ozon.reports.get_financial(params)

        assert resp.result.cash_flows[0].orders_amount == 1000.5
        assert resp.result.details.delivery.delivery_services.items[0].price == -1.0
        assert resp.result.details.return_.total == 0
        assert resp.result.details.rfbs.total == 3.0
        assert stub.body()["with_details"] is True
        assert set(stub.body()["date"]) == {"from", "to"}
        assert stub.paths == ["/v1/finance/cash-flow-statement/list"]
