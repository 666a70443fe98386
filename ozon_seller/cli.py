import argparse
import json
import logging
import sys
from typing import Iterable, Optional

from ozon_seller.api import OzonClient
from ozon_seller.core import OzonResponse
from ozon_seller.models.products import PriceInfoParams, ProductListParams, StocksInfoParams
from ozon_seller.models.reports import ReportDetailsParams, ReportListParams
from ozon_seller.settings import Settings

logger = logging.getLogger("ozon_seller.cli")


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, default=str))


def _dump_pages(pages: Iterable[OzonResponse], items, max_pages: Optional[int]) -> int:
    """페이지를 순회하며 항목을 JSON 한 줄씩 출력. 원격 에러면 1 반환"""
    for page_no, page in enumerate(pages, start=1):
        if not page.is_success:
            logger.error(f"[CLI] {page.common.error_message()}")
            return 1
        for item in items(page):
            _print_json(item.to_payload())
        if max_pages and page_no >= max_pages:
            break
    return 0


def _dump_one(resp: OzonResponse) -> int:
    if not resp.is_success:
        logger.error(f"[CLI] {resp.common.error_message()}")
        return 1
    _print_json(resp.to_payload())
    return 0


def run_command(args, ozon: OzonClient) -> int:
    """하위 명령 실행기. 종료 코드 반환"""
    if args.command == "stocks":
        logger.info("[CLI] 재고 조회 시작")
        params = StocksInfoParams(limit=args.limit)
        return _dump_pages(ozon.products.iter_stocks_info(params), lambda p: p.items, args.max_pages)

    if args.command == "products":
        logger.info("[CLI] 상품 목록 조회 시작")
        params = ProductListParams(limit=args.limit)
        return _dump_pages(ozon.products.iter_products(params), lambda p: p.result.items, args.max_pages)

    if args.command == "prices":
        logger.info("[CLI] 가격 정보 조회 시작")
        params = PriceInfoParams(limit=args.limit)
        return _dump_pages(ozon.products.iter_product_prices(params), lambda p: p.items, args.max_pages)

    if args.command == "reports":
        params = ReportListParams(page_size=args.page_size)
        return _dump_pages(ozon.reports.iter_reports(params), lambda p: p.result.reports, args.max_pages)

    if args.command == "report-info":
        return _dump_one(ozon.reports.get_report_details(ReportDetailsParams(code=args.code)))

    if args.command == "limits":
        return _dump_one(ozon.products.get_product_range_limit())

    logger.error(f"[CLI] Unsupported command: {args.command}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ozon Seller API CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="DEBUG 로그 출력")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("stocks", "재고 수량 조회"),
        ("products", "상품 목록 조회"),
        ("prices", "가격 정보 조회"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--limit", type=int, default=1000)
        sub.add_argument("--max-pages", type=int, default=None, help="최대 페이지 수")

    reports_parser = subparsers.add_parser("reports", help="리포트 목록 조회")
    reports_parser.add_argument("--page-size", type=int, default=100)
    reports_parser.add_argument("--max-pages", type=int, default=None)

    info_parser = subparsers.add_parser("report-info", help="리포트 상태 조회")
    info_parser.add_argument("code", help="리포트 코드")

    subparsers.add_parser("limits", help="상품 한도 조회")
    return parser


def main(argv=None, ozon: Optional[OzonClient] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 1

    if ozon is None:
        settings = Settings()
        if not settings.ozon_client_id or not settings.ozon_api_key:
            logger.error("[CLI] OZON_CLIENT_ID / OZON_API_KEY 환경 변수가 필요합니다.")
            return 1
        ozon = OzonClient.from_settings(settings)

    try:
        with ozon:
            return run_command(args, ozon)
    except Exception as e:
        logger.exception(f"[CLI] Critical error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
