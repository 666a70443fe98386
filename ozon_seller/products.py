"""
Ozon 상품 API

재고, 가격, 상품 정보 엔드포인트를 호출합니다.
모든 메서드는 고정 경로로 POST 하고 공통 응답(common)이 채워진 응답 모델을 반환합니다.

참고:
    - 원격 에러(4xx/5xx)는 예외가 아니라 resp.common 으로 전달됩니다
    - 대량 업데이트의 항목별 오류는 result[i].errors 에 담기며 호출은 성공으로 끝납니다
    - 요청 한도는 원격 서버가 적용합니다. 로컬에서는 배치 크기만 검증합니다
"""
from __future__ import annotations

from typing import Iterator

from ozon_seller.core import EndpointGroup, RequestOptions
from ozon_seller.models.products import (
    ArchiveParams,
    AttributesParams,
    AttributesParamsV2,
    AttributesResponse,
    AttributesResponseV2,
    BoolResultResponse,
    ChangeOfferIdsParams,
    ChangeOfferIdsResponse,
    DescriptionParams,
    DescriptionResponse,
    DigitalCodesStatusParams,
    DigitalCodesStatusResponse,
    EconomyInfoParams,
    EconomyInfoResponse,
    EconomyListParams,
    EconomyListResponse,
    FbsWarehouseStocksParams,
    FbsWarehouseStocksResponse,
    ImportBySkuParams,
    ImportBySkuResponse,
    ImportPicturesParams,
    ImportPicturesResponse,
    ImportStatusParams,
    ImportStatusResponse,
    MarkdownDiscountParams,
    MarkdownDiscountResponse,
    MarkdownInfoParams,
    MarkdownInfoResponse,
    PicturesInfoParams,
    PicturesInfoResponse,
    PriceInfoParams,
    PriceInfoResponse,
    PriceTimerParams,
    PriceTimerStatusResponse,
    PriceTimerUpdateResponse,
    ProductImportParams,
    ProductImportResponse,
    ProductInfoListParams,
    ProductInfoListResponse,
    ProductListParams,
    ProductListResponse,
    RangeLimitResponse,
    RatingBySkuParams,
    RatingBySkuResponse,
    RelatedSkusParams,
    RelatedSkusResponse,
    RemoveWithoutSkuParams,
    RemoveWithoutSkuResponse,
    StocksInfoParams,
    StocksInfoResponse,
    SubscriptionParams,
    SubscriptionResponse,
    UpdateCharacteristicsParams,
    UpdateCharacteristicsResponse,
    UpdatePricesParams,
    UpdatePricesResponse,
    UpdateStocksParams,
    UpdateStocksResponse,
    UpdateWarehouseStocksParams,
    UpdateWarehouseStocksResponse,
    UploadDigitalCodesParams,
    UploadDigitalCodesResponse,
)
from ozon_seller.pagination import iter_cursor_pages


class Products(EndpointGroup):
    """상품 엔드포인트 그룹"""

    # ------------------------------------------------------------------
    # 재고
    # ------------------------------------------------------------------

    def get_stocks_info(
        self, params: StocksInfoParams, options: RequestOptions | None = None
    ) -> StocksInfoResponse:
        """
        FBO/FBS 재고 수량 조회

        다음 페이지는 응답의 cursor 를 params.cursor 에 넣어 요청합니다.
        """
        return self._post("/v4/product/info/stocks", params, StocksInfoResponse, options)

    def iter_stocks_info(
        self, params: StocksInfoParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[StocksInfoResponse]:
        return iter_cursor_pages(
            lambda p: self.get_stocks_info(p, options),
            params or StocksInfoParams(),
            next_cursor=lambda page: page.cursor,
            items=lambda page: page.items,
        )

    def update_stocks(
        self, params: UpdateStocksParams, options: RequestOptions | None = None
    ) -> UpdateStocksResponse:
        """
        FBS/rFBS 재고 수량 변경 (기본 창고)

        요청 한도: 요청당 최대 100개 상품, 분당 80회.
        항목별 결과는 resp.succeeded() / resp.failed() 로 확인합니다.
        """
        return self._post("/v1/product/import/stocks", params, UpdateStocksResponse, options)

    def update_quantity_stock_products(
        self, params: UpdateWarehouseStocksParams, options: RequestOptions | None = None
    ) -> UpdateWarehouseStocksResponse:
        """
        창고별 재고 수량 변경

        요청 한도: 요청당 최대 100개 상품, 분당 80회.
        같은 상품/창고 조합은 2분에 한 번만 변경할 수 있으며, 초과 시 항목에 TOO_MANY_REQUESTS 오류가 담깁니다.
        """
        return self._post("/v2/products/stocks", params, UpdateWarehouseStocksResponse, options)

    def stocks_in_sellers_warehouse(
        self, params: FbsWarehouseStocksParams, options: RequestOptions | None = None
    ) -> FbsWarehouseStocksResponse:
        """판매자 창고(FBS/rFBS) 재고 조회"""
        return self._post("/v1/product/info/stocks-by-warehouse/fbs", params, FbsWarehouseStocksResponse, options)

    # ------------------------------------------------------------------
    # 가격
    # ------------------------------------------------------------------

    def update_prices(
        self, params: UpdatePricesParams, options: RequestOptions | None = None
    ) -> UpdatePricesResponse:
        """
        가격 변경

        요청당 최대 1000개 상품. 상품별 가격은 시간당 10회까지만 변경할 수 있습니다.
        old_price 를 초기화하려면 "0" 을 전달합니다.
        """
        return self._post("/v1/product/import/prices", params, UpdatePricesResponse, options)

    def get_product_price_info(
        self, params: PriceInfoParams, options: RequestOptions | None = None
    ) -> PriceInfoResponse:
        """가격, 수수료, 프로모션 정보 조회 (filter.visibility 기본값 ALL)"""
        return self._post("/v5/product/info/prices", params, PriceInfoResponse, options)

    def iter_product_prices(
        self, params: PriceInfoParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[PriceInfoResponse]:
        return iter_cursor_pages(
            lambda p: self.get_product_price_info(p, options),
            params or PriceInfoParams(),
            next_cursor=lambda page: page.cursor,
            items=lambda page: page.items,
        )

    def update_price_relevance_timer(
        self, params: PriceTimerParams, options: RequestOptions | None = None
    ) -> PriceTimerUpdateResponse:
        """최저가 유효 타이머 갱신"""
        return self._post("/v1/product/action/timer/update", params, PriceTimerUpdateResponse, options)

    def status_price_relevance_timer(
        self, params: PriceTimerParams, options: RequestOptions | None = None
    ) -> PriceTimerStatusResponse:
        """최저가 유효 타이머 상태 조회"""
        return self._post("/v1/product/action/timer/status", params, PriceTimerStatusResponse, options)

    # ------------------------------------------------------------------
    # 상품 등록/조회
    # ------------------------------------------------------------------

    def create_or_update_product(
        self, params: ProductImportParams, options: RequestOptions | None = None
    ) -> ProductImportResponse:
        """
        상품 등록 또는 수정

        요청당 최대 100개 상품. 처리는 비동기이며 반환된 task_id 로
        get_product_import_status() 를 호출해 결과를 확인합니다.
        """
        return self._post("/v3/product/import", params, ProductImportResponse, options)

    def get_product_import_status(
        self, params: ImportStatusParams, options: RequestOptions | None = None
    ) -> ImportStatusResponse:
        return self._post("/v1/product/import/info", params, ImportStatusResponse, options)

    def create_product_by_ozon_id(
        self, params: ImportBySkuParams, options: RequestOptions | None = None
    ) -> ImportBySkuResponse:
        """Ozon SKU 로 기존 상품 카드를 복제해 등록"""
        return self._post("/v1/product/import-by-sku", params, ImportBySkuResponse, options)

    def get_list_of_products(
        self, params: ProductListParams, options: RequestOptions | None = None
    ) -> ProductListResponse:
        """
        상품 목록 조회

        filter.offer_id 와 filter.product_id 는 함께 쓸 수 없습니다 (모델 생성 시 ValidationError).
        """
        return self._post("/v3/product/list", params, ProductListResponse, options)

    def iter_products(
        self, params: ProductListParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[ProductListResponse]:
        return iter_cursor_pages(
            lambda p: self.get_list_of_products(p, options),
            params or ProductListParams(),
            next_cursor=lambda page: page.result.last_id,
            items=lambda page: page.result.items,
            cursor_field="last_id",
        )

    def get_products_rating_by_sku(
        self, params: RatingBySkuParams, options: RequestOptions | None = None
    ) -> RatingBySkuResponse:
        """콘텐츠 평점과 개선 방법 조회"""
        return self._post("/v1/product/rating-by-sku", params, RatingBySkuResponse, options)

    def list_products_by_ids(
        self, params: ProductInfoListParams, options: RequestOptions | None = None
    ) -> ProductInfoListResponse:
        """offer_id / product_id / sku 중 한 종류로 상품 상세 조회 (최대 1000개)"""
        return self._post("/v3/product/info/list", params, ProductInfoListResponse, options)

    def get_description_of_product(
        self, params: AttributesParams, options: RequestOptions | None = None
    ) -> AttributesResponse:
        """
        상품 특성 조회

        식별자 없이 조회할 때는 limit 과 last_id 로 다음 페이지를 요청합니다.
        """
        return self._post("/v4/product/info/attributes", params, AttributesResponse, options)

    def iter_descriptions(
        self, params: AttributesParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[AttributesResponse]:
        return iter_cursor_pages(
            lambda p: self.get_description_of_product(p, options),
            params or AttributesParams(),
            next_cursor=lambda page: page.last_id,
            items=lambda page: page.result,
            cursor_field="last_id",
        )

    def get_description_of_products(
        self, params: AttributesParamsV2, options: RequestOptions | None = None
    ) -> AttributesResponseV2:
        """
        상품 특성 조회 (문자열 식별자 스키마)

        get_description_of_product() 와 같은 경로이지만 식별자를 모두 문자열로 보내고 sku 필터를 지원합니다.
        """
        return self._post("/v4/product/info/attributes", params, AttributesResponseV2, options)

    def get_product_description(
        self, params: DescriptionParams, options: RequestOptions | None = None
    ) -> DescriptionResponse:
        return self._post("/v1/product/info/description", params, DescriptionResponse, options)

    def get_product_range_limit(self, options: RequestOptions | None = None) -> RangeLimitResponse:
        """
        상품 한도 조회

        전체 상품 수 한도, 일일 생성 한도, 일일 수정 한도를 반환합니다.
        전체 한도를 초과하면 새 상품을 만들 수 없습니다.
        """
        return self._post("/v4/product/info/limit", None, RangeLimitResponse, options)

    def change_product_ids(
        self, params: ChangeOfferIdsParams, options: RequestOptions | None = None
    ) -> ChangeOfferIdsResponse:
        """offer_id 변경 (요청당 250개 이하 권장)"""
        return self._post("/v1/product/update/offer-id", params, ChangeOfferIdsResponse, options)

    def update_characteristics(
        self, params: UpdateCharacteristicsParams, options: RequestOptions | None = None
    ) -> UpdateCharacteristicsResponse:
        return self._post("/v1/product/attributes/update", params, UpdateCharacteristicsResponse, options)

    def get_related_skus(
        self, params: RelatedSkusParams, options: RequestOptions | None = None
    ) -> RelatedSkusResponse:
        """연관 SKU 조회 (요청당 최대 200개)"""
        return self._post("/v1/product/related-sku/get", params, RelatedSkusResponse, options)

    def number_of_subs_to_product_availability(
        self, params: SubscriptionParams, options: RequestOptions | None = None
    ) -> SubscriptionResponse:
        """입고 알림을 구독한 사용자 수"""
        return self._post("/v1/product/info/subscription", params, SubscriptionResponse, options)

    # ------------------------------------------------------------------
    # 이미지
    # ------------------------------------------------------------------

    def update_product_images(
        self, params: ImportPicturesParams, options: RequestOptions | None = None
    ) -> ImportPicturesResponse:
        """
        상품 이미지 업로드/교체

        상품당 최대 15장. 호출할 때마다 전체 이미지 목록을 보내야 합니다.
        """
        return self._post("/v1/product/pictures/import", params, ImportPicturesResponse, options)

    def check_image_uploading_status(
        self, params: PicturesInfoParams, options: RequestOptions | None = None
    ) -> PicturesInfoResponse:
        return self._post("/v2/product/pictures/info", params, PicturesInfoResponse, options)

    # ------------------------------------------------------------------
    # 보관/삭제
    # ------------------------------------------------------------------

    def archive_product(
        self, params: ArchiveParams, options: RequestOptions | None = None
    ) -> BoolResultResponse:
        return self._post("/v1/product/archive", params, BoolResultResponse, options)

    def unarchive_product(
        self, params: ArchiveParams, options: RequestOptions | None = None
    ) -> BoolResultResponse:
        return self._post("/v1/product/unarchive", params, BoolResultResponse, options)

    def remove_product_without_sku(
        self, params: RemoveWithoutSkuParams, options: RequestOptions | None = None
    ) -> RemoveWithoutSkuResponse:
        """
        SKU 가 없는 보관 상품 삭제

        요청당 최대 500개. 항목별 결과는 resp.status 에 담깁니다.
        """
        return self._post("/v2/products/delete", params, RemoveWithoutSkuResponse, options)

    # ------------------------------------------------------------------
    # 디지털 상품
    # ------------------------------------------------------------------

    def upload_activation_codes(
        self, params: UploadDigitalCodesParams, options: RequestOptions | None = None
    ) -> UploadDigitalCodesResponse:
        return self._post("/v1/product/upload_digital_codes", params, UploadDigitalCodesResponse, options)

    def status_of_uploading_activation_codes(
        self, params: DigitalCodesStatusParams, options: RequestOptions | None = None
    ) -> DigitalCodesStatusResponse:
        return self._post("/v1/product/upload_digital_codes/info", params, DigitalCodesStatusResponse, options)

    # ------------------------------------------------------------------
    # 마크다운 상품
    # ------------------------------------------------------------------

    def get_markdown_info(
        self, params: MarkdownInfoParams, options: RequestOptions | None = None
    ) -> MarkdownInfoResponse:
        """마크다운(할인) 상품의 상태와 결함 정보"""
        return self._post("/v1/product/info/discounted", params, MarkdownInfoResponse, options)

    def set_discount_on_markdown_product(
        self, params: MarkdownDiscountParams, options: RequestOptions | None = None
    ) -> MarkdownDiscountResponse:
        """FBS 마크다운 상품 할인율 설정 (3~99%)"""
        return self._post("/v1/product/update/discount", params, MarkdownDiscountResponse, options)

    # ------------------------------------------------------------------
    # 이코노미(MOQ) 상품
    # ------------------------------------------------------------------

    def economy_info(
        self, params: EconomyInfoParams, options: RequestOptions | None = None
    ) -> EconomyInfoResponse:
        return self._post("/v1/product/quant/info", params, EconomyInfoResponse, options)

    def list_economy(
        self, params: EconomyListParams, options: RequestOptions | None = None
    ) -> EconomyListResponse:
        return self._post("/v1/product/quant/list", params, EconomyListResponse, options)

    def iter_economy(
        self, params: EconomyListParams | None = None, options: RequestOptions | None = None
    ) -> Iterator[EconomyListResponse]:
        return iter_cursor_pages(
            lambda p: self.list_economy(p, options),
            params or EconomyListParams(),
            next_cursor=lambda page: page.cursor,
            items=lambda page: page.products,
        )
