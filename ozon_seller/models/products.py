"""
상품 API 요청/응답 모델

재고, 가격, 상품 등록/조회, 이미지, 이코노미(MOQ) 상품 관련 엔드포인트의 데이터 형태를 정의합니다.
식별자 그룹(offer_id / product_id / sku)을 한 번에 하나만 허용하는 엔드포인트는 생성 시점에 검증합니다.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from ozon_seller.core import OzonModel, OzonResponse
from ozon_seller.enums import (
    VAT,
    AutoActionEnabled,
    DimensionUnit,
    PriceStrategy,
    ServiceType,
    SortDirection,
    Visibility,
    WeightUnit,
)


def _ensure_single_identifier_group(model: OzonModel, fields: tuple[str, ...]) -> None:
    used = [name for name in fields if getattr(model, name)]
    if len(used) > 1:
        raise ValueError(f"식별자 그룹은 한 번에 하나만 사용할 수 있습니다: {', '.join(used)}")


# ============================================================================
# 공통
# ============================================================================

class ItemError(OzonModel):
    """항목별 처리 오류"""
    code: str = Field("", description="에러 코드")
    message: str = Field("", description="에러 사유")


class BulkItemResult(OzonModel):
    """
    대량 업데이트의 항목별 결과

    호출 자체가 성공해도 항목마다 실패할 수 있으므로 각 항목의 errors 를 확인해야 합니다.
    """
    errors: List[ItemError] = Field(default_factory=list, description="처리 중 발생한 오류 목록")
    offer_id: str = Field("", description="판매자 시스템 상품 식별자")
    product_id: int = Field(0, description="상품 식별자")
    updated: bool = Field(False, description="정상 업데이트 여부")

    @property
    def ok(self) -> bool:
        return self.updated and not self.errors


class BulkUpdateResponse(OzonResponse):
    result: List[BulkItemResult] = Field(default_factory=list, description="항목별 결과")

    def succeeded(self) -> list:
        return [item for item in self.result if item.ok]

    def failed(self) -> list:
        return [item for item in self.result if not item.ok]


class NameValue(OzonModel):
    name: str = ""
    value: str = ""


class AttributeValue(OzonModel):
    dictionary_value_id: int = Field(0, description="사전 값 식별자")
    value: str = Field("", description="특성 값")


class Attribute(OzonModel):
    """상품 특성"""
    complex_id: int = Field(0, description="중첩 특성을 지원하는 특성 식별자")
    id: int = Field(0, description="특성 식별자")
    values: List[AttributeValue] = Field(default_factory=list, description="특성 값 목록")


class ComplexAttribute(OzonModel):
    attributes: List[Attribute] = Field(default_factory=list)


class ModelInfo(OzonModel):
    model_id: int = Field(0, description="모델 식별자")
    count: int = Field(0, description="모델로 묶인 상품 수")


# ============================================================================
# 재고 조회 /v4/product/info/stocks
# ============================================================================

class StocksInfoWithQuant(OzonModel):
    """이코노미 요금제 상품 필터"""
    created: bool = Field(False, description="활성 이코노미 상품")
    exists: bool = Field(False, description="모든 상태의 이코노미 상품")


class StocksInfoFilter(OzonModel):
    offer_id: Optional[List[str]] = Field(None, description="offer_id 필터")
    product_id: Optional[List[int]] = Field(None, description="product_id 필터")
    visibility: Optional[Visibility] = Field(None, description="노출 상태 필터 (생략 시 원격 기본값)")
    with_quant: StocksInfoWithQuant = Field(default_factory=StocksInfoWithQuant)


class StocksInfoParams(OzonModel):
    cursor: str = Field("", description="다음 페이지 커서 (첫 요청은 빈 값)")
    limit: int = Field(1000, ge=1, le=1000, description="페이지당 항목 수")
    filter: StocksInfoFilter = Field(default_factory=StocksInfoFilter)


class StocksInfoStock(OzonModel):
    present: int = Field(0, description="창고 보유 수량")
    reserved: int = Field(0, description="예약 수량")
    type: str = Field("", description="창고 유형")
    shipment_type: str = Field("", description="포장 유형")
    sku: int = Field(0, description="Ozon SKU")


class StocksInfoItem(OzonModel):
    offer_id: str = ""
    product_id: int = 0
    stocks: List[StocksInfoStock] = Field(default_factory=list)


class StocksInfoResponse(OzonResponse):
    cursor: str = Field("", description="다음 페이지 커서")
    total: int = Field(0, description="재고 정보가 있는 고유 상품 수")
    items: List[StocksInfoItem] = Field(default_factory=list)


# ============================================================================
# 재고 업데이트 /v1/product/import/stocks, /v2/products/stocks
# ============================================================================

class StockUpdate(OzonModel):
    offer_id: Optional[str] = Field(None, description="판매자 시스템 상품 식별자")
    product_id: Optional[int] = Field(None, description="상품 식별자")
    stock: int = Field(..., ge=0, alias="stocks", description="재고 수량")


class UpdateStocksParams(OzonModel):
    stocks: List[StockUpdate] = Field(..., min_length=1, max_length=100, description="재고 정보 (최대 100개)")


class UpdateStocksResponse(BulkUpdateResponse):
    pass


class WarehouseStockUpdate(OzonModel):
    offer_id: Optional[str] = Field(None, description="판매자 시스템 상품 식별자")
    product_id: Optional[int] = Field(None, description="상품 식별자")
    quant_size: Optional[int] = Field(None, description="일반 상품은 1, 이코노미 상품은 MOQ 크기")
    stock: int = Field(..., ge=0, description="재고 수량")
    warehouse_id: int = Field(..., description="/v1/warehouse/list 의 창고 식별자")


class UpdateWarehouseStocksParams(OzonModel):
    stocks: List[WarehouseStockUpdate] = Field(..., min_length=1, max_length=100, description="창고별 재고 (최대 100개)")


class WarehouseStockResult(BulkItemResult):
    quant_size: int = Field(0, description="업데이트한 상품 유형 (1 또는 MOQ 크기)")
    warehouse_id: int = Field(0, description="창고 식별자")


class UpdateWarehouseStocksResponse(BulkUpdateResponse):
    result: List[WarehouseStockResult] = Field(default_factory=list)


# ============================================================================
# 판매자 창고 재고 /v1/product/info/stocks-by-warehouse/fbs
# ============================================================================

class FbsWarehouseStocksParams(OzonModel):
    sku: List[str] = Field(..., min_length=1, description="FBS/rFBS 상품 SKU 목록")


class FbsWarehouseStock(OzonModel):
    sku: int = 0
    present: int = Field(0, description="창고 전체 수량")
    product_id: int = 0
    reserved: int = Field(0, description="예약 수량")
    warehouse_id: int = 0
    warehouse_name: str = ""


class FbsWarehouseStocksResponse(OzonResponse):
    result: List[FbsWarehouseStock] = Field(default_factory=list)


# ============================================================================
# 가격 업데이트 /v1/product/import/prices
# ============================================================================

class PriceUpdate(OzonModel):
    """
    상품 가격

    old_price 가 0보다 크면 price 와 일정 차이가 있어야 합니다.
    (400 미만: 20루블, 400~10,000: 5%, 10,000 초과: 500루블) old_price 를 초기화하려면 "0".
    """
    auto_action_enabled: Optional[AutoActionEnabled] = Field(None, description="프로모션 자동 적용")
    currency_code: Optional[str] = Field(None, description="가격 통화 (기본 RUB)")
    min_price_for_auto_actions_enabled: Optional[bool] = Field(None, description="프로모션 생성 시 최저가 반영")
    min_price: Optional[str] = Field(None, description="프로모션 적용 후 최저가")
    net_price: Optional[str] = Field(None, description="원가")
    offer_id: Optional[str] = Field(None, description="판매자 시스템 상품 식별자")
    old_price: Optional[str] = Field(None, description="할인 전 가격")
    price: str = Field(..., description="할인 적용 가격")
    price_strategy_enabled: Optional[PriceStrategy] = Field(None, description="가격 전략 자동 적용")
    product_id: Optional[int] = Field(None, description="상품 식별자")
    quant_size: Optional[int] = Field(None, description="일반 상품은 1, 이코노미 상품은 MOQ 크기")
    vat: Optional[VAT] = Field(None, description="부가세율")


class UpdatePricesParams(OzonModel):
    prices: List[PriceUpdate] = Field(..., min_length=1, max_length=1000, description="가격 정보 (최대 1000개)")


class UpdatePricesResponse(BulkUpdateResponse):
    pass


# ============================================================================
# 상품 등록/수정 /v3/product/import
# ============================================================================

class ProductPDF(OzonModel):
    index: int = Field(0, description="정렬 순서")
    name: str = Field("", description="파일 이름")
    url: str = Field("", description="파일 주소")


class ProductImportItem(OzonModel):
    attributes: List[Attribute] = Field(default_factory=list, description="카테고리별 상품 특성")
    barcode: Optional[str] = None
    description_category_id: int = Field(..., description="카테고리 식별자")
    new_description_category_id: Optional[int] = Field(None, description="카테고리 변경 시 새 카테고리")
    color_image: Optional[str] = Field(None, description="마케팅 색상 이미지 URL (JPG)")
    complex_attributes: List[ComplexAttribute] = Field(default_factory=list)
    depth: int = Field(..., description="포장 깊이")
    dimension_unit: DimensionUnit = Field(..., description="치수 단위")
    geo_names: Optional[List[str]] = Field(None, description="지역 제한")
    height: int = Field(..., description="포장 높이")
    images: List[str] = Field(default_factory=list, max_length=15, description="이미지 URL (최대 15개)")
    primary_image: Optional[str] = Field(None, description="대표 이미지 URL")
    images_360: Optional[List[str]] = Field(None, max_length=70, description="360 이미지 (최대 70개)")
    name: str = Field(..., max_length=500, description="상품명")
    offer_id: str = Field(..., max_length=50, description="판매자 시스템 상품 식별자")
    currency_code: Optional[str] = Field(None, description="가격 통화 (기본 RUB)")
    old_price: Optional[str] = Field(None, description="할인 전 가격")
    pdf_list: Optional[List[ProductPDF]] = None
    price: str = Field(..., description="할인 적용 가격")
    service_type: ServiceType = Field(ServiceType.IS_CODE_SERVICE, description="서비스 유형")
    type_id: Optional[int] = Field(None, description="상품 유형 식별자")
    vat: VAT = Field(..., description="부가세율")
    weight: int = Field(..., description="포장 포함 무게")
    weight_unit: WeightUnit = Field(..., description="무게 단위")
    width: int = Field(..., description="포장 너비")

    @model_validator(mode="after")
    def check_images_with_primary(self) -> "ProductImportItem":
        if self.primary_image and len(self.images) > 14:
            raise ValueError("primary_image 를 지정하면 images 는 최대 14개입니다.")
        return self


class ProductImportParams(OzonModel):
    items: List[ProductImportItem] = Field(..., min_length=1, max_length=100)


class TaskResult(OzonModel):
    task_id: int = Field(0, description="작업 식별자")


class ProductImportResponse(OzonResponse):
    result: TaskResult = Field(default_factory=TaskResult)


# ============================================================================
# 상품 목록 /v3/product/list
# ============================================================================

class ProductListFilter(OzonModel):
    """offer_id 와 product_id 는 동시에 사용할 수 없습니다."""
    offer_id: Optional[List[str]] = Field(None, max_length=1000)
    product_id: Optional[List[int]] = Field(None, max_length=1000)
    visibility: Optional[Visibility] = None

    @model_validator(mode="after")
    def check_identifier_group(self) -> "ProductListFilter":
        _ensure_single_identifier_group(self, ("offer_id", "product_id"))
        return self


class ProductListParams(OzonModel):
    filter: ProductListFilter = Field(default_factory=ProductListFilter)
    last_id: str = Field("", description="이전 응답의 last_id (첫 요청은 빈 값)")
    limit: int = Field(1000, ge=1, le=1000)


class ProductQuant(OzonModel):
    warehouse_id: int = 0
    quantity: int = 0
    reserved: int = 0


class ProductListItem(OzonModel):
    product_id: int = 0
    offer_id: str = ""
    has_fbo_stocks: bool = False
    has_fbs_stocks: bool = False
    archived: bool = False
    is_discounted: bool = False
    quants: List[ProductQuant] = Field(default_factory=list)


class ProductListResult(OzonModel):
    items: List[ProductListItem] = Field(default_factory=list)
    total: int = 0
    last_id: str = ""


class ProductListResponse(OzonResponse):
    result: ProductListResult = Field(default_factory=ProductListResult)


# ============================================================================
# 콘텐츠 평점 /v1/product/rating-by-sku
# ============================================================================

class RatingBySkuParams(OzonModel):
    skus: List[int] = Field(..., min_length=1)


class RatingCondition(OzonModel):
    cost: float = Field(0.0, description="조건 충족 시 점수")
    description: str = ""
    fulfilled: bool = False
    key: str = ""


class RatingImproveAttribute(OzonModel):
    id: int = 0
    name: str = ""


class RatingGroup(OzonModel):
    conditions: List[RatingCondition] = Field(default_factory=list)
    improve_at_least: int = 0
    improve_attributes: List[RatingImproveAttribute] = Field(default_factory=list)
    key: str = ""
    name: str = ""
    rating: float = 0.0
    weight: float = Field(0.0, description="그룹이 평점에 미치는 비중 (%)")


class SkuRating(OzonModel):
    sku: int = 0
    rating: float = Field(0.0, description="콘텐츠 평점 0~100")
    groups: List[RatingGroup] = Field(default_factory=list)


class RatingBySkuResponse(OzonResponse):
    products: List[SkuRating] = Field(default_factory=list)


# ============================================================================
# 등록 작업 상태 /v1/product/import/info
# ============================================================================

class ImportStatusParams(OzonModel):
    task_id: int


class ProductItemError(OzonModel):
    code: str = ""
    state: str = ""
    level: str = ""
    description: str = ""
    field: str = ""
    attribute_id: int = 0
    attribute_name: str = ""
    optional_description_elements: Dict[str, str] = Field(default_factory=dict)


class ImportItemError(ProductItemError):
    message: str = Field("", description="기술적 에러 설명")


class ImportStatusItem(OzonModel):
    offer_id: str = ""
    product_id: int = 0
    status: str = Field("", description="pending / imported / failed")
    errors: List[ImportItemError] = Field(default_factory=list)


class ImportStatusResult(OzonModel):
    items: List[ImportStatusItem] = Field(default_factory=list)
    total: int = 0


class ImportStatusResponse(OzonResponse):
    result: ImportStatusResult = Field(default_factory=ImportStatusResult)


# ============================================================================
# SKU 로 상품 복제 /v1/product/import-by-sku
# ============================================================================

class ImportBySkuItem(OzonModel):
    name: str = Field(..., max_length=500)
    offer_id: str = Field(..., max_length=50)
    old_price: Optional[str] = None
    price: str
    currency_code: Optional[str] = None
    sku: int
    vat: VAT


class ImportBySkuParams(OzonModel):
    items: List[ImportBySkuItem] = Field(..., min_length=1)


class ImportBySkuResult(OzonModel):
    task_id: int = 0
    unmatched_sku_list: List[int] = Field(default_factory=list)


class ImportBySkuResponse(OzonResponse):
    result: ImportBySkuResult = Field(default_factory=ImportBySkuResult)


# ============================================================================
# 이미지 /v1/product/pictures/import, /v2/product/pictures/info
# ============================================================================

class ImportPicturesParams(OzonModel):
    """호출할 때마다 상품에 있어야 할 이미지 전체를 전달해야 합니다 (기존 이미지는 대체됨)."""
    color_image: Optional[str] = None
    images: List[str] = Field(default_factory=list, max_length=15)
    images360: Optional[List[str]] = Field(None, max_length=70)
    product_id: int


class Picture(OzonModel):
    is_360: bool = False
    is_color: bool = False
    is_primary: bool = False
    product_id: int = 0
    state: str = Field("", description="imported / uploaded / pending")
    url: str = ""


class PicturesResult(OzonModel):
    pictures: List[Picture] = Field(default_factory=list)


class ImportPicturesResponse(OzonResponse):
    result: PicturesResult = Field(default_factory=PicturesResult)


class PicturesInfoParams(OzonModel):
    product_id: List[int] = Field(..., min_length=1)


class PicturesInfoItem(OzonModel):
    product_id: int = 0
    primary_photo: List[str] = Field(default_factory=list)
    photo: List[str] = Field(default_factory=list)
    color_photo: List[str] = Field(default_factory=list)
    photo_360: List[str] = Field(default_factory=list)


class PicturesInfoResponse(OzonResponse):
    items: List[PicturesInfoItem] = Field(default_factory=list)


# ============================================================================
# 식별자로 상품 조회 /v3/product/info/list
# ============================================================================

class ProductInfoListParams(OzonModel):
    """요청에는 같은 종류의 식별자만 담아야 합니다 (최대 1000개)."""
    offer_id: Optional[List[str]] = Field(None, max_length=1000)
    product_id: Optional[List[int]] = Field(None, max_length=1000)
    sku: Optional[List[int]] = Field(None, max_length=1000)

    @model_validator(mode="after")
    def check_identifier_group(self) -> "ProductInfoListParams":
        _ensure_single_identifier_group(self, ("offer_id", "product_id", "sku"))
        if not (self.offer_id or self.product_id or self.sku):
            raise ValueError("offer_id, product_id, sku 중 하나는 필요합니다.")
        return self


class ProductErrorTexts(OzonModel):
    attribute_name: str = ""
    description: str = ""
    hint_code: str = ""
    message: str = ""
    short_description: str = ""
    params: List[NameValue] = Field(default_factory=list)


class ProductDetailsError(OzonModel):
    attribute_id: int = 0
    code: str = ""
    field: str = ""
    level: str = ""
    state: str = ""
    texts: ProductErrorTexts = Field(default_factory=ProductErrorTexts)


class ProductStatuses(OzonModel):
    is_created: bool = False
    moderate_status: str = ""
    status: str = ""
    status_description: str = ""
    status_failed: str = ""
    status_name: str = ""
    status_tooltip: str = ""
    status_updated_at: Optional[datetime] = None
    validation_status: str = ""


class Commission(OzonModel):
    delivery_amount: float = 0.0
    percent: float = 0.0
    return_amount: float = 0.0
    sale_schema: str = ""
    value: float = 0.0


class PriceIndexValue(OzonModel):
    minimal_price: str = ""
    minimal_price_currency: str = ""
    price_index_value: float = 0.0


class PriceIndexes(OzonModel):
    external_index_data: PriceIndexValue = Field(default_factory=PriceIndexValue)
    ozon_index_data: PriceIndexValue = Field(default_factory=PriceIndexValue)
    color_index: str = ""
    self_marketplaces_index_data: PriceIndexValue = Field(default_factory=PriceIndexValue)


class ProductState(OzonModel):
    state: str = ""
    state_failed: str = ""
    moderate_status: str = ""
    decline_reasons: List[str] = Field(default_factory=list)
    validation_state: str = ""
    state_name: str = ""
    state_description: str = ""
    is_failed: bool = False
    is_created: bool = False
    state_tooltip: str = ""
    item_errors: List[ProductItemError] = Field(default_factory=list)
    state_updated_at: Optional[datetime] = None


class ProductSource(OzonModel):
    created_at: Optional[datetime] = None
    sku: int = 0
    source: str = ""
    shipment_type: str = ""
    quant_code: str = ""


class ProductStockEntry(OzonModel):
    sku: int = 0
    present: int = 0
    reserved: int = 0
    source: str = Field("", description="판매 방식")


class ProductStocks(OzonModel):
    has_stock: bool = False
    stocks: List[ProductStockEntry] = Field(default_factory=list)


class VisibilityDetails(OzonModel):
    active_product: bool = Field(False, description="사용 중단: ProductDetails.visible 사용")
    has_price: bool = False
    has_stock: bool = False
    reasons: Dict[str, Any] = Field(default_factory=dict)


class DiscountedStocks(OzonModel):
    coming: int = 0
    present: int = 0
    reserved: int = 0


class ProductDetails(OzonModel):
    barcodes: List[str] = Field(default_factory=list)
    buybox_price: str = Field("", description="사용 중단: 항상 빈 문자열")
    description_category_id: int = 0
    discounted_fbo_stocks: int = 0
    errors: List[ProductDetailsError] = Field(default_factory=list)
    has_discounted_fbo_item: bool = False
    type_id: int = 0
    color_image: List[str] = Field(default_factory=list)
    commissions: List[Commission] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    sku: int = 0
    fbo_sku: int = 0
    fbs_sku: int = 0
    id: int = 0
    images: List[str] = Field(default_factory=list)
    primary_image: List[str] = Field(default_factory=list)
    images360: List[str] = Field(default_factory=list)
    has_discounted_item: bool = False
    is_discounted: bool = False
    discounted_stocks: DiscountedStocks = Field(default_factory=DiscountedStocks)
    is_kgt: bool = Field(False, description="대형 상품 여부")
    is_prepayment: bool = False
    is_prepayment_allowed: bool = False
    currency_code: str = ""
    marketing_price: str = ""
    min_ozon_price: str = Field("", description="사용 중단: 항상 빈 문자열")
    min_price: str = ""
    name: str = ""
    offer_id: str = ""
    old_price: str = ""
    price: str = ""
    price_indexes: PriceIndexes = Field(default_factory=PriceIndexes)
    price_index: str = Field("", description="사용 중단: price_indexes 사용")
    status: ProductState = Field(default_factory=ProductState)
    sources: List[ProductSource] = Field(default_factory=list)
    stocks: ProductStocks = Field(default_factory=ProductStocks)
    updated_at: Optional[datetime] = None
    vat: str = ""
    visibility_details: VisibilityDetails = Field(default_factory=VisibilityDetails)
    visible: bool = False
    volume_weight: float = 0.0
    is_archived: bool = False
    is_autoarchived: bool = False
    statuses: ProductStatuses = Field(default_factory=ProductStatuses)
    model_info: ModelInfo = Field(default_factory=ModelInfo)
    is_super: bool = False


class ProductInfoListResponse(OzonResponse):
    items: List[ProductDetails] = Field(default_factory=list)


# ============================================================================
# 상품 특성 /v4/product/info/attributes (두 가지 스키마)
# ============================================================================

class AttributesFilter(OzonModel):
    """스키마 A: offer_id 는 문자열, product_id 는 정수 목록"""
    offer_id: Optional[List[str]] = None
    product_id: Optional[List[int]] = None
    visibility: Optional[Visibility] = None


class AttributesParams(OzonModel):
    filter: AttributesFilter = Field(default_factory=AttributesFilter)
    last_id: str = ""
    limit: int = Field(1000, ge=1, le=1000)
    sort_by: Optional[str] = None
    sort_dir: Optional[SortDirection] = None


class Image360(OzonModel):
    file_name: str = ""
    index: int = 0


class AttributesPDF(OzonModel):
    file_name: str = ""
    index: int = 0
    name: str = ""


class ComplexAttributeEntry(OzonModel):
    attribute_id: int = 0
    complex_id: int = 0
    values: List[AttributeValue] = Field(default_factory=list)


class ComplexAttributeGroup(OzonModel):
    attributes: List[ComplexAttributeEntry] = Field(default_factory=list)


class ProductAttributes(OzonModel):
    attributes: List[Attribute] = Field(default_factory=list)
    barcode: str = ""
    barcodes: List[str] = Field(default_factory=list)
    description_category_id: int = 0
    color_image: str = ""
    complex_attributes: List[ComplexAttributeGroup] = Field(default_factory=list)
    depth: int = 0
    dimension_unit: str = ""
    height: int = 0
    id: int = 0
    images: List[str] = Field(default_factory=list)
    model_info: ModelInfo = Field(default_factory=ModelInfo)
    images360: List[Image360] = Field(default_factory=list)
    name: str = ""
    offer_id: str = ""
    pdf_list: List[AttributesPDF] = Field(default_factory=list)
    primary_image: str = ""
    sku: int = 0
    type_id: int = 0
    weight: int = 0
    weight_unit: str = ""
    width: int = 0


class AttributesResponse(OzonResponse):
    result: List[ProductAttributes] = Field(default_factory=list)
    last_id: str = ""
    total: int = 0


class AttributesFilterV2(OzonModel):
    """스키마 B: 모든 식별자를 문자열로 전달하며 sku 필터를 지원"""
    product_id: Optional[List[str]] = None
    offer_id: Optional[List[str]] = None
    sku: Optional[List[str]] = None
    visibility: Optional[Visibility] = None


class AttributesParamsV2(OzonModel):
    filter: AttributesFilterV2 = Field(default_factory=AttributesFilterV2)
    last_id: Optional[str] = None
    limit: Optional[int] = Field(None, ge=1, le=1000)
    sort_by: Optional[str] = None
    sort_dir: Optional[SortDirection] = None


class ProductAttributesV2(OzonModel):
    id: int = 0
    barcode: str = ""
    name: str = ""
    offer_id: str = ""
    height: int = 0
    depth: int = 0
    width: int = 0
    dimension_unit: str = ""
    weight: int = 0
    weight_unit: str = ""
    description_category_id: int = 0
    type_id: int = 0
    primary_image: str = ""
    model_info: Optional[ModelInfo] = None
    images: List[str] = Field(default_factory=list)
    pdf_list: List[str] = Field(default_factory=list)
    attributes: List[Attribute] = Field(default_factory=list)
    complex_attributes: List[Attribute] = Field(default_factory=list)
    color_image: str = ""


class AttributesResponseV2(OzonResponse):
    result: List[ProductAttributesV2] = Field(default_factory=list)
    total: int = 0
    last_id: str = ""


# ============================================================================
# 상품 설명 /v1/product/info/description
# ============================================================================

class DescriptionParams(OzonModel):
    offer_id: Optional[str] = None
    product_id: Optional[int] = None

    @model_validator(mode="after")
    def check_identifier(self) -> "DescriptionParams":
        if not self.offer_id and not self.product_id:
            raise ValueError("offer_id 또는 product_id 가 필요합니다.")
        return self


class DescriptionResult(OzonModel):
    description: str = ""
    id: int = 0
    name: str = ""
    offer_id: str = ""


class DescriptionResponse(OzonResponse):
    result: DescriptionResult = Field(default_factory=DescriptionResult)


# ============================================================================
# 상품 한도 /v4/product/info/limit
# ============================================================================

class LimitTotal(OzonModel):
    limit: int = Field(0, description="계정에서 생성 가능한 상품 수")
    usage: int = Field(0, description="이미 생성한 상품 수")


class DailyQuota(OzonModel):
    limit: int = 0
    reset_at: Optional[datetime] = Field(None, description="당일 카운터 초기화 시각 (UTC)")
    usage: int = 0


class RangeLimitResponse(OzonResponse):
    daily_create: DailyQuota = Field(default_factory=DailyQuota)
    daily_update: DailyQuota = Field(default_factory=DailyQuota)
    total: LimitTotal = Field(default_factory=LimitTotal)


# ============================================================================
# offer_id 변경 /v1/product/update/offer-id
# ============================================================================

class OfferIdChange(OzonModel):
    new_offer_id: str = Field(..., max_length=50)
    offer_id: str


class ChangeOfferIdsParams(OzonModel):
    """권장 최대 250개"""
    update_offer_id: List[OfferIdChange] = Field(..., min_length=1)


class OfferIdChangeError(OzonModel):
    message: str = ""
    offer_id: str = Field("", description="변경되지 않은 상품 식별자")


class ChangeOfferIdsResponse(OzonResponse):
    errors: List[OfferIdChangeError] = Field(default_factory=list)


# ============================================================================
# 보관/보관 해제/삭제
# ============================================================================

class ArchiveParams(OzonModel):
    product_id: List[int] = Field(..., min_length=1, max_length=100)


class BoolResultResponse(OzonResponse):
    result: bool = Field(False, description="오류 없이 처리되면 true")


class RemoveWithoutSkuProduct(OzonModel):
    offer_id: str


class RemoveWithoutSkuParams(OzonModel):
    products: List[RemoveWithoutSkuProduct] = Field(..., min_length=1, max_length=500)


class RemoveWithoutSkuStatus(OzonModel):
    error: str = ""
    is_deleted: bool = False
    offer_id: str = ""

    @property
    def ok(self) -> bool:
        return self.is_deleted and not self.error


class RemoveWithoutSkuResponse(OzonResponse):
    status: List[RemoveWithoutSkuStatus] = Field(default_factory=list)

    def succeeded(self) -> list:
        return [s for s in self.status if s.ok]

    def failed(self) -> list:
        return [s for s in self.status if not s.ok]


# ============================================================================
# 디지털 상품 활성화 코드
# ============================================================================

class UploadDigitalCodesParams(OzonModel):
    digital_codes: List[str] = Field(..., min_length=1)
    product_id: int


class UploadDigitalCodesResponse(OzonResponse):
    result: TaskResult = Field(default_factory=TaskResult)


class DigitalCodesStatusParams(OzonModel):
    task_id: int


class DigitalCodesStatusResult(OzonModel):
    status: str = Field("", description="pending / imported / failed")


class DigitalCodesStatusResponse(OzonResponse):
    result: DigitalCodesStatusResult = Field(default_factory=DigitalCodesStatusResult)


# ============================================================================
# 가격 정보 /v5/product/info/prices
# ============================================================================

class PriceInfoFilter(OzonModel):
    offer_id: Optional[List[str]] = None
    product_id: Optional[List[int]] = Field(None, max_length=1000)
    visibility: Visibility = Field(Visibility.ALL, description="노출 상태 필터 (기본 ALL)")


class PriceInfoParams(OzonModel):
    filter: PriceInfoFilter = Field(default_factory=PriceInfoFilter)
    cursor: str = ""
    limit: int = Field(1000, ge=1, le=1000)


class PriceCommissions(OzonModel):
    fbo_deliv_to_customer_amount: float = Field(0.0, description="라스트 마일 (FBO)")
    fbo_direct_flow_trans_max_amount: float = 0.0
    fbo_direct_flow_trans_min_amount: float = 0.0
    fbo_fulfillment_amount: float = 0.0
    fbo_return_flow_amount: float = 0.0
    fbo_return_flow_trans_min_amount: float = 0.0
    fbo_return_flow_trans_max_amount: float = 0.0
    fbs_deliv_to_customer_amount: float = Field(0.0, description="라스트 마일 (FBS)")
    fbs_direct_flow_trans_max_amount: float = 0.0
    fbs_direct_flow_trans_min_amount: float = 0.0
    fbs_first_mile_min_amount: float = 0.0
    fbs_first_mile_max_amount: float = 0.0
    fbs_return_flow_amount: float = 0.0
    fbs_return_flow_trans_max_amount: float = 0.0
    fbs_return_flow_trans_min_amount: float = 0.0
    sales_percent_fbo: float = 0.0
    sales_percent_fbs: float = 0.0
    sales_percent: float = Field(0.0, description="FBO/FBS 중 큰 판매 수수료율")


class MarketingAction(OzonModel):
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    title: str = ""
    value: float = 0.0


class MarketingActions(OzonModel):
    actions: List[MarketingAction] = Field(default_factory=list)
    current_period_from: Optional[datetime] = None
    current_period_to: Optional[datetime] = None
    ozon_actions_exist: bool = False


class PriceDetails(OzonModel):
    auto_action_enabled: bool = False
    currency_code: str = ""
    marketing_price: float = 0.0
    marketing_seller_price: float = 0.0
    min_ozon_price: float = 0.0
    min_price: float = 0.0
    old_price: float = 0.0
    price: float = 0.0
    retail_price: float = 0.0
    vat: float = 0.0


class PriceInfoIndexValue(OzonModel):
    min_price: float = 0.0
    min_price_currency: str = ""
    price_index_value: float = 0.0


class PriceInfoIndexes(OzonModel):
    color_index: str = ""
    external_index_data: PriceInfoIndexValue = Field(default_factory=PriceInfoIndexValue)
    ozon_index_data: PriceInfoIndexValue = Field(default_factory=PriceInfoIndexValue)
    self_marketplaces_index_data: PriceInfoIndexValue = Field(default_factory=PriceInfoIndexValue)


class PriceInfoItem(OzonModel):
    acquiring: float = 0.0
    commissions: PriceCommissions = Field(default_factory=PriceCommissions)
    marketing_actions: Optional[MarketingActions] = None
    offer_id: str = ""
    price: PriceDetails = Field(default_factory=PriceDetails)
    price_indexes: PriceInfoIndexes = Field(default_factory=PriceInfoIndexes)
    product_id: int = 0
    volume_weight: float = 0.0


class PriceInfoResponse(OzonResponse):
    items: List[PriceInfoItem] = Field(default_factory=list)
    cursor: str = ""
    total: int = 0


# ============================================================================
# 마크다운(할인) 상품
# ============================================================================

class MarkdownInfoParams(OzonModel):
    discounted_skus: List[str] = Field(..., min_length=1)


class MarkdownInfoItem(OzonModel):
    comment_reason_damaged: str = ""
    condition: str = Field("", description="new / used")
    condition_estimation: str = Field("", description="1~7 단계 상태 평가")
    defects: str = ""
    discounted_sku: int = 0
    mechanical_damage: str = ""
    package_damage: str = ""
    packaging_violation: str = ""
    reason_damaged: str = ""
    repair: str = ""
    shortage: str = ""
    sku: int = Field(0, description="본 상품 SKU")
    warranty_type: str = ""


class MarkdownInfoResponse(OzonResponse):
    items: List[MarkdownInfoItem] = Field(default_factory=list)


class MarkdownDiscountParams(OzonModel):
    discount: int = Field(..., ge=3, le=99, description="할인율 3~99%")
    product_id: int


class MarkdownDiscountResponse(BoolResultResponse):
    pass


# ============================================================================
# 입고 알림 구독자 수 /v1/product/info/subscription
# ============================================================================

class SubscriptionParams(OzonModel):
    skus: List[int] = Field(..., min_length=1)


class SubscriptionCount(OzonModel):
    count: int = 0
    sku: int = 0


class SubscriptionResponse(OzonResponse):
    result: List[SubscriptionCount] = Field(default_factory=list)


# ============================================================================
# 특성 업데이트 /v1/product/attributes/update
# ============================================================================

class CharacteristicsItem(OzonModel):
    attributes: List[Attribute] = Field(..., min_length=1)
    offer_id: str


class UpdateCharacteristicsParams(OzonModel):
    items: List[CharacteristicsItem] = Field(..., min_length=1)


class UpdateCharacteristicsResponse(OzonResponse):
    task_id: int = Field(0, description="/v1/product/import/info 로 상태 확인")


# ============================================================================
# 연관 SKU /v1/product/related-sku/get
# ============================================================================

class RelatedSkusParams(OzonModel):
    sku: List[str] = Field(..., min_length=1, max_length=200)


class RelatedSku(OzonModel):
    availability: str = Field("", description="HIDDEN / AVAILABLE / UNAVAILABLE")
    deleted_at: Optional[datetime] = None
    delivery_schema: str = ""
    product_id: int = 0
    sku: int = 0


class RelatedSkuError(OzonModel):
    code: str = ""
    sku: int = 0
    message: str = ""


class RelatedSkusResponse(OzonResponse):
    items: List[RelatedSku] = Field(default_factory=list)
    errors: List[RelatedSkuError] = Field(default_factory=list)


# ============================================================================
# 이코노미(MOQ) 상품 /v1/product/quant/info, /v1/product/quant/list
# ============================================================================

class EconomyInfoParams(OzonModel):
    quant_code: List[str] = Field(..., min_length=1)


class QuantBarcode(OzonModel):
    barcode: str = ""
    error: str = ""
    status: str = ""


class DimensionsMM(OzonModel):
    depth: int = Field(0, description="mm")
    height: int = Field(0, description="mm")
    weight: int = Field(0, description="g")
    width: int = Field(0, description="mm")


class QuantMarketingPrice(OzonModel):
    price: str = ""
    seller_price: str = ""


class QuantStatus(OzonModel):
    state_description: str = ""
    state_name: str = ""
    state_sys_name: str = ""
    state_tooltip: str = ""


class EconomyQuant(OzonModel):
    barcodes_extended: List[QuantBarcode] = Field(default_factory=list)
    dimensions: DimensionsMM = Field(default_factory=DimensionsMM)
    marketing_price: QuantMarketingPrice = Field(default_factory=QuantMarketingPrice)
    min_price: str = ""
    old_price: str = ""
    price: str = ""
    quant_code: str = ""
    # 원격 응답의 필드명 오타를 그대로 따름
    quant_size: int = Field(0, alias="quant_sice")
    shipment_type: str = ""
    sku: int = 0
    statuses: QuantStatus = Field(default_factory=QuantStatus)


class EconomyQuantInfo(OzonModel):
    quants: List[EconomyQuant] = Field(default_factory=list)


class EconomyInfoItem(OzonModel):
    offer_id: str = ""
    product_id: int = 0
    quant_info: EconomyQuantInfo = Field(default_factory=EconomyQuantInfo)


class EconomyInfoResponse(OzonResponse):
    items: List[EconomyInfoItem] = Field(default_factory=list)


class EconomyListParams(OzonModel):
    cursor: str = ""
    limit: int = Field(1000, ge=1, le=1000)
    visibility: Optional[Visibility] = None


class EconomyProductQuant(OzonModel):
    quant_code: str = ""
    quant_size: int = 0


class EconomyProduct(OzonModel):
    offer_id: str = ""
    product_id: int = 0
    quants: List[EconomyProductQuant] = Field(default_factory=list)


class EconomyListResponse(OzonResponse):
    cursor: str = ""
    products: List[EconomyProduct] = Field(default_factory=list)
    total_items: int = Field(0, description="전체 창고 잔여 재고")


# ============================================================================
# 가격 유효 타이머 /v1/product/action/timer/*
# ============================================================================

class PriceTimerParams(OzonModel):
    product_ids: List[str] = Field(..., min_length=1)


class PriceTimerUpdateResponse(OzonResponse):
    pass


class PriceTimerStatus(OzonModel):
    expired_at: Optional[datetime] = None
    min_price_for_auto_actions_enabled: bool = False
    product_id: int = 0


class PriceTimerStatusResponse(OzonResponse):
    statuses: List[PriceTimerStatus] = Field(default_factory=list)
