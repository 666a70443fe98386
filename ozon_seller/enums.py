"""
Ozon Seller API 값 집합

요청 파라미터에서 사용하는 고정 값 목록입니다.
응답 모델은 원격 서버가 새 값을 추가해도 디코딩이 깨지지 않도록 str 로 유지합니다.
"""
from enum import Enum


class Visibility(str, Enum):
    """상품 노출 상태 필터"""
    ALL = "ALL"
    VISIBLE = "VISIBLE"
    INVISIBLE = "INVISIBLE"
    EMPTY_STOCK = "EMPTY_STOCK"
    NOT_MODERATED = "NOT_MODERATED"
    MODERATED = "MODERATED"
    DISABLED = "DISABLED"
    STATE_FAILED = "STATE_FAILED"
    READY_TO_SUPPLY = "READY_TO_SUPPLY"
    VALIDATION_STATE_PENDING = "VALIDATION_STATE_PENDING"
    VALIDATION_STATE_FAIL = "VALIDATION_STATE_FAIL"
    VALIDATION_STATE_SUCCESS = "VALIDATION_STATE_SUCCESS"
    TO_SUPPLY = "TO_SUPPLY"
    IN_SALE = "IN_SALE"
    REMOVED_FROM_SALE = "REMOVED_FROM_SALE"
    BANNED = "BANNED"
    OVERPRICED = "OVERPRICED"
    CRITICALLY_OVERPRICED = "CRITICALLY_OVERPRICED"
    EMPTY_BARCODE = "EMPTY_BARCODE"
    BARCODE_EXISTS = "BARCODE_EXISTS"
    QUARANTINE = "QUARANTINE"
    ARCHIVED = "ARCHIVED"
    OVERPRICED_WITH_STOCK = "OVERPRICED_WITH_STOCK"
    PARTIAL_APPROVED = "PARTIAL_APPROVED"
    IMAGE_ABSENT = "IMAGE_ABSENT"
    MODERATION_BLOCK = "MODERATION_BLOCK"


class VAT(str, Enum):
    """부가세율"""
    VAT_0 = "0"
    VAT_5 = "0.05"
    VAT_7 = "0.07"
    VAT_10 = "0.1"
    VAT_20 = "0.2"
    VAT_22 = "0.22"


class PriceStrategy(str, Enum):
    """가격 전략 자동 적용 여부"""
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"


class AutoActionEnabled(str, Enum):
    """프로모션 자동 적용 여부"""
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"


class ServiceType(str, Enum):
    """서비스 유형"""
    IS_CODE_SERVICE = "IS_CODE_SERVICE"
    IS_NO_CODE_SERVICE = "IS_NO_CODE_SERVICE"


class DimensionUnit(str, Enum):
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    INCHES = "in"


class WeightUnit(str, Enum):
    GRAMS = "g"
    KILOGRAMS = "kg"
    POUNDS = "lb"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Language(str, Enum):
    """리포트 응답 언어"""
    DEFAULT = "DEFAULT"
    RU = "RU"
    EN = "EN"


class ReportType(str, Enum):
    """리포트 유형"""
    ALL = "ALL"
    SELLER_PRODUCTS = "SELLER_PRODUCTS"
    SELLER_TRANSACTIONS = "SELLER_TRANSACTIONS"
    SELLER_PRODUCT_PRICES = "SELLER_PRODUCT_PRICES"
    SELLER_STOCK = "SELLER_STOCK"
    SELLER_PRODUCT_MOVEMENT = "SELLER_PRODUCT_MOVEMENT"
    SELLER_RETURNS = "SELLER_RETURNS"
    SELLER_POSTINGS = "SELLER_POSTINGS"
    SELLER_FINANCE = "SELLER_FINANCE"


class ReportInfoStatus(str, Enum):
    """리포트 생성 상태"""
    WAITING = "waiting"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"
