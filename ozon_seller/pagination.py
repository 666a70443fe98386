"""
목록 엔드포인트 페이지 순회

커서(cursor / last_id) 방식과 페이지 번호(page / page_size) 방식을 지원합니다.
첫 에러는 그대로 전파되고 순회가 중단됩니다.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Sized, TypeVar

from ozon_seller.core import OzonModel, OzonResponse

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=OzonModel)
R = TypeVar("R", bound=OzonResponse)


def _page_limit(params: OzonModel, field_name: str) -> int | None:
    value: Any = params
    for part in field_name.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value or None


def _with_field(params: P, field_name: str, value: Any) -> P:
    # "filter.cursor" 처럼 중첩 필드도 지원. 호출자의 params 는 변경하지 않음
    head, _, rest = field_name.partition(".")
    if not rest:
        return params.model_copy(update={head: value})
    return params.model_copy(update={head: _with_field(getattr(params, head), rest, value)})


def iter_cursor_pages(
    call: Callable[[P], R],
    params: P,
    *,
    next_cursor: Callable[[R], str | None],
    items: Callable[[R], Sized],
    cursor_field: str = "cursor",
    limit_field: str = "limit",
) -> Iterator[R]:
    """
    커서 기반 목록을 한 페이지씩 지연 순회합니다.

    다음 커서가 비어 있거나, 받은 항목 수가 limit 보다 적으면 종료합니다.
    params 에 이전에 받은 커서를 넣으면 그 위치부터 재개됩니다.
    """
    limit = _page_limit(params, limit_field)
    current = params
    page_no = 0

    while True:
        page = call(current)
        page_no += 1
        yield page

        token = next_cursor(page)
        count = len(items(page))
        if not token:
            logger.debug(f"커서 순회 종료: 다음 커서 없음 (pages={page_no})")
            return
        if limit is not None and count < limit:
            logger.debug(f"커서 순회 종료: 마지막 페이지 {count} < limit {limit} (pages={page_no})")
            return

        current = _with_field(current, cursor_field, token)


def iter_numbered_pages(
    call: Callable[[P], R],
    params: P,
    *,
    items: Callable[[R], Sized],
    page_field: str = "page",
    size_field: str = "page_size",
    page_count: Callable[[R], int] | None = None,
) -> Iterator[R]:
    """
    페이지 번호 기반 목록을 순회합니다.

    짧은 페이지(항목 수 < page_size)를 받거나, page_count 에 도달하면 종료합니다.
    params 의 page 가 비어 있으면 1 페이지부터 시작합니다.
    """
    page_size = _page_limit(params, size_field)
    page_number = getattr(params, page_field, None) or 1
    current = _with_field(params, page_field, page_number)

    while True:
        page = call(current)
        yield page

        count = len(items(page))
        if count == 0:
            return
        if page_size is not None and count < page_size:
            return
        if page_count is not None and page_number >= page_count(page):
            return

        page_number += 1
        current = _with_field(current, page_field, page_number)
