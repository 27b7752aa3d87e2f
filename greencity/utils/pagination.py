"""관리자 목록 페이지네이션.

Paging for the moderator place lists: one COUNT over the filtered query,
one OFFSET/LIMIT fetch, rows converted to response DTOs.
"""

import math
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """한 페이지 분량의 응답.

    Attributes:
        items: 현재 페이지 항목 (Items on this page)
        total: 전체 항목 수 (Matching rows across all pages)
        page: 페이지 번호, 1부터 (1-based page number)
        per_page: 페이지 크기 (Page size)
        pages: 전체 페이지 수 (ceil(total / per_page))
    """

    items: list[T]
    total: int
    page: int
    per_page: int
    pages: int


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int,
    per_page: int,
    convert: Callable[[Any], T],
) -> Page[T]:
    """쿼리를 페이지 단위로 실행하고 각 행을 DTO로 변환합니다.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 정렬까지 적용된 조회 쿼리 (Ordered select)
        page: 페이지 번호 (1-based page number)
        per_page: 페이지 크기 (Page size)
        convert: 엔티티 → 응답 DTO 변환 함수 (Row to DTO mapper)

    Returns:
        Page[T]: 변환된 항목과 페이지 정보 (Converted items with paging metadata)
    """
    # ORDER BY는 COUNT에 불필요
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    rows = (await db.execute(query.offset((page - 1) * per_page).limit(per_page))).scalars().all()
    return Page(
        items=[convert(row) for row in rows],
        total=total,
        page=page,
        per_page=per_page,
        pages=math.ceil(total / per_page),
    )
