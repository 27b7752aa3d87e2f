"""할인 레포지토리 — 장소 FK 기준 조회/일괄 삭제.

Discount Repository — lookups and bulk deletion by owning place.
"""

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greencity.models.discount import Discount
from greencity.repositories.base import BaseRepository


class DiscountRepository(BaseRepository[Discount]):
    """할인 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Discount)

    async def get_by_id(self, db: AsyncSession, record_id: int) -> Discount | None:
        """할인 종류를 함께 로드하여 조회합니다."""
        query: Select = (
            select(Discount)
            .options(selectinload(Discount.specification))
            .where(Discount.id == record_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all_by_place_id(self, db: AsyncSession, place_id: int) -> list[Discount]:
        """장소에 속한 모든 할인을 조회합니다.

        Retrieve every discount owned by a place, ordered by id.
        """
        query: Select = (
            select(Discount)
            .options(selectinload(Discount.specification))
            .where(Discount.place_id == place_id)
            .order_by(Discount.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def delete_all_by_place_id(self, db: AsyncSession, place_id: int) -> int:
        """장소에 속한 모든 할인을 삭제하고 삭제 건수를 반환합니다.

        Bulk-delete a place's discounts; returns the number of rows removed.
        """
        result = await db.execute(
            delete(Discount)
            .where(Discount.place_id == place_id)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()
        return result.rowcount or 0


discount_repository: DiscountRepository = DiscountRepository()
