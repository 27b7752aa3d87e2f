"""할인 서비스 — 할인 엔티티 관리.

Discount Service — save, find and bulk-remove discounts by owning place.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.discount import Discount
from greencity.repositories.discount_repository import discount_repository
from greencity.utils.exceptions import NotFoundError


class DiscountService:
    """할인 관련 비즈니스 로직을 처리하는 서비스."""

    async def save(self, db: AsyncSession, discount: Discount) -> Discount:
        """할인을 저장합니다 (신규 또는 수정).

        Persist a new or updated discount.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            discount: 할인 엔티티 (Discount entity; ``place_id`` must be set)

        Returns:
            Discount: ID가 채워진 할인 (Persisted discount with id populated)
        """
        return await discount_repository.save(db, discount)

    async def find_by_id(self, db: AsyncSession, discount_id: int) -> Discount:
        """ID로 할인을 조회합니다.

        Raises:
            NotFoundError: 할인을 찾을 수 없을 때 (Discount not found)
        """
        discount: Discount | None = await discount_repository.get_by_id(db, discount_id)
        if discount is None:
            raise NotFoundError(f"Discount not found by id: {discount_id}")
        return discount

    async def find_all_by_place_id(self, db: AsyncSession, place_id: int) -> list[Discount]:
        """장소의 모든 할인을 조회합니다. 없으면 빈 목록.

        Find every discount owned by the place; empty when there are none.
        """
        return await discount_repository.get_all_by_place_id(db, place_id)

    async def delete_all_by_place_id(self, db: AsyncSession, place_id: int) -> None:
        """장소의 모든 할인을 삭제합니다. 반복 호출해도 안전합니다.

        Delete every discount owned by the place. Idempotent.
        """
        await discount_repository.delete_all_by_place_id(db, place_id)


# 싱글턴 인스턴스 — Singleton instance
discount_service: DiscountService = DiscountService()
