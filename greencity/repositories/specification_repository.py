"""할인 종류 레포지토리."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.discount import Specification
from greencity.repositories.base import BaseRepository


class SpecificationRepository(BaseRepository[Specification]):
    """specifications 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Specification)

    async def get_by_name(self, db: AsyncSession, name: str) -> Specification | None:
        """이름으로 할인 종류를 조회합니다 (대소문자 무시)."""
        result = await db.execute(
            select(Specification).where(func.lower(Specification.name) == name.lower())
        )
        return result.scalar_one_or_none()


specification_repository: SpecificationRepository = SpecificationRepository()
