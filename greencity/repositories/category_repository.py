"""카테고리 레포지토리."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Category
from greencity.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """카테고리 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Category)

    async def get_by_name(self, db: AsyncSession, name: str) -> Category | None:
        """이름으로 카테고리를 조회합니다 (대소문자 무시)."""
        result = await db.execute(
            select(Category).where(func.lower(Category.name) == name.lower())
        )
        return result.scalar_one_or_none()


category_repository: CategoryRepository = CategoryRepository()
