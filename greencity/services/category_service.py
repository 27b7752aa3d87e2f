"""카테고리 서비스 — 카테고리 조회/생성 비즈니스 로직.

Category Service — listing, explicit creation, and find-or-create used
when a proposed place names an unknown category.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Category
from greencity.repositories.category_repository import category_repository
from greencity.schemas.category import CategoryDto, CategoryResponse
from greencity.utils.exceptions import DuplicateError


class CategoryService:
    """카테고리 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, category: Category) -> CategoryResponse:
        return CategoryResponse(id=category.id, name=category.name)

    async def find_all(self, db: AsyncSession) -> list[CategoryResponse]:
        """모든 카테고리를 이름순으로 조회합니다."""
        categories = await category_repository.get_all(db, order_by=Category.name)
        return [self._to_response(c) for c in categories]

    async def create(self, db: AsyncSession, data: CategoryDto) -> CategoryResponse:
        """새 카테고리를 생성합니다.

        Raises:
            DuplicateError: 같은 이름의 카테고리가 이미 존재할 때
                            (A category with the same name already exists)
        """
        if await category_repository.get_by_name(db, data.name) is not None:
            raise DuplicateError(f"Category already exists: {data.name}")
        category: Category | None = await category_repository.create_unique(db, {"name": data.name})
        if category is None:
            raise DuplicateError(f"Category already exists: {data.name}")
        return self._to_response(category)

    async def find_or_create(self, db: AsyncSession, name: str) -> Category:
        """이름으로 조회하고, 없으면 새로 생성합니다.

        Find a category by name (case-insensitive) or create it. A row
        inserted concurrently under the same name is reused.
        """
        category: Category | None = await category_repository.get_by_name(db, name)
        if category is None:
            category = await category_repository.create_unique(db, {"name": name})
        if category is None:
            category = await category_repository.get_by_name(db, name)
        return category


category_service: CategoryService = CategoryService()
