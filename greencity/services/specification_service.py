"""할인 종류 서비스."""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.discount import Specification
from greencity.repositories.specification_repository import specification_repository
from greencity.utils.exceptions import NotFoundError


class SpecificationService:
    """할인 종류(Specification) 조회/생성 서비스."""

    async def find_by_name(self, db: AsyncSession, name: str) -> Specification:
        """이름으로 할인 종류를 조회합니다.

        Raises:
            NotFoundError: 해당 이름이 없을 때 (No specification with this name)
        """
        specification: Specification | None = await specification_repository.get_by_name(db, name)
        if specification is None:
            raise NotFoundError(f"Specification not found by name: {name}")
        return specification

    async def find_or_create(self, db: AsyncSession, name: str) -> Specification:
        """이름으로 조회하고, 없으면 새로 생성합니다 (동시 생성된 행은 재사용)."""
        specification: Specification | None = await specification_repository.get_by_name(db, name)
        if specification is None:
            specification = await specification_repository.create_unique(db, {"name": name})
        if specification is None:
            specification = await specification_repository.get_by_name(db, name)
        return specification

    async def find_all(self, db: AsyncSession) -> list[Specification]:
        return list(await specification_repository.get_all(db, order_by=Specification.name))


specification_service: SpecificationService = SpecificationService()
