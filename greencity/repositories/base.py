"""공통 레포지토리 — 모든 엔티티 레포지토리의 부모 클래스.

Shared repository base for every entity table. Subclasses add the
entity-specific queries; this class covers lookup by integer id, filtered
listing, persisting and deleting.

Usage:
    class SpecificationRepository(BaseRepository[Specification]):
        def __init__(self) -> None:
            super().__init__(Specification)
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """정수 ID 엔티티용 제네릭 레포지토리.

    Attributes:
        model: 매핑된 모델 클래스 (Mapped model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """기본 키로 엔티티를 조회합니다. 세션에 이미 있으면 그대로 반환.

        Look up by primary key; an instance already tracked by the session is
        returned without a round trip.
        """
        return await db.get(self.model, record_id)

    async def get_all(
        self,
        db: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 엔티티 목록을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            *criteria: WHERE 조건식 (SQL criteria, AND-ed)
            order_by: 정렬 기준 (Ordering column, optional)

        Returns:
            Sequence[ModelType]: 엔티티 목록 (Matching entities)
        """
        query: Select = select(self.model).where(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        result = await db.execute(query)
        return result.scalars().all()

    async def create_unique(self, db: AsyncSession, values: dict[str, Any]) -> ModelType | None:
        """고유 제약이 있는 엔티티를 SAVEPOINT 안에서 생성합니다.

        Insert inside a nested transaction. When a concurrent request has
        already inserted the same unique key, only the savepoint is rolled
        back and ``None`` is returned so the caller can re-query or report
        a duplicate.
        """
        entity: ModelType = self.model(**values)
        try:
            async with db.begin_nested():
                db.add(entity)
        except IntegrityError:
            logger.info("Unique conflict inserting into %s", self.model.__tablename__)
            return None
        await db.refresh(entity)
        return entity

    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """신규 또는 기존 엔티티를 저장하고 ID가 채워진 상태로 반환합니다.

        Persist a new or tracked entity. The session is flushed, not
        committed; routers own the transaction.
        """
        db.add(entity)
        await db.flush()
        await db.refresh(entity)
        return entity

    async def delete(self, db: AsyncSession, entity: ModelType) -> None:
        """엔티티를 삭제합니다 (flush까지)."""
        await db.delete(entity)
        await db.flush()
