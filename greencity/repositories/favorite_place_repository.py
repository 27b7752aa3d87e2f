"""즐겨찾기 레포지토리."""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greencity.models.favorite_place import FavoritePlace
from greencity.models.place import Place
from greencity.repositories.base import BaseRepository


class FavoritePlaceRepository(BaseRepository[FavoritePlace]):
    """favorite_places 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(FavoritePlace)

    async def get_by_user_and_place(
        self,
        db: AsyncSession,
        user_id: int,
        place_id: int,
    ) -> FavoritePlace | None:
        """사용자와 장소로 즐겨찾기를 조회합니다."""
        result = await db.execute(
            select(FavoritePlace).where(
                FavoritePlace.user_id == user_id,
                FavoritePlace.place_id == place_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_user(self, db: AsyncSession, user_id: int) -> list[FavoritePlace]:
        """사용자의 즐겨찾기 목록을 장소 위치와 함께 조회합니다."""
        query: Select = (
            select(FavoritePlace)
            .options(selectinload(FavoritePlace.place).selectinload(Place.location))
            .where(FavoritePlace.user_id == user_id)
            .order_by(FavoritePlace.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


favorite_place_repository: FavoritePlaceRepository = FavoritePlaceRepository()
