"""즐겨찾기 서비스 — 사용자별 장소 북마크 비즈니스 로직.

Favorite Place Service — user bookmarks with a custom alias.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.favorite_place import FavoritePlace
from greencity.models.place import Place
from greencity.models.user import User
from greencity.repositories.favorite_place_repository import favorite_place_repository
from greencity.repositories.place_repository import place_repository
from greencity.schemas.favorite_place import FavoritePlaceDto, FavoritePlaceShowDto
from greencity.schemas.place import PlaceInfoDto
from greencity.services.place_service import place_service
from greencity.services.user_service import user_service
from greencity.utils.exceptions import DuplicateError, NotFoundError


class FavoritePlaceService:
    """즐겨찾기 관련 비즈니스 로직을 처리하는 서비스."""

    async def _get_own_favorite(self, db: AsyncSession, place_id: int, email: str) -> FavoritePlace:
        user: User = await user_service.find_by_email(db, email)
        favorite: FavoritePlace | None = await favorite_place_repository.get_by_user_and_place(
            db, user.id, place_id
        )
        if favorite is None:
            raise NotFoundError(f"Favorite place not found by place id: {place_id}")
        return favorite

    async def save(self, db: AsyncSession, dto: FavoritePlaceDto, email: str) -> FavoritePlaceDto:
        """장소를 사용자의 즐겨찾기에 저장합니다.

        Save a place to the caller's favorites under the given alias.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            dto: 장소 ID와 별칭 (Place id and alias)
            email: 사용자 이메일 (Principal e-mail)

        Returns:
            FavoritePlaceDto: 저장된 즐겨찾기 (Saved favorite)

        Raises:
            NotFoundError: 사용자 또는 장소를 찾을 수 없을 때 (Unknown user or place)
            DuplicateError: 이미 즐겨찾기한 장소 (Place already in favorites)
        """
        user: User = await user_service.find_by_email(db, email)
        place: Place | None = await place_repository.get_by_id(db, dto.place_id)
        if place is None:
            raise NotFoundError(f"Place not found by id: {dto.place_id}")
        if await favorite_place_repository.get_by_user_and_place(db, user.id, place.id) is not None:
            raise DuplicateError("Place is already in favorites")

        favorite: FavoritePlace | None = await favorite_place_repository.create_unique(
            db, {"user_id": user.id, "place_id": place.id, "name": dto.name}
        )
        if favorite is None:
            raise DuplicateError("Place is already in favorites")
        return FavoritePlaceDto(place_id=favorite.place_id, name=favorite.name)

    async def get_info_favorite_place(self, db: AsyncSession, place_id: int, email: str) -> PlaceInfoDto:
        """즐겨찾기한 장소 정보를 별칭으로 조회합니다.

        Place info with ``name`` replaced by the caller's favorite alias.

        Raises:
            NotFoundError: 즐겨찾기하지 않은 장소 (Caller has not favorited the place)
        """
        favorite: FavoritePlace = await self._get_own_favorite(db, place_id, email)
        place: Place = await place_service.find_by_id(db, favorite.place_id)
        return place_service.to_info_dto(place, name=favorite.name)

    async def find_all_by_user_email(self, db: AsyncSession, email: str) -> list[FavoritePlaceShowDto]:
        """사용자의 즐겨찾기 목록을 조회합니다."""
        user: User = await user_service.find_by_email(db, email)
        favorites = await favorite_place_repository.get_by_user(db, user.id)
        return [
            FavoritePlaceShowDto(
                id=f.id,
                place_id=f.place_id,
                name=f.name,
                lat=f.place.location.lat if f.place.location else None,
                lng=f.place.location.lng if f.place.location else None,
            )
            for f in favorites
        ]

    async def update(self, db: AsyncSession, dto: FavoritePlaceDto, email: str) -> FavoritePlaceDto:
        """즐겨찾기 별칭을 수정합니다."""
        favorite: FavoritePlace = await self._get_own_favorite(db, dto.place_id, email)
        favorite.name = dto.name
        await db.flush()
        return FavoritePlaceDto(place_id=favorite.place_id, name=favorite.name)

    async def delete_by_place_id(self, db: AsyncSession, place_id: int, email: str) -> int:
        """즐겨찾기를 삭제하고 장소 ID를 반환합니다."""
        favorite: FavoritePlace = await self._get_own_favorite(db, place_id, email)
        await favorite_place_repository.delete(db, favorite)
        return place_id


favorite_place_service: FavoritePlaceService = FavoritePlaceService()
