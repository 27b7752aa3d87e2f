"""즐겨찾기 라우터 — 현재 사용자의 즐겨찾기 목록, 별칭 수정, 삭제.

Favorite Place Router — the caller's favorites: list, rename, remove.
Saving a favorite lives under ``/place/save/favorite/``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.api.deps import PlaceIdPath, get_current_user
from greencity.database import get_db
from greencity.models.user import User
from greencity.schemas.favorite_place import FavoritePlaceDto, FavoritePlaceShowDto
from greencity.services.favorite_place_service import favorite_place_service

router: APIRouter = APIRouter(prefix="/favorite_place", tags=["Favorite Places"])


@router.get("/", response_model=list[FavoritePlaceShowDto])
async def find_all_by_user(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> list[FavoritePlaceShowDto]:
    """현재 사용자의 즐겨찾기 목록을 조회합니다."""
    return await favorite_place_service.find_all_by_user_email(db, current_user.email)


@router.put("/", response_model=FavoritePlaceDto)
async def update_favorite_place(
    dto: FavoritePlaceDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> FavoritePlaceDto:
    """즐겨찾기 별칭을 수정합니다."""
    result: FavoritePlaceDto = await favorite_place_service.update(db, dto, current_user.email)
    await db.commit()
    return result


@router.delete("/{place_id}", response_model=int)
async def delete_favorite_place(
    place_id: PlaceIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> int:
    """즐겨찾기를 삭제합니다."""
    result: int = await favorite_place_service.delete_by_place_id(db, place_id, current_user.email)
    await db.commit()
    return result
