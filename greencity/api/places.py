"""장소 라우터 — 장소 제안, 조회, 필터, 상태 관리 엔드포인트.

Place Router — propose, view, filter and moderate places.
Request-to-service plumbing only: shape validation happens in the schemas,
business rules in PlaceService / FavoritePlaceService.

Route order matters: ``/statuses`` is declared before ``/{status}``.
"""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.api.deps import PlaceIdPath, get_current_user, require_moderator
from greencity.config import settings
from greencity.database import get_db
from greencity.models.enums import PlaceStatus
from greencity.models.user import User
from greencity.schemas.favorite_place import FavoritePlaceDto
from greencity.schemas.place import (
    AdminPlaceDto,
    FilterPlaceDto,
    PlaceAddDto,
    PlaceByBoundsDto,
    PlaceInfoDto,
    PlaceUpdateDto,
    PlaceWithUserDto,
    UpdatePlaceStatusDto,
)
from greencity.services.favorite_place_service import favorite_place_service
from greencity.services.place_service import place_service
from greencity.utils.pagination import Page
from greencity.utils.parsing import parse_id_list

router: APIRouter = APIRouter(prefix="/place", tags=["Places"])

# 페이지 파라미터 — Page query parameters shared by admin lists
PageParam = Annotated[int, Query(ge=1)]
PerPageParam = Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)]


@router.post("/propose", response_model=PlaceWithUserDto, status_code=201)
async def propose_place(
    dto: PlaceAddDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PlaceWithUserDto:
    """사용자가 새 장소를 제안합니다.

    Propose a new place on behalf of the caller.
    """
    result: PlaceWithUserDto = await place_service.save(db, dto, current_user.email)
    await db.commit()
    return result


@router.put("/update", response_model=PlaceUpdateDto)
async def update_place(
    dto: PlaceUpdateDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> PlaceUpdateDto:
    """장소 정보를 수정합니다."""
    result: PlaceUpdateDto = await place_service.update(db, dto)
    await db.commit()
    return result


@router.get("/info/{place_id}", response_model=PlaceInfoDto)
async def get_info(
    place_id: PlaceIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlaceInfoDto:
    """장소 정보를 조회합니다."""
    return await place_service.get_info_by_id(db, place_id)


@router.get("/info/favorite/{place_id}", response_model=PlaceInfoDto)
async def get_favorite_place_info(
    place_id: PlaceIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> PlaceInfoDto:
    """즐겨찾기한 장소 정보를 사용자 별칭으로 조회합니다.

    Place info with the caller's favorite alias as its name.
    """
    return await favorite_place_service.get_info_favorite_place(db, place_id, current_user.email)


@router.post("/save/favorite/", response_model=FavoritePlaceDto)
async def save_as_favorite_place(
    dto: FavoritePlaceDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> FavoritePlaceDto:
    """장소를 사용자의 즐겨찾기에 저장합니다."""
    result: FavoritePlaceDto = await favorite_place_service.save(db, dto, current_user.email)
    await db.commit()
    return result


@router.post("/getListPlaceLocationByMapsBounds", response_model=list[PlaceByBoundsDto])
async def get_list_place_location_by_maps_bounds(
    filter_dto: FilterPlaceDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PlaceByBoundsDto]:
    """지도 경계 안의 승인된 장소 위치 목록을 조회합니다."""
    return await place_service.find_places_by_maps_bounds(db, filter_dto)


@router.get("/statuses", response_model=list[PlaceStatus])
async def get_statuses() -> list[PlaceStatus]:
    """모든 장소 상태 값을 조회합니다."""
    return place_service.get_statuses()


@router.patch("/statuses", response_model=list[UpdatePlaceStatusDto])
async def bulk_update_statuses(
    items: list[UpdatePlaceStatusDto],
    background_tasks: BackgroundTasks,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> list[UpdatePlaceStatusDto]:
    """여러 장소의 상태를 한 번에 변경합니다.

    Apply a list of id/status pairs; results follow the input order.
    """
    result = await place_service.update_statuses(db, items, background_tasks)
    await db.commit()
    return result


@router.patch("/status", response_model=UpdatePlaceStatusDto)
async def update_status(
    dto: UpdatePlaceStatusDto,
    background_tasks: BackgroundTasks,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> UpdatePlaceStatusDto:
    """장소 상태를 변경합니다."""
    result = await place_service.update_status(db, dto.id, dto.status, background_tasks)
    await db.commit()
    return result


@router.post("/filter", response_model=list[PlaceByBoundsDto])
async def get_filtered_places(
    filter_dto: FilterPlaceDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PlaceByBoundsDto]:
    """지도 경계와 추가 조건으로 장소를 필터링합니다."""
    return await place_service.get_places_by_filter(db, filter_dto)


@router.post("/filter/predicate", response_model=Page[AdminPlaceDto])
async def filter_place_by_search_predicate(
    filter_dto: FilterPlaceDto,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
    page: PageParam = 1,
    per_page: PerPageParam = settings.DEFAULT_PAGE_SIZE,
) -> Page[AdminPlaceDto]:
    """상태와 검색어로 장소 목록을 페이지 단위로 조회합니다."""
    return await place_service.filter_place_by_search_predicate(db, filter_dto, page, per_page)


@router.get("/about/{place_id}", response_model=PlaceUpdateDto)
async def get_place_by_id(
    place_id: PlaceIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> PlaceUpdateDto:
    """수정 폼용 장소 정보를 조회합니다."""
    return await place_service.get_info_for_updating_by_id(db, place_id)


@router.get("/{status}", response_model=Page[AdminPlaceDto])
async def get_places_by_status(
    status: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
    page: PageParam = 1,
    per_page: PerPageParam = settings.DEFAULT_PAGE_SIZE,
) -> Page[AdminPlaceDto]:
    """상태별 장소 목록을 페이지 단위로 조회합니다.

    ``status`` is parsed case-insensitively; unknown values yield 400.
    """
    place_status: PlaceStatus = PlaceStatus.parse(status)
    return await place_service.get_places_by_status(db, place_status, page, per_page)


@router.delete("/{place_id}", response_model=int)
async def delete_place(
    place_id: PlaceIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> int:
    """장소를 소프트 삭제하고 ID를 반환합니다."""
    result: int = await place_service.delete_by_id(db, place_id)
    await db.commit()
    return result


@router.delete("", response_model=int)
async def bulk_delete(
    ids: Annotated[str, Query(min_length=1)],
    db: Annotated[AsyncSession, Depends(get_db)],
    _moderator: Annotated[User, Depends(require_moderator)],
) -> int:
    """쉼표로 구분된 ID의 장소들을 소프트 삭제하고 건수를 반환합니다.

    Every id is parsed before the service is called; one malformed id
    rejects the whole request.
    """
    place_ids: list[int] = parse_id_list(ids)
    result: int = await place_service.bulk_delete(db, place_ids)
    await db.commit()
    return result
