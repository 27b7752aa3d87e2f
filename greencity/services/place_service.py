"""장소 서비스 — 장소 제안, 수정, 조회, 필터링, 상태 관리 비즈니스 로직.

Place Service — Business logic for proposing, editing, viewing, filtering
and moderating places. Deletion is always a status change to DELETED.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Sequence

from fastapi import BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.config import settings
from greencity.constants import HAVERSINE_EARTH_RADIUS_KM
from greencity.models.discount import Discount
from greencity.models.enums import PlaceStatus, WeekDay
from greencity.models.place import Location, OpeningHours, Place
from greencity.models.user import User
from greencity.repositories.place_repository import place_repository
from greencity.schemas.category import CategoryDto
from greencity.schemas.place import (
    AdminPlaceDto,
    AuthorDto,
    DiscountDto,
    DistanceFromUserDto,
    FilterPlaceDto,
    LocationDto,
    OpeningHoursDto,
    PlaceAddDto,
    PlaceByBoundsDto,
    PlaceInfoDto,
    PlaceUpdateDto,
    PlaceWithUserDto,
    UpdatePlaceStatusDto,
)
from greencity.schemas.specification import SpecificationNameDto
from greencity.services.category_service import category_service
from greencity.services.discount_service import discount_service
from greencity.services.notification_service import notification_service
from greencity.services.specification_service import specification_service
from greencity.services.user_service import user_service
from greencity.utils.exceptions import BadRequestError, NotFoundError
from greencity.utils.pagination import Page, paginate

logger = logging.getLogger(__name__)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """두 좌표 사이의 대원 거리(km)를 계산합니다.

    Great-circle distance in kilometres between two points.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * HAVERSINE_EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def is_open_at(place: Place, moment: datetime) -> bool:
    """장소가 주어진 시각에 영업 중인지 확인합니다.

    True when one of the place's opening hours covers ``moment``
    (open time inclusive, close time exclusive).
    """
    day: WeekDay = WeekDay.from_index(moment.weekday())
    at = moment.time()
    return any(
        hours.week_day == day and hours.open_time <= at < hours.close_time
        for hours in place.opening_hours
    )


class PlaceService:
    """장소 관련 비즈니스 로직을 처리하는 서비스."""

    # --- 응답 변환 (Response mapping) ---

    def _location_dto(self, place: Place) -> LocationDto:
        location: Location = place.location
        return LocationDto(address=location.address, lat=location.lat, lng=location.lng)

    def _opening_hours_dtos(self, place: Place) -> list[OpeningHoursDto]:
        return [
            OpeningHoursDto(week_day=h.week_day, open_time=h.open_time, close_time=h.close_time)
            for h in place.opening_hours
        ]

    def _discount_dtos(self, place: Place) -> list[DiscountDto]:
        return [
            DiscountDto(value=d.value, specification=SpecificationNameDto(name=d.specification.name))
            for d in sorted(place.discounts, key=lambda d: d.id)
        ]

    def _author_dto(self, author: User | None) -> AuthorDto | None:
        if author is None:
            return None
        return AuthorDto(id=author.id, name=author.name, email=author.email)

    def to_info_dto(self, place: Place, name: str | None = None) -> PlaceInfoDto:
        """장소 모델을 정보 응답으로 변환합니다.

        Convert a fully loaded place to ``PlaceInfoDto``; ``name`` overrides
        the place name (used for favorite aliases).
        """
        return PlaceInfoDto(
            id=place.id,
            name=name if name is not None else place.name,
            description=place.description,
            status=place.status,
            category=CategoryDto(name=place.category.name),
            location=self._location_dto(place),
            opening_hours=self._opening_hours_dtos(place),
            discount_values=self._discount_dtos(place),
        )

    def _to_update_dto(self, place: Place) -> PlaceUpdateDto:
        return PlaceUpdateDto(
            id=place.id,
            name=place.name,
            description=place.description,
            phone=place.phone,
            email=place.email,
            location=self._location_dto(place),
            category=CategoryDto(name=place.category.name),
            opening_hours=self._opening_hours_dtos(place),
            discount_values=self._discount_dtos(place),
        )

    def _to_with_user_dto(self, place: Place) -> PlaceWithUserDto:
        return PlaceWithUserDto(
            id=place.id,
            name=place.name,
            description=place.description,
            phone=place.phone,
            email=place.email,
            status=place.status,
            category=CategoryDto(name=place.category.name),
            location=self._location_dto(place),
            opening_hours=self._opening_hours_dtos(place),
            discount_values=self._discount_dtos(place),
            author=self._author_dto(place.author),
        )

    def _to_bounds_dto(self, place: Place) -> PlaceByBoundsDto:
        return PlaceByBoundsDto(id=place.id, name=place.name, location=self._location_dto(place))

    def _to_admin_dto(self, place: Place) -> AdminPlaceDto:
        return AdminPlaceDto(
            id=place.id,
            name=place.name,
            status=place.status,
            category=CategoryDto(name=place.category.name),
            location=self._location_dto(place),
            author=self._author_dto(place.author),
            modified_date=place.modified_date,
        )

    # --- 내부 헬퍼 (Internal helpers) ---

    async def find_by_id(self, db: AsyncSession, place_id: int) -> Place:
        """관계가 로드된 장소를 조회합니다.

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        place: Place | None = await place_repository.get_detail(db, place_id)
        if place is None:
            raise NotFoundError(f"Place not found by id: {place_id}")
        return place

    async def _save_discounts(
        self,
        db: AsyncSession,
        place_id: int,
        discount_values: Sequence[DiscountDto],
    ) -> None:
        for dto in discount_values:
            specification = await specification_service.find_or_create(db, dto.specification.name)
            await discount_service.save(
                db,
                Discount(place_id=place_id, specification_id=specification.id, value=dto.value),
            )

    def _parse_time(self, value: str) -> datetime:
        try:
            return datetime.strptime(value, settings.DATE_FORMAT)
        except ValueError:
            raise BadRequestError(
                f"Invalid time '{value}', expected format {settings.DATE_FORMAT}"
            ) from None

    def _within_distance(self, place: Place, criteria: DistanceFromUserDto) -> bool:
        location: Location = place.location
        return haversine_km(criteria.lat, criteria.lng, location.lat, location.lng) <= criteria.distance

    # --- 제안 및 수정 (Propose / update) ---

    async def save(self, db: AsyncSession, dto: PlaceAddDto, email: str) -> PlaceWithUserDto:
        """사용자가 제안한 새 장소를 저장합니다.

        Save a place proposed by the user identified by ``email``. Places
        proposed by moderators and admins are approved right away; all
        others start as PROPOSED.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            dto: 장소 제안 데이터 (Place proposal)
            email: 제안자 이메일 (Principal e-mail)

        Returns:
            PlaceWithUserDto: 생성된 장소 (Created place with author)

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (Unknown principal)
        """
        author: User = await user_service.find_by_email(db, email)
        category = await category_service.find_or_create(db, dto.category.name)
        status: PlaceStatus = PlaceStatus.APPROVED if author.role.is_moderator else PlaceStatus.PROPOSED

        place = Place(
            name=dto.name,
            description=dto.description,
            phone=dto.phone,
            email=dto.email,
            status=status,
            category_id=category.id,
            author_id=author.id,
            location=Location(address=dto.location.address, lat=dto.location.lat, lng=dto.location.lng),
            opening_hours=[
                OpeningHours(week_day=h.week_day, open_time=h.open_time, close_time=h.close_time)
                for h in dto.opening_hours
            ],
        )
        place = await place_repository.save(db, place)
        await self._save_discounts(db, place.id, dto.discount_values)

        logger.info("Place id=%s proposed by user id=%s with status %s", place.id, author.id, status.value)
        return self._to_with_user_dto(await self.find_by_id(db, place.id))

    async def update(self, db: AsyncSession, dto: PlaceUpdateDto) -> PlaceUpdateDto:
        """장소 정보를 전체 교체 방식으로 수정합니다.

        Replace a place's editable fields, location, opening hours and
        discounts. Discounts are replaced through
        ``DiscountService.delete_all_by_place_id`` followed by fresh saves.

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        place: Place = await self.find_by_id(db, dto.id)
        category = await category_service.find_or_create(db, dto.category.name)

        place.name = dto.name
        place.description = dto.description
        place.phone = dto.phone
        place.email = dto.email
        place.category_id = category.id
        place.modified_date = datetime.now(timezone.utc)
        place.location.address = dto.location.address
        place.location.lat = dto.location.lat
        place.location.lng = dto.location.lng
        place.opening_hours = [
            OpeningHours(week_day=h.week_day, open_time=h.open_time, close_time=h.close_time)
            for h in dto.opening_hours
        ]
        await db.flush()

        await discount_service.delete_all_by_place_id(db, place.id)
        db.expire(place, ["discounts"])
        await self._save_discounts(db, place.id, dto.discount_values)

        logger.info("Place id=%s updated", place.id)
        return self._to_update_dto(await self.find_by_id(db, place.id))

    # --- 조회 (Read) ---

    async def get_info_by_id(self, db: AsyncSession, place_id: int) -> PlaceInfoDto:
        """장소 정보를 조회합니다."""
        return self.to_info_dto(await self.find_by_id(db, place_id))

    async def get_info_for_updating_by_id(self, db: AsyncSession, place_id: int) -> PlaceUpdateDto:
        """수정 폼에 채울 장소 정보를 조회합니다."""
        return self._to_update_dto(await self.find_by_id(db, place_id))

    async def find_places_by_maps_bounds(
        self,
        db: AsyncSession,
        filter_dto: FilterPlaceDto,
    ) -> list[PlaceByBoundsDto]:
        """지도 경계 안의 승인된 장소를 조회합니다.

        Return APPROVED places inside ``filter_dto.map_bounds``.

        Raises:
            BadRequestError: 지도 경계가 없을 때 (map_bounds missing)
        """
        if filter_dto.map_bounds is None:
            raise BadRequestError("map_bounds is required")
        places = await place_repository.find_in_bounds(db, filter_dto.map_bounds, PlaceStatus.APPROVED)
        return [self._to_bounds_dto(p) for p in places]

    async def get_places_by_filter(
        self,
        db: AsyncSession,
        filter_dto: FilterPlaceDto,
    ) -> list[PlaceByBoundsDto]:
        """지도 경계와 추가 조건으로 장소를 필터링합니다.

        Bounds query plus optional status (default APPROVED), discount range,
        open-at time and distance-from-user criteria. Every given criterion
        must hold.

        Raises:
            BadRequestError: 지도 경계가 없거나 시각 형식이 잘못됨
                             (map_bounds missing or malformed time)
        """
        if filter_dto.map_bounds is None:
            raise BadRequestError("map_bounds is required")
        moment: datetime | None = self._parse_time(filter_dto.time) if filter_dto.time else None

        places = await place_repository.find_in_bounds(
            db,
            filter_dto.map_bounds,
            filter_dto.status or PlaceStatus.APPROVED,
            filter_dto.discount,
        )
        if moment is not None:
            places = [p for p in places if is_open_at(p, moment)]
        if filter_dto.distance_from_user is not None:
            places = [p for p in places if self._within_distance(p, filter_dto.distance_from_user)]
        return [self._to_bounds_dto(p) for p in places]

    async def get_places_by_status(
        self,
        db: AsyncSession,
        status: PlaceStatus,
        page: int,
        per_page: int,
    ) -> Page[AdminPlaceDto]:
        """상태별 장소 목록을 페이지 단위로 조회합니다."""
        query = place_repository.status_query(status)
        return await paginate(db, query, page, per_page, self._to_admin_dto)

    async def filter_place_by_search_predicate(
        self,
        db: AsyncSession,
        filter_dto: FilterPlaceDto,
        page: int,
        per_page: int,
    ) -> Page[AdminPlaceDto]:
        """상태와 검색어로 장소 목록을 페이지 단위로 조회합니다."""
        query = place_repository.search_query(filter_dto.status, filter_dto.search_reg)
        return await paginate(db, query, page, per_page, self._to_admin_dto)

    # --- 상태 관리 (Status management) ---

    def get_statuses(self) -> list[PlaceStatus]:
        """모든 장소 상태 값을 선언 순서대로 반환합니다."""
        return list(PlaceStatus)

    def _change_status(self, place: Place, status: PlaceStatus) -> bool:
        if place.status == status:
            return False
        logger.info("Place id=%s status %s -> %s", place.id, place.status.value, status.value)
        place.status = status
        place.modified_date = datetime.now(timezone.utc)
        return True

    async def update_status(
        self,
        db: AsyncSession,
        place_id: int,
        status: PlaceStatus,
        background_tasks: BackgroundTasks | None = None,
    ) -> UpdatePlaceStatusDto:
        """장소 상태를 변경합니다.

        Change the place status. When the status actually changes and
        ``background_tasks`` is given, the author is notified by e-mail
        after the response is sent.

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        place: Place = await self.find_by_id(db, place_id)
        changed: bool = self._change_status(place, status)
        await db.flush()

        if changed and background_tasks is not None and place.author is not None:
            background_tasks.add_task(
                notification_service.notify_status_changed,
                place.author.email,
                place.author.name,
                place.name,
                status,
            )
        return UpdatePlaceStatusDto(id=place.id, status=place.status)

    async def update_statuses(
        self,
        db: AsyncSession,
        items: Sequence[UpdatePlaceStatusDto],
        background_tasks: BackgroundTasks | None = None,
    ) -> list[UpdatePlaceStatusDto]:
        """여러 장소의 상태를 한 번에 변경합니다.

        Apply every id/status pair and return one result per pair in input
        order. Any unknown id fails the whole call before anything changes.

        Raises:
            NotFoundError: 존재하지 않는 장소 ID가 포함됨 (Unknown place id present)
        """
        found = await place_repository.get_many_by_ids(db, [item.id for item in items])
        missing: list[int] = [item.id for item in items if item.id not in found]
        if missing:
            raise NotFoundError(f"Places not found by ids: {missing}")

        return [
            await self.update_status(db, item.id, item.status, background_tasks)
            for item in items
        ]

    async def delete_by_id(self, db: AsyncSession, place_id: int) -> int:
        """장소를 소프트 삭제합니다 (상태를 DELETED로 변경).

        Soft-delete a place. Deleting an already deleted place is a no-op.

        Returns:
            int: 삭제된 장소 ID (Id of the deleted place)

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        place: Place | None = await place_repository.get_by_id(db, place_id)
        if place is None:
            raise NotFoundError(f"Place not found by id: {place_id}")
        self._change_status(place, PlaceStatus.DELETED)
        await db.flush()
        return place.id

    async def bulk_delete(self, db: AsyncSession, place_ids: Sequence[int]) -> int:
        """여러 장소를 소프트 삭제하고 실제로 삭제된 건수를 반환합니다.

        Soft-delete every existing, not yet deleted place among ``place_ids``.
        Unknown ids are skipped.

        Returns:
            int: 상태가 DELETED로 바뀐 장소 수 (Number of places transitioned)
        """
        places = await place_repository.get_many_by_ids(db, place_ids)
        count: int = 0
        for place_id in dict.fromkeys(place_ids):
            place: Place | None = places.get(place_id)
            if place is not None and self._change_status(place, PlaceStatus.DELETED):
                count += 1
        await db.flush()
        logger.info("Bulk delete requested for %d ids, %d places deleted", len(place_ids), count)
        return count


# 싱글턴 인스턴스 — Singleton instance
place_service: PlaceService = PlaceService()
