"""장소 레포지토리 — 장소 조회, 필터링, 상태별 목록.

Place Repository — detail loading, map-bounds and predicate queries,
and status-scoped admin lists. Pure query code; filtering that needs
Python-side evaluation (opening hours, distance) lives in PlaceService.
"""

from typing import Sequence

from sqlalchemy import Select, and_, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greencity.models.discount import Discount, Specification
from greencity.models.enums import PlaceStatus
from greencity.models.place import Category, Location, Place
from greencity.models.user import User
from greencity.repositories.base import BaseRepository
from greencity.schemas.place import DiscountFilterDto, MapBoundsDto


def _detail_options() -> list:
    """장소 상세 응답에 필요한 관계를 즉시 로드하는 옵션.

    Eager-load options for every relationship a place DTO touches.
    """
    return [
        selectinload(Place.location),
        selectinload(Place.category),
        selectinload(Place.author),
        selectinload(Place.opening_hours),
        selectinload(Place.discounts).selectinload(Discount.specification),
    ]


class PlaceRepository(BaseRepository[Place]):
    """장소 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Place)

    async def get_detail(self, db: AsyncSession, place_id: int) -> Place | None:
        """관계를 모두 로드한 장소를 조회합니다.

        Retrieve a place with every relationship loaded. ``populate_existing``
        refreshes instances already in the session, so collections replaced
        by bulk statements (e.g. discount deletion) are re-read.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            place_id: 장소 ID (Place id)

        Returns:
            Place | None: 장소 또는 None (Place or None)
        """
        query: Select = (
            select(Place)
            .options(*_detail_options())
            .where(Place.id == place_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_many_by_ids(self, db: AsyncSession, place_ids: Sequence[int]) -> dict[int, Place]:
        """여러 장소를 ID로 조회하여 {id: 장소} 딕셔너리로 반환합니다.

        Retrieve several places at once; missing ids are simply absent.
        """
        if not place_ids:
            return {}
        result = await db.execute(select(Place).where(Place.id.in_(set(place_ids))))
        return {place.id: place for place in result.scalars().all()}

    def _bounds_query(
        self,
        bounds: MapBoundsDto,
        status: PlaceStatus,
    ) -> Select:
        if bounds.crosses_antimeridian:
            # 날짜변경선을 넘으면 경도 범위를 두 구간으로 분리
            lng_in_bounds = or_(Location.lng >= bounds.south_west_lng, Location.lng <= bounds.north_east_lng)
        else:
            lng_in_bounds = Location.lng.between(bounds.south_west_lng, bounds.north_east_lng)
        return (
            select(Place)
            .join(Location, Location.place_id == Place.id)
            .options(*_detail_options())
            .where(
                Place.status == status,
                Location.lat.between(bounds.south_west_lat, bounds.north_east_lat),
                lng_in_bounds,
            )
            .order_by(Place.id)
        )

    async def find_in_bounds(
        self,
        db: AsyncSession,
        bounds: MapBoundsDto,
        status: PlaceStatus = PlaceStatus.APPROVED,
        discount: DiscountFilterDto | None = None,
    ) -> list[Place]:
        """지도 경계 안의 장소를 조회합니다.

        Retrieve places with the given status whose location lies inside the
        rectangle (inclusive). When ``discount`` is given, only places having
        a discount of that specification within the value range are returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            bounds: 지도 경계 (Map rectangle)
            status: 장소 상태 (Place status)
            discount: 할인 조건 (Discount criteria, optional)

        Returns:
            list[Place]: 상세 관계가 로드된 장소 목록 (Places with relationships loaded)
        """
        query: Select = self._bounds_query(bounds, status)
        if discount is not None:
            query = query.where(
                exists()
                .where(
                    Discount.place_id == Place.id,
                    Discount.specification_id == Specification.id,
                    func.lower(Specification.name) == discount.specification.name.lower(),
                    Discount.value.between(discount.discount_min, discount.discount_max),
                )
            )
        result = await db.execute(query)
        return list(result.scalars().all())

    def status_query(self, status: PlaceStatus) -> Select:
        """상태별 관리자 목록 쿼리를 생성합니다 (최근 수정 순).

        Build the admin list query for one status, newest modification first.
        """
        return (
            select(Place)
            .options(*_detail_options())
            .where(Place.status == status)
            .order_by(Place.modified_date.desc(), Place.id.desc())
        )

    def search_query(
        self,
        status: PlaceStatus | None,
        search_reg: str | None,
    ) -> Select:
        """검색어/상태 조건 관리자 목록 쿼리를 생성합니다.

        Build the admin predicate query. ``search_reg`` matches, case-insensitively
        and as a substring, the place name, address, category name, and author
        name or e-mail.

        Args:
            status: 장소 상태 (Status filter, optional)
            search_reg: 검색어 (Search text, optional; blank is ignored)

        Returns:
            Select: 관리자 목록 쿼리 (Admin list query)
        """
        query: Select = (
            select(Place)
            .join(Location, Location.place_id == Place.id, isouter=True)
            .join(Category, Category.id == Place.category_id)
            .join(User, User.id == Place.author_id, isouter=True)
            .options(*_detail_options())
        )
        conditions = []
        if status is not None:
            conditions.append(Place.status == status)
        if search_reg is not None and search_reg.strip():
            pattern: str = f"%{search_reg.strip()}%"
            conditions.append(
                or_(
                    Place.name.ilike(pattern),
                    Location.address.ilike(pattern),
                    Category.name.ilike(pattern),
                    User.name.ilike(pattern),
                    User.email.ilike(pattern),
                )
            )
        if conditions:
            query = query.where(and_(*conditions))
        return query.order_by(Place.modified_date.desc(), Place.id.desc())


# 싱글턴 인스턴스 — Singleton instance
place_repository: PlaceRepository = PlaceRepository()
