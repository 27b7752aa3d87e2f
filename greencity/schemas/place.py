"""장소 관련 Pydantic 요청/응답 스키마 정의.

Place-related Pydantic request/response schema definitions.
Covers proposing and editing places, public info views, map-bounds and
predicate filters, admin lists and status updates.
"""

from datetime import datetime, time
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator, model_validator

from greencity.constants import (
    BAD_DISCOUNT_VALUE,
    BAD_MAP_BOUNDS,
    BAD_OPENING_HOURS,
    EMPTY_PLACE_NAME,
    MAX_ID,
    PLACE_NAME_MAX_LENGTH,
)
from greencity.models.enums import PlaceStatus, WeekDay
from greencity.schemas.category import CategoryDto
from greencity.schemas.specification import SpecificationNameDto
from greencity.utils.exceptions import BadRequestError


def _parse_status(value: Any) -> Any:
    """상태 문자열을 대소문자 구분 없이 변환 (경로 파라미터와 동일 규칙)."""
    if not isinstance(value, str):
        return value
    try:
        return PlaceStatus.parse(value)
    except BadRequestError as exc:
        raise ValueError(exc.detail) from None


CaseInsensitiveStatus = Annotated[PlaceStatus, BeforeValidator(_parse_status)]


# === 구성 요소 (Building blocks) ===

class LocationDto(BaseModel):
    """위치 스키마.

    Attributes:
        address: 주소 (Street address)
        lat: 위도 -90~90 (Latitude)
        lng: 경도 -180~180 (Longitude)
    """

    address: str = Field(..., min_length=1, max_length=255)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class OpeningHoursDto(BaseModel):
    """요일별 영업시간 스키마.

    Attributes:
        week_day: 요일 (Day of week)
        open_time: 개점 시각 (Opening time, HH:MM[:SS])
        close_time: 폐점 시각 (Closing time, later than open_time)
    """

    week_day: WeekDay
    open_time: time
    close_time: time

    @model_validator(mode="after")
    def _open_before_close(self) -> "OpeningHoursDto":
        if self.open_time >= self.close_time:
            raise ValueError(BAD_OPENING_HOURS)
        return self


class DiscountDto(BaseModel):
    """할인 스키마 — 요청과 응답에서 공용.

    Attributes:
        value: 할인율 0~100 (Percent value)
        specification: 할인 종류 (What the discount applies to)
    """

    value: int
    specification: SpecificationNameDto

    @field_validator("value")
    @classmethod
    def _percent_range(cls, value: int) -> int:
        if not 0 <= value <= 100:
            raise ValueError(BAD_DISCOUNT_VALUE)
        return value


class AuthorDto(BaseModel):
    """장소 제안자 요약 스키마."""

    id: int
    name: str
    email: str


# === 장소 생성/수정 (Propose / update) ===

class PlaceAddDto(BaseModel):
    """장소 제안 요청 스키마.

    Place proposal request. Opening hours must not repeat a week day and
    discounts must not repeat a specification.

    Attributes:
        name: 장소 이름 (Place name)
        description: 설명 (Description, optional)
        phone: 전화번호 (Contact phone, optional)
        email: 연락 이메일 (Contact e-mail, optional)
        location: 위치 (Location)
        category: 카테고리 — 없으면 생성 (Category, created when unknown)
        opening_hours: 영업시간 목록 (Opening hours)
        discount_values: 할인 목록 (Discounts)
    """

    name: str = Field(..., max_length=PLACE_NAME_MAX_LENGTH)
    description: str | None = None
    phone: str | None = Field(default=None, max_length=30)
    email: str | None = Field(default=None, max_length=255)
    location: LocationDto
    category: CategoryDto
    opening_hours: list[OpeningHoursDto] = []
    discount_values: list[DiscountDto] = []

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(EMPTY_PLACE_NAME)
        return value

    @field_validator("opening_hours")
    @classmethod
    def _unique_week_days(cls, value: list[OpeningHoursDto]) -> list[OpeningHoursDto]:
        days = [hours.week_day for hours in value]
        if len(days) != len(set(days)):
            raise ValueError("Opening hours contain a duplicated week day")
        return value

    @field_validator("discount_values")
    @classmethod
    def _unique_specifications(cls, value: list[DiscountDto]) -> list[DiscountDto]:
        names = [d.specification.name.lower() for d in value]
        if len(names) != len(set(names)):
            raise ValueError("Discounts contain a duplicated specification")
        return value


class PlaceUpdateDto(PlaceAddDto):
    """장소 수정 요청 스키마이자 수정 폼 응답 스키마.

    Full replacement of an existing place's editable fields. Also returned by
    ``GET /place/about/{id}`` to prefill the admin edit form.
    """

    id: int = Field(..., gt=0, le=MAX_ID)


class PlaceWithUserDto(BaseModel):
    """장소 제안 응답 스키마 — 제안자 포함."""

    id: int
    name: str
    description: str | None
    phone: str | None
    email: str | None
    status: PlaceStatus
    category: CategoryDto
    location: LocationDto
    opening_hours: list[OpeningHoursDto]
    discount_values: list[DiscountDto]
    author: AuthorDto | None


# === 조회 (Read views) ===

class PlaceInfoDto(BaseModel):
    """장소 정보 응답 스키마.

    Public place info. For favorites, ``name`` carries the user's alias.
    """

    id: int
    name: str
    description: str | None
    status: PlaceStatus
    category: CategoryDto
    location: LocationDto
    opening_hours: list[OpeningHoursDto]
    discount_values: list[DiscountDto]


class PlaceByBoundsDto(BaseModel):
    """지도 표시용 장소 요약 스키마."""

    id: int
    name: str
    location: LocationDto


class AdminPlaceDto(BaseModel):
    """관리자 목록용 장소 스키마."""

    id: int
    name: str
    status: PlaceStatus
    category: CategoryDto
    location: LocationDto
    author: AuthorDto | None
    modified_date: datetime


# === 상태 변경 (Status updates) ===

class UpdatePlaceStatusDto(BaseModel):
    """장소 상태 변경 요청/응답 스키마.

    Attributes:
        id: 장소 ID (Place id)
        status: 새 상태 (New status)
    """

    id: int = Field(..., gt=0, le=MAX_ID)
    status: CaseInsensitiveStatus


# === 필터 (Filters) ===

class MapBoundsDto(BaseModel):
    """지도 경계 스키마 — 남서쪽/북동쪽 모서리.

    A west edge greater than the east edge describes a viewport that wraps
    across the antimeridian (e.g. 170 to -170).

    Attributes:
        north_east_lat: 북동쪽 위도 (North-east latitude)
        north_east_lng: 북동쪽 경도 (North-east longitude)
        south_west_lat: 남서쪽 위도 (South-west latitude)
        south_west_lng: 남서쪽 경도 (South-west longitude)
    """

    north_east_lat: float = Field(..., ge=-90, le=90)
    north_east_lng: float = Field(..., ge=-180, le=180)
    south_west_lat: float = Field(..., ge=-90, le=90)
    south_west_lng: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def _corners_ordered(self) -> "MapBoundsDto":
        if self.south_west_lat > self.north_east_lat:
            raise ValueError(BAD_MAP_BOUNDS)
        return self

    @property
    def crosses_antimeridian(self) -> bool:
        """서쪽 경도가 동쪽보다 크면 날짜변경선을 넘는 영역."""
        return self.south_west_lng > self.north_east_lng


class DiscountFilterDto(BaseModel):
    """할인 조건 필터.

    Attributes:
        specification: 할인 종류 (Specification the discount must apply to)
        discount_min: 최소 할인율 (Minimum percent, inclusive)
        discount_max: 최대 할인율 (Maximum percent, inclusive)
    """

    specification: SpecificationNameDto
    discount_min: int = Field(default=0, ge=0, le=100)
    discount_max: int = Field(default=100, ge=0, le=100)

    @model_validator(mode="after")
    def _range_ordered(self) -> "DiscountFilterDto":
        if self.discount_min > self.discount_max:
            raise ValueError("discount_min must not exceed discount_max")
        return self


class DistanceFromUserDto(BaseModel):
    """사용자 위치 기준 거리 필터.

    Attributes:
        lat: 사용자 위도 (User latitude)
        lng: 사용자 경도 (User longitude)
        distance: 최대 거리 km (Maximum great-circle distance in km)
    """

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    distance: float = Field(..., gt=0)


class FilterPlaceDto(BaseModel):
    """장소 필터 요청 스키마.

    Every criterion is optional except where an endpoint states otherwise
    (``map_bounds`` is required by the map endpoints).

    Attributes:
        map_bounds: 지도 경계 (Visible map rectangle)
        status: 상태 (Status; map endpoints default to APPROVED)
        discount: 할인 조건 (Discount criteria)
        time: 영업 중 판단 시각, DATE_FORMAT 문자열 (Moment the place must be open at)
        search_reg: 검색어 (Case-insensitive search text)
        distance_from_user: 거리 조건 (Distance criteria)
    """

    map_bounds: MapBoundsDto | None = None
    status: CaseInsensitiveStatus | None = None
    discount: DiscountFilterDto | None = None
    time: str | None = None
    search_reg: str | None = Field(default=None, max_length=100)
    distance_from_user: DistanceFromUserDto | None = None

