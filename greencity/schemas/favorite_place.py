"""즐겨찾기 장소 요청/응답 스키마.

Favorite place request/response schemas.
"""

from pydantic import BaseModel, Field

from greencity.constants import MAX_ID


class FavoritePlaceDto(BaseModel):
    """즐겨찾기 저장/수정 요청 및 응답 스키마.

    Attributes:
        place_id: 장소 ID (Bookmarked place id)
        name: 사용자가 붙인 별칭 (User alias for the place)
    """

    place_id: int = Field(..., gt=0, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=100)


class FavoritePlaceShowDto(FavoritePlaceDto):
    """즐겨찾기 목록 응답 스키마 — 좌표 포함.

    Attributes:
        id: 즐겨찾기 ID (Favorite record id)
        lat: 위도 (Latitude of the place)
        lng: 경도 (Longitude of the place)
    """

    id: int
    lat: float | None = None
    lng: float | None = None
