"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package. Importing from this package registers every
model with the metadata, which Alembic and relationship resolution need.

Modules:
    enums: 장소 상태, 사용자 역할, 요일 (PlaceStatus, UserRole, WeekDay)
    user: 사용자 (User)
    place: 카테고리, 장소, 위치, 영업시간 (Category, Place, Location, OpeningHours)
    discount: 할인 종류, 할인 (Specification, Discount)
    favorite_place: 즐겨찾기 (FavoritePlace)
"""

from greencity.models.enums import PlaceStatus, UserRole, WeekDay
from greencity.models.user import User
from greencity.models.place import Category, Place, Location, OpeningHours
from greencity.models.discount import Specification, Discount
from greencity.models.favorite_place import FavoritePlace

__all__ = [
    "PlaceStatus", "UserRole", "WeekDay",
    "User",
    "Category", "Place", "Location", "OpeningHours",
    "Specification", "Discount",
    "FavoritePlace",
]
