"""장소 관련 SQLAlchemy ORM 모델 정의.

Place-related SQLAlchemy ORM model definitions.

Tables:
    - categories: 장소 분류 (Place categories)
    - places: 장소 (Points of interest with a lifecycle status)
    - locations: 장소 위치, 장소당 1개 (One location per place)
    - opening_hours: 요일별 영업시간 (Opening hours per week day)
"""

from datetime import datetime, time, timezone
from sqlalchemy import String, DateTime, Enum, Float, ForeignKey, Index, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base, BigIntId
from greencity.models.enums import PlaceStatus, WeekDay


class Category(Base):
    """카테고리 모델 — 장소 분류 (e.g. "Food", "Recycling").

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 카테고리 이름, 고유 (Category name, unique)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    places = relationship("Place", back_populates="category")


class Place(Base):
    """장소 모델 — 사용자가 제안하고 관리자가 상태를 관리하는 관심 지점.

    Place model — point of interest proposed by a user and moderated through
    status transitions. Never physically deleted; "deletion" sets
    ``status`` to ``DELETED``.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 장소 이름 (Place name)
        description: 설명 (Free-form description, optional)
        phone: 전화번호 (Contact phone, optional)
        email: 연락 이메일 (Contact e-mail, optional)
        status: 생명주기 상태 (Lifecycle status)
        category_id: 카테고리 FK (Category foreign key)
        author_id: 제안자 FK (Proposing user foreign key)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_date: 마지막 수정/상태 변경 일시 (Last edit or status change)

    Relationships:
        location: 위치 (One-to-one, cascade delete)
        discounts: 할인 목록 (Discounts, cascade delete)
        opening_hours: 영업시간 목록 (Opening hours, cascade delete)
        category: 카테고리 (Category)
        author: 제안자 (Proposing user)
    """

    __tablename__ = "places"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[PlaceStatus] = mapped_column(
        Enum(PlaceStatus, name="place_status"), nullable=False, default=PlaceStatus.PROPOSED
    )
    category_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("categories.id"), nullable=False)
    # 제안자 FK — 사용자 삭제 시 NULL (Author is kept nullable for account removal)
    author_id: Mapped[int | None] = mapped_column(BigIntId, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    modified_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_places_status_modified", "status", "modified_date"),
    )

    # 관계 — Relationships
    category = relationship("Category", back_populates="places")
    author = relationship("User", back_populates="places")
    location = relationship("Location", back_populates="place", uselist=False, cascade="all, delete-orphan")
    discounts = relationship("Discount", back_populates="place", cascade="all, delete-orphan")
    opening_hours = relationship(
        "OpeningHours",
        back_populates="place",
        cascade="all, delete-orphan",
        order_by="OpeningHours.id",
    )
    favorites = relationship("FavoritePlace", back_populates="place", cascade="all, delete-orphan")


class Location(Base):
    """위치 모델 — 장소의 주소와 좌표.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        place_id: 장소 FK, 고유 (Owning place, unique)
        address: 주소 (Street address)
        lat: 위도 (Latitude in degrees)
        lng: 경도 (Longitude in degrees)
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    place_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("places.id", ondelete="CASCADE"), unique=True, nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        Index("ix_locations_lat_lng", "lat", "lng"),
    )

    place = relationship("Place", back_populates="location")


class OpeningHours(Base):
    """영업시간 모델 — 요일별 개점/폐점 시각.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        place_id: 장소 FK (Owning place)
        week_day: 요일 (Day of week)
        open_time: 개점 시각 (Opening time, local)
        close_time: 폐점 시각 (Closing time, local, later than open_time)
    """

    __tablename__ = "opening_hours"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    place_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("places.id", ondelete="CASCADE"), nullable=False)
    week_day: Mapped[WeekDay] = mapped_column(Enum(WeekDay, name="week_day"), nullable=False)
    open_time: Mapped[time] = mapped_column(Time, nullable=False)
    close_time: Mapped[time] = mapped_column(Time, nullable=False)

    place = relationship("Place", back_populates="opening_hours")
