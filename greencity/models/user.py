"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.

Tables:
    - users: 사용자 계정 (User accounts; e-mail is the principal name)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base, BigIntId
from greencity.models.enums import UserRole


class User(Base):
    """사용자 모델 — 장소를 제안하거나 즐겨찾기하는 주체.

    User model — the principal who proposes and favorites places.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        email: 로그인 이메일, 전역 고유 (Login e-mail, globally unique)
        name: 표시 이름 (Display name)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        role: 사용자 역할 (User role)
        is_active: 활성 상태 (Active status)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        places: 제안한 장소 목록 (Places proposed by this user)
        favorite_places: 즐겨찾기 목록 (Favorites, cascade delete)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    # 로그인 이메일 — Principal name carried in JWT "sub"
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"), nullable=False, default=UserRole.ROLE_USER
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    places = relationship("Place", back_populates="author")
    favorite_places = relationship("FavoritePlace", back_populates="user", cascade="all, delete-orphan")
