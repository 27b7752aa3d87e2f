"""즐겨찾기 장소 SQLAlchemy ORM 모델 정의.

Favorite place model — a user-specific bookmark with its own alias.
"""

from sqlalchemy import String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base, BigIntId


class FavoritePlace(Base):
    """즐겨찾기 모델 — 사용자와 장소의 N:N 연결.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        user_id: 사용자 FK (Owning user)
        place_id: 장소 FK (Bookmarked place)
        name: 사용자가 붙인 별칭 (User-chosen alias shown instead of the place name)

    Constraints:
        uq_favorite_user_place: 사용자당 장소 1회 (One favorite per user and place)
    """

    __tablename__ = "favorite_places"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    place_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("places.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "place_id", name="uq_favorite_user_place"),
    )

    user = relationship("User", back_populates="favorite_places")
    place = relationship("Place", back_populates="favorites")
