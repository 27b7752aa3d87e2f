"""할인 관련 SQLAlchemy ORM 모델 정의.

Discount-related SQLAlchemy ORM model definitions.

Tables:
    - specifications: 할인 대상 종류 (What a discount applies to, e.g. "Coffee")
    - discounts: 장소별 할인 값 (Discount value owned by exactly one place)
"""

from sqlalchemy import String, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base, BigIntId


class Specification(Base):
    """할인 종류 모델.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 이름, 고유 (Name, unique)
    """

    __tablename__ = "specifications"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    discounts = relationship("Discount", back_populates="specification")


class Discount(Base):
    """할인 모델 — 정확히 하나의 장소에 속함.

    Discount model. Every row has exactly one owning place; rows are removed
    together with the place or in bulk by place id.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        place_id: 소유 장소 FK (Owning place)
        specification_id: 할인 종류 FK (Specification)
        value: 할인율 0~100 (Percent value)
    """

    __tablename__ = "discounts"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    place_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("places.id", ondelete="CASCADE"), nullable=False, index=True)
    specification_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("specifications.id"), nullable=False)
    value: Mapped[int] = mapped_column(Integer, nullable=False)

    place = relationship("Place", back_populates="discounts")
    specification = relationship("Specification", back_populates="discounts")
