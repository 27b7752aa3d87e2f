"""비동기 데이터베이스 엔진과 세션.

Async engine, session factory and declarative base. One session per
request; routers commit, and a request that fails is rolled back here.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import BigInteger, Integer, MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from greencity.config import settings

# 제약 조건 이름 규칙 — Alembic 마이그레이션에서 이름이 안정적으로 유지됨
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# 기본 키/외래 키 타입 — BIGINT, SQLite에서는 rowid 자동 증가를 위해 INTEGER
BigIntId = BigInteger().with_variant(Integer, "sqlite")

engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)

# expire_on_commit=False: 커밋 후 응답 DTO 변환 시 지연 로딩 방지
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """모든 ORM 모델의 베이스."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션을 제공하는 FastAPI 의존성.

    Yields a session for the request. Uncommitted work is rolled back when
    the endpoint raises.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
