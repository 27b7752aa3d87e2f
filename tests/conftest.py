"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — in-memory aiosqlite database, session and httpx
client fixtures. The schema is created from the ORM metadata for every
test, so each test starts from an empty database.
"""

import os
from collections.abc import AsyncGenerator
from datetime import time

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# bcrypt 비용 최소화 — must be set before greencity.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from greencity.database import Base, get_db
from greencity.main import app
from greencity.models import *  # noqa: F401,F403 — register all models with metadata
from greencity.utils.jwt import create_access_token
from greencity.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 단일 커넥션을 공유하는 인메모리 DB."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _make_user(db: AsyncSession, email: str, name: str, role: UserRole) -> User:
    user = User(
        email=email,
        name=name,
        password_hash=hash_password("password123"),
        role=role,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def user(db: AsyncSession) -> User:
    """일반 사용자를 생성합니다."""
    return await _make_user(db, "user@test.com", "Test User", UserRole.ROLE_USER)


@pytest_asyncio.fixture
async def moderator(db: AsyncSession) -> User:
    """모더레이터 사용자를 생성합니다."""
    return await _make_user(db, "moderator@test.com", "Test Moderator", UserRole.ROLE_MODERATOR)


@pytest_asyncio.fixture
async def category(db: AsyncSession) -> Category:
    """테스트 카테고리를 생성합니다."""
    c = Category(name="Food")
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def place(db: AsyncSession, category: Category, user: User) -> Place:
    """승인된 테스트 장소를 생성합니다 (키이우 중심, 평일 08:00~20:00)."""
    p = Place(
        name="Green Cafe",
        status=PlaceStatus.APPROVED,
        category_id=category.id,
        author_id=user.id,
        location=Location(address="Khreshchatyk St, 1", lat=50.45, lng=30.52),
        opening_hours=[
            OpeningHours(week_day=day, open_time=time(8, 0), close_time=time(20, 0))
            for day in (WeekDay.MONDAY, WeekDay.TUESDAY, WeekDay.WEDNESDAY, WeekDay.THURSDAY, WeekDay.FRIDAY)
        ],
    )
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": user.email, "uid": user.id, "role": user.role.value})


@pytest.fixture
def user_token(user: User) -> str:
    return make_token(user)


@pytest.fixture
def moderator_token(moderator: User) -> str:
    return make_token(moderator)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def place_payload(**overrides) -> dict:
    """장소 제안 요청 본문을 생성합니다."""
    payload = {
        "name": "Eco Market",
        "description": "Zero-waste grocery",
        "location": {"address": "Sahaidachnoho St, 10", "lat": 50.46, "lng": 30.52},
        "category": {"name": "Shops"},
        "opening_hours": [
            {"week_day": "MONDAY", "open_time": "09:00", "close_time": "18:00"},
            {"week_day": "SATURDAY", "open_time": "10:00", "close_time": "16:00"},
        ],
        "discount_values": [
            {"value": 10, "specification": {"name": "Coffee"}},
            {"value": 25, "specification": {"name": "Bags"}},
        ],
    }
    payload.update(overrides)
    return payload


async def propose(client: AsyncClient, token: str, **overrides) -> dict:
    """API로 장소를 제안하고 응답 본문을 반환합니다."""
    res = await client.post("/place/propose", json=place_payload(**overrides), headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()
