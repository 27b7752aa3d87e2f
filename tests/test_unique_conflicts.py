"""고유 키 충돌 테스트 — 조회 후 삽입 사이에 다른 요청이 같은 행을 만든 경우.

Unique-key conflicts between the existence check and the insert. The
lookup is patched to miss a row that is already stored, which is what a
concurrent request inserting the same key looks like from this request.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.discount import Specification
from greencity.repositories.category_repository import category_repository
from greencity.repositories.favorite_place_repository import favorite_place_repository
from greencity.repositories.specification_repository import specification_repository
from greencity.repositories.user_repository import user_repository
from greencity.schemas.category import CategoryDto
from greencity.services.category_service import category_service
from greencity.services.specification_service import specification_service
from greencity.utils.exceptions import DuplicateError
from tests.conftest import auth_header


class TestCategoryConflict:
    """카테고리 동시 생성."""

    async def test_find_or_create_reuses_existing_row(self, db: AsyncSession, category):
        lookup = AsyncMock(side_effect=[None, category])
        with patch.object(category_repository, "get_by_name", lookup):
            found = await category_service.find_or_create(db, "Food")

        assert found.id == category.id
        assert lookup.await_count == 2

    async def test_create_reports_duplicate(self, db: AsyncSession, category):
        """삽입 충돌은 500이 아닌 409."""
        with patch.object(category_repository, "get_by_name", AsyncMock(return_value=None)):
            with pytest.raises(DuplicateError):
                await category_service.create(db, CategoryDto(name="Food"))

        # SAVEPOINT만 롤백되므로 세션은 계속 사용 가능
        assert [c.name for c in await category_service.find_all(db)] == ["Food"]


class TestSpecificationConflict:
    """할인 종류 동시 생성."""

    async def test_find_or_create_reuses_existing_row(self, db: AsyncSession):
        existing = Specification(name="Coffee")
        db.add(existing)
        await db.flush()

        lookup = AsyncMock(side_effect=[None, existing])
        with patch.object(specification_repository, "get_by_name", lookup):
            found = await specification_service.find_or_create(db, "Coffee")

        assert found.id == existing.id
        assert [s.name for s in await specification_service.find_all(db)] == ["Coffee"]


class TestFavoriteConflict:
    """즐겨찾기 동시 저장."""

    async def test_save_reports_duplicate(self, client: AsyncClient, place, user_token):
        body = {"place_id": place.id, "name": "My cafe"}
        first = await client.post("/place/save/favorite/", json=body, headers=auth_header(user_token))
        assert first.status_code == 200

        with patch.object(favorite_place_repository, "get_by_user_and_place", AsyncMock(return_value=None)):
            res = await client.post("/place/save/favorite/", json=body, headers=auth_header(user_token))
        assert res.status_code == 409


class TestSignUpConflict:
    """회원가입 동시 요청."""

    async def test_sign_up_reports_duplicate(self, client: AsyncClient, user):
        with patch.object(user_repository, "get_by_email", AsyncMock(return_value=None)):
            res = await client.post("/ownSecurity/signUp", json={
                "email": "user@test.com", "name": "Dup", "password": "password123",
            })
        assert res.status_code == 409
