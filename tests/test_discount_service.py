"""할인 서비스 테스트.

Discount service tests: save, find by id, find and delete by owning place.
Also covers the specification lookups that discounts rely on.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.discount import Discount, Specification
from greencity.models.place import Place
from greencity.services.discount_service import discount_service
from greencity.services.specification_service import specification_service
from greencity.utils.exceptions import NotFoundError


async def _specification(db: AsyncSession, name: str = "Coffee") -> Specification:
    spec = Specification(name=name)
    db.add(spec)
    await db.flush()
    return spec


class TestDiscountSave:
    """할인 저장 테스트."""

    async def test_save_assigns_id(self, db: AsyncSession, place: Place):
        """저장 후 ID가 채워지고 같은 ID로 조회 가능."""
        spec = await _specification(db)
        saved = await discount_service.save(db, Discount(place_id=place.id, specification_id=spec.id, value=15))
        assert saved.id is not None

        found = await discount_service.find_by_id(db, saved.id)
        assert found.value == 15
        assert found.place_id == place.id
        assert found.specification.name == "Coffee"

    async def test_save_updates_existing(self, db: AsyncSession, place: Place):
        """기존 할인 수정 후 저장."""
        spec = await _specification(db)
        saved = await discount_service.save(db, Discount(place_id=place.id, specification_id=spec.id, value=5))
        saved.value = 40
        await discount_service.save(db, saved)

        found = await discount_service.find_by_id(db, saved.id)
        assert found.value == 40


class TestDiscountFind:
    """할인 조회 테스트."""

    async def test_find_missing_raises_not_found(self, db: AsyncSession):
        """존재하지 않는 ID 조회 시 404 메시지."""
        with pytest.raises(NotFoundError) as exc_info:
            await discount_service.find_by_id(db, 9999)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Discount not found by id: 9999"

    async def test_find_all_by_place_id(self, db: AsyncSession, place: Place):
        """장소의 할인 목록 조회."""
        coffee = await _specification(db, "Coffee")
        bags = await _specification(db, "Bags")
        await discount_service.save(db, Discount(place_id=place.id, specification_id=coffee.id, value=10))
        await discount_service.save(db, Discount(place_id=place.id, specification_id=bags.id, value=20))

        discounts = await discount_service.find_all_by_place_id(db, place.id)
        assert sorted(d.value for d in discounts) == [10, 20]
        assert all(d.place_id == place.id for d in discounts)

    async def test_find_all_for_place_without_discounts(self, db: AsyncSession, place: Place):
        """할인이 없는 장소는 빈 목록."""
        assert await discount_service.find_all_by_place_id(db, place.id) == []


class TestDiscountDelete:
    """할인 일괄 삭제 테스트."""

    async def test_delete_all_by_place_id(self, db: AsyncSession, place: Place):
        """장소의 모든 할인 삭제 후 조회 결과 없음."""
        spec = await _specification(db)
        saved = await discount_service.save(db, Discount(place_id=place.id, specification_id=spec.id, value=10))

        await discount_service.delete_all_by_place_id(db, place.id)

        assert await discount_service.find_all_by_place_id(db, place.id) == []
        with pytest.raises(NotFoundError):
            await discount_service.find_by_id(db, saved.id)

    async def test_delete_is_idempotent(self, db: AsyncSession, place: Place):
        """할인이 없어도 삭제 호출은 성공."""
        await discount_service.delete_all_by_place_id(db, place.id)
        await discount_service.delete_all_by_place_id(db, place.id)
        assert await discount_service.find_all_by_place_id(db, place.id) == []

    async def test_delete_keeps_other_places(self, db: AsyncSession, place: Place):
        """다른 장소의 할인은 유지."""
        other = Place(name="Other", category_id=place.category_id)
        db.add(other)
        await db.flush()
        spec = await _specification(db)
        await discount_service.save(db, Discount(place_id=place.id, specification_id=spec.id, value=10))
        await discount_service.save(db, Discount(place_id=other.id, specification_id=spec.id, value=30))

        await discount_service.delete_all_by_place_id(db, place.id)

        remaining = await discount_service.find_all_by_place_id(db, other.id)
        assert [d.value for d in remaining] == [30]


class TestSpecificationService:
    """할인 종류 서비스 테스트."""

    async def test_find_or_create_reuses_case_insensitively(self, db: AsyncSession):
        """같은 이름(대소문자 무시)은 새로 만들지 않음."""
        created = await specification_service.find_or_create(db, "Coffee")
        again = await specification_service.find_or_create(db, "COFFEE")
        assert again.id == created.id
        assert [s.name for s in await specification_service.find_all(db)] == ["Coffee"]

    async def test_find_by_name(self, db: AsyncSession):
        await _specification(db, "Bags")
        found = await specification_service.find_by_name(db, "bags")
        assert found.name == "Bags"

    async def test_find_by_name_missing(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await specification_service.find_by_name(db, "Nothing")

    async def test_find_all_sorted(self, db: AsyncSession):
        await _specification(db, "Tea")
        await _specification(db, "Bags")
        assert [s.name for s in await specification_service.find_all(db)] == ["Bags", "Tea"]
