"""장소 필터 API 테스트 — 지도 경계, 할인, 영업시간, 거리, 검색어.

Place filter API tests — map bounds, discount range, open-at time,
distance from user, and the admin search predicate.
"""

import pytest_asyncio
from httpx import AsyncClient

from tests.conftest import auth_header, propose

URL = "/place"

KYIV_BOUNDS = {
    "north_east_lat": 51.0,
    "north_east_lng": 31.0,
    "south_west_lat": 50.0,
    "south_west_lng": 30.0,
}


@pytest_asyncio.fixture
async def places(client: AsyncClient, user_token, moderator_token) -> dict[str, int]:
    """필터 테스트용 장소 세트.

    - market: 승인, 키이우 중심, Coffee 10% / Bags 25%, 월 09~18, 토 10~16
    - park: 승인, 약 8km 떨어짐, 할인/영업시간 없음
    - proposed: 제안 상태, 키이우 안
    - lviv: 승인, 경계 밖
    """
    market = await propose(client, moderator_token)
    park = await propose(
        client, moderator_token,
        name="River Park",
        category={"name": "Parks"},
        location={"address": "Trukhaniv Island", "lat": 50.40, "lng": 30.60},
        opening_hours=[],
        discount_values=[],
    )
    proposed = await propose(
        client, user_token,
        name="Bike Repair",
        location={"address": "Obolon, 3", "lat": 50.45, "lng": 30.50},
    )
    lviv = await propose(
        client, moderator_token,
        name="Lviv Cafe",
        location={"address": "Rynok Sq, 1", "lat": 49.84, "lng": 24.03},
    )
    return {"market": market["id"], "park": park["id"], "proposed": proposed["id"], "lviv": lviv["id"]}


def _ids(res) -> set[int]:
    return {p["id"] for p in res.json()}


class TestMapBounds:
    """지도 경계 조회 테스트."""

    async def test_approved_places_in_bounds(self, client: AsyncClient, places):
        """경계 안의 승인된 장소만 반환."""
        res = await client.post(f"{URL}/getListPlaceLocationByMapsBounds", json={"map_bounds": KYIV_BOUNDS})
        assert res.status_code == 200
        assert _ids(res) == {places["market"], places["park"]}
        first = res.json()[0]
        assert set(first) == {"id", "name", "location"}

    async def test_bounds_are_inclusive(self, client: AsyncClient, places):
        """경계선 위의 장소도 포함."""
        bounds = {"north_east_lat": 50.46, "north_east_lng": 30.52, "south_west_lat": 50.46, "south_west_lng": 30.52}
        res = await client.post(f"{URL}/getListPlaceLocationByMapsBounds", json={"map_bounds": bounds})
        assert _ids(res) == {places["market"]}

    async def test_missing_bounds(self, client: AsyncClient):
        res = await client.post(f"{URL}/getListPlaceLocationByMapsBounds", json={})
        assert res.status_code == 400

    async def test_inverted_bounds(self, client: AsyncClient):
        """남서쪽이 북동쪽보다 북쪽이면 400."""
        bounds = dict(KYIV_BOUNDS, south_west_lat=52.0)
        res = await client.post(f"{URL}/getListPlaceLocationByMapsBounds", json={"map_bounds": bounds})
        assert res.status_code == 400

    async def test_bounds_across_antimeridian(self, client: AsyncClient, moderator_token):
        """서쪽 경도가 동쪽보다 크면 날짜변경선을 넘는 영역으로 처리."""
        east = await propose(
            client, moderator_token,
            name="Taveuni Dive",
            location={"address": "Taveuni", "lat": -16.8, "lng": 179.9},
        )
        west = await propose(
            client, moderator_token,
            name="Samoa Market",
            location={"address": "Apia", "lat": -13.8, "lng": -171.8},
        )
        await propose(
            client, moderator_token,
            name="Gulf Cafe",
            location={"address": "Accra", "lat": -15.0, "lng": 0.0},
        )

        bounds = {"north_east_lat": -10.0, "north_east_lng": -170.0, "south_west_lat": -20.0, "south_west_lng": 170.0}
        res = await client.post(f"{URL}/getListPlaceLocationByMapsBounds", json={"map_bounds": bounds})
        assert res.status_code == 200
        assert _ids(res) == {east["id"], west["id"]}


class TestPlaceFilter:
    """추가 조건 필터 테스트."""

    async def test_bounds_only(self, client: AsyncClient, places):
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS})
        assert res.status_code == 200
        assert _ids(res) == {places["market"], places["park"]}

    async def test_status(self, client: AsyncClient, places):
        """상태 조건을 주면 해당 상태만."""
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS, "status": "PROPOSED"})
        assert _ids(res) == {places["proposed"]}

    async def test_status_case_insensitive(self, client: AsyncClient, places):
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS, "status": "proposed"})
        assert res.status_code == 200
        assert _ids(res) == {places["proposed"]}

    async def test_discount_in_range(self, client: AsyncClient, places):
        """할인 종류와 범위가 맞는 장소만 (대소문자 무시)."""
        body = {
            "map_bounds": KYIV_BOUNDS,
            "discount": {"specification": {"name": "coffee"}, "discount_min": 5, "discount_max": 15},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert _ids(res) == {places["market"]}

    async def test_discount_range_is_inclusive(self, client: AsyncClient, places):
        body = {
            "map_bounds": KYIV_BOUNDS,
            "discount": {"specification": {"name": "Bags"}, "discount_min": 25, "discount_max": 25},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert _ids(res) == {places["market"]}

    async def test_discount_out_of_range(self, client: AsyncClient, places):
        body = {
            "map_bounds": KYIV_BOUNDS,
            "discount": {"specification": {"name": "Coffee"}, "discount_min": 20, "discount_max": 30},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert res.json() == []

    async def test_discount_min_above_max(self, client: AsyncClient):
        body = {
            "map_bounds": KYIV_BOUNDS,
            "discount": {"specification": {"name": "Coffee"}, "discount_min": 50, "discount_max": 10},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert res.status_code == 400

    async def test_open_at_time(self, client: AsyncClient, places):
        """2024-01-01(월) 10:00에 영업 중인 장소."""
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS, "time": "01/01/2024 10:00:00"})
        assert _ids(res) == {places["market"]}

    async def test_closed_at_closing_time(self, client: AsyncClient, places):
        """폐점 시각 정각에는 영업 종료."""
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS, "time": "01/01/2024 18:00:00"})
        assert res.json() == []

    async def test_bad_time_format(self, client: AsyncClient, places):
        res = await client.post(f"{URL}/filter", json={"map_bounds": KYIV_BOUNDS, "time": "2024-01-01T10:00"})
        assert res.status_code == 400
        assert "%d/%m/%Y %H:%M:%S" in res.json()["detail"]

    async def test_distance_from_user(self, client: AsyncClient, places):
        """사용자 위치에서 1km 안의 장소만."""
        body = {
            "map_bounds": KYIV_BOUNDS,
            "distance_from_user": {"lat": 50.46, "lng": 30.52, "distance": 1},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert _ids(res) == {places["market"]}

    async def test_distance_covers_both(self, client: AsyncClient, places):
        body = {
            "map_bounds": KYIV_BOUNDS,
            "distance_from_user": {"lat": 50.46, "lng": 30.52, "distance": 20},
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert _ids(res) == {places["market"], places["park"]}

    async def test_all_criteria_must_hold(self, client: AsyncClient, places):
        """할인은 맞지만 영업시간이 맞지 않으면 제외."""
        body = {
            "map_bounds": KYIV_BOUNDS,
            "discount": {"specification": {"name": "Coffee"}},
            "time": "02/01/2024 10:00:00",
        }
        res = await client.post(f"{URL}/filter", json=body)
        assert res.json() == []


class TestSearchPredicate:
    """관리자 검색어 필터 테스트."""

    async def test_search_by_name(self, client: AsyncClient, places, moderator_token):
        res = await client.post(
            f"{URL}/filter/predicate", json={"search_reg": "river"}, headers=auth_header(moderator_token)
        )
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 1
        assert data["items"][0]["id"] == places["park"]

    async def test_search_by_category(self, client: AsyncClient, places, moderator_token):
        res = await client.post(
            f"{URL}/filter/predicate", json={"search_reg": "PARKS"}, headers=auth_header(moderator_token)
        )
        assert [p["id"] for p in res.json()["items"]] == [places["park"]]

    async def test_search_by_author_email(self, client: AsyncClient, places, moderator_token):
        res = await client.post(
            f"{URL}/filter/predicate", json={"search_reg": "user@test"}, headers=auth_header(moderator_token)
        )
        assert [p["id"] for p in res.json()["items"]] == [places["proposed"]]

    async def test_search_by_address(self, client: AsyncClient, places, moderator_token):
        res = await client.post(
            f"{URL}/filter/predicate", json={"search_reg": "rynok"}, headers=auth_header(moderator_token)
        )
        assert [p["id"] for p in res.json()["items"]] == [places["lviv"]]

    async def test_status_and_search(self, client: AsyncClient, places, moderator_token):
        """상태와 검색어를 함께 적용."""
        res = await client.post(
            f"{URL}/filter/predicate",
            json={"status": "PROPOSED", "search_reg": "cafe"},
            headers=auth_header(moderator_token),
        )
        assert res.json()["total"] == 0

    async def test_no_criteria_pages_everything(self, client: AsyncClient, places, moderator_token):
        """조건이 없으면 전체 장소를 페이지 단위로."""
        res = await client.post(
            f"{URL}/filter/predicate", json={}, params={"per_page": 3}, headers=auth_header(moderator_token)
        )
        data = res.json()
        assert data["total"] == 4
        assert data["pages"] == 2
        assert len(data["items"]) == 3

    async def test_forbidden_for_user(self, client: AsyncClient, user_token):
        res = await client.post(f"{URL}/filter/predicate", json={}, headers=auth_header(user_token))
        assert res.status_code == 403
