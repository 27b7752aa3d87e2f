"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — aggregates every router into ``api_router``.

Included routers:
    - auth: 회원가입/로그인 (Sign-up, sign-in, token refresh)
    - places: 장소 제안/조회/필터/상태 관리 (Place endpoints)
    - favorite_places: 즐겨찾기 관리 (Favorite management)
    - categories: 카테고리 (Categories)
"""

from fastapi import APIRouter

from greencity.api.auth import router as auth_router
from greencity.api.categories import router as categories_router
from greencity.api.favorite_places import router as favorite_places_router
from greencity.api.places import router as places_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(places_router)
api_router.include_router(favorite_places_router)
api_router.include_router(categories_router)
