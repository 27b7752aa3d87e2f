"""인증 의존성 — 현재 사용자와 모더레이터 권한.

Auth dependencies for the routers. The bearer token must be an access
token whose "sub" claim names an active user; moderation endpoints also
require ROLE_MODERATOR or ROLE_ADMIN.
"""

from typing import Annotated

import jwt
from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.constants import MAX_ID
from greencity.database import get_db
from greencity.models.user import User
from greencity.repositories.user_repository import user_repository
from greencity.utils.exceptions import ForbiddenError, UnauthorizedError
from greencity.utils.jwt import ACCESS, decode_token

# HTTP Bearer 토큰 추출기 — Extracts JWT from the Authorization header
security: HTTPBearer = HTTPBearer()

# 경로 ID 파라미터 — BIGINT 범위를 넘는 값은 400
PlaceIdPath = Annotated[int, Path(le=MAX_ID)]


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the authenticated, active user.

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨, 또는 사용자 없음/비활성
                           (Invalid/expired token, or unknown/inactive user)
    """
    try:
        payload: dict = decode_token(credentials.credentials, ACCESS)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token") from None
    email: str | None = payload.get("sub")
    if not email:
        raise UnauthorizedError("Invalid token")

    user: User | None = await user_repository.get_by_email(db, email)
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    return user


async def require_moderator(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """모더레이터 또는 관리자만 허용하는 의존성.

    Allow ROLE_MODERATOR and ROLE_ADMIN only.

    Raises:
        ForbiddenError: 권한 부족 (Insufficient role)
    """
    if not current_user.role.is_moderator:
        raise ForbiddenError()
    return current_user
