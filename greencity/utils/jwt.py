"""JWT 발급/검증 유틸리티.

Bearer token helpers. Access and refresh tokens carry the same claims and
differ by lifetime and the ``type`` claim:

    {
        "sub": "user@example.com",   # 사용자 이메일 (principal)
        "uid": 1,                    # 사용자 ID
        "role": "ROLE_USER",         # 역할
        "type": "access" | "refresh",
        "exp": 1234567890,
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from greencity.config import settings

ACCESS: str = "access"
REFRESH: str = "refresh"


def _lifetime(token_type: str) -> timedelta:
    if token_type == REFRESH:
        return timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS)
    return timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)


def create_token(claims: dict[str, Any], token_type: str) -> str:
    """주어진 유형의 서명된 토큰을 만듭니다."""
    payload: dict[str, Any] = {
        **claims,
        "type": token_type,
        "exp": datetime.now(timezone.utc) + _lifetime(token_type),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(claims: dict[str, Any]) -> str:
    return create_token(claims, ACCESS)


def create_refresh_token(claims: dict[str, Any]) -> str:
    return create_token(claims, REFRESH)


def decode_token(token: str, expected_type: str | None = None) -> dict[str, Any]:
    """토큰을 검증하고 페이로드를 반환합니다.

    Verify signature and expiry. When ``expected_type`` is given, a token of
    another type is rejected as well.

    Raises:
        jwt.InvalidTokenError: 서명 오류, 만료, 유형 불일치
                               (Bad signature, expired, or wrong type)
    """
    payload: dict[str, Any] = jwt.decode(
        token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
    )
    if expected_type is not None and payload.get("type") != expected_type:
        raise jwt.InvalidTokenError(f"Expected {expected_type} token")
    return payload
