"""인증 서비스 — 회원가입, 로그인, 토큰 갱신 비즈니스 로직.

Auth Service — Business logic for sign-up, sign-in, and token refresh.
"""

import logging

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.enums import UserRole
from greencity.models.user import User
from greencity.repositories.user_repository import user_repository
from greencity.schemas.auth import (
    RefreshRequest,
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from greencity.utils.exceptions import DuplicateError, UnauthorizedError
from greencity.utils.jwt import REFRESH, create_access_token, create_refresh_token, decode_token
from greencity.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스."""

    def _build_jwt_payload(self, user: User) -> dict[str, str | int]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT payload: e-mail as subject plus id and role claims.
        """
        return {"sub": user.email, "uid": user.id, "role": user.role.value}

    def _issue_tokens(self, user: User) -> TokenResponse:
        payload = self._build_jwt_payload(user)
        return TokenResponse(
            access_token=create_access_token(payload),
            refresh_token=create_refresh_token(payload),
            user_id=user.id,
            name=user.name,
        )

    async def sign_up(self, db: AsyncSession, data: SignUpRequest) -> SignUpResponse:
        """새 사용자를 등록합니다 (기본 역할 ROLE_USER).

        Register a new user with the ROLE_USER role.

        Raises:
            DuplicateError: 이미 등록된 이메일 (E-mail already registered)
        """
        email: str = data.email.lower()
        if await user_repository.get_by_email(db, email) is not None:
            raise DuplicateError("User with this email already exists")

        user: User | None = await user_repository.create_unique(
            db,
            {
                "email": email,
                "name": data.name,
                "password_hash": hash_password(data.password),
                "role": UserRole.ROLE_USER,
            },
        )
        if user is None:
            raise DuplicateError("User with this email already exists")
        logger.info("Registered user id=%s", user.id)
        return SignUpResponse(id=user.id, email=user.email, name=user.name)

    async def sign_in(self, db: AsyncSession, data: SignInRequest) -> TokenResponse:
        """이메일/비밀번호로 로그인하고 토큰을 발급합니다.

        Raises:
            UnauthorizedError: 잘못된 자격 증명 또는 비활성 계정
                               (Bad credentials or inactive account)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Bad email or password")
        if not user.is_active:
            raise UnauthorizedError("User is deactivated")
        return self._issue_tokens(user)

    async def refresh(self, db: AsyncSession, data: RefreshRequest) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Raises:
            UnauthorizedError: 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
        """
        try:
            payload: dict = decode_token(data.refresh_token, REFRESH)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid or expired refresh token") from None

        user: User | None = await user_repository.get_by_email(db, payload.get("sub", ""))
        if user is None or not user.is_active:
            raise UnauthorizedError("User not found or inactive")
        return self._issue_tokens(user)


auth_service: AuthService = AuthService()
