"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schemas: sign-up, sign-in, token refresh.
"""

from pydantic import BaseModel, EmailStr, Field


class SignUpRequest(BaseModel):
    """회원가입 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login e-mail, unique)
        name: 표시 이름 (Display name)
        password: 비밀번호 — 평문, 서버에서 bcrypt 해싱 (Plain text, hashed server-side)
    """

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8)


class SignInRequest(BaseModel):
    """로그인 요청 스키마."""

    email: EmailStr
    password: str


class RefreshRequest(BaseModel):
    """토큰 갱신 요청 스키마."""

    refresh_token: str


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Short-lived access token)
        refresh_token: JWT 리프레시 토큰 (Long-lived refresh token)
        token_type: 토큰 유형 (Always "bearer")
        user_id: 사용자 ID (Authenticated user id)
        name: 표시 이름 (Display name)
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user_id: int
    name: str


class SignUpResponse(BaseModel):
    """회원가입 응답 스키마."""

    id: int
    email: str
    name: str
