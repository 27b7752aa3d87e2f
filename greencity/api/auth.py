"""인증 라우터 — 회원가입, 로그인, 토큰 갱신.

Auth Router — sign-up, sign-in and access token refresh.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import get_db
from greencity.schemas.auth import (
    RefreshRequest,
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from greencity.services.auth_service import auth_service

router: APIRouter = APIRouter(prefix="/ownSecurity", tags=["Auth"])


@router.post("/signUp", response_model=SignUpResponse, status_code=201)
async def sign_up(
    data: SignUpRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SignUpResponse:
    """새 사용자를 등록합니다."""
    result: SignUpResponse = await auth_service.sign_up(db, data)
    await db.commit()
    return result


@router.post("/signIn", response_model=TokenResponse)
async def sign_in(
    data: SignInRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """이메일/비밀번호로 로그인합니다."""
    return await auth_service.sign_in(db, data)


@router.post("/updateAccessToken", response_model=TokenResponse)
async def update_access_token(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """리프레시 토큰으로 새 토큰을 발급합니다."""
    return await auth_service.refresh(db, data)
