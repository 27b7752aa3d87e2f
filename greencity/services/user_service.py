"""사용자 서비스 — 주체(principal) 이메일로 사용자 조회.

User Service — resolves the authenticated principal's e-mail to a user.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.user import User
from greencity.repositories.user_repository import user_repository
from greencity.utils.exceptions import NotFoundError


class UserService:
    """사용자 조회 서비스."""

    async def find_by_email(self, db: AsyncSession, email: str) -> User:
        """이메일로 사용자를 조회합니다.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        user: User | None = await user_repository.get_by_email(db, email)
        if user is None:
            raise NotFoundError(f"User not found by email: {email}")
        return user


user_service: UserService = UserService()
