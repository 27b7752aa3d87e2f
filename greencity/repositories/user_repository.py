"""사용자 레포지토리.

User Repository — lookups by principal e-mail.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.user import User
from greencity.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 사용자를 조회합니다 (대소문자 무시).

        Retrieve a user by e-mail, case-insensitively.
        """
        result = await db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
