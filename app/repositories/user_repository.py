"""사용자 레포지토리 — 인증용 사용자 조회.

User Repository — Lookups used by registration, login and token auth.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다 (소문자 정규화).

        Retrieve a user by e-mail. E-mails are stored lower-cased.
        """
        result = await db.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
