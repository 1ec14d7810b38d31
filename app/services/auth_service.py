"""인증 서비스 — 회원가입, 로그인, 내 정보 조회 비즈니스 로직.

Auth Service — Business logic for registration, login and the current user.
Issues the bearer tokens the rest of the API consumes.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.repositories.user_repository import user_repository
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserMeResponse
from app.utils.exceptions import DuplicateError, ForbiddenError, UnauthorizedError
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)

# 자가 가입 가능한 역할 — Roles that can be self-registered
SELF_REGISTER_ROLES: frozenset[UserRole] = frozenset({UserRole.CUSTOMER, UserRole.PROVIDER})


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스."""

    def _issue_token(self, user: User) -> TokenResponse:
        """사용자에게 액세스 토큰을 발급합니다."""
        token: str = create_access_token(user.id, user.role.value)
        return TokenResponse(access_token=token)

    async def register(self, db: AsyncSession, data: RegisterRequest) -> TokenResponse:
        """새 고객/제공자 계정을 생성하고 토큰을 발급합니다.

        Create a customer or provider account and return its token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 가입 데이터 (Registration data)

        Returns:
            TokenResponse: 발급된 토큰 (Issued token)

        Raises:
            ForbiddenError: 관리자 계정 자가 가입 시도 (Admin self-registration)
            DuplicateError: 이미 등록된 이메일 (E-mail already registered)
        """
        if data.role not in SELF_REGISTER_ROLES:
            raise ForbiddenError("Admin accounts cannot be self-registered")

        email: str = data.email.strip().lower()
        if await user_repository.exists(db, {"email": email}):
            raise DuplicateError("Email already registered")

        try:
            user: User = await user_repository.create(
                db,
                {
                    "name": data.name,
                    "email": email,
                    "password_hash": hash_password(data.password),
                    "role": data.role,
                },
            )
        except IntegrityError as exc:
            # 동시 가입 — unique 제약 위반 (concurrent registration lost the race)
            await db.rollback()
            raise DuplicateError("Email already registered") from exc
        logger.info("Registered %s account %s", user.role.value, user.id)
        return self._issue_token(user)

    async def login(self, db: AsyncSession, data: LoginRequest) -> TokenResponse:
        """이메일/비밀번호로 로그인합니다.

        Raises:
            UnauthorizedError: 이메일 또는 비밀번호 불일치 (Invalid credentials)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")
        return self._issue_token(user)

    def get_me(self, user: User) -> UserMeResponse:
        return UserMeResponse(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
