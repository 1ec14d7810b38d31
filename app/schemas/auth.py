"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, token issuance, the current user view,
and the ``Identity`` value every marketplace operation is authorized against.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import UserRole


class Identity(BaseModel):
    """인증된 주체 — 요청 동안 변경 불가.

    Authenticated principal for one request. Built from the token's user by
    the auth dependency and never mutated afterwards.

    Attributes:
        id: 사용자 UUID (User identifier)
        role: 역할 (customer / provider / admin)
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    role: UserRole


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login e-mail)
        password: 비밀번호 (Plain text, compared to the bcrypt hash)
    """

    email: str
    password: str


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Self-registration request. Only customer and provider accounts can be
    self-registered; admin accounts come from the seed script.

    Attributes:
        name: 표시 이름 (Display name)
        email: 로그인 이메일 (Login e-mail, unique)
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
        role: 역할 (Requested role, default customer)
    """

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    role: UserRole = UserRole.CUSTOMER


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Access token)
        token_type: 토큰 유형 (Always "bearer")
    """

    access_token: str
    token_type: str = "bearer"  # 토큰 유형 — 항상 "bearer" (Token type for Authorization header)


class UserMeResponse(BaseModel):
    """현재 사용자 정보 응답 스키마 (GET /me)."""

    id: str
    name: str
    email: str
    role: UserRole
    created_at: datetime
