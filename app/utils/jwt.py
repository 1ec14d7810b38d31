"""JWT 토큰 발급 및 검증 유틸리티.

Bearer token helpers. Tokens carry the user id and role; the role claim is
informational only, since the auth dependency re-reads the stored role.

JWT Payload Structure:
    {
        "sub": "user_uuid",                      # 사용자 ID (User identifier)
        "role": "customer"|"provider"|"admin",   # 발급 시점 역할 (Role at issue time)
        "exp": 1234567890,                       # 만료 시간 (Expiration)
        "type": "access"                         # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from app.config import settings

ACCESS_TOKEN_TYPE = "access"


def create_access_token(user_id: UUID, role: str) -> str:
    """사용자 ID와 역할로 액세스 토큰을 발급합니다.

    Expires after ``JWT_ACCESS_TOKEN_EXPIRE_MINUTES``.
    """
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """토큰 서명과 만료를 검증하고 페이로드를 반환합니다.

    Raises:
        jwt.InvalidTokenError: 위조/만료/형식 오류 (Invalid, expired or malformed token)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
