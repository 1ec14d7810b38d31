"""FastAPI 의존성 주입 모듈 — 인증 및 신원 추출.

FastAPI dependency injection module — Authentication.
Turns the bearer token into the request's ``Identity``; authorization
decisions are made later by the access policy, not here.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    3. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)
    4. 사용자의 현재 역할로 Identity 생성 (Identity built from the stored role)
"""

from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.repositories.user_repository import user_repository
from app.schemas.auth import Identity
from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import ACCESS_TOKEN_TYPE, decode_token

# HTTP Bearer 토큰 추출기 — 헤더가 없으면 직접 401 처리
# (Extracts the bearer token; a missing header is reported as 401 below)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and load the user it names.

    Raises:
        UnauthorizedError: 토큰 누락/만료/위조 또는 사용자 없음
                           (Missing, expired or invalid token, or unknown user)
    """
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    try:
        payload: dict = decode_token(credentials.credentials)
        # 토큰 타입 검증 — Only access tokens authenticate requests
        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise UnauthorizedError("Invalid token type")
        user_id = UUID(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user


async def get_identity(
    current_user: Annotated[User, Depends(get_current_user)],
) -> Identity:
    """현재 사용자를 변경 불가능한 Identity로 변환합니다.

    The role comes from the stored user, not from the token claims.
    """
    return Identity(id=current_user.id, role=current_user.role)


# 라우터에서 사용하는 타입 별칭 — Annotated aliases used by the routers
CurrentIdentity = Annotated[Identity, Depends(get_identity)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
