"""인증 라우터 — 회원가입, 로그인, 내 정보 조회.

Auth Router — Registration, login and current-user endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import DbSession, get_current_user
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserMeResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(data: RegisterRequest, db: DbSession) -> TokenResponse:
    """회원가입 — 고객 또는 제공자 계정 생성.

    Register a customer or provider account.
    """
    result: TokenResponse = await auth_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, db: DbSession) -> TokenResponse:
    """이메일/비밀번호 로그인."""
    return await auth_service.login(db, data)


@router.get("/me", response_model=UserMeResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserMeResponse:
    """현재 로그인한 사용자 정보를 조회합니다."""
    return auth_service.get_me(current_user)
