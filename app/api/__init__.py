"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입/로그인/내 정보 (Registration, login, current user)
    - services: 서비스 검색 및 관리 (Service search and management)
    - bookings: 예약 관리 (Booking management)
"""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.services import router as services_router
from app.api.bookings import router as bookings_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(services_router, prefix="/services", tags=["Services"])
api_router.include_router(bookings_router, prefix="/bookings", tags=["Bookings"])
