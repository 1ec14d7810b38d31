"""예약 라우터 — 예약 조회 및 CRUD 엔드포인트.

Booking Router — Listing and CRUD endpoints for bookings.
Every endpoint requires a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter

from app.api.deps import CurrentIdentity, DbSession
from app.schemas.booking import (
    BookingCreate,
    BookingDetailResponse,
    BookingResponse,
    BookingUpdate,
)
from app.schemas.common import MessageResponse
from app.services.resource_gateway import resource_gateway

router: APIRouter = APIRouter()


@router.get("/", response_model=list[BookingDetailResponse])
async def list_my_bookings(db: DbSession, identity: CurrentIdentity) -> list[BookingDetailResponse]:
    """내 예약 목록을 조회합니다.

    Providers see bookings for their services; everyone else sees the
    bookings they placed.
    """
    return await resource_gateway.list_my_bookings(db, identity)


# /{booking_id} 보다 먼저 등록 — registered before the id route
@router.get("/all", response_model=list[BookingDetailResponse])
async def list_all_bookings(db: DbSession, identity: CurrentIdentity) -> list[BookingDetailResponse]:
    """전체 예약 목록을 조회합니다 (관리자 전용)."""
    return await resource_gateway.list_all_bookings(db, identity)


@router.get("/{booking_id}", response_model=BookingDetailResponse)
async def get_booking(
    booking_id: UUID,
    db: DbSession,
    identity: CurrentIdentity,
) -> BookingDetailResponse:
    """예약 상세 정보를 조회합니다 (당사자/관리자)."""
    return await resource_gateway.get_booking(db, booking_id, identity)


@router.post("/", response_model=BookingResponse, status_code=201)
async def create_booking(
    data: BookingCreate,
    db: DbSession,
    identity: CurrentIdentity,
) -> BookingResponse:
    """서비스를 예약합니다 (고객/관리자).

    The booking copies the service's provider and current price.
    """
    return await resource_gateway.create_booking(db, data, identity)


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: UUID,
    data: BookingUpdate,
    db: DbSession,
    identity: CurrentIdentity,
) -> BookingResponse:
    """예약 상태/일시/금액을 수정합니다 (당사자/관리자)."""
    return await resource_gateway.update_booking(db, booking_id, data, identity)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: UUID,
    db: DbSession,
    identity: CurrentIdentity,
) -> MessageResponse:
    """예약을 삭제합니다 (당사자/관리자)."""
    return await resource_gateway.delete_booking(db, booking_id, identity)
