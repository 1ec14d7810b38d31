"""예약 원장 — 예약 생성/조회/수정/삭제 비즈니스 로직.

Booking Ledger — Business logic for the booking lifecycle.

Creation is customer-initiated: the booking copies the service's provider
and price at that moment. Both copies are snapshots; later changes to the
service never reach existing bookings.
"""

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.models.service import Service
from app.models.user import UserRole
from app.repositories.booking_repository import BookingRepository, booking_repository
from app.repositories.service_repository import ServiceRepository, service_repository
from app.schemas.auth import Identity
from app.services.access_policy import (
    can_access_booking,
    can_create_booking,
    can_view_all_bookings,
)
from app.utils.exceptions import ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# 수정 가능한 필드 — service/customer/provider 참조는 변경 불가
# Mutable fields; the service and party references are fixed at creation
UPDATABLE_FIELDS: frozenset[str] = frozenset({"status", "date", "total"})


class BookingLedger:
    """예약 관련 비즈니스 로직을 처리하는 원장.

    Ledger of bookings between customers and providers.

    Args:
        bookings: 예약 저장소 (Booking storage collaborator)
        services: 서비스 저장소 — 예약 대상 확인용 (Service storage, used to resolve the booked service)
    """

    def __init__(self, bookings: BookingRepository, services: ServiceRepository) -> None:
        self.bookings: BookingRepository = bookings
        self.services: ServiceRepository = services

    async def list_for_identity(self, db: AsyncSession, identity: Identity) -> list[Booking]:
        """내 예약 목록을 조회합니다.

        Providers see bookings where they are the provider; every other role
        (customer, or admin acting as a viewer) sees bookings it placed.
        """
        if identity.role is UserRole.PROVIDER:
            return await self.bookings.list_detail(db, provider_id=identity.id)
        return await self.bookings.list_detail(db, customer_id=identity.id)

    async def list_all(self, db: AsyncSession, identity: Identity) -> list[Booking]:
        """전체 예약 목록을 조회합니다 (관리자 전용).

        Raises:
            ForbiddenError: 관리자가 아닐 때 (Caller is not an admin)
        """
        if not can_view_all_bookings(identity):
            raise ForbiddenError("Admin access only")
        return await self.bookings.list_detail(db)

    async def get(self, db: AsyncSession, booking_id: UUID) -> Booking:
        """ID로 예약을 조회합니다 (서비스/당사자 포함).

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Booking not found)
        """
        booking: Booking | None = await self.bookings.get_detail(db, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    async def get_for_identity(self, db: AsyncSession, booking_id: UUID, identity: Identity) -> Booking:
        """당사자 또는 관리자에게만 예약 상세를 반환합니다."""
        booking: Booking = await self.get(db, booking_id)
        if not can_access_booking(booking, identity):
            logger.warning("Booking %s read denied for user %s", booking_id, identity.id)
            raise ForbiddenError("Forbidden")
        return booking

    async def create(
        self,
        db: AsyncSession,
        service_id: str | UUID | None,
        date: datetime | None,
        identity: Identity,
    ) -> Booking:
        """서비스 예약을 생성합니다.

        Book a service for ``identity``. The provider and the price are copied
        from the service; a falsy price becomes a total of 0.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            service_id: 예약할 서비스 ID (Service to book)
            date: 예약 일시 (Requested date/time)
            identity: 요청자 신원 (Caller identity, becomes the customer)

        Returns:
            Booking: 생성된 예약 (Created booking)

        Raises:
            ForbiddenError: 고객/관리자가 아닐 때 (Caller is not customer or admin)
            ValidationError: 서비스 또는 일시 누락 (Service or date missing)
            NotFoundError: 서비스를 찾을 수 없을 때 (Service does not resolve)
        """
        if not can_create_booking(identity):
            logger.warning("Booking creation denied for user %s (%s)", identity.id, identity.role.value)
            raise ForbiddenError("Only customers can create bookings")

        if not service_id or not date:
            raise ValidationError("Service and date are required")

        service: Service | None = await self._resolve_service(db, service_id)
        if service is None:
            raise NotFoundError("Service not found")

        booking: Booking = await self.bookings.create(
            db,
            {
                "service_id": service.id,
                "customer_id": identity.id,
                "provider_id": service.provider_id,
                "date": date,
                "total": service.price or 0,
            },
        )
        logger.info("Booking %s created for service %s by customer %s", booking.id, service.id, identity.id)
        return booking

    async def update(
        self,
        db: AsyncSession,
        booking_id: UUID,
        fields: dict[str, Any],
        identity: Identity,
    ) -> Booking:
        """예약을 부분 수정합니다 (status/date/total).

        Status is not validated; any string is accepted.

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Booking not found)
            ForbiddenError: 당사자/관리자가 아닐 때 (Caller is not a party or admin)
        """
        booking: Booking = await self.get(db, booking_id)
        if not can_access_booking(booking, identity):
            logger.warning("Booking %s update denied for user %s", booking_id, identity.id)
            raise ForbiddenError("Forbidden")

        changes: dict[str, Any] = {
            key: value
            for key, value in fields.items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        return await self.bookings.apply_update(db, booking, changes)

    async def delete(self, db: AsyncSession, booking_id: UUID, identity: Identity) -> None:
        """예약을 삭제합니다.

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Booking not found)
            ForbiddenError: 당사자/관리자가 아닐 때 (Caller is not a party or admin)
        """
        booking: Booking = await self.get(db, booking_id)
        if not can_access_booking(booking, identity):
            logger.warning("Booking %s delete denied for user %s", booking_id, identity.id)
            raise ForbiddenError("Forbidden")

        await self.bookings.remove(db, booking)
        logger.info("Booking %s deleted by user %s", booking_id, identity.id)

    async def _resolve_service(self, db: AsyncSession, service_id: str | UUID) -> Service | None:
        """서비스 ID를 조회합니다. 형식이 잘못된 ID는 없는 것으로 처리합니다."""
        if not isinstance(service_id, UUID):
            try:
                service_id = UUID(str(service_id))
            except ValueError:
                return None
        return await self.services.get_by_id(db, service_id)


# 싱글턴 인스턴스 — Singleton instance
booking_ledger: BookingLedger = BookingLedger(booking_repository, service_repository)
