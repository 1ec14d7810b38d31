"""리소스 게이트웨이 — 카탈로그/원장 호출을 트랜잭션으로 감싸는 조정 계층.

Resource Gateway — Orchestration between the HTTP routers and the
catalog/ledger. For every operation it opens a unit of work, delegates to
the catalog or ledger (which resolve the entity and check the access policy
against the persisted row), commits on success and projects the result
into a response schema.

Storage failures are rolled back, logged with their traceback and surfaced
as an opaque ``StorageError``. Typed HTTP failures pass through unchanged.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.models.service import Service
from app.models.user import User
from app.schemas.auth import Identity
from app.schemas.booking import (
    BookingCreate,
    BookingDetailResponse,
    BookingResponse,
    BookingUpdate,
    PartySummary,
)
from app.schemas.common import MessageResponse
from app.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from app.services.booking_ledger import BookingLedger, booking_ledger
from app.services.catalog_service import ServiceCatalog, service_catalog
from app.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


def to_service_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=str(service.id),
        title=service.title,
        description=service.description,
        category=service.category,
        price=service.price,
        location=service.location,
        provider_id=str(service.provider_id),
        created_at=service.created_at,
    )


def to_booking_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=str(booking.id),
        service_id=str(booking.service_id) if booking.service_id else None,
        customer_id=str(booking.customer_id),
        provider_id=str(booking.provider_id),
        date=booking.date,
        status=booking.status,
        total=booking.total,
        created_at=booking.created_at,
    )


def _to_party(user: User | None) -> PartySummary | None:
    """당사자 표시 정보 — 이름과 이메일만 (name and e-mail only)."""
    if user is None:
        return None
    return PartySummary(id=str(user.id), name=user.name, email=user.email)


def to_booking_detail(booking: Booking) -> BookingDetailResponse:
    """관계가 로드된 예약을 상세 응답으로 변환합니다."""
    return BookingDetailResponse(
        **to_booking_response(booking).model_dump(),
        service=to_service_response(booking.service) if booking.service else None,
        customer=_to_party(booking.customer),
        provider=_to_party(booking.provider),
    )


class ResourceGateway:
    """서비스/예약 작업을 트랜잭션 단위로 실행하는 게이트웨이.

    Args:
        catalog: 서비스 카탈로그 (Service catalog)
        ledger: 예약 원장 (Booking ledger)
    """

    def __init__(self, catalog: ServiceCatalog, ledger: BookingLedger) -> None:
        self.catalog: ServiceCatalog = catalog
        self.ledger: BookingLedger = ledger

    @asynccontextmanager
    async def _unit_of_work(
        self,
        db: AsyncSession,
        action: str,
        commit: bool = True,
    ) -> AsyncIterator[None]:
        """작업 단위 — 성공 시 커밋, 실패 시 롤백.

        Commit when the body succeeds (mutations only). On a typed failure
        roll back and re-raise; on a storage failure roll back, log, and
        raise ``StorageError`` without internal detail.
        """
        try:
            yield
            if commit:
                await db.commit()
        except HTTPException:
            await db.rollback()
            raise
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Storage failure during %s", action)
            raise StorageError() from exc

    # ------------------------------------------------------------------
    # 서비스 — Services
    # ------------------------------------------------------------------

    async def list_services(self, db: AsyncSession, query: str | None = None) -> list[ServiceResponse]:
        async with self._unit_of_work(db, "list services", commit=False):
            services: list[Service] = await self.catalog.search(db, query)
        return [to_service_response(s) for s in services]

    async def get_service(self, db: AsyncSession, service_id: UUID) -> ServiceResponse:
        async with self._unit_of_work(db, "get service", commit=False):
            service: Service = await self.catalog.get(db, service_id)
        return to_service_response(service)

    async def create_service(
        self,
        db: AsyncSession,
        data: ServiceCreate,
        identity: Identity,
    ) -> ServiceResponse:
        async with self._unit_of_work(db, "create service"):
            service: Service = await self.catalog.create(db, data.model_dump(), identity)
        return to_service_response(service)

    async def update_service(
        self,
        db: AsyncSession,
        service_id: UUID,
        data: ServiceUpdate,
        identity: Identity,
    ) -> ServiceResponse:
        fields: dict[str, Any] = data.model_dump(exclude_unset=True)
        async with self._unit_of_work(db, "update service"):
            service: Service = await self.catalog.update(db, service_id, fields, identity)
        return to_service_response(service)

    async def delete_service(self, db: AsyncSession, service_id: UUID, identity: Identity) -> MessageResponse:
        async with self._unit_of_work(db, "delete service"):
            await self.catalog.delete(db, service_id, identity)
        return MessageResponse(message="Service deleted")

    # ------------------------------------------------------------------
    # 예약 — Bookings
    # ------------------------------------------------------------------

    async def list_my_bookings(self, db: AsyncSession, identity: Identity) -> list[BookingDetailResponse]:
        async with self._unit_of_work(db, "list bookings", commit=False):
            bookings: list[Booking] = await self.ledger.list_for_identity(db, identity)
        return [to_booking_detail(b) for b in bookings]

    async def list_all_bookings(self, db: AsyncSession, identity: Identity) -> list[BookingDetailResponse]:
        async with self._unit_of_work(db, "list all bookings", commit=False):
            bookings: list[Booking] = await self.ledger.list_all(db, identity)
        return [to_booking_detail(b) for b in bookings]

    async def get_booking(self, db: AsyncSession, booking_id: UUID, identity: Identity) -> BookingDetailResponse:
        async with self._unit_of_work(db, "get booking", commit=False):
            booking: Booking = await self.ledger.get_for_identity(db, booking_id, identity)
        return to_booking_detail(booking)

    async def create_booking(
        self,
        db: AsyncSession,
        data: BookingCreate,
        identity: Identity,
    ) -> BookingResponse:
        async with self._unit_of_work(db, "create booking"):
            booking: Booking = await self.ledger.create(db, data.service_id, data.date, identity)
        return to_booking_response(booking)

    async def update_booking(
        self,
        db: AsyncSession,
        booking_id: UUID,
        data: BookingUpdate,
        identity: Identity,
    ) -> BookingResponse:
        fields: dict[str, Any] = data.model_dump(exclude_unset=True)
        async with self._unit_of_work(db, "update booking"):
            booking: Booking = await self.ledger.update(db, booking_id, fields, identity)
        return to_booking_response(booking)

    async def delete_booking(self, db: AsyncSession, booking_id: UUID, identity: Identity) -> MessageResponse:
        async with self._unit_of_work(db, "delete booking"):
            await self.ledger.delete(db, booking_id, identity)
        return MessageResponse(message="Booking deleted")


# 싱글턴 인스턴스 — Singleton instance
resource_gateway: ResourceGateway = ResourceGateway(service_catalog, booking_ledger)
