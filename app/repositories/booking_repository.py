"""예약 레포지토리 — 예약 CRUD 및 당사자별 조회.

Booking Repository — CRUD and party-filtered queries for bookings.
Detail queries eager-load the service and both parties so the gateway can
build enriched responses without lazy loads on the async session.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.booking import Booking
from app.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """예약 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Booking)

    def _detail_query(self) -> Select:
        """서비스와 당사자를 함께 로드하는 기본 쿼리."""
        return select(Booking).options(
            selectinload(Booking.service),
            selectinload(Booking.customer),
            selectinload(Booking.provider),
        )

    async def get_detail(
        self,
        db: AsyncSession,
        booking_id: UUID,
    ) -> Booking | None:
        """예약 상세 정보를 서비스/당사자와 함께 조회합니다.

        Retrieve one booking with its service and parties eagerly loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            booking_id: 예약 ID (Booking UUID)

        Returns:
            Booking | None: 관계가 로드된 예약 또는 None (Loaded booking or None)
        """
        result = await db.execute(self._detail_query().where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def list_detail(
        self,
        db: AsyncSession,
        customer_id: UUID | None = None,
        provider_id: UUID | None = None,
    ) -> list[Booking]:
        """당사자 조건으로 예약 목록을 조회합니다.

        List bookings filtered by customer and/or provider, newest first.
        With neither filter every booking is returned (admin view).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            customer_id: 고객 필터 (Customer filter)
            provider_id: 제공자 필터 (Provider filter)

        Returns:
            list[Booking]: 관계가 로드된 예약 목록 (Loaded bookings)
        """
        query: Select = self._detail_query()
        if customer_id is not None:
            query = query.where(Booking.customer_id == customer_id)
        if provider_id is not None:
            query = query.where(Booking.provider_id == provider_id)
        query = query.order_by(Booking.created_at.desc())

        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
booking_repository: BookingRepository = BookingRepository()
