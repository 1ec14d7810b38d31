"""예약 SQLAlchemy ORM 모델 정의.

Booking SQLAlchemy ORM model definition.
A booking links a service, the customer who booked it and the provider
that owned the service at booking time.

Tables:
    - bookings: 예약 (Reservations with a price snapshot)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Float, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Booking(Base):
    """예약 모델 — 고객의 서비스 예약.

    Booking model — A customer's reservation of a service.

    ``provider_id`` and ``total`` are snapshots taken from the service at
    creation time; later changes to the service do not touch them.
    Deleting a service keeps its bookings and nulls ``service_id``.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        service_id: 예약한 서비스 FK (Booked service, NULL once the service is deleted)
        customer_id: 예약한 고객 FK (Customer who booked)
        provider_id: 서비스 제공자 FK 스냅샷 (Provider snapshot)
        date: 예약 일시 (Booked date/time)
        status: 상태 — 자유 형식 문자열 (Free-form status string)
        total: 결제 금액 스냅샷 (Price snapshot, independently mutable)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        service: 예약한 서비스 (Booked service)
        customer: 고객 계정 (Customer account)
        provider: 제공자 계정 (Provider account)
    """

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 서비스 삭제 시 예약은 유지 — bookings outlive their service (SET NULL)
    service_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    provider_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # 상태 — 허용값 제한 없음 (any string is accepted)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    total: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (조회 시 selectinload로 로드, loaded explicitly by the repository)
    service = relationship("Service", foreign_keys=[service_id])
    customer = relationship("User", foreign_keys=[customer_id])
    provider = relationship("User", foreign_keys=[provider_id])
