"""서비스(상품) SQLAlchemy ORM 모델 정의.

Service offering SQLAlchemy ORM model definition.
A service is published by a provider and can be searched and booked
by customers.

Tables:
    - services: 제공자의 서비스 목록 (Provider offerings)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Float, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Service(Base):
    """서비스 모델 — 제공자가 등록한 서비스.

    Service model — An offering published by a provider.
    ``provider_id`` is set once at creation and never reassigned; bookings
    copy it as their own access-control snapshot.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 서비스 제목 (Title, searchable)
        description: 서비스 설명 (Long description)
        category: 카테고리 (Category, searchable)
        price: 가격 (Non-negative price)
        location: 위치 (Location, searchable)
        provider_id: 소유 제공자 FK (Owning provider)
        created_at: 생성 일시 UTC (Creation timestamp, default sort key)
    """

    __tablename__ = "services"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    # 소유 제공자 FK — Owner; 수정 API로 변경 불가 (never changed by update)
    provider_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # 생성 일시 — 검색 결과 정렬 기준 (Sort key for search results, newest first)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
