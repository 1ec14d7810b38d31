"""예약 Pydantic 요청/응답 스키마 정의.

Booking request/response schema definitions, including the display
projection of the customer and provider that detail views embed.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.schemas.service import ServiceResponse


class BookingCreate(BaseModel):
    """예약 생성 요청 스키마.

    Both fields are checked for presence by the ledger (400 when absent).

    Attributes:
        service_id: 예약할 서비스 UUID (Service to book)
        date: 예약 일시 (Requested date/time)
    """

    service_id: str | None = None
    date: datetime | None = None

    @field_validator("service_id", "date", mode="before")
    @classmethod
    def blank_as_missing(cls, value: Any) -> Any:
        """빈 문자열은 누락으로 처리 (empty string reads as absent)."""
        return None if value == "" else value


class BookingUpdate(BaseModel):
    """예약 수정 요청 스키마 (부분 업데이트).

    Attributes:
        status: 상태 — 임의 문자열 허용 (Free-form status)
        date: 예약 일시 (Booked date/time)
        total: 금액, 음수 불가 (Total amount, non-negative)
    """

    status: str | None = None
    date: datetime | None = None
    total: float | None = Field(default=None, ge=0)


class PartySummary(BaseModel):
    """예약 당사자 표시 정보 — 이름과 이메일만 노출.

    Display projection of a booking party. Never carries the full user record.
    """

    id: str
    name: str
    email: str


class BookingResponse(BaseModel):
    """예약 응답 스키마."""

    id: str
    service_id: str | None
    customer_id: str
    provider_id: str
    date: datetime
    status: str
    total: float
    created_at: datetime


class BookingDetailResponse(BookingResponse):
    """예약 상세 응답 — 서비스와 당사자 정보 포함.

    Booking enriched with the referenced service and both parties.
    ``service`` is null when the service has since been deleted.
    """

    service: ServiceResponse | None = None
    customer: PartySummary | None = None
    provider: PartySummary | None = None
