"""서비스 Pydantic 요청/응답 스키마 정의.

Service offering request/response schema definitions.

Create fields are all optional here: presence is checked by the
catalog so that a missing field and a falsy one (``price: 0``) both yield
the same 400 "Missing fields" failure.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ServiceCreate(BaseModel):
    """서비스 생성 요청 스키마.

    Attributes:
        title: 서비스 제목 (Title)
        description: 설명 (Description)
        category: 카테고리 (Category)
        price: 가격 (Price, non-negative; zero counts as missing)
        location: 위치 (Location)
    """

    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = Field(default=None, ge=0)
    location: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def blank_price_as_missing(cls, value: Any) -> Any:
        """빈 문자열 가격은 누락으로 처리 (empty price reads as absent)."""
        return None if value == "" else value


class ServiceUpdate(BaseModel):
    """서비스 수정 요청 스키마 (부분 업데이트).

    Partial update. Only fields present in the request body are applied;
    the owning provider cannot be changed and unknown keys are ignored.
    """

    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = Field(default=None, ge=0)
    location: str | None = None


class ServiceResponse(BaseModel):
    """서비스 응답 스키마."""

    id: str
    title: str
    description: str
    category: str
    price: float
    location: str
    provider_id: str
    created_at: datetime
