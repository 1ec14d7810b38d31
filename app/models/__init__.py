"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata.

Modules:
    user: 사용자 및 역할 (User accounts and the UserRole enum)
    service: 제공자 서비스 (Provider service offerings)
    booking: 예약 (Bookings with provider and price snapshots)
"""

from app.models.user import User, UserRole
from app.models.service import Service
from app.models.booking import Booking

__all__ = [
    "User", "UserRole",
    "Service",
    "Booking",
]
