"""접근 정책 — 신원과 리소스에 대한 허용/거부 판단.

Access Policy — Pure allow/deny decisions for an identity against a service
or booking. Every function is total: it returns a bool for any input and
never raises or touches storage.

Resources are read by attribute (``provider_id``, ``customer_id``), so the
predicates work on ORM rows and plain snapshots alike.
"""

from typing import Any

from app.models.user import UserRole
from app.schemas.auth import Identity

# 생성 권한이 있는 역할 — Roles allowed to create each resource
BOOKING_CREATOR_ROLES: frozenset[UserRole] = frozenset({UserRole.CUSTOMER, UserRole.ADMIN})
SERVICE_CREATOR_ROLES: frozenset[UserRole] = frozenset({UserRole.PROVIDER, UserRole.ADMIN})


def is_admin(identity: Identity) -> bool:
    return identity.role is UserRole.ADMIN


def can_access_booking(booking: Any, identity: Identity) -> bool:
    """예약 당사자(고객/제공자) 또는 관리자인지 확인합니다.

    Read, update and delete of a booking are allowed for its customer,
    its provider snapshot, or an admin.
    """
    return (
        identity.id == booking.customer_id
        or identity.id == booking.provider_id
        or is_admin(identity)
    )


def can_mutate_service(service: Any, identity: Identity) -> bool:
    """서비스 소유 제공자 또는 관리자인지 확인합니다."""
    return identity.id == service.provider_id or is_admin(identity)


def can_create_booking(identity: Identity) -> bool:
    return identity.role in BOOKING_CREATOR_ROLES


def can_create_service(identity: Identity) -> bool:
    return identity.role in SERVICE_CREATOR_ROLES


def can_view_all_bookings(identity: Identity) -> bool:
    """전체 예약 조회(관리자 화면) 허용 여부."""
    return is_admin(identity)
