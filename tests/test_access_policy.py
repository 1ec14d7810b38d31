"""접근 정책 단위 테스트.

Access policy unit tests — every role against every ownership position.
The predicates are pure, so plain namespaces stand in for ORM rows.
"""

import uuid
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from app.models.user import UserRole
from app.schemas.auth import Identity
from app.services.access_policy import (
    can_access_booking,
    can_create_booking,
    can_create_service,
    can_mutate_service,
    can_view_all_bookings,
)

CUSTOMER_ID = uuid.uuid4()
PROVIDER_ID = uuid.uuid4()
STRANGER_ID = uuid.uuid4()

BOOKING = SimpleNamespace(customer_id=CUSTOMER_ID, provider_id=PROVIDER_ID)
SERVICE = SimpleNamespace(provider_id=PROVIDER_ID)


def identity(user_id: uuid.UUID, role: UserRole) -> Identity:
    return Identity(id=user_id, role=role)


class TestCanAccessBooking:
    """예약 접근 — 고객/제공자/관리자/제3자."""

    def test_booking_customer_allowed(self):
        assert can_access_booking(BOOKING, identity(CUSTOMER_ID, UserRole.CUSTOMER)) is True

    def test_booking_provider_allowed(self):
        assert can_access_booking(BOOKING, identity(PROVIDER_ID, UserRole.PROVIDER)) is True

    def test_admin_allowed_without_being_a_party(self):
        assert can_access_booking(BOOKING, identity(STRANGER_ID, UserRole.ADMIN)) is True

    @pytest.mark.parametrize("role", [UserRole.CUSTOMER, UserRole.PROVIDER])
    def test_stranger_denied(self, role):
        assert can_access_booking(BOOKING, identity(STRANGER_ID, role)) is False

    def test_party_match_ignores_role(self):
        """역할이 아니라 ID로 당사자를 판단."""
        assert can_access_booking(BOOKING, identity(PROVIDER_ID, UserRole.CUSTOMER)) is True
        assert can_access_booking(BOOKING, identity(CUSTOMER_ID, UserRole.PROVIDER)) is True


class TestCanMutateService:
    """서비스 수정/삭제 — 소유자 또는 관리자만."""

    def test_owner_allowed(self):
        assert can_mutate_service(SERVICE, identity(PROVIDER_ID, UserRole.PROVIDER)) is True

    def test_admin_allowed(self):
        assert can_mutate_service(SERVICE, identity(STRANGER_ID, UserRole.ADMIN)) is True

    def test_other_provider_denied(self):
        assert can_mutate_service(SERVICE, identity(STRANGER_ID, UserRole.PROVIDER)) is False

    def test_customer_denied(self):
        assert can_mutate_service(SERVICE, identity(CUSTOMER_ID, UserRole.CUSTOMER)) is False


class TestCreatePermissions:
    """생성 권한 — 역할 기반."""

    @pytest.mark.parametrize("role,expected", [
        (UserRole.CUSTOMER, True),
        (UserRole.PROVIDER, False),
        (UserRole.ADMIN, True),
    ])
    def test_can_create_booking(self, role, expected):
        assert can_create_booking(identity(STRANGER_ID, role)) is expected

    @pytest.mark.parametrize("role,expected", [
        (UserRole.CUSTOMER, False),
        (UserRole.PROVIDER, True),
        (UserRole.ADMIN, True),
    ])
    def test_can_create_service(self, role, expected):
        assert can_create_service(identity(STRANGER_ID, role)) is expected

    @pytest.mark.parametrize("role,expected", [
        (UserRole.CUSTOMER, False),
        (UserRole.PROVIDER, False),
        (UserRole.ADMIN, True),
    ])
    def test_can_view_all_bookings(self, role, expected):
        assert can_view_all_bookings(identity(STRANGER_ID, role)) is expected


def test_identity_is_immutable():
    """Identity는 요청 동안 변경 불가."""
    ident = identity(CUSTOMER_ID, UserRole.CUSTOMER)
    with pytest.raises(ValidationError):
        ident.role = UserRole.ADMIN
