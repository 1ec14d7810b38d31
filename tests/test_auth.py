"""인증 API 테스트 — 회원가입, 로그인, /me 엔드포인트.

Auth API tests — Registration, login, and /me endpoints, plus the bearer
token checks every protected route relies on.
"""

import uuid
from datetime import timedelta, datetime, timezone
from unittest.mock import AsyncMock

import jwt
import pytest
from httpx import AsyncClient

from app.config import settings
from app.models import UserRole
from app.repositories.user_repository import user_repository
from app.seed import seed_admin
from tests.conftest import TEST_PASSWORD, auth_header

AUTH = "/api/v1/auth"


class TestRegister:
    """회원가입 테스트."""

    async def test_register_customer(self, client: AsyncClient):
        """고객 가입 후 토큰으로 /me 조회."""
        res = await client.post(f"{AUTH}/register", json={
            "name": "New Customer",
            "email": "New@Example.com",
            "password": "hunter22",
        })
        assert res.status_code == 201
        token = res.json()["access_token"]
        assert res.json()["token_type"] == "bearer"

        me = await client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "new@example.com"
        assert me.json()["role"] == "customer"

    async def test_register_provider(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/register", json={
            "name": "New Provider",
            "email": "prov@example.com",
            "password": "hunter22",
            "role": "provider",
        })
        assert res.status_code == 201

    async def test_register_admin_forbidden(self, client: AsyncClient):
        """관리자 자가 가입 시 403."""
        res = await client.post(f"{AUTH}/register", json={
            "name": "Sneaky",
            "email": "sneaky@example.com",
            "password": "hunter22",
            "role": "admin",
        })
        assert res.status_code == 403

    async def test_register_duplicate_email(self, client: AsyncClient, customer):
        """중복 이메일 가입 시 409 (대소문자 무시)."""
        res = await client.post(f"{AUTH}/register", json={
            "name": "Copycat",
            "email": "CARLA@test.com",
            "password": "hunter22",
        })
        assert res.status_code == 409

    async def test_register_race_on_unique_email(self, client: AsyncClient, customer, monkeypatch):
        """중복 검사를 통과해도 unique 제약 위반은 409로 변환."""
        # 동시 가입 재현 — 사전 중복 검사가 기존 계정을 보지 못한 상황
        monkeypatch.setattr(user_repository, "exists", AsyncMock(return_value=False))

        res = await client.post(f"{AUTH}/register", json={
            "name": "Racer",
            "email": "carla@test.com",
            "password": "hunter22",
        })
        assert res.status_code == 409
        assert res.json()["detail"] == "Email already registered"

    @pytest.mark.parametrize("payload", [
        {"name": "Short", "email": "short@example.com", "password": "123"},
        {"name": "Bad role", "email": "role@example.com", "password": "hunter22", "role": "superuser"},
        {"email": "noname@example.com", "password": "hunter22"},
    ])
    async def test_register_invalid_payload(self, client: AsyncClient, payload):
        """스키마 검증 실패 시 422."""
        res = await client.post(f"{AUTH}/register", json=payload)
        assert res.status_code == 422


class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, provider):
        res = await client.post(f"{AUTH}/login", json={
            "email": "paula@test.com",
            "password": TEST_PASSWORD,
        })
        assert res.status_code == 200
        assert "access_token" in res.json()

    async def test_login_email_case_insensitive(self, client: AsyncClient, provider):
        res = await client.post(f"{AUTH}/login", json={
            "email": " Paula@Test.com ",
            "password": TEST_PASSWORD,
        })
        assert res.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, provider):
        """잘못된 비밀번호로 로그인 실패."""
        res = await client.post(f"{AUTH}/login", json={
            "email": "paula@test.com",
            "password": "wrong_password",
        })
        assert res.status_code == 401

    async def test_login_nonexistent_user(self, client: AsyncClient):
        res = await client.post(f"{AUTH}/login", json={
            "email": "nobody@test.com",
            "password": TEST_PASSWORD,
        })
        assert res.status_code == 401


class TestMe:
    """/me 및 토큰 검증 테스트."""

    async def test_me(self, client: AsyncClient, admin):
        res = await client.get(f"{AUTH}/me", headers=auth_header(admin))
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == str(admin.id)
        assert data["role"] == "admin"
        assert "password_hash" not in data

    async def test_me_no_token(self, client: AsyncClient):
        res = await client.get(f"{AUTH}/me")
        assert res.status_code == 401

    async def test_me_garbage_token(self, client: AsyncClient):
        res = await client.get(f"{AUTH}/me", headers={"Authorization": "Bearer not.a.jwt"})
        assert res.status_code == 401

    async def test_me_expired_token(self, client: AsyncClient, customer):
        """만료된 토큰은 401."""
        token = jwt.encode({
            "sub": str(customer.id),
            "type": "access",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        }, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        res = await client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401

    async def test_me_wrong_token_type(self, client: AsyncClient, customer):
        token = jwt.encode({
            "sub": str(customer.id),
            "type": "refresh",
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        }, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        res = await client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401

    async def test_me_unknown_user(self, client: AsyncClient):
        """삭제되었거나 없는 사용자의 토큰은 401."""
        token = jwt.encode({
            "sub": str(uuid.uuid4()),
            "type": "access",
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        }, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        res = await client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401


class TestSeedAdmin:
    """시드 관리자 계정 테스트."""

    async def test_seeded_admin_can_login(self, client: AsyncClient, db):
        admin = await seed_admin(db)
        assert admin is not None
        assert admin.role == UserRole.ADMIN

        res = await client.post(f"{AUTH}/login", json={
            "email": settings.ADMIN_EMAIL,
            "password": settings.ADMIN_PASSWORD,
        })
        assert res.status_code == 200

    async def test_seed_is_idempotent(self, db):
        """두 번째 시드는 건너뜀."""
        assert await seed_admin(db) is not None
        assert await seed_admin(db) is None


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
