"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database, session, and httpx client fixtures.
Each test gets a fresh SQLite file database (aiosqlite) with foreign keys
enabled; set TEST_DATABASE_URL to run against PostgreSQL instead.
Every API request gets its own session, as in production.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models import Service, User, UserRole
from app.utils.jwt import create_access_token
from app.utils.password import hash_password

TEST_DATABASE_URL: str | None = os.environ.get("TEST_DATABASE_URL")

# bcrypt는 느리므로 한 번만 해싱 — hash once, bcrypt is slow
TEST_PASSWORD = "secret123!"
_PASSWORD_HASH: str = hash_password(TEST_PASSWORD)

# 기준 시각 — 생성 순서를 결정적으로 만들기 위한 고정 시각
BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 만듭니다."""
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    eng = create_async_engine(url, echo=False)

    if eng.dialect.name == "sqlite":
        # SQLite는 기본적으로 FK를 검사하지 않음 — enable ON DELETE SET NULL
        @event.listens_for(eng.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """픽스처 데이터 생성용 세션."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 새 세션을 사용합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(db: AsyncSession, name: str, email: str, role: UserRole) -> User:
    """테스트 사용자를 생성하고 커밋합니다."""
    user = User(name=name, email=email, password_hash=_PASSWORD_HASH, role=role)
    db.add(user)
    await db.commit()
    return user


async def make_service(
    db: AsyncSession,
    provider: User,
    title: str = "Morning Yoga",
    category: str = "Fitness",
    location: str = "Berlin",
    price: float = 40.0,
    minutes: int = 0,
) -> Service:
    """테스트 서비스를 생성합니다. ``minutes``로 생성 순서를 지정합니다."""
    service = Service(
        title=title,
        description=f"{title} description",
        category=category,
        price=price,
        location=location,
        provider_id=provider.id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    db.add(service)
    await db.commit()
    return service


@pytest_asyncio.fixture
async def customer(db: AsyncSession) -> User:
    return await make_user(db, "Carla Customer", "carla@test.com", UserRole.CUSTOMER)


@pytest_asyncio.fixture
async def other_customer(db: AsyncSession) -> User:
    return await make_user(db, "Oscar Customer", "oscar@test.com", UserRole.CUSTOMER)


@pytest_asyncio.fixture
async def provider(db: AsyncSession) -> User:
    return await make_user(db, "Paula Provider", "paula@test.com", UserRole.PROVIDER)


@pytest_asyncio.fixture
async def other_provider(db: AsyncSession) -> User:
    return await make_user(db, "Pete Provider", "pete@test.com", UserRole.PROVIDER)


@pytest_asyncio.fixture
async def admin(db: AsyncSession) -> User:
    return await make_user(db, "Ada Admin", "ada@test.com", UserRole.ADMIN)


@pytest_asyncio.fixture
async def service(db: AsyncSession, provider: User) -> Service:
    """provider가 소유한 기본 서비스."""
    return await make_service(db, provider)


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(user.id, user.role.value)


def auth_header(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user)}"}
