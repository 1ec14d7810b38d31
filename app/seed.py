"""초기 데이터 시드 스크립트 — 테이블 및 관리자 계정 생성.

Seed script — Creates the tables and the initial admin account.
Admin accounts cannot self-register, so this is how the first one is made.

Usage:
    python -m app.seed

Creates:
    - 모든 테이블 (All tables from ORM metadata)
    - 1개 관리자 계정: settings.ADMIN_EMAIL / settings.ADMIN_PASSWORD
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import async_session, engine, Base
from app.models import User, UserRole
from app.repositories.user_repository import user_repository
from app.utils.logging_config import setup_logging
from app.utils.password import hash_password

logger = logging.getLogger(__name__)


async def seed_admin(db: AsyncSession) -> User | None:
    """관리자 계정을 생성합니다. 이미 있으면 None을 반환합니다.

    Create the admin account unless the e-mail is already registered.
    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    if await user_repository.get_by_email(db, settings.ADMIN_EMAIL) is not None:
        return None

    admin: User = await user_repository.create(
        db,
        {
            "name": settings.ADMIN_NAME,
            "email": settings.ADMIN_EMAIL.strip().lower(),
            "password_hash": hash_password(settings.ADMIN_PASSWORD),
            "role": UserRole.ADMIN,
        },
    )
    await db.commit()
    return admin


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다."""
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        admin: User | None = await seed_admin(db)

    if admin is None:
        logger.info("Already seeded. Skipping.")
    else:
        logger.info("Seeded admin user %s (%s)", admin.email, admin.id)
    await engine.dispose()


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed())
