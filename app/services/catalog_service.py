"""서비스 카탈로그 — 서비스 검색/조회/생성/수정/삭제 비즈니스 로직.

Service Catalog — Business logic for searching, reading, creating, updating
and deleting provider services. Authorization is always evaluated against
the persisted row before any change is written.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.service import Service
from app.repositories.service_repository import ServiceRepository, service_repository
from app.schemas.auth import Identity
from app.services.access_policy import can_create_service, can_mutate_service
from app.utils.exceptions import ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# 생성 시 필수 필드 — 값이 falsy면 누락으로 간주 (price 0 포함)
# Required on create; a falsy value counts as missing, price 0 included
REQUIRED_FIELDS: tuple[str, ...] = ("title", "description", "category", "price", "location")

# 수정 가능한 필드 — provider_id는 포함되지 않음 (owner is never reassigned)
UPDATABLE_FIELDS: frozenset[str] = frozenset(REQUIRED_FIELDS)


class ServiceCatalog:
    """서비스 관련 비즈니스 로직을 처리하는 카탈로그.

    Catalog of provider services.

    Args:
        repository: 서비스 저장소 (Service storage collaborator)
    """

    def __init__(self, repository: ServiceRepository) -> None:
        self.repository: ServiceRepository = repository

    async def search(self, db: AsyncSession, query: str | None = None) -> list[Service]:
        """서비스를 검색합니다.

        Return services whose title, category or location contains ``query``
        case-insensitively, newest first. An empty query returns everything.
        """
        return await self.repository.search(db, query or None)

    async def get(self, db: AsyncSession, service_id: UUID) -> Service:
        """ID로 서비스를 조회합니다.

        Raises:
            NotFoundError: 서비스를 찾을 수 없을 때 (Service not found)
        """
        service: Service | None = await self.repository.get_by_id(db, service_id)
        if service is None:
            raise NotFoundError("Service not found")
        return service

    async def create(
        self,
        db: AsyncSession,
        fields: dict[str, Any],
        identity: Identity,
    ) -> Service:
        """새 서비스를 등록합니다.

        Create a service owned by ``identity``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            fields: 서비스 필드 (title, description, category, price, location)
            identity: 요청자 신원 (Caller identity, becomes the owner)

        Returns:
            Service: 생성된 서비스 (Created service)

        Raises:
            ForbiddenError: 제공자/관리자가 아닐 때 (Caller is not provider or admin)
            ValidationError: 필수 필드 누락 또는 falsy (Missing or falsy required field)
        """
        if not can_create_service(identity):
            logger.warning("Service creation denied for user %s (%s)", identity.id, identity.role.value)
            raise ForbiddenError("Only providers can create services")

        if not all(fields.get(name) for name in REQUIRED_FIELDS):
            raise ValidationError("Missing fields")

        data: dict[str, Any] = {name: fields[name] for name in REQUIRED_FIELDS}
        data["provider_id"] = identity.id
        service: Service = await self.repository.create(db, data)
        logger.info("Service %s created by provider %s", service.id, identity.id)
        return service

    async def update(
        self,
        db: AsyncSession,
        service_id: UUID,
        fields: dict[str, Any],
        identity: Identity,
    ) -> Service:
        """서비스를 부분 수정합니다.

        Apply only the updatable keys present in ``fields``. Unknown keys and
        None values are ignored, so repeating the same update is a no-op.

        Raises:
            NotFoundError: 서비스를 찾을 수 없을 때 (Service not found)
            ForbiddenError: 소유자/관리자가 아닐 때 (Caller is neither owner nor admin)
        """
        service: Service = await self.get(db, service_id)
        if not can_mutate_service(service, identity):
            logger.warning("Service %s update denied for user %s", service_id, identity.id)
            raise ForbiddenError("Not allowed to update this service")

        changes: dict[str, Any] = {
            key: value
            for key, value in fields.items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        return await self.repository.apply_update(db, service, changes)

    async def delete(self, db: AsyncSession, service_id: UUID, identity: Identity) -> None:
        """서비스를 삭제합니다. 기존 예약은 유지됩니다.

        Raises:
            NotFoundError: 서비스를 찾을 수 없을 때 (Service not found)
            ForbiddenError: 소유자/관리자가 아닐 때 (Caller is neither owner nor admin)
        """
        service: Service = await self.get(db, service_id)
        if not can_mutate_service(service, identity):
            logger.warning("Service %s delete denied for user %s", service_id, identity.id)
            raise ForbiddenError("Not allowed to delete this service")

        await self.repository.remove(db, service)
        logger.info("Service %s deleted by user %s", service_id, identity.id)


# 싱글턴 인스턴스 — Singleton instance
service_catalog: ServiceCatalog = ServiceCatalog(service_repository)
