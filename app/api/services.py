"""서비스 라우터 — 서비스 검색 및 CRUD 엔드포인트.

Service Router — Search and CRUD endpoints for provider services.
Listing and reading are public; mutations need a bearer token and are
authorized by the access policy inside the catalog.
"""

from uuid import UUID

from fastapi import APIRouter, Query

from app.api.deps import CurrentIdentity, DbSession
from app.schemas.common import MessageResponse
from app.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from app.services.resource_gateway import resource_gateway

router: APIRouter = APIRouter()


@router.get("/", response_model=list[ServiceResponse])
async def list_services(
    db: DbSession,
    q: str = Query(default="", description="제목/카테고리/위치 검색어 (Search text)"),
) -> list[ServiceResponse]:
    """서비스 목록을 검색합니다.

    Search services by title, category or location; newest first.
    """
    return await resource_gateway.list_services(db, q)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: UUID, db: DbSession) -> ServiceResponse:
    """서비스 상세 정보를 조회합니다."""
    return await resource_gateway.get_service(db, service_id)


@router.post("/", response_model=ServiceResponse, status_code=201)
async def create_service(
    data: ServiceCreate,
    db: DbSession,
    identity: CurrentIdentity,
) -> ServiceResponse:
    """새 서비스를 등록합니다 (제공자/관리자).

    Create a service owned by the caller.
    """
    return await resource_gateway.create_service(db, data, identity)


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: UUID,
    data: ServiceUpdate,
    db: DbSession,
    identity: CurrentIdentity,
) -> ServiceResponse:
    """서비스를 수정합니다 (소유 제공자/관리자).

    Partially update a service.
    """
    return await resource_gateway.update_service(db, service_id, data, identity)


@router.delete("/{service_id}", response_model=MessageResponse)
async def delete_service(
    service_id: UUID,
    db: DbSession,
    identity: CurrentIdentity,
) -> MessageResponse:
    """서비스를 삭제합니다 (소유 제공자/관리자)."""
    return await resource_gateway.delete_service(db, service_id, identity)
