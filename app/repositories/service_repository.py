"""서비스 레포지토리 — 서비스 CRUD 및 검색 쿼리.

Service Repository — CRUD and substring search queries for services.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.service import Service
from app.repositories.base import BaseRepository

# 검색 대상 컬럼 — Columns matched by the search query
SEARCH_COLUMNS = (Service.title, Service.category, Service.location)


class ServiceRepository(BaseRepository[Service]):
    """서비스 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Service)

    async def search(
        self,
        db: AsyncSession,
        query: str | None = None,
    ) -> list[Service]:
        """제목/카테고리/위치로 서비스를 검색합니다.

        Search services by case-insensitive substring on title, category or
        location (any one match qualifies). LIKE wildcards in ``query`` are
        escaped, so ``%`` and ``_`` match literally. An empty query returns
        every service. Results are ordered newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 검색어, 비어 있으면 전체 조회 (Search text; empty means all)

        Returns:
            list[Service]: 검색된 서비스 목록 (Matching services)
        """
        stmt: Select = select(Service)
        if query:
            stmt = stmt.where(
                or_(*(column.icontains(query, autoescape=True) for column in SEARCH_COLUMNS))
            )
        stmt = stmt.order_by(Service.created_at.desc())

        result = await db.execute(stmt)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
service_repository: ServiceRepository = ServiceRepository()
