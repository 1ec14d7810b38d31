"""서비스 패키지 — 마켓플레이스 비즈니스 로직 계층.

Marketplace business logic: the access policy predicates, the service
catalog, the booking ledger, and the resource gateway that wraps them in
transactions for the routers. Authentication lives in ``auth_service``.
"""
