"""레포지토리 패키지 — 사용자/서비스/예약 쿼리 계층.

Storage layer for users, services and bookings. Repositories flush but
never commit; the resource gateway owns the transaction.
"""
