"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Every public marketplace operation ends in either a value or exactly one of
these typed failures. They are raised from services and propagated by FastAPI.

Failure kinds:
    - ValidationError (400): 필수 입력 누락 (missing or invalid required input)
    - UnauthorizedError (401): 인증 실패 (missing or invalid credentials)
    - ForbiddenError (403): 정책 거부 (access policy denied the operation)
    - NotFoundError (404): 대상 없음 (referenced entity does not exist)
    - DuplicateError (409): 중복 (uniqueness violation, e.g. e-mail)
    - StorageError (500): 저장소 오류 (opaque persistence failure)

Usage:
    from app.utils.exceptions import NotFoundError, ForbiddenError
    raise NotFoundError("Service not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a service, booking or user id does not resolve.
    Terminal for the given id; callers should not retry.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when registering an e-mail address that is already taken.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 접근 정책이 거부했을 때 사용.

    Raised when the access policy denies the operation for the caller's
    identity (e.g. a customer updating someone else's service).

    Args:
        detail: 오류 메시지 (Error message, default: "Forbidden")
    """

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class ValidationError(HTTPException):
    """400 Bad Request 예외 — 필수 입력이 없거나 잘못되었을 때 사용.

    Raised for business-rule input failures beyond what Pydantic catches,
    such as a falsy price or a booking request without a date.

    Args:
        detail: 오류 메시지 (Error message, default: "Missing fields")
    """

    def __init__(self, detail: str = "Missing fields") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class StorageError(HTTPException):
    """500 Internal Server Error 예외 — 저장소 오류를 감출 때 사용.

    Raised in place of a database error. The detail stays opaque;
    the original exception is logged, never returned to the client.

    Args:
        detail: 오류 메시지 (Error message, default: "Server error")
    """

    def __init__(self, detail: str = "Server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
