"""공통 Pydantic 응답 스키마 정의.

Common response schemas shared across API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic confirmation returned by delete operations.

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str
