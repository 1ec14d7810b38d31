"""사용자 및 역할 관련 SQLAlchemy ORM 모델 정의.

User and role SQLAlchemy ORM model definitions.
A marketplace account is either a customer, a provider or an admin;
the role is stored on the user row as a closed enumeration.

Tables:
    - users: 사용자 계정 (User accounts with a single role)
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Enum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class UserRole(str, enum.Enum):
    """사용자 역할 — 고객, 서비스 제공자, 관리자.

    Marketplace role. Access decisions compare enum members,
    never raw strings.
    """

    CUSTOMER = "customer"
    PROVIDER = "provider"
    ADMIN = "admin"


class User(Base):
    """사용자 모델 — 마켓플레이스 계정 정보.

    User model — Marketplace account information.
    Only ``name`` and ``email`` are ever exposed on other resources.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 표시 이름 (Display name)
        email: 로그인 이메일 (Login e-mail, globally unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        role: 역할 (customer / provider / admin)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 표시 이름 — Display name shown to the other booking party
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Login e-mail (전역 고유, globally unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 역할 — Role stored as its string value
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.CUSTOMER,
    )
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
