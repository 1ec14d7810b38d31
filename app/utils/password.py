"""비밀번호 해싱 유틸리티 — bcrypt.

Password hashing helpers used by registration, login and the seed script.
"""

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 솔트가 포함된 bcrypt 해시로 변환합니다."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """로그인 시 입력 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    Returns False for a malformed stored hash instead of raising, so a
    corrupted row reads as a failed login.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
