"""로깅 설정 모듈.

Root logger configuration. ``setup_logging`` attaches a single console
handler the first time it runs; later calls (tests, repeated app imports)
only adjust the level.
"""

import logging

_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 설정합니다.

    Configure the root logger with a console handler.

    Args:
        level: 로그 레벨 이름, 대소문자 무관 (Level name such as "DEBUG", case-insensitive)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)
