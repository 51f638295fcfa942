"""로깅 설정

모듈은 logger = get_logger(__name__) 로 로거를 얻는다.
턴 단위 수치는 DEBUG, 플러그인 등록/연대기/실행 완료는 INFO.
"""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """레벨 이름 → 숫자. 모르는 이름이면 INFO."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, datefmt=DATE_FORMAT)
    if not isinstance(logging.getLevelName(level.upper()), int):
        get_logger(__name__).warning(f"알 수 없는 로그 레벨: {level} (INFO 사용)")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
