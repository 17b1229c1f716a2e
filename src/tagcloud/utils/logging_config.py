"""tagcloud 로깅/콘솔 설정.

콘솔 로그와 커맨드 결과 출력은 하나의 Rich 콘솔을 공유한다.
파일 로그는 실행마다 artifacts/logs 아래 새 파일로 남긴다.
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from tagcloud.constants import LOGS_DIR

FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

_CONSOLE = Console(stderr=False)


def get_console() -> Console:
    """로그와 결과 출력에서 공용으로 사용할 Rich 콘솔을 반환한다."""
    return _CONSOLE


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=get_console(),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_dir: Path) -> tuple[logging.FileHandler, Path]:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"tagcloud_{datetime.now():%Y%m%d_%H%M%S}.log"
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler, log_file


def setup_logging(level: int | str = "INFO", log_dir: Path | None = LOGS_DIR) -> Path | None:
    """루트 로거에 Rich 콘솔 핸들러와 파일 핸들러를 설치한다.

    루트 로거에 이미 핸들러가 있으면 (테스트 러너, 두 번째 호출 등)
    아무것도 바꾸지 않는다.

    Args:
        level: 로깅 레벨 (``"DEBUG"`` 같은 이름 또는 ``logging`` 상수)
        log_dir: 로그 파일 디렉토리. None이면 파일 로그를 남기지 않는다.

    Returns:
        새로 만든 로그 파일 경로. 파일 로그를 남기지 않았으면 None.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return None

    root_logger.setLevel(level)
    root_logger.addHandler(_rich_handler())

    if log_dir is None:
        return None

    handler, log_file = _file_handler(log_dir)
    root_logger.addHandler(handler)
    root_logger.info("📝 로그 파일: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """모듈 로거를 반환한다 (보통 ``__name__``)."""
    return logging.getLogger(name)
