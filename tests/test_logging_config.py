from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.logging import RichHandler

from tagcloud.utils.logging_config import setup_logging


@contextmanager
def bare_root_logger() -> Iterator[logging.Logger]:
    """루트 로거의 핸들러를 잠시 비우고, 끝나면 원래 핸들러와 레벨을 되돌린다."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    with bare_root_logger() as root:
        log_file = setup_logging("DEBUG", tmp_path / "logs")

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0], RichHandler)
        assert len(root.handlers) == 2

    assert log_file is not None
    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("tagcloud_")
    assert "로그 파일" in log_file.read_text(encoding="utf-8")


def test_setup_logging_without_log_dir() -> None:
    with bare_root_logger() as root:
        assert setup_logging(logging.WARNING, None) is None
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1


def test_setup_logging_keeps_existing_handlers(tmp_path: Path) -> None:
    with bare_root_logger() as root:
        existing = logging.NullHandler()
        root.addHandler(existing)

        assert setup_logging("DEBUG", tmp_path) is None
        assert root.handlers == [existing]

    assert not list(tmp_path.iterdir())
