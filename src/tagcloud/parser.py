"""CLI 인자 파서 설정 모듈.

최상위 파서, 전역 옵션, 커맨드 공통 입력 옵션, 값 검증 함수를 정의한다.
서브커맨드 고유 인자는 각 Command 클래스가 add_arguments()로 추가한다.
"""

from __future__ import annotations

import argparse
import codecs
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from tagcloud.commands.base import Command

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값 표시와 원시 텍스트 도움말을 함께 지원하는 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """인자 오류를 Rich 패널로 출력하고 종료 코드 2로 끝내는 파서.

    Attributes:
        console: 오류 패널을 출력할 Rich 콘솔
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console()
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: {self.prog} --help[/dim]",
                title="CLI 입력 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def bounded_int(minimum: int, label: str) -> Callable[[str], int]:
    """minimum 이상의 정수만 받는 argparse type 함수를 만든다.

    Args:
        minimum: 허용되는 최소값
        label: 오류 메시지에 표시할 값의 이름

    Returns:
        문자열을 검증하여 정수로 변환하는 함수
    """

    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"{label}는 정수여야 합니다: {value!r}") from e
        if parsed < minimum:
            raise argparse.ArgumentTypeError(f"{label}는 {minimum} 이상이어야 합니다: {parsed}")
        return parsed

    parse.__name__ = label
    return parse


# 클라우드 단어 수는 1 이상, 표시 개수는 0 이상
word_count = bounded_int(1, "단어 수")
top_count = bounded_int(0, "표시 개수")


def encoding_name(value: str) -> str:
    """파이썬 코덱 이름인지 확인하고 정규화된 이름을 반환한다."""
    try:
        return codecs.lookup(value).name
    except LookupError as e:
        raise argparse.ArgumentTypeError(f"알 수 없는 인코딩입니다: {value!r}") from e


def add_global_args(parser: argparse.ArgumentParser) -> None:
    """로깅, 로그 파일, 배너 관련 전역 옵션을 추가한다."""
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="콘솔 로깅 레벨")
    parser.add_argument(
        "--log-file",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="artifacts/logs 에 로그 파일을 남길지 여부",
    )
    parser.add_argument("--no-banner", action="store_true", help="시작 배너를 출력하지 않음")


def add_input_args(parser: argparse.ArgumentParser) -> None:
    """입력 문서를 읽는 커맨드의 공통 인자를 추가한다.

    --encoding 기본값은 None 이며, 이 경우 설정 파일 또는 utf-8 을 사용한다.
    """
    parser.add_argument("input", type=Path, help="입력 텍스트 파일 경로")
    parser.add_argument("--config", type=Path, default=None, help="YAML 설정 파일 경로")
    parser.add_argument("--encoding", type=encoding_name, default=None, help="입력 파일 인코딩")


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """최상위 파서를 만들고 각 커맨드의 서브파서를 등록한다."""
    parser = CliArgumentParser(
        console,
        prog="tagcloud",
        description="텍스트 문서의 단어 빈도로 HTML 태그 클라우드를 생성하는 CLI",
        formatter_class=CliHelpFormatter,
    )
    add_global_args(parser)

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
