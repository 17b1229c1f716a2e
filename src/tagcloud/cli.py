"""tagcloud CLI 진입점 모듈.

텍스트 문서의 단어 빈도 기반 HTML 태그 클라우드 생성 명령줄 인터페이스를 제공한다.
Rich 기반 콘솔 출력 및 로깅을 지원한다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from functools import lru_cache
from time import perf_counter
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tagcloud.commands import Command, CountCommand, GenerateCommand
from tagcloud.config import ConfigError
from tagcloud.constants import LOGS_DIR
from tagcloud.parser import setup_parser
from tagcloud.utils.logging_config import get_console, get_logger, setup_logging

LOGGER_NAME = "tagcloud.cli"
COMMANDS: tuple[type[Command], ...] = (GenerateCommand, CountCommand)


def create_command(console: Console, args: argparse.Namespace) -> Command:
    """서브파서에 묶인 커맨드 클래스로 커맨드 객체를 생성한다."""
    return args.command_cls.from_args(console, args)


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """배너 텍스트를 캐싱하여 반환한다."""
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText("TagCloud").rstrip()


def print_banner(console: Console) -> None:
    """시작 배너를 출력한다."""
    console.print(Text(_get_banner(), style="bold cyan"))


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    1초 미만은 밀리초, 1분 미만은 초, 그 이상은 분:초 형식으로 표시한다.
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 문자열로 포맷팅한다. 120자를 초과하면 잘라낸다."""
    formatted = str(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다.

    Args:
        command_name: 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        result: 실행 결과 딕셔너리

    Returns:
        생성된 Rich Panel 객체
    """
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", format_value(value))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2)
    )


# Error categorization strategy (Strategy pattern), MRO 순서로 조회
_ERROR_CATEGORIES: dict[type[Exception], tuple[str, str, str]] = {
    FileNotFoundError: ("파일 없음", "📁", "입력 파일 찾기 실패"),
    PermissionError: ("접근 거부", "🔒", "파일 접근 권한 없음"),
    ConfigError: ("설정 오류", "⚙️", "설정 파일 오류"),
    OSError: ("입출력 오류", "💾", "파일 입출력 실패"),
    ValueError: ("입력값 오류", "⚠️", "입력값 오류"),
}


def categorize_error(error: Exception) -> tuple[str, str, str] | None:
    """예외 타입에 해당하는 (카테고리, 아이콘, 로그 메시지)를 반환한다."""
    for error_type in type(error).__mro__:
        if category := _ERROR_CATEGORIES.get(error_type):
            return category
    return None


def handle_error(
    error: Exception, command: str, elapsed: float, logger: logging.Logger, console: Console
) -> None:
    """에러를 처리하고 출력한다.

    Args:
        error: 발생한 예외
        command: 실행 중이던 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        logger: 로거 객체
        console: Rich 콘솔 인스턴스
    """
    category = categorize_error(error)

    # 로깅
    if category is not None:
        logger.error("[%s] %s: %s", command, category[2], error)
    else:
        logger.exception("[%s] 실행 중 예기치 않은 오류 발생", command)
        category = ("예기치 않은 오류", "❌", "")

    name, icon, _ = category

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {name}")
    error_table.add_row("오류 타입", type(error).__name__)
    error_table.add_row("메시지", str(error))
    error_table.add_row("경과 시간", format_time(elapsed))

    console.print()
    console.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]",
              border_style="red", padding=(1, 2))
    )
    console.print()

    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"tagcloud {command} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    console.print(help_text)
    console.print()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    Returns:
        종료 코드 (0: 성공, 1: 오류, 2: 인자 오류, 130: 사용자 중단)
    """
    console = get_console()
    try:
        args = setup_parser(console, COMMANDS).parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 2

    if not args.no_banner:
        print_banner(console)

    setup_logging(args.log_level, LOGS_DIR if args.log_file else None)
    logger = get_logger(LOGGER_NAME)
    start = perf_counter()

    try:
        command = create_command(console, args)
        command_name = command.get_name()
        logger.info("[%s] 단계 시작", command_name)
        result = command.execute()
        elapsed = perf_counter() - start

        logger.info("[%s] 단계 완료 (%.2fs)", command_name, elapsed)
        console.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, args.command, perf_counter() - start, logger, console)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
