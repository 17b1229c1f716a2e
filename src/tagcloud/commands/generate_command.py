"""태그 클라우드 생성 커맨드.

입력 문서를 토큰화하여 단어 빈도를 집계하고, 상위 N개 단어를 선정해
폰트 등급을 계산한 뒤 HTML 태그 클라우드로 저장한다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from tagcloud.cloud import build_cloud, read_word_counts
from tagcloud.config import load_cloud_config
from tagcloud.parser import add_input_args, word_count
from tagcloud.render import write_cloud_html, write_stylesheet

from .base import Command

logger = logging.getLogger(__name__)


class GenerateCommand(Command):
    """태그 클라우드 생성 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 입력 텍스트 파일 경로
        output_path: 출력 HTML 파일 경로
        words: 클라우드에 포함할 단어 수
        config_path: YAML 설정 파일 경로 (선택)
        encoding: 입력 파일 인코딩 (설정 파일보다 우선)
        css_href: 스타일시트 링크 경로 (설정 파일보다 우선)
        emit_css: 스타일시트 파일도 함께 저장할지 여부
    """

    name = "generate"
    help = "HTML 태그 클라우드 생성"

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        add_input_args(parser)
        parser.add_argument("output", type=Path, help="출력 HTML 파일 경로")
        parser.add_argument("-n", "--words", type=word_count, required=True, help="클라우드에 포함할 단어 수")
        parser.add_argument("--css-href", default=None, help="스타일시트 링크 경로 (기본값: doc/tagcloud.css)")
        parser.add_argument("--emit-css", action="store_true", help="출력 디렉토리에 스타일시트도 저장")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> GenerateCommand:
        return cls(
            console, args.input, args.output, args.words,
            args.config, args.encoding, args.css_href, args.emit_css
        )

    def __init__(
        self,
        console: Console,
        input_path: Path,
        output_path: Path,
        words: int,
        config_path: Path | None = None,
        encoding: str | None = None,
        css_href: str | None = None,
        emit_css: bool = False,
    ):
        self.console = console
        self.input_path = input_path
        self.output_path = output_path
        self.words = words
        self.config_path = config_path
        self.encoding = encoding
        self.css_href = css_href
        self.emit_css = emit_css

    def execute(self) -> dict[str, Any]:
        """태그 클라우드 생성을 실행한다.

        입력 파일을 열 수 없으면 출력 파일을 만들기 전에 중단한다.

        Returns:
            실행 결과 딕셔너리 (output_path, unique_words, selected_words, ...)
        """
        config = load_cloud_config(self.config_path).override(encoding=self.encoding, css_href=self.css_href)

        with self.console.status("단어 빈도 집계 중..."):
            freqs = read_word_counts(self.input_path, config.encoding, config.separators)

        entries = build_cloud(freqs, self.words)
        logger.info("🏷️  클라우드 단어 %d개 선정 (요청 %d개)", len(entries), self.words)

        write_cloud_html(entries, self.output_path, str(self.input_path), self.words, config.css_href)

        result: dict[str, Any] = {
            "output_path": self.output_path,
            "unique_words": len(freqs),
            "total_words": sum(freqs.values()),
            "selected_words": len(entries),
        }
        if self.emit_css:
            result["stylesheet_path"] = write_stylesheet(self.output_path.parent / config.css_href)

        if entries:
            table = Table(title="태그 클라우드 단어", show_header=True, border_style="dim")
            table.add_column("단어", style="cyan")
            table.add_column("빈도", style="yellow", justify="right")
            table.add_column("등급", style="green", justify="right")

            for entry in entries:
                table.add_row(entry.word, f"{entry.count:,}회", f"f{entry.tier}")

            self.console.print()
            self.console.print(table)
            self.console.print()

        return result
