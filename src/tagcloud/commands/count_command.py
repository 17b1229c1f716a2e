"""단어 빈도 집계 커맨드.

입력 문서의 단어 빈도를 집계하여 상위 단어를 콘솔에 출력하고,
필요하면 전체 빈도표를 parquet/CSV로 저장한다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from tagcloud.cloud import read_word_counts, select_top_words
from tagcloud.cloud.frequency import write_frequency_csv, write_frequency_parquet
from tagcloud.config import load_cloud_config
from tagcloud.parser import add_input_args, top_count

from .base import Command

logger = logging.getLogger(__name__)


class CountCommand(Command):
    """단어 빈도 집계 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 입력 텍스트 파일 경로
        top: 콘솔에 표시할 상위 단어 수
        output_frequency: 빈도 parquet 출력 경로 (선택)
        output_csv: 빈도 CSV 출력 경로 (선택)
        config_path: YAML 설정 파일 경로 (선택)
        encoding: 입력 파일 인코딩 (설정 파일보다 우선)
    """

    name = "count"
    help = "단어 빈도 집계"

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        add_input_args(parser)
        parser.add_argument("--top", type=top_count, default=10, help="표시할 상위 단어 수")
        parser.add_argument("--output-frequency", type=Path, default=None, help="빈도 parquet 출력 경로")
        parser.add_argument("--output-csv", type=Path, default=None, help="빈도 CSV 출력 경로")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> CountCommand:
        return cls(
            console, args.input, args.top, args.output_frequency,
            args.output_csv, args.config, args.encoding
        )

    def __init__(
        self,
        console: Console,
        input_path: Path,
        top: int = 10,
        output_frequency: Path | None = None,
        output_csv: Path | None = None,
        config_path: Path | None = None,
        encoding: str | None = None,
    ):
        self.console = console
        self.input_path = input_path
        self.top = top
        self.output_frequency = output_frequency
        self.output_csv = output_csv
        self.config_path = config_path
        self.encoding = encoding

    def execute(self) -> dict[str, Any]:
        """빈도 집계를 실행한다.

        Returns:
            집계 결과 딕셔너리 (unique_words, total_words, 저장 경로)
        """
        config = load_cloud_config(self.config_path).override(encoding=self.encoding)
        freqs = read_word_counts(self.input_path, config.encoding, config.separators)

        total_words = sum(freqs.values())
        result: dict[str, Any] = {"unique_words": len(freqs), "total_words": total_words}

        if self.output_frequency is not None:
            write_frequency_parquet(freqs, self.output_frequency)
            logger.info("📄 단어 빈도 parquet 저장: %s", self.output_frequency)
            result["frequency_path"] = self.output_frequency

        if self.output_csv is not None:
            write_frequency_csv(freqs, self.output_csv)
            logger.info("📄 단어 빈도 CSV 저장: %s", self.output_csv)
            result["csv_path"] = self.output_csv

        if top_words := select_top_words(freqs, self.top):
            top_table = Table(title=f"🏆 상위 {len(top_words)}개 빈도 단어", show_header=True, border_style="dim")
            top_table.add_column("순위", style="dim", width=6, justify="center")
            top_table.add_column("단어", style="cyan")
            top_table.add_column("빈도", style="yellow", width=15, justify="right")

            for idx, (word, freq) in enumerate(top_words, 1):
                rank_style = "bold green" if idx <= 3 else "dim"
                top_table.add_row(f"{idx}", word, f"{freq:,}회", style=rank_style)

            self.console.print()
            self.console.print(top_table)
            self.console.print()

        return result
