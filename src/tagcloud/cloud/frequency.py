"""단어 빈도 집계 모듈.

토큰 스트림에서 구분자 구간을 버리고 단어별 출현 횟수를 집계한다.
집계 결과는 읽기 전용 매핑으로 반환되어 이후 단계에서 변경되지 않는다.
"""

from __future__ import annotations

import csv
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

import pyarrow as pa
import pyarrow.parquet as pq

from tagcloud.cloud.tokenizer import iter_line_tokens
from tagcloud.constants import DEFAULT_ENCODING, SEPARATORS
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def _freeze(counter: Counter[str]) -> Mapping[str, int]:
    return MappingProxyType(dict(counter))


def _accumulate(counter: Counter[str], lines: Iterable[str], separators: str) -> None:
    for token in iter_line_tokens(lines, separators):
        if not token.is_separator:
            counter[token.text] += 1


def count_words(lines: Iterable[str], separators: str = SEPARATORS) -> Mapping[str, int]:
    """줄 단위 텍스트에서 단어 빈도를 집계한다.

    Args:
        lines: 원문 텍스트 줄 이터러블
        separators: 구분자 문자 집합

    Returns:
        {단어: 출현 횟수} 읽기 전용 매핑
    """
    counter: Counter[str] = Counter()
    _accumulate(counter, lines, separators)
    return _freeze(counter)


def read_word_counts(
    path: Path,
    encoding: str = DEFAULT_ENCODING,
    separators: str = SEPARATORS,
) -> Mapping[str, int]:
    """텍스트 파일을 읽어 단어 빈도를 집계한다.

    디코딩할 수 없는 바이트는 대체 문자(U+FFFD)로 바꿔 읽는다.
    파일을 열 수 없으면 예외를 그대로 전파한다.
    읽는 도중 실패하면 오류를 기록하고 그때까지 집계한 빈도를 반환한다.

    Args:
        path: 입력 텍스트 파일 경로
        encoding: 입력 파일 인코딩
        separators: 구분자 문자 집합

    Returns:
        {단어: 출현 횟수} 읽기 전용 매핑

    Raises:
        FileNotFoundError: 입력 파일이 존재하지 않는 경우
        OSError: 입력 파일을 열 수 없는 경우
    """
    counter: Counter[str] = Counter()
    with path.open("r", encoding=encoding, errors="replace") as handle:
        try:
            _accumulate(counter, handle, separators)
        except OSError as exc:
            logger.error(
                "입력 파일을 읽는 중 오류가 발생했습니다: %s (%s). 집계된 %d개 단어만 사용합니다.",
                path,
                exc,
                len(counter),
            )

    counts = _freeze(counter)
    logger.info("📊 %s: 고유 단어 %d개, 총 단어 %d개", path, len(counts), sum(counts.values()))
    return counts


def _sorted_rows(counts: Mapping[str, int]) -> list[tuple[str, int]]:
    # 빈도 내림차순 → 동일 빈도 시 단어 오름차순
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def write_frequency_parquet(counts: Mapping[str, int], output_path: Path) -> None:
    """단어 빈도를 parquet로 저장한다."""
    rows = _sorted_rows(counts)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pydict(
        {
            "word": pa.array([word for word, _ in rows], type=pa.string()),
            "frequency": pa.array([frequency for _, frequency in rows], type=pa.int64()),
        }
    )
    pq.write_table(table, output_path)


def write_frequency_csv(counts: Mapping[str, int], output_path: Path) -> None:
    """단어 빈도를 CSV로 저장한다."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=["rank", "word", "frequency"])
        writer.writeheader()
        for rank, (word, frequency) in enumerate(_sorted_rows(counts), 1):
            writer.writerow({"rank": rank, "word": word, "frequency": frequency})
