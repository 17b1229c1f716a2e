"""단어/구분자 토큰화 모듈.

한 줄의 텍스트를 구분자 포함 여부가 같은 문자들의 최대 연속 구간(run)으로 나눈다.
각 구간은 소문자로 정규화되어 원래 순서대로 생성되며, 토큰은 줄 경계를 넘지 않는다.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tagcloud.constants import SEPARATORS


@dataclass(frozen=True, slots=True)
class Token:
    """단어 또는 구분자 구간 토큰."""

    text: str
    is_separator: bool


def _run_end(text: str, position: int, separators: str) -> int:
    """position에서 시작하는 동질 구간의 끝 인덱스(미포함)를 반환한다."""
    if not 0 <= position < len(text):
        raise ValueError(f"position은 0 이상 {len(text)} 미만이어야 합니다: {position}")

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return end


def next_word_or_separator(text: str, position: int, separators: str = SEPARATORS) -> str:
    """position에서 시작하는 첫 단어 또는 구분자 구간을 반환한다.

    첫 문자가 구분자가 아니면 구분자가 아닌 문자의 최대 구간을,
    구분자이면 구분자 문자의 최대 구간을 소문자로 반환한다.

    Args:
        text: 토큰을 추출할 문자열
        position: 시작 인덱스
        separators: 구분자 문자 집합

    Returns:
        소문자로 변환된 단어 또는 구분자 구간

    Raises:
        ValueError: position이 0 <= position < len(text)를 만족하지 않는 경우
    """
    return text[position:_run_end(text, position, separators)].lower()


def iter_tokens(line: str, separators: str = SEPARATORS) -> Iterator[Token]:
    """한 줄을 토큰 스트림으로 변환한다.

    소문자 변환으로 길이가 바뀌는 문자가 있어도 원문 기준으로 위치를 전진시킨다.
    """
    position = 0
    while position < len(line):
        end = _run_end(line, position, separators)
        yield Token(line[position:end].lower(), line[position] in separators)
        position = end


def iter_line_tokens(lines: Iterable[str], separators: str = SEPARATORS) -> Iterator[Token]:
    """여러 줄의 토큰을 순서대로 생성한다.

    각 줄의 끝 개행 문자는 제거하며, 줄마다 위치를 0부터 다시 시작한다.
    """
    for line in lines:
        yield from iter_tokens(line.rstrip("\r\n"), separators)
