"""태그 클라우드 단어 선정 및 폰트 등급 계산 모듈.

빈도 매핑에서 상위 N개 단어를 선정하고, 선정된 집합의 최소/최대 빈도를 기준으로
각 단어의 폰트 등급(tier)을 계산한 뒤 알파벳 순으로 정렬한다.

선정 순서와 표시 순서는 서로 다른 정렬이다:
    - 선정: 빈도 내림차순 → 동일 빈도 시 단어 내림차순
    - 표시: 단어 오름차순
"""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from dataclasses import dataclass

from tagcloud.constants import MIN_TIER, TIER_OFFSET, TIER_SCALE
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CloudEntry:
    """태그 클라우드에 표시될 단어."""

    word: str
    count: int
    tier: int


def selection_key(item: tuple[str, int]) -> tuple[int, str]:
    """선정 우선순위 키. 큰 값일수록 먼저 선정된다.

    동일 빈도에서는 사전순으로 더 뒤에 오는 단어가 우선한다.
    """
    word, count = item
    return count, word


def select_top_words(freqs: Mapping[str, int], n: int) -> list[tuple[str, int]]:
    """빈도 상위 n개의 (단어, 빈도) 쌍을 선정 순서대로 반환한다.

    Args:
        freqs: {단어: 빈도} 매핑 (변경되지 않음)
        n: 선정할 단어 수

    Returns:
        최대 min(n, len(freqs))개의 (단어, 빈도) 리스트

    Raises:
        ValueError: n이 음수인 경우
    """
    if n < 0:
        raise ValueError(f"선정할 단어 수는 0 이상이어야 합니다: {n}")
    return heapq.nlargest(n, freqs.items(), key=selection_key)


def compute_tier(count: int, min_count: int, max_count: int) -> int:
    """선정 집합의 빈도 범위에서 count에 해당하는 폰트 등급을 계산한다.

    ceil(37 * (count - min) / (max - min)) + 10 을 정수 연산으로 계산하며,
    최소 빈도이거나 모든 빈도가 같으면 최소 등급을 반환한다.
    """
    if count > min_count and max_count > min_count:
        return -(-TIER_SCALE * (count - min_count) // (max_count - min_count)) + TIER_OFFSET
    return MIN_TIER


def is_short_of_words(freqs: Mapping[str, int], n: int) -> bool:
    """고유 단어가 있으나 요청한 수보다 적은지 여부."""
    return 0 < len(freqs) < n


def build_cloud(freqs: Mapping[str, int], n: int) -> list[CloudEntry]:
    """태그 클라우드 항목을 생성한다.

    Args:
        freqs: {단어: 빈도} 매핑 (변경되지 않음)
        n: 클라우드에 포함할 단어 수

    Returns:
        단어 오름차순으로 정렬된 CloudEntry 리스트
    """
    if is_short_of_words(freqs, n):
        logger.warning(
            "⚠️  고유 단어 수(%d)가 요청한 단어 수(%d)보다 적습니다. 전체 단어를 사용합니다.",
            len(freqs),
            n,
        )

    selected = select_top_words(freqs, n)
    if not selected:
        return []

    counts = [count for _, count in selected]
    min_count, max_count = min(counts), max(counts)
    logger.debug("선정 %d개 (빈도 범위 %d~%d)", len(selected), min_count, max_count)

    entries = [CloudEntry(word, count, compute_tier(count, min_count, max_count)) for word, count in selected]
    entries.sort(key=lambda entry: entry.word)
    return entries
