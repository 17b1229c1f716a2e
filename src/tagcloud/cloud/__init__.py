"""단어 토큰화, 빈도 집계, 클라우드 선정 모듈.

원문 텍스트를 토큰화하여 단어 빈도를 집계하고, 상위 단어를 선정하여
폰트 등급을 계산한다.
"""

from __future__ import annotations

from .frequency import count_words, read_word_counts
from .selection import CloudEntry, build_cloud, compute_tier, select_top_words
from .tokenizer import Token, iter_tokens, next_word_or_separator

__all__ = [
    "CloudEntry",
    "Token",
    "build_cloud",
    "compute_tier",
    "count_words",
    "iter_tokens",
    "next_word_or_separator",
    "read_word_counts",
    "select_top_words",
]
