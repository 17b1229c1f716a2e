"""중앙화된 기본값 및 산출물 경로 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 구분자, 폰트 등급, 경로 상수를 중앙에서 관리한다.
모든 하드코딩된 값은 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 🔤 토큰화
# ====================================================================

# 단어 경계로 취급하는 문자 집합 (공백 + 일반 구두점)
SEPARATORS = " \t\n\r =+-_)(*&^%$#@!/'\",.:;{}[]<>?|~`"

DEFAULT_ENCODING = "utf-8"

# ====================================================================
# 🔠 폰트 등급
# ====================================================================

# tier = ceil(TIER_SCALE * (c - min) / (max - min)) + TIER_OFFSET
TIER_SCALE = 37
TIER_OFFSET = 10
MIN_TIER = 11
MAX_TIER = TIER_SCALE + TIER_OFFSET

# ====================================================================
# 🎨 렌더링
# ====================================================================

DEFAULT_CSS_HREF = "doc/tagcloud.css"

# ====================================================================
# 📁 산출물 경로
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")
LOGS_DIR = ARTIFACTS_ROOT / "logs"
