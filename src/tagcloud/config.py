"""YAML 실행 설정 로드 모듈.

설정 파일 예시::

    separators: " \\t.,;:!?"
    css_href: "doc/tagcloud.css"
    encoding: "utf-8"

명시된 CLI 인자는 설정 파일 값보다 우선한다.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from tagcloud.constants import DEFAULT_CSS_HREF, DEFAULT_ENCODING, SEPARATORS


class ConfigError(ValueError):
    """설정 파일 내용이 올바르지 않은 경우."""


@dataclass(frozen=True, slots=True)
class CloudConfig:
    """태그 클라우드 실행 설정.

    Attributes:
        separators: 단어 경계로 취급할 문자 집합
        css_href: HTML에 링크할 스타일시트 경로
        encoding: 입력 파일 인코딩
    """

    separators: str = SEPARATORS
    css_href: str = DEFAULT_CSS_HREF
    encoding: str = DEFAULT_ENCODING

    def override(self, **values: Any) -> CloudConfig:
        """None이 아닌 값만 덮어쓴 새 설정을 반환한다."""
        return replace(self, **{key: value for key, value in values.items() if value is not None})


def load_cloud_config(config_path: Path | None) -> CloudConfig:
    """설정 파일 로드

    Args:
        config_path: YAML 설정 파일 경로 (None이면 기본 설정)

    Returns:
        CloudConfig 인스턴스

    Raises:
        ConfigError: 설정 파일을 읽을 수 없거나, 알 수 없는 키, 잘못된 타입, 빈 구분자 집합
    """
    if config_path is None:
        return CloudConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"설정 파일을 읽을 수 없습니다: {config_path} ({exc.strerror or exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"설정 파일을 파싱할 수 없습니다: {config_path}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"설정 파일 최상위는 매핑이어야 합니다: {config_path}")

    known = {field.name for field in fields(CloudConfig)}
    if unknown := sorted(set(raw) - known):
        raise ConfigError(f"알 수 없는 설정 키: {', '.join(map(str, unknown))}")

    for key, value in raw.items():
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' 값은 문자열이어야 합니다: {value!r}")

    if raw.get("separators") == "":
        raise ConfigError("separators는 비어 있을 수 없습니다.")

    return CloudConfig(**raw)
