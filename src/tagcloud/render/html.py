"""태그 클라우드 HTML/CSS 렌더링 모듈.

CloudEntry 시퀀스를 입력 순서 그대로 span 요소로 출력한다.
폰트 크기는 ``f{tier}`` CSS 클래스로, 빈도는 title 속성으로 노출한다.

산출물:
    - <output>.html
    - <output 디렉토리>/doc/tagcloud.css (선택)
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
from pathlib import Path

from tagcloud.cloud.selection import CloudEntry
from tagcloud.constants import DEFAULT_CSS_HREF, MAX_TIER, MIN_TIER
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def render_cloud_html(
    entries: Sequence[CloudEntry],
    source_name: str,
    requested: int,
    css_href: str = DEFAULT_CSS_HREF,
) -> str:
    """태그 클라우드 HTML 문서를 생성한다.

    Args:
        entries: 표시할 항목 (표시 순서대로 정렬된 상태)
        source_name: 제목에 표시할 입력 문서 이름
        requested: 요청한 단어 수
        css_href: 스타일시트 링크 경로

    Returns:
        HTML 문서 문자열
    """
    heading = escape(f"Top {requested} words in {source_name}")

    lines: list[str] = [
        "<html>",
        "\t<head>",
        f"\t\t<title>{heading}</title>",
        f'\t\t<link href="{escape(css_href)}" rel="stylesheet" type="text/css">',
        "\t</head>",
        "<body>",
        f"\t<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '\t<p class="cbox">',
    ]

    for entry in entries:
        lines.append(
            f'\t\t<span style="cursor:default" class="f{entry.tier}" '
            f'title="count: {entry.count}">{escape(entry.word)}</span>'
        )

    lines.extend(["\t</p>", "</div>", "</body>", "</html>", ""])
    return "\n".join(lines)


def render_stylesheet() -> str:
    """클라우드 레이아웃과 f11~f47 폰트 클래스를 정의하는 CSS를 생성한다."""
    lines: list[str] = [
        ".cdiv {",
        "\twidth: 80%;",
        "\tmargin: 0 auto;",
        "}",
        "",
        ".cbox {",
        "\tpadding: 1em;",
        "\tborder: 1px solid #ccc;",
        "\tline-height: 1.6;",
        "\ttext-align: justify;",
        "}",
        "",
        ".cbox span {",
        "\tmargin: 0 0.25em;",
        "}",
        "",
    ]
    for tier in range(MIN_TIER, MAX_TIER + 1):
        lines.append(f".f{tier} {{ font-size: {tier}pt; }}")
    lines.append("")
    return "\n".join(lines)


def write_cloud_html(
    entries: Sequence[CloudEntry],
    output_path: Path,
    source_name: str,
    requested: int,
    css_href: str = DEFAULT_CSS_HREF,
) -> Path:
    """태그 클라우드 HTML 파일을 저장한다.

    문서를 메모리에서 완성한 후 파일을 연다.
    """
    document = render_cloud_html(entries, source_name, requested, css_href)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    logger.info("📄 태그 클라우드 저장 완료: %s (%d개 단어)", output_path, len(entries))
    return output_path


def write_stylesheet(output_path: Path) -> Path:
    """스타일시트 파일을 저장한다."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_stylesheet(), encoding="utf-8")
    logger.info("🎨 스타일시트 저장 완료: %s", output_path)
    return output_path
