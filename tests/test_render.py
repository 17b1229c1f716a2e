from __future__ import annotations

from pathlib import Path

from tagcloud.cloud.selection import CloudEntry
from tagcloud.render import render_cloud_html, render_stylesheet, write_cloud_html, write_stylesheet

ENTRIES = [CloudEntry("cat", 2, 29), CloudEntry("sat", 1, 11), CloudEntry("the", 3, 47)]


def test_render_cloud_html_structure() -> None:
    document = render_cloud_html(ENTRIES, "sample.txt", 3)

    assert document.startswith("<html>\n")
    assert "<title>Top 3 words in sample.txt</title>" in document
    assert "<h2>Top 3 words in sample.txt</h2>" in document
    assert '<link href="doc/tagcloud.css" rel="stylesheet" type="text/css">' in document
    assert '<div class="cdiv">' in document
    assert '<p class="cbox">' in document
    assert '<span style="cursor:default" class="f29" title="count: 2">cat</span>' in document
    assert document.rstrip().endswith("</html>")


def test_render_cloud_html_keeps_entry_order() -> None:
    document = render_cloud_html(ENTRIES, "sample.txt", 3)

    positions = [document.index(f">{entry.word}</span>") for entry in ENTRIES]

    assert positions == sorted(positions)


def test_render_cloud_html_escapes_text() -> None:
    document = render_cloud_html([CloudEntry("<b>&", 1, 11)], "a<b>.txt", 1, css_href="style.css")

    assert "&lt;b&gt;&amp;</span>" in document
    assert "Top 1 words in a&lt;b&gt;.txt" in document
    assert 'href="style.css"' in document


def test_render_empty_cloud() -> None:
    document = render_cloud_html([], "empty.txt", 5)

    assert "<span" not in document
    assert '<p class="cbox">\n\t</p>' in document


def test_render_stylesheet_covers_tier_range() -> None:
    css = render_stylesheet()

    assert ".f11 { font-size: 11pt; }" in css
    assert ".f47 { font-size: 47pt; }" in css
    assert ".f10 " not in css
    assert ".f48 " not in css


def test_write_cloud_html_creates_parent_directories(tmp_path: Path) -> None:
    output = tmp_path / "out" / "cloud.html"

    assert write_cloud_html(ENTRIES, output, "sample.txt", 3) == output
    assert "title=\"count: 3\">the</span>" in output.read_text(encoding="utf-8")


def test_write_stylesheet(tmp_path: Path) -> None:
    output = write_stylesheet(tmp_path / "doc" / "tagcloud.css")

    assert output.read_text(encoding="utf-8") == render_stylesheet()
