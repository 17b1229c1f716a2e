from __future__ import annotations

from pathlib import Path

import pytest

from tagcloud.config import CloudConfig, ConfigError, load_cloud_config
from tagcloud.constants import DEFAULT_CSS_HREF, SEPARATORS


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "tagcloud.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_config_file() -> None:
    config = load_cloud_config(None)

    assert config == CloudConfig(separators=SEPARATORS, css_href=DEFAULT_CSS_HREF, encoding="utf-8")


def test_load_config(tmp_path: Path) -> None:
    path = _write(tmp_path, 'separators: " ,"\ncss_href: "style/cloud.css"\n')

    config = load_cloud_config(path)

    assert config.separators == " ,"
    assert config.css_href == "style/cloud.css"
    assert config.encoding == "utf-8"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    assert load_cloud_config(_write(tmp_path, "")) == CloudConfig()


@pytest.mark.parametrize(
    "content",
    [
        "colour: red\n",
        "separators: 12\n",
        'separators: ""\n',
        "- separators\n",
        "separators: [unclosed\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigError):
        load_cloud_config(_write(tmp_path, content))


def test_missing_config_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="missing.yaml") as excinfo:
        load_cloud_config(tmp_path / "missing.yaml")

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_config_path_is_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_cloud_config(tmp_path)


def test_override_ignores_unset_values() -> None:
    config = CloudConfig(encoding="latin-1").override(encoding=None, css_href="x.css")

    assert config.encoding == "latin-1"
    assert config.css_href == "x.css"
