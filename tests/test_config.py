import textwrap
from pathlib import Path

import pytest

from RenderCode.config import RenderConfig, load_config, parse_prefix_mode
from RenderCode.errors import ConfigError
from RenderCode.printer import PrefixMode


def test_defaults():
    config = RenderConfig()
    assert config.prefix_mode is PrefixMode.BARE
    assert config.show_details is False
    assert config.html_preview is True


def test_from_dict_ignores_unknown_keys():
    config = RenderConfig.from_dict({"prefix_mode": "Namespaced", "show_details": True, "theme": "dark"})
    assert config.prefix_mode is PrefixMode.NAMESPACED
    assert config.show_details is True


def test_invalid_prefix_mode():
    with pytest.raises(ConfigError, match="prefix_mode"):
        parse_prefix_mode("qualified")
    with pytest.raises(ConfigError):
        RenderConfig.from_dict({"prefix_mode": 3})


def test_flags_must_be_booleans():
    with pytest.raises(ConfigError, match="show_details"):
        RenderConfig.from_dict({"show_details": "yes please"})


def test_load_yaml_config(tmp_path: Path):
    path = tmp_path / "rendercode.yaml"
    path.write_text(
        textwrap.dedent(
            """
            prefix_mode: namespaced
            html_preview: false
            """
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config == RenderConfig(prefix_mode=PrefixMode.NAMESPACED, html_preview=False)


def test_empty_config_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == RenderConfig()


def test_config_root_must_be_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- bare\n- namespaced\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_invalid_yaml(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("prefix_mode: [bare\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)
