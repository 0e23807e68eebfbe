from __future__ import annotations

import pytest

from saucefinder.config import DEFAULT_TIMEOUT_SECONDS, SauceFinderConfig, load_config


def test_load_config_reads_sections(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        """
debug_mode = true

[saucenao]
api_key = "abc123"
low_similarity_warning_level = 70.5
timeout = 20

[gallery]
max_concurrency = 3
""".strip(),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.debug_mode is True
    assert config.saucenao.enable is True
    assert config.saucenao.api_key == "abc123"
    assert config.saucenao.low_similarity_warning_level == 70.5
    assert config.saucenao.timeout == 20
    assert config.gallery.max_concurrency == 3
    assert config.gallery.timeout == DEFAULT_TIMEOUT_SECONDS
    assert config.config_path == path


def test_defaults():
    config = SauceFinderConfig()

    assert config.debug_mode is False
    assert config.saucenao.api_key == ""
    assert config.gallery.max_concurrency == 1


def test_missing_config_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        load_config(tmp_path / "missing.toml")
    assert exc_info.value.code == 1


def test_invalid_config_exits(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[gallery]\nmax_concurrency = 0\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        load_config(path)
    assert exc_info.value.code == 1
