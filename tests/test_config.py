from pathlib import Path

import pytest

from ctail import config as config_module
from ctail.config import default_config_path, get_config, load_config, reload_config
from ctail.core.constants import DEFAULT_LINES, LINE_LENGTH_LIMIT, READ_CHUNK_SIZE


def test_defaults_without_file_or_env(isolated_config: Path) -> None:
    config = load_config()

    assert config.tail.default_lines == DEFAULT_LINES
    assert config.tail.line_length_limit == LINE_LENGTH_LIMIT
    assert config.tail.chunk_size == READ_CHUNK_SIZE
    assert config.logging.log_level == "WARNING"
    assert config.config_path == isolated_config


def test_file_values_are_applied(isolated_config: Path) -> None:
    isolated_config.write_text(
        "[tail]\ndefault_lines = 25\nchunk_size = 512\n\n"
        '[logging]\nlog_level = "DEBUG"\n',
        encoding="utf-8",
    )

    config = load_config()
    assert config.tail.default_lines == 25
    assert config.tail.chunk_size == 512
    assert config.tail.line_length_limit == LINE_LENGTH_LIMIT
    assert config.logging.log_level == "DEBUG"


def test_env_overrides_file(
    isolated_config: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    isolated_config.write_text("[tail]\ndefault_lines = 25\n", encoding="utf-8")
    monkeypatch.setenv("CTAIL_DEFAULT_LINES", "3")
    monkeypatch.setenv("CTAIL_LOG_LEVEL", "INFO")

    config = load_config()
    assert config.tail.default_lines == 3
    assert config.logging.log_level == "INFO"


def test_bad_env_integer_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CTAIL_LINE_LENGTH_LIMIT", "lots")
    assert load_config().tail.line_length_limit == LINE_LENGTH_LIMIT


def test_malformed_file_falls_back_to_defaults(isolated_config: Path) -> None:
    isolated_config.write_text("[tail\ndefault_lines = ", encoding="utf-8")
    assert load_config().tail.default_lines == DEFAULT_LINES


def test_default_path_without_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("CTAIL_CONFIG")
    monkeypatch.setattr(config_module.sys, "platform", "linux")
    monkeypatch.setattr(config_module.Path, "home", lambda: tmp_path)
    assert default_config_path() == tmp_path / ".ctail" / "ctail.toml"


def test_get_config_is_cached_until_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("CTAIL_DEFAULT_LINES", "7")
    reloaded = reload_config()
    assert reloaded is not first
    assert reloaded.tail.default_lines == 7
    assert get_config() is reloaded


def test_file_integer_strings_are_coerced(isolated_config: Path) -> None:
    isolated_config.write_text(
        '[tail]\ndefault_lines = "5"\nline_length_limit = "64"\n', encoding="utf-8"
    )

    config = load_config()
    assert config.tail.default_lines == 5
    assert config.tail.line_length_limit == 64


def test_file_values_of_wrong_type_are_ignored(isolated_config: Path) -> None:
    isolated_config.write_text(
        '[tail]\ndefault_lines = "many"\nchunk_size = true\n'
        "line_length_limit = [1, 2]\n\n"
        "[logging]\nlog_level = 10\n",
        encoding="utf-8",
    )

    config = load_config()
    assert config.tail.default_lines == DEFAULT_LINES
    assert config.tail.chunk_size == READ_CHUNK_SIZE
    assert config.tail.line_length_limit == LINE_LENGTH_LIMIT
    assert config.logging.log_level == "WARNING"


def test_non_table_sections_are_ignored(isolated_config: Path) -> None:
    isolated_config.write_text('tail = 3\nlogging = "DEBUG"\n', encoding="utf-8")

    config = load_config()
    assert config.tail.default_lines == DEFAULT_LINES
    assert config.logging.log_level == "WARNING"
