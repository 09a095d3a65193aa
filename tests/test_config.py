"""Unit tests for archdate.utils.config."""

from pathlib import Path

import pytest

from archdate.utils.config import (
    DEFAULT_DATE_FIELDS,
    Config,
    is_first_run,
    load_config,
    save_config,
)


def test_save_and_load_roundtrip(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr("archdate.utils.config.CONFIG_PATH", config_file)
    cfg = Config(
        date_fields=["date", "my \"odd\" field"],
        preserve_width=True,
        log_level="DEBUG",
    )
    save_config(cfg)
    assert config_file.exists()

    loaded = load_config()
    assert loaded.date_fields == ["date", "my \"odd\" field"]
    assert loaded.preserve_width is True
    assert loaded.log_level == "DEBUG"


def test_load_config_returns_defaults_when_missing(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("archdate.utils.config.CONFIG_PATH", tmp_path / "nonexistent.toml")
    assert is_first_run()
    cfg = load_config()
    assert cfg.date_fields == list(DEFAULT_DATE_FIELDS)
    assert cfg.preserve_width is False
    assert cfg.log_level == "WARNING"


def test_load_config_partial_file_falls_back_to_defaults(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text('[log]\nlevel = "info"\n', encoding="utf-8")
    monkeypatch.setattr("archdate.utils.config.CONFIG_PATH", config_file)
    assert not is_first_run()
    cfg = load_config()
    assert cfg.log_level == "INFO"
    assert cfg.date_fields == list(DEFAULT_DATE_FIELDS)


def test_load_config_rejects_unknown_log_level(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text('[log]\nlevel = "chatty"\n', encoding="utf-8")
    monkeypatch.setattr("archdate.utils.config.CONFIG_PATH", config_file)
    with pytest.raises(ValueError):
        load_config()


def test_save_config_creates_parent_dirs(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "a" / "b" / "c" / "config.toml"
    monkeypatch.setattr("archdate.utils.config.CONFIG_PATH", config_file)
    save_config(Config())
    assert config_file.exists()
