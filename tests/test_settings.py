from pathlib import Path

import pytest
from pydantic import ValidationError

from cssbuilder import BuilderSettings, load_settings


def test_defaults_without_file():
    settings = load_settings()
    assert settings == BuilderSettings()
    assert settings.strict_combinators is False
    assert settings.logging.level == "INFO"


def test_reads_cssbuilder_table(tmp_path: Path):
    path = tmp_path / "cssbuilder.toml"
    path.write_text(
        "[cssbuilder]\nstrict_combinators = true\n\n[cssbuilder.logging]\nlevel = 'debug'\njsonl = true\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.strict_combinators is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.jsonl is True


def test_reads_top_level_keys(tmp_path: Path):
    path = tmp_path / "plain.toml"
    path.write_text("strict_combinators = true\n", encoding="utf-8")
    assert load_settings(path).strict_combinators is True


def test_env_applies_when_file_is_silent(monkeypatch):
    monkeypatch.setenv("CSSBUILDER_STRICT_COMBINATORS", "1")
    monkeypatch.setenv("CSSBUILDER_LOG_LEVEL", "warning")
    settings = load_settings()
    assert settings.strict_combinators is True
    assert settings.logging.level == "WARNING"


def test_file_and_overrides_win_over_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CSSBUILDER_STRICT_COMBINATORS", "true")
    monkeypatch.setenv("CSSBUILDER_LOG_LEVEL", "DEBUG")
    path = tmp_path / "cfg.toml"
    path.write_text("strict_combinators = false\n", encoding="utf-8")
    settings = load_settings(path, {"logging": {"level": "ERROR"}})
    assert settings.strict_combinators is False
    assert settings.logging.level == "ERROR"


def test_invalid_level_is_rejected():
    with pytest.raises(ValidationError):
        load_settings(overrides={"logging": {"level": "LOUD"}})


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.toml")


def test_overrides_are_not_mutated(monkeypatch):
    monkeypatch.setenv("CSSBUILDER_LOG_LEVEL", "DEBUG")
    overrides = {"logging": {"jsonl": True}}
    settings = load_settings(overrides=overrides)
    assert settings.logging.level == "DEBUG"
    assert settings.logging.jsonl is True
    assert overrides == {"logging": {"jsonl": True}}
