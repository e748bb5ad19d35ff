"""Tests for makedeck.config."""

from __future__ import annotations

import pytest

from makedeck.config import Settings, load_settings
from makedeck.errors import InputShapeError


@pytest.fixture(autouse=True)
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults():
    assert load_settings() == Settings()


def test_yaml_overrides_defaults(in_tmp):
    path = in_tmp / "makedeck.yaml"
    path.write_text("default_author: Ops\nfont_face: Calibri\nlog_level: info\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.default_author == "Ops"
    assert settings.font_face == "Calibri"
    assert settings.log_level == "INFO"


def test_environment_wins_over_yaml(in_tmp, monkeypatch):
    path = in_tmp / "makedeck.yaml"
    path.write_text("font_face: Calibri\n", encoding="utf-8")
    monkeypatch.setenv("MAKEDECK_FONT_FACE", "Helvetica")
    assert load_settings(path).font_face == "Helvetica"


def test_dotenv_file(in_tmp):
    (in_tmp / ".env").write_text("MAKEDECK_DEFAULT_AUTHOR=From Dotenv\n", encoding="utf-8")
    assert load_settings().default_author == "From Dotenv"


def test_missing_yaml_falls_back(in_tmp):
    assert load_settings(in_tmp / "absent.yaml") == Settings()


def test_malformed_yaml(in_tmp):
    path = in_tmp / "bad.yaml"
    path.write_text("font_face: [unclosed\n", encoding="utf-8")
    with pytest.raises(InputShapeError):
        load_settings(path)


def test_yaml_must_be_mapping(in_tmp):
    path = in_tmp / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InputShapeError, match="mapping"):
        load_settings(path)


def test_unknown_log_level_in_environment(monkeypatch):
    monkeypatch.setenv("MAKEDECK_LOGLEVEL", "verbose")
    with pytest.raises(InputShapeError, match="Unknown log level"):
        load_settings()


def test_unknown_log_level_in_yaml(in_tmp):
    path = in_tmp / "makedeck.yaml"
    path.write_text("log_level: chatty\n", encoding="utf-8")
    with pytest.raises(InputShapeError, match="chatty"):
        load_settings(path)
