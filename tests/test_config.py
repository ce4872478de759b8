"""Tests for YAML config loading."""
import logging
import pytest
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
import yaml

from segkit.config import DEFAULT_CONFIG, config_path, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "none.yaml")
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_file_overrides_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("output: json\nwords_only: true\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg["output"] == "json"
    assert cfg["words_only"] is True
    assert cfg["mode"] == DEFAULT_CONFIG["mode"]


def test_unknown_keys_warn(tmp_path, caplog):
    p = tmp_path / "config.yaml"
    p.write_text("colour: blue\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="segkit.config"):
        cfg = load_config(p)
    assert "colour" in caplog.text
    assert cfg["colour"] == "blue"


@pytest.mark.parametrize("content", ["- a\n- b\n", "key: [unclosed\n"])
def test_bad_config_falls_back(tmp_path, caplog, content):
    p = tmp_path / "config.yaml"
    p.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="segkit.config"):
        assert load_config(p) == DEFAULT_CONFIG
    assert "Ignoring" in caplog.text


def test_save_config(tmp_path):
    p = save_config({"output": "text"}, tmp_path / "sub" / "config.yaml")
    assert p.exists()
    assert yaml.safe_load(p.read_text(encoding="utf-8")) == {"output": "text"}
    assert load_config(p)["output"] == "text"


def test_env_var_path(tmp_path, monkeypatch):
    target = tmp_path / "env.yaml"
    monkeypatch.setenv("SEGKIT_CONFIG", str(target))
    assert config_path() == target
    assert config_path(tmp_path / "x.yaml") == tmp_path / "x.yaml"


@pytest.mark.parametrize("key,value", [("log_level", "LOUD"), ("mode", "paragraphs"), ("output", "xml"), ("log_level", 10)])
def test_invalid_choice_falls_back(tmp_path, caplog, key, value):
    p = tmp_path / "config.yaml"
    p.write_text(yaml.safe_dump({key: value}), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="segkit.config"):
        cfg = load_config(p)
    assert cfg[key] == DEFAULT_CONFIG[key]
    assert f"Invalid {key}" in caplog.text


def test_log_level_case_insensitive(tmp_path, caplog):
    p = tmp_path / "config.yaml"
    p.write_text("log_level: debug\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="segkit.config"):
        cfg = load_config(p)
    assert cfg["log_level"] == "DEBUG"
    assert "Invalid" not in caplog.text
