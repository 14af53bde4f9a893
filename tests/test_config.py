"""Tests for config loading, overrides and validation."""
import pytest
import yaml

from config import load_config, _deep_merge


def test_defaults_load():
    config = load_config()
    assert config["http"]["timeout"] == 30
    assert config["sources"]["cryptocompare"]["lookback_days"] == 730
    assert config["sources"]["coinbase"]["granularity"] == 86400
    assert config["dominance"]["base_url"].startswith("https://api.coingecko.com")


def test_override_file_merges(tmp_path):
    path = tmp_path / "override.yaml"
    path.write_text(yaml.safe_dump({"http": {"timeout": 12}, "logging": {"level": "DEBUG"}}))
    config = load_config(str(path))
    assert config["http"]["timeout"] == 12
    assert config["http"]["user_agent"] == "RatioPulse/1.0"
    assert config["logging"]["level"] == "DEBUG"


def test_missing_override_file_ignored(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config["http"]["timeout"] == 30


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RATIOPULSE_HTTP_TIMEOUT", "9")
    monkeypatch.setenv("RATIOPULSE_LOG_LEVEL", "WARNING")
    config = load_config()
    assert config["http"]["timeout"] == 9
    assert config["logging"]["level"] == "WARNING"


def test_invalid_timeout_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"http": {"timeout": 0}}))
    with pytest.raises(ValueError, match="timeout"):
        load_config(str(path))


def test_missing_base_url_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"sources": {"coinbase": {"base_url": ""}}}))
    with pytest.raises(ValueError, match="coinbase"):
        load_config(str(path))


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}
    merged = _deep_merge(base, {"a": {"b": 5}})
    assert merged == {"a": {"b": 5, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}
