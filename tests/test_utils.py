# tests/test_utils.py
"""Tests for utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import importlib
import json
import os

import pytest

# Import the module objects (the package re-exports same-named functions)
LC = importlib.import_module("color_token_report.report.utils.load_config")
LOG = importlib.import_module("color_token_report.report.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_cache_hit_until_mtime_changes(tmp_data_dir):
    p = tmp_data_dir / "export.json"
    p.write_text(json.dumps({"variables": ["v1"]}), encoding="utf-8")
    stamp = p.stat()

    out1 = load_config("export")
    assert out1 == {"variables": ["v1"]}

    # same mtime → served from cache
    p.write_text(json.dumps({"variables": ["changed"]}), encoding="utf-8")
    os.utime(p, ns=(stamp.st_atime_ns, stamp.st_mtime_ns))
    assert load_config("export") is out1

    clear_config_cache()
    assert load_config("export") == {"variables": ["changed"]}


def test_load_config_rereads_when_mtime_moves(tmp_data_dir):
    p = tmp_data_dir / "export.json"
    p.write_text(json.dumps({"n": 1}), encoding="utf-8")
    assert load_config("export") == {"n": 1}

    p.write_text(json.dumps({"n": 2}), encoding="utf-8")
    later = p.stat().st_mtime_ns + 5_000_000_000
    os.utime(p, ns=(later, later))
    assert load_config("export") == {"n": 2}


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config("x", mode="set")  # type: ignore[arg-type]


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}

    (tmp_data_dir / "list.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("list", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_validator_failure_is_parse_error(tmp_data_dir):
    (tmp_data_dir / "bad.json").write_text(json.dumps({"x": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("bad", mode="validated_dict", validator=validator)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_explicit_base_dir(tmp_path):
    other = tmp_path / "elsewhere"
    other.mkdir()
    (other / "export.json").write_text(json.dumps({"variables": []}), encoding="utf-8")
    assert load_config("export.json", base_dir=other) == {"variables": []}


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


# ---------- log.debug tests ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("nothing to see", topic="resolve")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "resolve")
    LOG.reload_topics()

    LOG.debug("hello on resolve", topic="resolve")
    LOG.debug("should be silent", topic="pairing")

    captured = capsys.readouterr()
    assert "hello on resolve" in captured.err
    assert "[resolve][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="report")
    LOG.debug("m2", topic="messages", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[messages][WARNING]" in captured.err
    assert LOG.is_enabled("anything")
