"""Tests for evaluator configuration."""
import json

import pytest

from poker_showdown.config import EvaluatorConfig


def test_defaults():
    config = EvaluatorConfig()
    assert config.parallel is False
    assert config.max_workers is None
    assert config.log_level == "WARNING"


def test_from_env(monkeypatch):
    monkeypatch.setenv("POKER_SHOWDOWN_PARALLEL", "True")
    monkeypatch.setenv("POKER_SHOWDOWN_MAX_WORKERS", "3")
    monkeypatch.setenv("POKER_SHOWDOWN_LOG_LEVEL", "debug")
    config = EvaluatorConfig.from_env()
    assert config.parallel is True
    assert config.max_workers == 3
    assert config.log_level == "DEBUG"


def test_from_env_defaults(monkeypatch):
    for name in ("POKER_SHOWDOWN_PARALLEL", "POKER_SHOWDOWN_MAX_WORKERS", "POKER_SHOWDOWN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert EvaluatorConfig.from_env() == EvaluatorConfig()


@pytest.mark.parametrize("max_workers", ["0", "-2", "four"])
def test_from_env_rejects_bad_max_workers(monkeypatch, max_workers):
    monkeypatch.setenv("POKER_SHOWDOWN_MAX_WORKERS", max_workers)
    with pytest.raises(ValueError, match="Invalid evaluator configuration"):
        EvaluatorConfig.from_env()


def test_from_env_rejects_bad_log_level(monkeypatch):
    monkeypatch.setenv("POKER_SHOWDOWN_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="Invalid evaluator configuration"):
        EvaluatorConfig.from_env()


def test_from_file(tmp_path):
    path = tmp_path / "evaluator.json"
    path.write_text(json.dumps({"parallel": True, "maxWorkers": 2, "logLevel": "INFO"}))
    config = EvaluatorConfig.from_file(path)
    assert config == EvaluatorConfig(parallel=True, max_workers=2, log_level="INFO")


@pytest.mark.parametrize("data", [
    {"parallel": "yes"},
    {"maxWorkers": 0},
    {"logLevel": "LOUD"},
    {"unknown": 1},
])
def test_from_dict_rejects_invalid(data):
    with pytest.raises(ValueError):
        EvaluatorConfig.from_dict(data)


def test_from_file_rejects_bad_json(tmp_path):
    path = tmp_path / "evaluator.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        EvaluatorConfig.from_file(path)
