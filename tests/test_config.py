from __future__ import annotations

from pathlib import Path

import pytest

import config
from churn_form.utils import setup_logging_from_config


def test_shipped_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHURN_API_URL", raising=False)
    cfg = config.get_config()

    assert cfg["api"]["url"] == "http://localhost:8000"
    assert cfg["api"]["predict_path"] == "/predict"
    assert cfg["api"]["timeout"] is None
    assert cfg["api"]["retries"] == 0
    assert cfg["form"]["strict_numeric"] is False


def test_env_overrides_api_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHURN_API_URL", "http://churn-api:8000")
    assert config.get_config()["api"]["url"] == "http://churn-api:8000"


def test_load_config_from_path(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api:\n  url: http://example.test\n", encoding="utf-8")
    assert config.load_config(path) == {"api": {"url": "http://example.test"}}


def test_empty_config_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert config.load_config(path) == {}


def test_logging_writes_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import churn_form.utils.helpers as helpers

    monkeypatch.setattr(helpers, "LOGS_DIR", tmp_path, raising=True)
    setup_logging_from_config({"logging": {"level": "DEBUG", "file": "form.log"}})

    assert (tmp_path / "form.log").exists()
    helpers.setup_logging()
