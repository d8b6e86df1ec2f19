"""Tests for catalog_service.config environment handling."""

import importlib

import catalog_service.__main__ as entry
from catalog_service import config


def _reload_with(monkeypatch, **env):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    try:
        return importlib.reload(config)
    finally:
        for key in env:
            monkeypatch.delenv(key)


class TestServiceConfig:
    def test_port_from_environment(self, monkeypatch):
        reloaded = _reload_with(monkeypatch, PORT="8080")
        assert reloaded.PORT == 8080
        importlib.reload(config)

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert importlib.reload(config).PORT == 5000

    def test_delay_from_environment(self, monkeypatch):
        reloaded = _reload_with(monkeypatch, PRODUCTS_DELAY_SECONDS="0")
        assert reloaded.PRODUCTS_DELAY_SECONDS == 0.0
        importlib.reload(config)

    def test_logging_options_from_environment(self, monkeypatch, tmp_path):
        log_file = str(tmp_path / "catalog.log")
        reloaded = _reload_with(monkeypatch, QUIET="true", LOG_FILE=log_file)
        assert reloaded.QUIET is True
        assert reloaded.LOG_FILE == log_file
        importlib.reload(config)

    def test_logging_options_default_off(self, monkeypatch):
        monkeypatch.delenv("QUIET", raising=False)
        monkeypatch.delenv("LOG_FILE", raising=False)
        reloaded = importlib.reload(config)
        assert reloaded.QUIET is False
        assert reloaded.LOG_FILE is None


class TestMain:
    def test_logging_options_passed_through(self, monkeypatch, tmp_path):
        log_file = str(tmp_path / "catalog.log")
        monkeypatch.setattr(config, "QUIET", True)
        monkeypatch.setattr(config, "LOG_FILE", log_file)
        monkeypatch.setattr(config, "PORT", 8081)
        calls: dict = {}
        monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: calls.update(logging=kwargs))
        monkeypatch.setattr(
            entry.uvicorn, "run", lambda app, **kwargs: calls.update(app=app, server=kwargs)
        )

        entry.main()

        assert calls["logging"] == {"verbose": config.VERBOSE, "quiet": True, "log_file": log_file}
        assert calls["app"] == "catalog_service.main:app"
        assert calls["server"]["port"] == 8081
