"""Tests for the hubgate-server entry point."""

import os

import uvicorn

from hubgate import server_cli


def test_main_runs_app_factory(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setenv("HUBGATE_CONFIG_PATH", "hubgate.toml")
    server_cli.main(["--port", "9000", "--config", "/etc/hubgate.toml"])

    assert calls["app"] == "hubgate.main:create_app"
    assert calls["factory"] is True
    assert calls["port"] == 9000
    assert calls["host"] == "0.0.0.0"


def test_config_and_local_flags_set_environment(monkeypatch):
    monkeypatch.setattr(uvicorn, "run", lambda *a, **k: None)
    monkeypatch.setenv("HUBGATE_CONFIG_PATH", "hubgate.toml")
    monkeypatch.setenv("HUBGATE_LOCAL_MODE", "0")
    server_cli.main(["--config", "/etc/hubgate.toml", "--local"])

    assert os.environ["HUBGATE_CONFIG_PATH"] == "/etc/hubgate.toml"
    assert os.environ["HUBGATE_LOCAL_MODE"] == "1"


def _capture_run(monkeypatch) -> dict:
    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.update(kwargs))
    monkeypatch.setenv("HUBGATE_CONFIG_PATH", "hubgate.toml")
    return calls


def test_host_and_port_default_to_environment(monkeypatch):
    calls = _capture_run(monkeypatch)
    monkeypatch.setenv("HUBGATE_HOST", "127.0.0.1")
    monkeypatch.setenv("HUBGATE_PORT", "9123")
    server_cli.main([])

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9123


def test_flags_override_environment(monkeypatch):
    calls = _capture_run(monkeypatch)
    monkeypatch.setenv("HUBGATE_PORT", "9123")
    server_cli.main(["--port", "7000"])

    assert calls["port"] == 7000
