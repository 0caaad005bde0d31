from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    monkeypatch.setenv("APP_PORT", "8123")

    runpy.run_module("src.main.__main__", run_name="__main__")

    assert calls["app"] == "src.main.app:app"
    assert calls["port"] == 8123
    assert calls["log_config"] is None
