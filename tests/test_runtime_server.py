from __future__ import annotations

from types import SimpleNamespace

import intake_summary.runtime_server as runtime_server


def test_worker_count_prefers_env(monkeypatch):
    monkeypatch.setenv("UVICORN_WORKERS", "4")
    assert runtime_server._worker_count() == 4
    monkeypatch.setenv("UVICORN_WORKERS", "invalid")
    monkeypatch.setattr(runtime_server.multiprocessing, "cpu_count", lambda: 6)
    assert runtime_server._worker_count() == 6


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert runtime_server._port() == 3000
    monkeypatch.setenv("PORT", "not-a-port")
    assert runtime_server._port() == 3000


def test_main_invokes_uvicorn_with_app_factory(monkeypatch):
    monkeypatch.setattr(runtime_server, "_worker_count", lambda: 2)
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.delenv("FASTAPI_APP", raising=False)
    recorded: dict[str, object] = {}

    def _fake_run(app, *, host, port, factory, workers, lifespan):
        recorded.update(
            {
                "app": app,
                "host": host,
                "port": port,
                "factory": factory,
                "workers": workers,
                "lifespan": lifespan,
            }
        )

    monkeypatch.setattr(runtime_server, "uvicorn", SimpleNamespace(run=_fake_run))
    runtime_server.main()
    assert recorded["app"] == "intake_summary.main:create_app"
    assert recorded["port"] == 9090
    assert recorded["factory"] is True
    assert recorded["workers"] == 2
