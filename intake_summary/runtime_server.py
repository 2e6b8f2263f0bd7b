"""Runtime launcher for the intake summary service."""

from __future__ import annotations

import multiprocessing
import os

import uvicorn

DEFAULT_PORT = 3000


def _worker_count() -> int:
    explicit = os.getenv("UVICORN_WORKERS")
    if explicit:
        try:
            value = int(explicit)
            if value > 0:
                return value
        except ValueError:
            pass
    return max(1, multiprocessing.cpu_count() or 1)


def _port() -> int:
    try:
        return int(os.getenv("PORT", str(DEFAULT_PORT)))
    except ValueError:
        return DEFAULT_PORT


def main() -> None:
    workers = _worker_count()
    os.environ.setdefault("UVICORN_WORKERS", str(workers))
    uvicorn.run(
        os.getenv("FASTAPI_APP", "intake_summary.main:create_app"),
        host="0.0.0.0",
        port=_port(),
        factory=True,
        workers=workers,
        lifespan="on",
    )


if __name__ == "__main__":  # pragma: no cover - exercised in runtime
    main()
