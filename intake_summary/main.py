"""FastAPI application entrypoint for the intake form → narrative email service."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from intake_summary.api import build_api_router
from intake_summary.config import AppConfig, get_config, parse_bool
from intake_summary.errors import ConfigurationError, ValidationError
from intake_summary.logging_setup import configure_logging
from intake_summary.services.interfaces import MetricsClient, NarrativeSender
from intake_summary.services.mailgun import MailgunSender
from intake_summary.services.metrics import NullMetrics, PrometheusMetrics
from intake_summary.services.submission_service import SubmissionService
from intake_summary.utils.logging_utils import log_stage_skipped, structured_log

_API_LOG = logging.getLogger("api")


def _metrics_enabled(default: bool) -> bool:
    raw = os.getenv("ENABLE_METRICS")
    if raw is None:
        return default
    return parse_bool(raw)


def _health_payload() -> dict[str, str]:
    return {"status": "ok"}


def _build_submission_service(
    cfg: AppConfig,
    *,
    sender: NarrativeSender | None,
    metrics: MetricsClient,
) -> SubmissionService | None:
    try:
        cfg.validate_required()
    except ConfigurationError as exc:
        log_stage_skipped(
            _API_LOG,
            stage="deliver",
            reason="email_not_configured",
            level=logging.WARNING,
            missing=",".join(cfg.missing_email_settings()),
            error=str(exc),
        )
        return None
    return SubmissionService(
        sender=sender or MailgunSender.from_config(cfg),
        from_address=cfg.sender_address,
        office_email=cfg.office_email or "",
        metrics=metrics,
    )


def create_app(sender: NarrativeSender | None = None) -> FastAPI:
    debug_enabled = parse_bool(os.getenv("DEBUG"))
    configure_logging(level=logging.DEBUG if debug_enabled else logging.INFO)
    get_config.cache_clear()

    cfg = get_config()
    app = FastAPI(title="Intake Summary API", version="1.0.0")
    app.state.config = cfg

    metrics: MetricsClient
    if _metrics_enabled(True):
        metrics = PrometheusMetrics.instrument_app(app)
    else:
        metrics = NullMetrics()
    app.state.metrics = metrics
    app.state.submission_service = _build_submission_service(cfg, sender=sender, metrics=metrics)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def _val_handler(_r: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"success": False, "message": str(exc)})

    # Health endpoints ---------------------------------------------------------
    @app.get("/healthz", summary="Healthz")
    async def healthz():
        return _health_payload()

    @app.get("/health", include_in_schema=False)
    async def health_alias():
        return _health_payload()

    @app.get("/readyz", include_in_schema=False)
    async def readyz():
        return _health_payload()

    @app.get("/", include_in_schema=False)
    async def root_health():
        return _health_payload()

    app.include_router(build_api_router(), prefix="/api", tags=["submit"])

    structured_log(
        _API_LOG,
        logging.INFO,
        "service_bootstrap",
        status="email_ready" if app.state.submission_service else "email_disabled",
    )
    return app


__all__ = ["create_app"]
