"""Submit route: receives the intake form and emails its narrative."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict
from uuid import uuid4

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from intake_summary.errors import EmailDeliveryError, ValidationError
from intake_summary.logging_setup import request_context
from intake_summary.utils.logging_utils import structured_log

router = APIRouter()

_API_LOG = logging.getLogger("api")

NOT_CONFIGURED_MESSAGE = "Server is not configured for email. Please contact the administrator."
DELIVERY_FAILED_MESSAGE = "Failed to send form. Please try again or contact the office."
SUCCESS_MESSAGE = "Form submitted successfully."

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_submission(request: Request) -> Dict[str, Any]:
    """Decode a JSON or form body into a flat field mapping.

    Repeated form keys (and ``name[]`` keys) become lists.
    """
    content_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if content_type in _FORM_CONTENT_TYPES:
        form = await request.form()
        fields: Dict[str, Any] = {}
        for key in form.keys():
            values = [value for value in form.getlist(key) if isinstance(value, str)]
            if key.endswith("[]"):
                fields[key[:-2]] = values
            elif len(values) > 1:
                fields[key] = values
            elif values:
                fields[key] = values[0]
        return fields

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("Request body must be a JSON object or form data") from exc
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object or form data")
    return payload


@router.post("/submit")
async def submit_form(request: Request) -> JSONResponse:
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    with request_context(request_id):
        cfg = request.app.state.config
        service = getattr(request.app.state, "submission_service", None)
        if service is None or not cfg.email_configured:
            structured_log(
                _API_LOG,
                logging.ERROR,
                "email_not_configured",
                missing=",".join(cfg.missing_email_settings()),
            )
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": NOT_CONFIGURED_MESSAGE},
            )

        submission = await read_submission(request)
        try:
            outcome = await service.submit(submission)
        except EmailDeliveryError as exc:
            structured_log(
                _API_LOG,
                logging.ERROR,
                "submission_delivery_failed",
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": DELIVERY_FAILED_MESSAGE},
            )
        except Exception as exc:  # unknown sender failures still answer with the JSON body
            _API_LOG.exception(
                "submission_unexpected_error",
                extra={"event": "submission_unexpected_error", "error_type": exc.__class__.__name__},
            )
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": DELIVERY_FAILED_MESSAGE},
            )

        structured_log(
            _API_LOG,
            logging.INFO,
            "submission_delivered",
            message_id=outcome.receipt.message_id,
            section_count=outcome.narrative.section_count,
        )
        return JSONResponse(content={"success": True, "message": SUCCESS_MESSAGE})


__all__ = ["router", "read_submission"]
