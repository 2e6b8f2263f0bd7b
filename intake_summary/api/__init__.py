"""Routers for the intake summary FastAPI application."""

from __future__ import annotations

from fastapi import APIRouter

from .submit import router as submit_router


def build_api_router() -> APIRouter:
    """Combine all API routers for inclusion under the ``/api`` prefix."""
    router = APIRouter()
    router.include_router(submit_router)
    return router


__all__ = ["build_api_router"]
