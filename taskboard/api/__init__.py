"""HTTP routes."""

from typing import Any

from fastapi import APIRouter

from taskboard.api import auth, health, pages, profile, tasks
from taskboard.schemas.auth import ErrorResponse


def _errors(*codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI entries documenting the {"error": ...} body for the given status codes."""
    return {code: {"model": ErrorResponse} for code in codes}


router = APIRouter()
router.include_router(pages.router, tags=["pages"])
router.include_router(auth.router, tags=["auth"], responses=_errors(400, 500))
router.include_router(profile.router, tags=["profile"], responses=_errors(401, 500))
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"], responses=_errors(400, 401, 500))
router.include_router(health.router, prefix="/health", tags=["health"])
