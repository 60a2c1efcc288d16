"""Pydantic request/response schemas."""

from taskboard.schemas.auth import (
    ErrorResponse,
    IdentitySnapshot,
    LoginRequest,
    ProfileUpdateRequest,
    SignupRequest,
    SuccessResponse,
)
from taskboard.schemas.health import HealthResponse
from taskboard.schemas.task import TaskCreateRequest, TaskRead

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "IdentitySnapshot",
    "LoginRequest",
    "ProfileUpdateRequest",
    "SignupRequest",
    "SuccessResponse",
    "TaskCreateRequest",
    "TaskRead",
]
