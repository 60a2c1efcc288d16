"""Task list of the logged-in user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskboard.api.deps import require_identity
from taskboard.core.database import get_db
from taskboard.schemas.auth import IdentitySnapshot, SuccessResponse
from taskboard.schemas.task import TaskCreateRequest, TaskRead
from taskboard.services.errors import StorageError, ValidationError
from taskboard.services.tasks import TaskRepository

logger = logging.getLogger(__name__)

router = APIRouter()

# Task ids are SQLite INTEGER (signed 64-bit).
TASK_ID_MIN = -(2**63)
TASK_ID_MAX = 2**63 - 1


def _storage_failure(e: StorageError, identity: IdentitySnapshot) -> HTTPException:
    logger.exception("Task storage error for user id=%s: %s", identity.id, e.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)


@router.get("", response_model=list[TaskRead])
def list_tasks(
    identity: Annotated[IdentitySnapshot, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> list[TaskRead]:
    try:
        tasks = TaskRepository(db).list_tasks(identity.id)
    except StorageError as e:
        raise _storage_failure(e, identity) from e
    return [TaskRead.model_validate(t) for t in tasks]


@router.post("", response_model=SuccessResponse)
def add_task(
    body: TaskCreateRequest,
    identity: Annotated[IdentitySnapshot, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    try:
        TaskRepository(db).add_task(identity.id, body.task)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except StorageError as e:
        raise _storage_failure(e, identity) from e
    return SuccessResponse(success="Task added")


def _parse_task_id(raw: str) -> int | None:
    """Integer id from the path, or None when it cannot name any stored task."""
    try:
        value = int(raw)
    except ValueError:
        return None
    if not TASK_ID_MIN <= value <= TASK_ID_MAX:
        return None
    return value


@router.delete("/{task_id}", response_model=SuccessResponse)
def delete_task(
    task_id: str,
    identity: Annotated[IdentitySnapshot, Depends(require_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    """Delete one of the caller's tasks. Unknown, foreign or malformed ids succeed without effect."""
    parsed_id = _parse_task_id(task_id)
    if parsed_id is None:
        return SuccessResponse(success="Task deleted")
    try:
        TaskRepository(db).delete_task(parsed_id, identity.id)
    except StorageError as e:
        raise _storage_failure(e, identity) from e
    return SuccessResponse(success="Task deleted")
