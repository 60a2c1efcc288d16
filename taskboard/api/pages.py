"""HTML page shells: entry (login/signup) page and dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from taskboard.api.deps import require_page_identity
from taskboard.core.config import settings
from taskboard.schemas.auth import IdentitySnapshot

router = APIRouter()


@router.get("/", include_in_schema=False)
def entry_page() -> FileResponse:
    return FileResponse(settings.PAGES_DIR / "index.html", media_type="text/html")


@router.get("/dashboard", include_in_schema=False)
def dashboard_page(
    _identity: Annotated[IdentitySnapshot, Depends(require_page_identity)],
) -> FileResponse:
    return FileResponse(settings.PAGES_DIR / "dashboard.html", media_type="text/html")
