"""FastAPI application entrypoint. No business logic; only wiring, error rendering and startup."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.api import router
from taskboard.api.deps import LoginRequired
from taskboard.core.config import settings
from taskboard.core.database import init_db
from taskboard.services.sessions import SessionManager, SessionStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Failing to open the store is fatal: let the exception stop startup.
    init_db()
    logger.info("Taskboard started (env=%s)", settings.APP_ENV)
    yield
    logger.info("Taskboard stopped; %s in-memory sessions dropped", len(app.state.sessions.store))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


async def login_required_handler(request: Request, exc: LoginRequired) -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


def create_app(session_manager: SessionManager | None = None) -> FastAPI:
    """Build the application. Pass a SessionManager to share or inspect session state."""
    app = FastAPI(
        title="Taskboard",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.sessions = session_manager or SessionManager(
        SessionStore(), ttl=timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(LoginRequired, login_required_handler)

    app.include_router(router)
    return app


app = create_app()
