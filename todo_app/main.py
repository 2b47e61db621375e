"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.routes import router as todos_router
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .repositories.todo_store import StoreLoadError, TodoStore
from .settings import Settings, get_settings

configure_logging()
logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(API_PREFIX)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. The store is loaded when the app starts."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Todo API (environment=%s)", settings.environment)
        try:
            app.state.todo_store = TodoStore.load(settings.data_file)
        except StoreLoadError:
            logger.exception("Failed to load todo data from %s", settings.data_file)
            raise
        yield
        logger.info("Shutting down Todo API...")

    app = FastAPI(
        title="Todo API",
        description="A simple todo management API backed by a JSON file",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.exception_handler(StarletteHTTPException)
    async def message_http_exception_handler(request: Request, exc: StarletteHTTPException):
        if _is_api_request(request):
            message = exc.detail if isinstance(exc.detail, str) else "Request failed"
            return JSONResponse(
                status_code=exc.status_code,
                content={"message": message},
                headers=getattr(exc, "headers", None),
            )
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def message_validation_exception_handler(request: Request, exc: RequestValidationError):
        if _is_api_request(request):
            message = "Invalid input"
            errors = exc.errors()
            if errors:
                message = errors[0].get("msg", message)
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"message": message},
            )
        return await request_validation_exception_handler(request, exc)

    @app.middleware("http")
    async def content_security_policy_middleware(request: Request, call_next):
        response = await call_next(request)
        response.headers["Content-Security-Policy"] = settings.content_security_policy
        return response

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    def health(request: Request) -> dict[str, object]:
        """Liveness probe with the number of stored todos."""
        return {"status": "ok", "todos": len(request.app.state.todo_store)}

    app.include_router(todos_router, prefix=API_PREFIX)

    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; front end disabled", settings.static_dir)

    return app


app = create_app()
