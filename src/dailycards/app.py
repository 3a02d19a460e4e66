"""Application factory for the flashcards API."""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dailycards.api import router
from dailycards.config import Settings, settings as default_settings
from dailycards.errors import StorageError
from dailycards.monitoring import request_duration, storage_errors
from dailycards.services.card_store import CardStore
from dailycards.services.progress_service import ProgressService
from dailycards.services.progress_store import JsonProgressStore, ProgressStore, SqlProgressStore

logger = logging.getLogger(__name__)


def build_progress_store(settings: Settings) -> ProgressStore:
    """Create the progress backend selected by PROGRESS_BACKEND."""
    if settings.storage.progress_backend == "sql":
        logger.info("Using SQL progress store")
        return SqlProgressStore(settings.database.url, echo=settings.database.echo)
    logger.info("Using JSON progress store at %s", settings.paths.progress_path)
    return JsonProgressStore(settings.paths.progress_path)


def _describe_validation_error(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        if error.get("type") == "json_invalid":
            return "Invalid JSON body"
        if loc:
            fields.append(".".join(loc))
    if fields:
        return f"Invalid payload: {', '.join(fields)}"
    return "Invalid payload"


def create_app(
    card_store: Optional[CardStore] = None,
    progress_store: Optional[ProgressStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the API with injected stores; missing ones are built from settings."""
    settings = settings or default_settings
    if card_store is None:
        card_store = CardStore(settings.paths.cards_path, settings.catalog.category_ids)
    if progress_store is None:
        progress_store = build_progress_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Daily cards API started, catalog at %s", card_store.path)
        yield
        logger.info("Daily cards API stopped")

    app = FastAPI(title="Daily Language Cards", lifespan=lifespan)
    app.state.card_store = card_store
    app.state.progress_service = ProgressService(progress_store)
    app.state.catalog_settings = settings.catalog

    app.include_router(router)

    @app.middleware("http")
    async def record_duration(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        endpoint = getattr(route, "path", "unmatched")
        request_duration.labels(endpoint=endpoint).observe(time.perf_counter() - start_time)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        storage_errors.inc()
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Storage unavailable"})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        message = "Not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    return app
