"""FastAPI application entry point."""

import logging
import sqlite3
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.logging import RequestLog, get_client_ip, log_request
from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import events_router, health_router
from core.config import API_DEBUG, API_VERSION, REQUEST_LOG_ENABLED
from core.database import SQLiteKeyValueStore
from core.errors import InvalidEventError, PersistenceError
from services.scheduler import EventStore

logging.basicConfig(
    level=logging.DEBUG if API_DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup: one store for the whole process, loaded from SQLite
    app.state.store = EventStore(SQLiteKeyValueStore())
    logger.info("Event store ready with %d events", len(app.state.store))

    yield


app = FastAPI(
    title="Calendar API",
    description="REST API for creating, querying and laying out calendar events",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Record every request in the api_requests table."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        status_code=500,
    )
    try:
        response = await call_next(request)
        request_log.status_code = response.status_code
        return response
    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        if REQUEST_LOG_ENABLED:
            try:
                log_request(request_log)
            except (sqlite3.Error, OSError) as e:
                # Don't fail the request if logging fails
                logger.warning("Request log write failed for %s: %s", request_log.request_id, e)


def _error_content(error: str, code: str, details: list[str]) -> dict:
    return {"detail": ErrorResponse(error=error, code=code, details=details).model_dump()}


@app.exception_handler(InvalidEventError)
async def invalid_event_handler(request: Request, exc: InvalidEventError):
    """Field validation failures from the event store."""
    details = [detail.strip() for detail in str(exc).split(";") if detail.strip()]
    return JSONResponse(
        status_code=422,
        content=_error_content("Event validation failed", ErrorCodes.VALIDATION_ERROR, details),
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    """The backing store rejected a read or write; nothing was changed."""
    return JSONResponse(
        status_code=503,
        content=_error_content("Event storage unavailable", ErrorCodes.STORAGE_UNAVAILABLE, [str(exc)]),
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_content("Internal server error", ErrorCodes.INTERNAL_ERROR, []),
    )


# Include routers
app.include_router(health_router)
app.include_router(events_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
