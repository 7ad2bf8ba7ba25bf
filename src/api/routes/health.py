"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_store
from api.models.responses import HealthResponse
from core.config import API_VERSION
from core.errors import PersistenceError
from services.scheduler import EventStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: EventStore = Depends(get_store)):
    """
    Health check endpoint for monitoring.

    Returns 200 if the storage backend answers, 503 otherwise.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        store.backend.get(store.key)
    except PersistenceError as e:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                storage_available=False,
                event_count=len(store),
                timestamp=timestamp,
                error=str(e),
            ).model_dump(),
        )

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        storage_available=True,
        event_count=len(store),
        timestamp=timestamp,
    )
