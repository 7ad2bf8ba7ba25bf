"""FastAPI dependencies for authentication and shared resources."""

import secrets

from fastapi import Header, HTTPException, Request, status

from core.config import CALENDAR_API_KEY
from services.scheduler import EventStore


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """
    Check the X-API-Key header against CALENDAR_API_KEY.

    Raises:
        HTTPException: 500 if no key is configured, 401 if the key differs
    """
    if not CALENDAR_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Calendar API key is not configured (set CALENDAR_API_KEY)",
                "code": "INTERNAL_ERROR",
                "details": [],
            },
        )

    # Use constant-time comparison to prevent timing attacks
    if not secrets.compare_digest(x_api_key, CALENDAR_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "X-API-Key does not match the calendar API key",
                "code": "UNAUTHORIZED",
                "details": [],
            },
        )

    return x_api_key


def get_store(request: Request) -> EventStore:
    """The single event store created at application startup."""
    return request.app.state.store
