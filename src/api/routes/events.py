"""Event CRUD and timeline layout endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_store, verify_api_key
from api.models.requests import EventCreateRequest, EventUpdateRequest
from api.models.responses import (
    DayLayoutResponse,
    ErrorCodes,
    EventResponse,
    TimelineEventResponse,
)
from services.calendar import event_count_label, new_pending_event, span_layout
from services.scheduler import EventStore
from services.timeline import format_time_label

router = APIRouter(prefix="/v1", dependencies=[Depends(verify_api_key)])


def _not_found(event_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": "Event not found",
            "code": ErrorCodes.NOT_FOUND,
            "details": [f"No event with id '{event_id}'"],
        },
    )


def _check_span(start: date, end: date) -> None:
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid date span",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": [f"end ({end}) is before start ({start})"],
            },
        )


@router.get("/events", response_model=list[EventResponse])
async def list_events(
    start: date,
    end: date | None = None,
    store: EventStore = Depends(get_store),
):
    """Events starting within [start, end] (whole days), in start order."""
    end = end or start
    _check_span(start, end)
    return store.query(start, end)


@router.get("/events/{event_id}", response_model=EventResponse)
async def get_event(event_id: str, store: EventStore = Depends(get_store)):
    event = store.get(event_id)
    if event is None:
        raise _not_found(event_id)
    return event


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(body: EventCreateRequest, store: EventStore = Depends(get_store)):
    """
    Create an event. Omitted fields fall back to the add-event defaults
    (start at the next 5-minute boundary, one hour, no video).
    """
    pending = {**new_pending_event(), **body.model_dump(exclude_unset=True)}
    return store.create(pending)


@router.patch("/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    body: EventUpdateRequest,
    store: EventStore = Depends(get_store),
):
    """Apply only the fields present in the body."""
    if store.get(event_id) is None:
        raise _not_found(event_id)
    store.update(event_id, body.model_dump(exclude_unset=True))
    return store.get(event_id)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str, store: EventStore = Depends(get_store)):
    """Delete an event. Deleting an unknown id succeeds without effect."""
    store.delete(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/layout", response_model=list[DayLayoutResponse])
async def get_layout(
    start: date,
    end: date | None = None,
    store: EventStore = Depends(get_store),
):
    """Per-day events with timeline placements for a day or week view."""
    end = end or start
    _check_span(start, end)

    days = []
    for layout in span_layout(store, start, end):
        placements = layout["placements"]
        days.append(
            {
                "date": layout["date"],
                "event_count": len(layout["events"]),
                "event_count_label": event_count_label(len(layout["events"])),
                "events": [
                    TimelineEventResponse(
                        **event,
                        time_label=format_time_label(event["start_date"]),
                        placement=placements[event["id"]],
                    )
                    for event in layout["events"]
                ],
            }
        )
    return days
