"""Pydantic request models for event mutations."""

from pydantic import BaseModel, ConfigDict, StrictInt

from models.events import VideoType


class EventCreateRequest(BaseModel):
    """New event fields; omitted fields take the add-event defaults."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    attendees: list[str] | None = None
    start_date: str | None = None
    duration_mins: StrictInt | None = None
    video_type: VideoType | None = None


class EventUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    attendees: list[str] | None = None
    start_date: str | None = None
    duration_mins: StrictInt | None = None
    video_type: VideoType | None = None
