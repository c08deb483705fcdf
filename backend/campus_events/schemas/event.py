"""Pydantic schemas for Events."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from campus_events.models.event import EventCategory


class EventBase(BaseModel):
    title: str = Field(min_length=3, max_length=200)
    description: str = Field(default="", max_length=500)
    venue: str = Field(min_length=2, max_length=300)
    date: datetime
    max_capacity: int = Field(default=100, ge=1, le=10000)
    registration_deadline: Optional[datetime] = None
    category: EventCategory = EventCategory.academic


class EventCreate(EventBase):
    pass


class EventUpdate(EventBase):
    """Full replacement of the mutable fields (PUT semantics)."""


class EventOut(BaseModel):
    id: int
    title: str
    description: str
    venue: str
    date: datetime
    max_capacity: int
    registration_deadline: Optional[datetime] = None
    category: EventCategory
    created_at: datetime
    modified_at: datetime
    current_participant_count: int
    has_remaining_spots: bool

    model_config = {"from_attributes": True}


class CapacityStatusOut(BaseModel):
    event_id: int
    has_open_spots: bool
    remaining_capacity: int
    total_capacity: int
    current_participants: int

    model_config = {"from_attributes": True}
