"""Pydantic schemas for Registrations."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from campus_events.models.registration import RegistrationStatus


class RegistrationCreate(BaseModel):
    event_id: int
    student_id: int
    status: RegistrationStatus = RegistrationStatus.confirmed
    special_requirements: str = Field(default="", max_length=500)
    notes: str = Field(default="", max_length=200)


class RegistrationStatusUpdate(BaseModel):
    status: RegistrationStatus


class RegistrationOut(BaseModel):
    id: int
    event_id: int
    student_id: int
    registration_timestamp: datetime
    status: RegistrationStatus
    special_requirements: str
    has_checked_in: bool
    check_in_time: Optional[datetime] = None
    notes: str

    model_config = {"from_attributes": True}
