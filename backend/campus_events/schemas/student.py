"""Pydantic schemas for Students."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from campus_events.models.student import StudentStatus


class StudentBase(BaseModel):
    full_name: str = Field(min_length=2, max_length=100)
    email: str = Field(max_length=254)
    phone_number: Optional[str] = Field(default=None, max_length=15)
    student_identifier: str = Field(default="", max_length=20)
    department: str = Field(default="", max_length=100)
    year_of_study: int = Field(default=1, ge=1, le=8)
    status: StudentStatus = StudentStatus.active

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v):
        # Validated by email-validator, stored as entered; its normalized form lowercases the domain
        _, normalized = validate_email(v)
        return v.strip() if normalized.lower() == v.strip().lower() else normalized


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    """Full replacement of the profile fields (PUT semantics)."""


class StudentOut(BaseModel):
    id: int
    full_name: str
    email: str
    phone_number: Optional[str] = None
    student_identifier: str
    department: str
    year_of_study: int
    enrollment_date: datetime
    status: StudentStatus
    total_events_attended: int

    model_config = {"from_attributes": True}


class EmailAvailabilityOut(BaseModel):
    email: str
    is_unique: bool
    message: str
