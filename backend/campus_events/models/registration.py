"""Registration ORM model, plus the participant counts derived from it."""
import enum
from sqlalchemy import (
    Column, String, DateTime, Integer, Boolean, ForeignKey, UniqueConstraint,
    Enum as SAEnum, select, func,
)
from sqlalchemy.orm import relationship, column_property

from campus_events.database import Base
from campus_events.models.event import Event
from campus_events.models.student import Student
from campus_events.timeutil import utcnow


class RegistrationStatus(str, enum.Enum):
    pending = "Pending"
    confirmed = "Confirmed"
    cancelled = "Cancelled"
    waitlisted = "Waitlisted"
    completed = "Completed"


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    registration_timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(
        SAEnum(RegistrationStatus, native_enum=False, length=20),
        nullable=False,
        default=RegistrationStatus.confirmed,
    )
    special_requirements = Column(String(500), nullable=False, default="")
    has_checked_in = Column(Boolean, nullable=False, default=False)
    check_in_time = Column(DateTime(timezone=True), nullable=True)
    notes = Column(String(200), nullable=False, default="")

    # Unidirectional: events and students hold no collection of registrations
    event = relationship("Event")
    student = relationship("Student")

    __table_args__ = (
        UniqueConstraint("event_id", "student_id", name="uq_registrations_event_student"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Registration(id={self.id}, event={self.event_id}, student={self.student_id}, status={self.status})>"


Event.current_participant_count = column_property(
    select(func.count(Registration.id))
    .where(Registration.event_id == Event.id)
    .correlate_except(Registration)
    .scalar_subquery()
)

Student.total_events_attended = column_property(
    select(func.count(Registration.id))
    .where(Registration.student_id == Student.id)
    .correlate_except(Registration)
    .scalar_subquery()
)
