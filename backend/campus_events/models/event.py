"""Event ORM model."""
import enum
from sqlalchemy import Column, String, DateTime, Integer, Index, CheckConstraint, Enum as SAEnum
from sqlalchemy import event as sa_event

from campus_events.database import Base
from campus_events.timeutil import utcnow


class EventCategory(str, enum.Enum):
    academic = "Academic"
    workshop = "Workshop"
    seminar = "Seminar"
    conference = "Conference"
    sports = "Sports"
    cultural = "Cultural"
    social = "Social"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(String(500), nullable=False, default="")
    venue = Column(String(300), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    max_capacity = Column(Integer, nullable=False, default=100)
    registration_deadline = Column(DateTime(timezone=True), nullable=True)
    category = Column(
        SAEnum(EventCategory, native_enum=False, length=20),
        nullable=False,
        default=EventCategory.academic,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    modified_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # current_participant_count is attached in models/registration.py

    __table_args__ = (
        CheckConstraint("max_capacity >= 1 AND max_capacity <= 10000", name="ck_events_max_capacity"),
        Index("ix_events_date", "date"),
        Index("ix_events_title", "title"),
        {"sqlite_autoincrement": True},
    )

    @property
    def has_remaining_spots(self) -> bool:
        return self.current_participant_count < self.max_capacity

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title!r}, capacity={self.max_capacity})>"


@sa_event.listens_for(Event, "before_update")
def _touch_modified_at(mapper, connection, target):
    """Pre-persist hook: every flushed mutation refreshes the modification time."""
    target.modified_at = utcnow()
