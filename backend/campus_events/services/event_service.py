"""Event directory — event CRUD, search and capacity arithmetic.

Update and delete on an unknown id return ``None`` / ``False`` rather than
raising; callers decide how to surface that.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import or_, func
from sqlalchemy.orm import Session

from campus_events.models.event import Event, EventCategory
from campus_events.models.registration import Registration
from campus_events.schemas.event import EventCreate, EventUpdate
from campus_events.timeutil import utcnow, to_utc

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = (
    "title", "description", "venue", "date", "max_capacity", "registration_deadline", "category",
)


@dataclass(frozen=True)
class CapacityStatus:
    event_id: int
    has_open_spots: bool
    remaining_capacity: int
    total_capacity: int
    current_participants: int


def _field_values(data: EventCreate | EventUpdate) -> dict:
    values = data.model_dump(include=set(MUTABLE_FIELDS))
    values["date"] = to_utc(values["date"])
    values["registration_deadline"] = to_utc(values["registration_deadline"])
    return values


def create_event(db: Session, data: EventCreate) -> Event:
    now = utcnow()
    event = Event(**_field_values(data), created_at=now, modified_at=now)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event '%s' (%s) with capacity %d", event.title, event.id, event.max_capacity)
    return event


def get_event(db: Session, event_id: int) -> Optional[Event]:
    return db.query(Event).filter(Event.id == event_id).first()


def update_event(db: Session, event_id: int, data: EventUpdate) -> Optional[Event]:
    """Overwrite every mutable field; the modification time is refreshed on flush."""
    event = get_event(db, event_id)
    if not event:
        logger.warning("Update requested for missing event %s", event_id)
        return None

    for field, value in _field_values(data).items():
        setattr(event, field, value)

    db.commit()
    db.refresh(event)
    logger.info("Updated event %s", event_id)
    return event


def delete_event(db: Session, event_id: int) -> bool:
    """Delete an event; its registrations and feedback go with it (ON DELETE CASCADE)."""
    event = get_event(db, event_id)
    if not event:
        logger.warning("Delete requested for missing event %s", event_id)
        return False
    db.delete(event)
    db.commit()
    logger.info("Deleted event %s", event_id)
    return True


def list_events(db: Session) -> list[Event]:
    return db.query(Event).order_by(Event.date, Event.id).all()


def search_events(db: Session, query: Optional[str]) -> list[Event]:
    """Case-insensitive substring match over title, description and venue."""
    if not query or not query.strip():
        return list_events(db)

    needle = query.strip().lower()
    return (
        db.query(Event)
        .filter(
            or_(
                func.lower(Event.title).contains(needle, autoescape=True),
                func.lower(Event.description).contains(needle, autoescape=True),
                func.lower(Event.venue).contains(needle, autoescape=True),
            )
        )
        .order_by(Event.date, Event.id)
        .all()
    )


def list_events_by_category(db: Session, category: EventCategory) -> list[Event]:
    return db.query(Event).filter(Event.category == category).order_by(Event.date, Event.id).all()


def list_events_by_date_range(db: Session, start: datetime, end: datetime) -> list[Event]:
    """Events scheduled within [start, end], both bounds inclusive."""
    return (
        db.query(Event)
        .filter(Event.date >= to_utc(start), Event.date <= to_utc(end))
        .order_by(Event.date, Event.id)
        .all()
    )


def count_participants(db: Session, event_id: int) -> int:
    """Live registrations for an event, counted fresh from the store."""
    return db.query(func.count(Registration.id)).filter(Registration.event_id == event_id).scalar()


def has_available_spots(db: Session, event_id: int) -> bool:
    event = get_event(db, event_id)
    if not event:
        return False
    return count_participants(db, event_id) < event.max_capacity


def get_available_capacity(db: Session, event_id: int) -> int:
    event = get_event(db, event_id)
    if not event:
        return 0
    return max(0, event.max_capacity - count_participants(db, event_id))


def get_capacity_status(db: Session, event_id: int) -> Optional[CapacityStatus]:
    event = get_event(db, event_id)
    if not event:
        return None
    current = count_participants(db, event_id)
    return CapacityStatus(
        event_id=event.id,
        has_open_spots=current < event.max_capacity,
        remaining_capacity=max(0, event.max_capacity - current),
        total_capacity=event.max_capacity,
        current_participants=current,
    )
