"""Enrollment manager — validates and records registrations.

``create_registration`` runs its checks in a fixed order and stops at the
first failure:

1. the event exists
2. the event has a free spot
3. the student exists
4. the student is not already registered for the event
5. persist with a server timestamp

Steps 2-5 run while holding the event's lock (in-process) and a row lock on
the event (``SELECT ... FOR UPDATE`` on PostgreSQL), so two requests for the
same event cannot both take the last spot. The unique constraint on
``(event_id, student_id)`` rejects any duplicate that slips past step 4.
"""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.exceptions import (
    CapacityExceededError,
    DuplicateRegistrationError,
    EventNotFoundError,
    StudentNotFoundError,
)
from campus_events.models.event import Event
from campus_events.models.registration import Registration, RegistrationStatus
from campus_events.schemas.registration import RegistrationCreate
from campus_events.services import event_service, student_service
from campus_events.services.locks import event_locks
from campus_events.timeutil import utcnow, to_utc

logger = logging.getLogger(__name__)


def _lock_event_row(db: Session, event_id: int) -> None:
    db.execute(select(Event.id).where(Event.id == event_id).with_for_update())


def registration_exists(db: Session, event_id: int, student_id: int) -> bool:
    return (
        db.query(Registration.id)
        .filter(Registration.event_id == event_id, Registration.student_id == student_id)
        .first()
        is not None
    )


def create_registration(db: Session, data: RegistrationCreate) -> Registration:
    event_id, student_id = data.event_id, data.student_id

    with event_locks.hold(event_id):
        if not event_service.get_event(db, event_id):
            logger.warning("Registration rejected: event %s not found", event_id)
            raise EventNotFoundError(event_id)

        _lock_event_row(db, event_id)
        if not event_service.has_available_spots(db, event_id):
            db.rollback()
            logger.warning("Registration rejected: event %s is full", event_id)
            raise CapacityExceededError(event_id)

        if not student_service.get_student(db, student_id):
            db.rollback()
            logger.warning("Registration rejected: student %s not found", student_id)
            raise StudentNotFoundError(student_id)

        if registration_exists(db, event_id, student_id):
            db.rollback()
            logger.warning("Registration rejected: student %s already registered for event %s", student_id, event_id)
            raise DuplicateRegistrationError(event_id, student_id)

        registration = Registration(**data.model_dump(), registration_timestamp=utcnow())
        db.add(registration)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if registration_exists(db, event_id, student_id):
                logger.warning("Registration for student %s in event %s was created concurrently", student_id, event_id)
                raise DuplicateRegistrationError(event_id, student_id)
            if not event_service.get_event(db, event_id):
                logger.warning("Event %s was deleted while registering student %s", event_id, student_id)
                raise EventNotFoundError(event_id)
            if not student_service.get_student(db, student_id):
                logger.warning("Student %s was deleted while registering for event %s", student_id, event_id)
                raise StudentNotFoundError(student_id)
            raise

    db.refresh(registration)
    logger.info("Registered student %s for event %s (registration %s)", student_id, event_id, registration.id)
    return registration


def get_registration(db: Session, registration_id: int) -> Optional[Registration]:
    return db.query(Registration).filter(Registration.id == registration_id).first()


def delete_registration(db: Session, registration_id: int) -> bool:
    """Cancel a registration by removing it, freeing its spot."""
    registration = get_registration(db, registration_id)
    if not registration:
        logger.warning("Cancellation requested for missing registration %s", registration_id)
        return False
    db.delete(registration)
    db.commit()
    logger.info("Cancelled registration %s", registration_id)
    return True


def list_registrations(db: Session) -> list[Registration]:
    return (
        db.query(Registration)
        .order_by(Registration.registration_timestamp.desc(), Registration.id.desc())
        .all()
    )


def list_registrations_for_event(db: Session, event_id: int) -> list[Registration]:
    return (
        db.query(Registration)
        .filter(Registration.event_id == event_id)
        .order_by(Registration.registration_timestamp, Registration.id)
        .all()
    )


def list_registrations_for_student(db: Session, student_id: int) -> list[Registration]:
    return (
        db.query(Registration)
        .filter(Registration.student_id == student_id)
        .order_by(Registration.registration_timestamp.desc(), Registration.id.desc())
        .all()
    )


def update_registration_status(
    db: Session, registration_id: int, new_status: RegistrationStatus
) -> Optional[Registration]:
    """Set any status from any status; no transition graph is enforced."""
    registration = get_registration(db, registration_id)
    if not registration:
        logger.warning("Status update requested for missing registration %s", registration_id)
        return None
    previous = registration.status
    registration.status = new_status
    db.commit()
    db.refresh(registration)
    logger.info("Registration %s status %s -> %s", registration_id, previous.value, new_status.value)
    return registration


def check_in(db: Session, registration_id: int, at: Optional[datetime] = None) -> Optional[Registration]:
    """Mark a registration as checked in. Repeated check-ins keep the first time."""
    registration = get_registration(db, registration_id)
    if not registration:
        logger.warning("Check-in requested for missing registration %s", registration_id)
        return None
    if not registration.has_checked_in:
        registration.has_checked_in = True
        registration.check_in_time = to_utc(at) if at else utcnow()
        db.commit()
        db.refresh(registration)
        logger.info("Registration %s checked in", registration_id)
    return registration
