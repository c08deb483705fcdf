"""Registration API routes — enrollment, cancellation, status and check-in."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from campus_events.database import get_db
from campus_events.schemas.registration import RegistrationCreate, RegistrationOut, RegistrationStatusUpdate
from campus_events.services import registration_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=RegistrationOut, status_code=status.HTTP_201_CREATED)
def create_registration(payload: RegistrationCreate, db: Session = Depends(get_db)):
    """Register a student for an event.

    Fails with 404 when the event or student does not exist, and 400 when the
    event is full or the student is already registered.
    """
    return registration_service.create_registration(db, payload)


@router.get("/", response_model=list[RegistrationOut])
def list_registrations(db: Session = Depends(get_db)):
    return registration_service.list_registrations(db)


@router.get("/event/{event_id}", response_model=list[RegistrationOut])
def list_registrations_for_event(event_id: int, db: Session = Depends(get_db)):
    return registration_service.list_registrations_for_event(db, event_id)


@router.get("/student/{student_id}", response_model=list[RegistrationOut])
def list_registrations_for_student(student_id: int, db: Session = Depends(get_db)):
    return registration_service.list_registrations_for_student(db, student_id)


@router.get("/{registration_id}", response_model=RegistrationOut)
def get_registration(registration_id: int, db: Session = Depends(get_db)):
    registration = registration_service.get_registration(db, registration_id)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")
    return registration


@router.delete("/{registration_id}", status_code=status.HTTP_204_NO_CONTENT)
def cancel_registration(registration_id: int, db: Session = Depends(get_db)):
    if not registration_service.delete_registration(db, registration_id):
        raise HTTPException(status_code=404, detail="Registration not found")


@router.patch("/{registration_id}/status", response_model=RegistrationOut)
def update_registration_status(
    registration_id: int, payload: RegistrationStatusUpdate, db: Session = Depends(get_db)
):
    registration = registration_service.update_registration_status(db, registration_id, payload.status)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")
    return registration


@router.post("/{registration_id}/check-in", response_model=RegistrationOut)
def check_in(registration_id: int, db: Session = Depends(get_db)):
    registration = registration_service.check_in(db, registration_id)
    if not registration:
        raise HTTPException(status_code=404, detail="Registration not found")
    return registration
