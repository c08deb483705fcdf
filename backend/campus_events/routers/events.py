"""Event API routes — delegates to event_service."""
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from campus_events.database import get_db
from campus_events.models.event import EventCategory
from campus_events.schemas.event import EventCreate, EventUpdate, EventOut, CapacityStatusOut
from campus_events.services import event_service
from campus_events.timeutil import to_utc

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    return event_service.create_event(db, payload)


@router.get("/", response_model=list[EventOut])
def list_events(db: Session = Depends(get_db)):
    """List all events, soonest first."""
    return event_service.list_events(db)


@router.get("/search", response_model=list[EventOut])
def search_events(q: Optional[str] = Query(None, description="Text matched against title, description and venue"),
                  db: Session = Depends(get_db)):
    results = event_service.search_events(db, q)
    logger.info("Event search '%s' returned %d results", q, len(results))
    return results


@router.get("/category/{category}", response_model=list[EventOut])
def list_events_by_category(category: EventCategory, db: Session = Depends(get_db)):
    return event_service.list_events_by_category(db, category)


@router.get("/date-range", response_model=list[EventOut])
def list_events_by_date_range(
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: Session = Depends(get_db),
):
    """Events scheduled between start and end, inclusive."""
    if to_utc(start) > to_utc(end):
        raise HTTPException(status_code=400, detail="Start date must not be after end date")
    return event_service.list_events_by_date_range(db, start, end)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    event = event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: int, payload: EventUpdate, db: Session = Depends(get_db)):
    event = event_service.update_event(db, event_id, payload)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    """Delete an event along with its registrations and feedback."""
    if not event_service.delete_event(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")


@router.get("/{event_id}/capacity", response_model=CapacityStatusOut)
def get_capacity_status(event_id: int, db: Session = Depends(get_db)):
    capacity = event_service.get_capacity_status(db, event_id)
    if not capacity:
        raise HTTPException(status_code=404, detail="Event not found")
    return capacity
