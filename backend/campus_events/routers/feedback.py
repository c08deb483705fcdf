"""Feedback API routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from campus_events.database import get_db
from campus_events.schemas.feedback import FeedbackCreate, FeedbackOut, FeedbackSummaryOut
from campus_events.services import feedback_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=FeedbackOut, status_code=status.HTTP_201_CREATED)
def submit_feedback(payload: FeedbackCreate, db: Session = Depends(get_db)):
    """Submit feedback. The student must be registered and may submit once per event."""
    return feedback_service.submit_feedback(db, payload)


@router.get("/", response_model=list[FeedbackOut])
def list_feedback(db: Session = Depends(get_db)):
    return feedback_service.list_feedback(db)


@router.get("/event/{event_id}", response_model=list[FeedbackOut])
def list_feedback_for_event(event_id: int, db: Session = Depends(get_db)):
    return feedback_service.list_feedback_for_event(db, event_id)


@router.get("/event/{event_id}/average-rating")
def get_average_rating(event_id: int, db: Session = Depends(get_db)):
    return {"event_id": event_id, "average_rating": feedback_service.get_average_rating(db, event_id)}


@router.get("/event/{event_id}/summary", response_model=FeedbackSummaryOut)
def get_feedback_summary(event_id: int, db: Session = Depends(get_db)):
    return feedback_service.get_feedback_summary(db, event_id)


@router.get("/event/{event_id}/student/{student_id}/submitted")
def has_submitted_feedback(event_id: int, student_id: int, db: Session = Depends(get_db)):
    return {
        "event_id": event_id,
        "student_id": student_id,
        "has_submitted": feedback_service.has_submitted_feedback(db, event_id, student_id),
    }


@router.get("/student/{student_id}", response_model=list[FeedbackOut])
def list_feedback_for_student(student_id: int, db: Session = Depends(get_db)):
    return feedback_service.list_feedback_for_student(db, student_id)


@router.get("/{feedback_id}", response_model=FeedbackOut)
def get_feedback(feedback_id: int, db: Session = Depends(get_db)):
    feedback = feedback_service.get_feedback(db, feedback_id)
    if not feedback:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return feedback
