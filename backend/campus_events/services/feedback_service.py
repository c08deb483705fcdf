"""Feedback aggregator — eligibility-gated submission and per-event rating summaries."""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.exceptions import DuplicateFeedbackError, NotRegisteredError
from campus_events.models.feedback import Feedback
from campus_events.schemas.feedback import FeedbackCreate
from campus_events.services.locks import feedback_locks
from campus_events.services.registration_service import registration_exists
from campus_events.timeutil import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedbackSummary:
    total_feedbacks: int = 0
    average_rating: float = 0.0
    average_organization_rating: float = 0.0
    average_content_rating: float = 0.0
    average_venue_rating: float = 0.0
    recommendation_percentage: float = 0.0
    rating_distribution: dict[int, int] = field(default_factory=dict)
    overall_score: float = 0.0


def has_submitted_feedback(db: Session, event_id: int, student_id: int) -> bool:
    return (
        db.query(Feedback.id)
        .filter(Feedback.event_id == event_id, Feedback.student_id == student_id)
        .first()
        is not None
    )


def submit_feedback(db: Session, data: FeedbackCreate) -> Feedback:
    """Record feedback from a registered student, at most once per event."""
    event_id, student_id = data.event_id, data.student_id

    with feedback_locks.hold((event_id, student_id)):
        if has_submitted_feedback(db, event_id, student_id):
            logger.warning("Feedback rejected: student %s already reviewed event %s", student_id, event_id)
            raise DuplicateFeedbackError(event_id, student_id)

        if not registration_exists(db, event_id, student_id):
            logger.warning("Feedback rejected: student %s is not registered for event %s", student_id, event_id)
            raise NotRegisteredError(event_id, student_id)

        feedback = Feedback(**data.model_dump(), submitted_at=utcnow())
        db.add(feedback)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if has_submitted_feedback(db, event_id, student_id):
                logger.warning("Feedback from student %s for event %s was submitted concurrently", student_id, event_id)
                raise DuplicateFeedbackError(event_id, student_id)
            if not registration_exists(db, event_id, student_id):
                logger.warning("Registration of student %s for event %s was removed mid-submission", student_id, event_id)
                raise NotRegisteredError(event_id, student_id)
            raise

    db.refresh(feedback)
    logger.info("Recorded feedback %s (rating %d) for event %s", feedback.id, feedback.rating, event_id)
    return feedback


def get_feedback(db: Session, feedback_id: int) -> Optional[Feedback]:
    return db.query(Feedback).filter(Feedback.id == feedback_id).first()


def list_feedback(db: Session) -> list[Feedback]:
    return db.query(Feedback).order_by(Feedback.submitted_at.desc(), Feedback.id.desc()).all()


def list_feedback_for_event(db: Session, event_id: int) -> list[Feedback]:
    return (
        db.query(Feedback)
        .filter(Feedback.event_id == event_id)
        .order_by(Feedback.submitted_at.desc(), Feedback.id.desc())
        .all()
    )


def list_feedback_for_student(db: Session, student_id: int) -> list[Feedback]:
    return (
        db.query(Feedback)
        .filter(Feedback.student_id == student_id)
        .order_by(Feedback.submitted_at.desc(), Feedback.id.desc())
        .all()
    )


def get_average_rating(db: Session, event_id: int) -> float:
    average = db.query(func.avg(Feedback.rating)).filter(Feedback.event_id == event_id).scalar()
    return float(average) if average is not None else 0.0


def _mean(values: list[float]) -> float:
    return round(sum(values) / len(values), 2)


def get_feedback_summary(db: Session, event_id: int) -> FeedbackSummary:
    entries = db.query(Feedback).filter(Feedback.event_id == event_id).all()
    if not entries:
        return FeedbackSummary()

    total = len(entries)
    recommended = sum(1 for f in entries if f.would_recommend)
    return FeedbackSummary(
        total_feedbacks=total,
        average_rating=_mean([f.rating for f in entries]),
        average_organization_rating=_mean([f.organization_rating for f in entries]),
        average_content_rating=_mean([f.content_rating for f in entries]),
        average_venue_rating=_mean([f.venue_rating for f in entries]),
        recommendation_percentage=round(recommended / total * 100, 2),
        rating_distribution=dict(Counter(f.rating for f in entries)),
        overall_score=_mean([f.average_score for f in entries]),
    )
