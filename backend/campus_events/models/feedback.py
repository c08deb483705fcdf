"""Feedback ORM model."""
from sqlalchemy import (
    Column, String, DateTime, Integer, Boolean, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import relationship

from campus_events.database import Base
from campus_events.timeutil import utcnow


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    organization_rating = Column(Integer, nullable=False, default=3)
    content_rating = Column(Integer, nullable=False, default=3)
    venue_rating = Column(Integer, nullable=False, default=3)
    comment = Column(String(1000), nullable=False, default="")
    suggestions = Column(String(500), nullable=False, default="")
    would_recommend = Column(Boolean, nullable=False, default=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    event = relationship("Event")
    student = relationship("Student")

    __table_args__ = (
        UniqueConstraint("event_id", "student_id", name="uq_feedback_event_student"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating"),
        {"sqlite_autoincrement": True},
    )

    @property
    def average_score(self) -> float:
        """Mean of the overall rating and the three sub-ratings."""
        return (self.rating + self.organization_rating + self.content_rating + self.venue_rating) / 4.0

    def __repr__(self) -> str:
        return f"<Feedback(id={self.id}, event={self.event_id}, student={self.student_id}, rating={self.rating})>"
