"""Pydantic schemas for Feedback."""
from datetime import datetime
from pydantic import BaseModel, Field


class FeedbackCreate(BaseModel):
    event_id: int
    student_id: int
    rating: int = Field(ge=1, le=5)
    organization_rating: int = Field(default=3, ge=1, le=5)
    content_rating: int = Field(default=3, ge=1, le=5)
    venue_rating: int = Field(default=3, ge=1, le=5)
    comment: str = Field(default="", max_length=1000)
    suggestions: str = Field(default="", max_length=500)
    would_recommend: bool = True


class FeedbackOut(BaseModel):
    id: int
    event_id: int
    student_id: int
    rating: int
    organization_rating: int
    content_rating: int
    venue_rating: int
    comment: str
    suggestions: str
    would_recommend: bool
    submitted_at: datetime
    average_score: float

    model_config = {"from_attributes": True}


class FeedbackSummaryOut(BaseModel):
    total_feedbacks: int
    average_rating: float
    average_organization_rating: float
    average_content_rating: float
    average_venue_rating: float
    recommendation_percentage: float
    rating_distribution: dict[int, int]
    overall_score: float

    model_config = {"from_attributes": True}
