"""ORM models. Importing this package registers every table with Base.metadata."""
from campus_events.models.event import Event, EventCategory
from campus_events.models.student import Student, StudentStatus
from campus_events.models.registration import Registration, RegistrationStatus
from campus_events.models.feedback import Feedback

__all__ = [
    "Event", "EventCategory",
    "Student", "StudentStatus",
    "Registration", "RegistrationStatus",
    "Feedback",
]
