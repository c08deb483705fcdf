"""Domain errors raised by the service layer.

Routers never see HTTP concerns from services: ``main.py`` maps
``NotFoundError`` to 404 and ``BusinessRuleError`` to 400.
"""
from typing import Optional


class CampusEventsError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, entity_id: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id


class NotFoundError(CampusEventsError):
    """A referenced entity does not exist."""


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: int):
        super().__init__(f"Event with ID {event_id} could not be located", event_id)


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_id: int):
        super().__init__(f"Student with ID {student_id} could not be located", student_id)


class BusinessRuleError(CampusEventsError):
    """A request was well-formed but violates a business rule."""


class DuplicateEmailError(BusinessRuleError):
    def __init__(self, email: str):
        super().__init__(f"A student with email address '{email}' already exists.")
        self.email = email


class CapacityExceededError(BusinessRuleError):
    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} has reached maximum capacity.", event_id)


class DuplicateRegistrationError(BusinessRuleError):
    def __init__(self, event_id: int, student_id: int):
        super().__init__(f"Student {student_id} is already registered for event {event_id}.", event_id)
        self.student_id = student_id


class DuplicateFeedbackError(BusinessRuleError):
    def __init__(self, event_id: int, student_id: int):
        super().__init__(f"Student {student_id} has already provided feedback for event {event_id}.", event_id)
        self.student_id = student_id


class NotRegisteredError(BusinessRuleError):
    def __init__(self, event_id: int, student_id: int):
        super().__init__(
            f"Student {student_id} must be registered for event {event_id} to provide feedback.", event_id
        )
        self.student_id = student_id
