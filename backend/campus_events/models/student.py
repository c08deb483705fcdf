"""Student ORM model."""
import enum
from sqlalchemy import Column, String, DateTime, Integer, Index, Enum as SAEnum, func

from campus_events.database import Base
from campus_events.timeutil import utcnow


class StudentStatus(str, enum.Enum):
    active = "Active"
    inactive = "Inactive"
    suspended = "Suspended"
    graduated = "Graduated"


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(15), nullable=True)
    student_identifier = Column(String(20), nullable=False, default="")
    department = Column(String(100), nullable=False, default="")
    year_of_study = Column(Integer, nullable=False, default=1)
    enrollment_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(SAEnum(StudentStatus, native_enum=False, length=20), nullable=False, default=StudentStatus.active)

    # total_events_attended is attached in models/registration.py

    __table_args__ = (
        Index("ix_students_student_identifier", "student_identifier"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, name={self.full_name!r}, email={self.email!r})>"


# Case-insensitive uniqueness, checked atomically by the database
Index("ix_students_email_lower", func.lower(Student.email), unique=True)
