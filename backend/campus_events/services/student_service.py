"""Student directory — profile CRUD with case-insensitive email uniqueness."""
import logging
from typing import Optional

from sqlalchemy import or_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_events.exceptions import DuplicateEmailError
from campus_events.models.student import Student
from campus_events.schemas.student import StudentCreate, StudentUpdate
from campus_events.timeutil import utcnow

logger = logging.getLogger(__name__)


def is_email_unique(db: Session, email: str, exclude_student_id: Optional[int] = None) -> bool:
    """True when no other student holds ``email`` (compared case-insensitively)."""
    query = db.query(Student.id).filter(func.lower(Student.email) == email.lower())
    if exclude_student_id is not None:
        query = query.filter(Student.id != exclude_student_id)
    return query.first() is None


def _commit_profile(db: Session, email: str) -> None:
    # The unique index on lower(email) catches a racing writer the probe missed
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Email %s was claimed concurrently", email)
        raise DuplicateEmailError(email)


def create_student(db: Session, data: StudentCreate) -> Student:
    if not is_email_unique(db, data.email):
        logger.warning("Rejected student profile: email %s already in use", data.email)
        raise DuplicateEmailError(data.email)

    student = Student(**data.model_dump(), enrollment_date=utcnow())
    db.add(student)
    _commit_profile(db, data.email)
    db.refresh(student)
    logger.info("Created student %s (%s)", student.id, student.full_name)
    return student


def get_student(db: Session, student_id: int) -> Optional[Student]:
    return db.query(Student).filter(Student.id == student_id).first()


def get_student_by_email(db: Session, email: str) -> Optional[Student]:
    return db.query(Student).filter(func.lower(Student.email) == email.lower()).first()


def update_student(db: Session, student_id: int, data: StudentUpdate) -> Optional[Student]:
    """Replace a profile. Returns None for an unknown id."""
    student = get_student(db, student_id)
    if not student:
        logger.warning("Update requested for missing student %s", student_id)
        return None

    if not is_email_unique(db, data.email, exclude_student_id=student_id):
        logger.warning("Rejected update of student %s: email %s already in use", student_id, data.email)
        raise DuplicateEmailError(data.email)

    for field, value in data.model_dump().items():
        setattr(student, field, value)
    _commit_profile(db, data.email)
    db.refresh(student)
    logger.info("Updated student %s", student_id)
    return student


def delete_student(db: Session, student_id: int) -> bool:
    student = get_student(db, student_id)
    if not student:
        logger.warning("Delete requested for missing student %s", student_id)
        return False
    db.delete(student)
    db.commit()
    logger.info("Deleted student %s", student_id)
    return True


def list_students(db: Session) -> list[Student]:
    return db.query(Student).order_by(Student.full_name, Student.id).all()


def search_students(db: Session, term: Optional[str]) -> list[Student]:
    """Case-insensitive substring match over name, email, student identifier and department."""
    if not term or not term.strip():
        return list_students(db)

    needle = term.strip().lower()
    return (
        db.query(Student)
        .filter(
            or_(
                func.lower(Student.full_name).contains(needle, autoescape=True),
                func.lower(Student.email).contains(needle, autoescape=True),
                func.lower(Student.student_identifier).contains(needle, autoescape=True),
                func.lower(Student.department).contains(needle, autoescape=True),
            )
        )
        .order_by(Student.full_name, Student.id)
        .all()
    )


def list_students_by_department(db: Session, department: str) -> list[Student]:
    return (
        db.query(Student)
        .filter(func.lower(Student.department) == department.lower())
        .order_by(Student.full_name, Student.id)
        .all()
    )
