"""Student profile API routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from campus_events.database import get_db
from campus_events.schemas.student import StudentCreate, StudentUpdate, StudentOut, EmailAvailabilityOut
from campus_events.services import student_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)):
    """Create a student profile. Emails are unique regardless of case."""
    return student_service.create_student(db, payload)


@router.get("/", response_model=list[StudentOut])
def list_students(db: Session = Depends(get_db)):
    return student_service.list_students(db)


@router.get("/search", response_model=list[StudentOut])
def search_students(q: Optional[str] = Query(None), db: Session = Depends(get_db)):
    results = student_service.search_students(db, q)
    logger.info("Student search '%s' returned %d results", q, len(results))
    return results


@router.get("/email-availability", response_model=EmailAvailabilityOut)
def check_email_availability(
    email: str = Query(...),
    exclude_id: Optional[int] = Query(None, description="Student whose own email should not count"),
    db: Session = Depends(get_db),
):
    is_unique = student_service.is_email_unique(db, email, exclude_student_id=exclude_id)
    return EmailAvailabilityOut(
        email=email,
        is_unique=is_unique,
        message="Email address is available" if is_unique else "Email address is already in use",
    )


@router.get("/by-email/{email}", response_model=StudentOut)
def get_student_by_email(email: str, db: Session = Depends(get_db)):
    student = student_service.get_student_by_email(db, email)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.get("/department/{department}", response_model=list[StudentOut])
def list_students_by_department(department: str, db: Session = Depends(get_db)):
    return student_service.list_students_by_department(db, department)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, payload: StudentUpdate, db: Session = Depends(get_db)):
    student = student_service.update_student(db, student_id, payload)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    if not student_service.delete_student(db, student_id):
        raise HTTPException(status_code=404, detail="Student not found")
