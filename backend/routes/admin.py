# backend/routes/admin.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas.user import ApproveStudentResponse, PendingStudentOut, StudentOut

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


# Students waiting for approval
@router.get("/pending-students", response_model=List[PendingStudentOut])
def get_pending_students(db: Session = Depends(get_db)):
    try:
        return db.query(User).filter(User.role == "student", User.approved.is_(False)).all()
    except SQLAlchemyError:
        logger.exception("Error fetching pending students")
        raise HTTPException(status_code=500, detail="Error fetching pending students")


# Approve a student sign-up. An unknown username still answers 200,
# with role and username left empty.
@router.post("/approve-student/{username}", response_model=ApproveStudentResponse)
def approve_student(username: str, db: Session = Depends(get_db)):
    try:
        student = db.query(User).filter(User.username == username, User.role == "student").first()
        if student:
            student.approved = True
            db.commit()
            db.refresh(student)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error approving student")
        raise HTTPException(status_code=500, detail="Error approving student")

    if not student:
        logger.warning("approve-student: no student named %s", username)
        return {"message": "Student approved successfully", "role": None, "username": None}

    logger.info("Student %s approved", student.username)
    return {"message": "Student approved successfully", "role": student.role, "username": student.username}


# Approved students. The path segment is accepted but does not filter anything.
@router.get("/enrolled-students/{username}", response_model=List[StudentOut])
def get_enrolled_students(username: str, db: Session = Depends(get_db)):
    try:
        users = db.query(User).filter(User.role == "student", User.approved.is_(True)).all()
    except SQLAlchemyError:
        logger.exception("Error fetching users")
        raise HTTPException(status_code=500, detail="Error fetching users")

    logger.debug("Fetched %d enrolled students", len(users))
    return users
