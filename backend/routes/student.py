# backend/routes/student.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.order import Order
from models.users import User
from schemas.order import OrderOut

router = APIRouter(prefix="/student", tags=["Student"])
logger = logging.getLogger(__name__)


# Paid courses of an approved student
@router.get("/my-courses/{username}", response_model=List[OrderOut])
def get_my_courses(username: str, db: Session = Depends(get_db)):
    try:
        student = db.query(User).filter(
            User.username == username,
            User.role == "student",
            User.approved.is_(True),
        ).first()
        if not student:
            raise HTTPException(status_code=404, detail="Student not found or not approved")

        return db.query(Order).filter(
            Order.username == username,
            Order.payment_status.is_(True),
        ).order_by(Order.id).all()
    except SQLAlchemyError:
        logger.exception("Error fetching student's courses")
        raise HTTPException(status_code=500, detail="Error fetching student's courses")
