# backend/routes/orders.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db, id_in_range
from models.order import Order
from models.users import User
from schemas.base import MessageResponse
from schemas.order import ApprovedOrderOut, OrderCreate, OrderOut

router = APIRouter(tags=["Orders"])
logger = logging.getLogger(__name__)


# Map each username to the matching user's full name in a single query
def _fullnames_by_username(db: Session, usernames: set) -> dict:
    if not usernames:
        return {}
    rows = db.query(User.username, User.fullname).filter(User.username.in_(usernames)).all()
    return {username: fullname for username, fullname in rows}


# Save checkout details; new orders are always unpaid
@router.post("/saveOrder", response_model=MessageResponse)
def save_order(payload: OrderCreate, db: Session = Depends(get_db)):
    order = Order(**payload.model_dump(), payment_status=False)
    try:
        db.add(order)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding order")
        raise HTTPException(status_code=500, detail="Error adding order")

    logger.info("Order %s saved for %s (%s)", order.id, order.username, order.course_name)
    return {"message": "Order added successfully"}


# Orders still waiting for payment confirmation
@router.get("/get-pending-enrollments", response_model=List[OrderOut])
def get_pending_enrollments(db: Session = Depends(get_db)):
    try:
        return db.query(Order).filter(Order.payment_status.is_(False)).order_by(Order.id).all()
    except SQLAlchemyError:
        logger.exception("Error fetching pending enrollments")
        raise HTTPException(status_code=500, detail="Error fetching pending enrollments")


# Paid orders together with the buyer's full name
@router.get("/get-approved-enrollments", response_model=List[ApprovedOrderOut])
def get_approved_enrollments(db: Session = Depends(get_db)):
    try:
        orders = db.query(Order).filter(Order.payment_status.is_(True)).order_by(Order.id).all()
        fullnames = _fullnames_by_username(db, {o.username for o in orders})
    except SQLAlchemyError:
        logger.exception("Error fetching approved enrollments")
        raise HTTPException(status_code=500, detail="Error fetching approved enrollments")

    result = []
    for order in orders:
        item = ApprovedOrderOut.model_validate(order)
        item.fullname = fullnames.get(order.username)
        result.append(item)
    return result


# Mark an order as paid
@router.post("/update-enrollment-status/{order_id}", response_model=MessageResponse)
def update_enrollment_status(order_id: int, db: Session = Depends(get_db)):
    if not id_in_range(order_id):
        raise HTTPException(status_code=404, detail="Order not found")

    try:
        order = db.get(Order, order_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        order.payment_status = True
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating enrollment status")
        raise HTTPException(status_code=500, detail="Error updating enrollment status")

    logger.info("Order %s marked as paid", order_id)
    return {"message": "Enrollment status updated successfully"}


# Flag a user record as paid. This targets users, not orders; whether it
# should mark the student's orders instead is still undecided.
@router.post("/admin/update-payment/{student_id}", response_model=MessageResponse)
def update_payment_status(student_id: int, db: Session = Depends(get_db)):
    if not id_in_range(student_id):
        raise HTTPException(status_code=404, detail="Student not found")

    try:
        student = db.get(User, student_id)
        if not student:
            raise HTTPException(status_code=404, detail="Student not found")

        student.payment_status = True
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating payment status")
        raise HTTPException(status_code=500, detail="Error updating payment status")

    logger.info("Payment status set on user %s", student_id)
    return {"message": "Payment status updated successfully"}
