# backend/routes/courses.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db, id_in_range
from models.course import Course
from schemas.base import MessageResponse
from schemas.course import CourseCreate, CourseOut

router = APIRouter(tags=["Courses"])
logger = logging.getLogger(__name__)


# Add a course to the catalog; duplicate names are allowed
@router.post("/add-course", response_model=MessageResponse)
def add_course(payload: CourseCreate, db: Session = Depends(get_db)):
    course = Course(**payload.model_dump())
    try:
        db.add(course)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding course")
        raise HTTPException(status_code=500, detail="Error adding course")

    logger.info("Course added: %s (id=%s)", course.course_name, course.id)
    return {"message": "Course added successfully"}


# Full course catalog
@router.get("/get-courses", response_model=List[CourseOut])
def get_courses(db: Session = Depends(get_db)):
    try:
        courses = db.query(Course).order_by(Course.id).all()
    except SQLAlchemyError:
        logger.exception("Error fetching courses")
        raise HTTPException(status_code=500, detail="Error fetching courses")

    logger.debug("Fetched %d courses", len(courses))
    return courses


# Details of a single course
@router.get("/get-course/{course_id}", response_model=CourseOut)
def get_course(course_id: int, db: Session = Depends(get_db)):
    if not id_in_range(course_id):
        raise HTTPException(status_code=404, detail="Course not found")

    try:
        course = db.get(Course, course_id)
    except SQLAlchemyError:
        logger.exception("Error fetching course details")
        raise HTTPException(status_code=500, detail="Error fetching course details")

    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course
