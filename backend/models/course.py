# backend/models/course.py
from sqlalchemy import Column, Integer, String
from database import Base

# Catalog entry for a course; every descriptive field is free text
class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    course_name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    start_date = Column(String, nullable=False)
    objectives = Column(String, nullable=False)
    course_content = Column(String, nullable=False)
    requirements = Column(String, nullable=False)
    course_fee = Column(String, nullable=False)
