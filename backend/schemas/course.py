from pydantic import ConfigDict, Field

from schemas.base import ORMBase, RequiredStr


# Shared course attributes, all required
class CourseBase(ORMBase):
    course_name: RequiredStr
    description: RequiredStr
    duration: RequiredStr
    start_date: RequiredStr
    objectives: RequiredStr
    course_content: RequiredStr
    requirements: RequiredStr
    course_fee: RequiredStr


# Schema for creating a course; numeric fees are stored as text
class CourseCreate(CourseBase):
    model_config = ConfigDict(coerce_numbers_to_str=True)


# Full course representation including ID
class CourseOut(CourseBase):
    id: int = Field(alias="_id")
