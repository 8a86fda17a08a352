from sqlalchemy import Column, Integer, String, Float, Boolean
from database import Base

# Course enrollment placed at checkout. username and course_name are plain
# strings, there are no foreign keys to users or courses.
class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False, index=True)
    course_name = Column(String, nullable=False)
    course_fee = Column(Float, nullable=False)
    payment_method = Column(String, nullable=False)
    country = Column(String, nullable=False)
    # Payment state: False until an admin confirms the enrollment
    payment_status = Column(Boolean, nullable=False, default=False, index=True)
