# backend/models/users.py
from sqlalchemy import Column, Integer, String, Boolean
from database import Base

# Represents a portal account (admin, lecturer or student)
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    fullname = Column(String, nullable=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    # Never populated by signup
    password_confirmation = Column(String, nullable=True)
    role = Column(String, nullable=False)
    # Students must be approved by an admin before they can log in
    approved = Column(Boolean, nullable=False, default=False)
    # Only written by the admin update-payment route
    payment_status = Column(Boolean, nullable=True)

# Roles accepted at signup
ROLES = ("admin", "lecturer", "student")
