from pydantic import Field
from typing import Optional

from schemas.base import ORMBase

# Schema for user registration requests
class SignupRequest(ORMBase):
    fullname: Optional[str] = None
    username: str
    password: str
    password_confirmation: str
    role: str

# Result of a successful signup
class SignupResponse(ORMBase):
    message: str
    role: str
    username: str
    approved: bool

# Schema for user and admin authentication credentials
class LoginRequest(ORMBase):
    username: str
    password: str

class LoginResponse(ORMBase):
    message: str
    role: str
    username: str

class AdminLoginResponse(LoginResponse):
    session_id: str = Field(alias="sessionID")

# Pending sign-ups are listed by username only
class PendingStudentOut(ORMBase):
    id: int = Field(alias="_id")
    username: str

# Output schema for student records (credentials excluded)
class StudentOut(ORMBase):
    id: int = Field(alias="_id")
    fullname: Optional[str] = None
    username: str
    role: str
    approved: bool

# role and username are None when no pending student matched
class ApproveStudentResponse(ORMBase):
    message: str
    role: Optional[str] = None
    username: Optional[str] = None
