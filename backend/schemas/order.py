from pydantic import Field
from typing import Optional

from schemas.base import ORMBase, RequiredStr


# Checkout details; any paymentStatus sent by the client is ignored
class OrderCreate(ORMBase):
    username: RequiredStr
    course_name: RequiredStr
    course_fee: float
    payment_method: RequiredStr
    country: RequiredStr


# Output schema representing a stored order
class OrderOut(ORMBase):
    id: int = Field(alias="_id")
    username: str
    course_name: str
    course_fee: float
    payment_method: str
    country: str
    payment_status: bool


# Paid order with the buyer's full name looked up by username
class ApprovedOrderOut(OrderOut):
    fullname: Optional[str] = None
