from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from app.models.complaint import ComplaintStatus


class ComplaintCreate(BaseModel):
    session_id: str
    customer_name: str = Field(min_length=2)
    customer_email: EmailStr
    customer_phone: str = Field(min_length=10)
    subject: str = Field(min_length=5)
    description: str = Field(min_length=20)
    order_number: Optional[str] = None
    attachment: Optional[str] = None
    attachment_name: Optional[str] = None


class ComplaintStatusUpdate(BaseModel):
    status: ComplaintStatus
    response: Optional[str] = None  # omitted keeps the current response


class ComplaintSubmitted(BaseModel):
    id: int
    message: str = "Complaint submitted successfully"
