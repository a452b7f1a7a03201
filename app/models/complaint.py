from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import enum

from app.models.models import utcnow


class ComplaintStatus(str, enum.Enum):
    open = "open"
    in_progress = "in-progress"
    resolved = "resolved"
    closed = "closed"


class Complaint(BaseModel):
    id: int
    session_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    subject: str
    description: str
    order_number: Optional[str] = None  # free text, not checked against orders
    attachment: Optional[str] = None  # public path under /uploads
    attachment_name: Optional[str] = None
    status: ComplaintStatus = ComplaintStatus.open
    response: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
