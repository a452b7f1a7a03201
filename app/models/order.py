from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
import enum

from app.models.models import utcnow

class OrderStatus(str, enum.Enum):
    pending = "pending"
    processing = "processing"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"

class PaymentMethod(str, enum.Enum):
    cod = "cod"
    card = "card"
    upi = "upi"

class OrderItem(BaseModel):
    """Line item copied from the cart at checkout; later catalog edits do not touch it."""
    product_id: int
    name: str
    price: float
    quantity: int

class Order(BaseModel):
    id: int
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    customer_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    pincode: str
    total: float
    payment_method: PaymentMethod = PaymentMethod.cod
    status: OrderStatus = OrderStatus.pending
    created_at: datetime = Field(default_factory=utcnow)
    items: List[OrderItem]

class OrderStats(BaseModel):
    total_orders: int
    total_revenue: float
    pending_orders: int
