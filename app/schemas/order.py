from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from app.models.order import PaymentMethod

class OrderItemCreate(BaseModel):
    product_id: int = Field(gt=0)
    name: str
    price: float = Field(gt=0)
    quantity: int = Field(gt=0)

class OrderCreate(BaseModel):
    customer_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=10)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    pincode: str = Field(min_length=6)
    total: float = Field(gt=0)
    payment_method: PaymentMethod = PaymentMethod.cod
    items: List[OrderItemCreate]
    # filled in by the checkout route
    session_id: Optional[str] = None
    user_id: Optional[int] = None

class OrderPlaced(BaseModel):
    order_id: int
    message: str = "Order placed successfully"
