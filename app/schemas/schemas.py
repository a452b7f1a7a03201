from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from app.models.product import ProductWithQuantity

class UserCreate(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    email: Optional[EmailStr] = None

class UserLogin(BaseModel):
    username: str
    password: str

class UserOut(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    phone_number: Optional[str] = None

    class Config:
        from_attributes = True

class CartItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(default=1, gt=0)
    # filled in by the route from the request, never trusted from the body
    session_id: Optional[str] = None
    user_id: Optional[int] = None

class CartItemUpdate(BaseModel):
    quantity: int = Field(ge=1)

class CartOut(BaseModel):
    items: List[ProductWithQuantity] = []
    total: float = 0
    count: int = 0

class LoginResponse(BaseModel):
    id: int
    username: str
    message: str
    cart: CartOut

class GuestSession(BaseModel):
    message: str
    is_guest: bool = True
    cart: CartOut

class PhoneOtpRequest(BaseModel):
    phone_number: str = Field(min_length=10)

class PhoneOtpVerify(BaseModel):
    phone_number: str = Field(min_length=10)
    otp: str = Field(min_length=6, max_length=6)
