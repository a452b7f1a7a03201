from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    id: int
    username: str
    password: Optional[str] = None  # bcrypt hash; absent for phone/OAuth-only users
    email: Optional[str] = None
    phone_number: Optional[str] = None
    google_id: Optional[str] = None
    is_admin: bool = False  # only ever set by the admin seed


class CartItem(BaseModel):
    """One product line in a session's cart. At most one per (session_id, product_id)."""
    id: int
    session_id: str
    user_id: Optional[int] = None
    product_id: int
    quantity: int = Field(ge=1)
    created_at: datetime = Field(default_factory=utcnow)
