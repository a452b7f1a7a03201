from pydantic import BaseModel, Field
from typing import List, Optional

# 👇 Used when seeding or adding a catalog product
class ProductCreate(BaseModel):
    name: str
    description: str
    price: float = Field(gt=0)
    old_price: Optional[float] = Field(default=None, gt=0)
    category: str
    subcategory: Optional[str] = None
    image_url: str
    rating: Optional[float] = Field(default=0, ge=0, le=5)
    review_count: Optional[int] = Field(default=0, ge=0)
    stock: int = Field(default=0, ge=0)
    features: List[str] = Field(default_factory=list)
    badges: List[str] = Field(default_factory=list)
    is_new: bool = False
    is_featured: bool = False

# 👇 One simulated retailer offer on the price comparison widget
class CompetitorPrice(BaseModel):
    retailer: str
    price: float
    in_stock: bool
    link: str
