from typing import List, Optional
from pydantic import BaseModel, Field, computed_field


class Product(BaseModel):
    id: int
    name: str
    description: str
    price: float
    old_price: Optional[float] = None
    category: str
    subcategory: Optional[str] = None
    image_url: str
    rating: Optional[float] = 0
    review_count: Optional[int] = 0
    stock: int = 0
    features: List[str] = Field(default_factory=list)
    badges: List[str] = Field(default_factory=list)  # free-form tags: "New", "Sale", "Popular"
    is_new: bool = False
    is_featured: bool = False

    @computed_field
    @property
    def is_on_sale(self) -> bool:
        return self.old_price is not None and self.old_price > self.price


class ProductWithQuantity(Product):
    """Cart projection: a product joined with the quantity in one session's cart."""
    quantity: int = Field(ge=1)
    cart_item_id: Optional[int] = None  # id for PATCH/DELETE /api/cart/{id}

    @classmethod
    def from_product(cls, product: Product, quantity: int, cart_item_id: Optional[int] = None) -> "ProductWithQuantity":
        return cls(
            **product.model_dump(exclude={"is_on_sale"}),
            quantity=quantity,
            cart_item_id=cart_item_id,
        )
