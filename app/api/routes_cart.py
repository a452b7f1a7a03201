# app/api/routes_cart.py
# Session-scoped cart. Every endpoint answers with the refreshed cart summary.

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from app.db.deps import get_optional_user, get_session_id, get_storage, require_session_id
from app.db.storage import IStorage
from app.models.models import User
from app.schemas.schemas import CartItemCreate, CartItemUpdate, CartOut

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=CartOut)
def get_cart(
    session_id: str = Depends(get_session_id),
    storage: IStorage = Depends(get_storage),
):
    return storage.get_cart_summary(session_id)

@router.post("", response_model=CartOut, status_code=status.HTTP_201_CREATED)
def add_to_cart(
    data: CartItemCreate,
    session_id: str = Depends(get_session_id),
    user: Optional[User] = Depends(get_optional_user),
    storage: IStorage = Depends(get_storage),
):
    if not storage.get_product_by_id(data.product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    # Adding a product already in the cart bumps its quantity
    storage.add_to_cart(data.model_copy(update={
        "session_id": session_id,
        "user_id": user.id if user else None,
    }))
    logger.info(f"Product {data.product_id} x{data.quantity} added to cart for session {session_id}")
    return storage.get_cart_summary(session_id)

@router.patch("/{item_id}", response_model=CartOut)
def update_cart_item(
    item_id: int,
    data: CartItemUpdate,
    session_id: str = Depends(get_session_id),
    storage: IStorage = Depends(get_storage),
):
    if not storage.update_cart_item_quantity(item_id, data.quantity):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return storage.get_cart_summary(session_id)

@router.delete("/{item_id}", response_model=CartOut)
def remove_cart_item(
    item_id: int,
    session_id: str = Depends(get_session_id),
    storage: IStorage = Depends(get_storage),
):
    if not storage.remove_from_cart(item_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return storage.get_cart_summary(session_id)

@router.delete("", response_model=CartOut)
def clear_cart(
    session_id: str = Depends(require_session_id),
    storage: IStorage = Depends(get_storage),
):
    storage.clear_cart(session_id)
    return CartOut()
