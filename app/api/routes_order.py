import logging
from fastapi import APIRouter, Depends, status
from typing import List, Optional

from app.db.deps import get_optional_user, get_storage, require_session_id
from app.db.storage import IStorage
from app.models.models import User
from app.models.order import Order
from app.schemas.order import OrderCreate, OrderPlaced

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/checkout", response_model=OrderPlaced, status_code=status.HTTP_201_CREATED)
def checkout(
    order_data: OrderCreate,
    session_id: str = Depends(require_session_id),
    user: Optional[User] = Depends(get_optional_user),
    storage: IStorage = Depends(get_storage),
):
    # Items and total are taken as submitted; they are not re-derived from the cart
    order = storage.create_order(order_data.model_copy(update={
        "session_id": session_id,
        "user_id": user.id if user else None,
    }))

    # Not atomic with the order insert: a failure here leaves the cart in place
    storage.clear_cart(session_id)

    logger.info(f"Order {order.id} placed for session {session_id} (total {order.total})")
    return OrderPlaced(order_id=order.id)

@router.get("/orders", response_model=List[Order])
def list_my_orders(
    session_id: str = Depends(require_session_id),
    storage: IStorage = Depends(get_storage),
):
    return storage.get_orders_by_session_id(session_id)
