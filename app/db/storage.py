# app/db/storage.py
# Storage contract for the storefront and its in-memory implementation.
#
# Every route talks to an IStorage; MemStorage keeps all entities in dicts
# keyed by id. A database-backed implementation would subclass IStorage and
# leave the route layer untouched.

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from app.core.exceptions import UsernameTakenError
from app.models.complaint import Complaint, ComplaintStatus
from app.models.models import CartItem, User, utcnow
from app.models.order import Order, OrderStats, OrderStatus
from app.models.product import Product, ProductWithQuantity
from app.schemas.complaint import ComplaintCreate
from app.schemas.order import OrderCreate
from app.schemas.product import ProductCreate
from app.schemas.schemas import CartItemCreate, CartOut

logger = logging.getLogger(__name__)


class IStorage(ABC):
    """Operations the route layer needs. Absent entities come back as None."""

    # User methods
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_phone(self, phone_number: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_google_id(self, google_id: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: dict) -> User: ...

    @abstractmethod
    def register_user(self, data: dict) -> User: ...

    @abstractmethod
    def create_user_with_unique_username(self, data: dict) -> User: ...

    # Product methods
    @abstractmethod
    def get_products(self) -> List[Product]: ...

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Optional[Product]: ...

    @abstractmethod
    def get_products_by_category(self, category: str) -> List[Product]: ...

    @abstractmethod
    def get_featured_products(self) -> List[Product]: ...

    @abstractmethod
    def get_new_arrivals(self) -> List[Product]: ...

    @abstractmethod
    def get_products_on_sale(self) -> List[Product]: ...

    @abstractmethod
    def search_products(self, query: str) -> List[Product]: ...

    @abstractmethod
    def create_product(self, data: ProductCreate) -> Product: ...

    # Cart methods
    @abstractmethod
    def get_cart_items(self, session_id: str) -> List[ProductWithQuantity]: ...

    @abstractmethod
    def get_cart_item(self, session_id: str, product_id: int) -> Optional[CartItem]: ...

    @abstractmethod
    def add_to_cart(self, item: CartItemCreate) -> CartItem: ...

    @abstractmethod
    def update_cart_item_quantity(self, item_id: int, quantity: int) -> Optional[CartItem]: ...

    @abstractmethod
    def remove_from_cart(self, item_id: int) -> bool: ...

    @abstractmethod
    def clear_cart(self, session_id: str) -> bool: ...

    def get_cart_summary(self, session_id: str) -> CartOut:
        items = self.get_cart_items(session_id)
        return CartOut(
            items=items,
            total=sum(item.price * item.quantity for item in items),
            count=sum(item.quantity for item in items),
        )

    # Order methods
    @abstractmethod
    def create_order(self, data: OrderCreate) -> Order: ...

    @abstractmethod
    def get_order_by_id(self, order_id: int) -> Optional[Order]: ...

    @abstractmethod
    def get_orders_by_session_id(self, session_id: str) -> List[Order]: ...

    @abstractmethod
    def get_all_orders(self) -> List[Order]: ...

    @abstractmethod
    def get_order_stats(self) -> OrderStats: ...

    # Complaint methods
    @abstractmethod
    def create_complaint(self, data: ComplaintCreate) -> Complaint: ...

    @abstractmethod
    def get_complaints_by_session_id(self, session_id: str) -> List[Complaint]: ...

    @abstractmethod
    def get_all_complaints(self) -> List[Complaint]: ...

    @abstractmethod
    def get_complaint_by_id(self, complaint_id: int) -> Optional[Complaint]: ...

    @abstractmethod
    def update_complaint_status(
        self, complaint_id: int, status: ComplaintStatus, response: Optional[str] = None
    ) -> Optional[Complaint]: ...


class MemStorage(IStorage):
    """
    Process-local store. Ids come from per-entity counters starting at 1.

    All reads and writes go through one re-entrant lock, so the
    check-then-write paths (cart merge, username registration) are atomic
    even when FastAPI runs sync endpoints on its thread pool.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.reset()

    def reset(self):
        with self._lock:
            self._users: Dict[int, User] = {}
            self._products: Dict[int, Product] = {}
            self._cart_items: Dict[int, CartItem] = {}
            self._orders: Dict[int, Order] = {}
            self._complaints: Dict[int, Complaint] = {}

            self.current_user_id = 1
            self.current_product_id = 1
            self.current_cart_item_id = 1
            self.current_order_id = 1
            self.current_complaint_id = 1

    # ------------------------------------------------------------------ users

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def _find_user(self, **criteria) -> Optional[User]:
        # A missing value never matches users that simply lack the field
        if any(value is None for value in criteria.values()):
            return None
        with self._lock:
            for user in self._users.values():
                if all(getattr(user, field) == value for field, value in criteria.items()):
                    return user
            return None

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._find_user(username=username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self._find_user(email=email)

    def get_user_by_phone(self, phone_number: str) -> Optional[User]:
        return self._find_user(phone_number=phone_number)

    def get_user_by_google_id(self, google_id: str) -> Optional[User]:
        return self._find_user(google_id=google_id)

    def create_user(self, data: dict) -> User:
        with self._lock:
            user_id = self.current_user_id
            self.current_user_id += 1
            user = User(**{**data, "id": user_id})
            self._users[user_id] = user
            return user

    def register_user(self, data: dict) -> User:
        with self._lock:
            if self.get_user_by_username(data["username"]) is not None:
                raise UsernameTakenError(data["username"])
            return self.create_user(data)

    def create_user_with_unique_username(self, data: dict) -> User:
        """Create a user, suffixing the username (_2, _3, ...) until it is free"""
        with self._lock:
            base = data["username"]
            username = base
            suffix = 2
            while self.get_user_by_username(username) is not None:
                username = f"{base}_{suffix}"
                suffix += 1
            if username != base:
                logger.info(f"Username {base} taken, using {username}")
            return self.create_user({**data, "username": username})

    # --------------------------------------------------------------- products

    def get_products(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def get_products_by_category(self, category: str) -> List[Product]:
        wanted = category.lower()
        return [p for p in self.get_products() if p.category.lower() == wanted]

    def get_featured_products(self) -> List[Product]:
        return [p for p in self.get_products() if p.is_featured]

    def get_new_arrivals(self) -> List[Product]:
        return [p for p in self.get_products() if p.is_new]

    def get_products_on_sale(self) -> List[Product]:
        return [p for p in self.get_products() if p.is_on_sale]

    def search_products(self, query: str) -> List[Product]:
        needle = query.lower()
        return [
            p for p in self.get_products()
            if needle in p.name.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
        ]

    def create_product(self, data: ProductCreate) -> Product:
        with self._lock:
            product_id = self.current_product_id
            self.current_product_id += 1
            product = Product(**data.model_dump(), id=product_id)
            self._products[product_id] = product
            return product

    # ------------------------------------------------------------------- cart

    def get_cart_items(self, session_id: str) -> List[ProductWithQuantity]:
        with self._lock:
            result = []
            for item in self._cart_items.values():
                if item.session_id != session_id:
                    continue
                product = self._products.get(item.product_id)
                # Product removed from the catalog since it was added
                if product is None:
                    continue
                result.append(ProductWithQuantity.from_product(product, item.quantity, item.id))
            return result

    def get_cart_item(self, session_id: str, product_id: int) -> Optional[CartItem]:
        with self._lock:
            for item in self._cart_items.values():
                if item.session_id == session_id and item.product_id == product_id:
                    return item
            return None

    def add_to_cart(self, item: CartItemCreate) -> CartItem:
        if not item.session_id:
            raise ValueError("Cart items require a session id")
        with self._lock:
            existing = self.get_cart_item(item.session_id, item.product_id)
            if existing is not None:
                logger.debug(f"Merging product {item.product_id} into cart item {existing.id}")
                return self.update_cart_item_quantity(
                    existing.id, existing.quantity + item.quantity
                )

            item_id = self.current_cart_item_id
            self.current_cart_item_id += 1
            cart_item = CartItem(
                id=item_id,
                session_id=item.session_id,
                user_id=item.user_id,
                product_id=item.product_id,
                quantity=item.quantity,
                created_at=utcnow(),
            )
            self._cart_items[item_id] = cart_item
            return cart_item

    def update_cart_item_quantity(self, item_id: int, quantity: int) -> Optional[CartItem]:
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")
        with self._lock:
            item = self._cart_items.get(item_id)
            if item is None:
                return None
            updated = item.model_copy(update={"quantity": quantity})
            self._cart_items[item_id] = updated
            return updated

    def remove_from_cart(self, item_id: int) -> bool:
        with self._lock:
            return self._cart_items.pop(item_id, None) is not None

    def clear_cart(self, session_id: str) -> bool:
        with self._lock:
            stale = [i for i, item in self._cart_items.items() if item.session_id == session_id]
            for item_id in stale:
                del self._cart_items[item_id]
            return True

    # ----------------------------------------------------------------- orders

    def create_order(self, data: OrderCreate) -> Order:
        with self._lock:
            order_id = self.current_order_id
            self.current_order_id += 1
            order = Order(**{
                **data.model_dump(),
                "id": order_id,
                "status": OrderStatus.pending,
                "created_at": utcnow(),
            })
            self._orders[order_id] = order
            return order

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def get_orders_by_session_id(self, session_id: str) -> List[Order]:
        with self._lock:
            return [o for o in self._orders.values() if o.session_id == session_id]

    def get_all_orders(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def get_order_stats(self) -> OrderStats:
        orders = self.get_all_orders()
        return OrderStats(
            total_orders=len(orders),
            total_revenue=sum(o.total for o in orders),
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.pending),
        )

    # ------------------------------------------------------------- complaints

    def create_complaint(self, data: ComplaintCreate) -> Complaint:
        with self._lock:
            complaint_id = self.current_complaint_id
            self.current_complaint_id += 1
            now = utcnow()
            complaint = Complaint(**{
                **data.model_dump(),
                "id": complaint_id,
                "status": ComplaintStatus.open,
                "response": None,
                "created_at": now,
                "updated_at": now,
            })
            self._complaints[complaint_id] = complaint
            return complaint

    def get_complaints_by_session_id(self, session_id: str) -> List[Complaint]:
        with self._lock:
            return [c for c in self._complaints.values() if c.session_id == session_id]

    def get_all_complaints(self) -> List[Complaint]:
        with self._lock:
            return list(self._complaints.values())

    def get_complaint_by_id(self, complaint_id: int) -> Optional[Complaint]:
        with self._lock:
            return self._complaints.get(complaint_id)

    def update_complaint_status(
        self, complaint_id: int, status: ComplaintStatus, response: Optional[str] = None
    ) -> Optional[Complaint]:
        with self._lock:
            complaint = self._complaints.get(complaint_id)
            if complaint is None:
                return None
            updated = complaint.model_copy(update={
                "status": ComplaintStatus(status),
                "response": complaint.response if response is None else response,
                "updated_at": utcnow(),
            })
            self._complaints[complaint_id] = updated
            return updated
