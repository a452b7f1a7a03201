import logging
from fastapi import APIRouter, Depends, HTTPException
from typing import List

from app.db.deps import get_storage, require_admin
from app.db.storage import IStorage
from app.models.complaint import Complaint
from app.models.order import Order, OrderStats
from app.models.product import Product
from app.schemas.complaint import ComplaintStatusUpdate

logger = logging.getLogger(__name__)

# require_admin is a no-op unless REQUIRE_ADMIN_AUTH is enabled
router = APIRouter(dependencies=[Depends(require_admin)])

@router.get("/products", response_model=List[Product])
def list_all_products(storage: IStorage = Depends(get_storage)):
    return storage.get_products()

@router.get("/orders", response_model=List[Order])
def list_all_orders(storage: IStorage = Depends(get_storage)):
    return storage.get_all_orders()

@router.get("/stats", response_model=OrderStats)
def get_order_stats(storage: IStorage = Depends(get_storage)):
    """Dashboard counters, computed on every call"""
    return storage.get_order_stats()

@router.get("/complaints", response_model=List[Complaint])
def list_all_complaints(storage: IStorage = Depends(get_storage)):
    return storage.get_all_complaints()

@router.patch("/complaints/{complaint_id}", response_model=Complaint)
def update_complaint(
    complaint_id: int,
    update: ComplaintStatusUpdate,
    storage: IStorage = Depends(get_storage),
):
    complaint = storage.update_complaint_status(complaint_id, update.status, update.response)
    if not complaint:
        raise HTTPException(status_code=404, detail="Complaint not found")

    logger.info(f"Complaint {complaint_id} moved to {complaint.status.value}")
    return complaint
