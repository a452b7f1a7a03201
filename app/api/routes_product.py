from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from app.core.config import settings
from app.db.deps import get_storage
from app.db.storage import IStorage
from app.models.product import Product
from app.schemas.product import CompetitorPrice
from app.services.price_comparison_service import PriceComparisonService

router = APIRouter()

@router.get("/products", response_model=List[Product])
def list_products(storage: IStorage = Depends(get_storage)):
    return storage.get_products()

@router.get("/products/featured/all", response_model=List[Product])
def list_featured_products(storage: IStorage = Depends(get_storage)):
    return storage.get_featured_products()

@router.get("/products/new/all", response_model=List[Product])
def list_new_arrivals(storage: IStorage = Depends(get_storage)):
    return storage.get_new_arrivals()

@router.get("/products/sale/all", response_model=List[Product])
def list_products_on_sale(storage: IStorage = Depends(get_storage)):
    return storage.get_products_on_sale()

@router.get("/products/{product_id}", response_model=Product)
def get_product(product_id: int, storage: IStorage = Depends(get_storage)):
    product = storage.get_product_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.get("/categories/{category}", response_model=List[Product])
def list_products_by_category(category: str, storage: IStorage = Depends(get_storage)):
    return storage.get_products_by_category(category)

@router.get("/search", response_model=List[Product])
def search_products(q: Optional[str] = Query(default=None), storage: IStorage = Depends(get_storage)):
    """Case-insensitive search over name, description and category"""
    query = (q or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Search query is required")
    if len(query) < settings.SEARCH_MIN_QUERY_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Search query must be at least {settings.SEARCH_MIN_QUERY_LENGTH} characters",
        )
    return storage.search_products(query)

@router.get("/price-comparison/{product_id}", response_model=List[CompetitorPrice])
def compare_prices(product_id: int, storage: IStorage = Depends(get_storage)):
    product = storage.get_product_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    # Simulated offers; there is no scraping behind this
    return PriceComparisonService.compare(product.name, product.price)
