# app/db/seed.py - Sample catalog and admin account loaded at startup

import logging
from typing import List, Optional

from app.core.config import settings
from app.core.security import hash_password
from app.db.storage import IStorage
from app.models.models import User
from app.schemas.product import ProductCreate

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

SAMPLE_PRODUCTS: List[ProductCreate] = [
    ProductCreate(
        name="iPhone 13 Pro",
        description="The latest iPhone with A15 Bionic chip, 128GB, Sierra Blue, triple-camera system",
        price=99999, old_price=109999, category="Smartphones",
        image_url=_UNSPLASH.format("1592899677977-9c10ca588bbd"),
        rating=4.5, review_count=124, stock=10,
        features=["A15 Bionic chip", "128GB storage", "Triple-camera system", "ProMotion display"],
        badges=["New"], is_new=True, is_featured=True,
    ),
    ProductCreate(
        name="MacBook Pro",
        description="Powerful laptop with M1 Pro chip, 16GB RAM, 512GB SSD, 14-inch Retina display",
        price=149999, old_price=169999, category="Laptops",
        image_url=_UNSPLASH.format("1587033411391-5d9e51cce126"),
        rating=5, review_count=89, stock=5,
        features=["M1 Pro chip", "16GB RAM", "512GB SSD", "14-inch Retina display"],
        badges=["Sale"], is_new=False, is_featured=True,
    ),
    ProductCreate(
        name="Sony WH-1000XM4",
        description="Premium wireless noise-cancelling headphones with industry-leading technology",
        price=24999, old_price=29999, category="Audio",
        image_url=_UNSPLASH.format("1585123334904-845d60e97b29"),
        rating=5, review_count=215, stock=15,
        features=["Industry-leading noise cancellation", "30-hour battery life", "Touch controls",
                  "Speak-to-chat technology"],
        badges=[], is_new=False, is_featured=True,
    ),
    ProductCreate(
        name="Galaxy Watch 4",
        description="Advanced smartwatch with health monitoring, GPS, and fitness tracking features",
        price=19999, old_price=22999, category="Wearables",
        image_url=_UNSPLASH.format("1583394838336-acd977736f90"),
        rating=4, review_count=76, stock=8,
        features=["Health monitoring", "GPS", "Fitness tracking", "44mm size"],
        badges=["Popular"], is_new=False, is_featured=True,
    ),
    ProductCreate(
        name="Samsung QLED TV",
        description="55-inch 4K Ultra HD Smart TV with Quantum Processor and HDR",
        price=84999, old_price=None, category="Televisions",
        image_url=_UNSPLASH.format("1605464315542-bda3e2f4e605"),
        rating=4, review_count=32, stock=3,
        features=["4K Ultra HD", "Quantum Processor", "HDR", "Smart TV"],
        badges=["New"], is_new=True, is_featured=False,
    ),
    ProductCreate(
        name="iPad Air",
        description="Powerful and versatile tablet with M1 chip, 64GB storage, and Wi-Fi connectivity",
        price=54999, old_price=None, category="Tablets",
        image_url=_UNSPLASH.format("1600086827875-a63b01f1335c"),
        rating=4.5, review_count=47, stock=12,
        features=["M1 chip", "10.9-inch display", "64GB storage", "Wi-Fi"],
        badges=["New"], is_new=True, is_featured=False,
    ),
    ProductCreate(
        name="Google Nest Hub",
        description="Smart home display with Google Assistant for controlling your smart home devices",
        price=7999, old_price=None, category="Smart Home",
        image_url=_UNSPLASH.format("1601784551446-20c9e07cdbdb"),
        rating=5, review_count=19, stock=7,
        features=["Google Assistant", "Smart home controls", "7-inch display", "Video calls"],
        badges=["New"], is_new=True, is_featured=False,
    ),
    ProductCreate(
        name="Samsung Galaxy Buds Pro",
        description="True wireless earbuds with active noise cancellation and immersive sound",
        price=12999, old_price=None, category="Audio",
        image_url=_UNSPLASH.format("1628815113969-0484d74e6df2"),
        rating=4, review_count=24, stock=9,
        features=["Active noise cancellation", "360 Audio", "IPX7 water resistance", "8-hour battery life"],
        badges=["New"], is_new=True, is_featured=False,
    ),
    ProductCreate(
        name="Canon EOS R5",
        description="Professional mirrorless camera with 45MP full-frame sensor and 8K video recording",
        price=339999, old_price=359999, category="Cameras",
        image_url=_UNSPLASH.format("1516724562728-afc824a36e84"),
        rating=4.8, review_count=56, stock=2,
        features=["45MP full-frame sensor", "8K video", "In-body image stabilization", "Dual Pixel CMOS AF"],
        badges=[], is_new=False, is_featured=False,
    ),
    ProductCreate(
        name="Dell XPS 13",
        description="Ultra-thin laptop with InfinityEdge display, 11th Gen Intel Core i7, and 16GB RAM",
        price=129999, old_price=139999, category="Laptops",
        image_url=_UNSPLASH.format("1593642632823-8f785ba67e45"),
        rating=4.7, review_count=102, stock=6,
        features=["11th Gen Intel Core i7", "16GB RAM", "512GB SSD", "InfinityEdge display"],
        badges=[], is_new=False, is_featured=False,
    ),
    ProductCreate(
        name="Bose QuietComfort Earbuds",
        description="True wireless noise cancelling earbuds with high-fidelity audio and secure fit",
        price=21999, old_price=24999, category="Audio",
        image_url=_UNSPLASH.format("1606144042614-b2417e99c4e3"),
        rating=4.6, review_count=83, stock=11,
        features=["Noise cancellation", "High-fidelity audio", "Secure fit", "Weather-resistant"],
        badges=["Sale"], is_new=False, is_featured=False,
    ),
    ProductCreate(
        name="LG 34-inch UltraWide Monitor",
        description="Professional curved monitor with 34-inch UltraWide QHD display and HDR 10",
        price=49999, old_price=54999, category="Monitors",
        image_url=_UNSPLASH.format("1616763355548-1b606f439f86"),
        rating=4.4, review_count=37, stock=4,
        features=["34-inch UltraWide QHD", "HDR 10", "AMD FreeSync", "Curved display"],
        badges=[], is_new=False, is_featured=False,
    ),
]


def seed_products(storage: IStorage):
    for product in SAMPLE_PRODUCTS:
        storage.create_product(product)


def seed_admin(storage: IStorage) -> Optional[User]:
    """Admin account for the dashboard. Skipped when ADMIN_PASSWORD is unset."""
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not set; no admin account seeded")
        return None
    return storage.register_user({
        "username": settings.ADMIN_USERNAME,
        "password": hash_password(settings.ADMIN_PASSWORD),
        "is_admin": True,
    })


def seed_storage(storage: IStorage, with_admin: bool = True):
    seed_products(storage)
    if with_admin:
        seed_admin(storage)
    logger.info(f"Storage seeded with {len(SAMPLE_PRODUCTS)} products")
