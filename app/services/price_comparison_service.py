# app/services/price_comparison_service.py
import random
from typing import Dict, List, Optional
from urllib.parse import quote

from app.schemas.product import CompetitorPrice

class PriceComparisonService:
    """Simulated competitor prices for the product details page"""

    RETAILERS: List[Dict[str, str]] = [
        {"name": "Amazon", "domain": "amazon.in"},
        {"name": "Flipkart", "domain": "flipkart.com"},
        {"name": "Croma", "domain": "croma.com"},
        {"name": "Reliance Digital", "domain": "reliancedigital.in"},
    ]

    MAX_MARKUP = 0.25
    IN_STOCK_PROBABILITY = 0.8

    @staticmethod
    def compare(product_name: str, our_price: float, rng: Optional[random.Random] = None) -> List[CompetitorPrice]:
        """One offer per retailer, never cheaper than our own price"""
        rng = rng or random.Random()

        offers = []
        for retailer in PriceComparisonService.RETAILERS:
            offers.append(CompetitorPrice(
                retailer=retailer["name"],
                price=PriceComparisonService._competitor_price(our_price, rng),
                in_stock=rng.random() < PriceComparisonService.IN_STOCK_PROBABILITY,
                link=PriceComparisonService._search_link(retailer["domain"], product_name),
            ))
        return offers

    @staticmethod
    def _competitor_price(our_price: float, rng: random.Random) -> float:
        variation = 1 + rng.random() * PriceComparisonService.MAX_MARKUP
        return round(our_price * variation)

    @staticmethod
    def _search_link(domain: str, product_name: str) -> str:
        return f"https://www.{domain}/search?q={quote(product_name, safe='')}"
