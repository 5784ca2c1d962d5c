"""
Catalog Domain Service

Product browsing, category listing, search, deals and About content.
All filtering and sorting happens here over the product list fetched
from the products table.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from core.errors import RemoteCallError
from core.logging import get_logger, sanitize_string_for_logging
from core.services.models import AboutContent, Category, Product
from core.services.money import discount_percent, round_money

logger = get_logger(__name__)

DEAL_MIN_DISCOUNT_PERCENT = Decimal("20")

SORT_KEYS = ("name", "price-low", "price-high")

PLACEHOLDER_IMAGE = "/api/placeholder/400/300"

DEFAULT_CATEGORIES = [
    ("chest", "Chest", "Build a powerful chest with our premium machines"),
    ("back", "Back", "Strengthen your back with professional equipment"),
    ("arms", "Arms", "Sculpt your arms with specialized machines"),
    ("legs", "Legs", "Build powerful legs with heavy-duty equipment"),
    ("cardio", "Cardio", "Premium cardiovascular training equipment"),
    ("racks", "Racks & Storage", "Organize your gym with professional racks"),
]

DEFAULT_ABOUT = AboutContent(
    id="",
    title="About Capital Fitness Equipments",
    content=(
        "Welcome to Capital Fitness Equipments - Your premier destination "
        "for professional-grade fitness equipment."
    ),
)


@dataclass
class Deal:
    """A product discounted by at least the deal threshold."""

    product: Product
    discount_percent: int


def sort_products(products: List[Product], sort: str = "name") -> List[Product]:
    """Sort by name (case-insensitive) or price ascending/descending."""
    if sort == "price-low":
        return sorted(products, key=lambda p: p.price)
    if sort == "price-high":
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort == "name":
        return sorted(products, key=lambda p: p.name.lower())
    raise ValueError(f"Unknown sort key: {sort}")


def matches_query(product: Product, query: str) -> bool:
    needle = query.lower()
    return (
        needle in product.name.lower()
        or needle in (product.description or "").lower()
        or needle in product.category.lower()
    )


class CatalogService:
    """
    Catalog domain service.

    Provides clean interface for:
    - Product listing and lookup
    - Category pages with sorting
    - Free-text search
    - Deals (products with a large discount)
    - Category list with product counts
    """

    def __init__(self, db):
        self.db = db

    async def list_products(self) -> List[Product]:
        return await self.db.products.get_all()

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Product by id, or None (rendered as "not found")."""
        if not product_id:
            return None
        return await self.db.products.get_by_id(product_id)

    async def products_by_category(self, category: str, sort: str = "name") -> List[Product]:
        products = [p for p in await self.list_products() if p.category == category]
        return sort_products(products, sort)

    async def featured_products(self) -> List[Product]:
        return [p for p in await self.list_products() if p.featured]

    async def search(self, query: Optional[str]) -> List[Product]:
        """Case-insensitive substring match on name, description or category.

        A blank query returns the whole catalog.
        """
        products = await self.list_products()
        query = (query or "").strip()
        if not query:
            return products
        results = [p for p in products if matches_query(p, query)]
        logger.debug(f"Search '{sanitize_string_for_logging(query)}' matched {len(results)} product(s)")
        return results

    async def deals(self, min_discount_percent: Decimal = DEAL_MIN_DISCOUNT_PERCENT) -> List[Deal]:
        deals = []
        for product in await self.list_products():
            if not product.original_price:
                continue
            percent_off = discount_percent(product.original_price, product.price)
            if percent_off >= min_discount_percent:
                deals.append(Deal(product=product, discount_percent=int(round_money(percent_off, to_int=True))))
        return deals

    async def list_categories(self) -> List[Category]:
        """
        Categories in display order with their product counts.

        Falls back to the built-in categories when the table cannot be read.
        """
        try:
            products = await self.list_products()
        except RemoteCallError:
            products = []

        try:
            categories = await self.db.categories.get_all()
        except RemoteCallError as e:
            logger.warning(f"Using default categories: {e}")
            categories = [
                Category(id=cid, name=name, description=description, image=PLACEHOLDER_IMAGE, display_order=i)
                for i, (cid, name, description) in enumerate(DEFAULT_CATEGORIES)
            ]

        for category in categories:
            category.product_count = sum(1 for p in products if p.category == category.id)
            if not category.image:
                category.image = PLACEHOLDER_IMAGE
        return categories

    async def get_category(self, category_id: str) -> Optional[Category]:
        return next((c for c in await self.list_categories() if c.id == category_id), None)

    async def get_about(self) -> AboutContent:
        """Stored About content, or the default text when missing or unreadable."""
        try:
            about = await self.db.content.get_about()
        except RemoteCallError as e:
            logger.warning(f"Using default About content: {e}")
            return DEFAULT_ABOUT
        return about or DEFAULT_ABOUT
