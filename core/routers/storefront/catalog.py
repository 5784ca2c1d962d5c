"""
Storefront Catalog Router

Public, read-only endpoints: products, categories, search, deals, About.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from core.errors import ERROR_CATEGORY_NOT_FOUND, ERROR_PRODUCT_NOT_FOUND
from core.services.database import Database
from core.services.domains.catalog import sort_products
from core.routers.deps import get_db

router = APIRouter(tags=["storefront-catalog"])


@router.get("/products")
async def get_products(
    category: Optional[str] = None,
    sort: Optional[str] = None,
    db: Database = Depends(get_db),
):
    """Products newest first, or in the given sort order; optionally one category only."""
    try:
        if category:
            products = await db.catalog.products_by_category(category, sort or "name")
        else:
            products = await db.catalog.list_products()
            if sort:
                products = sort_products(products, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"products": products}


@router.get("/products/featured")
async def get_featured_products(db: Database = Depends(get_db)):
    return {"products": await db.catalog.featured_products()}


@router.get("/products/search")
async def search_products(q: Optional[str] = Query(None), db: Database = Depends(get_db)):
    """Free-text search over name, description and category."""
    products = await db.catalog.search(q)
    return {"query": (q or "").strip(), "products": products, "count": len(products)}


@router.get("/products/{product_id}")
async def get_product(product_id: str, db: Database = Depends(get_db)):
    product = await db.catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"product": product}


@router.get("/deals")
async def get_deals(db: Database = Depends(get_db)):
    """Products discounted by 20% or more."""
    deals = await db.catalog.deals()
    return {
        "deals": [
            {"product": deal.product, "discount_percent": deal.discount_percent}
            for deal in deals
        ]
    }


@router.get("/categories")
async def get_categories(db: Database = Depends(get_db)):
    return {"categories": await db.catalog.list_categories()}


@router.get("/categories/{category_id}")
async def get_category(category_id: str, sort: str = "name", db: Database = Depends(get_db)):
    """Category header plus its products."""
    category = await db.catalog.get_category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    try:
        products = await db.catalog.products_by_category(category_id, sort)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"category": category, "products": products}


@router.get("/about")
async def get_about(db: Database = Depends(get_db)):
    return {"about": await db.catalog.get_about()}
