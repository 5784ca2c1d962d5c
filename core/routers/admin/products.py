"""
Admin Products Router

Product management endpoints.
"""
from fastapi import APIRouter, HTTPException, Depends

from core.auth import verify_admin
from core.errors import ERROR_PRODUCT_NOT_FOUND
from core.services.database import Database
from core.routers.deps import get_db
from .models import CreateProductRequest, UpdateProductRequest

router = APIRouter(tags=["admin-products"])


@router.get("/products")
async def admin_get_products(admin=Depends(verify_admin), db: Database = Depends(get_db)):
    """All products, newest first."""
    return {"products": await db.products.get_all()}


@router.post("/products")
async def admin_create_product(
    request: CreateProductRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        product = await db.catalog_admin.create_product(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "product": product}


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str,
    request: UpdateProductRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    """Update a product; a replaced image is removed from storage."""
    try:
        product = await db.catalog_admin.update_product(product_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "product": product}


@router.delete("/products/{product_id}")
async def admin_delete_product(product_id: str, admin=Depends(verify_admin), db: Database = Depends(get_db)):
    if not await db.catalog_admin.delete_product(product_id):
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True}
