"""Admin Categories Router"""
from fastapi import APIRouter, HTTPException, Depends

from core.auth import verify_admin
from core.errors import ERROR_CATEGORY_NOT_FOUND
from core.services.database import Database
from core.routers.deps import get_db
from .models import CreateCategoryRequest, UpdateCategoryRequest

router = APIRouter(tags=["admin-categories"])


@router.get("/categories")
async def admin_get_categories(admin=Depends(verify_admin), db: Database = Depends(get_db)):
    return {"categories": await db.catalog.list_categories()}


@router.post("/categories")
async def admin_create_category(
    request: CreateCategoryRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        category = await db.catalog_admin.create_category(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "category": category}


@router.put("/categories/{category_id}")
async def admin_update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        category = await db.catalog_admin.update_category(category_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {"success": True, "category": category}
