"""
Admin Content Router

About page text and image uploads to the product-images bucket.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from core.auth import verify_admin
from core.errors import ImageValidationError
from core.logging import get_logger
from core.services.database import Database
from core.routers.deps import get_db
from .models import SaveAboutRequest

logger = get_logger(__name__)

router = APIRouter(tags=["admin-content"])


# ==================== ABOUT ====================

@router.get("/about")
async def admin_get_about(admin=Depends(verify_admin), db: Database = Depends(get_db)):
    return {"about": await db.catalog.get_about()}


@router.put("/about")
async def admin_save_about(
    request: SaveAboutRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        about = await db.catalog_admin.save_about(request.title, request.content, request.id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "about": about}


# ==================== UPLOADS ====================

@router.post("/uploads")
async def admin_upload_image(
    file: UploadFile = File(...),
    folder: str = Form("products"),
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    """Upload an image (image/*, at most 5MB); returns its public URL."""
    content = await file.read()
    try:
        url = await db.images.upload(folder, file.filename or "upload", content, file.content_type)
    except ImageValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "url": url}


@router.delete("/uploads")
async def admin_remove_image(url: Optional[str] = None, admin=Depends(verify_admin), db: Database = Depends(get_db)):
    """Remove an image by public URL. URLs outside the bucket are ignored."""
    removed = await db.images.remove_by_url(url or "")
    return {"success": True, "removed": removed}
