"""
Admin Settings Router

Tax, shipping and global settings. Checkout re-reads these on every quote.
"""
from fastapi import APIRouter, HTTPException, Depends

from core.auth import verify_admin
from core.errors import ERROR_NOT_FOUND
from core.services.database import Database
from core.routers.deps import get_db
from .models import AddShippingSettingRequest, AddTaxSettingRequest, UpdateGlobalSettingRequest

router = APIRouter(tags=["admin-settings"])


@router.get("/settings")
async def admin_get_settings(admin=Depends(verify_admin), db: Database = Depends(get_db)):
    return await db.store_settings.list_all()


@router.post("/settings/tax")
async def admin_add_tax_setting(
    request: AddTaxSettingRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        setting = await db.store_settings.add_tax_setting(
            request.state, request.tax_percentage, request.product_id, request.is_default
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "setting": setting}


@router.post("/settings/shipping")
async def admin_add_shipping_setting(
    request: AddShippingSettingRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        setting = await db.store_settings.add_shipping_setting(
            request.state,
            request.shipping_charge,
            request.free_shipping_threshold,
            request.product_id,
            request.is_default,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "setting": setting}


@router.delete("/settings/tax/{setting_id}")
async def admin_delete_tax_setting(setting_id: str, admin=Depends(verify_admin), db: Database = Depends(get_db)):
    await db.store_settings.delete_tax_setting(setting_id)
    return {"success": True}


@router.delete("/settings/shipping/{setting_id}")
async def admin_delete_shipping_setting(
    setting_id: str,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    await db.store_settings.delete_shipping_setting(setting_id)
    return {"success": True}


@router.put("/settings/global/{key}")
async def admin_update_global_setting(
    key: str,
    request: UpdateGlobalSettingRequest,
    admin=Depends(verify_admin),
    db: Database = Depends(get_db),
):
    try:
        updated = await db.store_settings.update_global_setting(key, request.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "key": key, "value": request.value}
