"""
Admin Auth Router

Password login/logout for the admin console. The returned token goes in the
X-Admin-Token header of every other admin request.
"""
from fastapi import APIRouter, Depends, HTTPException

from core.auth import AdminSession, get_admin_session, get_admin_session_store
from core.errors import ERROR_INVALID_CREDENTIALS
from .models import AdminLoginRequest

router = APIRouter(tags=["admin-auth"])


@router.post("/login")
def admin_login(request: AdminLoginRequest):
    session = AdminSession(None, get_admin_session_store())
    if not session.login(request.password):
        raise HTTPException(status_code=401, detail=ERROR_INVALID_CREDENTIALS)
    return {"success": True, "token": session.token}


@router.post("/logout")
def admin_logout(session: AdminSession = Depends(get_admin_session)):
    session.logout()
    return {"success": True}


@router.get("/session")
def admin_session_status(session: AdminSession = Depends(get_admin_session)):
    return {"authenticated": session.is_authenticated}
