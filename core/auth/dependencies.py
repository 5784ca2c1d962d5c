"""FastAPI dependencies for the admin console."""
from fastapi import Header, HTTPException

from core.errors import ERROR_UNAUTHORIZED
from .session import AdminSession, get_admin_session_store


def get_admin_session(x_admin_token: str | None = Header(None, alias="X-Admin-Token")) -> AdminSession:
    """Admin session for the request's token, flag already loaded."""
    session = AdminSession(x_admin_token, get_admin_session_store())
    session.load()
    return session


def verify_admin(x_admin_token: str | None = Header(None, alias="X-Admin-Token")) -> AdminSession:
    """
    Require a logged-in admin.

    Usage:
        @router.get("/products", dependencies=[Depends(verify_admin)])
    """
    session = get_admin_session(x_admin_token)
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    return session
