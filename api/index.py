"""
Capital Fitness Storefront - Main FastAPI Application

Single entry point for the storefront and admin API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import config
from core.errors import ERROR_REMOTE, RemoteCallError
from core.logging import get_logger
from core.routers import admin_router, storefront_router
from core.services.database import close_database, init_database

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    try:
        await init_database()
    except ValueError as e:
        # Credentials missing; the first request that needs the database will raise
        logger.warning(f"Database not initialized at startup: {e}")
    yield
    # Shutdown
    await close_database()


app = FastAPI(
    title="Capital Fitness Storefront",
    description="Fitness equipment storefront and admin API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RemoteCallError)
async def remote_call_error_handler(request: Request, exc: RemoteCallError):
    """Supabase table/storage failures surface as an opaque 502."""
    logger.error(f"{request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=502, content={"detail": ERROR_REMOTE})


app.include_router(storefront_router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "capital-fitness"}
