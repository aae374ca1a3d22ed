"""Main FastAPI application with all middleware"""

from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from wishlist_api.core.config import settings
from wishlist_api.core.database import init_db, close_db
from wishlist_api.core.exceptions import register_exception_handlers
from wishlist_api.core.logging import setup_logging
from wishlist_api.core.middleware import setup_middleware
from wishlist_api.middleware.rate_limit import setup_rate_limiting
from wishlist_api.middleware.security import SecurityMiddleware
from wishlist_api.api.health import router as health_router
from wishlist_api.api.v1 import api_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting up {settings.APP_NAME}...")

    if settings.ENVIRONMENT != "test":
        await init_db()

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()

def create_app() -> FastAPI:
    """Build and configure the application"""
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Wishlist folders of saved listings and booking checkout",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan
    )

    register_exception_handlers(app)
    setup_rate_limiting(app)
    app.add_middleware(SecurityMiddleware)
    setup_middleware(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(api_router, prefix="/api/v1")

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wishlist_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS
    )
