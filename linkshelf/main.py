"""
Linkshelf API - FastAPI application entry point
Curate link collections and browse the public catalog
"""

import logging

# Configure logging to show INFO level
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s"
)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from linkshelf.config import settings
from linkshelf.database import create_tables
from linkshelf.middleware.rate_limiter import setup_rate_limiting
from linkshelf.utils.error_handlers import setup_error_handlers

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Curate, order and publish collections of links",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "authentication", "description": "User registration and API keys"},
        {"name": "collections", "description": "Collection management"},
        {"name": "links", "description": "Link management"},
        {"name": "catalog", "description": "Public catalog"},
        {"name": "users", "description": "Public user profiles"}
    ]
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_rate_limiting(app)
setup_error_handlers(app)


@app.on_event("startup")
async def startup_event():
    """Initialize database tables on startup"""
    create_tables()
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started")
    logger.info(f"API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Detailed health check"""
    from linkshelf.api.deps import get_catalog_cache

    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "catalog_cache": get_catalog_cache().get_stats()
    }


# Import and register routers
from linkshelf.api import auth, collections, links, catalog, users

app.include_router(auth.router, prefix="/api/v1")
app.include_router(collections.router, prefix="/api/v1")
app.include_router(links.router, prefix="/api/v1")
app.include_router(catalog.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "linkshelf.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD
    )
