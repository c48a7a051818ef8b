# ============================================================================
# FILE: songs_api/main.py
# ============================================================================
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from songs_api.api.router import api_router
from songs_api.core.errors import register_exception_handlers
from songs_api.core.logging import setup_logging
from songs_api.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup, log shutdown"""
    logger.info(f"Starting {settings.APP_NAME}")
    from songs_api.db.base import Base
    from songs_api.db.session import engine
    Base.metadata.create_all(bind=engine)
    yield
    logger.info(f"Shutting down {settings.APP_NAME}")

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD API for user-owned songs with genre filtering and pagination",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix="/api")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
