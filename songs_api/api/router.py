# ============================================================================
# FILE: songs_api/api/router.py
# ============================================================================
from fastapi import APIRouter
from songs_api.api.endpoints import songs, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(user.router, prefix="/user", tags=["user"])
