# ============================================================================
# FILE: songs_api/api/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session
from typing import Optional
from songs_api.db.session import get_db
from songs_api.api.dependencies import require_current_user
from songs_api.config import settings
from songs_api.core.pagination import paginate, resolve_page
from songs_api.schemas.song import (
    SongCreate,
    SongUpdate,
    SongResponse,
    SongCreatedResponse,
    SongListResponse,
    MessageResponse
)
from songs_api.schemas.user import UserResponse
from songs_api.services.song_service import song_service
from songs_api.db.models.song import Song
from songs_api.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def get_song_or_404(song_id: int, db: Session) -> Song:
    song = song_service.get_song(db, song_id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

def ensure_can_modify(song: Song, user: User) -> None:
    if not song_service.can_modify(song, user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not allowed to modify this song"
        )

@router.get("", response_model=SongListResponse)
async def list_songs(
    request: Request,
    genre: Optional[str] = Query(None, description="Exact genre to filter by"),
    page: Optional[str] = Query(None, description="Page number, invalid values mean page 1"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    List songs, 50 per page
    Requires authentication

    Returns:
        {"songs": {"data": [...], "total": int, "per_page": int, ...}}
    """
    query = song_service.list_songs(db, genre)
    envelope = paginate(query, request.url, resolve_page(page), settings.SONGS_PER_PAGE, SongResponse)
    return {"songs": envelope}

@router.post("", response_model=SongCreatedResponse)
async def create_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new song owned by the current user
    Requires authentication
    """
    try:
        song = song_service.create_song(db, current_user.id, song_data)
    except Exception as e:
        logger.error(f"Create song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create song")

    return {
        "song": SongResponse.model_validate(song),
        "user": UserResponse.model_validate(current_user)
    }

@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get a specific song
    Requires authentication
    """
    return get_song_or_404(song_id, db)

@router.put("/{song_id}", response_model=MessageResponse)
async def update_song(
    song_id: int,
    update_data: SongUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Update any subset of a song's fields
    Requires authentication and ownership (or admin role)
    """
    song = get_song_or_404(song_id, db)
    ensure_can_modify(song, current_user)

    try:
        song_service.update_song(db, song, update_data)
    except Exception as e:
        logger.error(f"Update song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update song")
    return {"message": "Song updated successfully."}

@router.delete("/{song_id}", response_model=MessageResponse)
async def delete_song(
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a song
    Requires authentication and ownership (or admin role)
    """
    song = get_song_or_404(song_id, db)
    ensure_can_modify(song, current_user)

    try:
        song_service.delete_song(db, song)
    except Exception as e:
        logger.error(f"Delete song error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete song")
    return {"message": "Song deleted successfully!"}
