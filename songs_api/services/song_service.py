# ============================================================================
# FILE: songs_api/services/song_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session, Query
from songs_api.db.models.song import Song
from songs_api.db.models.user import User
from songs_api.schemas.song import SongCreate, SongUpdate
import logging

logger = logging.getLogger(__name__)

# Largest id a 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

class SongService:
    """Service layer for song operations"""

    def list_songs(self, db: Session, genre: Optional[str] = None) -> Query:
        """Query for all songs, optionally narrowed to one genre (exact match)"""
        query = db.query(Song)
        if genre:
            query = query.filter(Song.genre == genre)
        return query.order_by(Song.id)

    def create_song(self, db: Session, user_id: int, song_data: SongCreate) -> Song:
        """Create a new song owned by the given user"""
        try:
            song = Song(
                user_id=user_id,
                title=song_data.title,
                description=song_data.description,
                genre=song_data.genre,
                release_date=song_data.release_date
            )
            db.add(song)
            db.commit()
            db.refresh(song)
            logger.info(f"Song created: {song.id} for user {user_id}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise

    def get_song(self, db: Session, song_id: int) -> Optional[Song]:
        """Get a song by id"""
        if not -MAX_ID <= song_id <= MAX_ID:
            return None
        return db.query(Song).filter(Song.id == song_id).first()

    def can_modify(self, song: Song, user: User) -> bool:
        """Owners and admins may change or delete a song"""
        return song.user_id == user.id or user.is_admin

    def update_song(self, db: Session, song: Song, update_data: SongUpdate) -> Song:
        """Apply only the fields present in the request"""
        try:
            for field, value in update_data.model_dump(exclude_unset=True).items():
                setattr(song, field, value)

            db.commit()
            db.refresh(song)
            logger.info(f"Song updated: {song.id}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating song: {e}")
            raise

    def delete_song(self, db: Session, song: Song) -> None:
        """Hard-delete a song"""
        song_id = song.id
        try:
            db.delete(song)
            db.commit()
            logger.info(f"Song deleted: {song_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting song: {e}")
            raise

# Create singleton instance
song_service = SongService()
