# ============================================================================
# FILE: songs_api/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime
from songs_api.schemas.user import UserResponse

class SongBase(BaseModel):
    description: Optional[str] = None
    release_date: Optional[date] = None

class SongCreate(SongBase):
    """Schema for creating a song (owner comes from the authenticated user)"""
    title: str = Field(..., max_length=255)
    genre: str = Field(..., max_length=255)

    @field_validator("title", "genre")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

class SongUpdate(SongBase):
    """Schema for updating a song; only supplied fields are changed"""
    title: Optional[str] = Field(None, max_length=255)
    genre: Optional[str] = Field(None, max_length=255)

    @field_validator("title", "genre")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            raise ValueError("may not be null")
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

class SongResponse(BaseModel):
    """Schema for song response"""
    id: int
    title: str
    description: Optional[str] = None
    genre: str
    release_date: Optional[date] = None
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class SongCreatedResponse(BaseModel):
    """Created song together with the owner's public profile"""
    song: SongResponse
    user: UserResponse

class SongPage(BaseModel):
    """Length-aware pagination envelope"""
    current_page: int
    data: List[SongResponse]
    first_page_url: str
    from_: Optional[int] = Field(None, alias="from")
    last_page: int
    last_page_url: str
    next_page_url: Optional[str] = None
    path: str
    per_page: int
    prev_page_url: Optional[str] = None
    to: Optional[int] = None
    total: int

    class Config:
        populate_by_name = True

class SongListResponse(BaseModel):
    songs: SongPage

class MessageResponse(BaseModel):
    message: str
