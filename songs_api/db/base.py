# ============================================================================
# FILE: songs_api/db/base.py
# Import every model here so Base.metadata knows all tables
# ============================================================================
from songs_api.db.base_class import Base  # noqa: F401
from songs_api.db.models.user import User  # noqa: F401
from songs_api.db.models.song import Song  # noqa: F401
