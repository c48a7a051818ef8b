# ============================================================================
# FILE: songs_api/db/session.py
# ============================================================================
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from songs_api.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """Yield a database session per request and always close it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
