# ============================================================================
# FILE: songs_api/api/dependencies.py
# ============================================================================
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from songs_api.db.session import get_db
from songs_api.core.security import decode_access_token
from songs_api.db.models.user import User
from songs_api.services.user_service import user_service
from typing import Optional

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/user/login", auto_error=False)

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get current authenticated user from JWT token
    Returns None if no token is sent; a bad token raises 401
    """
    if not token:
        return None

    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        return None

    return user_service.get_user(db, int(subject))

def require_current_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
