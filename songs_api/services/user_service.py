# ============================================================================
# FILE: songs_api/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session
from songs_api.db.models.user import User
from songs_api.schemas.user import UserCreate
from songs_api.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account"""
        try:
            user = User(
                name=user_data.name,
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password)
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.id}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        """Get user by id"""
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    def authenticate_user(self, db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = self.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

# Create singleton instance
user_service = UserService()
