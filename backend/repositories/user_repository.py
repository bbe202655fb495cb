"""
User repository for user-specific data access operations.
"""

from typing import Optional, Dict, Any
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exceptions import DuplicateEmailError
from models import User
from .base_repository import BaseRepository
from .interfaces import IUserRepository


class UserRepository(BaseRepository[User], IUserRepository):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by exact email.

        Args:
            email: Email address as stored

        Returns:
            User instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.email == email).first()

    def add(self, user: User) -> User:
        return self.create(user, {"email": user.email})

    def update(self, user: User) -> User:
        return self.save(user, {"email": user.email})

    def delete_by_id(self, user_id: str) -> bool:
        """
        Delete a user by id.

        Args:
            user_id: User UUID

        Returns:
            True if deleted, False if not found
        """
        user = self.get_by_id(user_id)
        if not user:
            return False
        self.delete(user)
        return True

    def _on_integrity_error(self, error: IntegrityError, context: Dict[str, Any]) -> None:
        # SQLite: "UNIQUE constraint failed: users.email"
        # PostgreSQL: "duplicate key value violates unique constraint \"users_email_key\""
        message = str(error.orig).lower()
        if "unique" in message and "email" in message and "email" in context:
            raise DuplicateEmailError(context["email"]) from error
