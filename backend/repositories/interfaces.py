"""
Repository Interfaces

Abstract capability sets consumed by the service layer. Services depend on
these, never on SQLAlchemy, so the backing store can be swapped or mocked.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models import User


class IUserRepository(ABC):
    """
    Persistence operations for User records.
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Fetch a user by id.

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by exact email.

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    def get_all(self) -> List[User]:
        """
        Fetch every user, in the store's natural order.
        """
        pass

    @abstractmethod
    def add(self, user: User) -> User:
        """
        Persist a new user.

        Returns:
            The persisted user

        Raises:
            DuplicateEmailError: If the store rejects the email as taken
            RepositoryError: On any other storage failure
        """
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        """
        Persist changes made to an existing user.

        Returns:
            The persisted user

        Raises:
            DuplicateEmailError: If the store rejects the email as taken
            RepositoryError: On any other storage failure
        """
        pass

    @abstractmethod
    def delete_by_id(self, user_id: str) -> bool:
        """
        Delete a user by id.

        Returns:
            True if deleted, False if not found
        """
        pass
