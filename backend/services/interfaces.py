"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse


class IUserService(ABC):
    """
    Abstract interface for user lifecycle operations.
    """

    @abstractmethod
    def create(self, dto: CreateUserRequest) -> UserResponse:
        """
        Create a user.

        Args:
            dto: Create payload

        Returns:
            The created user

        Raises:
            ValidationError: If the payload breaks a field rule
            DuplicateEmailError: If the email already belongs to a user
        """
        pass

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[UserResponse]:
        """
        Get a user by id.

        Returns:
            The user, or None if no user has this id
        """
        pass

    @abstractmethod
    def get_all(self) -> List[UserResponse]:
        """
        Get every user in repository order.
        """
        pass

    @abstractmethod
    def update(self, user_id: str, dto: UpdateUserRequest) -> UserResponse:
        """
        Apply a partial update.

        Args:
            user_id: User UUID
            dto: Fields to change

        Returns:
            The updated user

        Raises:
            ValidationError: If a supplied field breaks a field rule
            UserNotFoundError: If no user has this id
            DuplicateEmailError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if the user was deleted, False if no user has this id
        """
        pass
