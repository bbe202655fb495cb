"""
Model to DTO mapping.

Kept as plain functions so the API never receives an ORM object.
"""

from models import User
from dtos.response.user_response import UserResponse


def to_user_response(user: User) -> UserResponse:
    """
    Project a User model onto its response DTO.

    Args:
        user: Stored user

    Returns:
        UserResponse with the user's id, names and email
    """
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email
    )
