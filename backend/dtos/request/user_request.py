"""
User Request DTOs

DTOs for user-related API requests.

Field contents are checked by validators.user_validator rather than by
pydantic, so a blank name or malformed email reaches the service and is
reported with every offending field at once.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class CreateUserRequest(BaseModel):
    """
    Request DTO for creating a user.

    All fields are required.
    """

    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    email: str = Field(description="Email address, unique among users")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "first_name": "Matti",
                "last_name": "Meikäläinen",
                "email": "matti@example.com"
            }
        }


class UpdateUserRequest(BaseModel):
    """
    Request DTO for a partial user update.

    Omitted (or null) fields keep their stored value.
    """

    first_name: Optional[str] = Field(None, description="New first name")
    last_name: Optional[str] = Field(None, description="New last name")
    email: Optional[str] = Field(None, description="New email address")

    def changes(self) -> Dict[str, Any]:
        """
        Get only the fields the caller supplied.

        Returns:
            Mapping of field name to new value, without None entries
        """
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "first_name": "Updated"
            }
        }
