"""
User Response DTOs

DTOs for user-related API responses.
"""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """
    Response DTO for a user.

    Read-only projection of the User model; creation metadata stays internal.
    """

    id: str = Field(description="User ID")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    email: str = Field(description="Email address")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
        frozen = True


class ErrorResponse(BaseModel):
    """Error body returned with every 4xx/5xx response"""

    detail: str = Field(description="Human-readable error message")
