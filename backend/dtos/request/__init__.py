"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .user_request import CreateUserRequest, UpdateUserRequest

__all__ = ["CreateUserRequest", "UpdateUserRequest"]
