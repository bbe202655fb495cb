"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and control exactly what data is exposed.
"""

from .user_response import UserResponse, ErrorResponse

__all__ = ["UserResponse", "ErrorResponse"]
