"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""

from constants import ErrorMessages


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)
        self.invalid_fields = invalid_fields or {}


class DuplicateEmailError(ApplicationError):
    """Raised when an email is already owned by another user"""

    def __init__(self, email: str):
        super().__init__(ErrorMessages.email_exists(email), {"email": email})
        self.email = email


class UserNotFoundError(ApplicationError):
    """Raised when a user id references no stored user"""

    def __init__(self, user_id: str):
        super().__init__(ErrorMessages.user_not_found(user_id), {"user_id": user_id})
        self.user_id = user_id


class RepositoryError(ApplicationError):
    """Raised when the backing store fails"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
