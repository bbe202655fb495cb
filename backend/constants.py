"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"  # Listen on all interfaces by default
    PORT = 8080


class EnvVars:
    """Environment variable names read by config.settings"""

    DATA_DIR = "USERS_API_DATA_DIR"
    DATABASE_URL = "USERS_API_DATABASE_URL"
    LOG_LEVEL = "USERS_API_LOG_LEVEL"
    LOG_TO_FILE = "USERS_API_LOG_TO_FILE"
    UNIQUE_EMAIL_ON_UPDATE = "USERS_API_UNIQUE_EMAIL_ON_UPDATE"
    HOST = "USERS_API_HOST"
    PORT = "USERS_API_PORT"


class FieldNames:
    """User payload field names, as exposed over the API"""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"


class ErrorMessages:
    """User-facing error messages"""

    FIRST_NAME_REQUIRED = "First name is required"
    LAST_NAME_REQUIRED = "Last name is required"
    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID = "Email is not a valid email address"
    INVALID_PAYLOAD = "Invalid user data"

    @staticmethod
    def email_exists(email: str) -> str:
        return f"User with email '{email}' already exists"

    @staticmethod
    def user_not_found(user_id: str) -> str:
        return f"User '{user_id}' not found"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
