"""
Error handling decorators and utilities for API endpoints.

Service exceptions are translated to HTTP responses in one place so every
endpoint reports the same status for the same failure.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ValidationError,
    DuplicateEmailError,
    UserNotFoundError,
    RepositoryError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised by the service layer to an HTTPException.

    Expected rejections keep their own message; unexpected failures get a
    generic one so no internal detail reaches the caller.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create user")
        error: The exception raised by the endpoint body

    Returns:
        HTTPException carrying the status code and detail message
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, DuplicateEmailError):
        logger.warning(f"{operation_name} - Conflict: {error.message}")
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=error.message)
    if isinstance(error, UserNotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, RepositoryError):
        logger.error(f"{operation_name} - Repository error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: database error"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create user")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("/users")
        @handle_api_errors("Create user")
        def create_user(...):
            return service.create(dto)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                http_error = to_http_exception(operation_name, e)
                if http_error is e:
                    raise
                raise http_error from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                http_error = to_http_exception(operation_name, e)
                if http_error is e:
                    raise
                raise http_error from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
