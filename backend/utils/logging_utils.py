"""
Structured Logging Utilities

Request-scoped logging context. Values set with set_logging_context() are
attached to every log record emitted in the same context (typically one
HTTP request), either by StructuredLogger or by RequestContextFilter for
plain loggers.
"""

import inspect
import logging
import time
import uuid
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps

from exceptions import ApplicationError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

REQUEST_ID_HEADER = "X-Request-ID"

# Argument names copied into the log context by log_operation
CONTEXT_ARGUMENTS = ("user_id",)


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("User created", extra={"user_id": user.id})
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge the request context with per-call extra values.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123", method="POST", path="/api/users")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Get a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _call_context(func, operation_name: str, args, kwargs) -> Dict[str, Any]:
    context: Dict[str, Any] = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return context
    for key in CONTEXT_ARGUMENTS:
        if key in bound.arguments:
            context[key] = bound.arguments[key]
    return context


def _log_failure(logger: StructuredLogger, operation_name: str, context: Dict[str, Any], error: Exception):
    context = {**context, "error": str(error), "error_type": type(error).__name__}
    if isinstance(error, ApplicationError):
        # Expected rejection: no traceback
        logger.warning(f"Rejected {operation_name}: {error}", extra=context)
    else:
        logger.error(f"Failed {operation_name}", extra=context, exc_info=True)


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Identifiers listed in CONTEXT_ARGUMENTS are picked up whether they are
    passed positionally or by keyword.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("update_user")
        def update(self, user_id: str, dto: UpdateUserRequest):
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = _call_context(func, operation_name, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            started = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_failure(logger, operation_name, context, e)
                raise
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            logger.info(f"Completed {operation_name}", extra={**context, "elapsed_ms": elapsed_ms})
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            context = _call_context(func, operation_name, args, kwargs)
            logger.debug(f"Starting {operation_name}", extra=context)
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log_failure(logger, operation_name, context, e)
                raise
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            logger.info(f"Completed {operation_name}", extra={**context, "elapsed_ms": elapsed_ms})
            return result

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


class RequestContextFilter(logging.Filter):
    """
    Copy the current logging context onto each record.

    Records always get a request_id attribute ('-' outside a request) so
    formatters can reference %(request_id)s unconditionally.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context = _logging_context.get()
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True
