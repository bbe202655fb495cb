"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors, to_http_exception
from .logging_utils import set_logging_context, clear_logging_context, RequestContextFilter

__all__ = [
    "handle_api_errors",
    "to_http_exception",
    "set_logging_context",
    "clear_logging_context",
    "RequestContextFilter",
]
