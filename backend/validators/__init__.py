"""
Input validators.

Pure rule sets applied to request payloads before they reach the repository.
"""

from .user_validator import validate_create_user, validate_update_user, ensure_valid

__all__ = ["validate_create_user", "validate_update_user", "ensure_valid"]
