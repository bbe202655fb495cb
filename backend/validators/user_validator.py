"""
User Payload Validator

Field-level rules for create and update payloads. The validate_* functions
are pure: they never raise and return every violation found, keyed by field
name. ensure_valid() is the one place a violation set becomes an exception.

Email syntax follows email-validator with deliverability checks off. That
also rejects special-use domains (.test, .local, localhost, ...) and
domains without a dot, so addresses like user@localhost are refused.
"""
from typing import Dict, List, Optional

from email_validator import validate_email, EmailNotValidError

from constants import ErrorMessages, FieldNames
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from exceptions import ValidationError
import logging

logger = logging.getLogger(__name__)

Violations = Dict[str, List[str]]


def _check_name(value: Optional[str], field: str, message: str, violations: Violations) -> None:
    if value is None or not value.strip():
        violations.setdefault(field, []).append(message)


def _check_email(value: Optional[str], violations: Violations) -> None:
    if value is None or not value.strip():
        violations.setdefault(FieldNames.EMAIL, []).append(ErrorMessages.EMAIL_REQUIRED)
        return

    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected email {value!r}: {e}")
        violations.setdefault(FieldNames.EMAIL, []).append(ErrorMessages.EMAIL_INVALID)


def validate_create_user(dto: CreateUserRequest) -> Violations:
    """
    Check a create payload.

    Args:
        dto: Incoming create request

    Returns:
        Mapping of field name to messages, empty when the payload is valid
    """
    violations: Violations = {}
    _check_name(dto.first_name, FieldNames.FIRST_NAME, ErrorMessages.FIRST_NAME_REQUIRED, violations)
    _check_name(dto.last_name, FieldNames.LAST_NAME, ErrorMessages.LAST_NAME_REQUIRED, violations)
    _check_email(dto.email, violations)
    return violations


def validate_update_user(dto: UpdateUserRequest) -> Violations:
    """
    Check a partial update payload.

    Only the fields present in the payload are checked; an omitted field
    is never a violation.

    Args:
        dto: Incoming update request

    Returns:
        Mapping of field name to messages, empty when the payload is valid
    """
    violations: Violations = {}
    changes = dto.changes()

    if FieldNames.FIRST_NAME in changes:
        _check_name(changes[FieldNames.FIRST_NAME], FieldNames.FIRST_NAME,
                    ErrorMessages.FIRST_NAME_REQUIRED, violations)
    if FieldNames.LAST_NAME in changes:
        _check_name(changes[FieldNames.LAST_NAME], FieldNames.LAST_NAME,
                    ErrorMessages.LAST_NAME_REQUIRED, violations)
    if FieldNames.EMAIL in changes:
        _check_email(changes[FieldNames.EMAIL], violations)

    return violations


def ensure_valid(violations: Violations) -> None:
    """
    Raise if a violation set is non-empty.

    Raises:
        ValidationError: Carrying the violations as invalid_fields
    """
    if not violations:
        return

    messages = [message for field_messages in violations.values() for message in field_messages]
    raise ValidationError("; ".join(messages), invalid_fields=violations)
