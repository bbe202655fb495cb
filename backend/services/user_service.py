"""
User Service

Business rules for the user lifecycle: payload validation, email uniqueness,
existence checks and model -> DTO mapping. Storage is reached only through
IUserRepository.

The email lookup in create() is read-then-write and not atomic; two
concurrent creates for the same email are settled by the unique constraint
in the repository, which surfaces as the same DuplicateEmailError.
"""

from typing import List, Optional

from dtos.mappers import to_user_response
from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from dtos.response.user_response import UserResponse
from exceptions import DuplicateEmailError, UserNotFoundError
from models import User
from repositories.interfaces import IUserRepository
from services.interfaces import IUserService
from utils.logging_utils import StructuredLogger, log_operation
from validators.user_validator import validate_create_user, validate_update_user, ensure_valid

logger = StructuredLogger(__name__)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, repository: IUserRepository, enforce_unique_email_on_update: bool = False):
        """
        Initialize UserService.

        Args:
            repository: User repository
            enforce_unique_email_on_update: Reject an update whose new email
                belongs to another user before writing
        """
        self.repository = repository
        self.enforce_unique_email_on_update = enforce_unique_email_on_update

    @log_operation("create_user")
    def create(self, dto: CreateUserRequest) -> UserResponse:
        ensure_valid(validate_create_user(dto))

        if self.repository.get_by_email(dto.email) is not None:
            raise DuplicateEmailError(dto.email)

        user = User(first_name=dto.first_name, last_name=dto.last_name, email=dto.email)
        saved = self.repository.add(user)

        logger.info(f"Created user {saved.id}", extra={"user_id": saved.id})
        return to_user_response(saved)

    def get_by_id(self, user_id: str) -> Optional[UserResponse]:
        user = self.repository.get_by_id(user_id)
        if user is None:
            return None
        return to_user_response(user)

    def get_all(self) -> List[UserResponse]:
        return [to_user_response(user) for user in self.repository.get_all()]

    @log_operation("update_user")
    def update(self, user_id: str, dto: UpdateUserRequest) -> UserResponse:
        """
        Apply a partial update.

        Only fields present in the payload are validated and written. Email
        uniqueness is re-checked here only when enforce_unique_email_on_update
        is set; otherwise a clash is left to the repository's unique constraint.
        """
        ensure_valid(validate_update_user(dto))

        user = self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        changes = dto.changes()
        new_email = changes.get("email")
        if self.enforce_unique_email_on_update and new_email and new_email != user.email:
            owner = self.repository.get_by_email(new_email)
            if owner is not None and owner.id != user.id:
                raise DuplicateEmailError(new_email)

        user.apply_changes(**changes)
        saved = self.repository.update(user)

        logger.debug(f"Updated fields: {', '.join(sorted(changes)) or 'none'}", extra={"user_id": saved.id})
        return to_user_response(saved)

    @log_operation("delete_user")
    def delete(self, user_id: str) -> bool:
        if self.repository.get_by_id(user_id) is None:
            return False
        return self.repository.delete_by_id(user_id)
