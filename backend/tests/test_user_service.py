"""
Tests for UserService business rules.

Most tests run against the real repository over in-memory SQLite; the
call-count assertions use a mocked IUserRepository.
"""
import logging
import uuid
from unittest.mock import create_autospec

import pytest

from dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from exceptions import DuplicateEmailError, UserNotFoundError, ValidationError
from models import User
from repositories.interfaces import IUserRepository
from services.user_service import UserService


def matti() -> CreateUserRequest:
    return CreateUserRequest(first_name="Matti", last_name="Meikäläinen", email="matti@example.com")


@pytest.fixture
def mock_repository():
    repository = create_autospec(IUserRepository, instance=True)
    repository.add.side_effect = lambda user: user
    repository.update.side_effect = lambda user: user
    return repository


class TestCreate:

    def test_returns_input_fields(self, user_service):
        result = user_service.create(matti())

        assert result.first_name == "Matti"
        assert result.last_name == "Meikäläinen"
        assert result.email == "matti@example.com"
        assert result.id

    def test_distinct_creates_get_distinct_ids(self, user_service):
        first = user_service.create(matti())
        second = user_service.create(
            CreateUserRequest(first_name="Maija", last_name="Virtanen", email="maija@example.com")
        )

        assert first.id != second.id

    def test_created_user_is_readable(self, user_service):
        created = user_service.create(matti())

        assert user_service.get_by_id(created.id) == created

    def test_duplicate_email_is_rejected(self, user_service):
        user_service.create(matti())

        with pytest.raises(DuplicateEmailError) as exc_info:
            user_service.create(matti())

        assert "already exists" in exc_info.value.message
        assert len(user_service.get_all()) == 1

    def test_duplicate_email_performs_no_write(self, mock_repository):
        mock_repository.get_by_email.return_value = User("Maija", "Virtanen", "existing@example.com")
        service = UserService(mock_repository)

        with pytest.raises(DuplicateEmailError):
            service.create(CreateUserRequest(first_name="Matti", last_name="M", email="existing@example.com"))

        mock_repository.add.assert_not_called()

    def test_looks_up_email_then_adds_once(self, mock_repository):
        mock_repository.get_by_email.return_value = None
        service = UserService(mock_repository)

        service.create(matti())

        mock_repository.get_by_email.assert_called_once_with("matti@example.com")
        mock_repository.add.assert_called_once()

    def test_invalid_payload_never_reaches_repository(self, mock_repository):
        service = UserService(mock_repository)

        with pytest.raises(ValidationError) as exc_info:
            service.create(CreateUserRequest(first_name="", last_name="M", email="not-an-email"))

        assert set(exc_info.value.invalid_fields) == {"first_name", "email"}
        mock_repository.get_by_email.assert_not_called()
        mock_repository.add.assert_not_called()


class TestRead:

    def test_get_by_id_missing_returns_none(self, user_service):
        assert user_service.get_by_id(str(uuid.uuid4())) is None

    def test_get_all_empty(self, user_service):
        assert user_service.get_all() == []

    def test_get_all_keeps_repository_order(self, mock_repository):
        users = [
            User("Matti", "Meikäläinen", "matti@example.com"),
            User("Maija", "Virtanen", "maija@example.com"),
            User("Aino", "Aalto", "aino@example.com"),
        ]
        mock_repository.get_all.return_value = users
        service = UserService(mock_repository)

        result = service.get_all()

        assert [dto.email for dto in result] == [user.email for user in users]

    def test_get_all_is_repeatable(self, user_service):
        user_service.create(matti())
        user_service.create(CreateUserRequest(first_name="Maija", last_name="Virtanen", email="maija@example.com"))

        assert user_service.get_all() == user_service.get_all()


class TestUpdate:

    def test_partial_update_keeps_other_fields(self, user_service):
        created = user_service.create(matti())

        updated = user_service.update(created.id, UpdateUserRequest(first_name="Updated"))

        assert updated.id == created.id
        assert updated.first_name == "Updated"
        assert updated.last_name == created.last_name
        assert updated.email == created.email

    def test_full_update(self, user_service):
        created = user_service.create(matti())

        updated = user_service.update(
            created.id,
            UpdateUserRequest(first_name="Updated", last_name="User", email="Updated@email.com")
        )

        assert updated.first_name == "Updated"
        assert updated.last_name == "User"
        assert updated.email == "Updated@email.com"
        assert user_service.get_by_id(created.id) == updated

    def test_missing_user_raises_not_found(self, user_service):
        with pytest.raises(UserNotFoundError):
            user_service.update(str(uuid.uuid4()), UpdateUserRequest(first_name="Updated"))

    def test_missing_user_performs_no_write(self, mock_repository):
        mock_repository.get_by_id.return_value = None
        service = UserService(mock_repository)

        with pytest.raises(UserNotFoundError):
            service.update("missing", UpdateUserRequest(first_name="Updated"))

        mock_repository.update.assert_not_called()

    def test_invalid_field_is_rejected(self, user_service):
        created = user_service.create(matti())

        with pytest.raises(ValidationError):
            user_service.update(created.id, UpdateUserRequest(email="broken@"))

        assert user_service.get_by_id(created.id).email == "matti@example.com"

    def test_email_uniqueness_not_rechecked_by_default(self, mock_repository):
        user = User("Matti", "Meikäläinen", "matti@example.com")
        mock_repository.get_by_id.return_value = user
        service = UserService(mock_repository)

        service.update(user.id, UpdateUserRequest(email="maija@example.com"))

        mock_repository.get_by_email.assert_not_called()
        mock_repository.update.assert_called_once_with(user)

    def test_storage_still_rejects_taken_email(self, user_service):
        user_service.create(CreateUserRequest(first_name="Maija", last_name="Virtanen", email="maija@example.com"))
        created = user_service.create(matti())

        with pytest.raises(DuplicateEmailError):
            user_service.update(created.id, UpdateUserRequest(email="maija@example.com"))

    def test_uniqueness_check_when_enabled(self, user_repository):
        service = UserService(user_repository, enforce_unique_email_on_update=True)
        service.create(CreateUserRequest(first_name="Maija", last_name="Virtanen", email="maija@example.com"))
        created = service.create(matti())

        with pytest.raises(DuplicateEmailError) as exc_info:
            service.update(created.id, UpdateUserRequest(email="maija@example.com"))

        assert "already exists" in exc_info.value.message
        assert service.get_by_id(created.id).email == "matti@example.com"

    def test_uniqueness_check_allows_keeping_own_email(self, user_repository):
        service = UserService(user_repository, enforce_unique_email_on_update=True)
        created = service.create(matti())

        updated = service.update(created.id, UpdateUserRequest(first_name="Updated", email="matti@example.com"))

        assert updated.email == "matti@example.com"
        assert updated.first_name == "Updated"


class TestDelete:

    def test_delete_existing_then_again(self, user_service):
        created = user_service.create(matti())

        assert user_service.delete(created.id) is True
        assert user_service.delete(created.id) is False
        assert user_service.get_by_id(created.id) is None

    def test_missing_user_performs_no_delete(self, mock_repository):
        mock_repository.get_by_id.return_value = None
        service = UserService(mock_repository)

        assert service.delete("missing") is False
        mock_repository.delete_by_id.assert_not_called()

    def test_existing_user_is_deleted_through_repository(self, mock_repository):
        user = User("Matti", "Meikäläinen", "matti@example.com")
        mock_repository.get_by_id.return_value = user
        mock_repository.delete_by_id.return_value = True
        service = UserService(mock_repository)

        assert service.delete(user.id) is True
        mock_repository.delete_by_id.assert_called_once_with(user.id)


class TestLogging:

    def test_update_is_logged_with_user_id(self, user_service, caplog):
        created = user_service.create(matti())
        caplog.set_level(logging.INFO, logger="services.user_service")

        user_service.update(created.id, UpdateUserRequest(first_name="Updated"))

        completed = [r for r in caplog.records if r.getMessage() == "Completed update_user"]
        assert len(completed) == 1
        assert completed[0].user_id == created.id

    def test_missing_user_is_logged_as_rejection(self, user_service, caplog):
        caplog.set_level(logging.INFO, logger="services.user_service")

        with pytest.raises(UserNotFoundError):
            user_service.update("missing", UpdateUserRequest(first_name="Updated"))

        rejected = [r for r in caplog.records if getattr(r, "operation", None) == "update_user"]
        assert rejected[-1].levelno == logging.WARNING
        assert rejected[-1].user_id == "missing"
