"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Dict, Any
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from exceptions import RepositoryError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.

    Every write commits its own unit of work; a failed commit is rolled back
    so the session stays usable for the rest of the request.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T, context: Optional[Dict[str, Any]] = None) -> T:
        """
        Insert a new record and commit.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self._commit("create", context)
        self.db.refresh(obj)
        return obj

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def get_all(self) -> List[T]:
        """
        Retrieve all records in the database's natural order.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).all()

    def save(self, obj: T, context: Optional[Dict[str, Any]] = None) -> T:
        """
        Commit pending changes on an already tracked record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        self._commit("update", context)
        self.db.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record and commit.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self._commit("delete")

    def _commit(self, operation: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Commit the session, rolling back on failure.

        Args:
            operation: Name of the write, used in logs and errors
            context: Values captured before the commit, passed to _on_integrity_error

        Raises:
            RepositoryError: If the database rejects the commit and
                _on_integrity_error does not raise something more specific
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            self._on_integrity_error(e, context or {})
            logger.error(f"{self.model.__name__} {operation} violated a constraint: {e.orig}")
            raise RepositoryError(operation, f"Could not {operation} {self.model.__name__}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self.model.__name__} {operation} failed: {e}", exc_info=True)
            raise RepositoryError(operation, f"Could not {operation} {self.model.__name__}") from e

    def _on_integrity_error(self, error: IntegrityError, context: Dict[str, Any]) -> None:
        """Hook for subclasses to raise a domain error for a known constraint."""
        pass
