"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. Tests swap any of them through
app.dependency_overrides.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from config.settings import get_settings
from database import get_db
from repositories.interfaces import IUserRepository
from repositories.user_repository import UserRepository
from services.interfaces import IUserService
from services.user_service import UserService


def get_user_repository(db: Session = Depends(get_db)) -> IUserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserRepository: SQLAlchemy-backed user repository
    """
    return UserRepository(db)


def get_user_service(repository: IUserRepository = Depends(get_user_repository)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        repository: User repository (injected)

    Returns:
        IUserService: User service implementation
    """
    settings = get_settings()
    return UserService(
        repository,
        enforce_unique_email_on_update=settings.unique_email_on_update
    )
