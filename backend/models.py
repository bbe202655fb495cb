from sqlalchemy import Column, String, DateTime, CheckConstraint, Index
from datetime import datetime, timezone
from typing import Optional
import uuid

from database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    A user record.

    The id is assigned when the object is constructed and never changes.
    Email uniqueness is enforced by the `users.email` unique constraint;
    UserService checks it up front on create so the common case returns a
    clean conflict instead of an IntegrityError.
    """
    __tablename__ = 'users'

    id = Column(String, primary_key=True, default=generate_uuid)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("first_name != ''", name='ck_users_first_name'),
        CheckConstraint("last_name != ''", name='ck_users_last_name'),
        CheckConstraint("email != ''", name='ck_users_email'),
        Index('idx_users_created_at', 'created_at'),
    )

    def __init__(self, first_name: str, last_name: str, email: str, **kwargs):
        # Assign the id eagerly so it is known before the first flush
        kwargs.setdefault('id', generate_uuid())
        kwargs.setdefault('created_at', utcnow())
        kwargs.setdefault('updated_at', kwargs['created_at'])
        super().__init__(first_name=first_name, last_name=last_name, email=email, **kwargs)

    def apply_changes(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None
    ) -> None:
        """
        Replace the given fields, leaving the others untouched.

        Args:
            first_name: New first name, or None to keep the current one
            last_name: New last name, or None to keep the current one
            email: New email, or None to keep the current one
        """
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if email is not None:
            self.email = email
        self.updated_at = utcnow()

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
