"""User repository: signup, lookup and profile updates over the users table."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.core.security import hash_password
from taskboard.models import User
from taskboard.services.errors import (
    CredentialError,
    DuplicateUsernameError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class UserRepository:
    """Create, read and update user records. Users are never deleted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create_user(self, username: str, password: str, full_name: str, email: str) -> int:
        """
        Hash the password and insert a new user; return its id.

        Raises ValidationError if any field is empty, DuplicateUsernameError if the
        username exists, CredentialError if hashing fails, StorageError otherwise.
        """
        if not (username and password and full_name and email):
            raise ValidationError("All fields required")

        try:
            password_hash = hash_password(password)
        except (ValueError, TypeError) as e:
            raise CredentialError("Signup failed") from e

        user = User(
            username=username,
            password_hash=password_hash,
            full_name=full_name,
            email=email,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateUsernameError("Username exists") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("Signup failed") from e

        logger.info("Created user id=%s username=%s", user.id, username)
        return user.id

    def find_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def update_profile(self, user_id: int, full_name: str | None, email: str | None) -> None:
        """
        Overwrite full_name and email for the user. Email format is not checked.

        Raises StorageError when the store rejects the update (e.g. a missing field).
        """
        try:
            self.session.query(User).filter(User.id == user_id).update(
                {User.full_name: full_name, User.email: email},
                synchronize_session=False,
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("Update failed") from e
