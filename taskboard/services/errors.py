"""Errors raised by the repositories and the session manager."""


class TaskboardError(Exception):
    """Base class; ``message`` is safe to show to the client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(TaskboardError):
    """A required field is missing or empty."""


class DuplicateUsernameError(TaskboardError):
    """The username is already taken."""


class CredentialError(TaskboardError):
    """The password could not be hashed."""


class StorageError(TaskboardError):
    """The underlying SQL store failed."""


class AuthError(TaskboardError):
    """Login rejected."""


class InvalidUsernameError(AuthError):
    pass


class WrongPasswordError(AuthError):
    pass
