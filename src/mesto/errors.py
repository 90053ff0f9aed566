from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """

    status_code: int = 400
    error_type: str = "bad_request"


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation or an identifier is malformed."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Invalid data") -> None:
        super().__init__(message)


class ConflictError(UserError):
    """Raised when a uniqueness constraint is violated."""

    status_code = 409
    error_type = "conflict"

    def __init__(self, message: str = "Resource already exists") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed, forged or expired."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)
