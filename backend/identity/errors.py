"""
Error kinds raised by the identity operations.

Each carries the HTTP status it maps to; main.py turns any IdentityError
into a {"message": ...} JSON response with that status.
"""


class IdentityError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IdentityError):
    """A required field is missing or empty."""
    status_code = 400


class ConflictError(IdentityError):
    """Email already registered."""
    status_code = 409


class AuthenticationError(IdentityError):
    """Bad credentials, or a missing / malformed Authorization header."""
    status_code = 401


class NotFoundError(IdentityError):
    status_code = 404


class InternalError(IdentityError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
