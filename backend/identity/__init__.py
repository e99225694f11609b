from identity.errors import (
    AuthenticationError,
    ConflictError,
    IdentityError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from identity.service import AuthResult, identify, login, logout, register

__all__ = [
    "AuthResult",
    "AuthenticationError",
    "ConflictError",
    "IdentityError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "identify",
    "login",
    "logout",
    "register",
]
