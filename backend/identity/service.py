"""
Register / login / identify / logout against a UserStore.

These are plain functions so the routes stay thin and tests can call them
without an HTTP client. Every failure is raised as an IdentityError subclass.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from identity.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from identity.tokens import issue_token, token_from_header, user_id_from_token
from models.user import PublicUser

logger = logging.getLogger(__name__)


class AuthResult(BaseModel):
    token: str
    user: PublicUser


def register(store, name: Optional[str], email: Optional[str], password: Optional[str]) -> AuthResult:
    """
    Create a user and issue a token for it.

    Raises ValidationError if any field is empty (store left untouched) and
    ConflictError if the email is already registered.
    """
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required")

    try:
        user = store.add(name=name, email=email, password=password)
    except ConflictError:
        logger.warning("Registration rejected, email already taken: %s", email)
        raise

    logger.info("Registered user %s (%s)", user.name, user.id)
    return AuthResult(token=issue_token(user.id), user=user.public())


def login(store, email: Optional[str], password: Optional[str]) -> AuthResult:
    """
    Check email + password and issue a token.

    Unknown email and wrong password raise the same AuthenticationError.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = store.find_by_email(email)
    if user is None or user.password != password:
        logger.warning("Failed login for %s", email)
        raise AuthenticationError("Invalid credentials")

    logger.info("Login: %s (%s)", user.name, user.id)
    return AuthResult(token=issue_token(user.id), user=user.public())


def identify(store, authorization: Optional[str]) -> PublicUser:
    token = token_from_header(authorization)
    if token is None:
        raise AuthenticationError("Authorization token required")

    user = store.find_by_id(user_id_from_token(token))
    if user is None:
        raise NotFoundError("User not found")

    return user.public()


def logout() -> str:
    # Tokens are never stored, so there is nothing to revoke.
    return "Logout successful"
