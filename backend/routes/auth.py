import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from pydantic import BaseModel, ValidationError, field_validator

import identity
from identity.errors import InternalError
from models.user import PublicUser
from store import UserStore, get_user_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ---------- Request / Response schemas ----------

class CredentialsRequest(BaseModel):
    """Body of register and login. Absent or empty fields are left for the identity checks to reject."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _scalar_to_text(cls, value):
        # JSON numbers and booleans are kept as their JSON text; falsy ones count as absent.
        if isinstance(value, (bool, int, float)):
            return json.dumps(value) if value else None
        return value


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


async def _read_credentials(request: Request) -> CredentialsRequest:
    """
    Parse the body as JSON whatever the Content-Type says.

    A payload that is not an object (e.g. []) has no fields. Anything that
    can't be parsed at all, or a null payload, is an InternalError.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Unparseable request body on %s", request.url.path)
        raise InternalError()

    if payload is None:
        logger.warning("Null request body on %s", request.url.path)
        raise InternalError()
    if not isinstance(payload, dict):
        payload = {}

    try:
        return CredentialsRequest.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Unusable request body on %s: %s", request.url.path, exc.errors())
        raise InternalError()


# ---------- Endpoints ----------

@router.post("/register", response_model=AuthResponse)
async def register(request: Request, user_store: UserStore = Depends(get_user_store)):
    """
    Creates a user and returns a token for it.
    400 if a field is missing, 409 if the email is taken.
    """
    body = await _read_credentials(request)
    result = identity.register(user_store, body.name, body.email, body.password)
    return AuthResponse(message="Registration successful", token=result.token, user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login(request: Request, user_store: UserStore = Depends(get_user_store)):
    """
    Exchanges email + password for a token.
    Unknown email and wrong password both answer 401.
    """
    body = await _read_credentials(request)
    result = identity.login(user_store, body.email, body.password)
    return AuthResponse(message="Login successful", token=result.token, user=result.user)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    return MessageResponse(message=identity.logout())


@router.get("/me", response_model=PublicUser)
async def me(
    authorization: Optional[str] = Header(default=None),
    user_store: UserStore = Depends(get_user_store),
):
    """
    Resolves the Bearer token to its user.
    401 if the header is missing or not Bearer, 404 if the id is unknown.
    """
    return identity.identify(user_store, authorization)
