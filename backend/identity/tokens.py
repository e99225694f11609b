"""
Mock session tokens.

A token is just "mock-jwt-token-<user id>". Nothing is signed or stored:
issuing formats the string, parsing strips it back to an id. Keep the format
exact, clients depend on it.
"""

from typing import Optional

TOKEN_PREFIX = "mock-jwt-token-"
BEARER_PREFIX = "Bearer "


def issue_token(user_id: str) -> str:
    return f"{TOKEN_PREFIX}{user_id}"


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Return the token after "Bearer ", or None if the header is absent or has another scheme."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]


def user_id_from_token(token: str) -> str:
    # Only the first occurrence of the marker is removed; a token without it
    # is taken as the id itself.
    return token.replace(TOKEN_PREFIX, "", 1)
