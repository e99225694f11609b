"""
In-memory user store shared by the auth routes.

One UserStore is created per app (see main.create_app) and handed to the
route handlers through the get_user_store dependency. Nothing is persisted:
records live as long as the app instance does.
"""

import threading
from typing import Iterable, Optional

from fastapi import Request

from identity.errors import ConflictError
from models.user import UserRecord

DEMO_USERS = [
    UserRecord(id="1", name="John Doe", email="john@example.com", password="password123"),
    UserRecord(id="2", name="Jane Smith", email="jane@example.com", password="password123"),
]


class UserStore:
    def __init__(self, seed: Optional[Iterable[UserRecord]] = None):
        self._lock = threading.Lock()
        self._users: list[UserRecord] = [u.model_copy() for u in (seed or [])]

    @classmethod
    def with_demo_users(cls) -> "UserStore":
        return cls(seed=DEMO_USERS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            return next((u for u in self._users if u.email == email), None)

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    def add(self, name: str, email: str, password: str) -> UserRecord:
        """
        Append a new record and return it.

        The duplicate check, id assignment and append happen under one lock
        so two concurrent registrations for the same email cannot both land.
        Raises ConflictError if the email is already taken.
        """
        with self._lock:
            if any(u.email == email for u in self._users):
                raise ConflictError("User with this email already exists")

            user = UserRecord(
                id=str(len(self._users) + 1),
                name=name,
                email=email,
                password=password,
            )
            self._users.append(user)
            return user


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency: the store attached to the running app."""
    return request.app.state.user_store
