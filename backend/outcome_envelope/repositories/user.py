"""In-memory user repository.

Records are copied on the way in and out so callers never hold a reference
into the store.
"""

import asyncio
import uuid
from dataclasses import replace
from typing import Any

from outcome_envelope.models.enums import UserRole
from outcome_envelope.models.user import User


class UserRepository:
    def __init__(self) -> None:
        self._users: dict[uuid.UUID, User] = {}
        self._lock = asyncio.Lock()

    async def add(self, user: User) -> User:
        async with self._lock:
            self._users[user.id] = replace(user)
        return replace(user)

    async def get(self, user_id: uuid.UUID) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user is not None else None

    async def get_by_email(self, email: str) -> User | None:
        needle = email.lower()
        for user in self._users.values():
            if user.email.lower() == needle:
                return replace(user)
        return None

    async def list_page(
        self,
        offset: int = 0,
        limit: int = 20,
        search: str | None = None,
        role: UserRole | None = None,
    ) -> tuple[list[User], int]:
        """Filter, sort newest first, and slice. Returns (users, total)."""
        users = list(reversed(self._users.values()))
        if role is not None:
            users = [u for u in users if u.role == role]
        if search:
            pattern = search.lower()
            users = [
                u for u in users
                if pattern in u.full_name.lower() or pattern in u.email.lower()
            ]
        users.sort(key=lambda u: u.created_at, reverse=True)

        total = len(users)
        page = users[offset:offset + limit]
        return [replace(u) for u in page], total

    async def update(self, user_id: uuid.UUID, **changes: Any) -> User | None:
        async with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            for name, value in changes.items():
                setattr(user, name, value)
            user.touch()
            return replace(user)

    async def delete(self, user_id: uuid.UUID) -> bool:
        async with self._lock:
            return self._users.pop(user_id, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._users.clear()

    def __len__(self) -> int:
        return len(self._users)
