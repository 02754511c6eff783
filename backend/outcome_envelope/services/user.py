"""User management service.

Reads go through the cache as serialized ``UserRead`` payloads; every
mutation invalidates the affected key.
"""

import logging
import uuid

from outcome_envelope.core.cache import CacheBackend
from outcome_envelope.core.errors import ConflictError, NotFoundError
from outcome_envelope.models.enums import UserRole
from outcome_envelope.models.user import User
from outcome_envelope.repositories.user import UserRepository
from outcome_envelope.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

CACHE_PREFIX = "user:"


def _cache_key(user_id: uuid.UUID) -> str:
    return f"{CACHE_PREFIX}{user_id}"


class UserService:
    def __init__(self, repo: UserRepository, cache: CacheBackend):
        self.repo = repo
        self.cache = cache

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a new user. Email addresses are unique, case-insensitively."""
        if await self.repo.get_by_email(data.email) is not None:
            raise ConflictError("A user with this email already exists.")

        user = await self.repo.add(User(
            email=data.email,
            full_name=data.full_name,
            role=data.role,
        ))
        logger.info("Created user %s (%s)", user.id, user.role.value)
        return UserRead.model_validate(user)

    async def get_user(self, user_id: uuid.UUID) -> UserRead:
        cache_key = _cache_key(user_id)
        cached = await self.cache.get(cache_key)
        if cached is not None:
            return UserRead.model_validate(cached)

        user = await self.repo.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        result = UserRead.model_validate(user)
        await self.cache.set(cache_key, result.model_dump(mode="json"))
        return result

    async def list_users(
        self,
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        role: UserRole | None = None,
    ) -> tuple[list[UserRead], int]:
        """List users with pagination and optional filters. Returns (users, total)."""
        users, total = await self.repo.list_page(
            offset=(page - 1) * limit, limit=limit, search=search, role=role,
        )
        return [UserRead.model_validate(u) for u in users], total

    async def update_user(self, user_id: uuid.UUID, data: UserUpdate) -> UserRead:
        """Update a user's mutable fields."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return await self.get_user(user_id)

        user = await self.repo.update(user_id, **changes)
        if user is None:
            raise NotFoundError("User not found")
        await self.cache.delete(_cache_key(user_id))
        logger.info("Updated user %s: %s", user_id, sorted(changes))
        return UserRead.model_validate(user)

    async def delete_user(self, user_id: uuid.UUID) -> None:
        if not await self.repo.delete(user_id):
            raise NotFoundError("User not found")
        await self.cache.delete(_cache_key(user_id))
        logger.info("Deleted user %s", user_id)
