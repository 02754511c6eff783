"""Demo users for the in-memory store.

Idempotent: users whose email already exists are skipped.
Loaded at startup when SEED_DEMO_DATA is set.
"""

import logging
import uuid

from outcome_envelope.models.enums import UserRole
from outcome_envelope.models.user import User
from outcome_envelope.repositories.user import UserRepository

logger = logging.getLogger(__name__)

SEED_USERS = [
    ("ann@example.com", "Ann Lee", UserRole.ADMIN),
    ("ben@example.com", "Ben Ortiz", UserRole.EDITOR),
    ("cara@example.com", "Cara Novak", UserRole.EDITOR),
    ("dev@example.com", "Dev Patel", UserRole.VIEWER),
    ("eve@example.com", "Eve Moreau", UserRole.VIEWER),
]


async def seed_users(repo: UserRepository) -> dict[str, uuid.UUID]:
    """Create demo users. Returns {email: user_id} mapping."""
    users: dict[str, uuid.UUID] = {}
    for email, name, role in SEED_USERS:
        existing = await repo.get_by_email(email)
        if existing is not None:
            users[email] = existing.id
            continue
        user = await repo.add(User(email=email, full_name=name, role=role))
        users[email] = user.id
        logger.debug("Seeded user %s (%s)", email, role.value)
    logger.info("Seeded %d demo users", len(users))
    return users
