"""In-memory user record."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from outcome_envelope.models.enums import UserRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    email: str
    full_name: str
    role: UserRole = UserRole.VIEWER
    is_active: bool = True
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()
