"""Domain records held by the repositories."""

from outcome_envelope.models.enums import UserRole  # noqa: F401
from outcome_envelope.models.user import User  # noqa: F401
