"""Shared schema utilities."""

from outcome_envelope.schemas.outcome import (
    MISSING,
    Outcome,
    Pagination,
    build_error,
    build_paginated,
    build_success,
)

__all__ = [
    "MISSING",
    "Outcome",
    "Pagination",
    "build_error",
    "build_paginated",
    "build_success",
]
