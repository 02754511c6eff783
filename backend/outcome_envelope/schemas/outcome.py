"""Uniform operation result envelope.

Every service boundary reports its result as an ``Outcome``:

    {"success": true,  "data": {...}, "message": "...", "pagination": {...}}
    {"success": false, "error": "User not found"}

``success`` is the only discriminant. ``data`` may legitimately be falsy
(``[]``, ``0``) on success, or absent altogether for delete-style operations,
so callers must branch on ``success`` and never on ``data``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


# Sentinel for "no data"; None is a valid payload.
MISSING: Any = object()


class Pagination(BaseModel):
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0, alias="totalPages")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def _check_total_pages(self) -> "Pagination":
        expected = -(-self.total // self.limit)
        if self.total_pages != expected:
            raise ValueError(
                f"totalPages must be ceil(total / limit) = {expected}, "
                f"got {self.total_pages}"
            )
        return self

    @classmethod
    def create(cls, page: int, limit: int, total: int) -> "Pagination":
        """Build a pagination block, deriving ``totalPages``."""
        total_pages = -(-total // limit) if limit > 0 else 0
        return cls(page=page, limit=limit, total=total, total_pages=total_pages)


class Outcome(BaseModel, Generic[T]):
    """Result of a single operation. Immutable once built."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    pagination: Pagination | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_discriminant(self) -> "Outcome[T]":
        if self.success:
            if self.error is not None:
                raise ValueError("a successful outcome cannot carry an error")
        else:
            if self.error is None:
                raise ValueError("a failed outcome requires an error")
            if "data" in self.model_fields_set:
                raise ValueError("a failed outcome cannot carry data")
            if self.pagination is not None:
                raise ValueError("a failed outcome cannot carry pagination")
        return self

    @property
    def has_data(self) -> bool:
        return "data" in self.model_fields_set

    def to_body(self) -> dict:
        """JSON-ready body with absent fields omitted."""
        body: dict[str, Any] = {"success": self.success}
        if self.has_data:
            body["data"] = self._dump_data()
        if self.error is not None:
            body["error"] = self.error
        if self.message is not None:
            body["message"] = self.message
        if self.pagination is not None:
            body["pagination"] = self.pagination.model_dump(by_alias=True)
        return body

    def _dump_data(self) -> Any:
        # Serialize only the data field so nested models become plain JSON.
        return self.model_dump(mode="json", include={"data"})["data"]


def build_success(data: Any = MISSING, message: str | None = None) -> Outcome:
    """Successful outcome. Omit ``data`` for operations with no payload."""
    fields: dict[str, Any] = {"success": True}
    if data is not MISSING:
        fields["data"] = data
    if message is not None:
        fields["message"] = message
    return Outcome(**fields)


def build_error(error: str, message: str | None = None) -> Outcome:
    """Failed outcome carrying a human-readable cause."""
    fields: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        fields["message"] = message
    return Outcome(**fields)


def build_paginated(
    items: list,
    *,
    page: int,
    limit: int,
    total: int,
    message: str | None = None,
) -> Outcome:
    """Successful outcome for a list operation, with pagination metadata."""
    fields: dict[str, Any] = {
        "success": True,
        "data": list(items),
        "pagination": Pagination.create(page=page, limit=limit, total=total),
    }
    if message is not None:
        fields["message"] = message
    return Outcome(**fields)
