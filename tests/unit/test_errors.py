import pytest

from outcome_envelope.core.errors import (
    AppError,
    BadRequestError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    STATUS_BY_KIND,
)


@pytest.mark.parametrize(
    "exc,status_code",
    [
        (NotFoundError("User not found"), 404),
        (ConflictError("duplicate"), 409),
        (BadRequestError("bad"), 400),
        (AppError("boom"), 500),
        (AppError("no", kind=ErrorKind.FORBIDDEN), 403),
        (AppError("who", kind=ErrorKind.UNAUTHORIZED), 401),
        (AppError("invalid", kind=ErrorKind.VALIDATION), 422),
    ],
)
def test_status_code_follows_kind(exc: AppError, status_code: int) -> None:
    assert exc.status_code == status_code


def test_every_kind_has_a_status() -> None:
    assert set(STATUS_BY_KIND) == set(ErrorKind)


def test_to_outcome_carries_message() -> None:
    body = NotFoundError("User not found").to_outcome().to_body()
    assert body == {"success": False, "error": "User not found"}


def test_to_outcome_carries_detail_as_message() -> None:
    body = ConflictError("duplicate", detail="email is taken").to_outcome().to_body()
    assert body == {"success": False, "error": "duplicate", "message": "email is taken"}


def test_explicit_kind_overrides_subclass() -> None:
    exc = NotFoundError("gone", kind=ErrorKind.CONFLICT)
    assert exc.kind is ErrorKind.CONFLICT
    assert NotFoundError("x").kind is ErrorKind.NOT_FOUND


def test_str_is_message() -> None:
    assert str(NotFoundError("User not found")) == "User not found"
