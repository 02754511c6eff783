import uuid

import pytest
from pydantic import BaseModel, ValidationError

from outcome_envelope.schemas.outcome import (
    Outcome,
    Pagination,
    build_error,
    build_paginated,
    build_success,
)


def test_success_scenario() -> None:
    outcome = build_success({"id": "1", "name": "Ann"}, "fetched")
    assert outcome.to_body() == {
        "success": True,
        "data": {"id": "1", "name": "Ann"},
        "message": "fetched",
    }


def test_error_scenario() -> None:
    outcome = build_error("User not found")
    assert outcome.to_body() == {"success": False, "error": "User not found"}


@pytest.mark.parametrize("data", [{"a": 1}, [1, 2], "text", 42, None])
def test_success_never_carries_error(data) -> None:
    outcome = build_success(data)
    assert outcome.success is True
    assert outcome.error is None
    assert outcome.has_data


@pytest.mark.parametrize("error", ["boom", "", "User not found"])
def test_error_never_carries_data(error: str) -> None:
    outcome = build_error(error, "extra context")
    assert outcome.success is False
    assert outcome.data is None
    assert not outcome.has_data
    assert "data" not in outcome.to_body()
    assert outcome.message == "extra context"


@pytest.mark.parametrize("data", [[], 0, "", False, {}])
def test_falsy_data_is_kept(data) -> None:
    assert build_success(data).to_body() == {"success": True, "data": data}


def test_success_without_data_omits_data_and_error() -> None:
    body = build_success(message="User deleted.").to_body()
    assert body == {"success": True, "message": "User deleted."}


def test_explicit_none_data_is_serialized() -> None:
    assert build_success(None).to_body() == {"success": True, "data": None}


def test_same_arguments_give_equal_outcomes() -> None:
    assert build_success({"id": "1"}, "ok") == build_success({"id": "1"}, "ok")
    assert build_error("nope") == build_error("nope")
    assert build_success({"id": "1"}).to_body() == build_success({"id": "1"}).to_body()


def test_outcome_is_immutable() -> None:
    outcome = build_success({"id": "1"})
    with pytest.raises(ValidationError):
        outcome.success = False


def test_failed_outcome_requires_error() -> None:
    with pytest.raises(ValidationError):
        Outcome(success=False)


def test_success_rejects_error() -> None:
    with pytest.raises(ValidationError):
        Outcome(success=True, error="nope")


def test_failure_rejects_data() -> None:
    with pytest.raises(ValidationError):
        Outcome(success=False, error="nope", data={"id": "1"})


def test_failure_rejects_pagination() -> None:
    with pytest.raises(ValidationError):
        Outcome(
            success=False,
            error="nope",
            pagination=Pagination.create(page=1, limit=10, total=0),
        )


def test_nested_models_are_serialized_to_json() -> None:
    class Item(BaseModel):
        id: uuid.UUID
        name: str

    item_id = uuid.uuid4()
    body = build_success(Item(id=item_id, name="Ann")).to_body()
    assert body["data"] == {"id": str(item_id), "name": "Ann"}


def test_pagination_scenario() -> None:
    pagination = Pagination.create(page=1, limit=10, total=95)
    assert pagination.total_pages == 10
    assert pagination.model_dump(by_alias=True) == {
        "page": 1,
        "limit": 10,
        "total": 95,
        "totalPages": 10,
    }


@pytest.mark.parametrize(
    "total,limit",
    [(0, 1), (0, 10), (1, 1), (9, 10), (10, 10), (11, 10), (95, 10), (1000, 7)],
)
def test_total_pages_is_ceiling(total: int, limit: int) -> None:
    assert Pagination.create(page=1, limit=limit, total=total).total_pages == -(-total // limit)


@pytest.mark.parametrize(
    "total,limit,expected",
    [(2**53 + 1, 1, 2**53 + 1), (2**62 + 3, 4, 2**60 + 1), (9 * 10**17 + 1, 10**17, 10)],
)
def test_total_pages_is_exact_for_large_totals(total: int, limit: int, expected: int) -> None:
    assert Pagination.create(page=1, limit=limit, total=total).total_pages == expected
    Pagination(page=1, limit=limit, total=total, totalPages=expected)


def test_pagination_rejects_inconsistent_total_pages() -> None:
    with pytest.raises(ValidationError):
        Pagination(page=1, limit=10, total=95, totalPages=3)


@pytest.mark.parametrize(
    "page,limit,total",
    [(0, 10, 5), (1, 0, 5), (1, 10, -1)],
)
def test_pagination_bounds(page: int, limit: int, total: int) -> None:
    with pytest.raises(ValidationError):
        Pagination.create(page=page, limit=limit, total=total)


def test_build_paginated() -> None:
    body = build_paginated([{"id": "1"}], page=2, limit=1, total=3, message="page 2").to_body()
    assert body == {
        "success": True,
        "data": [{"id": "1"}],
        "message": "page 2",
        "pagination": {"page": 2, "limit": 1, "total": 3, "totalPages": 3},
    }


def test_build_paginated_empty_page() -> None:
    body = build_paginated([], page=1, limit=20, total=0).to_body()
    assert body["data"] == []
    assert body["pagination"]["totalPages"] == 0
