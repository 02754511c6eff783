"""FastAPI dependencies for the app context, services and paging."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status

from outcome_envelope.core.context import AppContext
from outcome_envelope.services.user import UserService


def get_context(request: Request) -> AppContext:
    """Return the context built by the app lifespan."""
    ctx = getattr(request.app.state, "context", None)
    if ctx is None:
        raise RuntimeError("Application context is not initialised.")
    return ctx


def get_user_service(
    ctx: Annotated[AppContext, Depends(get_context)],
) -> UserService:
    return UserService(ctx.users, ctx.cache)


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def get_page_params(
    ctx: Annotated[AppContext, Depends(get_context)],
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> PageParams:
    """Resolve paging query params against the configured defaults and cap."""
    if limit is None:
        limit = ctx.settings.DEFAULT_PAGE_SIZE
    if limit > ctx.settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=f"limit must not exceed {ctx.settings.MAX_PAGE_SIZE}.",
        )
    return PageParams(page=page, limit=limit)
