"""Liveness endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from outcome_envelope.core.context import AppContext
from outcome_envelope.core.deps import get_context
from outcome_envelope.schemas.outcome import build_success

router = APIRouter(tags=["health"])


@router.get("/health", response_model=dict)
async def health_check(ctx: Annotated[AppContext, Depends(get_context)]):
    """Report service version and cache reachability. 503 when degraded."""
    cache_ok = await ctx.cache.ping()
    outcome = build_success({
        "status": "ok" if cache_ok else "degraded",
        "version": ctx.settings.APP_VERSION,
        "cache": {"backend": ctx.cache.name, "status": "ok" if cache_ok else "error"},
    })
    return JSONResponse(content=outcome.to_body(), status_code=200 if cache_ok else 503)
