"""API v1 router that aggregates all sub-routers."""

from fastapi import APIRouter

from outcome_envelope.api.v1.users import router as users_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(users_router)
