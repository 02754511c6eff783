import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from outcome_envelope.api.v1 import api_router
from outcome_envelope.api.v1.health import router as health_router
from outcome_envelope.config import Settings, settings as default_settings
from outcome_envelope.core.context import AppContext
from outcome_envelope.core.error_handlers import register_error_handlers
from outcome_envelope.core.logging import configure_logging
from outcome_envelope.core.middleware import AccessLogMiddleware, RequestIDMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = await AppContext.startup(settings)
        app.state.context = ctx
        try:
            yield
        finally:
            await ctx.shutdown()
            app.state.context = None

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # --- Middleware (last added is outermost) ---

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # --- Error handlers ---
    register_error_handlers(app)

    # --- Routes ---
    app.include_router(health_router, prefix="/api")
    app.include_router(api_router)

    return app


app = create_app()
