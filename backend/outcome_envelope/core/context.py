"""Application context.

Resources with a lifetime (store, cache) are built once in the app lifespan
and handed to request handlers through ``get_context``. Nothing here is a
module-level singleton.
"""

import logging
from dataclasses import dataclass

from outcome_envelope.config import Settings
from outcome_envelope.core.cache import CacheBackend, build_cache
from outcome_envelope.repositories.user import UserRepository
from outcome_envelope.seed import seed_users

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    users: UserRepository
    cache: CacheBackend

    @classmethod
    async def startup(
        cls,
        settings: Settings,
        cache: CacheBackend | None = None,
    ) -> "AppContext":
        if cache is None:
            cache = build_cache(
                settings.CACHE_BACKEND,
                settings.REDIS_URL,
                settings.CACHE_TTL_SECONDS,
            )
        ctx = cls(settings=settings, users=UserRepository(), cache=cache)
        if settings.SEED_DEMO_DATA:
            await seed_users(ctx.users)
        logger.info(
            "%s %s started (cache=%s, ttl=%ss)",
            settings.APP_NAME,
            settings.APP_VERSION,
            cache.name,
            cache.ttl_seconds,
        )
        return ctx

    async def shutdown(self) -> None:
        await self.cache.close()
        await self.users.clear()
        logger.info("%s stopped", self.settings.APP_NAME)
