"""Read-only diagnostic routes for the response cache."""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from cacheaside.core.exceptions import StoreUnavailableError
from cacheaside.core.services.cache_service import CacheService

logger = logging.getLogger(__name__)


def create_debug_router(
    service: CacheService,
    path: str = "/debug/cache",
) -> APIRouter:
    """Create a router exposing every cached key with its value, TTL and size.

    Meant for operators, not for application logic: each request walks
    the whole key space of the service.

    Args:
        service: The cache service to inspect.
        path: Route path for the diagnostic endpoint.

    Returns:
        An APIRouter to include in the application.
    """
    router = APIRouter()

    @router.get(path)
    async def debug_cache() -> Any:
        try:
            items = await service.list_all()
        except StoreUnavailableError as e:
            logger.warning("Failed to fetch cache data: %s", e)
            return JSONResponse(
                status_code=503,
                content={"error": "Failed to fetch cache data"},
            )

        keys = sorted(items)
        return {
            "totalKeys": len(keys),
            "keys": keys,
            "cacheData": {key: items[key].to_dict() for key in keys},
        }

    return router
