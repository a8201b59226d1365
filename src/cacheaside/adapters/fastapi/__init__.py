"""FastAPI adapter for cacheaside.

Example:
    from fastapi import Depends, FastAPI
    from cacheaside.adapters.fastapi import (
        ResponseCache,
        RouteCache,
        create_debug_router,
    )

    response_cache = ResponseCache(cache_service)
    app = FastAPI()
    app.include_router(create_debug_router(cache_service))

    @app.get("/products")
    async def list_products(
        cache: RouteCache = Depends(response_cache.route("products", ttl=600)),
    ):
        return await cache.respond(db.list_products)
"""

from cacheaside.adapters.fastapi.debug import create_debug_router
from cacheaside.adapters.fastapi.dependencies import (
    CACHE_STATUS_HEADER,
    ResponseCache,
    RouteCache,
    request_signature,
)

__all__ = [
    "CACHE_STATUS_HEADER",
    "ResponseCache",
    "RouteCache",
    "create_debug_router",
    "request_signature",
]
