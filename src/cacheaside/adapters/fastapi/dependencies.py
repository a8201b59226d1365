"""FastAPI dependencies for read-through response caching."""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, Response

from cacheaside.core.services.cache_service import CacheService
from cacheaside.core.services.read_through import Producer

CACHE_STATUS_HEADER = "X-Cache"


def request_signature(request: Request) -> str:
    """Derive the request signature from the URL path and query string.

    Headers and other request attributes are ignored; only what can
    change the response of a cached GET goes into the signature. The
    key builder takes care of query parameter ordering.
    """
    path = request.url.path
    query = request.url.query
    return f"{path}?{query}" if query else path


class RouteCache:
    """Read-through cache bound to one request of one endpoint."""

    def __init__(
        self,
        service: CacheService,
        prefix: str,
        signature: str,
        response: Response,
        ttl: int | None = None,
    ) -> None:
        self._service = service
        self._prefix = prefix
        self._signature = signature
        self._response = response
        self._ttl = ttl

    @property
    def key(self) -> str:
        return self._service.build_key(self._prefix, self._signature)

    async def respond(self, produce: Producer) -> Any:
        """Return the cached response, producing and caching it on a miss.

        Sets the ``X-Cache`` header to ``HIT`` or ``MISS``.

        Args:
            produce: Async callable computing the response body.

        Returns:
            The response body for the endpoint to return.
        """
        lookup = await self._service.lookup(
            self._prefix, self._signature, produce, ttl=self._ttl
        )
        self._response.headers[CACHE_STATUS_HEADER] = "HIT" if lookup.hit else "MISS"
        return lookup.value


class ResponseCache:
    """Builds per-route cache dependencies over a CacheService.

    Example:
        response_cache = ResponseCache(cache_service)

        @router.get("/products")
        async def list_products(
            cache: RouteCache = Depends(response_cache.route("products", ttl=600)),
        ):
            return await cache.respond(db.list_products)
    """

    def __init__(self, service: CacheService) -> None:
        self._service = service

    @property
    def service(self) -> CacheService:
        return self._service

    def route(
        self,
        prefix: str,
        ttl: int | None = None,
    ) -> Callable[[Request, Response], Awaitable[RouteCache]]:
        """Create a dependency caching an endpoint under ``prefix``.

        Args:
            prefix: Resource prefix for the endpoint's responses.
            ttl: Time-to-live in seconds. Uses config default if None.

        Returns:
            A FastAPI dependency resolving to a RouteCache.
        """

        async def dependency(request: Request, response: Response) -> RouteCache:
            return RouteCache(
                self._service,
                prefix,
                request_signature(request),
                response,
                ttl=ttl,
            )

        return dependency

    async def invalidate(self, *prefixes: str) -> int:
        """Invalidate resource prefixes after a successful write."""
        return await self._service.invalidate_many(prefixes)
