"""Framework-agnostic cache decorators.

These decorators wrap async producers and mutations explicitly. They
take the CacheService to use as an argument, so there is no module
level state to configure.
"""

import functools
import inspect
import json
import logging
import re
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import urlencode

from cacheaside.core.services.cache_service import CacheService

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def cached(
    service: CacheService,
    prefix: str,
    ttl: int | None = None,
    signature: str | Callable[..., str] | None = None,
) -> Callable[[F], F]:
    """Decorator for read-through caching of an async function.

    On a hit the function is not called. On a miss it runs and its
    result is cached under ``prefix``.

    Args:
        service: The cache service to read and write through.
        prefix: Resource prefix the results belong to.
        ttl: Time-to-live in seconds. Uses config default if None.
        signature: Custom request signature or function building it.
            If string, supports {arg_name} interpolation.
            If callable, receives (*args, **kwargs) and returns the signature.
            By default it is derived from the function name and all
            bound arguments, JSON encoded. Calls whose arguments cannot
            be encoded bypass the cache.

    Returns:
        Decorated function.

    Example:
        @cached(cache_service, "product", ttl=300, signature="/products/{id}")
        async def get_product(id: str) -> dict:
            return await db.get_product(id)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            request_signature = _build_signature(func, args, kwargs, signature)
            if request_signature is None:
                logger.warning(
                    "Arguments of %s cannot be encoded, calling it uncached",
                    func.__qualname__,
                )
                return await func(*args, **kwargs)

            return await service.read_through(
                prefix,
                request_signature,
                lambda: func(*args, **kwargs),
                ttl=ttl,
            )

        return wrapper  # type: ignore

    return decorator


def invalidates(service: CacheService, *prefixes: str) -> Callable[[F], F]:
    """Decorator for invalidating cached responses after a mutation.

    Executes the decorated function and, only if it succeeds,
    invalidates every entry under the given prefixes before returning
    its result. Invalidation failures are logged, never raised.

    Args:
        service: The cache service to invalidate.
        prefixes: Resource prefixes to clear. Support {arg_name}
            interpolation.

    Returns:
        Decorated function.

    Example:
        @invalidates(cache_service, "products")
        async def create_product(data: dict) -> dict:
            return await db.create_product(data)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)

            arguments = _bind_arguments(func, args, kwargs)
            await service.invalidate_many(
                _interpolate_string(prefix, arguments) for prefix in prefixes
            )

            return result

        return wrapper  # type: ignore

    return decorator


def _build_signature(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom: str | Callable[..., str] | None,
) -> str | None:
    """Build the request signature for a function call.

    Args:
        func: The function being cached.
        args: Positional arguments.
        kwargs: Keyword arguments.
        custom: Custom signature or signature builder function.

    Returns:
        The request signature string, or None if the bound arguments
        have no JSON encoding.
    """
    if custom is not None:
        if callable(custom):
            return custom(*args, **kwargs)
        return _interpolate_string(custom, _bind_arguments(func, args, kwargs))

    arguments = _bind_arguments(func, args, kwargs)
    name = f"{func.__module__}.{func.__qualname__}"
    if not arguments:
        return name

    try:
        encoded = urlencode(
            [
                (arg_name, json.dumps(value, sort_keys=True))
                for arg_name, value in arguments.items()
            ]
        )
    except (TypeError, ValueError, RecursionError):
        return None
    return f"{name}?{encoded}"


def _bind_arguments(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map positional and keyword arguments to parameter names."""
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
    except TypeError:
        # Let the call itself report the bad arguments
        return dict(kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Args:
        template: String with {arg_name} placeholders.
        arguments: Bound arguments for interpolation.

    Returns:
        Interpolated string. Unknown placeholders are kept as-is.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return re.sub(pattern, replacer, template)
