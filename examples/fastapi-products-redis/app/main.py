"""FastAPI + Redis + cacheaside example."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app import database as db
from app.routes import create_product_router

from cacheaside import CacheConfig, CacheService, DefaultKeyBuilder, JsonSerializer
from cacheaside.adapters.fastapi import ResponseCache, create_debug_router
from cacheaside_redis import RedisKeyValueStore

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

cache_config = CacheConfig.from_env()

cache_store = RedisKeyValueStore.from_url(REDIS_URL)

cache_service = CacheService(
    store=cache_store,
    key_builder=DefaultKeyBuilder(namespace=cache_config.namespace),
    serializer=JsonSerializer(),
    config=cache_config,
)

response_cache = ResponseCache(cache_service)


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("[STARTUP] Initializing SQLite database")
    await db.init_db()
    print(f"[STARTUP] Connecting to Redis at {REDIS_URL}")
    yield
    print("[SHUTDOWN] Closing Redis connection")
    await cache_service.close()


app = FastAPI(
    title="cacheaside Example API",
    description="Product catalogue with read-through Redis caching",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(create_product_router(response_cache))
app.include_router(create_debug_router(cache_service, path="/api/products/debug/cache"))


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "redis": "healthy" if await cache_store.ping() else "unhealthy",
        "cache_enabled": cache_config.enabled,
    }


@app.get("/db/stats")
async def db_stats():
    return db.call_count


@app.post("/cache/clear")
async def clear_cache():
    removed = await cache_service.clear()
    return {"status": "cleared", "removed": removed}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
