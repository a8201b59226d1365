"""Product routes with read-through caching."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from app import database as db

from cacheaside.adapters.fastapi import ResponseCache, RouteCache


class ProductIn(BaseModel):
    name: str
    price: float
    category: str | None = None


def create_product_router(response_cache: ResponseCache) -> APIRouter:
    router = APIRouter(prefix="/api/products")

    @router.get("/paginated")
    async def list_products_page(
        page: int = Query(1, ge=1),
        limit: int = Query(15, ge=1, le=100),
        search: str = "",
        sort: str = "name",
        order: str = "asc",
        cache: RouteCache = Depends(response_cache.route("products_paginated", ttl=300)),
    ):
        return await cache.respond(
            lambda: db.list_products_page(page, limit, search, sort, order)
        )

    @router.get("")
    async def list_products(
        cache: RouteCache = Depends(response_cache.route("products", ttl=600)),
    ):
        return await cache.respond(db.list_products)

    @router.get("/{product_id}")
    async def get_product(
        product_id: str,
        cache: RouteCache = Depends(response_cache.route("product", ttl=300)),
    ):
        product = await cache.respond(lambda: db.get_product(product_id))
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    @router.post("", status_code=201)
    async def create_product(body: ProductIn):
        product = await db.create_product(body.name, body.price, body.category)
        # "products" also covers "products_paginated"
        await response_cache.invalidate("products")
        return product

    return router
