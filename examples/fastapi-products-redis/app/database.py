"""SQLite product catalogue for demonstration purposes."""

import asyncio
import math
import uuid
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

DB_PATH = Path(__file__).parent.parent / "data" / "products.db"

SORTABLE_COLUMNS = {"name", "price", "category", "created_at"}

call_count: dict[str, int] = {
    "list_products": 0,
    "list_products_page": 0,
    "get_product": 0,
}


def reset_call_count() -> None:
    """Reset the call counter."""
    for key in call_count:
        call_count[key] = 0


async def get_db() -> aiosqlite.Connection:
    """Get database connection."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    db = await aiosqlite.connect(DB_PATH)
    db.row_factory = aiosqlite.Row
    return db


async def init_db() -> None:
    """Initialize the database with the products table and sample data."""
    db = await get_db()
    try:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS products (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                price REAL NOT NULL,
                category TEXT,
                created_at TEXT NOT NULL
            )
        """)

        cursor = await db.execute("SELECT COUNT(*) FROM products")
        count = (await cursor.fetchone())[0]

        if count == 0:
            products = [
                (str(uuid.uuid4()), "Widget", 9.99, "tools", "2024-01-15T10:00:00Z"),
                (str(uuid.uuid4()), "Gadget", 24.50, "tools", "2024-02-20T14:30:00Z"),
                (str(uuid.uuid4()), "Lamp", 79.00, "home", "2024-03-10T09:15:00Z"),
                (str(uuid.uuid4()), "Armchair", 349.00, "home", "2024-03-12T16:45:00Z"),
            ]
            await db.executemany(
                """INSERT INTO products (id, name, price, category, created_at)
                   VALUES (?, ?, ?, ?, ?)""",
                products,
            )
            await db.commit()
            print("[DB] Database initialized with sample products")
    finally:
        await db.close()


def price_category(price: float) -> str:
    """Bucket a price the way the catalogue pages group products."""
    if price < 10:
        return "Budget"
    if price < 50:
        return "Mid-range"
    if price < 100:
        return "Premium"
    return "Luxury"


def _row_to_product(row: aiosqlite.Row) -> dict:
    """Convert a database row to a product dict with derived fields."""
    return {
        "id": row["id"],
        "name": row["name"],
        "price": row["price"],
        "category": row["category"],
        "priceWithTax": round(row["price"] * 1.2, 2),
        "priceCategory": price_category(row["price"]),
        "createdAt": row["created_at"],
    }


async def simulate_latency(ms: int = 100) -> None:
    """Simulate an expensive query."""
    await asyncio.sleep(ms / 1000)


async def list_products() -> list[dict]:
    """Get all products, most expensive first."""
    call_count["list_products"] += 1
    print(f"[DB] list_products called (total: {call_count['list_products']})")
    await simulate_latency(200)

    db = await get_db()
    try:
        cursor = await db.execute("SELECT * FROM products ORDER BY price DESC, name")
        rows = await cursor.fetchall()
        return [_row_to_product(row) for row in rows]
    finally:
        await db.close()


async def list_products_page(
    page: int = 1,
    limit: int = 15,
    search: str = "",
    sort: str = "name",
    order: str = "asc",
) -> dict:
    """Get one page of products with pagination metadata."""
    call_count["list_products_page"] += 1
    print(f"[DB] list_products_page called (total: {call_count['list_products_page']})")
    await simulate_latency(200)

    column = sort if sort in SORTABLE_COLUMNS else "name"
    direction = "ASC" if order == "asc" else "DESC"
    pattern = f"%{search}%"

    db = await get_db()
    try:
        cursor = await db.execute(
            "SELECT COUNT(*) FROM products WHERE name LIKE ?", (pattern,)
        )
        total_items = (await cursor.fetchone())[0]

        cursor = await db.execute(
            f"SELECT * FROM products WHERE name LIKE ? "
            f"ORDER BY {column} {direction} LIMIT ? OFFSET ?",
            (pattern, limit, (page - 1) * limit),
        )
        rows = await cursor.fetchall()
    finally:
        await db.close()

    total_pages = math.ceil(total_items / limit) if limit else 0
    return {
        "products": [_row_to_product(row) for row in rows],
        "pagination": {
            "currentPage": page,
            "totalPages": total_pages,
            "totalItems": total_items,
            "itemsPerPage": limit,
            "hasNextPage": page < total_pages,
            "hasPrevPage": page > 1,
        },
    }


async def get_product(product_id: str) -> dict | None:
    """Get a product by ID."""
    call_count["get_product"] += 1
    print(f"[DB] get_product({product_id}) called (total: {call_count['get_product']})")
    await simulate_latency(30)

    db = await get_db()
    try:
        cursor = await db.execute("SELECT * FROM products WHERE id = ?", (product_id,))
        row = await cursor.fetchone()
        return _row_to_product(row) if row else None
    finally:
        await db.close()


async def create_product(name: str, price: float, category: str | None = None) -> dict:
    """Insert a product and return it."""
    product_id = str(uuid.uuid4())
    created_at = datetime.now(timezone.utc).isoformat()

    db = await get_db()
    try:
        await db.execute(
            """INSERT INTO products (id, name, price, category, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (product_id, name, price, category, created_at),
        )
        await db.commit()
        cursor = await db.execute("SELECT * FROM products WHERE id = ?", (product_id,))
        row = await cursor.fetchone()
        return _row_to_product(row)
    finally:
        await db.close()
