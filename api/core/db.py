"""
asyncpg connection pool and the two query helpers every repository uses.

The pool is opened once in the app lifespan and closed on shutdown (see
`api/main.py`). Repositories never touch the pool directly; they call
`fetch_one` for single-row statements (including INSERT/UPDATE/DELETE with
RETURNING, where None means "no row matched") and `fetch_all` for lists.

Placeholders are asyncpg's positional $1, $2, ... and values must already
have the column's Python type (e.g. `datetime.date` for date columns).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    min_size, max_size = settings.pool_min_size(), settings.pool_max_size()
    _pool = await asyncpg.create_pool(
        dsn=settings.database_url(),
        min_size=min_size,
        max_size=max_size,
        command_timeout=settings.command_timeout(),
    )
    logger.info("db_pool_opened min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    return [dict(r) for r in await pool().fetch(sql, *args)]
