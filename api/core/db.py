"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it in the lifespan (see
`api/main.py`), keeps it on `app.state.database`, and hands it to route
handlers through the `get_database` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg
from fastapi import Request

from .settings import Settings

logger = logging.getLogger(__name__)

# Anything the driver or the network can raise while talking to Postgres.
_STORE_EXCEPTIONS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class StoreError(RuntimeError):
    """
    The store rejected a statement or could not be reached.
    """


def _describe(exc: BaseException) -> str:
    return str(exc).strip() or exc.__class__.__name__


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool, *, acquire_timeout: float | None = None) -> None:
        self._pool = pool
        self._acquire_timeout = acquire_timeout

    @classmethod
    async def connect(cls, settings: Settings) -> Database:
        # The DSN is passed through untouched so asyncpg honours its sslmode.
        min_size = min(settings.pool_min_size, settings.pool_max_size)
        try:
            pool = await asyncpg.create_pool(
                dsn=settings.database_url,
                min_size=min_size,
                max_size=settings.pool_max_size,
                command_timeout=settings.command_timeout_s,
            )
        except _STORE_EXCEPTIONS as exc:
            raise StoreError(f"failed to connect database: {_describe(exc)}") from exc
        logger.info(
            "db_pool_opened min_size=%s max_size=%s",
            min_size,
            settings.pool_max_size,
        )
        return cls(pool, acquire_timeout=settings.acquire_timeout_s)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("db_pool_closed")

    async def ping(self, *, timeout: float = 5.0) -> None:
        """
        Round-trip a trivial query; raises StoreError when the store is unreachable.
        """
        try:
            await asyncio.wait_for(self.fetch_one("SELECT 1 AS ok"), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise StoreError("database ping timed out") from exc

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
                row = await conn.fetchrow(sql, *args)
        except _STORE_EXCEPTIONS as exc:
            raise StoreError(_describe(exc)) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
                rows = await conn.fetch(sql, *args)
        except _STORE_EXCEPTIONS as exc:
            raise StoreError(_describe(exc)) from exc
        return [_record_to_dict(r) for r in rows]


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Open it in the app lifespan.")
    return database
