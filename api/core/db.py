"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every helper acquires exactly one connection and releases it on every path.
Driver failures are re-raised as `DatabaseError` so the HTTP layer can map
them to a single 500 response.
"""

from __future__ import annotations

import os
import ssl
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

SSL_MODES = ("disable", "require", "verify-full")

_pool: asyncpg.Pool | None = None


# Database failures are explicit and separable from other runtime errors.
class DatabaseError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _split_database_url(url: str) -> tuple[str, str | None]:
    """
    Remove `sslmode` from the DSN query string and return it separately.
    """
    parts = urlsplit(url)
    if not parts.query:
        return url, None

    sslmode = None
    params = []
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == "sslmode":
            sslmode = value
            continue
        params.append((key, value))
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment)), sslmode


def _raw_database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def database_url() -> str:
    return _split_database_url(_raw_database_url())[0]


def ssl_mode() -> str | None:
    """
    DATABASE_SSLMODE wins over the DSN's `sslmode`; None means asyncpg's default.
    """
    mode = os.environ.get("DATABASE_SSLMODE", "").strip().lower()
    if not mode:
        mode = (_split_database_url(_raw_database_url())[1] or "").strip().lower()
    if not mode:
        return None
    if mode == "verify-ca":
        return "verify-full"
    if mode in ("prefer", "allow"):
        return None
    if mode not in SSL_MODES:
        raise RuntimeError(f"Unsupported DATABASE_SSLMODE: {mode!r}. Use one of {', '.join(SSL_MODES)}.")
    return mode


def ssl_context(mode: str | None) -> ssl.SSLContext | bool | None:
    if mode is None:
        return None
    if mode == "disable":
        return False

    context = ssl.create_default_context()
    if mode == "require":
        # Encrypted transport without certificate verification.
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        ssl=ssl_context(ssl_mode()),
        min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@asynccontextmanager
async def connection() -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire one pooled connection for the duration of the block.

    The connection goes back to the pool whether the block returns or raises.
    """
    try:
        async with pool().acquire() as conn:
            yield conn
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
        raise DatabaseError(str(exc)) from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def affected_rows(status: str) -> int:
    """
    Parse the row count out of a command tag such as 'UPDATE 3' or 'DELETE 0'.
    """
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection() as conn:
        row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection() as conn:
        rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
    """
    async with connection() as conn:
        status = await conn.execute(sql, *args)
    return affected_rows(status)
