"""
Auth persistence helpers.
"""

from __future__ import annotations

from core import db


async def get_user_by_username(username: str) -> dict | None:
    # Duplicate usernames are not expected; the lowest id wins if they exist.
    return await db.fetch_one(
        """
        SELECT id, username, password_hash, rol
        FROM usuarios
        WHERE username = $1
        ORDER BY id
        LIMIT 1
        """,
        username,
    )
