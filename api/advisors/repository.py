"""
Advisor persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_advisors() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, nombre, ciudad, whatsapp
        FROM asesoras
        ORDER BY nombre ASC
        """
    )


async def create_advisor(*, nombre: str | None, ciudad: str | None, whatsapp: str | None) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO asesoras (nombre, ciudad, whatsapp)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        nombre,
        ciudad,
        whatsapp,
    )
    if row is None:
        raise RuntimeError("Failed to create advisor.")
    return row


async def update_advisor(
    advisor_id: int,
    *,
    nombre: str | None,
    ciudad: str | None,
    whatsapp: str | None,
) -> int:
    return await db.execute(
        """
        UPDATE asesoras
        SET nombre = $1,
            ciudad = $2,
            whatsapp = $3
        WHERE id = $4
        """,
        nombre,
        ciudad,
        whatsapp,
        advisor_id,
    )


async def delete_advisor(advisor_id: int) -> int:
    return await db.execute(
        """
        DELETE FROM asesoras
        WHERE id = $1
        """,
        advisor_id,
    )
