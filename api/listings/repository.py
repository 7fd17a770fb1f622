"""
Listing persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_listings() -> list[dict[str, Any]]:
    """
    All listings with their advisor, 'Activo' first, then 'Programado',
    then everything else; newest start date first within each state.
    """
    return await db.fetch_all(
        """
        SELECT
          a.id,
          a.nombre,
          a.foto_url,
          a.tipo,
          a.estado,
          a.video_reel,
          a.asesora_id,
          to_char(a.fecha_inicio, 'YYYY-MM-DD') AS fecha_inicio,
          to_char(a.fecha_inicio, 'DD/MM/YYYY') AS fecha_formateada,
          aser.nombre AS asesora_nombre,
          aser.ciudad,
          aser.whatsapp
        FROM anuncios a
        JOIN asesoras aser ON a.asesora_id = aser.id
        ORDER BY
          CASE a.estado WHEN 'Activo' THEN 1 WHEN 'Programado' THEN 2 ELSE 3 END,
          a.fecha_inicio DESC
        """
    )


async def create_listing(
    *,
    nombre: str | None,
    foto_url: str | None,
    tipo: str | None,
    asesora_id: int | None,
    estado: str | None,
    fecha_inicio: Any,
    video_reel: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO anuncios (nombre, foto_url, tipo, asesora_id, estado, fecha_inicio, video_reel)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING id
        """,
        nombre,
        foto_url,
        tipo,
        asesora_id,
        estado,
        fecha_inicio,
        video_reel,
    )
    if row is None:
        raise RuntimeError("Failed to create listing.")
    return row


async def update_listing(
    listing_id: int,
    *,
    nombre: str | None,
    foto_url: str | None,
    tipo: str | None,
    asesora_id: int | None,
    estado: str | None,
    fecha_inicio: Any,
    video_reel: str | None,
) -> int:
    return await db.execute(
        """
        UPDATE anuncios
        SET nombre = $1,
            foto_url = $2,
            tipo = $3,
            asesora_id = $4,
            estado = $5,
            fecha_inicio = $6,
            video_reel = $7
        WHERE id = $8
        """,
        nombre,
        foto_url,
        tipo,
        asesora_id,
        estado,
        fecha_inicio,
        video_reel,
        listing_id,
    )


async def delete_listing(listing_id: int) -> int:
    return await db.execute(
        """
        DELETE FROM anuncios
        WHERE id = $1
        """,
        listing_id,
    )
