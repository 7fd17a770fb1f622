"""
Listing (anuncio) request bodies.

Fields are optional on purpose: absent values are bound as NULL and the
database constraints decide whether the row is acceptable.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class ListingRequest(BaseModel):
    nombre: str | None = None
    foto_url: str | None = None
    tipo: str | None = None
    asesora_id: int | None = None
    estado: str | None = None
    fecha_inicio: date | None = None
    video_reel: str | None = None


class ListingUpdateRequest(ListingRequest):
    id: int
