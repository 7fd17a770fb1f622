"""
Advisor (asesora) request bodies.
"""

from __future__ import annotations

from pydantic import BaseModel


class AdvisorRequest(BaseModel):
    nombre: str | None = None
    ciudad: str | None = None
    whatsapp: str | None = None


class AdvisorUpdateRequest(AdvisorRequest):
    id: int
