"""
Request bodies shared by more than one resource.
"""

from __future__ import annotations

from pydantic import BaseModel


class IdRequest(BaseModel):
    id: int
