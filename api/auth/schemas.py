"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Presence is checked by the service so a missing field is a 400, not a 422.
    username: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: int
    username: str
    rol: str | None = None


class LoginResponse(BaseModel):
    success: bool = True
    user: UserResponse
