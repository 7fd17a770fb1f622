"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from core.routing import resource_route

from . import schemas, service

router = APIRouter()


@resource_route(router, "POST", "login")
async def login(request: schemas.LoginRequest | None = None) -> schemas.LoginResponse:
    return await service.login(request)
