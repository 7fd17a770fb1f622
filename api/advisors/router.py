"""
Advisor (asesoras) API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import schemas as core_schemas
from core.routing import resource_route

from . import schemas, service

router = APIRouter()


@resource_route(router, "GET", "asesoras")
async def list_advisors() -> list[dict]:
    return await service.list_advisors()


@resource_route(router, "POST", "asesoras", status_code=status.HTTP_201_CREATED)
async def create_advisor(request: schemas.AdvisorRequest) -> dict:
    return await service.create_advisor(request)


@resource_route(router, "PUT", "asesoras")
async def update_advisor(request: schemas.AdvisorUpdateRequest) -> dict:
    return await service.update_advisor(request)


@resource_route(router, "DELETE", "asesoras")
async def delete_advisor(request: core_schemas.IdRequest) -> dict:
    return await service.delete_advisor(request.id)
