"""
Listing (anuncios) API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import schemas as core_schemas
from core.routing import resource_route

from . import schemas, service

router = APIRouter()


@resource_route(router, "GET", "anuncios")
async def list_listings() -> list[dict]:
    return await service.list_listings()


@resource_route(router, "POST", "anuncios", status_code=status.HTTP_201_CREATED)
async def create_listing(request: schemas.ListingRequest) -> dict:
    return await service.create_listing(request)


@resource_route(router, "PUT", "anuncios")
async def update_listing(request: schemas.ListingUpdateRequest) -> dict:
    return await service.update_listing(request)


@resource_route(router, "DELETE", "anuncios")
async def delete_listing(request: core_schemas.IdRequest) -> dict:
    return await service.delete_listing(request.id)
