"""
Listing business logic.
"""

from __future__ import annotations

import logging

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_listings() -> list[dict]:
    return await repository.list_listings()


async def create_listing(payload: schemas.ListingRequest) -> dict:
    row = await repository.create_listing(**payload.model_dump())
    listing_id = int(row["id"])
    logger.info("listing_created id=%s asesora_id=%s", listing_id, payload.asesora_id)
    return {"message": "Anuncio registrado correctamente", "id": listing_id}


async def update_listing(payload: schemas.ListingUpdateRequest) -> dict:
    fields = payload.model_dump(exclude={"id"})
    # Unknown ids update nothing and still succeed.
    updated = await repository.update_listing(payload.id, **fields)
    logger.info("listing_updated id=%s rows=%s", payload.id, updated)
    return {"message": "Anuncio actualizado"}


async def delete_listing(listing_id: int) -> dict:
    deleted = await repository.delete_listing(listing_id)
    logger.info("listing_deleted id=%s rows=%s", listing_id, deleted)
    return {"message": "Anuncio eliminado"}
