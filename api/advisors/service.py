"""
Advisor business logic.
"""

from __future__ import annotations

import logging

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_advisors() -> list[dict]:
    return await repository.list_advisors()


async def create_advisor(payload: schemas.AdvisorRequest) -> dict:
    row = await repository.create_advisor(**payload.model_dump())
    advisor_id = int(row["id"])
    logger.info("advisor_created id=%s", advisor_id)
    return {"message": "Asesora registrada correctamente", "id": advisor_id}


async def update_advisor(payload: schemas.AdvisorUpdateRequest) -> dict:
    updated = await repository.update_advisor(payload.id, **payload.model_dump(exclude={"id"}))
    logger.info("advisor_updated id=%s rows=%s", payload.id, updated)
    return {"message": "Asesora actualizada"}


async def delete_advisor(advisor_id: int) -> dict:
    # Listings still pointing at the advisor make the store reject this (500).
    deleted = await repository.delete_advisor(advisor_id)
    logger.info("advisor_deleted id=%s rows=%s", advisor_id, deleted)
    return {"message": "Asesora eliminada"}
