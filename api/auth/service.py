"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Usuario y contraseña requeridos"
INVALID_CREDENTIALS_MESSAGE = "Usuario o contraseña incorrectos"


def _failure(status_code: int, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"success": False, "message": message})


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    rol = user_row.get("rol")
    return schemas.UserResponse(
        id=int(user_row["id"]),
        username=str(user_row["username"]),
        rol=str(rol) if rol is not None else None,
    )


async def login(payload: schemas.LoginRequest | None) -> schemas.LoginResponse:
    username = payload.username if payload is not None else None
    password = payload.password if payload is not None else None
    if not username or not password:
        raise _failure(status.HTTP_400_BAD_REQUEST, MISSING_CREDENTIALS_MESSAGE)

    user_row = await repository.get_user_by_username(username)
    if user_row is None:
        logger.info("login_failed reason=unknown_user")
        raise _failure(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)

    is_valid = security.verify_password(password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        logger.info("login_failed reason=bad_password user_id=%s", user_row["id"])
        raise _failure(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)

    logger.info("login_succeeded user_id=%s", user_row["id"])
    return schemas.LoginResponse(user=_to_user_response(user_row))
