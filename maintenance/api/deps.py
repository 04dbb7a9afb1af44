"""Shared route dependencies: settings access, bearer-token gate and JSON body decoding."""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from maintenance.core.config import Settings
from maintenance.core.security import SigningKeyError, decode_access_token
from maintenance.schemas.auth import Claims

logger = logging.getLogger(__name__)

AUTH_HEADER_REQUIRED = "An authorization header is required"
INVALID_TOKEN = "Invalid authorization token"

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_app_settings(request: Request) -> Settings:
    """Dependency: the settings the running app was created with."""
    return request.app.state.settings


def require_auth(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> Claims:
    """
    Dependency: require a valid bearer token and return its claims.

    A missing header, a header that is not exactly "<scheme> <token>", a bad
    signature, a non-HMAC signing method, an expired token or an unreadable key
    all end the request with 400; the guarded handler never runs.
    """
    if authorization is None or not authorization.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=AUTH_HEADER_REQUIRED)

    parts = authorization.split()
    if len(parts) != 2:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_TOKEN)

    try:
        claims = Claims.model_validate(decode_access_token(parts[1], settings))
    except (jwt.PyJWTError, SigningKeyError, ValidationError) as e:
        logger.info("Rejected bearer token on %s %s: %s", request.method, request.url.path, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_TOKEN) from e

    request.state.claims = claims
    return claims


def json_body(model: type[ModelT], error_message: str) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that decodes the request body into model.

    Undecodable JSON and type mismatches both become 400 with error_message, so
    each endpoint keeps its own generic failure text.
    """

    async def _parse(request: Request) -> ModelT:
        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_message) from e
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.info("Rejected %s body on %s: %s", model.__name__, request.url.path, e.errors())
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_message) from e

    return _parse
