"""Account endpoints: registration, login (issues a bearer token) and deletion."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from maintenance.api.deps import get_app_settings, json_body, require_auth
from maintenance.core.config import Settings
from maintenance.core.database import get_db
from maintenance.core.responses import send
from maintenance.core.security import SigningKeyError, create_access_token
from maintenance.schemas.auth import Claims, LoginCredentials, UserCreate
from maintenance.services.users import (
    InvalidCredentialsError,
    UserWriteError,
    authenticate,
    delete_user,
    register_user,
)

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTER_ERROR = "Could not register user"
WRONG_CREDENTIALS = "Wrong login credentials"


@router.post("/register")
def register(
    body: Annotated[UserCreate, Depends(json_body(UserCreate, REGISTER_ERROR))],
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    """Create an account. Decode, hash and insert failures share one message."""
    try:
        register_user(db, body)
    except UserWriteError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REGISTER_ERROR) from e
    return send(status.HTTP_200_OK, "Success")


@router.post("/login")
def login(
    body: Annotated[LoginCredentials, Depends(json_body(LoginCredentials, WRONG_CREDENTIALS))],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> JSONResponse:
    """
    Authenticate with username and password; returns a signed token.
    The token is both the envelope content and the Authorization response header
    (Bearer <token>). Unknown user and wrong password are indistinguishable.
    """
    try:
        user = authenticate(db, body)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=WRONG_CREDENTIALS) from e
    try:
        token = create_access_token(user.username, settings)
    except SigningKeyError as e:
        logger.error("Could not sign token for user id=%s: %s", user.id, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Could not create token"
        ) from e
    return send(status.HTTP_200_OK, token, headers={"Authorization": f"Bearer {token}"})


@router.delete("/users")
def delete_account(
    _claims: Annotated[Claims, Depends(require_auth)],
    body: Annotated[LoginCredentials, Depends(json_body(LoginCredentials, WRONG_CREDENTIALS))],
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    """Delete the account named in the body after re-checking its password."""
    try:
        delete_user(db, body)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=WRONG_CREDENTIALS) from e
    except UserWriteError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Could not delete user"
        ) from e
    return send(status.HTTP_200_OK, "Success")
