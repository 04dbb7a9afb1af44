"""Master endpoints: CRUD over the masters table. All routes require a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from maintenance.api.deps import json_body, require_auth
from maintenance.core.database import get_db
from maintenance.core.responses import send
from maintenance.schemas.master import MasterIn, MasterOut
from maintenance.services.masters import (
    MasterError,
    create_master,
    delete_master,
    get_master,
    list_masters,
    update_master,
)

router = APIRouter(dependencies=[Depends(require_auth)])

PARSE_ERROR = "Could not parse json body"


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


@router.get("")
def get_masters(db: Annotated[Session, Depends(get_db)]) -> JSONResponse:
    """Return every stored master, oldest first."""
    try:
        masters = list_masters(db)
    except MasterError as e:
        raise _bad_request("Could not find masters") from e
    return send(status.HTTP_200_OK, [MasterOut.model_validate(m) for m in masters])


@router.post("")
def post_master(
    body: Annotated[MasterIn, Depends(json_body(MasterIn, PARSE_ERROR))],
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    """
    Create a master. Any database failure, a duplicate name included, is reported
    with the same message.
    """
    try:
        create_master(db, body)
    except MasterError as e:
        raise _bad_request(
            "Could not create new master. Please check if the name is unique."
        ) from e
    return send(status.HTTP_200_OK, "Success")


@router.get("/{master_id}")
def get_master_by_id(
    master_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    try:
        master = get_master(db, master_id)
    except MasterError as e:
        raise _bad_request(f"Could not find master with id `{master_id}`") from e
    return send(status.HTTP_200_OK, MasterOut.model_validate(master))


@router.put("/{master_id}")
def put_master(
    master_id: int,
    body: Annotated[MasterIn, Depends(json_body(MasterIn, PARSE_ERROR))],
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    """Overwrite a master. Fails when the id does not exist."""
    try:
        update_master(db, master_id, body)
    except MasterError as e:
        raise _bad_request("Could not update master") from e
    return send(status.HTTP_200_OK, "Success")


@router.delete("/{master_id}")
def delete_master_by_id(
    master_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> JSONResponse:
    try:
        delete_master(db, master_id)
    except MasterError as e:
        raise _bad_request(f"Could not delete master with id `{master_id}`") from e
    return send(status.HTTP_200_OK, "Success")
