"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from maintenance.api.deps import get_app_settings
from maintenance.core.config import Settings
from maintenance.core.database import check_db_connected, get_db
from maintenance.core.responses import send
from maintenance.schemas.response import HealthStatus

router = APIRouter()


@router.get("")
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> JSONResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return send(
        status.HTTP_200_OK,
        HealthStatus(environment=settings.APP_ENV, database=db_status),
    )
