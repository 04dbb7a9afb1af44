"""Pydantic request/response schemas."""

from maintenance.schemas.auth import Claims, LoginCredentials, UserCreate
from maintenance.schemas.master import MasterIn, MasterOut
from maintenance.schemas.response import HealthStatus, JsonResponse

__all__ = [
    "Claims",
    "HealthStatus",
    "JsonResponse",
    "LoginCredentials",
    "MasterIn",
    "MasterOut",
    "UserCreate",
]
