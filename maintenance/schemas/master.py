"""Request/response schemas for master endpoints."""

from pydantic import BaseModel, Field


class MasterIn(BaseModel):
    """Master fields accepted on create and update. A body id is ignored; the path id wins."""

    model_config = {"extra": "ignore"}

    name: str = Field(..., description="Unique master name")
    host: str = Field(..., description="Hostname or IP address")
    port: int = Field(..., ge=1, le=65535, description="TCP port")


class MasterOut(BaseModel):
    """Master record as returned to clients."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    host: str
    port: int
