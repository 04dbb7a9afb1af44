"""HTTP routes."""

from fastapi import APIRouter

from maintenance.api import health, masters, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(masters.router, prefix="/masters", tags=["masters"])
router.include_router(users.router, tags=["users"])
