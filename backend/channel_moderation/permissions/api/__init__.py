"""FastAPI routers for channel permissions."""

from __future__ import annotations

from fastapi import APIRouter

from channel_moderation.permissions.api import comments, menus

router = APIRouter(prefix="/api/permissions/v1")

router.include_router(menus.router)
router.include_router(comments.router)

__all__ = ["router"]
