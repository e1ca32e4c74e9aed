"""Comment header routes: author tags and permalinks."""

from __future__ import annotations

from fastapi import APIRouter

from channel_moderation.permissions.api._errors import to_http_error
from channel_moderation.permissions.domain.exceptions import PermissionsError
from channel_moderation.permissions.domain.services import PermissionsService
from channel_moderation.permissions.schemas import dto

router = APIRouter(tags=["permissions:comments"])
_service = PermissionsService()


@router.post("/comments/author-status", response_model=dto.AuthorStatusResponse)
async def author_status_endpoint(payload: dto.AuthorStatusRequest) -> dto.AuthorStatusResponse:
	try:
		return _service.author_status(payload)
	except (PermissionsError, ValueError) as exc:
		raise to_http_error(exc) from exc


@router.post("/comments/permalink", response_model=dto.PermalinkResponse)
async def permalink_endpoint(payload: dto.PermalinkRequest) -> dto.PermalinkResponse:
	try:
		return _service.permalink(payload)
	except (PermissionsError, ValueError) as exc:
		raise to_http_error(exc) from exc
