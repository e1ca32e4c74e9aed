"""Capability and action menu routes."""

from __future__ import annotations

from fastapi import APIRouter

from channel_moderation.permissions.api._errors import to_http_error
from channel_moderation.permissions.domain.exceptions import PermissionsError
from channel_moderation.permissions.domain.models import CapabilityMap
from channel_moderation.permissions.domain.services import PermissionsService
from channel_moderation.permissions.schemas import dto

router = APIRouter(tags=["permissions:menus"])
_service = PermissionsService()


@router.post("/capabilities", response_model=CapabilityMap)
async def resolve_capabilities_endpoint(payload: dto.CapabilitiesRequest) -> CapabilityMap:
	try:
		return _service.resolve(payload)
	except (PermissionsError, ValueError) as exc:
		raise to_http_error(exc) from exc


@router.post("/menus/{content_type}", response_model=dto.MenuResponse)
async def build_menu_endpoint(content_type: str, payload: dto.MenuRequest) -> dto.MenuResponse:
	try:
		return _service.menu(content_type, payload)
	except (PermissionsError, ValueError) as exc:
		raise to_http_error(exc) from exc
