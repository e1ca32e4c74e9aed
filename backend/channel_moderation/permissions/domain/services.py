"""Service facade over the permission resolver and menu builders."""

from __future__ import annotations

import logging

from channel_moderation.permissions.domain import author_status, menus, permalinks, policies
from channel_moderation.permissions.domain.identities import Viewer
from channel_moderation.permissions.domain.models import CapabilityMap, MenuItem, RoleSnapshot
from channel_moderation.permissions.domain.resolver import resolve_capabilities
from channel_moderation.permissions.schemas import dto
from channel_moderation.settings import settings

_LOG = logging.getLogger(__name__)


class PermissionsService:
	"""Stateless; every call works only on the snapshot it is handed."""

	def resolve(self, payload: dto.CapabilitiesRequest) -> CapabilityMap:
		server_name = (payload.server_config or {}).get("serverName")
		if settings.server_name and server_name and server_name != settings.server_name:
			_LOG.warning(
				"server_config_mismatch",
				extra={"expected_server": settings.server_name, "received_server": server_name},
			)
		snapshot = RoleSnapshot.from_payloads(
			channel=payload.channel,
			server_config=payload.server_config,
			permission_data=payload.permission_data,
		)
		viewer = Viewer.from_names(payload.username, payload.mod_profile_name)
		return resolve_capabilities(snapshot, viewer)

	def menu(self, content_type: str, payload: dto.MenuRequest) -> dto.MenuResponse:
		kind = policies.coerce_content_type(content_type)
		items: list[MenuItem] = menus.build_action_menu(kind, payload.capabilities, payload.context)
		return dto.MenuResponse(content_type=kind.value, items=items)

	def author_status(self, payload: dto.AuthorStatusRequest) -> dto.AuthorStatusResponse:
		status = author_status.get_comment_author_status(payload.author)
		return dto.AuthorStatusResponse(is_admin=status.is_admin, is_mod=status.is_mod)

	def permalink(self, payload: dto.PermalinkRequest) -> dto.PermalinkResponse:
		page = permalinks.PageRoute(
			name=payload.page.name,
			discussion_id=payload.page.discussion_id,
			event_id=payload.page.event_id,
			issue_number=payload.page.issue_number,
		)
		can_show = permalinks.can_show_permalink(payload.comment, page, payload.forum_id)
		route = permalinks.build_permalink_route(payload.comment, page, payload.forum_id)
		return dto.PermalinkResponse(can_show_permalink=can_show, permalink_object=route)
