"""Pydantic schemas for the permissions API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from channel_moderation.permissions.domain.models import CapabilityMap, MenuItem


class _CamelSchema(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CapabilitiesRequest(_CamelSchema):
	channel: Optional[Dict[str, Any]] = None
	server_config: Optional[Dict[str, Any]] = None
	permission_data: Optional[Dict[str, Any]] = None
	username: Optional[str] = Field(default=None, max_length=200)
	mod_profile_name: Optional[str] = Field(default=None, max_length=200)


class MenuRequest(_CamelSchema):
	capabilities: CapabilityMap = Field(default_factory=CapabilityMap)
	context: Dict[str, Any] = Field(default_factory=dict)


class MenuResponse(_CamelSchema):
	content_type: str
	items: List[MenuItem]


class AuthorStatusRequest(_CamelSchema):
	author: Optional[Dict[str, Any]] = None


class AuthorStatusResponse(_CamelSchema):
	is_admin: bool
	is_mod: bool


class PageRouteSchema(_CamelSchema):
	name: Optional[str] = None
	discussion_id: Optional[str] = None
	event_id: Optional[str] = None
	issue_number: Optional[str] = None


class PermalinkRequest(_CamelSchema):
	comment: Dict[str, Any]
	page: PageRouteSchema = Field(default_factory=PageRouteSchema)
	forum_id: Optional[str] = None


class PermalinkResponse(_CamelSchema):
	can_show_permalink: bool
	permalink_object: Dict[str, Any]
