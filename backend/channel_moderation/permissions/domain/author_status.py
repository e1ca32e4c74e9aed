"""Admin and moderator tags shown next to a comment author."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ServerRoleTag(BaseModel):
	model_config = ConfigDict(extra="ignore")

	show_admin_tag: Optional[bool] = Field(default=None, alias="showAdminTag")


class _ChannelRoleTag(BaseModel):
	model_config = ConfigDict(extra="ignore")

	show_mod_tag: Optional[bool] = Field(default=None, alias="showModTag")


class CommentAuthor(BaseModel):
	"""Author of a comment: either a ``User`` or a ``ModerationProfile``."""

	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	typename: Optional[str] = Field(default=None, alias="__typename")
	server_roles: Optional[list[_ServerRoleTag]] = Field(default=None, alias="ServerRoles")
	channel_roles: Optional[list[_ChannelRoleTag]] = Field(default=None, alias="ChannelRoles")


@dataclass(frozen=True, slots=True)
class CommentAuthorStatus:
	is_admin: bool = False
	is_mod: bool = False


def get_comment_author_status(author: CommentAuthor | Mapping[str, Any] | None) -> CommentAuthorStatus:
	"""Only user authors carry tags; the first server and channel role decide them."""
	if not author:
		return CommentAuthorStatus()
	if not isinstance(author, CommentAuthor):
		author = CommentAuthor.model_validate(dict(author))
	if author.typename != "User":
		return CommentAuthorStatus()

	is_admin = bool(author.server_roles and author.server_roles[0].show_admin_tag)
	is_mod = bool(author.channel_roles and author.channel_roles[0].show_mod_tag)
	return CommentAuthorStatus(is_admin=is_admin, is_mod=is_mod)
