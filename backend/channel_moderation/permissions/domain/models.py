"""Domain models for channel permission resolution and action menus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from channel_moderation.permissions.domain.identities import (
	AccountIdentity,
	ModerationIdentity,
	account_set,
	moderation_set,
)
from channel_moderation.settings import settings

CAPABILITY_FIELDS: tuple[str, ...] = (
	"can_report",
	"can_give_feedback",
	"can_hide_comment",
	"can_hide_discussion",
	"can_hide_event",
	"can_suspend_user",
)

RouteLocation = Union[str, dict[str, Any]]


class ContentType(str, Enum):
	DISCUSSION = "discussion"
	EVENT = "event"
	COMMENT = "comment"


class _CamelModel(BaseModel):
	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		frozen=True,
		extra="ignore",
	)

	@field_validator("*", mode="before")
	@classmethod
	def _null_flag_is_false(cls, value: Any, info: ValidationInfo) -> Any:
		# A null flag reads as false, like an absent one.
		if value is None and cls.model_fields[info.field_name].annotation is bool:
			return False
		return value


class ModRole(_CamelModel):
	"""A moderator role definition. ``None`` means the field is not defined."""

	can_report: Optional[bool] = None
	can_give_feedback: Optional[bool] = None
	can_hide_comment: Optional[bool] = None
	can_hide_discussion: Optional[bool] = None
	can_hide_event: Optional[bool] = None
	can_suspend_user: Optional[bool] = None

	def value_of(self, capability: str) -> Optional[bool]:
		return getattr(self, capability)


# Raw records, shaped like the forum's GraphQL responses.


class ChannelRoleRecord(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	default_mod_role: Optional[ModRole] = Field(default=None, alias="DefaultModRole")
	elevated_mod_role: Optional[ModRole] = Field(default=None, alias="ElevatedModRole")


class ServerConfigRecord(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	server_name: Optional[str] = Field(default=None, alias="serverName")
	default_mod_role: Optional[ModRole] = Field(default=None, alias="DefaultModRole")
	default_elevated_mod_role: Optional[ModRole] = Field(default=None, alias="DefaultElevatedModRole")


class _UserRef(BaseModel):
	model_config = ConfigDict(extra="ignore")

	username: Optional[str] = None


class _ModProfileRef(BaseModel):
	model_config = ConfigDict(extra="ignore")

	display_name: Optional[str] = Field(
		default=None,
		validation_alias=AliasChoices("displayName", "modProfileName", "display_name"),
	)


class ChannelPermissionRecord(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	admins: Optional[list[Optional[_UserRef]]] = Field(default=None, alias="Admins")
	moderators: Optional[list[Optional[_ModProfileRef]]] = Field(default=None, alias="Moderators")
	suspended_mods: Optional[list[Optional[_ModProfileRef]]] = Field(default=None, alias="SuspendedMods")
	suspended_users: Optional[list[Optional[_UserRef]]] = Field(default=None, alias="SuspendedUsers")


@dataclass(frozen=True, slots=True)
class ChannelMembership:
	"""Owners, moderators and suspensions of one channel."""

	owners: frozenset[AccountIdentity] = frozenset()
	moderators: frozenset[ModerationIdentity] = frozenset()
	suspended_moderators: frozenset[ModerationIdentity] = frozenset()
	suspended_users: frozenset[AccountIdentity] = frozenset()

	@classmethod
	def from_record(cls, record: ChannelPermissionRecord | None) -> "ChannelMembership":
		if record is None:
			return cls()
		return cls(
			owners=account_set(ref.username for ref in record.admins or () if ref is not None),
			moderators=moderation_set(ref.display_name for ref in record.moderators or () if ref is not None),
			suspended_moderators=moderation_set(ref.display_name for ref in record.suspended_mods or () if ref is not None),
			suspended_users=account_set(ref.username for ref in record.suspended_users or () if ref is not None),
		)


@dataclass(frozen=True, slots=True)
class RoleSnapshot:
	"""Everything the resolver needs to know about one channel's roles."""

	channel_standard_role: Optional[ModRole] = None
	channel_elevated_role: Optional[ModRole] = None
	server_standard_role: Optional[ModRole] = None
	server_elevated_role: Optional[ModRole] = None
	membership: ChannelMembership = field(default_factory=ChannelMembership)

	@classmethod
	def from_payloads(
		cls,
		*,
		channel: dict[str, Any] | None = None,
		server_config: dict[str, Any] | None = None,
		permission_data: dict[str, Any] | None = None,
	) -> "RoleSnapshot":
		"""Build a snapshot from raw channel, server config and membership records.

		Any of the three may be missing while the data layer is still loading; the
		corresponding roles and sets are then empty.
		"""
		channel_record = ChannelRoleRecord.model_validate(channel) if channel else ChannelRoleRecord()
		server_record = ServerConfigRecord.model_validate(server_config) if server_config else ServerConfigRecord()
		permission_record = ChannelPermissionRecord.model_validate(permission_data) if permission_data else None
		return cls(
			channel_standard_role=channel_record.default_mod_role,
			channel_elevated_role=channel_record.elevated_mod_role,
			server_standard_role=server_record.default_mod_role,
			server_elevated_role=server_record.default_elevated_mod_role,
			membership=ChannelMembership.from_record(permission_record),
		)


class CapabilityMap(_CamelModel):
	"""Resolved permissions of one viewer in one channel."""

	can_report: bool = False
	can_give_feedback: bool = False
	can_hide_comment: bool = False
	can_hide_discussion: bool = False
	can_hide_event: bool = False
	can_suspend_user: bool = False
	is_channel_owner: bool = False
	is_elevated_mod: bool = False
	is_suspended_mod: bool = False
	is_suspended_user: bool = False

	def allows(self, capability: str) -> bool:
		"""Return the capability as every consumer must see it."""
		if capability not in CAPABILITY_FIELDS:
			return False
		if self.is_suspended_mod:
			return False
		return bool(getattr(self, capability))

	@property
	def has_suspended_grants(self) -> bool:
		"""True when a suspended moderator still carries a stored grant."""
		return self.is_suspended_mod and any(getattr(self, name) for name in CAPABILITY_FIELDS)


class ContentContext(_CamelModel):
	"""State of a piece of content that shapes its action menu."""

	content_type: ContentType
	content_id: str = ""
	is_own_content: bool = Field(
		default=False,
		validation_alias=AliasChoices(
			"isOwnContent",
			"is_own_content",
			"isOwnDiscussion",
			"isOwnEvent",
			"isOwnComment",
		),
	)
	is_archived: bool = False
	is_logged_in: bool = False
	feedback_enabled: bool = Field(
		default_factory=lambda: settings.feedback_enabled_default,
		validation_alias=AliasChoices("feedbackEnabled", "feedback_enabled", "enableFeedback"),
	)


class DiscussionContext(ContentContext):
	content_type: ContentType = ContentType.DISCUSSION
	has_album: bool = False
	has_sensitive_content: bool = False
	related_issue_link: Optional[RouteLocation] = None


class EventContext(ContentContext):
	content_type: ContentType = ContentType.EVENT
	is_canceled: bool = False
	is_on_feedback_page: bool = False
	related_issue_link: Optional[RouteLocation] = None


class CommentContext(ContentContext):
	content_type: ContentType = ContentType.COMMENT
	# Comment threads only show feedback when the caller says so.
	feedback_enabled: bool = Field(
		default=False,
		validation_alias=AliasChoices("feedbackEnabled", "feedback_enabled", "enableFeedback"),
	)
	depth: Optional[int] = None
	is_discussion_author: bool = False
	is_marked_as_answer: bool = False
	discussion_id: Optional[str] = None
	can_show_permalink: bool = False
	has_permalink_object: bool = False
	has_feedback_comments: bool = False


class MenuItem(_CamelModel):
	"""One entry of an action menu. Carries no behaviour."""

	label: str = ""
	event: Optional[str] = None
	icon: Optional[str] = None
	value: Optional[RouteLocation] = None
	is_divider: bool = False
