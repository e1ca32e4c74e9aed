"""Permission resolution and action-menu derivation for channel content."""

from channel_moderation.permissions.domain.identities import AccountIdentity, ModerationIdentity, Viewer
from channel_moderation.permissions.domain.menus import (
	build_action_menu,
	build_comment_menu,
	build_discussion_menu,
	build_event_menu,
)
from channel_moderation.permissions.domain.models import (
	CapabilityMap,
	CommentContext,
	ContentType,
	DiscussionContext,
	EventContext,
	MenuItem,
	ModRole,
	RoleSnapshot,
)
from channel_moderation.permissions.domain.resolver import resolve_capabilities

__all__ = [
	"AccountIdentity",
	"CapabilityMap",
	"CommentContext",
	"ContentType",
	"DiscussionContext",
	"EventContext",
	"MenuItem",
	"ModRole",
	"ModerationIdentity",
	"RoleSnapshot",
	"Viewer",
	"build_action_menu",
	"build_comment_menu",
	"build_discussion_menu",
	"build_event_menu",
	"resolve_capabilities",
]
