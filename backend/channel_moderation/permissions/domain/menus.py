"""Action menus for discussions, events and comments.

All three content types go through one builder. What differs between them is
captured by a small ``MenuPolicy`` record:

* the items shown to everyone (links, feedback viewer);
* the items shown to the author of the content;
* affordances that do not depend on authorship (best answer on comments);
* the moderation items that precede the archive actions;
* which value, if any, is attached to emitted actions.

The order is always: public items, then a stop for logged out viewers, author
items, other affordances, and finally the moderation section. Authors never
get a moderation section on their own content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from channel_moderation.obs import metrics as obs_metrics
from channel_moderation.permissions.domain import policies
from channel_moderation.permissions.domain.exceptions import ValidationError
from channel_moderation.permissions.domain.icons import AllowedIcon
from channel_moderation.permissions.domain.models import (
	CapabilityMap,
	CommentContext,
	ContentContext,
	ContentType,
	DiscussionContext,
	EventContext,
	MenuItem,
)

_LOG = logging.getLogger(__name__)

ItemsFn = Callable[[Any], list[MenuItem]]


def _no_items(_context: ContentContext) -> list[MenuItem]:
	return []


def _always(_context: ContentContext) -> bool:
	return True


@dataclass(frozen=True, slots=True)
class MenuPolicy:
	content_type: ContentType
	context_model: type[ContentContext]
	report_event: str
	give_feedback_event: str
	public_items: ItemsFn
	author_items: ItemsFn
	action_value: Callable[[Any], Optional[str]]
	archive_value: Callable[[Any], str]
	other_items: ItemsFn = _no_items
	offers_give_feedback: Callable[[Any], bool] = _always
	feedback_management_items: ItemsFn = _no_items


def _view_issue(link) -> MenuItem:
	return MenuItem(label="View Issue", icon=AllowedIcon.VIEW_ISSUE.value, value=link)


def _view_feedback(value: Optional[str]) -> MenuItem:
	return MenuItem(
		label="View Feedback",
		event="handleViewFeedback",
		icon=AllowedIcon.VIEW_FEEDBACK.value,
		value=value,
	)


def _copy_link(value: Optional[str]) -> MenuItem:
	return MenuItem(label="Copy Link", event="copyLink", icon=AllowedIcon.COPY_LINK.value, value=value)


def _edit(value: Optional[str]) -> MenuItem:
	return MenuItem(label="Edit", event="handleEdit", icon=AllowedIcon.EDIT.value, value=value)


def _delete(value: Optional[str]) -> MenuItem:
	return MenuItem(label="Delete", event="handleDelete", icon=AllowedIcon.DELETE.value, value=value)


# Discussions


def _discussion_public_items(context: DiscussionContext) -> list[MenuItem]:
	items: list[MenuItem] = []
	if context.related_issue_link:
		items.append(_view_issue(context.related_issue_link))
	if context.feedback_enabled:
		items.append(_view_feedback(context.content_id))
	return items


def _discussion_author_items(context: DiscussionContext) -> list[MenuItem]:
	sensitive_label = (
		"Mark as non-sensitive content" if context.has_sensitive_content else "Mark as sensitive content"
	)
	items = [
		_edit(context.content_id),
		MenuItem(
			label=sensitive_label,
			event="handleToggleSensitiveContent",
			icon=AllowedIcon.MARK_SENSITIVE.value,
			value=context.content_id,
		),
	]
	if not context.has_album:
		items.append(MenuItem(label="Add Album", event="handleAddAlbum", icon=AllowedIcon.ADD_ALBUM.value))
	items.append(_delete(context.content_id))
	return items


# Events


def _event_public_items(context: EventContext) -> list[MenuItem]:
	items: list[MenuItem] = []
	if context.related_issue_link:
		items.append(_view_issue(context.related_issue_link))
	if not context.is_on_feedback_page:
		items.append(_copy_link(None))
		if context.feedback_enabled:
			items.append(_view_feedback(None))
	return items


def _event_author_items(context: EventContext) -> list[MenuItem]:
	items = [_edit(None), _delete(None)]
	if not context.is_canceled:
		items.append(MenuItem(label="Cancel", event="handleCancel", icon=AllowedIcon.CANCEL.value))
	return items


# Comments


def _comment_public_items(context: CommentContext) -> list[MenuItem]:
	items: list[MenuItem] = []
	# A permalink needs enough routing context to be built.
	if context.can_show_permalink and context.has_permalink_object:
		items.append(_copy_link(""))
	if context.feedback_enabled:
		items.append(_view_feedback(""))
	return items


def _comment_author_items(_context: CommentContext) -> list[MenuItem]:
	return [_edit(""), _delete("")]


def _comment_best_answer_items(context: CommentContext) -> list[MenuItem]:
	# Best answers belong to the discussion, so only root comments qualify.
	if not (context.is_discussion_author and context.discussion_id and context.depth == 1):
		return []
	if context.is_own_content:
		return []
	if context.is_marked_as_answer:
		return [
			MenuItem(
				label="Undo Mark as Best Answer",
				event="handleUnmarkAsBestAnswer",
				icon=AllowedIcon.UNDO.value,
				value="",
			)
		]
	return [
		MenuItem(
			label="Mark as Best Answer",
			event="handleMarkAsBestAnswer",
			icon=AllowedIcon.MARK_BEST_ANSWER.value,
			value="",
		)
	]


def _comment_feedback_management_items(context: CommentContext) -> list[MenuItem]:
	if not (context.feedback_enabled and context.has_feedback_comments):
		return []
	return [
		MenuItem(label="Undo Feedback", event="clickUndoFeedback", icon=AllowedIcon.UNDO.value, value=""),
		MenuItem(label="Edit Feedback", event="clickEditFeedback", icon=AllowedIcon.EDIT.value, value=""),
	]


DISCUSSION_POLICY = MenuPolicy(
	content_type=ContentType.DISCUSSION,
	context_model=DiscussionContext,
	report_event="handleClickReport",
	give_feedback_event="handleFeedback",
	public_items=_discussion_public_items,
	author_items=_discussion_author_items,
	action_value=lambda context: context.content_id,
	archive_value=lambda context: context.content_id,
)

EVENT_POLICY = MenuPolicy(
	content_type=ContentType.EVENT,
	context_model=EventContext,
	report_event="handleReport",
	give_feedback_event="handleFeedback",
	public_items=_event_public_items,
	author_items=_event_author_items,
	action_value=lambda _context: None,
	archive_value=lambda context: context.content_id,
	offers_give_feedback=lambda context: not context.is_on_feedback_page,
)

# Comment identity for archive operations is threaded separately by the caller.
COMMENT_POLICY = MenuPolicy(
	content_type=ContentType.COMMENT,
	context_model=CommentContext,
	report_event="clickReport",
	give_feedback_event="clickFeedback",
	public_items=_comment_public_items,
	author_items=_comment_author_items,
	action_value=lambda _context: "",
	archive_value=lambda _context: "",
	other_items=_comment_best_answer_items,
	offers_give_feedback=lambda context: context.feedback_enabled,
	feedback_management_items=_comment_feedback_management_items,
)

MENU_POLICIES: dict[ContentType, MenuPolicy] = {
	policy.content_type: policy for policy in (DISCUSSION_POLICY, EVENT_POLICY, COMMENT_POLICY)
}


def _moderation_items(policy: MenuPolicy, capabilities: CapabilityMap, context: ContentContext) -> list[MenuItem]:
	value = policy.action_value(context)
	items: list[MenuItem] = []
	if capabilities.allows("can_report"):
		items.append(MenuItem(label="Report", event=policy.report_event, icon=AllowedIcon.REPORT.value, value=value))
	if capabilities.allows("can_give_feedback") and policy.offers_give_feedback(context):
		items.append(
			MenuItem(
				label="Give Feedback",
				event=policy.give_feedback_event,
				icon=AllowedIcon.GIVE_FEEDBACK.value,
				value=value,
			)
		)
	items.extend(policy.feedback_management_items(context))
	items.extend(
		policies.build_archive_menu_items(
			is_archived=context.is_archived,
			capabilities=capabilities,
			content_type=policy.content_type,
			content_id=policy.archive_value(context),
		)
	)
	return items


def build_menu(policy: MenuPolicy, capabilities: CapabilityMap, context: ContentContext) -> list[MenuItem]:
	"""Build the ordered menu for ``context`` under ``policy``."""
	if capabilities.has_suspended_grants:
		# Only the resolver may produce capability maps; this one was built elsewhere.
		_LOG.warning("capability_map_suspended_with_grants", extra={"content_type": policy.content_type.value})
		obs_metrics.inc_capability_invariant_violation(policy.content_type.value)

	items = policy.public_items(context)
	if not context.is_logged_in:
		obs_metrics.inc_menu_built(policy.content_type.value, moderation_section=False)
		return items

	if context.is_own_content:
		items.extend(policy.author_items(context))
	items.extend(policy.other_items(context))

	section: list[MenuItem] = []
	if not context.is_own_content and policies.can_perform_mod_actions(capabilities, policy.content_type):
		section = policies.build_moderation_section(_moderation_items(policy, capabilities, context))
		items.extend(section)

	obs_metrics.inc_menu_built(policy.content_type.value, moderation_section=bool(section))
	_LOG.debug(
		"action_menu_built",
		extra={
			"content_type": policy.content_type.value,
			"items": len(items),
			"moderation_section": bool(section),
		},
	)
	return items


def _coerce_capabilities(capabilities: Union[CapabilityMap, Mapping[str, Any], None]) -> CapabilityMap:
	if isinstance(capabilities, CapabilityMap):
		return capabilities
	try:
		return CapabilityMap.model_validate(dict(capabilities or {}))
	except PydanticValidationError as exc:
		raise ValidationError("invalid_capabilities") from exc


def _coerce_context(policy: MenuPolicy, context: Union[ContentContext, Mapping[str, Any], None]) -> ContentContext:
	if isinstance(context, policy.context_model):
		return context
	if isinstance(context, ContentContext):
		data = context.model_dump(exclude={"content_type"})
	else:
		data = {key: value for key, value in dict(context or {}).items() if key not in ("content_type", "contentType")}
	data["content_type"] = policy.content_type
	try:
		return policy.context_model.model_validate(data)
	except PydanticValidationError as exc:
		raise ValidationError("invalid_content_context") from exc


def build_action_menu(
	content_type: ContentType | str,
	capabilities: Union[CapabilityMap, Mapping[str, Any], None],
	context: Union[ContentContext, Mapping[str, Any], None],
) -> list[MenuItem]:
	"""Return the ordered action menu for one piece of content.

	``context`` may be a context model or a plain mapping using either the
	snake_case field names or the camelCase wire names; missing fields take
	their defaults and simply omit the items that depend on them.
	"""
	policy = MENU_POLICIES[policies.coerce_content_type(content_type)]
	return build_menu(policy, _coerce_capabilities(capabilities), _coerce_context(policy, context))


def build_discussion_menu(capabilities, context) -> list[MenuItem]:
	return build_action_menu(ContentType.DISCUSSION, capabilities, context)


def build_event_menu(capabilities, context) -> list[MenuItem]:
	return build_action_menu(ContentType.EVENT, capabilities, context)


def build_comment_menu(capabilities, context) -> list[MenuItem]:
	return build_action_menu(ContentType.COMMENT, capabilities, context)
