"""Shared gating primitives for content action menus."""

from __future__ import annotations

from typing import Optional, Sequence

from channel_moderation.permissions.domain.exceptions import UnknownContentTypeError
from channel_moderation.permissions.domain.icons import AllowedIcon
from channel_moderation.permissions.domain.models import CapabilityMap, ContentType, MenuItem

MODERATION_SECTION_LABEL = "Moderation Actions"

HIDE_CAPABILITY: dict[ContentType, str] = {
	ContentType.DISCUSSION: "can_hide_discussion",
	ContentType.EVENT: "can_hide_event",
	ContentType.COMMENT: "can_hide_comment",
}


def coerce_content_type(value: ContentType | str) -> ContentType:
	if isinstance(value, ContentType):
		return value
	try:
		return ContentType(str(value).strip().lower())
	except ValueError as exc:
		raise UnknownContentTypeError() from exc


def hide_capability_for(content_type: ContentType | str) -> str:
	return HIDE_CAPABILITY[coerce_content_type(content_type)]


def can_perform_mod_actions(capabilities: CapabilityMap, content_type: ContentType | str | None = None) -> bool:
	"""Decide whether a moderation section is worth considering at all.

	Passing this gate does not promise any particular item; each item still
	checks its own capability.
	"""
	if capabilities.is_suspended_mod:
		return False
	if (
		capabilities.is_channel_owner
		or capabilities.is_elevated_mod
		or capabilities.can_report
		or capabilities.can_give_feedback
	):
		return True
	if content_type is None:
		return False
	return capabilities.allows(hide_capability_for(content_type)) or capabilities.can_suspend_user


def build_archive_menu_items(
	*,
	is_archived: bool,
	capabilities: CapabilityMap,
	content_type: ContentType | str,
	content_id: Optional[str],
	archive_event: str = "handleClickArchive",
	unarchive_event: str = "handleClickUnarchive",
	archive_and_suspend_event: str = "handleClickArchiveAndSuspend",
) -> list[MenuItem]:
	"""Archive, archive-and-suspend or unarchive items for one piece of content."""
	can_hide = capabilities.allows(hide_capability_for(content_type))
	items: list[MenuItem] = []
	if is_archived:
		if can_hide:
			items.append(
				MenuItem(label="Unarchive", event=unarchive_event, icon=AllowedIcon.UNARCHIVE.value, value=content_id)
			)
		return items

	if can_hide:
		items.append(MenuItem(label="Archive", event=archive_event, icon=AllowedIcon.ARCHIVE.value, value=content_id))
	if capabilities.allows("can_suspend_user"):
		items.append(
			MenuItem(
				label="Archive and Suspend",
				event=archive_and_suspend_event,
				icon=AllowedIcon.SUSPEND.value,
				value=content_id,
			)
		)
	return items


def build_moderation_section(items: Sequence[MenuItem]) -> list[MenuItem]:
	"""Prefix moderation items with their divider; no items means no section."""
	if not items:
		return []
	divider = MenuItem(label=MODERATION_SECTION_LABEL, value=MODERATION_SECTION_LABEL, is_divider=True)
	return [divider, *items]
