from __future__ import annotations

import pytest

from channel_moderation.permissions.domain.exceptions import UnknownContentTypeError, ValidationError
from channel_moderation.permissions.domain.menus import (
	build_action_menu,
	build_comment_menu,
	build_discussion_menu,
	build_event_menu,
)
from channel_moderation.permissions.domain.models import (
	CapabilityMap,
	CommentContext,
	DiscussionContext,
	EventContext,
)
from channel_moderation.settings import settings

MODERATOR = {
	"is_elevated_mod": True,
	"can_report": True,
	"can_give_feedback": True,
	"can_hide_discussion": True,
	"can_hide_event": True,
	"can_hide_comment": True,
	"can_suspend_user": True,
}


def _labels(items):
	return [item.label for item in items]


def _moderation_section(items):
	for index, item in enumerate(items):
		if item.is_divider:
			return _labels(items[index + 1 :])
	return None


# Discussions


def test_discussion_menu_for_moderator_ends_with_moderation_section(caps):
	context = DiscussionContext(content_id="disc-1", is_logged_in=True)
	capabilities = caps(is_elevated_mod=True, can_report=True, can_give_feedback=True, can_hide_discussion=True)

	items = build_discussion_menu(capabilities, context)

	assert _labels(items) == ["View Feedback", "Moderation Actions", "Report", "Give Feedback", "Archive"]
	assert items[1].is_divider is True
	assert [item.event for item in items[2:]] == ["handleClickReport", "handleFeedback", "handleClickArchive"]
	assert {item.value for item in items[2:]} == {"disc-1"}


def test_discussion_author_menu(caps):
	context = DiscussionContext(
		content_id="disc-1",
		is_logged_in=True,
		is_own_content=True,
		related_issue_link={"name": "issue", "params": {"issueNumber": "3"}},
	)

	items = build_discussion_menu(caps(**MODERATOR), context)

	assert _labels(items) == [
		"View Issue",
		"View Feedback",
		"Edit",
		"Mark as sensitive content",
		"Add Album",
		"Delete",
	]
	assert items[0].event is None
	assert items[0].value == {"name": "issue", "params": {"issueNumber": "3"}}
	assert items[4].value is None


def test_discussion_author_menu_with_album_and_sensitive_content(base_capabilities):
	context = DiscussionContext(
		content_id="disc-1",
		is_logged_in=True,
		is_own_content=True,
		has_album=True,
		has_sensitive_content=True,
		feedback_enabled=False,
	)

	items = build_discussion_menu(base_capabilities, context)

	assert _labels(items) == ["Edit", "Mark as non-sensitive content", "Delete"]


def test_logged_out_viewer_only_gets_public_items(caps):
	context = DiscussionContext(content_id="disc-1", is_logged_in=False, is_own_content=True)

	items = build_discussion_menu(caps(**MODERATOR), context)

	assert _labels(items) == ["View Feedback"]


def test_feedback_disabled_hides_view_feedback(base_capabilities):
	context = DiscussionContext(content_id="disc-1", is_logged_in=True, feedback_enabled=False)

	assert build_discussion_menu(base_capabilities, context) == []


def test_feedback_default_follows_settings(base_capabilities):
	settings.feedback_enabled_default = False

	items = build_action_menu("discussion", base_capabilities, {"contentId": "disc-1", "isLoggedIn": True})

	assert items == []


# Events


def test_event_menu_for_moderator(caps):
	context = EventContext(content_id="event-1", is_logged_in=True)

	items = build_event_menu(caps(**MODERATOR), context)

	assert _labels(items) == [
		"Copy Link",
		"View Feedback",
		"Moderation Actions",
		"Report",
		"Give Feedback",
		"Archive",
		"Archive and Suspend",
	]
	report = items[3]
	assert report.event == "handleReport"
	assert report.value is None
	assert items[-1].value == "event-1"


def test_event_on_feedback_page_drops_links_and_give_feedback(caps):
	context = EventContext(content_id="event-1", is_logged_in=True, is_on_feedback_page=True)

	items = build_event_menu(caps(**MODERATOR), context)

	assert _labels(items) == ["Moderation Actions", "Report", "Archive", "Archive and Suspend"]


def test_event_author_menu(base_capabilities):
	context = EventContext(content_id="event-1", is_logged_in=True, is_own_content=True, feedback_enabled=False)

	items = build_event_menu(base_capabilities, context)

	assert _labels(items) == ["Copy Link", "Edit", "Delete", "Cancel"]


def test_canceled_event_cannot_be_canceled_again(base_capabilities):
	context = EventContext(
		content_id="event-1",
		is_logged_in=True,
		is_own_content=True,
		is_canceled=True,
		feedback_enabled=False,
	)

	assert _labels(build_event_menu(base_capabilities, context)) == ["Copy Link", "Edit", "Delete"]


# Comments


def test_archived_comment_only_offers_unarchive(caps):
	context = CommentContext(content_id="comment-1", is_logged_in=True, is_archived=True, feedback_enabled=False)

	items = build_comment_menu(caps(is_elevated_mod=True, can_hide_comment=True), context)

	assert _moderation_section(items) == ["Unarchive"]
	assert "Archive" not in _labels(items)


def test_comment_menu_for_moderator(caps):
	context = CommentContext(
		content_id="comment-1",
		is_logged_in=True,
		can_show_permalink=True,
		has_permalink_object=True,
		has_feedback_comments=True,
		feedback_enabled=True,
	)

	items = build_comment_menu(caps(**MODERATOR), context)

	assert _labels(items) == [
		"Copy Link",
		"View Feedback",
		"Moderation Actions",
		"Report",
		"Give Feedback",
		"Undo Feedback",
		"Edit Feedback",
		"Archive",
		"Archive and Suspend",
	]
	assert [item.event for item in items[3:7]] == [
		"clickReport",
		"clickFeedback",
		"clickUndoFeedback",
		"clickEditFeedback",
	]
	assert {item.value for item in items if not item.is_divider} == {""}


def test_comment_permalink_needs_a_route(base_capabilities):
	context = CommentContext(
		is_logged_in=True,
		can_show_permalink=True,
		has_permalink_object=False,
		feedback_enabled=True,
	)

	assert _labels(build_comment_menu(base_capabilities, context)) == ["View Feedback"]


def test_comment_give_feedback_requires_feedback_enabled(caps):
	context = CommentContext(is_logged_in=True, feedback_enabled=False)

	items = build_comment_menu(caps(can_report=True, can_give_feedback=True), context)

	assert _labels(items) == ["Moderation Actions", "Report"]


def test_comment_author_menu(caps):
	context = CommentContext(is_logged_in=True, is_own_content=True, feedback_enabled=False)

	items = build_comment_menu(caps(**MODERATOR), context)

	assert _labels(items) == ["Edit", "Delete"]


def test_discussion_author_can_mark_root_comment_as_best_answer(base_capabilities):
	context = CommentContext(
		is_logged_in=True,
		depth=1,
		is_discussion_author=True,
		discussion_id="disc-1",
		feedback_enabled=False,
	)

	items = build_comment_menu(base_capabilities, context)

	assert _labels(items) == ["Mark as Best Answer"]
	assert items[0].event == "handleMarkAsBestAnswer"


def test_discussion_author_can_unmark_best_answer(base_capabilities):
	context = CommentContext(
		is_logged_in=True,
		is_discussion_author=True,
		is_marked_as_answer=True,
		discussion_id="disc-1",
		depth=1,
		feedback_enabled=False,
	)

	items = build_comment_menu(base_capabilities, context)

	assert _labels(items) == ["Undo Mark as Best Answer"]
	assert items[0].event == "handleUnmarkAsBestAnswer"


@pytest.mark.parametrize(
	"overrides",
	[
		{"depth": 2},
		{"discussion_id": None},
		{"is_discussion_author": False},
		{"is_own_content": True},
	],
)
def test_best_answer_not_offered(base_capabilities, overrides):
	data = {
		"is_logged_in": True,
		"is_discussion_author": True,
		"depth": 1,
		"discussion_id": "disc-1",
		"feedback_enabled": False,
	}
	data.update(overrides)

	items = build_comment_menu(base_capabilities, CommentContext(**data))

	assert "Mark as Best Answer" not in _labels(items)


def test_gate_passing_with_no_items_omits_section(caps):
	# The gate opens on the suspend capability, but archived content only offers
	# Unarchive, which needs the hide capability.
	context = CommentContext(content_id="comment-1", is_logged_in=True, is_archived=True, feedback_enabled=False)

	items = build_comment_menu(caps(can_suspend_user=True), context)

	assert items == []


# Ownership and suspension


@pytest.mark.parametrize("content_type", ["discussion", "event", "comment"])
def test_own_content_never_gets_moderation_section(caps, content_type):
	items = build_action_menu(
		content_type,
		caps(**MODERATOR, is_channel_owner=True),
		{"contentId": "x-1", "isLoggedIn": True, "isOwnContent": True},
	)

	assert not any(item.is_divider for item in items)
	assert not {"Report", "Give Feedback", "Archive", "Archive and Suspend"} & set(_labels(items))


@pytest.mark.parametrize("content_type", ["discussion", "event", "comment"])
def test_suspended_moderator_gets_no_moderation_section(content_type):
	capabilities = CapabilityMap(is_suspended_mod=True, **MODERATOR)

	items = build_action_menu(content_type, capabilities, {"contentId": "x-1", "isLoggedIn": True})

	assert not any(item.is_divider for item in items)


def test_owner_without_item_capabilities_gets_no_section(caps):
	context = DiscussionContext(content_id="disc-1", is_logged_in=True, feedback_enabled=False)

	assert build_discussion_menu(caps(is_channel_owner=True), context) == []


# Input handling


def test_context_accepts_wire_names():
	items = build_action_menu(
		"discussion",
		{"isElevatedMod": True, "canHideDiscussion": True},
		{"contentId": "disc-1", "isLoggedIn": True, "isOwnDiscussion": False, "enableFeedback": False},
	)

	assert _labels(items) == ["Moderation Actions", "Archive"]
	assert items[-1].value == "disc-1"


def test_context_model_of_another_type_is_converted(caps):
	context = DiscussionContext(content_id="x-1", is_logged_in=True, feedback_enabled=False)

	items = build_action_menu("comment", caps(can_report=True), context)

	assert items[-1].event == "clickReport"


def test_missing_inputs_yield_public_items_only():
	assert _labels(build_action_menu("discussion", None, None)) == ["View Feedback"]


def test_unknown_content_type_raises(base_capabilities):
	with pytest.raises(UnknownContentTypeError):
		build_action_menu("channel", base_capabilities, {})


def test_malformed_context_raises_validation_error(base_capabilities):
	with pytest.raises(ValidationError):
		build_action_menu("comment", base_capabilities, {"depth": "deep"})


def test_malformed_capabilities_raise_validation_error():
	with pytest.raises(ValidationError):
		build_action_menu("comment", {"canReport": "sometimes"}, {})


def test_null_flags_read_as_false():
	items = build_action_menu(
		"discussion",
		{"canReport": None, "canHideDiscussion": True, "isElevatedMod": True, "isSuspendedMod": None},
		{"contentId": "disc-1", "isLoggedIn": True, "isOwnContent": None, "isArchived": None, "feedbackEnabled": False},
	)

	assert _labels(items) == ["Moderation Actions", "Archive"]


def test_null_author_flags_omit_dependent_items():
	items = build_action_menu(
		"discussion",
		{},
		{"contentId": "disc-1", "isLoggedIn": True, "isOwnContent": True, "hasAlbum": None, "feedbackEnabled": None},
	)

	assert _labels(items) == ["Edit", "Mark as sensitive content", "Add Album", "Delete"]


def test_comment_without_depth_is_not_offered_best_answer(base_capabilities):
	items = build_action_menu(
		"comment",
		base_capabilities,
		{"isLoggedIn": True, "isDiscussionAuthor": True, "discussionId": "disc-1", "enableFeedback": False},
	)

	assert items == []


def test_comment_feedback_items_need_explicit_opt_in(caps):
	context = {"isLoggedIn": True, "canShowPermalink": False, "hasFeedbackComments": True}

	items = build_action_menu("comment", caps(can_give_feedback=True), context)

	assert not {"View Feedback", "Give Feedback", "Undo Feedback", "Edit Feedback"} & set(_labels(items))
