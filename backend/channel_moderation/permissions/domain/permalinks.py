"""Comment permalinks.

A comment only gets a "Copy Link" entry when a route to it can actually be
built. That needs a channel (from the comment itself or the page) plus one of:
the discussion, event or issue the comment lives on, or, for feedback
comments, the content the feedback was given on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

_LOG = logging.getLogger(__name__)

DISCUSSION_COMMENT_ROUTE = "forums-forumId-discussions-discussionId-comments-commentId"
EVENT_COMMENT_ROUTE = "forums-forumId-events-eventId-comments-commentId"
ISSUE_COMMENT_ROUTE = "forums-forumId-issues-issueNumber-comments-commentId"
DISCUSSION_FEEDBACK_PAGE = "forums-forumId-discussions-feedback-discussionId"
EVENT_FEEDBACK_PAGE = "forums-forumId-events-feedback-eventId"
DISCUSSION_FEEDBACK_ROUTE = "forums-forumId-discussions-feedback-discussionId-feedbackPermalink-feedbackId"
EVENT_FEEDBACK_ROUTE = "forums-forumId-events-feedback-eventId-feedbackPermalink-feedbackId"
COMMENT_FEEDBACK_ROUTE = (
	"forums-forumId-discussions-commentFeedback-discussionId-commentId-feedbackPermalink-feedbackId"
)


class _Ref(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

	id: Optional[str] = None


class _ChannelRef(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

	unique_name: Optional[str] = Field(default=None, alias="uniqueName")


class _DiscussionChannelRef(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

	discussion_id: Optional[str] = Field(default=None, alias="discussionId")
	channel_unique_name: Optional[str] = Field(default=None, alias="channelUniqueName")


class _IssueRef(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

	issue_number: Optional[str] = Field(default=None, alias="issueNumber")


class CommentLocation(BaseModel):
	"""Where a comment lives, as far as routing is concerned."""

	model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

	id: Optional[str] = None
	channel: Optional[_ChannelRef] = Field(default=None, alias="Channel")
	discussion_channel: Optional[_DiscussionChannelRef] = Field(default=None, alias="DiscussionChannel")
	event: Optional[_Ref] = Field(default=None, alias="Event")
	issue: Optional[_IssueRef] = Field(default=None, alias="Issue")
	feedback_on_discussion: Optional[_Ref] = Field(default=None, alias="GivesFeedbackOnDiscussion")
	feedback_on_event: Optional[_Ref] = Field(default=None, alias="GivesFeedbackOnEvent")
	feedback_on_comment: Optional[_Ref] = Field(default=None, alias="GivesFeedbackOnComment")

	@property
	def channel_unique_name(self) -> Optional[str]:
		if self.channel and self.channel.unique_name:
			return self.channel.unique_name
		if self.discussion_channel and self.discussion_channel.channel_unique_name:
			return self.discussion_channel.channel_unique_name
		return None

	@property
	def is_feedback(self) -> bool:
		return bool(self.feedback_on_discussion or self.feedback_on_event or self.feedback_on_comment)


@dataclass(frozen=True, slots=True)
class PageRoute:
	"""The page the comment is rendered on."""

	name: Optional[str] = None
	discussion_id: Optional[str] = None
	event_id: Optional[str] = None
	issue_number: Optional[str] = None


def _as_location(comment: CommentLocation | dict[str, Any]) -> CommentLocation:
	if isinstance(comment, CommentLocation):
		return comment
	return CommentLocation.model_validate(comment)


def can_show_permalink(
	comment: CommentLocation | dict[str, Any],
	page: PageRoute | None = None,
	forum_id: Optional[str] = None,
) -> bool:
	location = _as_location(comment)
	page = page or PageRoute()
	has_forum_context = bool(location.channel_unique_name or forum_id)
	return bool(
		location.discussion_channel
		or location.event
		or location.issue
		or location.channel
		or (page.issue_number and forum_id and location.id)
		or (page.discussion_id and forum_id)
		or (page.event_id and forum_id)
		or (has_forum_context and location.is_feedback)
	)


def _feedback_route(location: CommentLocation, page: PageRoute, forum_id: str) -> dict[str, Any]:
	discussion_id = (
		(location.feedback_on_discussion.id if location.feedback_on_discussion else None)
		or page.discussion_id
		or (location.discussion_channel.discussion_id if location.discussion_channel else None)
	)
	event_id = (location.feedback_on_event.id if location.feedback_on_event else None) or page.event_id

	if page.name == DISCUSSION_FEEDBACK_PAGE or location.feedback_on_discussion:
		if not (discussion_id and location.id):
			return {}
		return {
			"name": DISCUSSION_FEEDBACK_ROUTE,
			"params": {"forumId": forum_id, "discussionId": discussion_id, "feedbackId": location.id},
		}
	if page.name == EVENT_FEEDBACK_PAGE or location.feedback_on_event:
		if not (event_id and location.id):
			return {}
		return {
			"name": EVENT_FEEDBACK_ROUTE,
			"params": {"forumId": forum_id, "eventId": event_id, "feedbackId": location.id},
		}
	target_comment_id = location.feedback_on_comment.id if location.feedback_on_comment else None
	if not (discussion_id and target_comment_id and location.id):
		return {}
	return {
		"name": COMMENT_FEEDBACK_ROUTE,
		"params": {
			"forumId": forum_id,
			"discussionId": discussion_id,
			"commentId": target_comment_id,
			"feedbackId": location.id,
		},
	}


def build_permalink_route(
	comment: CommentLocation | dict[str, Any],
	page: PageRoute | None = None,
	forum_id: Optional[str] = None,
) -> dict[str, Any]:
	"""Return ``{"name": ..., "params": ...}`` for the comment, or ``{}``."""
	location = _as_location(comment)
	page = page or PageRoute()
	if not can_show_permalink(location, page, forum_id):
		return {}

	channel_name = location.channel_unique_name
	forum = channel_name or forum_id
	if not forum:
		_LOG.warning("comment_permalink_missing_forum", extra={"comment_id": location.id})
		return {}

	if location.is_feedback:
		return _feedback_route(location, page, forum)

	route: dict[str, Any] = {}
	discussion_id = page.discussion_id or (
		location.discussion_channel.discussion_id if location.discussion_channel else None
	)
	if discussion_id:
		route = {
			"name": DISCUSSION_COMMENT_ROUTE,
			"params": {"discussionId": discussion_id, "commentId": location.id, "forumId": forum},
		}
	event_id = page.event_id or (location.event.id if location.event else None)
	if event_id:
		route = {
			"name": EVENT_COMMENT_ROUTE,
			"params": {"eventId": event_id, "commentId": location.id, "forumId": forum},
		}
	issue_number = page.issue_number or (location.issue.issue_number if location.issue else None)
	# Issue permalinks need the comment's own channel, not just the page's.
	if issue_number and channel_name:
		route = {
			"name": ISSUE_COMMENT_ROUTE,
			"params": {"issueNumber": issue_number, "forumId": channel_name, "commentId": location.id},
		}
	return route
