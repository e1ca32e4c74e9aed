"""Icon vocabulary understood by the menu renderer."""

from __future__ import annotations

from enum import Enum


class AllowedIcon(str, Enum):
	ADD_ALBUM = "add-album"
	ARCHIVE = "archive"
	CANCEL = "cancel"
	COPY_LINK = "copy-link"
	DELETE = "delete"
	EDIT = "edit"
	GIVE_FEEDBACK = "give-feedback"
	MARK_BEST_ANSWER = "mark-best-answer"
	MARK_SENSITIVE = "mark-sensitive"
	REPORT = "report"
	SUSPEND = "suspend"
	UNARCHIVE = "unarchive"
	UNDO = "undo"
	VIEW_FEEDBACK = "view-feedback"
	VIEW_ISSUE = "view-issue"
