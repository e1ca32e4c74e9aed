"""Custom exceptions for the channel permissions engine.

Absent or null role data is never an error; these are reserved for callers
handing the engine something it cannot interpret at all.
"""

from __future__ import annotations

from fastapi import status

if hasattr(status, "HTTP_422_UNPROCESSABLE_CONTENT"):
	_HTTP_422 = status.HTTP_422_UNPROCESSABLE_CONTENT
else:  # pragma: no cover - older Starlette builds
	_HTTP_422 = status.HTTP_422_UNPROCESSABLE_ENTITY


class PermissionsError(Exception):
	"""Base class for permission engine errors."""

	status_code: int = status.HTTP_400_BAD_REQUEST
	detail: str = "permissions_error"

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.detail)
		if detail:
			self.detail = detail


class ValidationError(PermissionsError):
	"""Raised when an input cannot be coerced into the engine's models."""

	status_code = _HTTP_422
	detail = "validation_error"


class UnknownContentTypeError(ValidationError):
	"""Raised for a content type outside discussion, event and comment."""

	detail = "unknown_content_type"
