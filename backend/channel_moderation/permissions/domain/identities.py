"""Viewer identities used when resolving channel permissions.

An account identity (the username) and a moderation identity (the display name
of the viewer's pseudonymous moderation profile) are deliberately separate
types. Owners and suspended users are keyed by account, moderators and
suspended moderators by moderation profile; two identities of different kinds
never compare equal, even when they wrap the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class AccountIdentity:
	username: str

	def __str__(self) -> str:
		return self.username


@dataclass(frozen=True, slots=True)
class ModerationIdentity:
	display_name: str

	def __str__(self) -> str:
		return self.display_name


@dataclass(frozen=True, slots=True)
class Viewer:
	"""The two identities of whoever is looking at the content."""

	account: Optional[AccountIdentity] = None
	moderation: Optional[ModerationIdentity] = None

	@classmethod
	def from_names(cls, username: str | None = None, mod_profile_name: str | None = None) -> "Viewer":
		return cls(
			account=AccountIdentity(username) if username else None,
			moderation=ModerationIdentity(mod_profile_name) if mod_profile_name else None,
		)

	@property
	def is_anonymous(self) -> bool:
		return self.account is None and self.moderation is None


def account_set(usernames: Iterable[str | None]) -> frozenset[AccountIdentity]:
	return frozenset(AccountIdentity(name) for name in usernames if name)


def moderation_set(display_names: Iterable[str | None]) -> frozenset[ModerationIdentity]:
	return frozenset(ModerationIdentity(name) for name in display_names if name)
