"""Resolution of channel role records into a viewer's capability map.

Precedence, evaluated once per call:

1. the channel's standard role, else the server's standard role, supplies the
   base value of every capability (an absent role or field means False);
2. for an elevated moderator, every field the effective elevated role defines
   replaces the base value of that field and nothing else;
3. a suspended moderator loses every capability, whatever steps 1 and 2 said.

Channel ownership and elevated status are reported as separate status bits and
are never folded into the capability fields.
"""

from __future__ import annotations

import logging
from typing import Optional

from channel_moderation.obs import metrics as obs_metrics
from channel_moderation.permissions.domain.identities import Viewer
from channel_moderation.permissions.domain.models import (
	CAPABILITY_FIELDS,
	CapabilityMap,
	ModRole,
	RoleSnapshot,
)

_LOG = logging.getLogger(__name__)


def effective_standard_role(snapshot: RoleSnapshot) -> Optional[ModRole]:
	if snapshot.channel_standard_role is not None:
		return snapshot.channel_standard_role
	return snapshot.server_standard_role


def effective_elevated_role(snapshot: RoleSnapshot) -> Optional[ModRole]:
	if snapshot.channel_elevated_role is not None:
		return snapshot.channel_elevated_role
	return snapshot.server_elevated_role


def _base_value(role: Optional[ModRole], capability: str) -> bool:
	if role is None:
		return False
	return bool(role.value_of(capability))


def resolve_capabilities(snapshot: RoleSnapshot | None, viewer: Viewer | None) -> CapabilityMap:
	"""Return the capability map of ``viewer`` for the channel in ``snapshot``."""
	snapshot = snapshot or RoleSnapshot()
	viewer = viewer or Viewer()
	membership = snapshot.membership
	standard = effective_standard_role(snapshot)
	elevated = effective_elevated_role(snapshot)

	account = viewer.account
	moderation = viewer.moderation
	is_channel_owner = account is not None and account in membership.owners
	is_suspended_user = account is not None and account in membership.suspended_users
	is_moderator = moderation is not None and moderation in membership.moderators
	is_elevated_mod = is_moderator and elevated is not None
	is_suspended_mod = moderation is not None and moderation in membership.suspended_moderators

	capabilities: dict[str, bool] = {}
	for capability in CAPABILITY_FIELDS:
		value = _base_value(standard, capability)
		if is_elevated_mod and elevated is not None:
			override = elevated.value_of(capability)
			if override is not None:
				value = override
		capabilities[capability] = value

	if is_suspended_mod:
		capabilities = dict.fromkeys(CAPABILITY_FIELDS, False)

	resolved = CapabilityMap(
		**capabilities,
		is_channel_owner=is_channel_owner,
		is_elevated_mod=is_elevated_mod,
		is_suspended_mod=is_suspended_mod,
		is_suspended_user=is_suspended_user,
	)
	obs_metrics.inc_capabilities_resolved(_outcome(resolved, anonymous=viewer.is_anonymous))
	_LOG.debug(
		"capabilities_resolved",
		extra={
			"standard_role_source": _role_source(snapshot.channel_standard_role, snapshot.server_standard_role),
			"elevated_role_source": _role_source(snapshot.channel_elevated_role, snapshot.server_elevated_role),
			"is_channel_owner": is_channel_owner,
			"is_elevated_mod": is_elevated_mod,
			"is_suspended_mod": is_suspended_mod,
		},
	)
	return resolved


def _role_source(channel_role: Optional[ModRole], server_role: Optional[ModRole]) -> str:
	if channel_role is not None:
		return "channel"
	if server_role is not None:
		return "server"
	return "none"


def _outcome(capabilities: CapabilityMap, *, anonymous: bool) -> str:
	if anonymous:
		return "anonymous"
	if capabilities.is_suspended_mod:
		return "suspended_mod"
	if capabilities.is_channel_owner:
		return "owner"
	if capabilities.is_elevated_mod:
		return "elevated_mod"
	return "member"
