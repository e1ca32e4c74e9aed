"""Central registry for Prometheus metrics used by the permissions engine."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
	"chanmod_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"chanmod_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

CAPABILITIES_RESOLVED = Counter(
	"chanmod_capabilities_resolved_total",
	"Capability maps resolved for a viewer in a channel",
	["outcome"],
)

MENUS_BUILT = Counter(
	"chanmod_action_menus_built_total",
	"Action menus built per content type",
	["content_type", "moderation_section"],
)

CAPABILITY_INVARIANT_VIOLATIONS = Counter(
	"chanmod_capability_invariant_violations_total",
	"Capability maps reaching the menu builder with grants despite moderator suspension",
	["content_type"],
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def inc_capabilities_resolved(outcome: str) -> None:
	CAPABILITIES_RESOLVED.labels(outcome=outcome).inc()


def inc_menu_built(content_type: str, *, moderation_section: bool) -> None:
	MENUS_BUILT.labels(
		content_type=content_type,
		moderation_section="yes" if moderation_section else "no",
	).inc()


def inc_capability_invariant_violation(content_type: str) -> None:
	CAPABILITY_INVARIANT_VIOLATIONS.labels(content_type=content_type).inc()
