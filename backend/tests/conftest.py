import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from channel_moderation.permissions.domain.models import CapabilityMap
from channel_moderation.settings import settings


@pytest.fixture(autouse=True)
def force_test_settings():
	"""Keep feedback defaults and logging predictable across tests."""
	original_env = settings.environment
	original_feedback = settings.feedback_enabled_default
	original_sampling = settings.obs_log_sampling_rate_info
	settings.environment = "dev"
	settings.feedback_enabled_default = True
	settings.obs_log_sampling_rate_info = 1.0
	try:
		yield
	finally:
		settings.environment = original_env
		settings.feedback_enabled_default = original_feedback
		settings.obs_log_sampling_rate_info = original_sampling


@pytest.fixture()
def base_capabilities() -> CapabilityMap:
	"""Every capability and status flag off."""
	return CapabilityMap()


@pytest.fixture()
def caps():
	"""Build a capability map from keyword overrides."""

	def _build(**flags) -> CapabilityMap:
		return CapabilityMap(**flags)

	return _build


@pytest_asyncio.fixture
async def api_client():
	from channel_moderation.main import create_app

	transport = ASGITransport(app=create_app())
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
