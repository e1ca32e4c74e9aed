"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI

from channel_moderation import obs
from channel_moderation.errors import install_error_handlers
from channel_moderation.permissions.api import router as permissions_router
from channel_moderation.settings import settings


def create_app() -> FastAPI:
	app = FastAPI(
		title="Channel moderation permissions",
		docs_url="/docs" if not settings.is_prod() else None,
	)
	app.include_router(permissions_router)
	install_error_handlers(app)
	obs.init(app)

	@app.get("/health/live", tags=["ops"])
	async def live() -> dict[str, str]:
		return {"status": "ok"}

	return app


app = create_app()
