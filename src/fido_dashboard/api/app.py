"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from fido_dashboard.api.admin import router as admin_router
from fido_dashboard.api.auth import router as auth_router
from fido_dashboard.api.feedings import router as feedings_router
from fido_dashboard.api.stats import router as stats_router
from fido_dashboard.api.ui import router as ui_router
from fido_dashboard.app_logging import configure_logging
from fido_dashboard.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="FIDO Dashboard")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(stats_router)
    app.include_router(feedings_router)
    app.include_router(admin_router)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Dashboard app created",
        extra={"environment": container.settings.environment},
    )
    return app
