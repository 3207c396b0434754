"""Application entry point."""

import uvicorn
from fastapi import FastAPI

from portal.core.config import settings
from portal.core.logging import logger, setup_logging
from portal.ui import setup_nicegui_interface


def create_app() -> FastAPI:
    """Build the FastAPI application hosting the portal."""
    setup_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

    @app.get("/healthz", tags=["Health"])
    async def healthz() -> dict[str, str]:  # pyright: ignore[reportUnusedFunction]
        return {"status": "ok", "version": settings.VERSION}

    # Routes must exist before NiceGUI mounts itself at "/"
    setup_nicegui_interface(app)

    logger.bind(api_base_url=settings.API_BASE_URL).info(
        f"{settings.PROJECT_NAME} {settings.VERSION} ready"
    )
    return app


def run() -> None:
    """Serve the portal with uvicorn."""
    uvicorn.run(
        "portal.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
