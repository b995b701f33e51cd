"""TinyWiki FastAPI application."""

import logging

import uvicorn
from fastapi import FastAPI

from tinywiki.config import Settings, settings as default_settings
from tinywiki.core.storage import FileStorage
from tinywiki.core.templates import PageTemplates
from tinywiki.routes import register_routes

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Storage, templates and settings are attached to ``app.state`` for the
    handlers. Templates are compiled here, so a missing or broken template
    stops the application before it serves anything.
    """
    settings = settings or default_settings

    # Relative directories are fixed against the working directory at startup
    data_dir = settings.data_dir.resolve()
    templates_dir = settings.templates_dir.resolve()

    templates = PageTemplates(templates_dir, app_title=settings.app_title)
    templates.preload()

    # Only exact route shapes match; "/view/Foo/" is a 404, not a redirect
    app = FastAPI(title=settings.app_title, debug=settings.debug, redirect_slashes=False)
    app.state.settings = settings
    app.state.storage = FileStorage(data_dir, escape_html=settings.escape_html)
    app.state.templates = templates
    register_routes(app)

    logger.info("Serving pages from %s", data_dir)
    return app


def run() -> None:
    """Run the wiki server."""
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(default_settings)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
