"""HTML templates for the view and edit pages."""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from tinywiki.core.models import Page

logger = logging.getLogger(__name__)

# Template name -> file in the templates directory
TEMPLATE_FILES = {
    "view": "view.html",
    "edit": "edit.html",
}


class TemplateLoadError(Exception):
    """A template could not be found or compiled at startup."""


class PageTemplates:
    """Renders pages through the fixed set of named templates."""

    def __init__(self, directory: Path, app_title: str = "TinyWiki"):
        self.directory = directory
        self.templates = Jinja2Templates(directory=str(directory))
        self.templates.env.globals["app_title"] = app_title

    def preload(self) -> None:
        """Compile every template up front.

        Raises:
            TemplateLoadError: If a template is missing or malformed.
        """
        for filename in TEMPLATE_FILES.values():
            try:
                self.templates.get_template(filename)
            except TemplateError as e:
                raise TemplateLoadError(
                    f"cannot load template {filename!r} from {self.directory}: {e}"
                ) from e
        logger.info("Loaded templates from %s", self.directory)

    def render(self, request: Request, name: str, page: Page) -> Response:
        """Render a page through the named template.

        Rendering failures become a 500 response carrying the error text.
        """
        try:
            return self.templates.TemplateResponse(
                request,
                TEMPLATE_FILES[name],
                {"page": page},
            )
        except TemplateError as e:
            logger.exception("Failed to render %s template for %s", name, page.title)
            return PlainTextResponse(str(e), status_code=500)
