"""Route table and request handlers.

Every route that carries a page title validates it before the handler
runs, so handlers can use the title directly as a file name and in URLs.
"""

import re
from typing import Any, Callable, NamedTuple

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from tinywiki.core.models import TITLE_PATTERN, Page
from tinywiki.core.storage import PageNotFoundError, PageWriteError

_TITLE_RE = re.compile(TITLE_PATTERN)


def is_valid_title(title: str) -> bool:
    """Check that a title is one or more ASCII letters or digits."""
    return _TITLE_RE.fullmatch(title) is not None


def valid_title(title: str) -> str:
    """Path dependency rejecting malformed titles with a 404."""
    if not is_valid_title(title):
        raise HTTPException(status_code=404, detail="Not Found")
    return title


# ========== Handlers ==========


async def front_page(request: Request) -> Response:
    """Redirect the root path to the front page."""
    front = request.app.state.settings.front_page
    return RedirectResponse(url=f"/view/{front}", status_code=302)


async def view_page(request: Request, title: str = Depends(valid_title)) -> Response:
    """View a wiki page."""
    try:
        page = await request.app.state.storage.load_page(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)

    return request.app.state.templates.render(request, "view", page)


async def edit_page(request: Request, title: str = Depends(valid_title)) -> Response:
    """Edit page form."""
    try:
        page = await request.app.state.storage.load_page(title)
    except PageNotFoundError:
        # New page
        page = Page(title=title, body="", exists=False)
    return request.app.state.templates.render(request, "edit", page)


async def save_page(
    request: Request,
    title: str = Depends(valid_title),
    body: str = Form(""),
) -> Response:
    """Save page content."""
    try:
        await request.app.state.storage.save_page(title, body)
    except PageWriteError as e:
        return PlainTextResponse(str(e), status_code=500)
    return RedirectResponse(url=f"/view/{title}", status_code=302)


# ========== Route table ==========


class Route(NamedTuple):
    """One entry in the route table."""

    method: str
    path: str
    handler: Callable[..., Any]


ROUTES: tuple[Route, ...] = (
    Route("GET", "/", front_page),
    Route("GET", "/view/{title}", view_page),
    Route("GET", "/edit/{title}", edit_page),
    Route("POST", "/save/{title}", save_page),
)


def register_routes(app: FastAPI, routes: tuple[Route, ...] = ROUTES) -> None:
    """Mount each route of the table on the application."""
    for route in routes:
        app.add_api_route(
            route.path,
            route.handler,
            methods=[route.method],
            response_class=HTMLResponse,
        )
