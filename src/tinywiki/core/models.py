"""Data models for TinyWiki."""

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

TITLE_PATTERN = r"^[a-zA-Z0-9]+$"


class Page(BaseModel):
    """Represents a wiki page.

    Only ``body`` is ever written to storage. ``rendered`` is derived from
    it when the page is loaded and is excluded from serialization.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = Field(pattern=TITLE_PATTERN)
    body: str = ""
    rendered: Markup = Field(default_factory=Markup, exclude=True)
    exists: bool = True
