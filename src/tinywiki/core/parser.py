"""Link notation renderer.

Page bodies may reference other pages as ``[PageName]``. Rendering turns
each reference into an anchor pointing at the page's view route and leaves
everything else as it was written.
"""

import re

from markupsafe import Markup, escape

# Pattern for wiki links: [PageName]
WIKI_LINK_PATTERN = re.compile(r"\[([a-zA-Z0-9]+)\]")


def _link(page_name: str) -> str:
    return f'<a href="/view/{page_name}">{page_name}</a>'


def render_links(body: str, escape_html: bool = True) -> Markup:
    """Render link notation in a page body to HTML.

    Args:
        body: Raw page content.
        escape_html: Escape the text between links. When false the body is
            passed through untouched apart from the link markup.

    Returns:
        HTML safe for direct insertion into a template.
    """
    if not escape_html:
        return Markup(WIKI_LINK_PATTERN.sub(lambda m: _link(m.group(1)), body))

    parts: list[str] = []
    pos = 0
    for m in WIKI_LINK_PATTERN.finditer(body):
        parts.append(escape(body[pos : m.start()]))
        parts.append(_link(m.group(1)))
        pos = m.end()
    parts.append(escape(body[pos:]))
    return Markup("".join(parts))
