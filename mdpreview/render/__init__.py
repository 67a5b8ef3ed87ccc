"""Content pipeline: Markdown → sanitized HTML → templated page.

Public API::

    from mdpreview.render import parse_content
    html = parse_content(b"# Hello", template_path=None)
"""

from __future__ import annotations

from pathlib import Path

from markupsafe import Markup

from mdpreview.render.converter import markdown_to_html
from mdpreview.render.models import PAGE_TITLE, Page
from mdpreview.render.sanitizer import sanitize_html
from mdpreview.render.templates import DEFAULT_TEMPLATE, load_template, render_page


def parse_content(source: bytes, template_path: str | Path | None = None) -> bytes:
    """Turn Markdown *source* into a complete, safe HTML page.

    The body is sanitized before it ever reaches the template, so nothing a
    template does with ``body`` can reintroduce unsafe markup.
    """
    body = sanitize_html(markdown_to_html(source))
    template = load_template(template_path)
    return render_page(template, Page(body=Markup(body)))


__all__ = [
    "parse_content",
    "markdown_to_html",
    "sanitize_html",
    "load_template",
    "render_page",
    "Page",
    "PAGE_TITLE",
    "DEFAULT_TEMPLATE",
]
