"""Data models for the content pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup

PAGE_TITLE = "Markdown Preview Tool"


@dataclass(frozen=True)
class Page:
    """The record a page template is executed against.

    ``body`` is already sanitized; wrapping it in :class:`~markupsafe.Markup`
    tells the autoescaping template environment to embed it verbatim.
    """

    body: Markup
    title: str = PAGE_TITLE
