"""Markdown → HTML conversion."""

from __future__ import annotations

import logging

import markdown

from mdpreview.errors import MarkdownError

logger = logging.getLogger(__name__)

# "extra" bundles tables, fenced code, footnotes, attribute lists,
# definition lists and abbreviations.
_EXTENSIONS = ["extra", "sane_lists"]


def markdown_to_html(source: bytes) -> str:
    """Convert a Markdown document to an (unsanitized) HTML fragment.

    A leading UTF-8 byte-order mark is dropped before parsing.

    Raises:
        MarkdownError: If *source* is not valid UTF-8.
    """
    try:
        text = source.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MarkdownError(f"source is not valid UTF-8: {exc}") from exc

    # A fresh instance per call keeps footnote and reference state from
    # leaking between documents.
    md = markdown.Markdown(extensions=_EXTENSIONS, output_format="html")
    html = md.convert(text)
    logger.debug("Converted %d characters of Markdown to %d characters of HTML", len(text), len(html))
    return html
