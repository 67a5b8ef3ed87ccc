"""HTML sanitization for Markdown output.

Markdown passes raw inline HTML straight through, so the converter's output
is treated as untrusted user-generated content.  The policy keeps ordinary
formatting markup and drops anything that can execute script.
"""

from __future__ import annotations

import re

import bleach
from bs4 import BeautifulSoup

# Elements removed together with everything inside them.  bleach on its own
# strips the tags but keeps their text, which would leave script source
# visible in the page.
_DROP_WITH_CONTENT = [
    "script", "style", "iframe", "frame", "frameset", "object", "embed",
    "noscript", "noembed", "noframes", "template", "title",
]

ALLOWED_TAGS = frozenset({
    "a", "abbr", "acronym", "b", "bdi", "bdo", "blockquote", "br",
    "caption", "cite", "code", "col", "colgroup",
    "dd", "del", "details", "dfn", "div", "dl", "dt",
    "em", "figcaption", "figure",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr",
    "i", "img", "ins", "kbd", "li", "mark", "ol", "p", "pre", "q",
    "rp", "rt", "ruby", "s", "samp", "small", "span", "strike", "strong",
    "sub", "summary", "sup",
    "table", "tbody", "td", "tfoot", "th", "thead", "time", "tr", "tt",
    "u", "ul", "var", "wbr",
})

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_LANGUAGE_CLASS = re.compile(r"^language-[\w+#.-]+$")

_STANDARD_ATTRIBUTES = {"dir", "id", "lang", "title"}

_TAG_ATTRIBUTES = {
    "a": {"href", "hreflang", "name", "rel"},
    "blockquote": {"cite"},
    "col": {"span", "align", "valign"},
    "colgroup": {"span", "align", "valign"},
    "del": {"cite", "datetime"},
    "details": {"open"},
    "img": {"src", "alt", "width", "height", "align"},
    "ins": {"cite", "datetime"},
    "li": {"value"},
    "ol": {"start", "reversed", "type"},
    "q": {"cite"},
    "table": {"summary", "align"},
    "td": {"colspan", "rowspan", "align", "valign", "abbr", "headers"},
    "th": {"colspan", "rowspan", "align", "valign", "abbr", "headers", "scope"},
    "time": {"datetime"},
    "ul": {"type"},
}


def _allow_attribute(tag: str, name: str, value: str) -> bool:
    """bleach attribute filter: standard attributes everywhere, plus per-tag ones."""
    if name in _STANDARD_ATTRIBUTES:
        return True
    if tag == "code" and name == "class":
        return bool(_LANGUAGE_CLASS.match(value))
    return name in _TAG_ATTRIBUTES.get(tag, ())


def _prepare(html: str) -> str:
    """Drop script-bearing elements and mark links before the allow-list pass."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_DROP_WITH_CONTENT):
        tag.decompose()
    for link in soup.find_all("a", href=True):
        link["rel"] = "nofollow"
    return str(soup)


def sanitize_html(html: str) -> str:
    """Return *html* reduced to the allow-listed tags, attributes and protocols.

    Disallowed tags are stripped (their text content is kept), inline event
    handlers and ``javascript:`` URLs are removed, and every link is marked
    ``rel="nofollow"``.
    """
    return bleach.clean(
        _prepare(html),
        tags=ALLOWED_TAGS,
        attributes=_allow_attribute,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
