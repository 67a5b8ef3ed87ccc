"""Page templates: the built-in skeleton and user-supplied Jinja2 files."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError, meta

from mdpreview.errors import RenderError, TemplateInvalidError
from mdpreview.render.models import Page

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """\
<!DOCTYPE html>
<html>
  <head>
    <meta http-equiv="content-type" content="text/html; charset=utf-8">
    <title>{{ title }}</title>
  </head>
  <body>
{{ body }}
  </body>
</html>
"""

# Name a template must reference to be usable as a page shell.
BODY_SLOT = "body"


def _environment() -> Environment:
    return Environment(
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def load_template(template_path: str | Path | None = None) -> Template:
    """Return the page template to render with.

    Without *template_path* the built-in :data:`DEFAULT_TEMPLATE` is used.

    Raises:
        TemplateInvalidError: If the alternate file cannot be read, is not a
            valid Jinja2 template, or never references ``{{ body }}``.
    """
    env = _environment()
    if template_path is None:
        return env.from_string(DEFAULT_TEMPLATE)

    path = Path(template_path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateInvalidError(f"cannot read template {path}: {exc}") from exc

    try:
        ast = env.parse(source, name=path.name, filename=str(path))
    except TemplateSyntaxError as exc:
        raise TemplateInvalidError(f"template {path} is invalid: {exc}") from exc

    if BODY_SLOT not in meta.find_undeclared_variables(ast):
        raise TemplateInvalidError(f"template {path} has no '{{{{ {BODY_SLOT} }}}}' substitution point")

    logger.debug("Using alternate template %s", path)
    return env.from_string(ast)


def render_page(template: Template, page: Page) -> bytes:
    """Execute *template* against *page* and return the UTF-8 encoded result.

    Raises:
        RenderError: If the template references a name the page does not
            provide, or fails while executing.
    """
    try:
        html = template.render(title=page.title, body=page.body)
    except Exception as exc:
        # Template code can fail with any error (filters, arithmetic, a
        # missing loader for include), not only jinja2.TemplateError.
        raise RenderError(f"cannot render template: {exc}") from exc
    return html.encode("utf-8")
