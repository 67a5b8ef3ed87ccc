"""Markdown preview CLI.

Usage:
    python cli/main.py --file README.md [-s] [-t template.html]

Renders the Markdown file to a temporary HTML page, prints its path and opens
it in the default browser.  ``-s`` skips the browser and keeps the file.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from mdpreview.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from mdpreview.errors import PreviewToolError
from mdpreview.runner import run

app = typer.Typer(
    name="mdp",
    help="Preview a Markdown file as HTML in the default browser.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@app.command()
def preview(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", help="Markdown file to preview."),
    skip_preview: bool = typer.Option(False, "-s", help="Skip auto-preview and keep the HTML file."),
    template: Optional[Path] = typer.Option(None, "-t", help="Alternate Jinja2 template file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Render a Markdown file and open it in the browser."""
    if file is None:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)

    _configure_logging(verbose)

    try:
        run(file, template, sys.stdout, skip_preview=skip_preview)
    except PreviewToolError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
