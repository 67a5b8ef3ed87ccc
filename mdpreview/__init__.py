"""Markdown previewer package.

Public API::

    from mdpreview import run
    path = run("README.md", None, sys.stdout, skip_preview=True)
"""

from mdpreview.runner import run

__all__ = ["run"]
