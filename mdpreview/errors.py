"""Exception hierarchy for the preview pipeline.

Every failure the pipeline can hit is terminal for the run; the CLI catches
:class:`PreviewToolError`, prints it and exits with status 1.
"""

from __future__ import annotations


class PreviewToolError(Exception):
    """Base class for all errors raised by :mod:`mdpreview`."""


class SourceReadError(PreviewToolError):
    """The Markdown source could not be found or read."""


class MarkdownError(PreviewToolError):
    """The Markdown source could not be converted to HTML."""


class TemplateInvalidError(PreviewToolError):
    """An alternate template could not be read or parsed, or lacks a body slot."""


class RenderError(PreviewToolError):
    """Template execution failed to bind its substitution points."""


class OutputError(PreviewToolError):
    """The temporary HTML file could not be created or written."""


class UnsupportedPlatformError(PreviewToolError):
    """No default-application launcher is known for the host OS."""


class PreviewerError(PreviewToolError):
    """The launcher could not be started or exited with an error."""


class PreviewerNotFoundError(PreviewerError):
    """The launcher executable is not on ``PATH``."""
