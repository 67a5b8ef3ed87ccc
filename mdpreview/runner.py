"""High-level runner for a single preview.

``run`` wires together the loader, the content pipeline, the temp-file writer
and the previewer so the CLI (and tests) have one call to make.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from mdpreview.loader import read_source
from mdpreview.output import temp_artifact
from mdpreview.preview import preview
from mdpreview.render import parse_content

logger = logging.getLogger(__name__)


def run(
    filename: str | Path,
    template_path: str | Path | None,
    out: TextIO,
    skip_preview: bool = False,
) -> Path:
    """Render *filename* to a temporary HTML file and open it.

    The artifact path is written to *out* as a single line before the
    previewer starts.  With *skip_preview* the browser is not launched and the
    file is left on disk; otherwise it is deleted once the previewer returns,
    whether or not the launch succeeded.

    Args:
        filename: Markdown source file.
        template_path: Optional alternate Jinja2 template.  It is loaded
            before the temp file is created, so a bad template leaves nothing
            behind.
        out: Stream that receives the artifact path.
        skip_preview: Skip the previewer and keep the file.

    Returns:
        Path of the generated HTML file (already deleted unless
        *skip_preview* was set).
    """
    source = read_source(filename)
    html = parse_content(source, template_path)

    with temp_artifact(html, keep=skip_preview) as path:
        out.write(f"{path}\n")
        if skip_preview:
            logger.debug("Preview skipped")
        else:
            preview(path)

    return path
