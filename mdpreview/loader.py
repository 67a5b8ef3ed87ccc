"""Source loading: reads a Markdown file fully into memory."""

from __future__ import annotations

import logging
from pathlib import Path

from mdpreview.errors import SourceReadError

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> bytes:
    """Return the full byte contents of *path*.

    Markdown needs the whole document (reference links can be defined after
    their use), so there is no streaming variant.

    Raises:
        SourceReadError: If the file is missing, is a directory, or cannot be
            read.
    """
    source_path = Path(path)
    try:
        data = source_path.read_bytes()
    except OSError as exc:
        raise SourceReadError(f"cannot read {source_path}: {exc.strerror or exc}") from exc

    logger.debug("Read %d bytes from %s", len(data), source_path)
    return data
