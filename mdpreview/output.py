"""Temporary HTML artifact handling."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from mdpreview.config import settings
from mdpreview.errors import OutputError

logger = logging.getLogger(__name__)


def save_html(data: bytes) -> Path:
    """Write *data* to a new, uniquely named ``.html`` file and return its path.

    The file lands in ``settings.temp_dir`` when set, otherwise in the
    system temp directory.

    Raises:
        OutputError: If the file cannot be created or written.  A partially
            written file is removed before raising.
    """
    try:
        fd, name = tempfile.mkstemp(
            prefix=settings.temp_prefix,
            suffix=".html",
            dir=settings.temp_dir,
        )
    except OSError as exc:
        raise OutputError(f"cannot create temporary file: {exc}") from exc

    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        path.chmod(0o644)
    except OSError as exc:
        path.unlink(missing_ok=True)
        raise OutputError(f"cannot write {path}: {exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


@contextmanager
def temp_artifact(data: bytes, keep: bool = False) -> Iterator[Path]:
    """Context manager around :func:`save_html`.

    The file is removed when the block exits, on error as well as on
    success, unless *keep* is true.
    """
    path = save_html(data)
    try:
        yield path
    finally:
        if keep:
            logger.debug("Keeping %s", path)
        else:
            path.unlink(missing_ok=True)
            logger.debug("Removed %s", path)
