"""Open a file with the host's default application."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
import time
from pathlib import Path

from mdpreview.config import settings
from mdpreview.errors import PreviewerError, PreviewerNotFoundError, UnsupportedPlatformError

logger = logging.getLogger(__name__)

# platform.system().lower() → (executable, arguments placed before the path)
LAUNCHERS: dict[str, tuple[str, tuple[str, ...]]] = {
    "linux": ("xdg-open", ()),
    # The empty string is start's window title; without it a quoted path
    # would be taken as the title.
    "windows": ("cmd.exe", ("/C", "start", "")),
    "darwin": ("open", ()),
}


def launcher_command(path: Path, system: str | None = None) -> list[str]:
    """Build the argv that opens *path* on *system* (defaults to the host OS).

    Raises:
        UnsupportedPlatformError: If *system* has no entry in :data:`LAUNCHERS`.
        PreviewerNotFoundError: If the launcher executable is not on ``PATH``.
    """
    system = (system or platform.system()).lower()
    try:
        executable, args = LAUNCHERS[system]
    except KeyError:
        raise UnsupportedPlatformError(f"unsupported platform: {system or 'unknown'}") from None

    resolved = shutil.which(executable)
    if resolved is None:
        raise PreviewerNotFoundError(f"{executable}: executable file not found in PATH")

    return [resolved, *args, str(path)]


def preview(path: Path, delay: float | None = None) -> None:
    """Open *path* with the default application, then wait *delay* seconds.

    The wait gives the viewer time to load the file before the caller
    deletes it.  *delay* defaults to ``settings.preview_delay``.

    Raises:
        UnsupportedPlatformError, PreviewerNotFoundError: See
            :func:`launcher_command`.
        PreviewerError: If the launcher cannot be started or exits non-zero.
    """
    cmd = launcher_command(path)
    logger.debug("Launching %s", cmd)

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as exc:
        raise PreviewerError(f"{cmd[0]} exited with status {exc.returncode}") from exc
    except OSError as exc:
        raise PreviewerError(f"cannot launch {cmd[0]}: {exc}") from exc
    finally:
        time.sleep(settings.preview_delay if delay is None else delay)
