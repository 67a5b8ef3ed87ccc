"""Tests for the default-application previewer.

Mocking strategy:
- ``platform.system`` is patched to pick a launcher row.
- ``shutil.which`` is patched so no real launcher needs to be installed.
- ``subprocess.run`` is patched so no browser is ever opened.
- ``time.sleep`` is patched to avoid the real grace period.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from mdpreview.errors import PreviewerError, PreviewerNotFoundError, UnsupportedPlatformError
from mdpreview.preview import launcher_command, preview


@pytest.fixture
def fake_which(monkeypatch):
    monkeypatch.setattr("mdpreview.preview.shutil.which", lambda name: f"/usr/bin/{name}")


@pytest.fixture
def sleeps(monkeypatch):
    calls: list[float] = []
    monkeypatch.setattr("mdpreview.preview.time.sleep", calls.append)
    return calls


# ---------------------------------------------------------------------------
# launcher_command
# ---------------------------------------------------------------------------

class TestLauncherCommand:
    def test_linux(self, fake_which) -> None:
        assert launcher_command(Path("/tmp/a.html"), "Linux") == ["/usr/bin/xdg-open", "/tmp/a.html"]

    def test_darwin(self, fake_which) -> None:
        assert launcher_command(Path("/tmp/a.html"), "Darwin") == ["/usr/bin/open", "/tmp/a.html"]

    def test_windows(self, fake_which) -> None:
        cmd = launcher_command(Path("C:/tmp/a.html"), "Windows")
        assert cmd[:4] == ["/usr/bin/cmd.exe", "/C", "start", ""]
        assert cmd[-1].endswith("a.html")

    def test_unsupported(self, fake_which) -> None:
        with pytest.raises(UnsupportedPlatformError, match="unsupported platform"):
            launcher_command(Path("/tmp/a.html"), "Plan9")

    def test_host_platform_used_by_default(self, fake_which, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Darwin")
        assert launcher_command(Path("/tmp/a.html"))[0] == "/usr/bin/open"

    def test_executable_not_found(self, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.shutil.which", lambda name: None)
        with pytest.raises(PreviewerNotFoundError, match="xdg-open"):
            launcher_command(Path("/tmp/a.html"), "Linux")


# ---------------------------------------------------------------------------
# preview
# ---------------------------------------------------------------------------

class TestPreview:
    def test_runs_launcher_then_waits(self, fake_which, sleeps, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Linux")
        calls = []
        monkeypatch.setattr(
            "mdpreview.preview.subprocess.run",
            lambda cmd, check: calls.append(cmd) or subprocess.CompletedProcess(cmd, 0),
        )

        preview(Path("/tmp/a.html"), delay=0.5)

        assert calls == [["/usr/bin/xdg-open", "/tmp/a.html"]]
        assert sleeps == [0.5]

    def test_default_delay_from_settings(self, fake_which, sleeps, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Linux")
        monkeypatch.setattr("mdpreview.preview.settings.preview_delay", 2.0)
        monkeypatch.setattr(
            "mdpreview.preview.subprocess.run",
            lambda cmd, check: subprocess.CompletedProcess(cmd, 0),
        )

        preview(Path("/tmp/a.html"))

        assert sleeps == [2.0]

    def test_non_zero_exit_raises(self, fake_which, sleeps, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Linux")

        def fail(cmd, check):
            raise subprocess.CalledProcessError(3, cmd)

        monkeypatch.setattr("mdpreview.preview.subprocess.run", fail)

        with pytest.raises(PreviewerError, match="status 3"):
            preview(Path("/tmp/a.html"), delay=0)
        assert sleeps == [0]

    def test_launch_os_error_raises(self, fake_which, sleeps, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Linux")

        def boom(cmd, check):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr("mdpreview.preview.subprocess.run", boom)

        with pytest.raises(PreviewerError):
            preview(Path("/tmp/a.html"), delay=0)

    def test_unsupported_platform_does_not_wait(self, sleeps, monkeypatch) -> None:
        monkeypatch.setattr("mdpreview.preview.platform.system", lambda: "Haiku")
        with pytest.raises(UnsupportedPlatformError):
            preview(Path("/tmp/a.html"))
        assert sleeps == []
